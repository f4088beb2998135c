"""Fold a lark parse tree into `pysmarts.nodes` values."""

from lark import Transformer, v_args

from pysmarts.chirality import ChiralityClass
from pysmarts.exceptions import InvalidChiralitySyntax
from pysmarts.nodes import (
    AnyAliphatic,
    AnyAromatic,
    AnyAtom,
    AnyBond,
    Aromatic,
    Atom,
    AtomClass,
    AtomicMass,
    AtomicNumber,
    AttachedHydrogens,
    ChiralityClassSpec,
    ClockwiseCh,
    Component,
    Compound,
    Connectivity,
    CounterClockwise,
    Degree,
    Description,
    Double,
    Down,
    Explicit,
    ExplicitAnd,
    Expression,
    ImplicitAnd,
    ImplicitHydrogens,
    Linear,
    Negation,
    NegativeCharge,
    OrClause,
    Pattern,
    PositiveCharge,
    Presence,
    Primitive,
    Recursive,
    Ring,
    RingConnectivity,
    RingMembership,
    RingSize,
    Single,
    Triple,
    Up,
    Valence,
    default_bond_expression,
)


def _negation(token):
    return Negation.PASS if token is None else Negation.NEGATE


def _presence(token):
    return Presence.PRESENT if token is None else Presence.UNSPECIFIED


def _ring_closure(token):
    # "%05" and "5" both label ring 5
    return int(str(token).lstrip("%"))


def _tier(node_type):
    def callback(self, *children):
        return node_type(children)

    return callback


def _bond(node_type):
    def callback(self, negation, *_):
        return node_type(_negation(negation))

    return callback


def _directional_bond(node_type):
    def callback(self, negation, presence):
        return node_type(_negation(negation), _presence(presence))

    return callback


def _numeric(node_type):
    def callback(self, negation, value):
        if value is None:
            value = node_type.default
        return node_type(_negation(negation), int(value))

    return callback


@v_args(inline=True)
class SMARTSTransformer(Transformer):
    """Build the AST bottom-up from the tree produced by `SMARTS`.

    Parameters
    ----------
    smarts : str
        The string the tree was parsed from, used in error messages.
    """

    def __init__(self, smarts=None):
        super().__init__()
        self._smarts = smarts

    # Structure

    def start(self, pattern):
        return pattern

    def pattern(self, *branches):
        return Pattern(branches)

    def compound_branch(self, component, *branches):
        return Compound(component, branches)

    def linear_branch(self, component):
        return Linear(component)

    def component(self, *links):
        return Component(links)

    def link(self, bond_expression, specific_atom):
        if bond_expression is None:
            bond_expression = default_bond_expression()
        return (bond_expression, specific_atom)

    def primitive(self, atom, *ring_closures):
        return Primitive(atom, tuple(_ring_closure(t) for t in ring_closures))

    def description(self, expression, *ring_closures):
        return Description(
            expression, tuple(_ring_closure(t) for t in ring_closures)
        )

    # Expression tiers, shared by bonds and atom specifications

    bond_expression = atom_expression = _tier(Expression)
    bond_or = atom_or = _tier(OrClause)
    bond_and = atom_and = _tier(ExplicitAnd)
    bond_implicit = atom_implicit = _tier(ImplicitAnd)

    # Bonds

    single_bond = _bond(Single)
    double_bond = _bond(Double)
    triple_bond = _bond(Triple)
    aromatic_bond = _bond(Aromatic)
    ring_bond = _bond(Ring)
    any_bond = _bond(AnyBond)
    up_bond = _directional_bond(Up)
    down_bond = _directional_bond(Down)

    # Atom specifications

    degree = _numeric(Degree)
    attached_hydrogens = _numeric(AttachedHydrogens)
    implicit_hydrogens = _numeric(ImplicitHydrogens)
    ring_membership = _numeric(RingMembership)
    ring_size = _numeric(RingSize)
    valence = _numeric(Valence)
    connectivity = _numeric(Connectivity)
    ring_connectivity = _numeric(RingConnectivity)
    negative_charge = _numeric(NegativeCharge)
    positive_charge = _numeric(PositiveCharge)
    atomic_number = _numeric(AtomicNumber)
    atomic_mass = _numeric(AtomicMass)

    def explicit(self, negation, atom):
        return Explicit(_negation(negation), atom)

    def chirality(self, negation, at, clockwise, code, presence):
        negation = _negation(negation)
        if clockwise is None and code is None:
            return CounterClockwise(negation, _presence(presence))
        if code is None:
            if presence is None:
                return ClockwiseCh(negation)
            raise InvalidChiralitySyntax(
                "'?' cannot follow '@@'", self._smarts, presence.start_pos
            )
        if clockwise is None:
            return ChiralityClassSpec(
                negation, ChiralityClass(str(code)), _presence(presence)
            )
        raise InvalidChiralitySyntax(
            "'@@' cannot be combined with chirality class {}".format(code),
            self._smarts,
            at.start_pos,
        )

    def recursive(self, negation, pattern):
        return Recursive(_negation(negation), pattern)

    def atom_class(self, value):
        return AtomClass(int(value))

    # Primitive atoms

    def element(self, symbol):
        return Atom(str(symbol))

    organic = element

    def any_atom(self):
        return AnyAtom()

    def any_aliphatic(self):
        return AnyAliphatic()

    def any_aromatic(self):
        return AnyAromatic()
