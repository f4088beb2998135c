"""Abstract syntax tree of a parsed SMARTS pattern.

Every node is an immutable value: two trees parsed from the same string
compare equal. Sequences are stored as tuples.

The tree has four layers::

    Pattern -> Linear / Compound branches -> Component
    Component -> (BondExpression, SpecificAtom) pairs
    Expression -> OrClause -> ExplicitAnd -> ImplicitAnd -> leaf
    leaf -> Bond or Specification

Bond and atom expressions share the same four expression tiers; only the
leaf type differs.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple

from pysmarts.chirality import ChiralityClass


class Negation(Enum):
    """Whether a leaf is negated with a leading ``!``."""

    PASS = "pass"
    NEGATE = "negate"


class Presence(Enum):
    """Whether a stereo property must be observed (``?`` makes it optional)."""

    PRESENT = "present"
    UNSPECIFIED = "unspecified"


# Expression tiers


@dataclass(frozen=True)
class _Tier:
    items: tuple

    def __post_init__(self):
        if not self.items:
            raise ValueError(
                "{} needs at least one element".format(type(self).__name__)
            )

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)


@dataclass(frozen=True)
class ImplicitAnd(_Tier):
    """Leaves written side by side, the tightest-binding AND."""


@dataclass(frozen=True)
class ExplicitAnd(_Tier):
    """`ImplicitAnd` terms joined by ``&``."""


@dataclass(frozen=True)
class OrClause(_Tier):
    """`ExplicitAnd` terms joined by ``,``."""


@dataclass(frozen=True)
class Expression(_Tier):
    """`OrClause` terms joined by ``;``, the loosest-binding AND."""


def singleton_expression(leaf):
    """Wrap a single leaf in all four expression tiers."""
    return Expression((OrClause((ExplicitAnd((ImplicitAnd((leaf,)),)),)),))


# Bonds


@dataclass(frozen=True)
class Bond:
    negation: Negation
    symbol: ClassVar[str] = ""


@dataclass(frozen=True)
class Single(Bond):
    symbol: ClassVar[str] = "-"


@dataclass(frozen=True)
class Double(Bond):
    symbol: ClassVar[str] = "="


@dataclass(frozen=True)
class Triple(Bond):
    symbol: ClassVar[str] = "#"


@dataclass(frozen=True)
class Aromatic(Bond):
    symbol: ClassVar[str] = ":"


@dataclass(frozen=True)
class Ring(Bond):
    symbol: ClassVar[str] = "@"


@dataclass(frozen=True)
class AnyBond(Bond):
    symbol: ClassVar[str] = "~"


@dataclass(frozen=True)
class DirectionalBond(Bond):
    presence: Presence = Presence.PRESENT


@dataclass(frozen=True)
class Up(DirectionalBond):
    symbol: ClassVar[str] = "/"


@dataclass(frozen=True)
class Down(DirectionalBond):
    symbol: ClassVar[str] = "\\"


def default_bond_expression():
    """Return the bond expression used when no bond is written."""
    return singleton_expression(Single(Negation.PASS))


# Primitive atoms


@dataclass(frozen=True)
class PrimitiveAtom:
    """Base class of the atoms allowed without brackets."""


@dataclass(frozen=True)
class AnyAtom(PrimitiveAtom):
    symbol: ClassVar[str] = "*"


@dataclass(frozen=True)
class AnyAliphatic(PrimitiveAtom):
    symbol: ClassVar[str] = "A"


@dataclass(frozen=True)
class AnyAromatic(PrimitiveAtom):
    symbol: ClassVar[str] = "a"


@dataclass(frozen=True)
class Atom(PrimitiveAtom):
    symbol: str


# Atom specifications


@dataclass(frozen=True)
class Specification:
    """Base class of every leaf allowed inside ``[...]``."""


@dataclass(frozen=True)
class Explicit(Specification):
    negation: Negation
    atom: PrimitiveAtom


@dataclass(frozen=True)
class NumericSpecification(Specification):
    """A property code followed by an optional integer.

    `default` is used when the integer is left out; `None` means the
    integer is required.
    """

    negation: Negation
    value: int
    symbol: ClassVar[str] = ""
    default: ClassVar[Optional[int]] = None


@dataclass(frozen=True)
class Degree(NumericSpecification):
    symbol: ClassVar[str] = "D"
    default: ClassVar[Optional[int]] = 1


@dataclass(frozen=True)
class AttachedHydrogens(NumericSpecification):
    symbol: ClassVar[str] = "H"
    default: ClassVar[Optional[int]] = 1


@dataclass(frozen=True)
class ImplicitHydrogens(NumericSpecification):
    symbol: ClassVar[str] = "h"
    default: ClassVar[Optional[int]] = 1


@dataclass(frozen=True)
class RingMembership(NumericSpecification):
    """``R``; the default of -1 means "in any number of rings but zero"."""

    symbol: ClassVar[str] = "R"
    default: ClassVar[Optional[int]] = -1


@dataclass(frozen=True)
class RingSize(NumericSpecification):
    symbol: ClassVar[str] = "r"
    default: ClassVar[Optional[int]] = -1


@dataclass(frozen=True)
class Valence(NumericSpecification):
    symbol: ClassVar[str] = "v"
    default: ClassVar[Optional[int]] = 1


@dataclass(frozen=True)
class Connectivity(NumericSpecification):
    symbol: ClassVar[str] = "X"
    default: ClassVar[Optional[int]] = 1


@dataclass(frozen=True)
class RingConnectivity(NumericSpecification):
    symbol: ClassVar[str] = "x"
    default: ClassVar[Optional[int]] = -1


@dataclass(frozen=True)
class NegativeCharge(NumericSpecification):
    symbol: ClassVar[str] = "-"
    default: ClassVar[Optional[int]] = 1


@dataclass(frozen=True)
class PositiveCharge(NumericSpecification):
    symbol: ClassVar[str] = "+"
    default: ClassVar[Optional[int]] = 1


@dataclass(frozen=True)
class AtomicNumber(NumericSpecification):
    symbol: ClassVar[str] = "#"


@dataclass(frozen=True)
class AtomicMass(NumericSpecification):
    pass


@dataclass(frozen=True)
class CounterClockwise(Specification):
    negation: Negation
    presence: Presence


@dataclass(frozen=True)
class ClockwiseCh(Specification):
    negation: Negation


@dataclass(frozen=True)
class ChiralityClassSpec(Specification):
    negation: Negation
    code: ChiralityClass
    presence: Presence


@dataclass(frozen=True)
class Recursive(Specification):
    negation: Negation
    pattern: "Pattern"


@dataclass(frozen=True)
class AtomClass(Specification):
    """Atom-map label ``:n``. It cannot be negated."""

    value: int


# Atoms with ring closures


@dataclass(frozen=True)
class SpecificAtom:
    """An atom followed by its ring-closure labels."""


@dataclass(frozen=True)
class Primitive(SpecificAtom):
    atom: PrimitiveAtom
    ring_closures: Tuple[int, ...] = ()


@dataclass(frozen=True)
class Description(SpecificAtom):
    expression: Expression
    ring_closures: Tuple[int, ...] = ()


# Structure


@dataclass(frozen=True)
class Component:
    """A chain of ``(bond_expression, specific_atom)`` pairs.

    The first bond expression of a component bonds it to the atom it hangs
    off; at the start of a pattern it is unused but still present.
    """

    pairs: Tuple[Tuple[Expression, SpecificAtom], ...]

    def __post_init__(self):
        if not self.pairs:
            raise ValueError("Component needs at least one atom")

    @property
    def atoms(self):
        return tuple(atom for _, atom in self.pairs)


@dataclass(frozen=True)
class Branch:
    component: Component


@dataclass(frozen=True)
class Linear(Branch):
    pass


@dataclass(frozen=True)
class Compound(Branch):
    """A parenthesized side chain: an anchor component and its branches."""

    branches: Tuple[Branch, ...] = ()


@dataclass(frozen=True)
class Pattern:
    branches: Tuple[Branch, ...] = ()
