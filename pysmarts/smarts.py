import functools

import lark
from lark.exceptions import (
    UnexpectedCharacters,
    UnexpectedEOF,
    UnexpectedToken,
    VisitError,
)

from pysmarts.chirality import longest_first
from pysmarts.elements import ELEMENTS, ORGANIC_SUBSET, symbol_regex
from pysmarts.exceptions import (
    MalformedRingClosure,
    SMARTSError,
    UnexpectedCharacter,
    UnexpectedEndOfInput,
    UnknownSymbol,
)
from pysmarts.transformer import SMARTSTransformer

# Four precedence tiers, tightest first: juxtaposition, "&", ",", ";".
# Instantiated once for bonds and once for atom specifications.
EXPRESSION_GRAMMAR = r"""
    {prefix}_expression: {prefix}_or (";" {prefix}_or)*
    {prefix}_or: {prefix}_and ("," {prefix}_and)*
    {prefix}_and: {prefix}_implicit ("&" {prefix}_implicit)*
    {prefix}_implicit: {leaf}+
"""

GRAMMAR = r"""
    start: pattern

    // Structure
    pattern: _branch*
    _branch: compound_branch | linear_branch
    compound_branch: "(" component _branch* ")"
    linear_branch: component
    component: link+
    link: [bond_expression] _specific_atom
    _specific_atom: primitive | description
    primitive: _primitive_atom RING_CLOSURE*
    description: "[" atom_expression "]" RING_CLOSURE*

    // Bonds
{bond_expression}
    _bond: single_bond | double_bond | triple_bond | aromatic_bond
         | up_bond | down_bond | ring_bond | any_bond
    single_bond: [NOT] "-"
    double_bond: [NOT] "="
    triple_bond: [NOT] "#"
    aromatic_bond: [NOT] ":"
    up_bond: [NOT] "/" [QUESTION]
    down_bond: [NOT] "\\" [QUESTION]
    ring_bond: [NOT] AT
    any_bond: [NOT] "~"

    // Atom specifications
{atom_expression}
    _specification: explicit | degree | attached_hydrogens
                  | implicit_hydrogens | ring_membership | ring_size
                  | valence | connectivity | ring_connectivity
                  | negative_charge | positive_charge | atomic_number
                  | chirality | atomic_mass | recursive | atom_class
    explicit: [NOT] _atom_symbol
    degree: [NOT] _DEGREE [INT]
    attached_hydrogens: [NOT] _ATTACHED_H [INT]
    implicit_hydrogens: [NOT] _IMPLICIT_H [INT]
    ring_membership: [NOT] _RING_MEMBERSHIP [INT]
    ring_size: [NOT] _RING_SIZE [INT]
    valence: [NOT] _VALENCE [INT]
    connectivity: [NOT] _CONNECTIVITY [INT]
    ring_connectivity: [NOT] _RING_CONNECTIVITY [INT]
    negative_charge: [NOT] "-" [INT]
    positive_charge: [NOT] "+" [INT]
    atomic_number: [NOT] "#" INT
    chirality: [NOT] AT [AT] [CHIRALITY_CLASS] [QUESTION]
    atomic_mass: [NOT] INT
    recursive: [NOT] "$(" pattern ")"
    atom_class: ":" INT

    // Primitive atoms
    _atom_symbol: element | any_atom | any_aliphatic | any_aromatic
    _primitive_atom: organic | any_atom | any_aliphatic | any_aromatic
    element: ELEMENT
    organic: ORGANIC
    any_atom: "*"
    any_aliphatic: _ALIPHATIC
    any_aromatic: _AROMATIC

    // Terminals
    NOT: "!"
    QUESTION: "?"
    AT: "@"
    INT: /[0-9]+/
    RING_CLOSURE: /%[0-9][0-9]|[0-9]/

    _DEGREE: "D"
    _ATTACHED_H: "H"
    _IMPLICIT_H: "h"
    _RING_MEMBERSHIP: "R"
    _RING_SIZE: "r"
    _VALENCE: "v"
    _CONNECTIVITY: "X"
    _RING_CONNECTIVITY: "x"
    _ALIPHATIC: "A"
    _AROMATIC: "a"

    // Symbol tables, longest symbol first. The higher priorities make the
    // lexer try them before the one-letter property codes.
    CHIRALITY_CLASS.3: /{chirality_class}/
    ELEMENT.2: /{element}/
    ORGANIC.2: /{organic}/
"""

START_RULES = ("start", "atom_expression", "bond_expression")


def expression_rules(prefix, leaf):
    """Return the four expression tiers for leaves matched by rule `leaf`."""
    return EXPRESSION_GRAMMAR.format(prefix=prefix, leaf=leaf)


class SMARTS:
    """A wrapper class for parsing SMARTS grammar using lark.

    Parses a SMARTS string into a `pysmarts.nodes.Pattern`. The wrapped lark
    parser is read-only once built, so a single instance can be shared.

    Parameters
    ----------
    cache : bool, optional, default=False
        Let lark cache the grammar analysis between runs.
    debug : bool, optional, default=False
        Build the lark parser in debug mode, which reports grammar conflicts
        through lark's logger.

    """

    def __init__(self, cache=False, debug=False):
        self.grammar = GRAMMAR.format(
            bond_expression=expression_rules("bond", "_bond"),
            atom_expression=expression_rules("atom", "_specification"),
            chirality_class=symbol_regex(longest_first()),
            element=symbol_regex(ELEMENTS),
            organic=symbol_regex(ORGANIC_SUBSET),
        )
        self.PARSER = lark.Lark(
            self.grammar,
            parser="lalr",
            lexer="contextual",
            start=list(START_RULES),
            maybe_placeholders=True,
            cache=cache,
            debug=debug,
        )

    def parse(self, smarts_string):
        """Parse a whole SMARTS pattern.

        Parameters
        ----------
        smarts_string : str

        Returns
        -------
        pysmarts.nodes.Pattern

        Raises
        ------
        pysmarts.exceptions.SMARTSSyntaxError
            If `smarts_string` is not valid SMARTS.
        """
        return self._transform(self.parse_tree(smarts_string), smarts_string)

    def parse_tree(self, smarts_string, start="start"):
        """Return the raw lark parse tree of `smarts_string`."""
        try:
            return self.PARSER.parse(smarts_string, start=start)
        except (UnexpectedCharacters, UnexpectedToken, UnexpectedEOF) as e:
            raise _translate(e, smarts_string) from e

    def parse_atom_expression(self, text):
        """Parse the contents of a bracketed atom, e.g. ``C,N;+0``."""
        tree = self.parse_tree(text, start="atom_expression")
        return self._transform(tree, text)

    def parse_bond_expression(self, text):
        """Parse a bond expression on its own, e.g. ``=,#``."""
        tree = self.parse_tree(text, start="bond_expression")
        return self._transform(tree, text)

    @staticmethod
    def _transform(tree, smarts_string):
        try:
            return SMARTSTransformer(smarts_string).transform(tree)
        except VisitError as e:
            if isinstance(e.orig_exc, SMARTSError):
                raise e.orig_exc from None
            raise


@functools.lru_cache(maxsize=None)
def default_parser():
    """Return a `SMARTS` parser shared by `parse`."""
    return SMARTS()


def parse(smarts_string):
    """Parse `smarts_string` with the shared default parser."""
    return default_parser().parse(smarts_string)


def _translate(error, smarts_string):
    """Convert a lark parse error into a `SMARTSSyntaxError`."""
    if isinstance(error, UnexpectedCharacters):
        position = error.pos_in_stream
        char = smarts_string[position]
        expected = error.allowed or ()
        if char == "%":
            return MalformedRingClosure(
                "Ring closure '%' must be followed by two digits",
                smarts_string,
                position,
                expected,
            )
        if char.isalpha():
            return UnknownSymbol(
                "Unknown symbol starting with '{}'".format(char),
                smarts_string,
                position,
                expected,
            )
        return UnexpectedCharacter(
            "Unexpected character '{}'".format(char),
            smarts_string,
            position,
            expected,
        )

    # A token the lexer knows, in a place the grammar does not allow it.
    if isinstance(error, UnexpectedToken) and error.token.type != "$END":
        token = error.token
        return UnexpectedCharacter(
            "Unexpected '{}'".format(token),
            smarts_string,
            token.start_pos,
            error.expected,
        )

    return UnexpectedEndOfInput(
        "Unexpected end of input",
        smarts_string,
        len(smarts_string),
        getattr(error, "expected", None) or (),
    )
