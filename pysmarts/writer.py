"""Write `pysmarts.nodes` trees back out as SMARTS strings."""

from pysmarts.nodes import (
    AtomClass,
    AtomicMass,
    Bond,
    Branch,
    ChiralityClassSpec,
    ClockwiseCh,
    Component,
    Compound,
    CounterClockwise,
    Description,
    DirectionalBond,
    Explicit,
    ExplicitAnd,
    Expression,
    ImplicitAnd,
    Negation,
    NumericSpecification,
    OrClause,
    Pattern,
    Presence,
    Primitive,
    PrimitiveAtom,
    Recursive,
    default_bond_expression,
)

_SEPARATORS = {
    Expression: ";",
    OrClause: ",",
    ExplicitAnd: "&",
}


def to_smarts(node):
    """Return the SMARTS text of any AST node.

    Bond expressions equal to the implicit single bond are left out, and a
    numeric property whose value is negative (the ``R``/``r``/``x`` default)
    is written without digits, so parsing the output gives back an equal
    tree. The exception is an atomic mass written straight after a property
    that would absorb its digits (``[D12]`` is degree 12, ``[@TB12]`` is
    class TB12): it is split off with ``&``, which matches the same atoms
    but nests one tier deeper.
    """
    if isinstance(node, Pattern):
        return "".join(to_smarts(branch) for branch in node.branches)
    elif isinstance(node, Compound):
        return "({}{})".format(
            to_smarts(node.component),
            "".join(to_smarts(branch) for branch in node.branches),
        )
    elif isinstance(node, Branch):
        return to_smarts(node.component)
    elif isinstance(node, Component):
        return "".join(
            _bond_text(bond) + to_smarts(atom) for bond, atom in node.pairs
        )
    elif isinstance(node, ImplicitAnd):
        return _implicit_text(node)
    elif isinstance(node, tuple(_SEPARATORS)):
        return _SEPARATORS[type(node)].join(to_smarts(term) for term in node)
    elif isinstance(node, Primitive):
        return to_smarts(node.atom) + _ring_text(node.ring_closures)
    elif isinstance(node, Description):
        return "[{}]{}".format(
            to_smarts(node.expression), _ring_text(node.ring_closures)
        )
    elif isinstance(node, PrimitiveAtom):
        return node.symbol
    elif isinstance(node, Bond):
        text = _not(node) + node.symbol
        if isinstance(node, DirectionalBond):
            text += _maybe(node)
        return text
    elif isinstance(node, Explicit):
        return _not(node) + to_smarts(node.atom)
    elif isinstance(node, NumericSpecification):
        value = str(node.value) if node.value >= 0 else ""
        return _not(node) + node.symbol + value
    elif isinstance(node, CounterClockwise):
        return _not(node) + "@" + _maybe(node)
    elif isinstance(node, ClockwiseCh):
        return _not(node) + "@@"
    elif isinstance(node, ChiralityClassSpec):
        return _not(node) + "@" + node.code.value + _maybe(node)
    elif isinstance(node, Recursive):
        return _not(node) + "$({})".format(to_smarts(node.pattern))
    elif isinstance(node, AtomClass):
        return ":{}".format(node.value)
    else:
        raise TypeError(
            "Expected a pysmarts node, got {}".format(type(node).__name__)
        )


def _bond_text(expression):
    if expression == default_bond_expression():
        return ""
    return to_smarts(expression)


def _implicit_text(node):
    parts = []
    previous = None
    for leaf in node:
        text = to_smarts(leaf)
        if previous is not None and _absorbs_digits(previous, leaf):
            parts.append("&")
        parts.append(text)
        previous = leaf
    return "".join(parts)


def _absorbs_digits(previous, leaf):
    if not isinstance(leaf, AtomicMass) or leaf.negation is not Negation.PASS:
        return False
    if isinstance(previous, ChiralityClassSpec):
        # @TB1 followed by 2 would read back as @TB12
        return previous.presence is Presence.PRESENT
    return isinstance(previous, (NumericSpecification, AtomClass))


def _ring_text(ring_closures):
    return "".join(
        str(index) if index < 10 else "%{:02d}".format(index)
        for index in ring_closures
    )


def _not(node):
    return "!" if node.negation is Negation.NEGATE else ""


def _maybe(node):
    return "?" if node.presence is Presence.UNSPECIFIED else ""
