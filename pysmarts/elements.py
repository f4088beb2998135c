"""Element symbol tables used for atom-symbol recognition.

Symbols are matched in table order and the first hit wins, so every symbol
that is a prefix of another symbol (``C`` of ``Cl``, ``S`` of ``Se``) must be
listed after it. The order is checked when the module is imported.
"""

# Symbols accepted inside brackets. ``H``, ``D``, ``R`` and ``X`` are left out
# on purpose: inside brackets they are property codes, not elements. ``Nh``
# is left out too, so ``[Nh2]`` is nitrogen with two implicit hydrogens.
ELEMENTS = (
    "Zr", "Zn", "Yb", "Y", "Xe", "W", "V", "U",
    "Ts", "Tm", "Tl", "Ti", "Th", "Te", "Tc", "Tb", "Ta",
    "Sr", "Sn", "Sm", "Si", "Sg", "Se", "Sc", "Sb", "S",
    "Ru", "Rn", "Rh", "Rg", "Rf", "Re", "Rb", "Ra",
    "Pu", "Pt", "Pr", "Po", "Pm", "Pd", "Pb", "Pa", "P",
    "Os", "Og", "O",
    "Np", "No", "Ni", "Ne", "Nd", "Nb", "Na", "N",
    "Mt", "Mo", "Mn", "Mg", "Md", "Mc",
    "Lv", "Lu", "Lr", "Li", "La",
    "Kr", "K",
    "Ir", "In", "I",
    "Hs", "Ho", "Hg", "Hf", "He",
    "Ge", "Gd", "Ga",
    "Fr", "Fm", "Fl", "Fe", "F",
    "Eu", "Es", "Er",
    "Dy", "Ds", "Db",
    "Cu", "Cs", "Cr", "Co", "Cn", "Cm", "Cl", "Cf", "Ce", "Cd", "Ca", "C",
    "Br", "Bk", "Bi", "Bh", "Be", "Ba", "B",
    "Au", "At", "As", "Ar", "Am", "Al", "Ag", "Ac",
    # aromatic forms
    "se", "as", "b", "c", "n", "o", "s", "p",
)

# Symbols accepted without brackets.
ORGANIC_SUBSET = (
    "Br", "B", "Cl", "C", "N", "O", "S", "P", "F", "I",
    "b", "c", "n", "o", "s", "p",
)


def check_maximal_munch(symbols):
    """Check that no symbol shadows a longer symbol listed after it.

    Parameters
    ----------
    symbols : sequence of str
        Symbols in matching order.

    Raises
    ------
    ValueError
        If a symbol is duplicated, or is a prefix of a later symbol and would
        therefore always be matched in its place.
    """
    seen = set()
    for i, symbol in enumerate(symbols):
        if symbol in seen:
            raise ValueError("Duplicate symbol {}".format(symbol))
        seen.add(symbol)
        for later in symbols[i + 1:]:
            if later.startswith(symbol):
                raise ValueError(
                    "Symbol {} is listed before {} and would shadow it".format(
                        symbol, later
                    )
                )


def symbol_regex(symbols):
    """Return a regular expression alternation matching `symbols` in order."""
    check_maximal_munch(symbols)
    return "|".join(symbols)


check_maximal_munch(ELEMENTS)
check_maximal_munch(ORGANIC_SUBSET)
