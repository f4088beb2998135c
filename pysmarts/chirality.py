"""Chirality classes for tetrahedral, allene-like, square-planar,
trigonal-bipyramidal and octahedral centers."""

from enum import Enum

CHIRALITY_CODES = (
    ["TH1", "TH2", "AL1", "AL2", "SP1", "SP2", "SP3"]
    + ["TB{}".format(i) for i in range(1, 21)]
    + ["OH{}".format(i) for i in range(1, 31)]
)

ChiralityClass = Enum(
    "ChiralityClass",
    [(code, code) for code in CHIRALITY_CODES],
    module=__name__,
)
ChiralityClass.__doc__ = "Closed, ordered set of chirality-class codes."


def longest_first(codes=CHIRALITY_CODES):
    """Return `codes` ordered so no code precedes a longer code it prefixes.

    ``TB1`` is a prefix of ``TB10`` through ``TB19``, so matching must try the
    four-character codes first.
    """
    return sorted(codes, key=len, reverse=True)
