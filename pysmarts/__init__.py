"""pysmarts: parse SMARTS substructure queries into an abstract syntax tree."""

from pysmarts.smarts import SMARTS, parse
from pysmarts.smarts_graph import SMARTSGraph
from pysmarts.writer import to_smarts

__version__ = "0.1.0"

__all__ = ("SMARTS", "SMARTSGraph", "parse", "to_smarts", "__version__")
