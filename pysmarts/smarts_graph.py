import warnings

import networkx as nx

from pysmarts.exceptions import RingClosureWarning
from pysmarts.nodes import Compound, default_bond_expression
from pysmarts.smarts import parse


class SMARTSGraph(nx.Graph):
    """A graph representation of a SMARTS pattern.

    Atoms become nodes numbered in the order they are written, so node 0 is
    always the first atom of the pattern. Bonds, including ring closures,
    become edges. Recursive ``$(...)`` patterns are kept inside their atom
    and are not expanded into the graph.

    Parameters
    ----------
    smarts_string : str
        The SMARTS string to build the graph from.
    parser : pysmarts.smarts.SMARTS, optional
        The parser used to build the AST. Defaults to the shared parser.
    name : str, optional

    Other Parameters
    ----------------
    args
    kwargs
        Passed on to `networkx.Graph`.

    Attributes
    ----------
    ast : pysmarts.nodes.Pattern
        The parsed pattern.

    Notes
    -----
    Node attribute ``atom`` holds the `SpecificAtom`. Edge attribute ``bond``
    holds the bond expression; ring-closure edges also carry
    ``ring_closure``, the label that closed them, and use the implicit single
    bond since a bond cannot be written before a ring label.
    """

    def __init__(self, smarts_string, parser=None, name=None, *args, **kwargs):
        super(SMARTSGraph, self).__init__(*args, **kwargs)

        self.smarts_string = smarts_string
        self.name = name

        if parser is None:
            self.ast = parse(smarts_string)
        else:
            self.ast = parser.parse(smarts_string)

        self._open_rings = {}
        self._add_branches(self.ast.branches)
        self._warn_open_rings()

    def _add_branches(self, branches, trunk=None):
        """Add atoms and bonds of `branches`, hanging them off `trunk`."""
        for branch in branches:
            last = self._add_component(branch.component, trunk)
            if isinstance(branch, Compound):
                # The side chain does not move the trunk.
                self._add_branches(branch.branches, last)
            else:
                trunk = last

    def _add_component(self, component, trunk):
        for bond, atom in component.pairs:
            atom_idx = self.number_of_nodes()
            self.add_node(atom_idx, atom=atom)
            if trunk is not None:
                self.add_edge(trunk, atom_idx, bond=bond)
            self._add_ring_closures(atom_idx, atom.ring_closures)
            trunk = atom_idx
        return trunk

    def _add_ring_closures(self, atom_idx, ring_closures):
        """Pair each ring label with its previous unclosed use."""
        for label in ring_closures:
            partner = self._open_rings.pop(label, None)
            if partner is None:
                self._open_rings[label] = atom_idx
            elif partner == atom_idx or self.has_edge(partner, atom_idx):
                warnings.warn(
                    "Ring closure {} in {} would bond atoms {} and {} "
                    "twice; ignoring it".format(
                        label, self.smarts_string, partner, atom_idx
                    ),
                    RingClosureWarning,
                )
            else:
                self.add_edge(
                    partner,
                    atom_idx,
                    bond=default_bond_expression(),
                    ring_closure=label,
                )

    def _warn_open_rings(self):
        for label, atom_idx in sorted(self._open_rings.items()):
            warnings.warn(
                "Ring closure {} opened at atom {} in {} is never "
                "closed".format(label, atom_idx, self.smarts_string),
                RingClosureWarning,
            )

    @property
    def ring_closures(self):
        """Dict mapping each ring-closure edge to its label."""
        return nx.get_edge_attributes(self, "ring_closure")
