import networkx as nx
import pytest

from pysmarts.exceptions import RingClosureWarning
from pysmarts.nodes import (
    Atom,
    Double,
    Primitive,
    default_bond_expression,
    singleton_expression,
)
from pysmarts.smarts_graph import SMARTSGraph
from pysmarts.tests.base_test import PASS, BaseTest


class TestSMARTSGraph(BaseTest):
    def test_chain_with_branch(self, smarts_parser):
        graph = SMARTSGraph("CC(=O)O", parser=smarts_parser, name="acid")
        assert graph.name == "acid"
        assert graph.number_of_nodes() == 4
        assert set(graph.edges()) == {(0, 1), (1, 2), (1, 3)}
        assert graph.edges[1, 2]["bond"] == singleton_expression(Double(PASS))
        assert graph.edges[1, 3]["bond"] == default_bond_expression()
        assert graph.nodes[2]["atom"] == Primitive(Atom("O"))

    def test_first_atom_is_node_zero(self):
        graph = SMARTSGraph("[O;X2]([C;X4](F)(*)(*))[C;X4]")
        assert graph.degree[0] == 2
        assert graph.degree[1] == 4

    def test_side_chains_share_anchor(self):
        graph = SMARTSGraph("C(C)(C)C")
        assert graph.degree[0] == 3

    def test_ring(self):
        graph = SMARTSGraph("C1CCCCC1")
        assert graph.number_of_nodes() == 6
        assert graph.number_of_edges() == 6
        assert graph.ring_closures == {(0, 5): 1}
        assert graph.edges[0, 5]["bond"] == default_bond_expression()
        assert len(nx.cycle_basis(graph)) == 1

    def test_fused_ring(self):
        graph = SMARTSGraph("[#6]12[#6][#6][#6][#6][#6]1[#6][#6][#6][#6]2")
        assert graph.number_of_nodes() == 10
        assert graph.number_of_edges() == 11
        assert len(nx.cycle_basis(graph)) == 2

    def test_reused_label(self):
        graph = SMARTSGraph("C1CC1C1CC1")
        assert graph.number_of_edges() == 7
        assert sorted(graph.ring_closures.values()) == [1, 1]

    def test_recursive_pattern_is_not_expanded(self):
        graph = SMARTSGraph("[$(CC)]N")
        assert graph.number_of_nodes() == 2

    def test_unclosed_ring_warns(self):
        with pytest.warns(RingClosureWarning):
            graph = SMARTSGraph("C1CC")
        assert graph.number_of_edges() == 2

    def test_ring_on_existing_bond_warns(self):
        with pytest.warns(RingClosureWarning):
            graph = SMARTSGraph("C1C1")
        assert graph.number_of_edges() == 1

    def test_empty_pattern(self):
        assert SMARTSGraph("").number_of_nodes() == 0
