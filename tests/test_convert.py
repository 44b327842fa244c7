"""Tests for pandas and networkx views (econet.network.convert)."""

import networkx as nx
import numpy as np

from econet import BipartiteQuantitativeNetwork
from econet.network import to_dataframe, to_graph


class TestToDataFrame:
    def test_labels(self, pollination):
        df = to_dataframe(pollination)
        assert list(df.index) == ["bee", "fly"]
        assert list(df.columns) == ["rose", "daisy", "clover"]
        assert df.index.name == "consumer"
        assert bool(df.loc["fly", "daisy"])


class TestToGraph:
    def test_unipartite_is_directed(self, small_web):
        G = to_graph(small_web)
        assert isinstance(G, nx.DiGraph)
        assert G.number_of_nodes() == 4
        assert G.has_edge("s1", "s2")
        assert not G.has_edge("s2", "s1")
        assert nx.is_isolate(G, "s4")

    def test_bipartite_attributes(self, pollination):
        G = to_graph(pollination)
        assert not G.is_directed()
        assert G.nodes["bee"]["bipartite"] == 0
        assert G.nodes["rose"]["bipartite"] == 1
        assert G.number_of_edges() == 4

    def test_weights(self):
        N = BipartiteQuantitativeNetwork(np.array([[2.5, 0.0]]))
        G = to_graph(N)
        assert G["t1"]["b1"]["weight"] == 2.5
