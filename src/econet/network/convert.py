"""Views of networks as pandas and networkx objects."""

import networkx as nx
import pandas as pd

from .models import AnyUnipartiteNetwork, EcologicalNetwork


def to_dataframe(network: EcologicalNetwork) -> pd.DataFrame:
    """Dense adjacency as a DataFrame indexed by consumer, columns by resource."""
    return pd.DataFrame(
        network.to_dense(),
        index=pd.Index(network.top_species, name="consumer"),
        columns=pd.Index(network.bottom_species, name="resource"),
    )


def to_graph(network: EcologicalNetwork) -> nx.Graph:
    """Convert a network to a networkx graph.

    Unipartite networks become a ``DiGraph`` with an edge consumer -> resource.
    Bipartite networks become an undirected ``Graph`` whose nodes carry the
    ``bipartite`` attribute (0 for top species, 1 for bottom species).
    Every edge carries the interaction value as ``weight``.
    """
    if isinstance(network, AnyUnipartiteNetwork):
        G = nx.DiGraph()
        G.add_nodes_from(network.S)
    else:
        G = nx.Graph()
        G.add_nodes_from(network.T, bipartite=0)
        G.add_nodes_from(network.B, bipartite=1)

    for consumer, resource, value in network.interactions():
        G.add_edge(consumer, resource, weight=value)
    return G
