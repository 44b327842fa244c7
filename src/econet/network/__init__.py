from .adjacency import as_adjacency, count_explicit_zeros, normalize
from .builders import BuildResult, NetworkConfig, build_network, try_build_network
from .convert import to_dataframe, to_graph
from .models import (
    AnyBipartiteNetwork,
    AnyUnipartiteNetwork,
    BinaryNetwork,
    BipartiteNetwork,
    BipartiteProbabilisticNetwork,
    BipartiteQuantitativeNetwork,
    DeterministicNetwork,
    EcologicalNetwork,
    ProbabilisticNetwork,
    QuantitativeNetwork,
    UnipartiteNetwork,
    UnipartiteProbabilisticNetwork,
    UnipartiteQuantitativeNetwork,
    network_class,
)
from .types import Species, Topology, ValueDomain

__all__ = [
    "AnyBipartiteNetwork",
    "AnyUnipartiteNetwork",
    "BinaryNetwork",
    "BipartiteNetwork",
    "BipartiteProbabilisticNetwork",
    "BipartiteQuantitativeNetwork",
    "BuildResult",
    "DeterministicNetwork",
    "EcologicalNetwork",
    "NetworkConfig",
    "ProbabilisticNetwork",
    "QuantitativeNetwork",
    "Species",
    "Topology",
    "UnipartiteNetwork",
    "UnipartiteProbabilisticNetwork",
    "UnipartiteQuantitativeNetwork",
    "ValueDomain",
    "as_adjacency",
    "build_network",
    "count_explicit_zeros",
    "network_class",
    "normalize",
    "to_dataframe",
    "to_graph",
    "try_build_network",
]
