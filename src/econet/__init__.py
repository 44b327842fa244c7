"""Ecological interaction networks and their randomization.

Typed bipartite/unipartite networks over sparse adjacency matrices, null
models that preserve density or degrees, and the niche model for food webs.
"""

from .errors import (
    DimensionMismatchError,
    DuplicateSpeciesError,
    EcoNetError,
    InteractionValueError,
    MixedSpeciesTypeError,
    NonSquareUnipartiteError,
    ParameterError,
    ProbabilityRangeError,
    SharedSpeciesError,
    ValidationError,
)
from .generators import (
    BernoulliEnsemble,
    EnsembleParams,
    NullModel,
    generate_bernoulli_ensemble,
    niche_model,
    null1,
    null2,
    null3_in,
    null3_out,
    null_model,
    nullmodel,
)
from .metrics import (
    DEFAULT_METRICS,
    MetricsProvider,
    connectance,
    count_isolated_species,
    degree_in,
    degree_out,
    links,
    richness,
)
from .network import (
    BinaryNetwork,
    BipartiteNetwork,
    BipartiteProbabilisticNetwork,
    BipartiteQuantitativeNetwork,
    DeterministicNetwork,
    EcologicalNetwork,
    NetworkConfig,
    ProbabilisticNetwork,
    QuantitativeNetwork,
    Topology,
    UnipartiteNetwork,
    UnipartiteProbabilisticNetwork,
    UnipartiteQuantitativeNetwork,
    ValueDomain,
    build_network,
    try_build_network,
)

__all__ = [
    "DEFAULT_METRICS",
    "BernoulliEnsemble",
    "BinaryNetwork",
    "BipartiteNetwork",
    "BipartiteProbabilisticNetwork",
    "BipartiteQuantitativeNetwork",
    "DeterministicNetwork",
    "DimensionMismatchError",
    "DuplicateSpeciesError",
    "EcoNetError",
    "EcologicalNetwork",
    "EnsembleParams",
    "InteractionValueError",
    "MetricsProvider",
    "MixedSpeciesTypeError",
    "NetworkConfig",
    "NonSquareUnipartiteError",
    "NullModel",
    "ParameterError",
    "ProbabilisticNetwork",
    "ProbabilityRangeError",
    "QuantitativeNetwork",
    "SharedSpeciesError",
    "Topology",
    "UnipartiteNetwork",
    "UnipartiteProbabilisticNetwork",
    "UnipartiteQuantitativeNetwork",
    "ValidationError",
    "ValueDomain",
    "build_network",
    "connectance",
    "count_isolated_species",
    "degree_in",
    "degree_out",
    "generate_bernoulli_ensemble",
    "links",
    "niche_model",
    "null1",
    "null2",
    "null3_in",
    "null3_out",
    "null_model",
    "nullmodel",
    "richness",
    "try_build_network",
]
