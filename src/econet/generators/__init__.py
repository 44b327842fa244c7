"""Stochastic network generators: null models and the niche model."""

from .niche import (
    NicheTraits,
    draw_niche_traits,
    niche_interactions,
    niche_model,
    niche_model_from_connectance,
    niche_model_from_links,
    niche_model_from_network,
)
from .nullmodels import (
    BernoulliEnsemble,
    EnsembleParams,
    NullModel,
    generate_bernoulli_ensemble,
    make_bernoulli,
    null1,
    null2,
    null3_in,
    null3_out,
    null_model,
    nullmodel,
)
from .randomness import coerce_rng

__all__ = [
    "BernoulliEnsemble",
    "EnsembleParams",
    "NicheTraits",
    "NullModel",
    "coerce_rng",
    "draw_niche_traits",
    "generate_bernoulli_ensemble",
    "make_bernoulli",
    "niche_interactions",
    "niche_model",
    "niche_model_from_connectance",
    "niche_model_from_links",
    "niche_model_from_network",
    "null1",
    "null2",
    "null3_in",
    "null3_out",
    "null_model",
    "nullmodel",
]
