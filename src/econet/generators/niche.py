"""Niche model food webs.

Williams, R. J. and Martinez, N. D. (2000) 'Simple rules yield complex food
webs', Nature, 404(6774), pp. 180-183. doi: 10.1038/35004572.

Every species gets a niche value on [0, 1]. A consumer eats every species whose
niche value falls inside its feeding range, an interval whose width scales with
the consumer's own niche value. The species with the smallest niche value is
basal: its niche value and range are set to zero.

No connectivity repair is done, so a web may contain isolated species.
"""

import logging
import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any

import numpy as np
from numpy.typing import NDArray

from econet.errors import ParameterError
from econet.metrics import DEFAULT_METRICS, MetricsProvider
from econet.network.models import UnipartiteNetwork

from .randomness import RandomSource, coerce_rng

logger = logging.getLogger(__name__)

MAX_CONNECTANCE = 0.5


@dataclass(frozen=True)
class NicheTraits:
    """Per-species niche parameters, ordered by increasing niche value.

    Attributes:
        niche: Niche values.
        ranges: Feeding range widths.
        centroids: Feeding range centers.
    """

    niche: NDArray[np.float64]
    ranges: NDArray[np.float64]
    centroids: NDArray[np.float64]

    @property
    def richness(self) -> int:
        return len(self.niche)


def _check_species(S: Any) -> int:
    if isinstance(S, bool) or not isinstance(S, Integral) or S < 1:
        raise ParameterError(f"Number of species S must be a positive integer, got {S!r}")
    return int(S)


def _check_connectance(C: float) -> float:
    if not math.isfinite(C):
        raise ParameterError(f"The connectance must be a finite number, got {C}")
    if C >= MAX_CONNECTANCE:
        raise ParameterError(f"The connectance cannot be larger than 0.5, got {C}")
    if C <= 0:
        raise ParameterError(f"The connectance must be positive, got {C}")
    return float(C)


def draw_niche_traits(S: int, C: float, rng: RandomSource = None) -> NicheTraits:
    """Draw niche values, feeding ranges and centroids for ``S`` species.

    Ranges follow ``n_i * Beta(1, beta)`` with ``beta = 1 / (2C) - 1``, and
    centroids are uniform on ``[r_i / 2, n_i]``. The species tied for the
    smallest niche value get niche value and range 0 after the centroids are
    drawn.
    """
    S = _check_species(S)
    C = _check_connectance(C)
    rng = coerce_rng(rng)

    beta = 1.0 / (2.0 * C) - 1.0
    niche = np.sort(rng.uniform(0.0, 1.0, size=S))
    ranges = niche * rng.beta(1.0, beta, size=S)
    centroids = rng.uniform(ranges / 2.0, niche)

    smallest = niche == niche.min()
    niche[smallest] = 0.0
    ranges[smallest] = 0.0

    logger.debug(f"Drew niche traits for S={S}, C={C} (beta={beta:.4f})")
    return NicheTraits(niche=niche, ranges=ranges, centroids=centroids)


def niche_interactions(traits: NicheTraits) -> NDArray[np.bool_]:
    """Feeding matrix: ``[consumer, resource]`` is True when the resource's
    niche value lies strictly inside the consumer's feeding range."""
    half = traits.ranges / 2.0
    lower = (traits.centroids - half)[:, np.newaxis]
    upper = (traits.centroids + half)[:, np.newaxis]
    resources = traits.niche[np.newaxis, :]
    return (resources > lower) & (resources < upper)


def niche_model_from_connectance(
    S: int, C: float, rng: RandomSource = None
) -> UnipartiteNetwork:
    """Niche model food web of ``S`` species with expected connectance ``C``.

    Raises:
        ParameterError: If ``S`` is not a positive integer or ``C`` is not in (0, 0.5).
    """
    traits = draw_niche_traits(S, C, rng)
    network = UnipartiteNetwork(niche_interactions(traits))
    logger.info(
        f"Niche model: {traits.richness} species, {network.n_interactions} links "
        f"(target connectance {C})"
    )
    return network


def niche_model_from_links(S: int, L: int, rng: RandomSource = None) -> UnipartiteNetwork:
    """Niche model food web of ``S`` species with ``L`` expected links.

    Raises:
        ParameterError: If ``L`` is not an integer in (0, S^2) or the implied connectance
            ``L / S^2`` is 0.5 or more.
    """
    S = _check_species(S)
    if isinstance(L, bool) or not isinstance(L, Integral):
        raise ParameterError(f"Number of links L must be an integer, got {L!r}")
    if L >= S * S:
        raise ParameterError("Number of links L cannot be larger than the richness squared")
    if L <= 0:
        raise ParameterError("Number of links L must be positive")
    return niche_model_from_connectance(S, L / (S * S), rng)


def niche_model_from_network(
    network: UnipartiteNetwork,
    rng: RandomSource = None,
    metrics: MetricsProvider | None = None,
) -> UnipartiteNetwork:
    """Randomize an empirical food web, keeping its richness and connectance.

    The original interactions are not used beyond these two numbers.
    """
    metrics = metrics or DEFAULT_METRICS
    return niche_model_from_connectance(
        metrics.richness(network), metrics.connectance(network), rng
    )


def niche_model(
    S: Any,
    links_or_connectance: Real | None = None,
    *,
    rng: RandomSource = None,
) -> UnipartiteNetwork:
    """Generate a food web with the niche model.

    Accepted forms:
        niche_model(S, L)        integer link count
        niche_model(S, C)        float connectance
        niche_model((S, L_or_C)) the same, as one tuple
        niche_model(network)     randomize an empirical unipartite network

    Examples:
        >>> web = niche_model(50, 220, rng=42)
        >>> web.shape
        (50, 50)
    """
    if isinstance(S, UnipartiteNetwork):
        return niche_model_from_network(S, rng)
    if isinstance(S, tuple):
        if links_or_connectance is not None or len(S) != 2:
            raise ParameterError("Tuple parameters must be given alone, as (S, L) or (S, C)")
        S, links_or_connectance = S

    value = links_or_connectance
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ParameterError(f"Expected a link count or a connectance, got {value!r}")
    if isinstance(value, Integral):
        return niche_model_from_links(S, int(value), rng)
    return niche_model_from_connectance(S, float(value), rng)
