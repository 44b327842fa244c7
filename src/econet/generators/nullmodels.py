"""Null models for ecological networks.

Each null model turns an observed adjacency matrix ``A`` (binary or
probabilistic, consumers on rows, resources on columns) into a matrix ``P`` of
interaction probabilities with the same shape, preserving one summary of ``A``:

    TYPE_I:       P[i, j] = connectance(A)                  (overall density)
    TYPE_III_OUT: P[i, j] = degree_out(A)[i] / n_resources  (row degrees)
    TYPE_III_IN:  P[i, j] = degree_in(A)[j] / n_consumers   (column degrees)
    TYPE_II:      mean of TYPE_III_IN and TYPE_III_OUT

These transforms are deterministic. Randomness only enters when binary
networks are drawn from ``P`` with ``generate_bernoulli_ensemble``.
"""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy import sparse
from tqdm import tqdm

from econet.errors import ParameterError
from econet.metrics import DEFAULT_METRICS, MetricsProvider
from econet.network.models import EcologicalNetwork, network_class
from econet.network.types import ValueDomain

from .randomness import RandomSource, coerce_rng

logger = logging.getLogger(__name__)


class NullModel(str, Enum):
    """Which statistic of the observed network a null model preserves."""

    TYPE_I = "type_i"
    TYPE_II = "type_ii"
    TYPE_III_IN = "type_iii_in"
    TYPE_III_OUT = "type_iii_out"


def _dense(A: Any) -> NDArray[np.float64]:
    """Dense float copy of a matrix or of a network's adjacency."""
    if isinstance(A, EcologicalNetwork):
        A = A.edges
    if sparse.issparse(A):
        return A.toarray().astype(np.float64)
    dense = np.asarray(A, dtype=np.float64)
    if dense.ndim != 2:
        raise ParameterError(f"Null models need a 2-D matrix, got {dense.ndim}-D input")
    return dense.copy()


def _with_labels(P: NDArray[np.float64], template: EcologicalNetwork) -> EcologicalNetwork:
    """Wrap ``P`` as a probabilistic network with the species of ``template``."""
    cls = network_class(template.topology, ValueDomain.PROBABILISTIC)
    return cls(P, **template.labels())


def _null1(A: NDArray, metrics: MetricsProvider) -> NDArray[np.float64]:
    return np.full(A.shape, metrics.connectance(A), dtype=np.float64)


def _null3_out(A: NDArray, metrics: MetricsProvider) -> NDArray[np.float64]:
    n_cols = A.shape[1]
    p_rows = np.asarray(metrics.degree_out(A), dtype=np.float64) / n_cols
    return np.repeat(p_rows[:, np.newaxis], n_cols, axis=1)


def _null3_in(A: NDArray, metrics: MetricsProvider) -> NDArray[np.float64]:
    return _null3_out(A.T, metrics).T


def _null2(A: NDArray, metrics: MetricsProvider) -> NDArray[np.float64]:
    return (_null3_in(A, metrics) + _null3_out(A, metrics)) / 2.0


_NULL_MODELS: dict[NullModel, Callable[[NDArray, MetricsProvider], NDArray[np.float64]]] = {
    NullModel.TYPE_I: _null1,
    NullModel.TYPE_II: _null2,
    NullModel.TYPE_III_IN: _null3_in,
    NullModel.TYPE_III_OUT: _null3_out,
}


def null_model(
    A: Any,
    kind: NullModel | str,
    metrics: MetricsProvider | None = None,
) -> Any:
    """Expected interaction probabilities under a null model.

    Args:
        A: Observed matrix (dense or sparse) or network.
        kind: Null model to apply.
        metrics: Provider for connectance and degrees. Defaults to DEFAULT_METRICS.

    Returns:
        A dense float array when ``A`` is a matrix; a probabilistic network of
        the same topology and species when ``A`` is a network.

    Raises:
        ParameterError: If ``kind`` is not a known null model.
    """
    try:
        transform = _NULL_MODELS[NullModel(kind)]
    except ValueError:
        raise ParameterError(f"Unknown null model: {kind}") from None

    P = transform(_dense(A), metrics or DEFAULT_METRICS)
    if isinstance(A, EcologicalNetwork):
        return _with_labels(P, A)
    return P


def null1(A: Any, metrics: MetricsProvider | None = None) -> Any:
    """Type I: every interaction has the probability of the observed connectance."""
    return null_model(A, NullModel.TYPE_I, metrics)


def null2(A: Any, metrics: MetricsProvider | None = None) -> Any:
    """Type II: mean of the in-degree and out-degree null models."""
    return null_model(A, NullModel.TYPE_II, metrics)


def null3_out(A: Any, metrics: MetricsProvider | None = None) -> Any:
    """Type III (out): consumers keep their degree, resources are interchangeable."""
    return null_model(A, NullModel.TYPE_III_OUT, metrics)


def null3_in(A: Any, metrics: MetricsProvider | None = None) -> Any:
    """Type III (in): resources keep their degree, consumers are interchangeable."""
    return null_model(A, NullModel.TYPE_III_IN, metrics)


@dataclass(frozen=True)
class EnsembleParams:
    """Bounds of a Bernoulli ensemble draw.

    Attributes:
        n: Number of accepted networks wanted.
        max_attempts: Maximum number of draws. Raised to ``n`` when smaller.
    """

    n: int = 1000
    max_attempts: int = 10000


@dataclass
class BernoulliEnsemble:
    """Accepted draws from a probability matrix, with the loop counters.

    ``len(ensemble)`` is ``min(requested, accepted before max_attempts ran out)``;
    a short ensemble is a normal outcome, not an error.
    """

    requested: int
    max_attempts: int
    attempts: int = 0
    samples: list[Any] = field(default_factory=list)

    @property
    def accepted(self) -> int:
        return len(self.samples)

    @property
    def exhausted(self) -> bool:
        """True when the attempt budget ran out before ``requested`` samples."""
        return self.accepted < self.requested

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.samples)

    def __getitem__(self, index: int) -> Any:
        return self.samples[index]


def make_bernoulli(P: NDArray, rng: RandomSource = None) -> NDArray[np.bool_]:
    """Draw one binary matrix, each cell an independent Bernoulli(P[i, j]) trial."""
    rng = coerce_rng(rng)
    return rng.random(P.shape) < P


def _check_probabilities(P: NDArray) -> None:
    if not ((P >= 0.0) & (P <= 1.0)).all():
        raise ParameterError("Probability matrix values must lie in [0, 1]")


def generate_bernoulli_ensemble(  # noqa: PLR0913
    P: Any,
    n: int = 1000,
    max_attempts: int = 10000,
    rng: RandomSource = None,
    metrics: MetricsProvider | None = None,
    wrap: Callable[[NDArray[np.bool_]], Any] | None = None,
) -> BernoulliEnsemble:
    """Draw binary matrices from ``P`` until ``n`` are accepted or attempts run out.

    A draw is accepted only if it has no isolated species, i.e. every row and
    every column holds at least one interaction. The loop keeps two counters
    and stops as soon as ``accepted == n`` or ``attempts == max_attempts``.
    ``max_attempts`` is never allowed below ``n``.

    The ensemble may hold fewer than ``n`` matrices; check ``len()`` or
    ``exhausted`` on the result.

    Args:
        P: Probability matrix (dense or sparse) or probabilistic network.
        n: Number of accepted matrices wanted.
        max_attempts: Maximum number of draws.
        rng: Generator, seed, or None.
        metrics: Provider used to count isolated species.
        wrap: Applied to each accepted draw before it is stored, e.g. to turn
            it into a network. Draws are kept as boolean arrays when None.

    Returns:
        BernoulliEnsemble of boolean arrays (or of wrapped draws).

    Raises:
        ParameterError: If ``n`` is not positive or ``P`` is not a probability matrix.
    """
    if n < 1:
        raise ParameterError(f"Number of networks n must be positive, got {n}")
    probabilities = _dense(P)
    _check_probabilities(probabilities)
    max_attempts = max(max_attempts, n)
    metrics = metrics or DEFAULT_METRICS
    rng = coerce_rng(rng)

    ensemble = BernoulliEnsemble(requested=n, max_attempts=max_attempts)
    show_progress = logger.isEnabledFor(logging.INFO)

    with tqdm(total=n, desc="Bernoulli ensemble", disable=not show_progress) as pbar:
        while ensemble.accepted < n and ensemble.attempts < max_attempts:
            ensemble.attempts += 1
            trial = make_bernoulli(probabilities, rng)
            if metrics.count_isolated_species(trial) == 0:
                ensemble.samples.append(trial if wrap is None else wrap(trial))
                pbar.update(1)

    if ensemble.exhausted:
        logger.info(
            f"Accepted {ensemble.accepted} of {n} requested networks "
            f"after {ensemble.attempts} attempts"
        )
    return ensemble


def nullmodel(
    A: Any,
    params: EnsembleParams | None = None,
    rng: RandomSource = None,
    metrics: MetricsProvider | None = None,
) -> BernoulliEnsemble:
    """Draw an ensemble of binary networks from a probability matrix or network.

    When ``A`` is a network the accepted draws are binary networks of the same
    topology and species; matrices give boolean arrays. Acceptance is judged on
    the drawn matrix either way, so a food web whose draw leaves an empty row or
    column is rejected.
    """
    params = params or EnsembleParams()
    wrap = None
    if isinstance(A, EcologicalNetwork):
        wrap = partial(network_class(A.topology, ValueDomain.BINARY), **A.labels())

    return generate_bernoulli_ensemble(
        A,
        n=params.n,
        max_attempts=params.max_attempts,
        rng=rng,
        metrics=metrics,
        wrap=wrap,
    )
