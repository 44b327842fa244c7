"""Network metrics consumed by the generators.

The generators only need a handful of read-only queries. They are expressed as
the ``MetricsProvider`` protocol so callers can plug in their own
implementation; ``DEFAULT_METRICS`` is a minimal one built on scipy.sparse.

Every function accepts a network or a bare matrix (dense or sparse). A bare
matrix is read bipartite-style: rows and columns are distinct species.
Probabilistic values are summed, so connectance and degrees become expected
values.
"""

from typing import Any, Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray
from scipy import sparse

from econet.network.adjacency import as_adjacency
from econet.network.models import AnyUnipartiteNetwork, EcologicalNetwork


def _adjacency(network: Any) -> sparse.csr_matrix:
    if isinstance(network, EcologicalNetwork):
        return network.edges
    return as_adjacency(network)


def links(network: Any) -> float:
    """Number of interactions (expected number for probabilistic values)."""
    return float(_adjacency(network).sum())


def connectance(network: Any) -> float:
    """Realized interactions over possible interactions."""
    A = _adjacency(network)
    n_rows, n_cols = A.shape
    if n_rows * n_cols == 0:
        return 0.0
    return float(A.sum()) / (n_rows * n_cols)


def degree_out(network: Any) -> NDArray:
    """Row sums: resources per consumer."""
    return np.asarray(_adjacency(network).sum(axis=1)).ravel()


def degree_in(network: Any) -> NDArray:
    """Column sums: consumers per resource."""
    return np.asarray(_adjacency(network).sum(axis=0)).ravel()


def richness(network: Any) -> int:
    """Number of species.

    A bare matrix is read bipartite-style and reports ``rows + cols``, so a
    square food web passed as a plain matrix counts every species twice. Wrap
    it in a ``UnipartiteNetwork`` to get ``len(S)``.
    """
    if isinstance(network, EcologicalNetwork):
        return len(network.species)
    n_rows, n_cols = _adjacency(network).shape
    return n_rows + n_cols


def count_isolated_species(network: Any) -> int:
    """Species with no interaction at all.

    In a unipartite network a species is isolated only when both its row and
    its column are empty. Otherwise every empty row and every empty column
    counts as one isolated species.
    """
    A = _adjacency(network)
    empty_rows = np.diff(A.indptr) == 0
    empty_cols = np.bincount(A.indices, minlength=A.shape[1]) == 0
    if isinstance(network, AnyUnipartiteNetwork):
        return int(np.count_nonzero(empty_rows & empty_cols))
    return int(np.count_nonzero(empty_rows) + np.count_nonzero(empty_cols))


@runtime_checkable
class MetricsProvider(Protocol):
    """Read-only network queries the generators depend on.

    Bare matrices are read bipartite-style: rows and columns are distinct
    species. In particular ``richness`` of a plain square matrix is twice the
    number of species of the food web it encodes, and ``count_isolated_species``
    counts empty rows and empty columns separately.

    Example:
        class MyMetrics:
            def connectance(self, network) -> float: ...
            def degree_out(self, network): ...
            def degree_in(self, network): ...
            def richness(self, network) -> int: ...
            def count_isolated_species(self, network) -> int: ...

        assert isinstance(MyMetrics(), MetricsProvider)
    """

    def connectance(self, network: Any) -> float: ...

    def degree_out(self, network: Any) -> NDArray: ...

    def degree_in(self, network: Any) -> NDArray: ...

    def richness(self, network: Any) -> int: ...

    def count_isolated_species(self, network: Any) -> int: ...


class DefaultMetrics:
    """``MetricsProvider`` backed by the functions of this module."""

    def connectance(self, network: Any) -> float:
        return connectance(network)

    def degree_out(self, network: Any) -> NDArray:
        return degree_out(network)

    def degree_in(self, network: Any) -> NDArray:
        return degree_in(network)

    def richness(self, network: Any) -> int:
        return richness(network)

    def count_isolated_species(self, network: Any) -> int:
        return count_isolated_species(network)


DEFAULT_METRICS = DefaultMetrics()
