"""Typed ecological networks.

A network binds a sparse adjacency matrix (rows are consumers, columns are
resources) to the species that label its axes. There are six variants, one
per combination of topology and value domain:

    ================  ==============================  =================================
                      bipartite (``T`` rows, ``B``)   unipartite (``S`` on both axes)
    ================  ==============================  =================================
    binary            BipartiteNetwork                UnipartiteNetwork
    probabilistic     BipartiteProbabilisticNetwork   UnipartiteProbabilisticNetwork
    quantitative      BipartiteQuantitativeNetwork    UnipartiteQuantitativeNetwork
    ================  ==============================  =================================

Instances are validated once, when they are created. After that the only
allowed change is editing a single interaction with ``set_interaction`` or
``clear_interaction``; the set of species is fixed for the network's lifetime.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

import numpy as np
from numpy.typing import NDArray
from scipy import sparse

from .adjacency import as_adjacency, normalize, set_entry
from .types import Species, Topology, ValueDomain
from .validation import (
    as_species,
    default_species,
    validate_species,
    validate_value,
    validate_values,
)

STORAGE_DTYPES: dict[ValueDomain, type] = {
    ValueDomain.BINARY: np.bool_,
    ValueDomain.PROBABILISTIC: np.float64,
    ValueDomain.QUANTITATIVE: np.float64,
}


def _store(raw: sparse.csr_matrix, domain: ValueDomain) -> sparse.csr_matrix:
    """Check values for ``domain`` and convert to its storage dtype."""
    validate_values(raw, domain)
    return normalize(raw.astype(STORAGE_DTYPES[domain]))


class _NetworkBase:
    """Read access and single-edge edits shared by all variants."""

    topology: ClassVar[Topology]
    domain: ClassVar[ValueDomain]
    edges: sparse.csr_matrix

    @property
    def top_species(self) -> tuple[Species, ...]:
        raise NotImplementedError

    @property
    def bottom_species(self) -> tuple[Species, ...]:
        raise NotImplementedError

    @property
    def species(self) -> tuple[Species, ...]:
        raise NotImplementedError

    def labels(self) -> dict[str, tuple[Species, ...]]:
        """Species vectors as constructor keyword arguments (``T``/``B`` or ``S``)."""
        raise NotImplementedError

    @property
    def shape(self) -> tuple[int, int]:
        return self.edges.shape

    @property
    def n_interactions(self) -> int:
        """Number of stored (non-zero) interactions."""
        return int(self.edges.nnz)

    def adjacency(self) -> sparse.csr_matrix:
        """Return a copy of the adjacency matrix."""
        return self.edges.copy()

    def to_dense(self) -> NDArray:
        return self.edges.toarray()

    def index_of(self, label: Species, level: str = "top") -> int:
        """Position of ``label`` on the rows (``top``) or columns (``bottom``)."""
        labels = self.top_species if level == "top" else self.bottom_species
        try:
            return labels.index(label)
        except ValueError:
            raise KeyError(f"Species {label!r} is not in the {level} level") from None

    def _check_position(self, row: int, col: int) -> None:
        n_rows, n_cols = self.shape
        if not (0 <= row < n_rows and 0 <= col < n_cols):
            raise IndexError(f"Position ({row}, {col}) is outside a {n_rows}x{n_cols} network")

    def interaction(self, row: int, col: int) -> Any:
        """Value of the interaction at a matrix position (zero when absent)."""
        self._check_position(row, col)
        return self.edges[row, col].item()

    def has_interaction(self, row: int, col: int) -> bool:
        return bool(self.interaction(row, col) != 0)

    def __getitem__(self, key: tuple[Species, Species]) -> Any:
        consumer, resource = key
        return self.interaction(self.index_of(consumer, "top"), self.index_of(resource, "bottom"))

    def interactions(self) -> Iterator[tuple[Species, Species, Any]]:
        """Yield ``(consumer, resource, value)`` for every stored interaction."""
        coo = self.edges.tocoo()
        top, bottom = self.top_species, self.bottom_species
        for i, j, value in zip(coo.row, coo.col, coo.data, strict=True):
            yield top[i], bottom[j], value.item()

    def set_interaction(self, row: int, col: int, value: Any = True) -> None:
        """Write one interaction in place. A zero value removes it."""
        self._check_position(row, col)
        validate_value(value, self.domain)
        set_entry(self.edges, row, col, STORAGE_DTYPES[self.domain](value))

    def clear_interaction(self, row: int, col: int) -> None:
        self._check_position(row, col)
        set_entry(self.edges, row, col, STORAGE_DTYPES[self.domain](0))

    def copy(self):
        """Independent network with the same species and interactions."""
        return type(self)(self.edges.copy(), **self.labels())

    def __repr__(self) -> str:
        n_rows, n_cols = self.shape
        return f"{type(self).__name__}({n_rows}x{n_cols}, {self.n_interactions} interactions)"


@dataclass(eq=False, repr=False)
class _Bipartite(_NetworkBase):
    edges: Any
    T: Sequence[Species] | None = None
    B: Sequence[Species] | None = None

    topology: ClassVar[Topology] = Topology.BIPARTITE

    def __post_init__(self) -> None:
        raw = as_adjacency(self.edges)
        n_rows, n_cols = raw.shape
        self.T = as_species(self.T) if self.T is not None else default_species("t", n_rows)
        self.B = as_species(self.B) if self.B is not None else default_species("b", n_cols)
        validate_species(self.topology, raw.shape, self.T, self.B)
        self.edges = _store(raw, self.domain)

    @property
    def top_species(self) -> tuple[Species, ...]:
        return self.T

    @property
    def bottom_species(self) -> tuple[Species, ...]:
        return self.B

    @property
    def species(self) -> tuple[Species, ...]:
        return self.T + self.B

    def labels(self) -> dict[str, tuple[Species, ...]]:
        return {"T": self.T, "B": self.B}


@dataclass(eq=False, repr=False)
class _Unipartite(_NetworkBase):
    edges: Any
    S: Sequence[Species] | None = None

    topology: ClassVar[Topology] = Topology.UNIPARTITE

    def __post_init__(self) -> None:
        raw = as_adjacency(self.edges)
        self.S = as_species(self.S) if self.S is not None else default_species("s", raw.shape[0])
        validate_species(self.topology, raw.shape, self.S, self.S)
        self.edges = _store(raw, self.domain)

    @property
    def top_species(self) -> tuple[Species, ...]:
        return self.S

    @property
    def bottom_species(self) -> tuple[Species, ...]:
        return self.S

    @property
    def species(self) -> tuple[Species, ...]:
        return self.S

    def labels(self) -> dict[str, tuple[Species, ...]]:
        return {"S": self.S}


@dataclass(eq=False, repr=False)
class BipartiteNetwork(_Bipartite):
    """Presence/absence interactions between two disjoint species sets."""

    domain: ClassVar[ValueDomain] = ValueDomain.BINARY


@dataclass(eq=False, repr=False)
class BipartiteProbabilisticNetwork(_Bipartite):
    """Interaction probabilities, all in [0, 1], between two species sets."""

    domain: ClassVar[ValueDomain] = ValueDomain.PROBABILISTIC


@dataclass(eq=False, repr=False)
class BipartiteQuantitativeNetwork(_Bipartite):
    """Interaction strengths between two species sets."""

    domain: ClassVar[ValueDomain] = ValueDomain.QUANTITATIVE


@dataclass(eq=False, repr=False)
class UnipartiteNetwork(_Unipartite):
    """Presence/absence interactions within one species set (e.g. a food web)."""

    domain: ClassVar[ValueDomain] = ValueDomain.BINARY


@dataclass(eq=False, repr=False)
class UnipartiteProbabilisticNetwork(_Unipartite):
    """Interaction probabilities, all in [0, 1], within one species set."""

    domain: ClassVar[ValueDomain] = ValueDomain.PROBABILISTIC


@dataclass(eq=False, repr=False)
class UnipartiteQuantitativeNetwork(_Unipartite):
    """Interaction strengths within one species set."""

    domain: ClassVar[ValueDomain] = ValueDomain.QUANTITATIVE


# Non-exclusive groupings, usable with isinstance()
BinaryNetwork = BipartiteNetwork | UnipartiteNetwork
ProbabilisticNetwork = BipartiteProbabilisticNetwork | UnipartiteProbabilisticNetwork
QuantitativeNetwork = BipartiteQuantitativeNetwork | UnipartiteQuantitativeNetwork
DeterministicNetwork = BinaryNetwork | QuantitativeNetwork
AnyBipartiteNetwork = (
    BipartiteNetwork | BipartiteProbabilisticNetwork | BipartiteQuantitativeNetwork
)
AnyUnipartiteNetwork = (
    UnipartiteNetwork | UnipartiteProbabilisticNetwork | UnipartiteQuantitativeNetwork
)
EcologicalNetwork = AnyBipartiteNetwork | AnyUnipartiteNetwork

_VARIANTS: dict[tuple[Topology, ValueDomain], type] = {
    (cls.topology, cls.domain): cls
    for cls in (
        BipartiteNetwork,
        BipartiteProbabilisticNetwork,
        BipartiteQuantitativeNetwork,
        UnipartiteNetwork,
        UnipartiteProbabilisticNetwork,
        UnipartiteQuantitativeNetwork,
    )
}


def network_class(topology: Topology, domain: ValueDomain) -> type:
    """Concrete network class for a topology and value domain."""
    return _VARIANTS[(Topology(topology), ValueDomain(domain))]
