"""Construction-time checks for ecological networks.

Every check is a free function; the network classes call them once, from
their constructor, with their own topology and value domain. Nothing else in
the package re-validates a network after it exists.
"""

from collections import Counter
from collections.abc import Iterable, Sequence

import numpy as np
from scipy import sparse

from econet.errors import (
    DimensionMismatchError,
    DuplicateSpeciesError,
    InteractionValueError,
    MixedSpeciesTypeError,
    NonSquareUnipartiteError,
    ProbabilityRangeError,
    SharedSpeciesError,
)

from .types import Species, Topology, ValueDomain

ALLOWED_SPECIES_TYPES: tuple[type, ...] = (str, int)


def default_species(prefix: str, count: int) -> tuple[str, ...]:
    """Positional labels: ``prefix1``, ``prefix2``, ..."""
    return tuple(f"{prefix}{i}" for i in range(1, count + 1))


def as_species(labels: Iterable) -> tuple[Species, ...]:
    """Freeze a label vector, unwrapping numpy scalars to Python values."""
    return tuple(x.item() if isinstance(x, np.generic) else x for x in labels)


def check_species_kind(*levels: Sequence[Species]) -> None:
    """All labels across all levels must be of a single allowed kind."""
    kinds: set[type] = set()
    for level in levels:
        for label in level:
            kind = type(label)
            if kind is bool or not isinstance(label, ALLOWED_SPECIES_TYPES):
                raise MixedSpeciesTypeError(
                    f"Species labels must be str or int, got {label!r} ({kind.__name__})"
                )
            kinds.add(str if isinstance(label, str) else int)
    if len(kinds) > 1:
        raise MixedSpeciesTypeError(
            f"All species of a network must share one type, got {sorted(k.__name__ for k in kinds)}"
        )


def check_unique(labels: Sequence[Species], level: str) -> None:
    duplicated = [label for label, count in Counter(labels).items() if count > 1]
    if duplicated:
        raise DuplicateSpeciesError(f"All {level} species must be unique, repeated: {duplicated}")


def check_level_size(labels: Sequence[Species], size: int, level: str) -> None:
    if len(labels) != size:
        raise DimensionMismatchError(
            f"The matrix has {size} {level} species but {len(labels)} labels were given"
        )


def check_disjoint_levels(top: Sequence[Species], bottom: Sequence[Species]) -> None:
    shared = set(top) & set(bottom)
    if shared:
        raise SharedSpeciesError(
            f"Bipartite networks cannot share species across levels: {sorted(map(str, shared))}"
        )


def check_square(shape: tuple[int, int]) -> None:
    if shape[0] != shape[1]:
        raise NonSquareUnipartiteError(
            f"Unipartite networks need a square matrix, got {shape[0]}x{shape[1]}"
        )


def validate_species(
    topology: Topology,
    shape: tuple[int, int],
    top: Sequence[Species],
    bottom: Sequence[Species],
) -> None:
    """Check label vectors against the matrix for the given topology.

    For unipartite networks ``top`` and ``bottom`` are the same vector ``S``;
    it labels both axes in the same order.

    Raises:
        ValidationError: On the first violated invariant.
    """
    if topology is Topology.UNIPARTITE:
        check_square(shape)
        if tuple(top) != tuple(bottom):
            raise NonSquareUnipartiteError("Rows and columns must carry the same species in order")
        check_species_kind(top)
        check_level_size(top, shape[0], "row")
        check_unique(top, "network")
        return

    check_species_kind(top, bottom)
    check_level_size(top, shape[0], "top-level")
    check_level_size(bottom, shape[1], "bottom-level")
    check_unique(top, "top-level")
    check_unique(bottom, "bottom-level")
    check_disjoint_levels(top, bottom)


def check_probabilities(values: np.ndarray) -> None:
    inside = (values >= 0.0) & (values <= 1.0)
    if not inside.all():
        offending = values[~inside]
        raise ProbabilityRangeError(
            f"Probabilistic interactions must lie in [0, 1], found {offending[:5].tolist()}"
        )


def check_binary(values: np.ndarray) -> None:
    if values.dtype == bool:
        return
    allowed = (values == 0) | (values == 1)
    if not allowed.all():
        raise InteractionValueError(
            f"Binary interactions must be 0/1 or boolean, found {values[~allowed][:5].tolist()}"
        )


def check_quantitative(values: np.ndarray) -> None:
    if values.dtype.kind == "f" and not np.isfinite(values).all():
        raise InteractionValueError("Quantitative interactions must be finite real numbers")


def validate_values(adjacency: sparse.spmatrix, domain: ValueDomain) -> None:
    """Check stored interaction values against the network's value domain."""
    values = adjacency.data
    if domain is ValueDomain.PROBABILISTIC:
        check_probabilities(values)
    elif domain is ValueDomain.BINARY:
        check_binary(values)
    else:
        check_quantitative(values)


def validate_value(value, domain: ValueDomain) -> None:
    """Check a single interaction value before it is written into a network."""
    array = np.asarray(value)
    if array.ndim != 0 or array.dtype.kind not in "biuf":
        raise InteractionValueError(f"Interaction values must be real scalars, got {value!r}")
    validate_values(sparse.csr_matrix(array.reshape(1, 1)), domain)
