"""Sparse adjacency storage shared by every network type.

All adjacency matrices are held as ``scipy.sparse.csr_matrix`` with rows for
consumers (top level) and columns for resources (bottom level). Explicit zero
entries are always removed, so the sparsity pattern is the set of interactions.
"""

import warnings

import numpy as np
from numpy.typing import ArrayLike, DTypeLike
from scipy import sparse

from econet.errors import DimensionMismatchError, InteractionValueError

# dtype kinds accepted as interaction values: bool, signed, unsigned, float
REAL_KINDS = "biuf"


def as_adjacency(
    matrix: ArrayLike | sparse.spmatrix, dtype: DTypeLike | None = None
) -> sparse.csr_matrix:
    """Return a new, normalized CSR copy of ``matrix``.

    Args:
        matrix: Dense array-like or any scipy sparse matrix/array.
        dtype: Target dtype. Keeps the input dtype when None.

    Returns:
        A CSR matrix that shares no storage with the input.

    Raises:
        DimensionMismatchError: If the input is not two-dimensional.
        InteractionValueError: If the input does not hold real numbers.
    """
    if sparse.issparse(matrix):
        if matrix.ndim != 2:
            raise DimensionMismatchError(f"Adjacency must be 2-D, got {matrix.ndim}-D input")
        source = matrix
    else:
        source = np.asarray(matrix)
        if source.ndim != 2:
            raise DimensionMismatchError(f"Adjacency must be 2-D, got {source.ndim}-D input")

    if source.dtype.kind not in REAL_KINDS:
        raise InteractionValueError(f"Interactions must be real numbers, got dtype {source.dtype}")

    adjacency = sparse.csr_matrix(source, dtype=dtype, copy=True)
    normalize(adjacency)
    return adjacency


def normalize(adjacency: sparse.csr_matrix) -> sparse.csr_matrix:
    """Drop explicit zeros in place and return the same matrix."""
    adjacency.eliminate_zeros()
    adjacency.sort_indices()
    return adjacency


def count_explicit_zeros(adjacency: sparse.spmatrix) -> int:
    """Number of stored entries whose value is zero."""
    return int(np.count_nonzero(adjacency.data == 0))


def set_entry(adjacency: sparse.csr_matrix, row: int, col: int, value) -> None:
    """Assign a single entry, then normalize.

    Setting an entry to zero removes it from the sparsity pattern.
    """
    with warnings.catch_warnings():
        # CSR structure changes are fine for single-edge edits
        warnings.filterwarnings("ignore", category=sparse.SparseEfficiencyWarning)
        adjacency[row, col] = value
    normalize(adjacency)
