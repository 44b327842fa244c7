"""Enumerations and type aliases for ecological networks."""

from enum import Enum

# Species are identified by strings or integers, never a mix of both
Species = str | int


class Topology(str, Enum):
    """How the rows and columns of the adjacency matrix relate.

    BIPARTITE: rows (top level) and columns (bottom level) are disjoint species sets
    UNIPARTITE: rows and columns are the same species, in the same order
    """

    BIPARTITE = "bipartite"
    UNIPARTITE = "unipartite"


class ValueDomain(str, Enum):
    """What an interaction value means.

    BINARY: presence/absence, stored as booleans
    PROBABILISTIC: probability of interaction, in [0, 1]
    QUANTITATIVE: interaction strength, a real number
    """

    BINARY = "binary"
    PROBABILISTIC = "probabilistic"
    QUANTITATIVE = "quantitative"
