"""Exception types raised by network construction and the generators."""


class EcoNetError(Exception):
    """Base class for all errors raised by econet."""


class ValidationError(EcoNetError, ValueError):
    """A network could not be constructed because an invariant is violated."""


class DimensionMismatchError(ValidationError):
    """A species vector does not match the matrix dimension it labels."""


class DuplicateSpeciesError(ValidationError):
    """The same species label appears twice in one species vector."""


class SharedSpeciesError(ValidationError):
    """A bipartite network uses the same label on both levels."""


class MixedSpeciesTypeError(ValidationError):
    """Species labels of one network are not all of the same kind."""


class ProbabilityRangeError(ValidationError):
    """A probabilistic network holds a value outside [0, 1]."""


class InteractionValueError(ValidationError):
    """An interaction value is not allowed for the network's value domain."""


class NonSquareUnipartiteError(ValidationError):
    """A unipartite network was given a non-square matrix or mismatched species."""


class ParameterError(EcoNetError, ValueError):
    """A generator was called with parameters outside its domain."""
