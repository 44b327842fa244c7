"""Build networks from an explicit configuration record."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from econet.errors import ValidationError

from .models import EcologicalNetwork, network_class
from .types import Species, Topology, ValueDomain

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NetworkConfig:
    """Everything needed to construct one network.

    Attributes:
        matrix: Dense array-like or scipy sparse matrix of interactions.
        topology: Bipartite or unipartite.
        domain: Meaning of the values. Defaults to BINARY.
        top: Row species of a bipartite network. Synthesized when None.
        bottom: Column species of a bipartite network. Synthesized when None.
        species: Species of a unipartite network. Synthesized when None.
    """

    matrix: Any
    topology: Topology
    domain: ValueDomain = ValueDomain.BINARY
    top: Sequence[Species] | None = None
    bottom: Sequence[Species] | None = None
    species: Sequence[Species] | None = None


@dataclass(frozen=True)
class BuildResult:
    """Outcome of ``try_build_network``: exactly one of the fields is set."""

    network: EcologicalNetwork | None = None
    error: ValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def build_network(config: NetworkConfig) -> EcologicalNetwork:
    """Construct and validate the network described by ``config``.

    Raises:
        ValidationError: If the matrix or labels violate a network invariant,
            or labels are given for the wrong topology.
    """
    topology = Topology(config.topology)
    cls = network_class(topology, config.domain)

    if topology is Topology.UNIPARTITE:
        if config.top is not None or config.bottom is not None:
            raise ValidationError("Unipartite networks take `species`, not `top`/`bottom`")
        network = cls(config.matrix, S=config.species)
    else:
        if config.species is not None:
            raise ValidationError("Bipartite networks take `top` and `bottom`, not `species`")
        network = cls(config.matrix, T=config.top, B=config.bottom)

    logger.debug(f"Built {network!r}")
    return network


def try_build_network(config: NetworkConfig) -> BuildResult:
    """Like ``build_network``, but report validation failures in the result."""
    try:
        return BuildResult(network=build_network(config))
    except ValidationError as e:
        return BuildResult(error=e)
