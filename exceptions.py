"""
Exceptions raised by the simulation core.

All of them signal caller misuse (bad shapes, bad lengths, bad settings)
and are raised at the point of the mismatch.
"""


class EvoSimError(Exception):
    """Base for all simulation errors."""

    pass


class ConfigError(EvoSimError, ValueError):
    """Invalid simulation settings."""

    pass


class TopologyError(EvoSimError, ValueError):
    """Network topology with fewer than two layers or an empty layer."""

    pass


class ShapeError(EvoSimError, ValueError):
    """Input vector length does not match the layer it is fed into."""

    pass


class ReconstructionError(EvoSimError, ValueError):
    """Genome holds too few or too many weights for the topology."""

    pass


class GenomeLengthError(EvoSimError, ValueError):
    """Parent chromosomes of different lengths."""

    pass


class EmptyPopulationError(EvoSimError, ValueError):
    """Selection or evolution requested over an empty population."""

    pass
