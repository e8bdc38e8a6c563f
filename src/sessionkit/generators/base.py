"""
Error types shared by text generators.
"""


class GeneratorError(Exception):
    """Base class for generation failures."""

    pass


class ConfigurationError(GeneratorError, ValueError):
    """Raised when a generator is missing required configuration."""

    pass


class GenerationError(GeneratorError):
    """Raised when the generation provider call fails."""

    pass
