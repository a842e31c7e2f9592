"""Exception types raised by the generator."""


class ReversePatternError(Exception):
    """Base class for generator failures."""

    pass


class ConfigurationError(ReversePatternError):
    """Raised when a scope tree cannot generate as configured.

    Covers empty literal pools, empty groups, negative or inverted
    repetition bounds and malformed tree descriptions. These are
    collaborator errors and are never retried.
    """

    pass


class RandomSourceError(ReversePatternError):
    """Raised when a random source cannot produce a value in range."""

    pass
