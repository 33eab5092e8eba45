"""Exceptions raised by poissimple."""


class PoissimpleError(Exception):
    """Base class for all poissimple errors."""


class SamplerConfigError(PoissimpleError, ValueError):
    """Raised when a sampler is configured with degenerate or malformed options.

    Examples include ``n <= 0``, ``dimensions <= 0``, an extent whose lower
    bound is not strictly below its upper bound, or a periodic flag sequence
    whose length does not match the dimensionality.
    """


class ShapeMismatchError(PoissimpleError, ValueError):
    """Raised when a manually added point has the wrong number of coordinates."""
