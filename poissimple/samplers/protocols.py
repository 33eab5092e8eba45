"""Protocols for random sources and point samplers."""

from typing import Protocol

import numpy as np


class RandomSourceProtocol(Protocol):
    """Protocol for uniform random sources.

    A random source is any zero-argument callable returning a float drawn
    uniformly from ``[0, 1)``. ``numpy.random.Generator.random`` satisfies it,
    and so does a deterministic function replaying a fixed sequence.
    """

    def __call__(self) -> float: ...


class PointSamplerProtocol(Protocol):
    """Protocol for incremental point samplers.

    Samplers produce points one at a time until their target count is
    reached, and expose the points accepted so far.
    """

    def next_point(self) -> np.ndarray | None:
        """Generate and return the next point.

        Returns:
            The accepted point, or None once the target count has been reached
        """
        ...

    def fill(self) -> np.ndarray:
        """Generate points until the target count is reached.

        Returns:
            Array of all accepted points, shape (n, dimensions)
        """
        ...

    def add_point(self, point) -> None:
        """Append a point without any distance check."""
        ...

    def get_points(self) -> np.ndarray:
        """Get the points accepted so far.

        Returns:
            Array of shape (k, dimensions)
        """
        ...
