"""Uniform candidate sampling within an extent."""

from collections.abc import Callable

import numpy as np

from poissimple.samplers.protocols import RandomSourceProtocol


def resolve_random_source(
    random_source: np.random.Generator | Callable[[], float],
) -> RandomSourceProtocol:
    """Turn a numpy Generator or a plain callable into a random source.

    Args:
        random_source: Either a ``numpy.random.Generator`` or a zero-argument
            callable returning floats in ``[0, 1)``

    Returns:
        A zero-argument callable returning one uniform draw per call

    Raises:
        TypeError: If ``random_source`` is neither
    """
    if isinstance(random_source, np.random.Generator):
        return random_source.random
    if callable(random_source):
        return random_source
    raise TypeError(
        "random_source must be a numpy.random.Generator or a callable "
        f"returning floats in [0, 1), got {type(random_source).__name__}."
    )


class UniformPointSampler:
    """Draw points uniformly from an axis-aligned extent.

    Each call consumes exactly one value from the random source per axis, in
    axis order, and maps it to ``lower + u * (upper - lower)``. Replaying the
    same sequence of random values therefore replays the same candidates.

    Example:
        >>> import numpy as np
        >>> extent = np.array([[0.0, 1.0], [10.0, 20.0]])
        >>> values = iter([0.5, 0.25])
        >>> sampler = UniformPointSampler(extent, lambda: next(values))
        >>> sampler.sample().tolist()
        [0.5, 12.5]
    """

    def __init__(
        self,
        extent: np.ndarray,
        random_source: np.random.Generator | Callable[[], float],
    ):
        self.extent = np.asarray(extent, dtype=np.float64)
        self._lower = self.extent[:, 0]
        self._spans = self.extent[:, 1] - self.extent[:, 0]
        self._random = resolve_random_source(random_source)

    def sample(self) -> np.ndarray:
        """Draw one candidate point.

        Returns:
            Array of shape (dimensions,)
        """
        draws = np.array(
            [self._random() for _ in range(len(self._lower))], dtype=np.float64
        )
        return self._lower + draws * self._spans
