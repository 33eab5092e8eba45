"""Naive Poisson-disk sampling with a fixed target point count.

The sampler derives a minimum separation radius from the target count and
the measure of the extent, then accepts points one at a time. For every
point it draws up to ``tries`` uniform candidates and accepts the first one
farther than the radius from every accepted point (and, optionally, far
enough from the extent's edges). If no candidate qualifies it accepts the
best candidate it saw, so every step makes progress.

There is no spatial index: each candidate is compared against every accepted
point, which makes ``fill`` cost ``O(n**2 * tries)`` distance evaluations in
the worst case.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np
import tqdm

from poissimple.config import SamplerConfig
from poissimple.exceptions import ShapeMismatchError
from poissimple.geometry import compute_radius, extent_volume
from poissimple.samplers.distance import boundary_distance, nearest_neighbor_distance
from poissimple.samplers.uniform_sampler import UniformPointSampler

logger = logging.getLogger(__name__)


@dataclass
class SamplingStats:
    """Running counters for a sampler instance. Counters only ever grow."""

    candidates_drawn: int = 0
    points_generated: int = 0
    fallback_acceptances: int = 0
    points_added: int = 0


class PoissonDiskSampler:
    """Generate ``n`` approximately evenly spaced points in an n-dimensional box.

    Parameters
    ----------
    config : SamplerConfig
        Validated configuration, see ``poissimple.config.make_sampler_config``
    random_source : numpy.random.Generator or Callable[[], float]
        Source of uniform ``[0, 1)`` draws. One value is consumed per axis per
        candidate, so a replayed sequence replays the output exactly.

    Examples
    --------
    >>> import numpy as np
    >>> from poissimple.config import make_sampler_config
    >>> config = make_sampler_config(n=50, extent=[[0, 1], [0, 1]])
    >>> sampler = PoissonDiskSampler(config, np.random.default_rng(0))
    >>> sampler.fill().shape
    (50, 2)
    >>> sampler.next_point() is None
    True
    """

    def __init__(
        self,
        config: SamplerConfig,
        random_source: np.random.Generator | Callable[[], float],
    ):
        self.config = config
        self._extent = config.extent_array
        self._spans = self._extent[:, 1] - self._extent[:, 0]
        self._periodic = config.periodic_array
        self._volume = extent_volume(self._extent)
        self._radius = compute_radius(self._spans, config.n, config.dimensions)
        self._candidates = UniformPointSampler(self._extent, random_source)

        # Accepted points live in the first self._count rows of the buffer
        self._buffer = np.empty((config.n, config.dimensions), dtype=np.float64)
        self._count = 0
        self.stats = SamplingStats()

    @property
    def n(self) -> int:
        """Target number of points."""
        return self.config.n

    @property
    def dimensions(self) -> int:
        return self.config.dimensions

    @property
    def extent(self) -> np.ndarray:
        return self._extent.copy()

    @property
    def volume(self) -> float:
        """Measure of the extent (product of the per-axis spans)."""
        return self._volume

    @property
    def radius(self) -> float:
        """Minimum separation the sampler tries to enforce between points."""
        return self._radius

    @property
    def is_complete(self) -> bool:
        """Whether the target count has been reached."""
        return self._count >= self.config.n

    def __len__(self) -> int:
        return self._count

    def __iter__(self):
        return self

    def __next__(self) -> np.ndarray:
        point = self.next_point()
        if point is None:
            raise StopIteration
        return point

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(n={self.config.n}, "
            f"dimensions={self.config.dimensions}, points={self._count}, "
            f"radius={self._radius:.6g})"
        )

    def _acceptance_distance(self, candidate: np.ndarray) -> float:
        """Distance that a candidate must exceed the radius with to be accepted."""
        distance = nearest_neighbor_distance(
            candidate, self._buffer[: self._count], self._spans, self._periodic
        )
        if self.config.repulsive_boundary:
            # Doubled so that comparing against the radius enforces a
            # clearance of radius / 2 from the edges
            distance = min(distance, 2 * boundary_distance(candidate, self._extent))
        return distance

    def _append(self, point: np.ndarray) -> None:
        if self._count == len(self._buffer):
            # Only reachable through add_point, which may exceed n
            grown = np.empty(
                (max(1, 2 * len(self._buffer)), self.config.dimensions),
                dtype=np.float64,
            )
            grown[: self._count] = self._buffer[: self._count]
            self._buffer = grown
        self._buffer[self._count] = point
        self._count += 1

    def next_point(self) -> np.ndarray | None:
        """Generate and return the next point.

        Draws up to ``tries`` candidates. The first candidate whose acceptance
        distance strictly exceeds the radius is accepted immediately. If none
        does, the candidate with the largest acceptance distance is accepted
        (the earliest one on ties).

        Returns
        -------
        np.ndarray or None
            The accepted point of shape ``(dimensions,)``, or None once ``n``
            points exist. Nothing is mutated in the latter case.
        """
        if self.is_complete:
            return None

        best_point = None
        largest_distance = -np.inf
        accepted_early = False
        for _ in range(self.config.tries):
            candidate = self._candidates.sample()
            self.stats.candidates_drawn += 1
            distance = self._acceptance_distance(candidate)

            if distance > largest_distance:
                best_point = candidate
                largest_distance = distance
            if distance > self._radius:
                accepted_early = True
                break

        if not accepted_early:
            self.stats.fallback_acceptances += 1
            logger.debug(
                "No candidate cleared radius %.6g after %d tries; accepting best "
                "candidate at distance %.6g (point %d of %d)",
                self._radius,
                self.config.tries,
                largest_distance,
                self._count + 1,
                self.config.n,
            )

        self._append(best_point)
        self.stats.points_generated += 1
        return best_point.copy()

    def fill(self, show_progress: bool = False) -> np.ndarray:
        """Generate points until ``n`` points exist.

        Parameters
        ----------
        show_progress : bool
            Display a tqdm progress bar while generating.

        Returns
        -------
        np.ndarray
            All accepted points, shape ``(len(self), dimensions)``
        """
        remaining = max(0, self.config.n - self._count)
        with tqdm.tqdm(
            total=remaining,
            desc="Sampling points",
            unit="point",
            disable=not show_progress,
        ) as progress:
            while not self.is_complete:
                self.next_point()
                progress.update(1)

        logger.info(
            "Sampled %d points (%d fallback acceptances, %d candidates drawn)",
            self._count,
            self.stats.fallback_acceptances,
            self.stats.candidates_drawn,
        )
        return self.get_points()

    def add_point(self, point) -> None:
        """Append a caller-supplied point to the accepted points.

        The point is only checked for shape. It is not checked against the
        extent or against the minimum separation, so it may violate the
        spacing property. Points added this way count towards ``n`` and may
        push the number of points past it.

        Raises
        ------
        ShapeMismatchError
            If the point does not have exactly ``dimensions`` coordinates.
            The sampler is left unchanged.
        """
        point = np.atleast_1d(np.asarray(point, dtype=np.float64))
        if point.shape != (self.config.dimensions,):
            raise ShapeMismatchError(
                f"Point must have shape ({self.config.dimensions},), got {point.shape}."
            )
        self._append(point)
        self.stats.points_added += 1

    def get_points(self) -> np.ndarray:
        """Get a copy of the points accepted so far, in insertion order.

        Returns
        -------
        np.ndarray
            Array of shape ``(len(self), dimensions)``
        """
        return self._buffer[: self._count].copy()
