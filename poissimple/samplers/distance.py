"""Distance functions used by the point-acceptance algorithm.

All distances are computed from absolute per-axis differences reduced with
``np.hypot`` so that extreme coordinate magnitudes do not overflow. Periodic
axes wrap the difference through the glued boundary of the extent.
"""

import numpy as np


def wrap_differences(
    differences: np.ndarray,
    spans: np.ndarray,
    periodic: np.ndarray,
) -> np.ndarray:
    """Take absolute per-axis differences and wrap them along periodic axes.

    Args:
        differences: Raw coordinate differences, shape ``(..., dimensions)``
        spans: Per-axis extent spans (``upper - lower``), shape ``(dimensions,)``
        periodic: Per-axis periodic flags, shape ``(dimensions,)``

    Returns:
        Non-negative per-axis differences. On periodic axes each value is
        ``min(|d| mod s, s - |d| mod s)``.
    """
    differences = np.abs(differences)
    if not np.any(periodic):
        return differences
    wrapped = np.mod(differences, spans)
    wrapped = np.minimum(wrapped, spans - wrapped)
    return np.where(periodic, wrapped, differences)


def euclidean_distance(
    point1,
    point2,
    extent: np.ndarray | None = None,
    periodic: bool | np.ndarray = False,
) -> float:
    """Distance between two points, optionally periodic along some axes.

    Args:
        point1: First point
        point2: Second point, same dimensionality as ``point1``
        extent: ``(dimensions, 2)`` bounds array, required when any axis is periodic
        periodic: Single flag or per-axis flags

    Returns:
        The (possibly wrapped) Euclidean distance

    Raises:
        ValueError: If the points differ in dimensionality, or periodicity is
            requested without an extent.

    Example:
        >>> euclidean_distance([0.1], [0.9])
        0.8
        >>> round(euclidean_distance([0.1], [0.9], extent=np.array([[0.0, 1.0]]), periodic=True), 12)
        0.2
    """
    p1 = np.atleast_1d(np.asarray(point1, dtype=np.float64))
    p2 = np.atleast_1d(np.asarray(point2, dtype=np.float64))
    if p1.shape != p2.shape:
        raise ValueError(
            f"Points must have the same dimensionality, got {p1.shape} and {p2.shape}."
        )

    periodic_flags = np.broadcast_to(np.asarray(periodic, dtype=bool), p1.shape)
    if np.any(periodic_flags):
        if extent is None:
            raise ValueError("An extent is required to compute periodic distances.")
        extent = np.asarray(extent, dtype=np.float64)
        spans = extent[:, 1] - extent[:, 0]
        differences = wrap_differences(p2 - p1, spans, periodic_flags)
    else:
        differences = np.abs(p2 - p1)
    return float(np.hypot.reduce(differences))


def nearest_neighbor_distance(
    candidate: np.ndarray,
    points: np.ndarray,
    spans: np.ndarray,
    periodic: np.ndarray,
) -> float:
    """Minimum distance between a candidate and a set of accepted points.

    This is a brute-force scan over every accepted point; there is no spatial
    index, so the cost is linear in ``len(points)``.

    Args:
        candidate: Candidate point, shape ``(dimensions,)``
        points: Accepted points, shape ``(k, dimensions)``
        spans: Per-axis extent spans
        periodic: Per-axis periodic flags

    Returns:
        The nearest-neighbor distance, or ``inf`` if ``points`` is empty
    """
    if len(points) == 0:
        return np.inf
    differences = wrap_differences(points - candidate, spans, periodic)
    return float(np.min(np.hypot.reduce(differences, axis=1)))


def boundary_distance(candidate: np.ndarray, extent: np.ndarray) -> float:
    """Distance from a candidate to the nearest edge of the extent."""
    to_lower = np.abs(candidate - extent[:, 0])
    to_upper = np.abs(extent[:, 1] - candidate)
    return float(np.min(np.minimum(to_lower, to_upper)))
