"""Inspection utilities for generated point sets.

Functions for measuring the spacing of a point set, exporting it to pandas,
and plotting it with matplotlib.
"""

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.patches import Circle
from scipy.spatial.distance import pdist

from poissimple.geometry import normalize_extent, normalize_periodic
from poissimple.samplers.distance import wrap_differences


def _as_point_array(points) -> np.ndarray:
    points = np.asarray(points, dtype=np.float64)
    if points.ndim == 1:
        points = points.reshape(-1, 1)
    if points.ndim != 2:
        raise ValueError(f"Points must be a 2D array, got shape {points.shape}.")
    return points


def pairwise_distances(points, extent=None, periodic=False) -> np.ndarray:
    """Distances between every pair of points in condensed form.

    Args:
        points: Array of shape (k, dimensions)
        extent: Extent of the space, required when ``periodic`` is set
        periodic: Wrap distances around the extent, for all axes or per axis

    Returns:
        Condensed distance vector of length ``k * (k - 1) / 2``, ordered like
        ``scipy.spatial.distance.pdist``

    Raises:
        ValueError: If periodic distances are requested without an extent
    """
    points = _as_point_array(points)
    dimensions = points.shape[1]
    periodic_flags = normalize_periodic(periodic, dimensions)

    if not np.any(periodic_flags):
        return pdist(points)
    if extent is None:
        raise ValueError("An extent is required to compute periodic distances.")

    bounds = normalize_extent(extent, dimensions)
    spans = bounds[:, 1] - bounds[:, 0]
    # Per-axis absolute differences, one column per axis
    per_axis = np.column_stack(
        [pdist(points[:, [axis]], metric="cityblock") for axis in range(dimensions)]
    )
    wrapped = wrap_differences(per_axis, spans, periodic_flags)
    return np.hypot.reduce(wrapped, axis=1)


def min_pairwise_distance(points, extent=None, periodic=False) -> float:
    """Smallest distance between any two points, ``inf`` for fewer than two."""
    distances = pairwise_distances(points, extent=extent, periodic=periodic)
    if distances.size == 0:
        return np.inf
    return float(distances.min())


def points_to_dataframe(points) -> pd.DataFrame:
    """Convert a point array into a DataFrame with one ``x{axis}`` column per axis."""
    points = _as_point_array(points)
    columns = [f"x{axis}" for axis in range(points.shape[1])]
    return pd.DataFrame(points, columns=columns)


def plot_points(
    points,
    extent=None,
    ax: plt.Axes | None = None,
    radius: float | None = None,
    color: str = "tab:blue",
    title: str | None = None,
) -> plt.Axes:
    """Scatter plot of a 1D or 2D point set.

    Args:
        points: Array of shape (k, 1) or (k, 2)
        extent: If given, axis limits are set to the extent
        ax: Matplotlib axes (creates new if None)
        radius: If given, draw a disc of diameter ``radius`` around each 2D
            point; discs of neighbours at the target spacing just touch
        color: Marker color
        title: Plot title

    Returns:
        The matplotlib axes

    Raises:
        ValueError: If the points have more than two dimensions
    """
    points = _as_point_array(points)
    dimensions = points.shape[1]
    if dimensions > 2:
        raise ValueError(f"Only 1D and 2D point sets can be plotted, got {dimensions}D.")

    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6 if dimensions == 2 else 1.5))

    if dimensions == 1:
        ax.scatter(points[:, 0], np.zeros(len(points)), color=color, s=12)
        ax.set_yticks([])
    else:
        ax.scatter(points[:, 0], points[:, 1], color=color, s=12)
        if radius is not None:
            for x, y in points:
                ax.add_patch(Circle((x, y), radius / 2, fill=False, color=color, alpha=0.4))
        ax.set_aspect("equal")

    if extent is not None:
        bounds = normalize_extent(extent, dimensions)
        ax.set_xlim(*bounds[0])
        if dimensions == 2:
            ax.set_ylim(*bounds[1])
    if title:
        ax.set_title(title)
    return ax
