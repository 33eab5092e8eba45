"""Extent normalization and the radius heuristic.

The functions in this module turn user-facing extent and periodicity options
into fixed per-axis arrays, and derive the minimum separation radius from the
target point count.
"""

import math
from collections.abc import Sequence
from typing import Any

import numpy as np

from poissimple.exceptions import SamplerConfigError


def normalize_extent(extent: Any, dimensions: int) -> np.ndarray:
    """Normalize an extent specification into a ``(dimensions, 2)`` array.

    Args:
        extent: ``None`` for ``[-1, 1]`` along every axis, a flat
            ``(lower, upper)`` pair when ``dimensions == 1``, or a sequence of
            ``dimensions`` ``(lower, upper)`` pairs.
        dimensions: Dimensionality of the sampled space.

    Returns:
        Float array of shape ``(dimensions, 2)`` with lower bounds in column 0
        and upper bounds in column 1.

    Raises:
        SamplerConfigError: If the extent has the wrong shape, contains
            non-finite values, or any axis has ``lower >= upper``.
    """
    if extent is None:
        return np.tile(np.array([-1.0, 1.0]), (dimensions, 1))

    try:
        bounds = np.asarray(extent, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise SamplerConfigError(f"Extent could not be parsed: {extent!r}") from exc

    # 1D callers may pass a flat [lower, upper] pair
    if dimensions == 1 and bounds.shape == (2,):
        bounds = bounds.reshape(1, 2)

    if bounds.shape != (dimensions, 2):
        raise SamplerConfigError(
            f"Extent must contain one (lower, upper) pair per dimension, "
            f"expected shape ({dimensions}, 2) but got {bounds.shape}."
        )
    if not np.all(np.isfinite(bounds)):
        raise SamplerConfigError("Extent bounds must be finite.")

    spans = bounds[:, 1] - bounds[:, 0]
    if not np.all(np.isfinite(spans)):
        raise SamplerConfigError("Extent spans must be representable as finite numbers.")
    bad_axes = np.flatnonzero(spans <= 0)
    if bad_axes.size > 0:
        raise SamplerConfigError(
            f"Extent lower bound must be smaller than upper bound "
            f"(offending axes: {bad_axes.tolist()})."
        )
    return bounds


def normalize_periodic(periodic: bool | Sequence[bool], dimensions: int) -> np.ndarray:
    """Resolve a single periodic flag or a per-axis sequence into a boolean array.

    Raises:
        SamplerConfigError: If a sequence of the wrong length is given.
    """
    if isinstance(periodic, (bool, np.bool_)):
        return np.full(dimensions, bool(periodic))

    flags = np.asarray(periodic)
    if flags.ndim != 1 or flags.shape[0] != dimensions:
        raise SamplerConfigError(
            f"Periodic must be a boolean or a sequence of {dimensions} booleans, "
            f"got {periodic!r}."
        )
    return flags.astype(bool)


def extent_volume(extent: np.ndarray) -> float:
    """Compute the measure of the extent (length, area, volume, ...)."""
    spans = extent[:, 1] - extent[:, 0]
    return float(np.prod(spans))


def compute_radius(spans, n: int, dimensions: int) -> float:
    """Derive the minimum separation radius from the target point count.

    The heuristic ``pi / 4 * (volume / n) ** (1 / dimensions)`` was tuned for
    one to three dimensions. There is no guarantee about the quality of the
    spacing above that. The volume is accumulated in log space from the
    per-axis spans so that very large or very small extents do not overflow
    or underflow.

    Raises:
        SamplerConfigError: If any span is not positive, or the result is not a
            finite positive number.
    """
    if n <= 0 or dimensions <= 0:
        raise SamplerConfigError(
            f"n and dimensions must be positive, got n={n}, dimensions={dimensions}."
        )
    spans = np.atleast_1d(np.asarray(spans, dtype=np.float64))
    if np.any(spans <= 0):
        raise SamplerConfigError(f"Extent spans must be positive, got {spans.tolist()}.")

    log_volume = float(np.sum(np.log(spans)))
    try:
        radius = math.pi / 4 * math.exp((log_volume - math.log(n)) / dimensions)
    except OverflowError:
        radius = math.inf
    if not math.isfinite(radius) or radius <= 0:
        raise SamplerConfigError(
            f"Radius heuristic produced an invalid value ({radius}) for "
            f"spans={spans.tolist()}, n={n}, dimensions={dimensions}."
        )
    return radius
