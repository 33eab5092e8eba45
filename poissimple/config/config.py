"""Sampler configuration.

Defaults live in plain dictionaries returned by ``get_default_*`` functions.
``make_sampler_config`` merges user options over the defaults, validates
them, and freezes the result into a ``SamplerConfig``.
"""

import logging
from dataclasses import dataclass
from typing import Any

import numpy as np

from poissimple.exceptions import SamplerConfigError
from poissimple.geometry import normalize_extent, normalize_periodic

logger = logging.getLogger(__name__)

# Options accepted by make_sampler_config besides the required "n"
_SAMPLER_OPTIONS = ("dimensions", "extent", "periodic", "tries", "repulsive_boundary")


def get_default_sampler_config() -> dict:
    """Get the default sampler options.

    Returns
    -------
    dict
        Default values for every optional sampler setting. ``extent=None``
        stands for ``[-1, 1]`` along every axis and ``seed=None`` for a fresh
        unseeded random generator.
    """
    return {
        "dimensions": 2,
        "extent": None,
        "periodic": False,
        "tries": 30,
        "repulsive_boundary": False,
        "seed": None,
    }


@dataclass(frozen=True)
class SamplerConfig:
    """Validated, immutable sampler configuration.

    Attributes
    ----------
    n : int
        Target number of points
    dimensions : int
        Dimensionality of the sampled space
    extent : tuple[tuple[float, float], ...]
        One (lower, upper) pair per axis
    periodic : tuple[bool, ...]
        One wraparound flag per axis
    tries : int
        Candidates drawn per point before falling back to the best one seen
    repulsive_boundary : bool
        Keep points at least half a radius away from the extent's edges
    """

    n: int
    dimensions: int
    extent: tuple[tuple[float, float], ...]
    periodic: tuple[bool, ...]
    tries: int
    repulsive_boundary: bool

    @property
    def extent_array(self) -> np.ndarray:
        """Extent as a ``(dimensions, 2)`` float array."""
        return np.array(self.extent, dtype=np.float64)

    @property
    def periodic_array(self) -> np.ndarray:
        """Periodic flags as a boolean array."""
        return np.array(self.periodic, dtype=bool)


def _validate_positive_int(name: str, value: Any) -> int:
    # bool is an int subclass, but True is not a meaningful count
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise SamplerConfigError(f"'{name}' must be an integer, got {value!r}.")
    if value < 1:
        raise SamplerConfigError(f"'{name}' must be at least 1, got {value}.")
    return int(value)


def make_sampler_config(n: int, **options) -> SamplerConfig:
    """Build a validated sampler configuration.

    Parameters
    ----------
    n : int
        Target number of points (required, positive)
    **options
        Any of ``dimensions``, ``extent``, ``periodic``, ``tries`` and
        ``repulsive_boundary``. Missing options fall back to
        ``get_default_sampler_config()``.

    Returns
    -------
    SamplerConfig

    Raises
    ------
    SamplerConfigError
        If an option is unknown or has an invalid value.
    """
    unknown = set(options) - set(_SAMPLER_OPTIONS)
    if unknown:
        raise SamplerConfigError(
            f"Unknown sampler option(s): {sorted(unknown)}. "
            f"Valid options are {list(_SAMPLER_OPTIONS)}."
        )

    settings = get_default_sampler_config()
    settings.update({k: v for k, v in options.items() if v is not None})

    n = _validate_positive_int("n", n)
    dimensions = _validate_positive_int("dimensions", settings["dimensions"])
    tries = _validate_positive_int("tries", settings["tries"])
    extent = normalize_extent(settings["extent"], dimensions)
    periodic = normalize_periodic(settings["periodic"], dimensions)

    config = SamplerConfig(
        n=n,
        dimensions=dimensions,
        extent=tuple((float(lower), float(upper)) for lower, upper in extent),
        periodic=tuple(bool(flag) for flag in periodic),
        tries=tries,
        repulsive_boundary=bool(settings["repulsive_boundary"]),
    )
    logger.debug("Sampler config: %s", config)
    return config
