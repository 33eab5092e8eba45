"""Factory functions for creating samplers from user-facing options."""

import logging
from collections.abc import Callable, Sequence

import numpy as np

from poissimple.config import get_default_sampler_config, make_sampler_config
from poissimple.config.config_utils import normalize_option_keys
from poissimple.exceptions import SamplerConfigError
from poissimple.samplers.poisson_disk_sampler import PoissonDiskSampler

logger = logging.getLogger(__name__)


def create_sampler(
    n: int,
    dimensions: int = 2,
    extent=None,
    periodic: bool | Sequence[bool] = False,
    tries: int = 30,
    repulsive_boundary: bool = False,
    rng: np.random.Generator | Callable[[], float] | None = None,
    seed: int | None = None,
) -> PoissonDiskSampler:
    """Create a Poisson-disk sampler.

    Args:
        n: Number of points to generate
        dimensions: Dimensionality of the points
        extent: One (lower, upper) pair per axis, a flat (lower, upper) pair in
            1D, or None for [-1, 1] along every axis
        periodic: Wrap distances around the extent, for all axes or per axis
        tries: Candidates drawn per point before the best one is accepted
        repulsive_boundary: Keep points at least half a radius from the edges
        rng: Random source. Either a numpy Generator or a callable returning
            floats in [0, 1). If None, ``np.random.default_rng(seed)`` is used.
        seed: Seed for the default generator. Ignored when ``rng`` is given.

    Returns:
        A configured PoissonDiskSampler

    Raises:
        SamplerConfigError: If any option is invalid

    Example:
        >>> sampler = create_sampler(n=100, extent=[[0, 1], [0, 1]], seed=42)
        >>> sampler.fill().shape
        (100, 2)
    """
    config = make_sampler_config(
        n,
        dimensions=dimensions,
        extent=extent,
        periodic=periodic,
        tries=tries,
        repulsive_boundary=repulsive_boundary,
    )
    if rng is None:
        rng = np.random.default_rng(seed)
    elif seed is not None:
        logger.warning("Both rng and seed were given; ignoring seed=%s", seed)
    return PoissonDiskSampler(config, rng)


def create_sampler_from_config(
    options: dict,
    rng: np.random.Generator | Callable[[], float] | None = None,
) -> PoissonDiskSampler:
    """Create a sampler from an options dictionary (e.g. loaded from YAML).

    Args:
        options: Mapping with a required ``n`` and any optional sampler
            settings. camelCase keys such as ``repulsiveBoundary`` are accepted.
        rng: Optional random source, see ``create_sampler``

    Raises:
        SamplerConfigError: If ``n`` is missing or an option is invalid
    """
    options = normalize_option_keys(options)
    if "n" not in options:
        raise SamplerConfigError("Sampler options must define 'n'.")

    settings = get_default_sampler_config()
    unknown = set(options) - set(settings) - {"n"}
    if unknown:
        raise SamplerConfigError(f"Unknown sampler option(s): {sorted(unknown)}.")
    settings.update({k: v for k, v in options.items() if v is not None})
    n = settings.pop("n")
    return create_sampler(n, rng=rng, **settings)
