"""Poissimple: naive Poisson-disk sampling with a fixed number of points."""

__version__ = "0.1.0"

from poissimple.exceptions import PoissimpleError, SamplerConfigError, ShapeMismatchError
from poissimple.config import SamplerConfig, make_sampler_config
from poissimple.samplers import (
    PoissonDiskSampler,
    UniformPointSampler,
    create_sampler,
    create_sampler_from_config,
    euclidean_distance,
)

__all__ = [
    "PoissimpleError",
    "SamplerConfigError",
    "ShapeMismatchError",
    "SamplerConfig",
    "make_sampler_config",
    "PoissonDiskSampler",
    "UniformPointSampler",
    "create_sampler",
    "create_sampler_from_config",
    "euclidean_distance",
]
