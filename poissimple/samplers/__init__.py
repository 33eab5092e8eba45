"""Point sampling infrastructure."""

from poissimple.samplers.distance import (
    boundary_distance,
    euclidean_distance,
    nearest_neighbor_distance,
)
from poissimple.samplers.poisson_disk_sampler import PoissonDiskSampler, SamplingStats
from poissimple.samplers.protocols import PointSamplerProtocol, RandomSourceProtocol
from poissimple.samplers.sampler_factory import (
    create_sampler,
    create_sampler_from_config,
)
from poissimple.samplers.uniform_sampler import UniformPointSampler

__all__ = [
    "PoissonDiskSampler",
    "SamplingStats",
    "UniformPointSampler",
    "PointSamplerProtocol",
    "RandomSourceProtocol",
    "create_sampler",
    "create_sampler_from_config",
    "euclidean_distance",
    "nearest_neighbor_distance",
    "boundary_distance",
]
