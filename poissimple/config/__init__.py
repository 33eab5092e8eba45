"""Configuration for poissimple samplers."""

from poissimple.config.config import (
    SamplerConfig,
    get_default_sampler_config,
    make_sampler_config,
)
from poissimple.config.config_utils import (
    load_sampler_config_from_yaml,
    merge_config_overrides,
    normalize_option_keys,
)

__all__ = [
    "SamplerConfig",
    "get_default_sampler_config",
    "make_sampler_config",
    "load_sampler_config_from_yaml",
    "merge_config_overrides",
    "normalize_option_keys",
]
