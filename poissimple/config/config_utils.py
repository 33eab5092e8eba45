"""Utilities for reading sampler options from YAML files.

YAML configs are flat mappings of sampler options::

    n: 200
    dimensions: 2
    extent: [[0, 1], [0, 1]]
    periodic: [true, false]
    tries: 30
    repulsiveBoundary: true
    seed: 42

Keys are case-insensitive and camelCase keys are accepted alongside
snake_case ones.
"""

import logging
import re
from pathlib import Path
from typing import IO

import yaml

from poissimple.exceptions import SamplerConfigError

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def normalize_option_key(key: str) -> str:
    """Convert a camelCase or upper-case option name to snake_case.

    Examples:
        >>> normalize_option_key("repulsiveBoundary")
        'repulsive_boundary'
        >>> normalize_option_key("TRIES")
        'tries'
    """
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def normalize_option_keys(options: dict) -> dict:
    """Normalize every key of an options mapping with ``normalize_option_key``."""
    return {normalize_option_key(str(k)): v for k, v in options.items()}


def load_sampler_config_from_yaml(yaml_config: str | Path | IO) -> dict:
    """Load sampler options from a YAML file.

    Args:
        yaml_config: Path to a YAML file, or an already opened file-like object

    Returns:
        Dictionary of sampler options with snake_case keys

    Raises:
        SamplerConfigError: If the document is not a mapping
    """
    # File-like objects are read directly (handy for tests)
    if hasattr(yaml_config, "read"):
        raw = yaml.safe_load(yaml_config)
    else:
        logger.info("Loading sampler config from: %s", yaml_config)
        with open(yaml_config, "rb") as f:
            raw = yaml.safe_load(f)

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise SamplerConfigError(
            f"Sampler config must be a mapping of options, got {type(raw).__name__}."
        )
    return normalize_option_keys(raw)


def merge_config_overrides(base: dict, overrides: dict) -> dict:
    """Return ``base`` updated with the non-None values of ``overrides``."""
    merged = dict(base)
    merged.update({k: v for k, v in overrides.items() if v is not None})
    return merged
