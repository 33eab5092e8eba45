"""Tests for sampler configuration."""

import dataclasses

import numpy as np
import pytest

from poissimple.config import (
    SamplerConfig,
    get_default_sampler_config,
    make_sampler_config,
)
from poissimple.exceptions import SamplerConfigError


def test_get_default_sampler_config():
    """Test the documented defaults."""
    defaults = get_default_sampler_config()
    assert defaults == {
        "dimensions": 2,
        "extent": None,
        "periodic": False,
        "tries": 30,
        "repulsive_boundary": False,
        "seed": None,
    }


def test_defaults_are_fresh_copies():
    """Test that mutating returned defaults does not leak."""
    defaults = get_default_sampler_config()
    defaults["tries"] = 1
    assert get_default_sampler_config()["tries"] == 30


class TestMakeSamplerConfig:
    """Test suite for make_sampler_config."""

    def test_minimal(self):
        """Test a config built from n alone."""
        config = make_sampler_config(10)

        assert isinstance(config, SamplerConfig)
        assert config.n == 10
        assert config.dimensions == 2
        assert config.extent == ((-1.0, 1.0), (-1.0, 1.0))
        assert config.periodic == (False, False)
        assert config.tries == 30
        assert config.repulsive_boundary is False

    def test_default_extent_follows_dimensions(self):
        """Test that the default extent has one pair per axis."""
        config = make_sampler_config(10, dimensions=4)
        assert config.extent == ((-1.0, 1.0),) * 4

    def test_flat_extent_in_one_dimension(self):
        """Test that 1D accepts a flat (lower, upper) pair."""
        config = make_sampler_config(3, dimensions=1, extent=[2, 5])
        assert config.extent == ((2.0, 5.0),)

    def test_nested_extent_in_one_dimension(self):
        """Test that 1D also accepts a nested pair."""
        config = make_sampler_config(3, dimensions=1, extent=[[2, 5]])
        assert config.extent == ((2.0, 5.0),)

    def test_periodic_per_axis(self):
        """Test per-axis periodic flags."""
        config = make_sampler_config(3, dimensions=3, periodic=[True, False, True])
        assert config.periodic == (True, False, True)

    def test_periodic_uniform(self):
        """Test that a single flag applies to every axis."""
        config = make_sampler_config(3, dimensions=3, periodic=True)
        assert config.periodic == (True, True, True)

    def test_none_options_use_defaults(self):
        """Test that None means 'not given'."""
        config = make_sampler_config(3, dimensions=None, tries=None)
        assert config.dimensions == 2
        assert config.tries == 30

    def test_numpy_integers(self):
        """Test that numpy integers are accepted as counts."""
        config = make_sampler_config(np.int64(5), dimensions=np.int32(3))
        assert config.n == 5
        assert config.dimensions == 3
        assert isinstance(config.n, int)

    def test_arrays(self):
        """Test the array accessors."""
        config = make_sampler_config(3, extent=[[0, 1], [2, 4]], periodic=[True, False])
        np.testing.assert_array_equal(config.extent_array, [[0.0, 1.0], [2.0, 4.0]])
        np.testing.assert_array_equal(config.periodic_array, [True, False])

    def test_frozen(self):
        """Test that configs cannot be mutated."""
        config = make_sampler_config(3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.n = 4

    @pytest.mark.parametrize(
        "n, options, message",
        [
            (0, {}, "'n' must be at least 1"),
            (-3, {}, "'n' must be at least 1"),
            (2.5, {}, "'n' must be an integer"),
            (True, {}, "'n' must be an integer"),
            (5, {"dimensions": 0}, "'dimensions' must be at least 1"),
            (5, {"tries": 0}, "'tries' must be at least 1"),
            (5, {"extent": [[0, 1], [1, 0]]}, "lower bound must be smaller"),
            (5, {"extent": [[0, 1], [1, 1]]}, "lower bound must be smaller"),
            (5, {"extent": [[0, 1]]}, "one \\(lower, upper\\) pair per dimension"),
            (5, {"extent": [[0, np.nan], [0, 1]]}, "must be finite"),
            (5, {"extent": [[0, np.inf], [0, 1]]}, "must be finite"),
            (5, {"periodic": [True]}, "sequence of 2 booleans"),
            (5, {"radius": 0.2}, "Unknown sampler option"),
        ],
    )
    def test_invalid(self, n, options, message):
        """Test that degenerate configurations are rejected."""
        with pytest.raises(SamplerConfigError, match=message):
            make_sampler_config(n, **options)
