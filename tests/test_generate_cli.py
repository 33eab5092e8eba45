"""Tests for the poissimple-generate command line interface."""

import io

import numpy as np
import pandas as pd
import pytest
import typer
import yaml
from typer.testing import CliRunner

from poissimple.cli import generate
from poissimple.cli.generate import (
    app,
    collect_sampler_options,
    parse_extent_option,
    validate_output_path,
)

runner = CliRunner()


@pytest.fixture
def yaml_config_file(tmp_path):
    config_file = tmp_path / "sampler.yaml"
    config_file.write_text(
        yaml.dump(
            {
                "n": 15,
                "dimensions": 2,
                "extent": [[0, 1], [0, 1]],
                "repulsiveBoundary": True,
                "seed": 7,
            }
        )
    )
    return config_file


def test_parse_extent_option():
    """Test parsing of repeated extent options."""
    assert parse_extent_option(None) is None
    assert parse_extent_option(["0,1", "-2,2.5"]) == [[0.0, 1.0], [-2.0, 2.5]]
    with pytest.raises(typer.BadParameter):
        parse_extent_option(["0;1"])
    with pytest.raises(typer.BadParameter):
        parse_extent_option(["a,b"])


def test_collect_sampler_options(yaml_config_file):
    """Test that command line values override YAML values."""
    options = collect_sampler_options(
        yaml_config_file, {"n": 30, "tries": None, "seed": None}
    )

    assert options["n"] == 30
    assert options["seed"] == 7
    assert options["tries"] == 30
    assert options["repulsive_boundary"] is True


def test_generate_to_stdout():
    """Test CSV output on stdout."""
    result = runner.invoke(
        app, ["-n", "10", "--extent", "0,1", "--extent", "0,1", "--seed", "1"]
    )

    assert result.exit_code == 0, result.output
    df = pd.read_csv(io.StringIO(result.stdout))
    assert list(df.columns) == ["x0", "x1"]
    assert len(df) == 10
    assert df.to_numpy().min() >= 0.0 and df.to_numpy().max() <= 1.0


def test_generate_to_csv(tmp_path):
    """Test CSV file output."""
    output = tmp_path / "out" / "points.csv"
    result = runner.invoke(
        app, ["-n", "12", "-d", "3", "--periodic", "--seed", "2", "--output", str(output)]
    )

    assert result.exit_code == 0, result.output
    df = pd.read_csv(output)
    assert df.shape == (12, 3)


def test_generate_to_npy_is_reproducible(tmp_path):
    """Test that .npy output is reproducible with a seed."""
    first, second = tmp_path / "a.npy", tmp_path / "b.npy"
    for output in (first, second):
        result = runner.invoke(
            app, ["-n", "20", "--seed", "5", "--tries", "10", "--output", str(output)]
        )
        assert result.exit_code == 0, result.output

    np.testing.assert_array_equal(np.load(first), np.load(second))
    assert np.load(first).shape == (20, 2)


def test_generate_from_yaml(tmp_path, yaml_config_file):
    """Test generation driven by a YAML config."""
    output = tmp_path / "points.npy"
    result = runner.invoke(
        app, ["--config-path", str(yaml_config_file), "--output", str(output)]
    )

    assert result.exit_code == 0, result.output
    points = np.load(output)
    assert points.shape == (15, 2)


def test_generate_requires_n():
    """Test that n must be given somewhere."""
    result = runner.invoke(app, ["--seed", "1"])
    assert result.exit_code != 0


def test_generate_invalid_extent():
    """Test that a degenerate extent fails with a usage error code."""
    result = runner.invoke(app, ["-n", "5", "--extent", "1,0", "--extent", "0,1"])
    assert result.exit_code == 2


def test_validate_output_path(tmp_path):
    """Test accepted and rejected output suffixes."""
    validate_output_path(None)
    validate_output_path(tmp_path / "points.csv")
    validate_output_path(tmp_path / "points.NPY")
    with pytest.raises(typer.BadParameter, match="Unsupported output format"):
        validate_output_path(tmp_path / "points.txt")


def test_generate_unsupported_format(tmp_path, monkeypatch):
    """Test that unknown output formats are rejected before any sampling."""
    built = []

    def record_sampler(*args, **kwargs):
        built.append(args)
        raise AssertionError("sampler should not be built")

    monkeypatch.setattr(generate, "create_sampler_from_config", record_sampler)
    result = runner.invoke(
        app, ["-n", "5", "--seed", "1", "--output", str(tmp_path / "points.txt")]
    )
    assert result.exit_code == 2
    assert built == []
    assert not (tmp_path / "points.txt").exists()
