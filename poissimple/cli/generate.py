#!/usr/bin/env -S uv run --script

import logging
from pathlib import Path

import numpy as np
import typer

from poissimple.analysis import min_pairwise_distance, points_to_dataframe
from poissimple.config import load_sampler_config_from_yaml, merge_config_overrides
from poissimple.config.config import get_default_sampler_config
from poissimple.exceptions import SamplerConfigError
from poissimple.samplers import create_sampler_from_config

app = typer.Typer(add_completion=False)

logger = logging.getLogger(__name__)


def parse_extent_option(extent: list[str] | None) -> list[list[float]] | None:
    """Parse repeated ``--extent lower,upper`` options into a list of pairs.

    Examples:
        >>> parse_extent_option(["0,1", "-2,2.5"])
        [[0.0, 1.0], [-2.0, 2.5]]
    """
    if not extent:
        return None
    pairs = []
    for item in extent:
        parts = item.split(",")
        if len(parts) != 2:
            raise typer.BadParameter(
                f"Extent must be given as 'lower,upper', got '{item}'.",
                param_hint="--extent",
            )
        try:
            pairs.append([float(parts[0]), float(parts[1])])
        except ValueError as exc:
            raise typer.BadParameter(
                f"Extent bounds must be numbers, got '{item}'.", param_hint="--extent"
            ) from exc
    return pairs


def collect_sampler_options(
    config_path: Path | None = None,
    overrides: dict | None = None,
) -> dict:
    """Merge defaults, an optional YAML config and command line overrides.

    Later sources win: defaults < YAML < command line. Overrides set to None
    are treated as not given.
    """
    options = get_default_sampler_config()
    if config_path is not None:
        options = merge_config_overrides(
            options, load_sampler_config_from_yaml(config_path)
        )
    return merge_config_overrides(options, overrides or {})


OUTPUT_FORMATS = (".csv", ".npy")


def validate_output_path(output: Path | None) -> None:
    """Reject output files whose suffix is not a supported format."""
    if output is None:
        return
    suffix = output.suffix.lower()
    if suffix not in OUTPUT_FORMATS:
        raise typer.BadParameter(
            f"Unsupported output format '{suffix}', use .csv or .npy.",
            param_hint="--output",
        )


def write_points(points: np.ndarray, output: Path | None) -> None:
    """Write points to a ``.csv`` or ``.npy`` file, or as CSV to stdout."""
    if output is None:
        typer.echo(points_to_dataframe(points).to_csv(index=False), nl=False)
        return

    validate_output_path(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    logger.info("Writing points to: %s", output)
    if output.suffix.lower() == ".csv":
        points_to_dataframe(points).to_csv(output, index=False)
    else:
        np.save(output, points)
    logger.info("Points saved successfully.")


log_level_option = typer.Option(
    "WARNING",
    "--log-level",
    "-l",
    help="Set the logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    case_sensitive=False,
    show_default=True,
    rich_help_panel="Logging",
    metavar="LEVEL",
    autocompletion=lambda: ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
)

epilog = "Example: `poissimple-generate -n 200 --extent 0,1 --extent 0,1 --seed 42 --output points.csv`"


@app.command(epilog=epilog)
def main(
    n: int = typer.Option(
        None, "--n", "-n", help="Number of points to generate.", min=1
    ),
    config_path: Path = typer.Option(None, help="Path to a YAML sampler configuration."),
    dimensions: int = typer.Option(
        None, "--dimensions", "-d", help="Dimensionality of the points.", min=1
    ),
    extent: list[str] = typer.Option(
        None,
        "--extent",
        "-e",
        help="Bounds of one axis as 'lower,upper'. Repeat once per dimension.",
    ),
    periodic: bool = typer.Option(
        None,
        "--periodic/--no-periodic",
        help="Wrap distances around the extent on every axis.",
    ),
    tries: int = typer.Option(
        None, "--tries", "-t", help="Candidates drawn per point.", min=1
    ),
    repulsive_boundary: bool = typer.Option(
        None,
        "--repulsive-boundary/--no-repulsive-boundary",
        help="Keep points half a radius away from the extent's edges.",
    ),
    seed: int = typer.Option(None, "--seed", "-s", help="Random seed."),
    output: Path = typer.Option(
        None, "--output", "-o", help="Output file (.csv or .npy). Defaults to stdout."
    ),
    progress: bool = typer.Option(False, "--progress", help="Show a progress bar."),
    log_level: str = log_level_option,
):
    """
    Generate evenly spaced random points.
    """
    logging.basicConfig(
        level=log_level.upper(), format="%(asctime)s - %(levelname)s - %(message)s"
    )

    options = collect_sampler_options(
        config_path,
        {
            "n": n,
            "dimensions": dimensions,
            "extent": parse_extent_option(extent),
            "periodic": periodic,
            "tries": tries,
            "repulsive_boundary": repulsive_boundary,
            "seed": seed,
        },
    )
    if options.get("n") is None:
        raise typer.BadParameter(
            "The number of points must be given on the command line or in the config.",
            param_hint="--n",
        )
    validate_output_path(output)

    try:
        sampler = create_sampler_from_config(options)
    except SamplerConfigError as exc:
        logger.error("Invalid sampler configuration: %s", exc)
        raise typer.Exit(code=2) from exc

    logger.info("Sampler: %r", sampler)
    points = sampler.fill(show_progress=progress)
    if logger.isEnabledFor(logging.INFO):
        logger.info(
            "Minimum separation: %.6g (radius %.6g)",
            min_pairwise_distance(points, sampler.extent, sampler.config.periodic),
            sampler.radius,
        )
    write_points(points, output)


if __name__ == "__main__":
    app()
