"""CLI entry point for license-bundler."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

import click
from rich.console import Console
from rich.markup import escape

from license_bundler import __version__
from license_bundler.analysis.filtering import filter_ignored_packages
from license_bundler.analysis.overrides import apply_license_overrides
from license_bundler.bundler import Bundler
from license_bundler.config import BundlerConfig, load_config
from license_bundler.constants import (
    BUNDLE_FAILED_MESSAGE,
    EXIT_ERROR,
    EXIT_ISSUES,
    EXIT_SUCCESS,
)
from license_bundler.exceptions import LicenseBundlerError, OutputError
from license_bundler.models.bundle import BundleOutcome, Verbosity
from license_bundler.models.package import Package
from license_bundler.output.diagnostics import Shell
from license_bundler.resolvers.dependency import DependencyResolver

# Diagnostics go to stderr so the bundle can be piped from stdout
_error_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """License Bundler - Collect dependency license texts into one document.

    Finds the license file of every dependency of an installed package,
    checks it against the declared license and writes all texts into a
    single bundle suitable for redistribution.

    \b
    Examples:
        license-bundler bundle my-app
        license-bundler bundle my-app --output THIRD-PARTY-LICENSES
        license-bundler bundle my-app --verbose
    """
    pass


@main.command()
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the bundle to file instead of stdout.",
)
@click.option(
    "--verbose",
    "-v",
    "verbose_flag",
    is_flag=True,
    default=False,
    help="Show which files are checked and their match scores.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_flag",
    is_flag=True,
    default=False,
    help="Show errors only.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
@click.argument("root")
def bundle(
    output_path: str | None,
    verbose_flag: bool,
    quiet_flag: bool,
    config_path: str | None,
    root: str,
) -> None:
    """Bundle the license texts of ROOT and all of its dependencies.

    ROOT is the name of an installed package. Every package it depends on,
    directly or transitively, is included in name order.

    \b
    Exit codes:
        0  all license texts found and recognised
        1  some licenses are missing or only weakly recognised
        2  the bundle could not be generated
    """
    if verbose_flag and quiet_flag:
        raise click.UsageError("--verbose and --quiet are mutually exclusive.")

    if quiet_flag:
        verbosity = Verbosity.QUIET
    elif verbose_flag:
        verbosity = Verbosity.VERBOSE
    else:
        verbosity = Verbosity.NORMAL

    shell = Shell(console=_error_console, verbosity=verbosity)

    try:
        config = load_config(config_path)
        root_name, packages = _collect_packages(root, config, shell)
        bundler = Bundler(shell, max_distance_ratio=config.max_distance_ratio)
        outcome = _run_bundle(bundler, root_name, packages, output_path)

        if not outcome.success:
            shell.error(BUNDLE_FAILED_MESSAGE)
            sys.exit(EXIT_ISSUES)
        sys.exit(EXIT_SUCCESS)

    except LicenseBundlerError as e:
        _display_error(e)
        sys.exit(EXIT_ERROR)


def _collect_packages(
    root: str, config: BundlerConfig, shell: Shell
) -> tuple[str, list[Package]]:
    """Resolve the root's dependency closure and apply configuration.

    Args:
        root: Root package name.
        config: Configuration with ignored packages and overrides.
        shell: Diagnostics sink for the ignored packages summary.

    Returns:
        Tuple of (root package name as installed, packages to bundle).
    """
    root_package, packages = DependencyResolver().resolve_packages(root)
    filter_result = filter_ignored_packages(packages, config)
    if filter_result.ignored_count > 0:
        shell.info(
            f"ignoring {filter_result.ignored_count} package(s): "
            f"{', '.join(filter_result.ignored_names)}"
        )
    return root_package.name, apply_license_overrides(filter_result.packages, config)


def _run_bundle(
    bundler: Bundler,
    root: str,
    packages: list[Package],
    output_path: Optional[str],
) -> BundleOutcome:
    """Run the bundler against stdout or the requested file.

    Raises:
        OutputError: If the output file cannot be opened.
    """
    if output_path is None:
        out: TextIO = sys.stdout
        return bundler.run(root, packages, out)

    try:
        handle = open(output_path, "w", encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Cannot write to file '{output_path}': {e}") from e
    with handle:
        return bundler.run(root, packages, handle)


def _display_error(error: LicenseBundlerError) -> None:
    """Display a fatal error on stderr."""
    error_type = type(error).__name__
    _error_console.print(
        f"[red bold]Error: {error_type}:[/red bold] {escape(str(error))}",
        highlight=False,
        soft_wrap=True,
    )


if __name__ == "__main__":
    main()
