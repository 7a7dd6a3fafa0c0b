"""
carbonyl-install command-line entry point.

Usage:
    carbonyl-install install
    carbonyl-install --config carbonyl-install.yml install --sudo
    carbonyl-install check
"""

from __future__ import annotations

import os
import signal
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path
from types import FrameType
from typing import Any

import click

from carbonyl_install import __version__
from carbonyl_install.domain.artifacts import ArtifactVariant, InstallationManifest
from carbonyl_install.domain.exceptions import CarbonylInstallError
from carbonyl_install.domain.settings import InstallerSettings
from carbonyl_install.factories import create_installer
from carbonyl_install.logging_config import configure_logging
from carbonyl_install.usecases.installation_checker import (
    InstallationChecker,
    InstallationStatus,
)
from carbonyl_install.usecases.settings_parser import SettingsParser

DEPENDENCY_DIR_ENV = "FIDELITTY_LIB_DIR"
TOKEN_ENVS = ("GITHUB_TOKEN", "GH_TOKEN")


def load_settings(
    config_path: Path | None,
    environ: Mapping[str, str],
    **overrides: Any,
) -> InstallerSettings:
    """Build settings from defaults, config file, environment and options.

    Later sources win. The environment is read here once and captured into
    the settings object.
    """
    settings = InstallerSettings()
    if config_path is not None:
        settings = SettingsParser().parse_file(config_path, settings)

    env_overrides: dict[str, Any] = {}
    if environ.get(DEPENDENCY_DIR_ENV):
        env_overrides["dependency_search_dir"] = Path(environ[DEPENDENCY_DIR_ENV])
    token = next((environ[name] for name in TOKEN_ENVS if environ.get(name)), None)
    if token:
        env_overrides["github_token"] = token

    return settings.with_overrides(**env_overrides).with_overrides(**overrides)


def _absolute(ctx: click.Context, param: click.Parameter, value: Path | None) -> Path | None:
    # Not resolve(): an existing bin link must not be followed.
    return value.absolute() if value is not None else None


def _one_line(message: str) -> str:
    return " ".join(message.split())


@contextmanager
def _terminate_on_sigterm() -> Iterator[None]:
    """Turn SIGTERM into SystemExit so cleanup handlers still run."""

    def handler(signum: int, frame: FrameType | None) -> None:
        raise SystemExit(128 + signum)

    previous = signal.signal(signal.SIGTERM, handler)
    try:
        yield
    finally:
        signal.signal(signal.SIGTERM, previous)


def _path_option(*names: str, help: str, **kwargs: Any) -> Any:
    return click.option(
        *names,
        type=click.Path(path_type=Path),
        default=None,
        callback=_absolute,
        help=help,
        **kwargs,
    )


@click.group()
@click.version_option(version=__version__, prog_name="carbonyl-install")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option("--quiet", "-q", is_flag=True, help="Only report warnings and errors.")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML file overriding installer settings.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool, config_path: Path | None) -> None:
    """Install Carbonyl from an upstream release plus local library builds."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    configure_logging(verbose=verbose, quiet=quiet)


@cli.command()
@_path_option("--project-root", help="Project holding build/{release,debug}. Default: cwd.")
@_path_option("--install-dir", help="Installation directory.")
@_path_option("--bin-link", help="PATH-visible link to the binary.")
@_path_option(
    "--dependency-dir",
    "dependency_search_dir",
    help=f"Directory holding the dependency library (env: {DEPENDENCY_DIR_ENV}).",
)
@click.option(
    "--retriever",
    type=click.Choice(["httpx", "gh"]),
    default=None,
    help="Release download backend.",
)
@click.option(
    "--sudo/--no-sudo",
    "use_sudo",
    default=None,
    help="Perform filesystem changes through sudo.",
)
@click.pass_context
def install(ctx: click.Context, **options: Any) -> None:
    """Download the release, overlay local builds and link the binary."""
    try:
        settings = load_settings(ctx.obj["config_path"], os.environ, **options)
        with _terminate_on_sigterm():
            manifest = create_installer(settings).run()
    except CarbonylInstallError as e:
        raise click.ClickException(_one_line(str(e))) from e

    _echo_summary(manifest)


@cli.command()
@_path_option("--install-dir", help="Installation directory.")
@_path_option("--bin-link", help="PATH-visible link to the binary.")
@click.pass_context
def check(ctx: click.Context, **options: Any) -> None:
    """Verify an existing installation."""
    try:
        settings = load_settings(ctx.obj["config_path"], os.environ, **options)
    except CarbonylInstallError as e:
        raise click.ClickException(_one_line(str(e))) from e

    result = InstallationChecker()(settings)
    if result.status is not InstallationStatus.OK:
        raise click.ClickException(
            f"Installation {result.status.value}: {result.error_message}"
        )
    click.secho(f"Installation OK: {result.install_dir}", fg="green")


def _echo_summary(manifest: InstallationManifest) -> None:
    local = manifest.local_artifact
    variant = " (debug build)" if local.variant is ArtifactVariant.DEBUG else ""
    dependency = manifest.dependency

    click.echo()
    click.secho(f"Installed carbonyl to {manifest.install_dir}", fg="green", bold=True)
    click.echo(f"  upstream: {manifest.asset.repo} {manifest.asset.version_tag}")
    click.echo(f"  {local.path.name}: {local.path}{variant}")
    click.echo(f"  lib{dependency.name}: {dependency.pinned_version}")
    click.echo(f"  binary: {manifest.binary_link_path} -> {manifest.binary_path}")


def main() -> None:
    cli(prog_name="carbonyl-install")
