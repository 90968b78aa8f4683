"""CLI entry point for lazy-semver."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import click

from lazy_semver.exceptions import InvalidVersion
from lazy_semver.models import Part
from lazy_semver.toml import load_pyproject, project_name, rewrite_project_version
from lazy_semver.versions import Version

PART_CHOICE = click.Choice([part.value for part in Part])


def _apply(version_str: str, change: Callable[[Version], Version]) -> str:
    """Run change on a parsed version, turning InvalidVersion into a CLI error."""
    try:
        return change(Version(version_str)).get_version()
    except InvalidVersion as exc:
        raise click.ClickException(str(exc)) from exc


@click.group()
@click.version_option(package_name="lazy-semver")
def cli() -> None:
    """Parse, bump and rewrite semantic versions."""


@cli.command()
@click.argument("version")
@click.option("--json", "as_json", is_flag=True, help="Print components as JSON.")
def show(version: str, as_json: bool) -> None:
    """Print VERSION in normalized MAJOR.MINOR.PATCH[-PRE] form."""
    try:
        parts = Version(version).to_parts()
    except InvalidVersion as exc:
        raise click.ClickException(str(exc)) from exc
    if as_json:
        click.echo(parts.model_dump_json())
    else:
        click.echo(parts.render())


@cli.command()
@click.argument("part", type=PART_CHOICE)
@click.argument("version")
def bump(part: str, version: str) -> None:
    """Increment PART of VERSION, resetting lower digits."""
    click.echo(_apply(version, lambda v: v.increment(part)))


@cli.command()
@click.argument("part", type=PART_CHOICE)
@click.argument("version")
def decrement(part: str, version: str) -> None:
    """Decrement PART of VERSION. Fails if PART is already 0."""
    click.echo(_apply(version, lambda v: v.decrement(part)))


@cli.command(name="set", context_settings={"ignore_unknown_options": True})
@click.argument("part", type=PART_CHOICE)
@click.argument("value", type=int)
@click.argument("version")
def set_part(part: str, value: int, version: str) -> None:
    """Set PART of VERSION to VALUE."""
    click.echo(_apply(version, lambda v: v.set(part, value)))


@cli.command()
@click.argument("label")
@click.argument("version")
def pre(label: str, version: str) -> None:
    """Set the pre-release LABEL of VERSION ("" removes it)."""
    click.echo(_apply(version, lambda v: v.set_pre_release_version(label)))


@cli.command(name="bump-file")
@click.argument("part", type=PART_CHOICE)
@click.option(
    "--pyproject",
    type=click.Path(dir_okay=False, path_type=Path),
    default="pyproject.toml",
    show_default=True,
    help="pyproject.toml whose [project].version is bumped.",
)
@click.option("--pre", "pre_label", default=None, help="Pre-release label to set.")
def bump_file(part: str, pyproject: Path, pre_label: str | None) -> None:
    """Bump PART of [project].version in a pyproject.toml, in place."""
    if not pyproject.exists():
        raise click.ClickException(f"No {pyproject} found.")

    def change(v: Version) -> Version:
        v.increment(part)
        if pre_label is not None:
            v.set_pre_release_version(pre_label)
        return v

    try:
        old, new = rewrite_project_version(pyproject, lambda old: _apply(old, change))
    except KeyError as exc:
        raise click.ClickException(f"No [project] table in {pyproject}.") from exc

    name = project_name(load_pyproject(pyproject), pyproject.parent.resolve().name)
    click.echo(f"✓ {name} {old} → {new}")
