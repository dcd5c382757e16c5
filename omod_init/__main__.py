import logging
from pathlib import Path
from typing import Callable, Dict, Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from omod_init.constants import PROJECT_FILENAME
from omod_init.errors import ModuleInitError
from omod_init.initializer import ModuleInitializer
from omod_init.models import InitReport, ProjectModel
from omod_init.repository import ProjectRepository
from omod_init.settings import InitializerSettings
from omod_init.tui import ModuleConsoleUI
from omod_init.utils import compact_home_paths_in_text

logger = logging.getLogger("omod_init.cli")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(console=Console(stderr=True), rich_tracebacks=True, markup=False)
        ],
    )
    logging.getLogger("omod_init").setLevel(level)


def _project_options(func: Callable) -> Callable:
    func = click.option(
        "--set",
        "overrides",
        multiple=True,
        metavar="KEY=VALUE",
        help="Override an initializer setting.",
    )(func)
    func = click.option(
        "--project-file",
        default=PROJECT_FILENAME,
        show_default=True,
        help="Project descriptor file name, relative to the project directory.",
    )(func)
    func = click.argument(
        "project_dir",
        required=False,
        default=".",
        type=click.Path(path_type=Path, file_okay=False),
    )(func)
    return func


def _parse_overrides(values: tuple[str, ...]) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(
                f"expected KEY=VALUE, got {item!r}", param_hint="--set"
            )
        overrides[key.strip()] = value
    return overrides


def _fail(exc: Exception) -> click.ClickException:
    return click.ClickException(f"Fatal: {compact_home_paths_in_text(str(exc))}")


def _load(
    project_dir: Path, project_file: str, overrides: tuple[str, ...]
) -> tuple[ProjectRepository, ProjectModel, InitializerSettings]:
    parsed = _parse_overrides(overrides)
    repository = ProjectRepository(project_dir, project_file)
    try:
        project, settings = repository.load()
        settings = settings.with_overrides(parsed)
    except (ModuleInitError, ValueError) as exc:
        raise _fail(exc)
    return repository, project, settings


def _initialize(
    project: ProjectModel, settings: InitializerSettings
) -> InitReport:
    try:
        return ModuleInitializer(project, settings).run()
    except ModuleInitError as exc:
        raise _fail(exc)


def _descriptor_properties(settings: InitializerSettings) -> tuple[str, str]:
    return settings.descriptor_property, settings.omod_descriptor_property


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Auto-configure resources and mapping descriptors of a module project."""
    _setup_logging(verbose)


@cli.command(help="Show what initialization would change, without writing.")
@_project_options
def plan(project_dir: Path, project_file: str, overrides: tuple[str, ...]) -> None:
    ui = ModuleConsoleUI(Console())
    _, project, settings = _load(project_dir, project_file, overrides)
    report = _initialize(project, settings)
    ui.render_report(
        report, project, _descriptor_properties(settings), mode="plan"
    )
    ui.render_resources(project)


@cli.command(help="Initialize the project and save the descriptor.")
@_project_options
@click.option(
    "--backup/--no-backup",
    default=False,
    help="Keep a timestamped copy of the previous descriptor.",
)
def apply(
    project_dir: Path, project_file: str, overrides: tuple[str, ...], backup: bool
) -> None:
    ui = ModuleConsoleUI(Console())
    repository, project, settings = _load(project_dir, project_file, overrides)
    report = _initialize(project, settings)
    ui.render_report(
        report, project, _descriptor_properties(settings), mode="apply"
    )

    if not report.has_changes():
        ui.render_nothing_to_apply()
        return

    try:
        backup_path = repository.save(project, backup=backup)
    except (ModuleInitError, OSError) as exc:
        raise _fail(exc)
    logger.debug("saved %s", repository.project_path)
    ui.render_saved(
        str(repository.project_path),
        str(backup_path) if backup_path is not None else None,
    )


@cli.command(help="Print the computed descriptor property values.")
@_project_options
@click.option("--name", default=None, help="Print only this property, unformatted.")
def properties(
    project_dir: Path, project_file: str, overrides: tuple[str, ...], name: Optional[str]
) -> None:
    _, project, settings = _load(project_dir, project_file, overrides)
    _initialize(project, settings)

    keys = _descriptor_properties(settings)
    if name is not None:
        if name not in keys:
            raise click.ClickException(
                f"Unknown property: {name} (expected one of {', '.join(keys)})"
            )
        click.echo(project.properties[name], nl=False)
        return

    for key in keys:
        click.echo(f"{key}:")
        click.echo(project.properties[key], nl=False)


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
