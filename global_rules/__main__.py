from pathlib import Path
from typing import Any, Dict, Optional

import click
from rich.console import Console

from global_rules.config import ConfigRepository
from global_rules.errors import ConfigParsingError
from global_rules.logs import setup_logging
from global_rules.models import SyncDirection, SyncRequest
from global_rules.server import run_server
from global_rules.service import GlobalRulesService, failure_from_exception
from global_rules.tui import RulesConsoleUI
from global_rules.utils import dump_result


def _config_repository(obj: Dict[str, Any]) -> ConfigRepository:
    return ConfigRepository(obj.get("config_path"))


def _run_sync(
    obj: Dict[str, Any], direction: SyncDirection, path: str, as_json: bool
) -> None:
    try:
        request = SyncRequest(direction=direction, path=path)
    except ValueError as exc:
        raise click.ClickException(str(exc))

    service = GlobalRulesService(config_repository=_config_repository(obj))
    try:
        result = service.run(request)
    except Exception as exc:
        result = failure_from_exception(exc)

    if as_json:
        click.echo(dump_result(result.as_dict()))
    else:
        RulesConsoleUI(Console()).render_result(request, result)

    if not result.success:
        raise click.exceptions.Exit(1)


_json_option = click.option(
    "--json", "as_json", is_flag=True, help="Print the result as JSON."
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.json (defaults to the installation root).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option("-q", "--quiet", is_flag=True, help="Only log warnings and errors.")
@click.pass_context
def cli(
    ctx: click.Context, config_path: Optional[Path], verbose: bool, quiet: bool
) -> None:
    """Copy global rule files (g-*) between a shared directory and projects."""
    setup_logging(verbose=verbose, quiet=quiet)
    ctx.obj = {"config_path": config_path}


@cli.command(help="Copy global rules into PATH/.cursor/rules.")
@click.argument("path")
@_json_option
@click.pass_obj
def load(obj: Dict[str, Any], path: str, as_json: bool) -> None:
    _run_sync(obj, SyncDirection.LOAD, path, as_json)


@cli.command(help="Copy global rules from PATH/.cursor/rules to the global directory.")
@click.argument("path")
@_json_option
@click.pass_obj
def save(obj: Dict[str, Any], path: str, as_json: bool) -> None:
    _run_sync(obj, SyncDirection.SAVE, path, as_json)


@cli.command(help="Run the MCP server on stdio.")
@click.pass_obj
def serve(obj: Dict[str, Any]) -> None:
    run_server(obj.get("config_path"))


@cli.group(help="Inspect or update config.json.")
def config() -> None:
    pass


@config.command("show", help="Show the configured global rules directory.")
@click.pass_obj
def config_show(obj: Dict[str, Any]) -> None:
    ui = RulesConsoleUI(Console())
    repository = _config_repository(obj)
    try:
        loaded = repository.load()
    except ConfigParsingError as exc:
        ui.render_config_error(str(repository.path), exc.message)
        raise click.exceptions.Exit(1)
    ui.render_config(loaded)


@config.command("set", help="Set the global rules directory.")
@click.argument(
    "directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.pass_obj
def config_set(obj: Dict[str, Any], directory: Path) -> None:
    ui = RulesConsoleUI(Console())
    repository = _config_repository(obj)
    saved = repository.save(str(directory.expanduser().resolve()))
    ui.render_config(saved, saved=True)


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
