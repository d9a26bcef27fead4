"""Main CLI for org-folders."""

import typer
from pathlib import Path
from rich.console import Console
from typing import Optional

from .config import FoldersConfig, resolve_config, create_config, validate_strategy
from .errors import SourceError
from .logging_config import configure_logging
from .models import save_folders
from .output import format_response, render_cli
from .paging import PaginationService
from .sample import DEFAULT_ORG_ID, SECONDARY_ORG_ID, generate_sample_folders
from .services import (
    list_folders as svc_list_folders,
    list_folder_page as svc_list_folder_page,
    walk_folder_pages as svc_walk_folder_pages,
)
from .sources import FileFolderSource

app = typer.Typer(
    name="org-folders",
    help="List an organization's folders, in full or page by page",
)
console = Console()


def _load_config(path: Optional[Path] = None) -> FoldersConfig:
    try:
        return resolve_config(path)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def _get_source(config: FoldersConfig, data: Optional[Path]) -> FileFolderSource:
    data_file = data or config.get_data_file()
    try:
        return FileFolderSource(data_file)
    except SourceError as e:
        console.print(f"[red]Error:[/red] {e}")
        console.print("")
        console.print("Point at a data file with [cyan]--data[/cyan], or create one:")
        console.print("   [cyan]org-folders sample folders.yaml[/cyan]")
        raise typer.Exit(1)


def _get_service(config: FoldersConfig, data: Optional[Path], strategy: Optional[str]) -> PaginationService:
    source = _get_source(config, data)
    try:
        return PaginationService(
            source,
            strategy=validate_strategy(strategy) if strategy else config.strategy,
            default_limit=config.default_limit,
            max_limit=config.max_limit,
        )
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def _resolve_org(config: FoldersConfig, org_id: Optional[str]) -> str:
    org_id = org_id or config.default_org_id
    if not org_id:
        console.print("[red]Error:[/red] No organization given.")
        console.print("Pass ORG_ID or set [cyan]default_org_id[/cyan] in .folders/config.json")
        raise typer.Exit(1)
    return org_id


def _emit(result: dict, output_format: str, text_renderer=None) -> None:
    response = format_response(result, output_format, text_renderer)
    console.print(render_cli(response), soft_wrap=True)
    if "error" in result:
        raise typer.Exit(1)


def _render_folders_text(result: dict) -> str:
    if "error" in result:
        return f"Error: {result['message']}"
    lines = [f"{f['id']}  {f['name']}" for f in result.get("folders", [])]
    if not lines:
        lines.append("(no folders)")
    if result.get("next_page_marker"):
        lines.append(f"next page marker: {result['next_page_marker']}")
    return "\n".join(lines)


def _render_walk_text(result: dict) -> str:
    if "error" in result:
        return f"Error: {result['message']}"
    lines = []
    for number, page in enumerate(result["pages"], start=1):
        lines.append(f"--- page {number} ({len(page['folders'])} folders)")
        lines.extend(f"{f['id']}  {f['name']}" for f in page["folders"])
    lines.append(f"{result['total_count']} folders in {result['page_count']} pages")
    return "\n".join(lines)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Shortcut for --log-level DEBUG"),
):
    """List an organization's folders, in full or page by page."""
    level = "DEBUG" if verbose else log_level
    if not level:
        try:
            level = resolve_config().log_level
        except ValueError:
            level = "WARNING"
    configure_logging(level)


# ============================================================================
# Folder Commands
# ============================================================================

@app.command("list")
def list_folders(
    org_id: Optional[str] = typer.Argument(None, help="Organization UUID (default: from config)"),
    data: Optional[Path] = typer.Option(None, "--data", "-d", help="Folder data file (YAML or JSON)"),
    output_format: str = typer.Option("json", "--format", "-f", help="Output format (json|yaml|text)"),
):
    """List every folder of an organization in one response.

    Fails when the organization has no folders.
    """
    config = _load_config()
    source = _get_source(config, data)
    result = svc_list_folders(source, _resolve_org(config, org_id))
    _emit(result, output_format, _render_folders_text)


@app.command("page")
def page_folders(
    org_id: Optional[str] = typer.Argument(None, help="Organization UUID (default: from config)"),
    limit: int = typer.Option(0, "--limit", "-n", help="Folders per page (default 10, max 100)"),
    marker: str = typer.Option("", "--marker", "-m", help="Marker returned by the previous page"),
    strategy: Optional[str] = typer.Option(None, "--strategy", "-s", help="Marker strategy (cursor|offset)"),
    data: Optional[Path] = typer.Option(None, "--data", "-d", help="Folder data file (YAML or JSON)"),
    output_format: str = typer.Option("json", "--format", "-f", help="Output format (json|yaml|text)"),
):
    """Fetch one page of folders.

    Pass the returned next_page_marker back with --marker to get the
    following page. An empty marker means the last page was reached.
    """
    config = _load_config()
    service = _get_service(config, data, strategy)
    result = svc_list_folder_page(service, _resolve_org(config, org_id), limit=limit, marker=marker)
    _emit(result, output_format, _render_folders_text)


@app.command("walk")
def walk_folders(
    org_id: Optional[str] = typer.Argument(None, help="Organization UUID (default: from config)"),
    limit: int = typer.Option(0, "--limit", "-n", help="Folders per page (default 10, max 100)"),
    strategy: Optional[str] = typer.Option(None, "--strategy", "-s", help="Marker strategy (cursor|offset)"),
    data: Optional[Path] = typer.Option(None, "--data", "-d", help="Folder data file (YAML or JSON)"),
    output_format: str = typer.Option("text", "--format", "-f", help="Output format (json|yaml|text)"),
):
    """Fetch every page in turn, following markers until the last page."""
    config = _load_config()
    service = _get_service(config, data, strategy)
    result = svc_walk_folder_pages(service, _resolve_org(config, org_id), limit=limit)
    _emit(result, output_format, _render_walk_text)


@app.command("sample")
def write_sample(
    output: Path = typer.Argument(Path("folders.yaml"), help="File to write (.yaml, .yml or .json)"),
    count: int = typer.Option(1000, "--count", "-c", help="Number of folders"),
    seed: int = typer.Option(0, "--seed", help="Random seed"),
    org: Optional[list[str]] = typer.Option(None, "--org", help="Organization UUID (repeatable)"),
):
    """Write a deterministic sample data file."""
    if output.exists() and not typer.confirm(f"{output} already exists. Overwrite?"):
        raise typer.Exit(0)

    try:
        folders = generate_sample_folders(org or [DEFAULT_ORG_ID, SECONDARY_ORG_ID], count=count, seed=seed)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    save_folders(folders, output)
    console.print(f"[green]Wrote {len(folders)} folders to {output}[/green]")


# ============================================================================
# Config Commands
# ============================================================================

@app.command("init")
def init_config(
    path: Optional[Path] = typer.Option(None, "--path", "-p", help="Directory to initialize"),
    data_file: Optional[str] = typer.Option(None, "--data", "-d", help="Folder data file"),
    strategy: str = typer.Option("cursor", "--strategy", "-s", help="Marker strategy (cursor|offset)"),
    org_id: Optional[str] = typer.Option(None, "--org", help="Default organization UUID"),
):
    """Initialize .folders/config.json in current or specified directory."""
    target_path = Path(path) if path else Path.cwd()

    if not target_path.exists():
        console.print(f"[red]Error:[/red] Directory not found: {target_path}")
        raise typer.Exit(1)

    existing_config = target_path / ".folders" / "config.json"
    if existing_config.exists():
        if not typer.confirm(f"Config already exists at {existing_config}. Overwrite?"):
            raise typer.Exit(0)

    try:
        config_path = create_config(target_path, data_file=data_file, strategy=strategy, default_org_id=org_id)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"[green]Created {config_path}[/green]")


@app.command("config")
def show_config(
    path: Optional[Path] = typer.Option(None, "--path", "-p", help="Path to check config for"),
    output_format: str = typer.Option("json", "--format", "-f", help="Output format (json|yaml|text)"),
):
    """Show the resolved configuration for current or specified directory."""
    config = _load_config(path)
    _emit(config.to_dict(), output_format)


if __name__ == "__main__":
    app()
