"""
Main CLI entry point for camelintent.
"""

# Standard library imports
import importlib.metadata
import json
from collections.abc import Sequence
from pathlib import Path

# Third-party imports
import typer
from rich.prompt import Prompt

# Local imports
from camelintent import __version__
from camelintent.catalog import load_catalog
from camelintent.config import CamelIntentConfig, ConfigError, configure_logging, load_config
from camelintent.dependencies import LibraryNameParser, extract_artifact_ids, read_library_names
from camelintent.errors import CamelIntentError
from camelintent.intention import AddEndpointIntention
from camelintent.models import EditorContext
from camelintent.resolver import ComponentCatalogResolver
from camelintent.utils.rich_console import get_console, get_console_logger, print_table


console = get_console()

app = typer.Typer(
    help="camelintent - find the Camel endpoint components usable in a route and insert their URI prefix.",
    add_completion=False,
)

LibraryOption = typer.Option(
    None, "--library", "-l", help="Library display name, e.g. 'Maven: org.apache.camel:camel-ftp:2.18.0'"
)
LibrariesFileOption = typer.Option(
    None, "--libraries-file", "-f", help="File with one library display name per line"
)
CatalogOption = typer.Option(
    None, "--catalog", "-c", help="Catalog JSON file or directory of component schemas"
)
ConsumerOption = typer.Option(
    False, "--consumer/--producer", help="Resolve for a consumer (from) or producer (to) endpoint"
)


class RichPromptChooser:
    """Lets the user pick a component name on the console."""

    def choose(self, names: Sequence[str], title: str, ad_text: str) -> str | None:
        print_table(["#", "Component"], [[index, name] for index, name in enumerate(names, 1)], title=title, caption=ad_text)
        answer = Prompt.ask("Component (empty to cancel)", default="", show_default=False)
        answer = answer.strip()
        if not answer:
            return None
        if answer.isdigit() and 1 <= int(answer) <= len(names):
            return names[int(answer) - 1]
        return answer


class FixedChooser:
    """Chooser returning a name given up front."""

    def __init__(self, choice: str) -> None:
        self.choice = choice

    def choose(self, names: Sequence[str], title: str, ad_text: str) -> str | None:
        return self.choice


def print_main_help_and_exit():
    command_rows = [
        ["components", "List the components usable with the given libraries"],
        ["artifacts", "List the Camel artifact ids found in the given libraries"],
        ["insert", "Insert a component URI prefix into a file"],
        ["version", "Show camelintent version"],
    ]
    print_table(["Subcommand", "Description"], command_rows, title="Available camelintent Subcommands")
    typer.echo("\nFor more information about a subcommand, run:")
    typer.echo("  camelintent <subcommand> --help")
    raise typer.Exit(1)


def _config(ctx: typer.Context) -> CamelIntentConfig:
    return ctx.obj


def _library_names(libraries: list[str] | None, libraries_file: Path | None) -> list[str]:
    names = list(libraries or [])
    if libraries_file is not None:
        try:
            names.extend(read_library_names(libraries_file))
        except (OSError, UnicodeDecodeError) as error:
            console.print(f"[bold red]Error:[/bold red] Cannot read {libraries_file}: {error}")
            raise typer.Exit(1)
    return names


def _build_resolver(
    config: CamelIntentConfig, library_names: list[str], catalog_path: Path | None
) -> ComponentCatalogResolver:
    try:
        catalog = load_catalog(catalog_path or config.catalog_path)
    except CamelIntentError as error:
        console.print(f"[bold red]Catalog Error:[/bold red] {error.message}")
        raise typer.Exit(1)
    parser = LibraryNameParser(group_id=config.group_id, prefix=config.library_prefix)
    return ComponentCatalogResolver(catalog, lambda: library_names, parser)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """
    camelintent - Camel endpoint component resolver
    """
    try:
        ctx.obj = load_config()
    except ConfigError as error:
        console.print(f"[bold red]Configuration Error:[/bold red] {error.message}")
        raise typer.Exit(1)
    configure_logging(ctx.obj)
    get_console_logger(ctx.obj)

    if ctx.invoked_subcommand is None:
        print_main_help_and_exit()


@app.command()
def components(
    ctx: typer.Context,
    library: list[str] = LibraryOption,
    libraries_file: Path = LibrariesFileOption,
    catalog: Path = CatalogOption,
    consumer: bool = ConsumerOption,
    as_json: bool = typer.Option(False, "--json", help="Print the names as a JSON array"),
):
    """List the components usable with the given libraries, sorted by name."""
    logger = get_console_logger()
    resolver = _build_resolver(_config(ctx), _library_names(library, libraries_file), catalog)
    names = resolver.components(consumer)

    if as_json:
        typer.echo(json.dumps(names))
        return
    if not names:
        console.print("[yellow]No Camel components available for these libraries[/yellow]")
        return

    role = "consumer" if consumer else "producer"
    print_table(["Component"], [[name] for name in names], title=f"Camel components ({role})", caption=AddEndpointIntention.ad_text(names))
    logger.debug(f"Listed {len(names)} components")


@app.command()
def artifacts(
    ctx: typer.Context,
    library: list[str] = LibraryOption,
    libraries_file: Path = LibrariesFileOption,
):
    """List the Camel artifact ids found in the given libraries."""
    config = _config(ctx)
    parser = LibraryNameParser(group_id=config.group_id, prefix=config.library_prefix)
    artifact_ids = sorted(extract_artifact_ids(_library_names(library, libraries_file), parser))
    if not artifact_ids:
        console.print("[yellow]No Camel artifacts found[/yellow]")
        return
    print_table(["Artifact"], [[artifact_id] for artifact_id in artifact_ids], title="Camel artifacts")


@app.command()
def insert(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="Route source file (Java or XML)"),
    offset: int = typer.Option(..., "--offset", "-o", help="Caret offset in the file"),
    library: list[str] = LibraryOption,
    libraries_file: Path = LibrariesFileOption,
    catalog: Path = CatalogOption,
    consumer: bool = ConsumerOption,
    choice: str | None = typer.Option(None, "--choice", help="Component to insert, skips the prompt"),
    in_place: bool = typer.Option(False, "--in-place", "-i", help="Write the result back to the file"),
):
    """Insert '<component>:' at the given offset of a file."""
    logger = get_console_logger()
    try:
        document = file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        console.print(f"[bold red]Error:[/bold red] Cannot read {file}: {error}")
        raise typer.Exit(1)

    resolver = _build_resolver(_config(ctx), _library_names(library, libraries_file), catalog)
    intention = AddEndpointIntention(resolver)
    chooser = FixedChooser(choice) if choice else RichPromptChooser()
    context = EditorContext(element_text="", consumer_context=consumer)

    try:
        result = intention.invoke(context, document, offset, chooser)
    except CamelIntentError as error:
        console.print(f"[bold red]Error:[/bold red] {error.message}")
        raise typer.Exit(1)

    if result is None:
        console.print("[yellow]Nothing inserted[/yellow]")
        return
    if not result.changed:
        console.print(f"[yellow]Nothing inserted at offset {offset}[/yellow]")
        return

    if in_place:
        file.write_text(result.text, encoding="utf-8")
        logger.success(f"Inserted '{result.inserted}' into {file}, caret now at {result.caret}")
    else:
        typer.echo(result.text, nl=False)


@app.command()
def version():
    """Show the camelintent version."""
    try:
        installed = importlib.metadata.version("camelintent")
    except importlib.metadata.PackageNotFoundError:
        installed = __version__
    typer.echo(f"camelintent version: {installed}")


if __name__ == "__main__":
    app()
