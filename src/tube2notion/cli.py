"""Command-line interface for tube2notion."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from tube2notion import __version__
from tube2notion.config import get_settings
from tube2notion.core.pipeline import HowToPipeline, PipelineError
from tube2notion.formatting.classifier import BlockClassifier
from tube2notion.formatting.ir import Block, BlockKind
from tube2notion.log import setup_logging
from tube2notion.notion.blocks import ParentRef, build_page

app = typer.Typer(
    name="tube2notion",
    help="Turn YouTube tutorials into structured Notion how-to pages.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"tube2notion v{__version__}")
        raise typer.Exit()


def describe_block(block: Block) -> str:
    """One-line summary of a block's content for the table view."""
    if block.kind is BlockKind.CODE:
        first_line = block.code.split("\n", 1)[0]
        return f"[{block.language}] {first_line}"
    return " | ".join(f"{run.style.value}:{run.text!r}" for run in block.runs)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Turn YouTube tutorials into structured Notion how-to pages.

    Examples:

        tube2notion convert guide.md

        tube2notion convert guide.md --json

        tube2notion publish https://youtu.be/VIDEO_ID --parent-id PAGE_ID --parent-type page

        tube2notion serve --port 8080
    """
    setup_logging("DEBUG" if verbose else get_settings().log_level)


@app.command()
def convert(
    path: Path = typer.Argument(
        ...,
        help="Markdown file to convert",
        exists=True,
        dir_okay=False,
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print Notion block objects as JSON",
    ),
    title: Optional[str] = typer.Option(
        None,
        "--title",
        "-t",
        help="Fallback page title (default: file name)",
    ),
) -> None:
    """Convert a markdown file into blocks without publishing."""
    markdown = path.read_text(encoding="utf-8")

    if as_json:
        page = build_page(markdown, title or path.stem)
        payload = {"title": page.title, "children": page.to_notion_children()}
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    classifier = BlockClassifier()
    blocks = classifier.classify(markdown)

    table = Table(title=f"{path.name}: {len(blocks)} block(s)")
    table.add_column("#", justify="right")
    table.add_column("Kind", no_wrap=True)
    table.add_column("Content")
    for index, block in enumerate(blocks, start=1):
        table.add_row(str(index), block.kind.value, Text(describe_block(block)))
    console.print(table)

    if classifier.last_discarded_lines:
        console.print(
            f"[yellow]Warning:[/yellow] unterminated code fence, "
            f"{classifier.last_discarded_lines} line(s) dropped"
        )


@app.command()
def publish(
    url: str = typer.Argument(..., help="YouTube video URL"),
    parent_id: Optional[str] = typer.Option(
        None,
        "--parent-id",
        "-p",
        help="Notion database or page id (default: NOTION_DEFAULT_PARENT_ID)",
    ),
    parent_type: str = typer.Option(
        "database",
        "--parent-type",
        help="Kind of parent: database or page",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="LLM model to use (default: gemini/gemini-2.0-flash)",
    ),
) -> None:
    """Fetch a transcript, write a how-to guide and publish it to Notion."""
    if parent_type not in ("database", "page"):
        console.print(f"[red]Error:[/red] Invalid parent type: {parent_type}")
        raise typer.Exit(1)

    parent = ParentRef(id=parent_id, type=parent_type) if parent_id else None

    pipeline = HowToPipeline(model=model)
    try:
        with console.status(f"Processing {url}..."):
            page = pipeline.run(url, parent)
    except PipelineError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    finally:
        pipeline.close()

    console.print(f"[green]Success:[/green] {page.url or page.id}")


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", "--host", help="Interface to bind"),
    port: Optional[int] = typer.Option(
        None,
        "--port",
        help="Port to listen on (default: PORT or 8080)",
    ),
) -> None:
    """Run the webhook server."""
    import uvicorn

    from tube2notion.api.app import create_app

    use_port = port or get_settings().port
    console.print(f"[blue]Server running on port {use_port}[/blue]")
    uvicorn.run(create_app(), host=host, port=use_port)


if __name__ == "__main__":
    app()
