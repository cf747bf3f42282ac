"""
Tag Listing Command

Shows which tags the configured context can expand.

Command:
- radius tags: List tag names with the active prefix.
"""

from pathlib import Path
from typing import Optional
import sys
from rich.console import Console
from rich.markup import escape
import click
from radius.commands.base import RichCommand, rich_help
from radius.lib.input import context_build
from radius.lib.log import LOG
from radius.lib.parser import StaticContext

console: Console = Console()


@click.command(
    cls=RichCommand,
    short_help="List available tags",
    help=rich_help(
        command="tags",
        description="List the tags available to templates.",
        usage="radius tags [--tags PATH] [--prefix P]",
        args={"<None>": "no arguments"},
    ),
)
@click.option(
    "--tags",
    "tags_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON tag library to load.",
)
@click.option("--prefix", type=str, help="Tag prefix, e.g. 'radius'.")
def tags(tags_file: Optional[Path], prefix: Optional[str]) -> None:
    """
    List the tag names the context defines.
    """
    try:
        context: StaticContext = context_build(tags_file, prefix)
    except ValueError as e:
        LOG(f"Error building context: {e}")
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(1)

    for name in context.tag_names():
        console.print(f"[cyan]<{escape(context.prefix)}:{name}>[/cyan]")
