"""
Template Rendering Command

Expands a Radius template read from a file, the command line, or stdin.

Command:
- radius render [FILE]: Expand FILE (or stdin) and print the result.
"""

from pathlib import Path
from typing import NoReturn, Optional
import sys
from rich.console import Console
from rich.markup import escape
import click
from radius.commands.base import RichCommand, rich_help
from radius.lib.input import context_build, input_read, input_process
from radius.lib.log import LOG
from radius.lib.parser import StaticContext
from radius.models.dataModel import ParseResult

console: Console = Console(stderr=True)


def error_exit(message: str) -> NoReturn:
    """Report message on stderr and exit with status 1."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    sys.exit(1)


@click.command(
    cls=RichCommand,
    short_help="Expand a template",
    help=rich_help(
        command="render",
        description="Expand every tag in a template.",
        usage="radius render [FILE] [--text TEXT] [--tags PATH] [--prefix P] [--output PATH]",
        args={
            "[FILE]": "Template to expand; stdin if omitted.",
        },
    ),
)
@click.argument(
    "file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=False,
)
@click.option("--text", type=str, help="Template given directly instead of FILE.")
@click.option(
    "--tags",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON tag library to load.",
)
@click.option("--prefix", type=str, help="Tag prefix, e.g. 'radius'.")
@click.option(
    "--output",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Write the result here instead of stdout.",
)
def render(
    file: Optional[Path],
    text: Optional[str],
    tags: Optional[Path],
    prefix: Optional[str],
    output: Optional[Path],
) -> None:
    """
    Expand a template and write the result.
    """
    try:
        context: StaticContext = context_build(tags, prefix)
        template: str = input_read(file, text)
    except (ValueError, IOError) as e:
        LOG(f"Render setup failed: {e}")
        error_exit(str(e))

    result: ParseResult = input_process(template, context)
    if not result.success:
        error_exit(result.error or "unknown error")

    if not output:
        click.echo(result.text, nl=False)
        return

    try:
        output.write_text(result.text, encoding="utf-8")
    except OSError as e:
        LOG(f"Error writing {output}: {e}")
        error_exit(f"Cannot write {output}: {e}")
    LOG(f"Wrote {len(result.text)} characters to {output}")
