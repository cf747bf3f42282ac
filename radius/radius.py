"""
Radius Main Module.

This module serves as the main entry point for Radius, a tag-based
template expander.

Features:
- Expands templates from files, the command line, or stdin
- Loads tag libraries from JSON, defaulting to the user config directory
- Lists the tags available to templates

Examples:
    Expand a file:
        $ radius render page.txt

    Expand a direct query with a custom library and prefix:
        $ radius render --tags tags.json --prefix r --text "<r:hello />"
        $ cat page.txt | radius render

    List available tags:
        $ radius tags --tags tags.json
"""

from typing import Final
import click
from radius.commands.base import RichGroup
from radius.commands.render import render
from radius.commands.tags import tags

__version__: Final[str] = "0.1.0"


@click.group(
    cls=RichGroup,
    help="""
    Radius template expander

    Expand prefixed tags such as <radius:name attr="v" /> in text documents.
    """,
)
@click.version_option(__version__, "-V", "--version", prog_name="radius")
def cli() -> None:
    """
    The root Click command group for Radius.
    """
    pass


# Explicitly annotate `cli` as `click.Group` for static type checking
cli: click.Group = cli

cli.add_command(render)
cli.add_command(tags)


def main() -> None:
    """Console script entry point."""
    cli()
