"""
Base classes for Rich-enhanced Click commands and groups.

This module defines:
- `RichGroup`: A custom Click group with Rich-enhanced help rendering.
- `RichCommand`: A custom Click command with Rich-enhanced help rendering.
- `rich_help`: Builds the marked-up help text `RichCommand` renders.
"""

from rich.console import Console
from rich.panel import Panel
import click

console: Console = Console()


def rich_help(command: str, description: str, usage: str, args: dict) -> str:
    """
    Generate Rich-enhanced help text for commands.

    :param command: The command name.
    :param description: Description of the command.
    :param usage: Usage syntax for the command.
    :param args: Dictionary of arguments and their descriptions.
    :return: Formatted Rich help string.
    """
    help_text = f"[bold cyan]{description}[/bold cyan]\n\n"
    help_text += f"[bold yellow]Usage:[/bold yellow]\n    [green]{usage}[/green]\n\n"
    help_text += "[bold yellow]Arguments:[/bold yellow]\n"
    for arg, desc in args.items():
        help_text += f"    [green]{arg}[/green]: {desc}\n"
    return help_text


def options_print(command: click.Command, ctx: click.Context) -> None:
    """
    Print a command's options, one per line, with their help text.

    :param command: The command whose options to list.
    :param ctx: The Click context for the command.
    """
    console.print("[bold yellow]Options:[/bold yellow]")
    for option in command.get_params(ctx):
        if isinstance(option, click.Option):
            console.print(f"- [cyan]{', '.join(option.opts)}[/cyan]: {option.help}")


class RichGroup(click.Group):
    """
    A Click Group that renders its help, subcommands and options with Rich.
    """

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        console.print(
            f"[bold yellow]Usage:[/bold yellow] [cyan]{ctx.info_name}[/cyan] "
            f"[magenta]\\[OPTIONS] COMMAND \\[ARGS]...[/magenta]\n"
        )
        console.print(f"[bold cyan]{self.help.strip()}[/bold cyan]\n")

        console.print("[bold green]Available Commands:[/bold green]")
        for name, command in self.commands.items():
            console.print(f"- [cyan]{name}[/cyan]: [white]{command.short_help}[/white]")
        console.print()

        options_print(self, ctx)


class RichCommand(click.Command):
    """
    A Click Command that uses Rich for rendering help messages.

    Methods:
        format_help(ctx, formatter): Renders the command-level help message with Rich formatting.
    """

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """
        Render the help message for the command using Rich.

        :param ctx: The Click context for the command.
        :param formatter: The Click help formatter.
        """
        help_text: str = self.help
        panel_width = max(len(line) for line in help_text.splitlines()) + 10
        panel_width = min(panel_width, 80)  # Cap the width to avoid excessive size
        console.print(Panel(help_text, expand=False, width=panel_width, border_style="cyan"))

        options_print(self, ctx)
