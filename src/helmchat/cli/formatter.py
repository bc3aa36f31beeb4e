# src/helmchat/cli/formatter.py
import json

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from helmchat.core.models import ParsedCommand

# Initialize the Rich console for high-quality terminal output
console = Console()


class ChatFormatter:
    """
    ChatFormatter: renders engine responses and parser diagnostics.
    """

    def __init__(self, out: Console = console):
        self.console = out

    def show_response(self, response: str, title: str = "helm"):
        """Wraps one engine response in a panel."""
        # Text, not markup: helm output may contain [brackets]
        self.console.print(Panel(Text(response), title=f"[bold cyan]{title}[/bold cyan]", border_style="cyan"))

    def show_parsed(self, parsed: ParsedCommand):
        """
        Lays out a ParsedCommand as a two-column table. Absent fields are
        left out so "not mentioned" stays visible as a gap.
        """
        table = Table(title="Parsed Command", show_header=True, header_style="bold magenta")
        table.add_column("Field", style="cyan")
        table.add_column("Value")

        table.add_row("intent", f"[bold]{parsed.intent.value}[/bold]")
        for key, value in parsed.params.to_dict().items():
            if isinstance(value, (dict, list)):
                value = json.dumps(value)
            table.add_row(key, Text(str(value)))
        table.add_row("original", Text(parsed.original_command, style="dim"))

        self.console.print(table)

    def show_json(self, parsed: ParsedCommand):
        self.console.print_json(json.dumps(parsed.to_dict()))
