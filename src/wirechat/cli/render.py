"""CLI renderer for wirechat."""

from __future__ import annotations

from prompt_toolkit import PromptSession
from rich.console import Console
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

PROMPT = "> "
NEXT_INPUT_HINT = "Enter your next message (type '/help' for commands, 'exit' to quit):"
FIRST_INPUT_HINT = "Enter a message (type '/help' for commands, 'exit' to quit):"

HELP_ROWS: tuple[tuple[str, str], ...] = (
    ("/help", "Display this help message"),
    ("/clear", "Clear conversation history"),
    ("/models", "Show available models and current model"),
    ("/model model_name", "Change the model being used"),
    ("exit", "Exit the client"),
)


class Renderer:
    """Terminal output sink using Rich, with prompt_toolkit for input.

    Server-supplied text is always wrapped in ``Text`` or written with
    ``Console.out`` so it is never parsed as Rich markup.
    """

    def __init__(self, console: Console | None = None, prompt_session: PromptSession[str] | None = None) -> None:
        self.console: Console = console or Console()
        self._prompt_session = prompt_session

    def heading(self, title: str) -> None:
        """Render a section heading preceded by a blank line."""
        self.console.print()
        self.console.print(Rule(Text(title, style="bold cyan"), style="cyan"))

    def verbatim(self, text: str) -> None:
        """Write server text exactly as received."""
        end = "" if text.endswith("\n") else "\n"
        self.console.out(text, end=end, highlight=False)

    def line(self, text: str, style: str | None = None) -> None:
        self.console.print(Text(text, style=style or ""))

    def model_header(self, model: str) -> None:
        self.console.print(Text(f"[Model: {model}]", style="bold magenta"))

    def bullet(self, item: str) -> None:
        self.console.print(Text(f"  - {item}", style="green"))

    def info(self, message: str) -> None:
        """Render an info message."""
        self.line(message)

    def success(self, message: str) -> None:
        self.line(message, style="green")

    def error(self, message: str) -> None:
        """Render an error message."""
        text = Text("Error: ", style="bold red")
        text.append(message)
        self.console.print(text)

    def welcome(self, host: str, port: int) -> None:
        """Render the connection banner."""
        text = Text("Connected to server ", style="bold blue")
        text.append(f"({host}:{port})", style="cyan")
        self.console.print(text)
        self.console.print(f"[dim]{FIRST_INPUT_HINT}[/dim]")

    def next_input_hint(self) -> None:
        self.console.print()
        self.console.print(f"[dim]{NEXT_INPUT_HINT}[/dim]")

    def help(self) -> None:
        """Render the local command reference."""
        self.console.print()
        self.console.print("[bold cyan]Available Commands[/bold cyan]")
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Command", style="bold green", no_wrap=True)
        table.add_column("Description", style="dim")
        for command, description in HELP_ROWS:
            table.add_row(command, description)
        self.console.print(table)
        self.console.print()

    def get_user_input(self) -> str:
        """Prompt user for input."""
        if self._prompt_session is None:
            self._prompt_session = PromptSession()
        return self._prompt_session.prompt(PROMPT)


def create_cli_renderer() -> Renderer:
    """Create and return a Renderer instance."""
    return Renderer()
