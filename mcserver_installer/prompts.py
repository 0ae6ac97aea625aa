from __future__ import annotations

from typing import Optional, Protocol, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt
from rich.table import Table


class Prompter(Protocol):
    """Interactive surface used by the collector and the steps."""

    def ask(self, prompt: str, default: str) -> str:
        ...

    def confirm(self, prompt: str, default: bool) -> bool:
        ...

    def info(self, message: str) -> None:
        ...

    def warn(self, message: str) -> None:
        ...

    def show_summary(self, title: str, rows: Sequence[tuple[str, str]]) -> None:
        ...

    def banner(self, index: int, total: int, title: str) -> None:
        ...


class ConsolePrompter:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def ask(self, prompt: str, default: str) -> str:
        answer = Prompt.ask(prompt, default=default, console=self.console)
        answer = (answer or "").strip()
        return answer or default

    def confirm(self, prompt: str, default: bool) -> bool:
        return Confirm.ask(prompt, default=default, console=self.console)

    def info(self, message: str) -> None:
        self.console.print(f"  {escape(message)}", highlight=False)

    def warn(self, message: str) -> None:
        self.console.print(f"  [yellow]{escape(message)}[/yellow]", highlight=False)

    def show_summary(self, title: str, rows: Sequence[tuple[str, str]]) -> None:
        table = Table(title=title, show_header=False)
        table.add_column("Setting", style="bold")
        table.add_column("Value", style="green")
        for key, value in rows:
            table.add_row(key, value)
        self.console.print(table)

    def banner(self, index: int, total: int, title: str) -> None:
        step = escape(f"[STEP {index}/{total}]")
        self.console.print(f"\n[blue]{step}[/blue] [bold]{escape(title)}[/bold]")
