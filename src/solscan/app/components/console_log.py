"""Console log for headless runs."""

from rich.console import Console
from rich.text import Text


class ConsoleLog:
    """Writes pipeline progress to a rich Console."""

    def __init__(self, console: Console | None = None, quiet: bool = False):
        """
        Initialize the console log.

        Args:
            console: Console to write to (defaults to stderr)
            quiet: Suppress progress messages; errors are still written
        """
        self.console = console or Console(stderr=True)
        self.quiet = quiet

    def write(self, message: str) -> None:
        if not self.quiet:
            self.console.print(Text(message))

    def write_error(self, message: str) -> None:
        self.console.print(Text(message, style="bold red"))

    def write_task_section(self, title: str) -> None:
        if not self.quiet:
            self.console.rule(Text(title, style="bright_yellow"))
