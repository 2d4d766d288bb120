"""Log display component wrapper."""

from typing import Literal

from rich.text import Text
from textual.widgets import RichLog


class LogDisplay:
    """Wrapper for RichLog widget with helper methods."""

    def __init__(self, widget: RichLog):
        """Initialize with a RichLog widget."""
        self.widget = widget
        # Plain-text copy of everything written, for clipboard export
        self._log_buffer: list[str] = []
        self._mode: Literal["action", "task", "error"] = "action"

    def set_mode(self, mode: Literal["action", "task", "error"]) -> None:
        """Set the current log mode to control coloring."""
        self._mode = mode

    def _style_for_mode(self) -> str:
        """Return the Rich style name for the current mode."""
        if self._mode == "error":
            return "bold red"
        elif self._mode == "task":
            return "blue"
        else:
            return "white"

    def write(self, message: str) -> None:
        """Write a message to the log with the current style."""
        styled = Text(message, style=self._style_for_mode())
        self.widget.write(styled)
        self._log_buffer.append(message)

    def _write_yellow(self, message: str) -> None:
        """Write a message in yellow (for headers)."""
        self.widget.write(Text(message, style="bright_yellow"))
        self._log_buffer.append(message)

    def write_error(self, message: str) -> None:
        """Write an error message in red, then restore previous mode."""
        previous_mode = self._mode
        self.set_mode("error")
        self.write(message)
        self.set_mode(previous_mode)

    def clear(self) -> None:
        """Clear the log."""
        self.widget.clear()
        self._log_buffer.clear()

    def get_text(self) -> str:
        """Return the entire log contents as plain text."""
        return "\n".join(self._log_buffer)

    def write_task_section(self, title: str, *, leading_blank: bool = True) -> None:
        """Write a task section header with separators and spacing."""
        self.set_mode("task")
        if leading_blank:
            self.write("")
        self._write_yellow("=" * 50)
        self._write_yellow(title)
        self._write_yellow("=" * 50)

    def write_section(self, title: str, lines: list[str]) -> None:
        """Write a formatted section with title and lines."""
        self.write("")
        self._write_yellow("=" * 50)
        self._write_yellow(title)
        self._write_yellow("=" * 50)
        for line in lines:
            self.write(line)
        self._write_yellow("=" * 50)
