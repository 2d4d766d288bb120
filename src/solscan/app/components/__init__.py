"""UI components for the TUI application."""

from solscan.app.components.console_log import ConsoleLog
from solscan.app.components.input_section import InputSection
from solscan.app.components.log_display import LogDisplay

__all__ = [
    "ConsoleLog",
    "InputSection",
    "LogDisplay",
]
