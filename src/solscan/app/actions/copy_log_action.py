"""Action handler for copying the analysis log."""

from textual.app import App

from solscan.app.components.log_display import LogDisplay


class CopyLogAction:
    """Puts the plain-text log on the clipboard."""

    def __init__(self, log_display: LogDisplay, app: App):
        self.log_display = log_display
        self.app = app

    def execute(self) -> bool:
        """
        Copy the log.

        Returns:
            True if there was anything to copy
        """
        text = self.log_display.get_text()
        if not text.strip():
            self.app.notify("Log is empty", severity="warning")
            return False

        self.app.copy_to_clipboard(text)
        self.app.notify(f"Copied {len(text.splitlines())} log lines")
        return True
