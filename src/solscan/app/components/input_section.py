"""Input section component wrapper."""

from textual.widgets import Input

from solscan.services.pipeline import detect_source_kind


class InputSection:
    """Wrapper for Input widget with helper methods."""

    def __init__(self, widget: Input):
        """Initialize with an Input widget."""
        self.widget = widget

    def get_value(self) -> str:
        """Get the current input value."""
        return self.widget.value.strip()

    def set_value(self, value: str) -> None:
        """Set the input value."""
        self.widget.value = value

    def clear(self) -> None:
        """Clear the input field."""
        self.widget.value = ""

    def get_source_info(self) -> tuple[str, str]:
        """
        Return the entered source reference and its kind.

        Returns:
            Tuple of (source_ref, source_kind) where kind is "file" or "url"
        """
        source_ref = self.get_value()
        return source_ref, detect_source_kind(source_ref)
