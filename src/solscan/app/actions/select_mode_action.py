"""Action handler for operational mode selection."""

from solscan.app.components.log_display import LogDisplay
from solscan.domain.modes import AnalysisMode, ModeController


class SelectModeAction:
    """Handles operational mode changes."""

    def __init__(self, log_display: LogDisplay, mode_controller: ModeController):
        """Initialize with log display and the app's mode controller."""
        self.log_display = log_display
        self.mode_controller = mode_controller

    def execute(self, mode: AnalysisMode) -> None:
        """
        Switch mode and log the new mode's parameters.

        Args:
            mode: The selected operational mode
        """
        self.log_display.set_mode("action")
        if mode == self.mode_controller.mode:
            self.log_display.write(f"Already in {mode} mode")
            return
        self.mode_controller.switch_mode(mode)
        self.log_display.write(
            f"Analysis depth: {mode.analysis_depth}, energy cost: {mode.energy_cost}x, "
            f"energy remaining: {self.mode_controller.energy_level:.1f}"
        )
