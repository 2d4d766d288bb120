"""Action handler for the welcome banner."""

from solscan.app.components.log_display import LogDisplay
from solscan.detectors import detector_names
from solscan.domain.modes import ModeController


class InitAction:
    """Shows the active mode and the detectors that will run."""

    def __init__(self, log_display: LogDisplay, mode_controller: ModeController):
        self.log_display = log_display
        self.mode_controller = mode_controller

    def execute(self) -> None:
        names = detector_names()
        self.log_display.set_mode("action")
        self.log_display.write_section(
            "Welcome to solscan",
            [
                f"Mode: {self.mode_controller.mode}",
                f"Energy: {self.mode_controller.energy_level:.1f}",
                f"Detectors ({len(names)}): {', '.join(names)}",
                "Enter a contract path or URL and press Run analysis.",
            ],
        )
