"""Operational modes that scale a notional energy budget and analysis depth.

Mode values are configuration surface only; detectors do not read them.
"""

from enum import Enum
from typing import Optional

from solscan.domain.protocols import LogSink

STARTING_ENERGY = 100.0
MIN_OPERATING_ENERGY = 10.0


class AnalysisMode(Enum):
    """Operational modes for the analyzer."""

    STRENGTH = "strength"
    SPEED = "speed"
    ARMOR = "armor"
    STEALTH = "stealth"

    @property
    def energy_cost(self) -> float:
        """Energy consumed per second of analysis."""
        return _ENERGY_COST[self]

    @property
    def quantum_aware(self) -> bool:
        return self in (AnalysisMode.ARMOR, AnalysisMode.STRENGTH)

    @property
    def analysis_depth(self) -> int:
        """Recommended traversal depth. Not enforced."""
        return _ANALYSIS_DEPTH[self]

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, name: str) -> "AnalysisMode":
        """
        Map a case-insensitive mode name to a mode.

        Raises:
            ValueError: If the name is not a known mode
        """
        normalized = name.strip().lower() if name else ""
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(
            f"Unknown mode: {name!r}. "
            f"Available modes: {[m.value for m in cls]}"
        )

    def __str__(self) -> str:
        return self.label


_ENERGY_COST = {
    AnalysisMode.STRENGTH: 2.5,
    AnalysisMode.SPEED: 1.0,
    AnalysisMode.ARMOR: 3.0,
    AnalysisMode.STEALTH: 0.5,
}

_ANALYSIS_DEPTH = {
    AnalysisMode.STRENGTH: 10,
    AnalysisMode.SPEED: 3,
    AnalysisMode.ARMOR: 7,
    AnalysisMode.STEALTH: 5,
}

_LABELS = {
    AnalysisMode.STRENGTH: "STRENGTH [eBPF Forensics]",
    AnalysisMode.SPEED: "SPEED [Gas Optimization]",
    AnalysisMode.ARMOR: "ARMOR [Quantum Shield]",
    AnalysisMode.STEALTH: "STEALTH [Covert Monitor]",
}


class ModeController:
    """Tracks the current mode and remaining energy."""

    def __init__(
        self,
        mode: AnalysisMode = AnalysisMode.SPEED,
        log_display: Optional[LogSink] = None,
    ):
        self._mode = mode
        self.energy_level = STARTING_ENERGY
        self.log_display = log_display

    @property
    def mode(self) -> AnalysisMode:
        return self._mode

    def switch_mode(self, mode: AnalysisMode) -> None:
        """Switch to a different operational mode."""
        if self.log_display:
            self.log_display.write(f"Switching from {self._mode} to {mode}")
        self._mode = mode

    def consume_energy(self, duration_secs: float) -> None:
        """Consume energy for the given duration in the current mode."""
        cost = self._mode.energy_cost * duration_secs
        self.energy_level = max(self.energy_level - cost, 0.0)

    def has_energy(self) -> bool:
        return self.energy_level > MIN_OPERATING_ENERGY
