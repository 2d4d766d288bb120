"""Detector plugin system."""

from typing import List

from solscan.domain.protocols import Detector

_DETECTORS: List[Detector] = []


def register(detector: Detector) -> None:
    """Register a detector."""
    _DETECTORS.append(detector)


def all_detectors() -> List[Detector]:
    """Get all registered detectors in registration order."""
    return list(_DETECTORS)


def detector_names() -> List[str]:
    """Get the names of all registered detectors."""
    return [detector.name for detector in _DETECTORS]


# Import detectors to trigger their registration; order is registry order
from solscan.detectors import reentrancy  # noqa: E402, F401
from solscan.detectors import overflow  # noqa: E402, F401
from solscan.detectors import access_control  # noqa: E402, F401
