"""Operational modes and the energy budget."""

from __future__ import annotations

import pytest

from solscan.domain.modes import AnalysisMode, ModeController


def test_mode_energy() -> None:
    assert AnalysisMode.STRENGTH.energy_cost == 2.5
    assert AnalysisMode.SPEED.energy_cost == 1.0
    assert AnalysisMode.ARMOR.energy_cost == 3.0
    assert AnalysisMode.STEALTH.energy_cost == 0.5


def test_quantum_awareness() -> None:
    assert AnalysisMode.ARMOR.quantum_aware
    assert AnalysisMode.STRENGTH.quantum_aware
    assert not AnalysisMode.SPEED.quantum_aware
    assert not AnalysisMode.STEALTH.quantum_aware


def test_analysis_depth() -> None:
    depths = {mode: mode.analysis_depth for mode in AnalysisMode}
    assert depths == {
        AnalysisMode.STRENGTH: 10,
        AnalysisMode.SPEED: 3,
        AnalysisMode.ARMOR: 7,
        AnalysisMode.STEALTH: 5,
    }


def test_mode_labels() -> None:
    assert str(AnalysisMode.SPEED) == "SPEED [Gas Optimization]"
    assert str(AnalysisMode.ARMOR) == "ARMOR [Quantum Shield]"


def test_mode_parse() -> None:
    assert AnalysisMode.parse("Stealth") is AnalysisMode.STEALTH
    with pytest.raises(ValueError, match="Unknown mode"):
        AnalysisMode.parse("turbo")


def test_analyzer_switching(recording_log) -> None:
    controller = ModeController(log_display=recording_log)
    assert controller.mode is AnalysisMode.SPEED

    controller.switch_mode(AnalysisMode.ARMOR)

    assert controller.mode is AnalysisMode.ARMOR
    assert recording_log.messages == [
        "Switching from SPEED [Gas Optimization] to ARMOR [Quantum Shield]"
    ]


def test_energy_consumption_floors_at_zero() -> None:
    controller = ModeController(AnalysisMode.STRENGTH)
    controller.consume_energy(10)
    assert controller.energy_level == pytest.approx(75.0)
    assert controller.has_energy()

    controller.consume_energy(1000)
    assert controller.energy_level == 0.0
    assert not controller.has_energy()


def test_has_energy_threshold() -> None:
    controller = ModeController()
    controller.consume_energy(90)
    assert controller.energy_level == pytest.approx(10.0)
    assert not controller.has_energy()
