import os

import pytest

from config import DEFAULTS, DashboardSettings, get_dashboard_config


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for key in list(os.environ):
        if key.upper().startswith("QAE_"):
            monkeypatch.delenv(key)


def test_defaults_without_environment():
    cfg = get_dashboard_config()

    for key, value in DEFAULTS.items():
        assert cfg[key] == value
    assert cfg["display_limit"] == 10
    assert cfg["warning"] is None


def test_environment_override(monkeypatch):
    monkeypatch.setenv("QAE_GROVER_MAX_QUBITS", "10")
    monkeypatch.setenv("QAE_DISPLAY_LIMIT", "16")

    cfg = get_dashboard_config()

    assert cfg["grover_max_qubits"] == 10
    assert cfg["display_limit"] == 16
    assert cfg["warning"] is None


def test_keyword_override_wins_over_environment(monkeypatch):
    monkeypatch.setenv("QAE_QFT_MAX_QUBITS", "5")

    cfg = get_dashboard_config(qft_max_qubits=4)

    assert cfg["qft_max_qubits"] == 4


def test_bad_values_fall_back_with_warning(monkeypatch):
    monkeypatch.setenv("QAE_DISPLAY_LIMIT", "many")
    monkeypatch.setenv("QAE_QPE_MAX_PRECISION", "0")

    cfg = get_dashboard_config()

    assert cfg["display_limit"] == DEFAULTS["display_limit"]
    assert cfg["qpe_max_precision"] == DEFAULTS["qpe_max_precision"]
    assert "display_limit" in cfg["warning"]
    assert "qpe_max_precision" in cfg["warning"]


def test_inverted_bounds_reset_to_defaults():
    cfg = get_dashboard_config(grover_min_qubits=9, grover_max_qubits=3)

    assert cfg["grover_min_qubits"] == DEFAULTS["grover_min_qubits"]
    assert cfg["grover_max_qubits"] == DEFAULTS["grover_max_qubits"]
    assert "grover_min_qubits" in cfg["warning"]


def test_settings_model_validates_directly():
    settings = DashboardSettings(display_limit=12)

    assert settings.display_limit == 12
    with pytest.raises(ValueError):
        DashboardSettings(max_enumerated_states=0)
