import math

import pytest

from algorithms.errors import InvalidInput
from algorithms.qft import QFTParameters, build_qft_circuit, compute_qft_phases, qft_circuit


def test_zero_input_has_no_phase():
    phases = compute_qft_phases(QFTParameters(3, 0))

    assert len(phases) == 8
    assert all(p.angle == 0 for p in phases)
    assert all(p.amplitude == pytest.approx(1 / math.sqrt(8)) for p in phases)


def test_phases_wind_by_input_value():
    phases = compute_qft_phases(QFTParameters(2, 1))

    assert [p.state for p in phases] == ["00", "01", "10", "11"]
    assert [p.angle for p in phases] == pytest.approx([0, math.pi / 2, math.pi, 3 * math.pi / 2])


def test_angles_are_reduced_into_one_turn():
    phases = compute_qft_phases(QFTParameters(3, 5))

    for k, p in enumerate(phases):
        assert 0 <= p.angle < 2 * math.pi
        assert p.angle == pytest.approx(2 * math.pi * ((5 * k) % 8) / 8)


def test_limit_truncates_display():
    assert len(compute_qft_phases(QFTParameters(6, 3), limit=8)) == 8
    assert len(compute_qft_phases(QFTParameters(2, 3), limit=8)) == 4


@pytest.mark.parametrize("n,x", [(0, 0), (2, 4), (2, -1), (3, 1.5), (3, True)])
def test_invalid_qft_parameters(n, x):
    with pytest.raises(InvalidInput):
        QFTParameters(n, x)


def test_input_bits():
    assert QFTParameters(4, 5).input_bits == "0101"


def test_qft_circuit_gate_counts():
    qc = qft_circuit(4)
    ops = qc.count_ops()

    assert ops["h"] == 4
    assert ops["cp"] == 6
    assert ops["swap"] == 2


def test_build_qft_circuit_prepares_input_state():
    qc = build_qft_circuit(QFTParameters(3, 5))

    assert qc.num_qubits == 3
    assert qc.count_ops()["x"] == 2
