import math

import pytest

from algorithms.errors import InvalidInput
from algorithms.qpe import (
    PhaseEstimationParameters,
    build_qpe_circuit,
    compute_phase_estimation_outcome,
)


def test_exact_quarter_phase_with_three_bits():
    outcome = compute_phase_estimation_outcome(PhaseEstimationParameters(3, 0.25))

    assert outcome.numerator == 2
    assert outcome.denominator == 8
    assert outcome.binary_encoding == "010"
    assert outcome.estimated_phase_fraction == 0.25
    assert outcome.absolute_error == 0
    # 100 - 0 - 20/3 = 93.33
    assert outcome.display_confidence_percent == 93


def test_precision_beyond_float_range():
    bits = 1100
    outcome = compute_phase_estimation_outcome(PhaseEstimationParameters(bits, 0.25))

    assert outcome.denominator == 2 ** bits
    assert outcome.numerator == 2 ** (bits - 2)
    assert outcome.binary_encoding == "01" + "0" * (bits - 2)
    assert outcome.estimated_phase_fraction == 0.25
    assert outcome.absolute_error == 0
    assert outcome.display_confidence_percent == 100


def test_full_turn_at_large_precision_stays_fixed_width():
    bits = 1030
    outcome = compute_phase_estimation_outcome(PhaseEstimationParameters(bits, 1.0))

    assert outcome.numerator == 2 ** bits - 1
    assert len(outcome.binary_encoding) == bits
    assert set(outcome.binary_encoding) == {"1"}
    assert outcome.estimated_phase_fraction == 1.0


def test_full_turn_is_clamped_to_fixed_width():
    outcome = compute_phase_estimation_outcome(PhaseEstimationParameters(1, 1.0))

    assert outcome.binary_encoding == "1"
    assert outcome.numerator == 1
    assert outcome.denominator == 2
    assert outcome.estimated_phase_fraction == 0.5
    assert outcome.absolute_error == pytest.approx(0.5)
    # 100 - 50 - 20 = 30
    assert outcome.display_confidence_percent == 30


@pytest.mark.parametrize("bits", [1, 2, 5, 8, 12])
def test_encoding_width_always_matches_precision(bits):
    for phase in (0.0, 0.13, 0.5, 0.999, 1.0):
        outcome = compute_phase_estimation_outcome(PhaseEstimationParameters(bits, phase))
        assert len(outcome.binary_encoding) == bits
        assert 0 <= outcome.numerator < outcome.denominator == 2 ** bits
        assert int(outcome.binary_encoding, 2) == outcome.numerator
        assert 0 <= outcome.display_confidence_percent <= 100


def test_rounding_ties_go_up():
    # 0.3125 * 8 = 2.5 -> 3
    outcome = compute_phase_estimation_outcome(PhaseEstimationParameters(3, 0.3125))

    assert outcome.numerator == 3
    assert outcome.binary_encoding == "011"
    assert outcome.absolute_error == pytest.approx(0.0625)


def test_inexact_phase_reports_error_and_confidence():
    outcome = compute_phase_estimation_outcome(PhaseEstimationParameters(5, 0.33))

    # 0.33 * 32 = 10.56 -> 11
    assert outcome.numerator == 11
    assert outcome.binary_encoding == "01011"
    assert outcome.estimated_phase_fraction == pytest.approx(11 / 32)
    assert outcome.absolute_error == pytest.approx(abs(0.33 - 11 / 32))
    # 100 - 1.375 - 4 = 94.625
    assert outcome.display_confidence_percent == 95


def test_single_bit_confidence_includes_precision_penalty():
    outcome = compute_phase_estimation_outcome(PhaseEstimationParameters(1, 0.24))

    assert outcome.numerator == 0
    # 100 - 24 - 20 = 56
    assert outcome.display_confidence_percent == 56


def test_outcome_is_deterministic():
    params = PhaseEstimationParameters(6, 0.7)

    assert compute_phase_estimation_outcome(params) == compute_phase_estimation_outcome(params)


def test_from_percent_scales_slider_value():
    params = PhaseEstimationParameters.from_percent(5, 25)

    assert params.true_phase_fraction == 0.25
    assert params.precision_bits == 5


def test_resolution_and_decimal_value():
    outcome = compute_phase_estimation_outcome(PhaseEstimationParameters(5, 0.25))

    assert outcome.resolution == 1 / 32
    assert outcome.decimal_value == "8/32 = 0.25"


@pytest.mark.parametrize(
    "bits,phase",
    [(0, 0.5), (-2, 0.5), (2.0, 0.5), (3, -0.01), (3, 1.01), (3, math.nan), (3, math.inf), (3, "0.5")],
)
def test_invalid_phase_parameters(bits, phase):
    with pytest.raises(InvalidInput):
        PhaseEstimationParameters(bits, phase)


def test_calculator_rejects_other_parameter_types():
    with pytest.raises(InvalidInput):
        compute_phase_estimation_outcome({"precision_bits": 3, "true_phase_fraction": 0.25})


def test_build_qpe_circuit_layout():
    circuit = build_qpe_circuit(PhaseEstimationParameters(4, 0.25))

    assert circuit.num_qubits == 5
    assert circuit.num_clbits == 4
    ops = circuit.count_ops()
    assert ops["cp"] == 4
    assert ops["h"] == 4
    assert ops["measure"] == 4
