"""
Quantum Phase Estimation read-out.

Given a true phase (as a fraction in [0, 1]) and a number of precision bits,
``compute_phase_estimation_outcome`` returns the best ``precision_bits``-bit
binary fraction, its encoding and its error. The confidence percentage is a
display heuristic only, not a statistical confidence interval.
"""
import logging
import math
from dataclasses import dataclass
from fractions import Fraction

from qiskit import QuantumCircuit, QuantumRegister, ClassicalRegister

from algorithms.errors import InvalidInput, require_positive_int, round_half_up
from algorithms.qft import qft_circuit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PhaseEstimationParameters:
    precision_bits: int
    true_phase_fraction: float

    def __post_init__(self):
        require_positive_int(self.precision_bits, "precision_bits")
        phase = self.true_phase_fraction
        if isinstance(phase, bool) or not isinstance(phase, (int, float)):
            raise InvalidInput(f"true_phase_fraction must be a number, got {phase!r}")
        if not math.isfinite(phase) or not 0.0 <= phase <= 1.0:
            raise InvalidInput(f"true_phase_fraction must lie in [0, 1], got {phase}")

    @classmethod
    def from_percent(cls, precision_bits: int, phase_value: int) -> "PhaseEstimationParameters":
        """Build from a 0-100 slider value (25 means a phase of 0.25π)."""
        return cls(precision_bits, phase_value / 100)


@dataclass(frozen=True)
class PhaseEstimationOutcome:
    estimated_phase_fraction: float
    binary_encoding: str
    numerator: int
    denominator: int
    absolute_error: float
    display_confidence_percent: int

    @property
    def resolution(self) -> float:
        """Spacing between representable phases, 1/2^n."""
        return 1 / self.denominator

    @property
    def decimal_value(self) -> str:
        return f"{self.numerator}/{self.denominator} = {self.estimated_phase_fraction:g}"


def compute_phase_estimation_outcome(params: PhaseEstimationParameters) -> PhaseEstimationOutcome:
    """
    Closest ``precision_bits``-bit fraction to the true phase.

    The numerator is rounded half up. A phase that rounds up to a full turn
    (numerator == 2^n) is clamped to 2^n − 1 so the encoding stays exactly
    ``precision_bits`` wide.
    """
    if not isinstance(params, PhaseEstimationParameters):
        raise InvalidInput(f"expected PhaseEstimationParameters, got {type(params).__name__}")

    bits = params.precision_bits
    phase = params.true_phase_fraction
    denominator = 2 ** bits

    # Fractions keep 2**bits out of float arithmetic, which overflows past 1023 bits
    exact_phase = Fraction(phase)
    numerator = math.floor(exact_phase * denominator + Fraction(1, 2))
    if numerator >= denominator:
        logger.debug("Phase %s rounds to a full turn with %d bits; clamping", phase, bits)
        numerator = denominator - 1

    exact_estimate = Fraction(numerator, denominator)
    estimated = float(exact_estimate)
    error = float(abs(exact_phase - exact_estimate))
    confidence = round_half_up(100 - error * 100 - 20 / bits)

    return PhaseEstimationOutcome(
        estimated_phase_fraction=estimated,
        binary_encoding=format(numerator, f"0{bits}b"),
        numerator=numerator,
        denominator=denominator,
        absolute_error=error,
        display_confidence_percent=max(0, min(100, confidence)),
    )


def build_qpe_circuit(params: PhaseEstimationParameters) -> QuantumCircuit:
    """
    QPE circuit for U = P(2π·phase) acting on its eigenstate |1⟩.

    ``precision_bits`` counting qubits each control U^(2^k); an inverse QFT
    then maps the accumulated phase onto the counting register. Drawn only,
    never executed.
    """
    if not isinstance(params, PhaseEstimationParameters):
        raise InvalidInput(f"expected PhaseEstimationParameters, got {type(params).__name__}")

    n = params.precision_bits
    count_reg = QuantumRegister(n, "count")
    eigen_reg = QuantumRegister(1, "eigen")
    cr = ClassicalRegister(n, "meas")
    qc = QuantumCircuit(count_reg, eigen_reg, cr)

    # Eigenstate of the phase gate
    qc.x(eigen_reg[0])

    # Hadamard on counting register
    qc.h(count_reg)

    # Controlled-U^(2^k) for each counting qubit k
    angle = 2 * math.pi * params.true_phase_fraction
    for k in range(n):
        qc.cp(angle * 2 ** k, count_reg[k], eigen_reg[0])

    # Inverse QFT on counting register
    qc.append(qft_circuit(n).inverse().to_gate(label="QFT†"), count_reg)

    qc.measure(count_reg, cr)
    return qc
