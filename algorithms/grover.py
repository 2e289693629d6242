"""
Grover's search: display outcome, optimal iteration count and diagram circuit.

The probability distribution returned by ``compute_search_outcome`` is a
fixed stand-in for a converged amplitude-amplification run: the target state
carries ``TARGET_PROBABILITY`` and every other basis state shares the
remainder equally. No amplitudes are tracked and no circuit is executed.
"""
import logging
import math
from dataclasses import dataclass
from fractions import Fraction
from typing import List, Optional, Tuple

from qiskit import QuantumCircuit, QuantumRegister, ClassicalRegister

from algorithms.errors import InvalidInput, require_bitstring, require_positive_int

logger = logging.getLogger(__name__)

TARGET_PROBABILITY = 0.9

# Largest distribution enumerated by default (16 qubits)
DEFAULT_MAX_STATES = 2 ** 16


@dataclass(frozen=True)
class SearchParameters:
    qubit_count: int
    target_state: str

    def __post_init__(self):
        require_positive_int(self.qubit_count, "qubit_count")
        require_bitstring(self.target_state, self.qubit_count, "target_state")

    @property
    def num_states(self) -> int:
        return 2 ** self.qubit_count

    @property
    def target_index(self) -> int:
        return int(self.target_state, 2)


@dataclass(frozen=True)
class StateProbability:
    state: str
    probability: float


def _validated(params) -> SearchParameters:
    if not isinstance(params, SearchParameters):
        raise InvalidInput(f"expected SearchParameters, got {type(params).__name__}")
    return params


def compute_search_outcome(params: SearchParameters,
                           max_states: Optional[int] = DEFAULT_MAX_STATES
                           ) -> List[StateProbability]:
    """
    Probability of every basis state after the search, in index order.

    Args:
        params: qubit count and target bit-string
        max_states: enumeration cap, ``None`` for the full distribution. When
            ``2**qubit_count`` exceeds it, the first ``max_states - 1`` states
            are returned followed by the target state (if not already among
            them), so the result is no longer a complete distribution.

    Returns:
        list of StateProbability
    """
    params = _validated(params)
    n = params.qubit_count
    N = params.num_states
    target = params.target_index

    if N == 1:
        return [StateProbability(params.target_state, 1.0)]

    # exact division; the float of 2**n - 1 overflows from 1024 qubits on
    other = float(Fraction(1.0 - TARGET_PROBABILITY) / (N - 1))

    if max_states is not None:
        require_positive_int(max_states, "max_states")
    if max_states is None or N <= max_states:
        indices = range(N)
    else:
        logger.warning(
            "Search space of %d qubits exceeds %d states; returning a truncated distribution",
            n, max_states,
        )
        indices = list(range(max_states - 1))
        if target >= max_states - 1:
            indices.append(target)
        else:
            indices.append(max_states - 1)

    outcome = [
        StateProbability(
            format(i, f"0{n}b"),
            TARGET_PROBABILITY if i == target else other,
        )
        for i in indices
    ]
    logger.debug("Search outcome for |%s>: %d entries", params.target_state, len(outcome))
    return outcome


def compute_optimal_iteration_count(params: SearchParameters) -> int:
    """
    round(π/4 · √(2^n)) with ties rounded up.

    Evaluated as an exact fraction times a power of two so that it stays
    finite for arbitrarily large qubit counts.
    """
    n = _validated(params).qubit_count
    scale = math.pi / 4 if n % 2 == 0 else math.pi / 4 * math.sqrt(2)
    return math.floor(Fraction(scale) * 2 ** (n // 2) + Fraction(1, 2))


def display_slice(outcome: List[StateProbability], limit: int = 10) -> List[StateProbability]:
    """First *limit* entries of an outcome, the way the results chart shows them."""
    return outcome[:max(0, limit)]


# ---------------------------------------------------------------------------
# Theoretical amplitude curves (closed form, used by the step explorer)
# ---------------------------------------------------------------------------

def grover_amplitudes(qubit_count: int, iterations: int) -> Tuple[float, float]:
    """
    Textbook amplitudes after *iterations* rounds for a single marked state.

    Returns:
        (target_amplitude, other_amplitude) with θ = arcsin(1/√N):
        sin((2k+1)θ) and cos((2k+1)θ)/√(N−1)
    """
    require_positive_int(qubit_count, "qubit_count")
    if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations < 0:
        raise InvalidInput(f"iterations must be a non-negative integer, got {iterations!r}")
    N = 2 ** qubit_count
    theta = math.asin(1 / math.sqrt(N))
    amp_target = math.sin((2 * iterations + 1) * theta)
    amp_other = math.cos((2 * iterations + 1) * theta) / math.sqrt(N - 1)
    return amp_target, amp_other


def success_probability(qubit_count: int, iterations: int) -> float:
    """P(target) = sin²((2k+1)θ)."""
    amp_target, _ = grover_amplitudes(qubit_count, iterations)
    return amp_target ** 2


# ---------------------------------------------------------------------------
# Circuit for the diagram panel
# ---------------------------------------------------------------------------

def _phase_flip_all_ones(qc: QuantumCircuit, n: int):
    """Flip the phase of |1...1> (multi-controlled Z)."""
    if n == 1:
        qc.z(0)
        return
    qc.h(n - 1)
    qc.mcx(list(range(n - 1)), n - 1)
    qc.h(n - 1)


def build_grover_circuit(params: SearchParameters, iterations: Optional[int] = None) -> QuantumCircuit:
    """
    Build the n-qubit Grover circuit for the target state.

    The circuit is only drawn, never run. ``iterations`` defaults to the
    optimal count.
    """
    params = _validated(params)
    n = params.qubit_count
    if iterations is None:
        iterations = compute_optimal_iteration_count(params)
    elif isinstance(iterations, bool) or not isinstance(iterations, int) or iterations < 0:
        raise InvalidInput(f"iterations must be a non-negative integer, got {iterations!r}")

    qr = QuantumRegister(n, "q")
    cr = ClassicalRegister(n, "meas")
    qc = QuantumCircuit(qr, cr)

    # Hadamard initialization
    qc.h(range(n))

    # Qiskit is little-endian: qubit 0 = LSB, so reverse the bitstring
    target_bits = params.target_state[::-1]
    zero_indices = [i for i in range(n) if target_bits[i] == "0"]

    for _ in range(iterations):
        # --- Oracle: flip phase of |target> ---
        if zero_indices:
            qc.x(zero_indices)
        _phase_flip_all_ones(qc, n)
        if zero_indices:
            qc.x(zero_indices)

        # --- Diffuser: 2|s><s| - I ---
        qc.h(range(n))
        qc.x(range(n))
        _phase_flip_all_ones(qc, n)
        qc.x(range(n))
        qc.h(range(n))

    qc.measure(qr, cr)
    return qc
