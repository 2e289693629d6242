"""
Quantum Fourier Transform on a computational basis state.

For an input |x⟩ on n qubits the QFT produces the uniform superposition
(1/√N) Σ_k e^{2πi·x·k/N} |k⟩, so every output state has the same magnitude
and a phase that winds x times around the circle across k = 0..N−1.
"""
import logging
import math
from dataclasses import dataclass
from typing import List, Optional

from qiskit import QuantumCircuit

from algorithms.errors import InvalidInput, require_positive_int

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QFTParameters:
    num_qubits: int
    input_state: int

    def __post_init__(self):
        require_positive_int(self.num_qubits, "num_qubits")
        if isinstance(self.input_state, bool) or not isinstance(self.input_state, int):
            raise InvalidInput(f"input_state must be an integer, got {self.input_state!r}")
        if not 0 <= self.input_state < 2 ** self.num_qubits:
            raise InvalidInput(
                f"input_state {self.input_state} is outside [0, {2 ** self.num_qubits})"
            )

    @property
    def input_bits(self) -> str:
        return format(self.input_state, f"0{self.num_qubits}b")


@dataclass(frozen=True)
class QFTPhase:
    state: str
    angle: float       # radians in [0, 2π)
    amplitude: float


def compute_qft_phases(params: QFTParameters, limit: Optional[int] = None) -> List[QFTPhase]:
    """Phase and magnitude of each output basis state, in index order."""
    if not isinstance(params, QFTParameters):
        raise InvalidInput(f"expected QFTParameters, got {type(params).__name__}")
    n = params.num_qubits
    N = 2 ** n
    count = N if limit is None else min(N, max(0, limit))
    amplitude = 1 / math.sqrt(N)

    phases = []
    for k in range(count):
        # integer reduction first keeps the angle exact for large k
        winding = (params.input_state * k) % N
        phases.append(QFTPhase(format(k, f"0{n}b"), 2 * math.pi * winding / N, amplitude))

    logger.debug("QFT phases for |%s>: %d states", params.input_bits, len(phases))
    return phases


def qft_circuit(n: int, name: str = "QFT") -> QuantumCircuit:
    """Textbook QFT: H and controlled phase rotations, then reverse qubit order."""
    require_positive_int(n, "n")
    qc = QuantumCircuit(n, name=name)
    for i in range(n):
        qc.h(i)
        for j in range(i + 1, n):
            qc.cp(2 * math.pi / 2 ** (j - i + 1), j, i)
    for i in range(n // 2):
        qc.swap(i, n - i - 1)
    return qc


def build_qft_circuit(params: QFTParameters) -> QuantumCircuit:
    """Prepare |input_state⟩ and apply the QFT (drawn only, never executed)."""
    if not isinstance(params, QFTParameters):
        raise InvalidInput(f"expected QFTParameters, got {type(params).__name__}")
    n = params.num_qubits
    qc = QuantumCircuit(n)

    # Qiskit is little-endian: qubit 0 = LSB
    for i, bit in enumerate(reversed(params.input_bits)):
        if bit == "1":
            qc.x(i)
    qc.barrier()
    qc.compose(qft_circuit(n), inplace=True)
    return qc
