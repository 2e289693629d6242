"""Qiskit source shown in each algorithm tab's "Python Implementation" panel."""

GROVER_SNIPPET = '''\
import numpy as np
from qiskit import QuantumCircuit


def phase_flip_all_ones(qc, n):
    qc.h(n - 1)
    qc.mcx(list(range(n - 1)), n - 1)
    qc.h(n - 1)


def create_grover_circuit(marked_state: str) -> QuantumCircuit:
    n = len(marked_state)
    qc = QuantumCircuit(n)

    # Uniform superposition over all 2^n states
    qc.h(range(n))

    iterations = round(np.pi / 4 * np.sqrt(2 ** n))
    zeros = [i for i, bit in enumerate(reversed(marked_state)) if bit == "0"]

    for _ in range(iterations):
        # Oracle: flip the phase of the marked state
        if zeros:
            qc.x(zeros)
        phase_flip_all_ones(qc, n)
        if zeros:
            qc.x(zeros)

        # Diffuser: reflect every amplitude about the mean
        qc.h(range(n))
        qc.x(range(n))
        phase_flip_all_ones(qc, n)
        qc.x(range(n))
        qc.h(range(n))

    qc.measure_all()
    return qc
'''

QFT_SNIPPET = '''\
import numpy as np
from qiskit import QuantumCircuit


def create_qft_circuit(n_qubits: int) -> QuantumCircuit:
    qc = QuantumCircuit(n_qubits)

    for i in range(n_qubits):
        qc.h(i)
        for j in range(i + 1, n_qubits):
            # Controlled phase rotation by 2π / 2^(j-i+1)
            qc.cp(2 * np.pi / 2 ** (j - i + 1), j, i)

    # Reverse the qubit order
    for i in range(n_qubits // 2):
        qc.swap(i, n_qubits - i - 1)

    return qc
'''

QPE_SNIPPET = '''\
import numpy as np
from qiskit import QuantumCircuit


def create_qft_circuit(n_qubits: int) -> QuantumCircuit:
    qc = QuantumCircuit(n_qubits)
    for i in range(n_qubits):
        qc.h(i)
        for j in range(i + 1, n_qubits):
            qc.cp(2 * np.pi / 2 ** (j - i + 1), j, i)
    for i in range(n_qubits // 2):
        qc.swap(i, n_qubits - i - 1)
    return qc


def quantum_phase_estimation(phase: float, n_precision: int) -> QuantumCircuit:
    # n_precision counting qubits + 1 eigenstate qubit
    qc = QuantumCircuit(n_precision + 1, n_precision)

    # |1> is an eigenstate of the phase gate P(2π·phase)
    qc.x(n_precision)

    # Counting register in superposition
    qc.h(range(n_precision))

    # Controlled U^(2^k) on the k-th counting qubit
    for k in range(n_precision):
        qc.cp(2 * np.pi * phase * 2 ** k, k, n_precision)

    # Inverse QFT maps the phase onto the counting register
    qc.append(create_qft_circuit(n_precision).inverse(), range(n_precision))

    qc.measure(range(n_precision), range(n_precision))
    return qc
'''

IMPLEMENTATION_SNIPPETS = {
    "grover": GROVER_SNIPPET,
    "qft": QFT_SNIPPET,
    "qpe": QPE_SNIPPET,
}
