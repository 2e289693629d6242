"""
Rough resource estimates shown next to each algorithm, plus the
classical-vs-quantum complexity table.

These are illustrative figures for a state-vector picture (16 bytes per
complex amplitude), not measurements.
"""
import math
from dataclasses import dataclass

from algorithms.errors import InvalidInput

ALGORITHMS = ("grover", "qft", "qpe")

MAX_MEMORY_MB = 1024 * 64
MAX_COMPUTE_TIME_MS = 100_000

COMPLEXITY_TABLE = [
    {"problem": "Unstructured Search",   "classical": "O(N)",
     "quantum": "O(√N) (Grover)",        "speedup": "Quadratic"},
    {"problem": "Integer Factorization", "classical": "O(e^(log N)^(1/3))",
     "quantum": "O((log N)^3) (Shor)",   "speedup": "Exponential"},
    {"problem": "Discrete Logarithm",    "classical": "O(√N)",
     "quantum": "O((log N)^3) (Shor)",   "speedup": "Exponential"},
    {"problem": "Quantum Simulation",    "classical": "O(2^N)",
     "quantum": "O(N^k)",                "speedup": "Exponential"},
    {"problem": "Linear Systems",        "classical": "O(N^3)",
     "quantum": "O(log N) (HHL)",        "speedup": "Exponential"},
]

APPLICATION_DOMAINS = [
    {"title": "Cryptography",
     "description": "Shor's algorithm threatens classical encryption methods like RSA, while "
                    "quantum key distribution enables secure communication."},
    {"title": "Database Search",
     "description": "Grover's algorithm gives a quadratic speedup for searching unstructured "
                    "data, with uses in optimization and constraint satisfaction."},
    {"title": "Materials Science",
     "description": "Quantum simulation can model complex quantum systems when designing new "
                    "materials and pharmaceutical compounds."},
    {"title": "Machine Learning",
     "description": "Quantum machine learning algorithms may speed up training and inference "
                    "for specific tasks."},
    {"title": "Finance",
     "description": "Quantum algorithms can accelerate options pricing, portfolio optimization "
                    "and risk analysis."},
    {"title": "Optimization",
     "description": "Quantum approximate optimization addresses combinatorial problems such as "
                    "routing, scheduling and resource allocation."},
]


@dataclass(frozen=True)
class ResourceEstimate:
    algorithm: str
    qubits: int
    memory_mb: float
    compute_time_ms: float
    complexity_class: str
    demand_level: str


def _memory_mb(qubits: int) -> float:
    if qubits > 30:
        return 1024 * math.floor(1 + qubits / 10)
    return min(2 ** qubits * 16 / (1024 * 1024), MAX_MEMORY_MB)


def _compute_time_ms(algorithm: str, qubits: int) -> float:
    if algorithm == "grover":
        time = 2 ** (qubits / 2) * 0.01 if qubits < 20 else qubits ** 2 * 50
    elif algorithm == "qft":
        time = qubits ** 2 * 0.5
    else:
        time = qubits ** 3 * 0.2
    return min(time, MAX_COMPUTE_TIME_MS)


def _complexity_class(algorithm: str, qubits: int) -> str:
    if algorithm == "grover":
        return f"O(√N) = O(√2^{qubits}) ≈ O(2^{qubits / 2:g})"
    if algorithm == "qft":
        return f"O(n²) = O({qubits}²)"
    return f"O(n³) = O({qubits}³)"


def demand_level(qubits: int) -> str:
    if qubits <= 20:
        return "low"
    if qubits <= 100:
        return "medium"
    if qubits <= 1000:
        return "high"
    return "extreme"


def estimate_resources(algorithm: str, qubits: int) -> ResourceEstimate:
    """Memory, time and complexity figures for *algorithm* on *qubits* qubits."""
    if algorithm not in ALGORITHMS:
        raise InvalidInput(f"unknown algorithm {algorithm!r}; expected one of {ALGORITHMS}")
    if isinstance(qubits, bool) or not isinstance(qubits, int) or qubits < 0:
        raise InvalidInput(f"qubits must be a non-negative integer, got {qubits!r}")

    return ResourceEstimate(
        algorithm=algorithm,
        qubits=qubits,
        memory_mb=_memory_mb(qubits),
        compute_time_ms=_compute_time_ms(algorithm, qubits),
        complexity_class=_complexity_class(algorithm, qubits),
        demand_level=demand_level(qubits),
    )


def format_memory(mb: float) -> str:
    if mb < 1:
        return f"{mb * 1024:.1f} KB"
    if mb < 1024:
        return f"{mb:.1f} MB"
    return f"{mb / 1024:.1f} GB"


def format_time(ms: float) -> str:
    if ms < 1:
        return f"{ms * 1000:.1f} μs"
    if ms < 1000:
        return f"{ms:.1f} ms"
    return f"{ms / 1000:.2f} s"
