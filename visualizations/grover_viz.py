import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Patch
from qiskit import QuantumCircuit

from algorithms.grover import (
    SearchParameters,
    compute_optimal_iteration_count,
    grover_amplitudes,
    success_probability,
)


def plot_circuit(circuit: QuantumCircuit):
    """Return matplotlib figure of the Grover circuit diagram."""
    fig = circuit.draw("mpl", fold=40)
    return fig


def plot_amplitude_evolution(target_state: str, max_panels: int = 4):
    """
    Multi-panel figure showing how amplitudes across all 2^n states evolve
    from the initial superposition up to the optimal iteration count.
    Demonstrates amplitude amplification visually.
    """
    n = len(target_state)
    N = 2 ** n
    target_idx = int(target_state, 2)
    optimal = compute_optimal_iteration_count(SearchParameters(n, target_state))
    iterations = list(range(min(optimal, max_panels - 1) + 1))

    fig, axes = plt.subplots(1, len(iterations), figsize=(4 * len(iterations), 4),
                             sharey=True, squeeze=False)
    fig.suptitle(
        f"Amplitude Evolution Across Grover Iterations  (target = |{target_state}⟩)",
        fontsize=13, fontweight="bold"
    )

    for k, ax in zip(iterations, axes[0]):
        amp_target, amp_other = grover_amplitudes(n, k)

        amplitudes = np.full(N, amp_other)
        amplitudes[target_idx] = amp_target

        colors = ["#ff6b6b" if i == target_idx else "#4ecdc4" for i in range(N)]
        ax.bar(range(N), amplitudes, color=colors, edgecolor="white", linewidth=0.3)
        ax.axhline(0, color="black", linewidth=0.8)
        ax.set_title(
            f"{'Initial' if k == 0 else f'Iteration {k}'}\nP(target) = {amp_target ** 2:.1%}",
            fontsize=10
        )
        ax.set_xlabel("State index", fontsize=9)
        if k == 0:
            ax.set_ylabel("Amplitude", fontsize=10)
        ax.set_ylim(-1.05, 1.05)
        ax.set_xticks([0, N // 2 - 1, N - 1])
        ax.grid(True, axis="y", alpha=0.3)
        ax.tick_params(labelsize=8)

    fig.legend(
        handles=[
            Patch(facecolor="#ff6b6b", label=f"Target |{target_state}⟩"),
            Patch(facecolor="#4ecdc4", label="All other states"),
        ],
        loc="lower center", ncol=2, fontsize=10, bbox_to_anchor=(0.5, -0.05)
    )
    plt.tight_layout(rect=[0, 0.05, 1, 1])
    return fig


def plot_success_probability_vs_queries(n: int = 4, max_queries: int = 20):
    """
    Line chart comparing the cumulative probability of finding the target
    after k queries: classical random search vs Grover's algorithm.
    """
    N = 2 ** n
    k_vals = np.arange(0, max_queries + 1)

    # Classical: probability of finding target in k independent random draws
    p_classical = 1 - ((N - 1) / N) ** k_vals
    p_grover = np.array([success_probability(n, int(k)) for k in k_vals])

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(k_vals, p_classical * 100, label="Classical random search", color="#e17055",
            linewidth=2.5, marker="o", markersize=4)
    ax.plot(k_vals, p_grover * 100, label="Grover's algorithm", color="#6c5ce7",
            linewidth=2.5, marker="s", markersize=4)

    optimal_k = compute_optimal_iteration_count(SearchParameters(n, "0" * n))
    if optimal_k <= max_queries:
        p_at_optimal = success_probability(n, optimal_k)
        classical_at_optimal = 1 - ((N - 1) / N) ** optimal_k
        ax.annotate(
            f"Grover reaches {p_at_optimal:.0%}\nClassical only {classical_at_optimal:.0%}\n(at {optimal_k} queries)",
            xy=(optimal_k, p_at_optimal * 100),
            xytext=(min(optimal_k + 3, max_queries - 4), p_at_optimal * 100 - 20),
            arrowprops=dict(arrowstyle="->", color="black"),
            fontsize=9, bbox=dict(boxstyle="round,pad=0.3", facecolor="#ffeaa7", alpha=0.8)
        )

    ax.set_xlabel("Number of Queries (k)", fontsize=12)
    ax.set_ylabel("Probability of Finding Target (%)", fontsize=12)
    ax.set_title(f"Success Probability vs Queries  (N = {N} states, {n} qubits)", fontsize=13)
    ax.legend(fontsize=11)
    ax.set_ylim(0, 105)
    ax.set_xlim(0, max_queries)
    ax.grid(True, alpha=0.3)
    plt.tight_layout()
    return fig
