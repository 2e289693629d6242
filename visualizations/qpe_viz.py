import matplotlib.pyplot as plt
import numpy as np
from qiskit import QuantumCircuit


def plot_circuit(circuit: QuantumCircuit):
    """Return matplotlib figure of the QPE circuit diagram."""
    fig = circuit.draw("mpl", fold=40)
    return fig


def plot_number_line(true_phase: float, outcome):
    """
    Number line over [0, 1] showing every representable n-bit fraction,
    the true phase and the chosen estimate.

    Args:
        true_phase: phase as a fraction of π
        outcome: PhaseEstimationOutcome for that phase
    """
    den = outcome.denominator
    bits = len(outcome.binary_encoding)

    fig, ax = plt.subplots(figsize=(12, 2.6))
    ax.axhline(0, color="#2d3436", linewidth=1.2)

    ticks = np.arange(den + 1) / den
    ax.vlines(ticks, -0.15, 0.15, color="#b2bec3", linewidth=0.8)
    if den <= 16:
        for m, t in enumerate(ticks[:-1]):
            ax.text(t, -0.35, format(m, f"0{bits}b"), ha="center", va="top",
                    fontsize=8, fontfamily="monospace", color="#636e72")

    ax.plot([true_phase], [0], marker="v", markersize=12, color="#6c5ce7",
            label=f"True phase {true_phase:.4f}π")
    ax.plot([outcome.estimated_phase_fraction], [0], marker="o", markersize=10,
            color="#00b894", label=f"Estimate {outcome.decimal_value}")

    ax.set_xlim(-0.02, 1.02)
    ax.set_ylim(-0.8, 0.6)
    ax.set_yticks([])
    ax.set_xlabel("Phase (× π)", fontsize=11)
    ax.set_title(
        f"Representable {bits}-bit phases  (resolution 1/{den} = {outcome.resolution:.5f})",
        fontsize=12,
    )
    ax.legend(loc="upper right", fontsize=9, ncol=2)
    for side in ("top", "right", "left"):
        ax.spines[side].set_visible(False)
    plt.tight_layout()
    return fig


def plot_derivation(true_phase: float, outcome):
    """
    Matplotlib figure with a plain-text breakdown of how the phase becomes
    a binary fraction.
    """
    bits = len(outcome.binary_encoding)
    den = outcome.denominator
    expansion = " + ".join(
        f"{b}/2^{i + 1}" for i, b in enumerate(outcome.binary_encoding)
    )

    lines = [
        f"Quantum Phase Estimation with n = {bits} bits",
        "",
        f"  Step 1 — Scale:    φ × 2ⁿ = {true_phase:.4f} × {den} = {true_phase * den:.4f}",
        f"  Step 2 — Round:    numerator = {outcome.numerator}",
        f"  Step 3 — Encode:   {outcome.numerator} → |{outcome.binary_encoding}⟩",
        f"            0.{outcome.binary_encoding}₂ = {expansion}",
        "",
        f"  Estimate: {outcome.decimal_value}",
        f"  Error:    |{true_phase:.4f} − {outcome.estimated_phase_fraction:.4f}| = {outcome.absolute_error:.5f}",
    ]

    fig, ax = plt.subplots(figsize=(9, 5))
    ax.axis("off")
    ax.text(
        0.03,
        0.95,
        "\n".join(lines),
        transform=ax.transAxes,
        fontsize=12,
        verticalalignment="top",
        fontfamily="monospace",
        bbox=dict(boxstyle="round,pad=0.8", facecolor="#ffeaa7", alpha=0.8),
    )
    ax.set_title("Phase Derivation", fontsize=14, pad=10)
    plt.tight_layout()
    return fig
