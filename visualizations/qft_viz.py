import math

import matplotlib.pyplot as plt
from qiskit import QuantumCircuit


def plot_circuit(circuit: QuantumCircuit):
    """Return matplotlib figure of the QFT circuit diagram."""
    fig = circuit.draw("mpl")
    return fig


def plot_phase_wheels(phases, input_state: int):
    """
    One unit circle per output basis state with an arrow at the state's
    phase. The wheel of the basis state matching the input is highlighted.

    Args:
        phases: list of QFTPhase from compute_qft_phases
        input_state: integer value of the prepared input
    """
    count = max(1, len(phases))
    fig, axes = plt.subplots(1, count, figsize=(2.2 * count, 2.8), squeeze=False)

    for i, ax in enumerate(axes[0]):
        ax.set_aspect("equal")
        ax.axis("off")
        if i >= len(phases):
            continue
        p = phases[i]
        highlight = i == input_state
        colour = "#3b82f6" if highlight else "#64748b"

        circle = plt.Circle((0, 0), 1, fill=False, linestyle="--", color="#64748b", linewidth=1)
        ax.add_patch(circle)
        ax.plot([-1, 1], [0, 0], color="#cbd5e1", linewidth=0.8)
        ax.plot([0, 0], [-1, 1], color="#cbd5e1", linewidth=0.8)
        ax.annotate(
            "", xy=(0.6 * math.cos(p.angle), 0.6 * math.sin(p.angle)), xytext=(0, 0),
            arrowprops=dict(arrowstyle="->", color=colour, linewidth=2),
        )
        ax.set_xlim(-1.2, 1.2)
        ax.set_ylim(-1.2, 1.2)
        ax.set_title(f"|{p.state}⟩\n{math.degrees(p.angle):.0f}°", fontsize=10,
                     fontweight="bold" if highlight else "normal")

    fig.suptitle("QFT Output Phases", fontsize=12, fontweight="bold")
    plt.tight_layout()
    return fig
