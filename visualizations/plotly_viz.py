"""
Interactive Plotly chart functions for the Quantum Algorithm Explorer.
All figures use plotly_dark template with matching background colors.
"""
import math

import numpy as np
import plotly.graph_objects as go

from algorithms.grover import display_slice, grover_amplitudes

_PAPER_BG = "#0E1117"
_PLOT_BG  = "#111827"
_FONT_CLR = "#E0E0E0"

_TARGET_CLR = "#ff6b6b"
_OTHER_CLR  = "#4ecdc4"

_DARK_LAYOUT = dict(
    template="plotly_dark",
    paper_bgcolor=_PAPER_BG,
    plot_bgcolor=_PLOT_BG,
    font=dict(color=_FONT_CLR),
)


# ---------------------------------------------------------------------------
# Grover – outcome probabilities
# ---------------------------------------------------------------------------

def plotly_search_outcome(outcome, target_state: str, limit: int = 10) -> go.Figure:
    """
    Interactive bar chart of the post-search probabilities.
    Only the first *limit* basis states are drawn; the target bar is red and
    annotated even when it lies beyond the limit.
    """
    shown = display_slice(outcome, limit)
    if target_state not in [e.state for e in shown]:
        shown += [e for e in outcome if e.state == target_state]

    states = [e.state for e in shown]
    probs  = [e.probability for e in shown]
    colors = [_TARGET_CLR if s == target_state else _OTHER_CLR for s in states]

    fig = go.Figure(go.Bar(
        x=states,
        y=probs,
        marker_color=colors,
        hovertemplate=(
            "<b>State |%{x}⟩</b><br>"
            "Probability: %{y:.2%}"
            "<extra></extra>"
        ),
    ))

    fig.update_layout(
        **_DARK_LAYOUT,
        title=dict(
            text=f"Measurement Probabilities — Target |{target_state}⟩",
            font=dict(size=15),
        ),
        xaxis=dict(title="Basis State", tickangle=-45, type="category"),
        yaxis=dict(title="Probability", range=[0, 1.05]),
        showlegend=False,
        height=400,
    )

    if target_state in states:
        idx = states.index(target_state)
        fig.add_annotation(
            x=target_state,
            y=probs[idx],
            text=f"Target<br>{probs[idx]:.1%}",
            showarrow=True,
            arrowhead=2,
            arrowcolor=_TARGET_CLR,
            font=dict(color=_TARGET_CLR, size=12),
            yshift=10,
        )

    return fig


# ---------------------------------------------------------------------------
# Grover – complexity comparison
# ---------------------------------------------------------------------------

def plotly_complexity_comparison(max_n: int = 256) -> go.Figure:
    """
    Interactive line chart: Classical O(N) vs Grover O(√N).
    Legend items are clickable to toggle lines.
    """
    N_vals    = np.arange(2, max_n + 1)
    classical = N_vals.astype(float)
    grover    = np.sqrt(N_vals)

    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=N_vals, y=classical,
        mode="lines",
        name="Classical  O(N)",
        line=dict(color="#e17055", width=2.5),
        hovertemplate="N=%{x}<br>Classical queries: %{y:.1f}<extra></extra>",
    ))

    fig.add_trace(go.Scatter(
        x=N_vals, y=grover,
        mode="lines",
        name="Grover  O(√N)",
        line=dict(color="#6c5ce7", width=2.5),
        hovertemplate="N=%{x}<br>Grover queries: %{y:.1f}<extra></extra>",
    ))

    fig.add_annotation(
        x=max_n, y=math.sqrt(max_n),
        text=f"Speedup at N={max_n}:<br>{max_n / math.sqrt(max_n):.0f}×",
        showarrow=True,
        arrowhead=2,
        arrowcolor="#a29bfe",
        font=dict(color="#a29bfe", size=12),
        bgcolor=_PAPER_BG,
        bordercolor="#a29bfe",
        ax=-80, ay=-30,
    )

    fig.update_layout(
        **_DARK_LAYOUT,
        title="Search Complexity: Classical vs Grover's",
        xaxis=dict(title="Problem Size (N)"),
        yaxis=dict(title="Queries"),
        legend=dict(
            bgcolor=_PAPER_BG,
            bordercolor="#444",
            borderwidth=1,
        ),
        height=420,
    )

    return fig


# ---------------------------------------------------------------------------
# Grover – step-by-step amplitude chart
# ---------------------------------------------------------------------------

def plotly_amplitude_step(target_state: str, k: int) -> go.Figure:
    """
    Single-panel amplitude bar chart for Grover iteration k (0 = just H gates).
    Hover shows amplitude and probability (amplitude²).
    """
    n = len(target_state)
    N = 2 ** n
    target_idx = int(target_state, 2)

    amp_target, amp_other = grover_amplitudes(n, k)

    amplitudes = [amp_target if i == target_idx else amp_other for i in range(N)]
    probs      = [a ** 2 for a in amplitudes]
    colors     = [_TARGET_CLR if i == target_idx else _OTHER_CLR for i in range(N)]
    labels     = [format(i, f"0{n}b") for i in range(N)]

    fig = go.Figure(go.Bar(
        x=labels,
        y=amplitudes,
        marker_color=colors,
        customdata=probs,
        hovertemplate=(
            "<b>State |%{x}⟩</b><br>"
            "Amplitude: %{y:.4f}<br>"
            "Probability: %{customdata:.2%}"
            "<extra></extra>"
        ),
    ))

    if k == 0:
        title_str = "Initial State (after H gates) — Uniform superposition"
    else:
        title_str = f"After Iteration {k} — P(target) = {amp_target ** 2:.1%}"

    fig.update_layout(
        **_DARK_LAYOUT,
        title=dict(text=title_str, font=dict(size=15)),
        xaxis=dict(title="Basis State", tickangle=-45, type="category"),
        yaxis=dict(title="Amplitude", range=[-1.1, 1.1]),
        showlegend=False,
        height=380,
    )

    # Dashed zero line
    fig.add_hline(y=0, line_dash="dash", line_color="#888", line_width=1)

    fig.add_annotation(
        x=labels[target_idx],
        y=amp_target,
        text=f"Target<br>P={amp_target ** 2:.1%}",
        showarrow=True,
        arrowhead=2,
        arrowcolor=_TARGET_CLR,
        font=dict(color=_TARGET_CLR, size=12),
        yshift=8,
    )

    return fig


# ---------------------------------------------------------------------------
# QFT – output phases on the unit circle
# ---------------------------------------------------------------------------

def plotly_qft_phases(phases, input_bits: str) -> go.Figure:
    """
    Polar plot with one arrow per output basis state. Each arrow has the
    state's amplitude as its length and its phase as its angle.
    """
    fig = go.Figure()

    for p in phases:
        degrees = math.degrees(p.angle)
        fig.add_trace(go.Scatterpolar(
            r=[0, p.amplitude],
            theta=[degrees, degrees],
            mode="lines+markers",
            name=f"|{p.state}⟩",
            marker=dict(size=[0, 9]),
            line=dict(width=2.5),
            hovertemplate=(
                f"<b>|{p.state}⟩</b><br>"
                f"Phase: {degrees:.1f}°<br>"
                f"Amplitude: {p.amplitude:.4f}"
                "<extra></extra>"
            ),
        ))

    fig.update_layout(
        **_DARK_LAYOUT,
        title=f"QFT Output Phases for Input |{input_bits}⟩",
        polar=dict(
            bgcolor=_PLOT_BG,
            radialaxis=dict(range=[0, max([p.amplitude for p in phases], default=1) * 1.15],
                            showticklabels=False),
            angularaxis=dict(direction="counterclockwise", rotation=0),
        ),
        legend=dict(bgcolor=_PAPER_BG, bordercolor="#444", borderwidth=1),
        height=460,
    )

    return fig


# ---------------------------------------------------------------------------
# QPE – true vs estimated phase and confidence bar
# ---------------------------------------------------------------------------

def plotly_qpe_phases(true_phase: float, outcome) -> go.Figure:
    """
    Two bars (true and estimated phase, in units of π) with the error shown
    on hover, plus the grid of representable n-bit fractions as faint lines.
    """
    fig = go.Figure(go.Bar(
        x=["True phase", "Estimated phase"],
        y=[true_phase, outcome.estimated_phase_fraction],
        marker_color=["#6c5ce7", "#00b894"],
        customdata=[f"{true_phase:.4f}", outcome.decimal_value],
        hovertemplate="<b>%{x}</b><br>%{customdata} π<extra></extra>",
    ))

    # Representable fractions become unreadable past 32 lines
    if outcome.denominator <= 32:
        for m in range(outcome.denominator + 1):
            fig.add_hline(y=m / outcome.denominator, line_color="#444", line_width=0.5)

    fig.update_layout(
        **_DARK_LAYOUT,
        title=(
            f"Phase Estimate with {len(outcome.binary_encoding)} bits — "
            f"error ±{outcome.absolute_error:.5f}"
        ),
        yaxis=dict(title="Phase (× π)", range=[0, 1.05]),
        showlegend=False,
        height=380,
    )

    return fig


def plotly_qpe_confidence(outcome) -> go.Figure:
    """Horizontal stacked bar: share of the estimated state vs all others."""
    conf = outcome.display_confidence_percent

    fig = go.Figure()
    fig.add_trace(go.Bar(
        y=["Measurement"], x=[conf], orientation="h",
        name=f"|{outcome.binary_encoding}⟩",
        marker_color="#00b894",
        hovertemplate=f"|{outcome.binary_encoding}⟩: {conf}%<extra></extra>",
    ))
    fig.add_trace(go.Bar(
        y=["Measurement"], x=[100 - conf], orientation="h",
        name="Others",
        marker_color="#636e72",
        hovertemplate=f"Others: {100 - conf}%<extra></extra>",
    ))

    fig.update_layout(
        **_DARK_LAYOUT,
        barmode="stack",
        title="Measurement Frequency (illustrative)",
        xaxis=dict(title="%", range=[0, 100]),
        legend=dict(bgcolor=_PAPER_BG, bordercolor="#444", borderwidth=1, orientation="h"),
        height=200,
    )

    return fig
