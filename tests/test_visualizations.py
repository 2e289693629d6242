import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from algorithms.grover import SearchParameters, compute_search_outcome
from algorithms.qft import QFTParameters, compute_qft_phases
from algorithms.qpe import PhaseEstimationParameters, compute_phase_estimation_outcome
from visualizations import grover_viz, plotly_viz, qft_viz, qpe_viz


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_search_outcome_chart_highlights_target():
    outcome = compute_search_outcome(SearchParameters(4, "0110"))
    fig = plotly_viz.plotly_search_outcome(outcome, "0110", limit=10)

    bar = fig.data[0]
    assert len(bar.x) == 10
    idx = list(bar.x).index("0110")
    assert bar.y[idx] == pytest.approx(0.9)
    assert bar.marker.color[idx] == "#ff6b6b"


def test_search_outcome_chart_appends_target_beyond_limit():
    outcome = compute_search_outcome(SearchParameters(5, "11111"))
    fig = plotly_viz.plotly_search_outcome(outcome, "11111", limit=10)

    assert len(fig.data[0].x) == 11
    assert fig.data[0].x[-1] == "11111"


def test_search_outcome_chart_with_non_positive_limit_shows_only_target():
    outcome = compute_search_outcome(SearchParameters(3, "010"))
    fig = plotly_viz.plotly_search_outcome(outcome, "010", limit=-1)

    assert list(fig.data[0].x) == ["010"]


def test_amplitude_step_chart_has_one_bar_per_state():
    fig = plotly_viz.plotly_amplitude_step("101", 2)

    assert len(fig.data[0].y) == 8
    assert "Iteration 2" in fig.layout.title.text


def test_complexity_chart_has_two_traces():
    fig = plotly_viz.plotly_complexity_comparison(max_n=64)

    assert [t.name for t in fig.data] == ["Classical  O(N)", "Grover  O(√N)"]


def test_qft_polar_chart_has_trace_per_state():
    phases = compute_qft_phases(QFTParameters(3, 1), limit=8)
    fig = plotly_viz.plotly_qft_phases(phases, "001")

    assert len(fig.data) == 8


def test_qpe_charts():
    params = PhaseEstimationParameters(3, 0.3)
    outcome = compute_phase_estimation_outcome(params)

    bars = plotly_viz.plotly_qpe_phases(params.true_phase_fraction, outcome)
    assert list(bars.data[0].y) == pytest.approx([0.3, outcome.estimated_phase_fraction])

    conf = plotly_viz.plotly_qpe_confidence(outcome)
    assert conf.data[0].x[0] + conf.data[1].x[0] == 100


def test_matplotlib_figures_build():
    figs = [
        grover_viz.plot_amplitude_evolution("011"),
        grover_viz.plot_success_probability_vs_queries(3),
        qft_viz.plot_phase_wheels(compute_qft_phases(QFTParameters(2, 3)), 3),
    ]
    qpe_outcome = compute_phase_estimation_outcome(PhaseEstimationParameters(4, 0.4))
    figs.append(qpe_viz.plot_number_line(0.4, qpe_outcome))
    figs.append(qpe_viz.plot_derivation(0.4, qpe_outcome))

    for fig in figs:
        assert fig.axes


def test_amplitude_evolution_panels_stop_at_optimal():
    # two qubits: optimal count is 2, so panels for k = 0, 1, 2
    fig = grover_viz.plot_amplitude_evolution("10")

    assert len(fig.axes) == 3
