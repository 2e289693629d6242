import matplotlib.pyplot as plt
import streamlit as st

from config import get_dashboard_config
from algorithms.errors import InvalidInput
from algorithms.grover import (
    SearchParameters,
    build_grover_circuit,
    compute_optimal_iteration_count,
    compute_search_outcome,
    success_probability,
)
from algorithms.qft import QFTParameters, build_qft_circuit, compute_qft_phases
from algorithms.qpe import (
    PhaseEstimationParameters,
    build_qpe_circuit,
    compute_phase_estimation_outcome,
)
from algorithms.snippets import IMPLEMENTATION_SNIPPETS
from algorithms.metrics import (
    APPLICATION_DOMAINS,
    COMPLEXITY_TABLE,
    estimate_resources,
    format_memory,
    format_time,
)
from visualizations import grover_viz, qft_viz, qpe_viz
from visualizations import plotly_viz


def plt_close(fig):
    """Close a matplotlib figure to avoid memory leaks across Streamlit reruns."""
    plt.close(fig)


def show_circuit(build, params, draw):
    """Draw a circuit; fall back to the text diagram if the mpl drawer fails."""
    circuit = build(params)
    try:
        fig = draw(circuit)
    except Exception as e:  # the mpl drawer needs optional extras (pylatexenc)
        st.warning(f"Could not render circuit graphics ({type(e).__name__}: {e}).")
        st.code(str(circuit.draw("text")), language=None)
        return
    st.pyplot(fig)
    plt_close(fig)


def show_performance(algorithm: str, qubits: int):
    """Resource estimate panel shown under each algorithm."""
    est = estimate_resources(algorithm, qubits)
    st.markdown(f"##### Performance Metrics  ·  `{est.demand_level.upper()}` computational demand")
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Qubit count", f"{est.qubits:,}")
    c2.metric("Estimated memory", format_memory(est.memory_mb))
    c3.metric("Compute time", format_time(est.compute_time_ms))
    c4.metric("Complexity", est.complexity_class)


def show_implementation(algorithm: str):
    """Qiskit source for *algorithm*, collapsed by default."""
    with st.expander("Python Implementation"):
        st.code(IMPLEMENTATION_SNIPPETS[algorithm], language="python")


# ---------------------------------------------------------------------------
# Cached computations (outputs are immutable and deterministic)
# ---------------------------------------------------------------------------

@st.cache_data(show_spinner=False)
def cached_search_outcome(n: int, target_state: str, max_states: int):
    return compute_search_outcome(SearchParameters(n, target_state), max_states=max_states)


@st.cache_data(show_spinner=False)
def cached_phase_outcome(precision: int, phase: float):
    return compute_phase_estimation_outcome(PhaseEstimationParameters(precision, phase))


def show_results_grover(params: SearchParameters, cfg: dict):
    """Render the Grover outcome chart, iteration count and evolution panels."""
    outcome = cached_search_outcome(params.qubit_count, params.target_state,
                                    cfg["max_enumerated_states"])
    optimal = compute_optimal_iteration_count(params)
    p_success = success_probability(params.qubit_count, optimal)

    st.divider()
    st.markdown("### Measurement Results")
    st.markdown(
        f"""
        After running Grover's algorithm, the target state `|{params.target_state}⟩` has been
        amplified to have the highest probability of measurement.

        - Search space: **{params.num_states} states** ({params.qubit_count} qubits)
        - Optimal number of iterations: **{optimal}**  (round(π/4 · √{params.num_states}))
        - Showing the first **{min(cfg['display_limit'], len(outcome))}** of {len(outcome)} states
        """
    )
    st.plotly_chart(
        plotly_viz.plotly_search_outcome(outcome, params.target_state, cfg["display_limit"]),
        use_container_width=True,
    )

    with st.expander("Why is the target shown at exactly 90%?"):
        st.markdown(
            f"""
            The bars use a fixed illustrative figure: the target gets **90%** and the remaining
            10% is shared equally by the other {params.num_states - 1} states.

            The textbook success probability after k iterations is:

            > P = sin²((2k+1)θ)  where  θ = arcsin(1/√N)

            For N = {params.num_states} and k = {optimal}: P ≈ **{p_success:.1%}**. The amplitude
            evolution panels below use that exact formula.
            """
        )

    st.divider()
    st.markdown("### Amplitude Evolution")
    fig_amp = grover_viz.plot_amplitude_evolution(params.target_state)
    st.pyplot(fig_amp)
    plt_close(fig_amp)

    st.divider()
    st.markdown("### Success Probability vs Number of Queries")
    fig_prob = grover_viz.plot_success_probability_vs_queries(params.qubit_count)
    st.pyplot(fig_prob)
    plt_close(fig_prob)


# ---------------------------------------------------------------------------
# App layout
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Quantum Algorithm Explorer", layout="wide")
st.title("Quantum Algorithm Explorer")
st.caption("Grover's Search · Quantum Fourier Transform · Quantum Phase Estimation")

cfg = get_dashboard_config()
if cfg["warning"]:
    st.warning(cfg["warning"])

# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------
with st.sidebar:
    st.header("Display")
    cfg["display_limit"] = st.slider(
        "States shown in result charts",
        min_value=2, max_value=32, value=cfg["display_limit"],
        help="Result charts show the first N basis states; the target is always included.",
    )
    st.divider()
    st.markdown(
        """
        **About this explorer**

        Interactive, closed-form illustrations of three landmark quantum algorithms:
        - **Grover's Search** — quadratic speedup over classical search
        - **Quantum Fourier Transform** — the building block of phase estimation
        - **Quantum Phase Estimation** — reading an eigenphase into a register

        Circuits are built with [Qiskit](https://qiskit.org) for display only; nothing is
        executed on a simulator or on hardware.
        """
    )

# ---------------------------------------------------------------------------
# Tabs
# ---------------------------------------------------------------------------
tab_grover, tab_qft, tab_qpe, tab_compare = st.tabs(
    ["Grover's Search", "Quantum Fourier Transform", "Quantum Phase Estimation",
     "Quantum vs Classical"]
)

# ===========================================================================
# GROVER TAB
# ===========================================================================
with tab_grover:
    st.subheader("Grover's Search Algorithm")
    st.markdown(
        """
        Grover's algorithm provides a quadratic speedup for unstructured search problems,
        finding a marked item in an unsorted database of N items in approximately √N steps
        instead of the N steps required by classical algorithms.
        """
    )

    col_params, col_circuit = st.columns([1, 2])
    with col_params:
        n_qubits = st.slider(
            "Number of qubits",
            min_value=cfg["grover_min_qubits"], max_value=cfg["grover_max_qubits"], value=4,
            key="grover_qubits",
        )
        choices = [format(i, f"0{n_qubits}b") for i in range(min(cfg["display_limit"], 2 ** n_qubits))]
        default_target = "0110" if "0110" in choices else choices[-1]
        target_state = st.selectbox(
            "Target state", choices, index=choices.index(default_target),
            format_func=lambda s: f"|{s}⟩", key="grover_target",
        )
        grover_mode = st.radio(
            "Mode", ["Full Run", "Step-by-Step Explorer"], horizontal=True,
            key="grover_mode_radio",
        )

    try:
        grover_params = SearchParameters(n_qubits, target_state)
    except InvalidInput as e:
        st.error(f"Invalid parameters: {e}")
        grover_params = None

    if grover_params is not None:
        with col_circuit:
            st.markdown("#### Circuit Diagram")
            show_circuit(build_grover_circuit, grover_params, grover_viz.plot_circuit)

        optimal_k = compute_optimal_iteration_count(grover_params)

        if grover_mode == "Step-by-Step Explorer":
            if st.session_state.get("grover_locked") != (n_qubits, target_state):
                st.session_state["grover_iteration"] = 0
                st.session_state["grover_locked"] = (n_qubits, target_state)
            k = st.session_state["grover_iteration"]

            N_space = 2 ** n_qubits
            grover_prob = success_probability(n_qubits, k)
            classical_prob = 1 - ((N_space - 1) / N_space) ** k if k > 0 else 1 / N_space

            mc1, mc2, mc3 = st.columns(3)
            mc1.metric("Iterations used", k)
            mc2.metric(
                "Grover P(success)", f"{grover_prob:.1%}",
                f"{grover_prob - classical_prob:+.1%} vs classical" if k > 0 else None,
            )
            mc3.metric("Classical P(found)", f"{classical_prob:.1%}")

            b1, b2, b3, b4 = st.columns(4)
            with b1:
                if st.button("⏮ Reset", key="grover_reset"):
                    st.session_state["grover_iteration"] = 0
                    st.rerun()
            with b2:
                if st.button("◀ Previous", key="grover_prev", disabled=(k == 0)):
                    st.session_state["grover_iteration"] = max(0, k - 1)
                    st.rerun()
            with b3:
                if st.button("Next Iteration ▶", key="grover_next",
                             disabled=(k >= optimal_k), type="primary"):
                    st.session_state["grover_iteration"] = min(optimal_k, k + 1)
                    st.rerun()
            with b4:
                if st.button(f"⏭ Jump to Optimal ({optimal_k})", key="grover_jump",
                             disabled=(k == optimal_k)):
                    st.session_state["grover_iteration"] = optimal_k
                    st.rerun()

            st.plotly_chart(plotly_viz.plotly_amplitude_step(target_state, k),
                            use_container_width=True)
            if k == optimal_k:
                st.success(
                    f"Optimal! After {optimal_k} iterations Grover's finds the target with "
                    f"**{grover_prob:.1%}** probability — classical random search reaches only "
                    f"**{classical_prob:.1%}** with the same number of queries."
                )
        elif st.button("Run Simulation", key="run_grover", type="primary") or \
                st.session_state.get("grover_ran"):
            st.session_state["grover_ran"] = True
            show_results_grover(grover_params, cfg)

        st.divider()
        show_performance("grover", n_qubits)
        show_implementation("grover")

# ===========================================================================
# QFT TAB
# ===========================================================================
with tab_qft:
    st.subheader("Quantum Fourier Transform")
    st.markdown(
        """
        The Quantum Fourier Transform (QFT) is a fundamental building block for many quantum
        algorithms, including Shor's algorithm and quantum phase estimation. It performs a
        Fourier transform on quantum amplitudes exponentially faster than the classical FFT.
        """
    )

    col_params, col_circuit = st.columns([1, 2])
    with col_params:
        qft_qubits = st.slider(
            "Number of qubits",
            min_value=cfg["qft_min_qubits"], max_value=cfg["qft_max_qubits"], value=3,
            key="qft_qubits",
        )
        qft_input = st.selectbox(
            "Input state", list(range(2 ** qft_qubits)),
            format_func=lambda i: f"|{format(i, f'0{qft_qubits}b')}⟩", key="qft_input",
        )

    try:
        qft_params = QFTParameters(qft_qubits, qft_input)
    except InvalidInput as e:
        st.error(f"Invalid parameters: {e}")
        qft_params = None

    if qft_params is not None:
        with col_circuit:
            st.markdown("#### Circuit Diagram")
            show_circuit(build_qft_circuit, qft_params, qft_viz.plot_circuit)

        if st.button("Run Simulation", key="run_qft", type="primary") or \
                st.session_state.get("qft_ran"):
            st.session_state["qft_ran"] = True
            phases = compute_qft_phases(qft_params, limit=cfg["qft_display_states"])

            st.divider()
            st.markdown("### Output State Phases")
            st.markdown(
                f"""
                Every output basis state has the same magnitude 1/√{2 ** qft_qubits} ≈
                **{phases[0].amplitude:.4f}**. Only the **phase** differs: state |k⟩ picks up
                e^(2πi·x·k/N) with x = {qft_input}, so the arrows wind {qft_input} time(s)
                around the circle. Showing the first {len(phases)} states.
                """
            )
            fig_wheels = qft_viz.plot_phase_wheels(phases, qft_input)
            st.pyplot(fig_wheels)
            plt_close(fig_wheels)
            st.plotly_chart(plotly_viz.plotly_qft_phases(phases, qft_params.input_bits),
                            use_container_width=True)

        st.divider()
        show_performance("qft", qft_qubits)
        show_implementation("qft")

# ===========================================================================
# QPE TAB
# ===========================================================================
with tab_qpe:
    st.subheader("Quantum Phase Estimation")
    st.markdown(
        """
        Quantum Phase Estimation (QPE) determines the eigenphase of a unitary operator, with
        applications in quantum chemistry, optimization, and factoring algorithms.
        """
    )

    col_params, col_circuit = st.columns([1, 2])
    with col_params:
        precision = st.slider(
            "Precision qubits",
            min_value=cfg["qpe_min_precision"], max_value=cfg["qpe_max_precision"], value=5,
            key="qpe_precision",
        )
        phase_value = st.slider(
            "Phase value (× 0.01π)", min_value=0, max_value=100, value=25, step=1,
            key="qpe_phase",
        )

    try:
        qpe_params = PhaseEstimationParameters.from_percent(precision, phase_value)
    except InvalidInput as e:
        st.error(f"Invalid parameters: {e}")
        qpe_params = None

    if qpe_params is not None:
        with col_circuit:
            st.markdown("#### Circuit Diagram")
            show_circuit(build_qpe_circuit, qpe_params, qpe_viz.plot_circuit)

        if st.button("Run Simulation", key="run_qpe", type="primary") or \
                st.session_state.get("qpe_ran"):
            st.session_state["qpe_ran"] = True
            outcome = cached_phase_outcome(precision, qpe_params.true_phase_fraction)

            st.divider()
            st.markdown("### Estimated Phase")
            st.markdown(
                f"With {precision} qubits, QPE can estimate the phase with precision of "
                f"approximately **{outcome.resolution:.5f}**."
            )
            m1, m2, m3, m4 = st.columns(4)
            m1.metric("True phase", f"{qpe_params.true_phase_fraction:.2f}π")
            m2.metric("Estimated phase", f"{outcome.estimated_phase_fraction:.2f}π")
            m3.metric("Binary", outcome.binary_encoding)
            m4.metric("Error", f"±{outcome.absolute_error:.5f}")
            st.caption(f"Decimal value: {outcome.decimal_value}")

            st.plotly_chart(plotly_viz.plotly_qpe_confidence(outcome), use_container_width=True)
            st.plotly_chart(
                plotly_viz.plotly_qpe_phases(qpe_params.true_phase_fraction, outcome),
                use_container_width=True,
            )

            fig_line = qpe_viz.plot_number_line(qpe_params.true_phase_fraction, outcome)
            st.pyplot(fig_line)
            plt_close(fig_line)

            with st.expander("How is the phase turned into bits?"):
                fig_deriv = qpe_viz.plot_derivation(qpe_params.true_phase_fraction, outcome)
                st.pyplot(fig_deriv)
                plt_close(fig_deriv)
                st.caption(
                    "The measurement frequency bar is an illustrative figure derived from the "
                    "error and the number of bits, not a sampled statistic."
                )

        st.divider()
        show_performance("qpe", precision)
        show_implementation("qpe")

# ===========================================================================
# COMPARISON TAB
# ===========================================================================
with tab_compare:
    st.subheader("Quantum vs. Classical Complexity")
    st.markdown(
        """
        Quantum algorithms can provide significant computational advantages over classical
        algorithms for specific problems. Here's a comparison of the computational complexity
        for various problems.
        """
    )
    rows = "| Problem | Classical | Quantum | Speedup |\n|---|---|---|---|\n"
    for row in COMPLEXITY_TABLE:
        rows += f"| {row['problem']} | {row['classical']} | {row['quantum']} | {row['speedup']} |\n"
    st.markdown(rows)

    st.plotly_chart(plotly_viz.plotly_complexity_comparison(), use_container_width=True)

    st.divider()
    st.markdown("### Application Domains")
    domain_cols = st.columns(3)
    for i, domain in enumerate(APPLICATION_DOMAINS):
        with domain_cols[i % 3]:
            st.markdown(f"**{domain['title']}**")
            st.caption(domain["description"])
