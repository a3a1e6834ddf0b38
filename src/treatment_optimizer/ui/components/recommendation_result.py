"""Recommendation result card for Treatment Optimizer."""

import plotly.graph_objects as go  # type: ignore[import-untyped]
import polars as pl
import streamlit as st

from treatment_optimizer.compute.hill_climbing import find_better_treatment
from treatment_optimizer.compute.scoring import (
    calculate_score_components,
    rank_treatments,
)
from treatment_optimizer.models import OptimizationResult, PatientProfile, Treatment


def render_recommendation_result(
    result: OptimizationResult,
    patient: PatientProfile,
    treatments: list[Treatment],
) -> None:
    """Render the recommended treatment and how the search reached it.

    Args:
        result: Optimization result to display.
        patient: Profile the treatments were scored against.
        treatments: Full catalog, for the alternatives table.
    """
    treatment = result.treatment

    st.subheader("Recommended Treatment")
    st.caption("Optimized using Hill Climbing algorithm")

    col1, col2 = st.columns([3, 1])
    with col1:
        st.markdown(f"### {treatment.name}")
        if treatment.category:
            st.caption(f"Category: {treatment.category}")
    with col2:
        st.metric("Optimization Score", f"{result.score:.1f}")

    if treatment.description:
        st.write(treatment.description)

    _render_treatment_scores(treatment)
    _render_score_details(treatment, patient)
    _render_algorithm_performance(result)
    _render_score_progression(result.score_history)
    _render_alternatives(result, patient, treatments)


def _render_treatment_scores(treatment: Treatment) -> None:
    """Render the three catalog scores with bars."""
    col1, col2, col3 = st.columns(3)

    for col, label, value in (
        (col1, "Effectiveness", treatment.effectiveness_score),
        (col2, "Side Effects", treatment.side_effects_score),
        (col3, "Cost", treatment.cost_score),
    ):
        with col:
            st.metric(label, f"{value:g}")
            st.progress(int(max(0, min(100, value))))


def _render_score_details(treatment: Treatment, patient: PatientProfile) -> None:
    """Render the score calculation breakdown."""
    parts = calculate_score_components(treatment, patient)

    with st.expander("Calculation Details"):
        st.markdown(f"""
        **Formula:** (Effectiveness x w_e + Safety x w_s + Cost x w_c)
        x Age Factor x Severity Factor

        - Effectiveness: {parts["effectiveness"]:g} x {parts["effectiveness_weight"]:.3f}
        - Safety (100 - Side Effects): {parts["safety"]:g} x {parts["safety_weight"]:.3f}
        - Cost (100 - Cost): {parts["cost"]:g} x {parts["cost_weight"]:.3f}
        - Weighted Sum: {parts["base_score"]:.2f}
        - Age Factor: {parts["age_factor"]:.2f}
        - Severity Factor: {parts["severity_factor"]:.3f}
        - Score: {parts["score"]:.2f}
        """)

        if patient.allergies or patient.current_medications:
            st.caption(
                "Allergies and current medications are recorded with the "
                "recommendation but are not part of the score."
            )


def _render_algorithm_performance(result: OptimizationResult) -> None:
    """Render iteration count and score improvement."""
    st.markdown("**Algorithm Performance**")
    col1, col2 = st.columns(2)

    with col1:
        st.metric("Iterations", result.iterations)

    with col2:
        st.metric("Score Improvement", f"{result.score_improvement:+.1f}")


def _render_score_progression(score_history: list[float]) -> None:
    """Render a bar chart of the recorded scores."""
    fig = go.Figure()

    fig.add_trace(go.Bar(
        x=[f"Step {i}" for i in range(len(score_history))],
        y=score_history,
        marker={"color": "#2563eb"},
        hovertemplate="%{x}: %{y:.1f}<extra></extra>",
    ))

    fig.update_layout(
        title="Score Progression",
        xaxis_title="Neighbor Scan",
        yaxis_title="Score",
        height=260,
        margin={"t": 40, "b": 40, "l": 40, "r": 10},
    )

    st.plotly_chart(fig, width="stretch")


def _render_alternatives(
    result: OptimizationResult,
    patient: PatientProfile,
    treatments: list[Treatment],
) -> None:
    """Render every catalog treatment ranked by score."""
    ranked = rank_treatments(treatments, patient)
    if not ranked:
        return

    with st.expander("All Treatments by Score"):
        df = pl.DataFrame(
            {
                "Treatment": [t.name for t, _ in ranked],
                "Category": [t.category for t, _ in ranked],
                "Score": [round(score, 2) for _, score in ranked],
                "Recommended": [t.id == result.treatment.id for t, _ in ranked],
            }
        )
        st.dataframe(df.to_pandas(), width="stretch", hide_index=True)

        better = find_better_treatment(result, treatments, patient)
        if better is not None:
            best_treatment, best_score = better
            st.caption(
                f"The search stopped at a local optimum; {best_treatment.name} "
                f"scores higher ({best_score:.1f})."
            )
