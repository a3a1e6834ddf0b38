"""History page for Treatment Optimizer - stored recommendations."""

import logging

import polars as pl
import streamlit as st

from treatment_optimizer.config import Settings
from treatment_optimizer.storage import RecommendationStore
from treatment_optimizer.ui.state import get_catalog

logger = logging.getLogger(__name__)


def render_history_page(settings: Settings, store: RecommendationStore) -> None:
    """Render the recommendation history, newest first."""
    st.title("Recommendation History")

    try:
        history = store.fetch_recommendations()
    except ValueError as e:
        st.error(f"Could not read recommendation history: {e}")
        return

    if history.height == 0:
        st.info("No recommendations recorded yet.")
        return

    history = _attach_names(history, store)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Recommendations", history.height)
    with col2:
        st.metric("Average Score", f"{history['optimization_score'].mean():.1f}")
    with col3:
        st.metric("Average Iterations", f"{history['iterations'].mean():.1f}")

    display_columns = [
        col
        for col in (
            "created_at",
            "patient_name",
            "condition_name",
            "age",
            "treatment_name",
            "optimization_score",
            "iterations",
            "allergies",
            "current_medications",
        )
        if col in history.columns
    ]
    st.dataframe(
        history.select(display_columns).to_pandas(),
        width="stretch",
        hide_index=True,
    )


def _attach_names(history: pl.DataFrame, store: RecommendationStore) -> pl.DataFrame:
    """Join treatment and condition names onto history rows by id."""
    try:
        conditions, treatments = get_catalog(store)
    except (FileNotFoundError, ValueError) as e:
        logger.warning(f"Showing history without names: {e}")
        return history

    treatment_names = pl.DataFrame(
        {
            "recommended_treatment_id": [t.id for t in treatments],
            "treatment_name": [t.name for t in treatments],
        },
        schema={"recommended_treatment_id": pl.String, "treatment_name": pl.String},
    )
    condition_names = pl.DataFrame(
        {
            "condition_id": [c.id for c in conditions],
            "condition_name": [c.condition_name for c in conditions],
        },
        schema={"condition_id": pl.String, "condition_name": pl.String},
    )

    return history.join(
        treatment_names, on="recommended_treatment_id", how="left"
    ).join(condition_names, on="condition_id", how="left")
