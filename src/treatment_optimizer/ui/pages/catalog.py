"""Catalog page for Treatment Optimizer - treatments and conditions."""

import logging

import polars as pl
import streamlit as st

from treatment_optimizer.config import Settings
from treatment_optimizer.storage import RecommendationStore
from treatment_optimizer.ui.state import clear_catalog, get_catalog

logger = logging.getLogger(__name__)


def render_catalog_page(settings: Settings, store: RecommendationStore) -> None:
    """Render the treatment catalog and condition list."""
    st.title("Treatment Catalog")
    st.caption(f"Treatments: `{store.treatments_path}`")
    st.caption(f"Conditions: `{store.conditions_path}`")

    if st.button("Reload Catalog"):
        clear_catalog()

    try:
        conditions, treatments = get_catalog(store)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Could not load catalog: {e}")
        st.error(f"Could not load the treatment catalog: {e}")
        return

    col1, col2 = st.columns(2)
    with col1:
        st.metric("Treatments", len(treatments))
    with col2:
        st.metric("Conditions", len(conditions))

    st.markdown("### Treatments")
    treatments_df = pl.DataFrame(
        {
            "Name": [t.name for t in treatments],
            "Category": [t.category for t in treatments],
            "Effectiveness": [t.effectiveness_score for t in treatments],
            "Side Effects": [t.side_effects_score for t in treatments],
            "Cost": [t.cost_score for t in treatments],
            "Description": [t.description for t in treatments],
        }
    )
    st.dataframe(treatments_df.to_pandas(), width="stretch", hide_index=True)

    st.markdown("### Conditions")
    conditions_df = pl.DataFrame(
        {
            "Condition": [c.condition_name for c in conditions],
            "Severity": [c.severity for c in conditions],
            "Description": [c.description for c in conditions],
        }
    )
    st.dataframe(conditions_df.to_pandas(), width="stretch", hide_index=True)
