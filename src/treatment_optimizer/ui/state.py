"""Session state helpers for the Streamlit UI."""

import logging

import streamlit as st

from treatment_optimizer.models import PatientCondition, Treatment
from treatment_optimizer.storage import RecommendationStore

logger = logging.getLogger(__name__)

CATALOG_KEY = "catalog"


def get_catalog(
    store: RecommendationStore,
    refresh: bool = False,
) -> tuple[list[PatientCondition], list[Treatment]]:
    """Return (conditions, treatments), loading them once per session.

    Args:
        store: Store to read the catalog from.
        refresh: Reload from disk even if already cached.

    Returns:
        Tuple of conditions and treatments, each ordered by name.
    """
    if refresh or CATALOG_KEY not in st.session_state:
        conditions = store.fetch_conditions()
        treatments = store.fetch_treatments()
        st.session_state[CATALOG_KEY] = (conditions, treatments)
        logger.info(
            f"Cached catalog: {len(conditions)} conditions, "
            f"{len(treatments)} treatments"
        )

    return st.session_state[CATALOG_KEY]


def clear_catalog() -> None:
    """Drop the cached catalog so the next access reloads it."""
    st.session_state.pop(CATALOG_KEY, None)
