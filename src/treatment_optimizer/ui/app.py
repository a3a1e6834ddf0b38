"""Main Streamlit application for Treatment Optimizer.

Run with: streamlit run src/treatment_optimizer/ui/app.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import streamlit as st

# Add src to path for imports when running directly
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point for Streamlit application."""
    # Import here to avoid E402 at module level
    from treatment_optimizer.config import Settings
    from treatment_optimizer.storage import RecommendationStore
    from treatment_optimizer.ui.pages.catalog import render_catalog_page
    from treatment_optimizer.ui.pages.history import render_history_page
    from treatment_optimizer.ui.pages.recommend import render_recommend_page

    # Page configuration - must be first Streamlit command
    st.set_page_config(
        page_title="Treatment Optimizer",
        page_icon="\U0001fa7a",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    # Settings and store are built once per session and passed to pages
    if "settings" not in st.session_state:
        settings = Settings.from_env()
        logging.basicConfig(
            level=settings.log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
        st.session_state.settings = settings
        st.session_state.store = RecommendationStore.from_settings(settings)
        logger.info("Initialized settings and recommendation store")

    settings = st.session_state.settings
    store = st.session_state.store

    pages = {
        "Recommend": render_recommend_page,
        "Catalog": render_catalog_page,
        "History": render_history_page,
    }

    st.sidebar.title("\U0001fa7a Treatment Optimizer")
    st.sidebar.caption("Hill Climbing Treatment Recommendations")
    st.sidebar.markdown("---")

    st.sidebar.markdown("### Navigation")
    selected_page = st.sidebar.radio(
        label="Select Page",
        options=list(pages.keys()),
        index=0,
        label_visibility="collapsed",
    )

    st.sidebar.markdown("---")
    st.sidebar.markdown("### Settings")
    st.sidebar.caption(f"Data directory: `{settings.data_dir}`")
    st.sidebar.caption(f"Max iterations: {settings.max_iterations}")
    seed_label = settings.random_seed if settings.random_seed is not None else "random"
    st.sidebar.caption(f"Start seed: {seed_label}")

    with st.sidebar.expander("About"):
        st.markdown(
            """
            **Treatment Optimizer** scores each catalog treatment on
            effectiveness, safety and cost, weighted by patient priorities
            and adjusted for age and condition severity.

            A hill climbing search starts from a random treatment and moves
            to the best-scoring alternative until no alternative improves.

            Recommendations are decision support only and make no claim of
            medical validity.

            **Version:** 0.1.0
            """
        )

    pages[selected_page](settings, store)


if __name__ == "__main__":
    main()
