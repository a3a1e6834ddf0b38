"""Recommendation page for Treatment Optimizer - patient form and result."""

import logging

import streamlit as st

from treatment_optimizer.compute.hill_climbing import EmptyCandidateSetError
from treatment_optimizer.config import Settings
from treatment_optimizer.recommend import generate_recommendation
from treatment_optimizer.storage import RecommendationStore
from treatment_optimizer.ui.components.patient_form import render_patient_form
from treatment_optimizer.ui.components.recommendation_result import (
    render_recommendation_result,
)
from treatment_optimizer.ui.state import get_catalog

logger = logging.getLogger(__name__)

RESULT_KEY = "last_recommendation"


def render_recommend_page(settings: Settings, store: RecommendationStore) -> None:
    """Render the patient form and the latest recommendation."""
    st.title("Medical Treatment Optimizer")
    st.markdown(
        "Treatment recommendations using a Hill Climbing search to find the "
        "best treatment based on effectiveness, safety, and cost."
    )

    try:
        conditions, treatments = get_catalog(store)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Could not load catalog: {e}")
        st.error(f"Could not load the treatment catalog: {e}")
        return

    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Patient Information")
        form = render_patient_form(conditions)

    if form is not None:
        with st.spinner("Finding optimal treatment..."):
            try:
                result, profile = generate_recommendation(
                    store,
                    form,
                    conditions,
                    treatments,
                    max_iterations=settings.max_iterations,
                    rng=settings.make_rng(),
                )
            except EmptyCandidateSetError:
                logger.exception("No treatments available")
                st.error("No treatments are available in the catalog.")
            except ValueError as e:
                st.error(str(e))
            except OSError:
                logger.exception("Error saving recommendation")
                st.error("Failed to generate recommendation. Please try again.")
            else:
                st.session_state[RESULT_KEY] = (result, profile)

    with col2:
        if RESULT_KEY in st.session_state:
            result, profile = st.session_state[RESULT_KEY]
            render_recommendation_result(result, profile, treatments)
        else:
            st.info(
                "**No Recommendation Yet**\n\n"
                "Fill out the patient form to get an optimized treatment "
                "recommendation."
            )

    st.markdown("---")
    _render_how_it_works()


def _render_how_it_works() -> None:
    """Render the three-step explanation of hill climbing."""
    st.subheader("How Hill Climbing Works")
    col1, col2, col3 = st.columns(3)

    with col1:
        st.markdown("**1. Initial State**")
        st.caption("Start with a random treatment from the available options.")

    with col2:
        st.markdown("**2. Explore Neighbors**")
        st.caption(
            "Evaluate all alternative treatments and calculate their scores "
            "based on the patient profile."
        )

    with col3:
        st.markdown("**3. Climb to Peak**")
        st.caption(
            "Move to a better treatment if found; repeat until no improvement "
            "is possible."
        )
