"""Recommendation workflow: form data in, stored recommendation out.

Ties the patient form to the optimizer and the history store:
1. Resolve the selected condition (rejected if missing)
2. Build the preference profile from form data and condition severity
3. Run hill climbing over the catalog
4. Append one recommendation record
"""

import logging
import random

from treatment_optimizer.compute.hill_climbing import (
    DEFAULT_MAX_ITERATIONS,
    hill_climbing_optimization,
)
from treatment_optimizer.models import (
    OptimizationResult,
    PatientCondition,
    PatientFormData,
    PatientProfile,
    Recommendation,
    Treatment,
)
from treatment_optimizer.storage import RecommendationStore

logger = logging.getLogger(__name__)


def find_condition(
    conditions: list[PatientCondition],
    condition_id: str | None,
) -> PatientCondition | None:
    """Look up a condition by id.

    Args:
        conditions: Available conditions.
        condition_id: Selected id (empty or None means nothing selected).

    Returns:
        Matching condition, or None.
    """
    if not condition_id:
        return None
    return next((c for c in conditions if c.id == condition_id), None)


def build_patient_profile(
    form: PatientFormData,
    condition: PatientCondition,
) -> PatientProfile:
    """Combine form input with the selected condition's severity."""
    return PatientProfile(
        age=form.age,
        condition_severity=condition.severity,
        allergies=list(form.allergies),
        current_medications=list(form.current_medications),
        prioritize_effectiveness=form.prioritize_effectiveness,
        prioritize_safety=form.prioritize_safety,
        prioritize_cost=form.prioritize_cost,
    )


def build_recommendation(
    form: PatientFormData,
    result: OptimizationResult,
) -> Recommendation:
    """Build the history record for an optimization result."""
    return Recommendation(
        patient_name=form.patient_name,
        condition_id=form.condition_id,
        age=form.age,
        allergies=list(form.allergies),
        current_medications=list(form.current_medications),
        recommended_treatment_id=result.treatment.id,
        optimization_score=result.score,
        iterations=result.iterations,
    )


def generate_recommendation(
    store: RecommendationStore,
    form: PatientFormData,
    conditions: list[PatientCondition],
    treatments: list[Treatment],
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    rng: random.Random | None = None,
) -> tuple[OptimizationResult, PatientProfile]:
    """Recommend a treatment for a patient and record it.

    Args:
        store: Store the recommendation is appended to.
        form: Patient form input.
        conditions: Conditions the form's condition_id is resolved against.
        treatments: Candidate treatments in catalog order.
        max_iterations: Iteration cap for the search.
        rng: Random source for the starting treatment.

    Returns:
        Tuple of the OptimizationResult and the PatientProfile it was scored
        against, for display.

    Raises:
        ValueError: If no valid condition is selected.
        EmptyCandidateSetError: If there are no treatments.
    """
    condition = find_condition(conditions, form.condition_id)
    if condition is None:
        logger.warning(f"Rejected request with condition id {form.condition_id!r}")
        raise ValueError("Please select a valid condition")

    profile = build_patient_profile(form, condition)

    result = hill_climbing_optimization(
        treatments,
        profile,
        max_iterations=max_iterations,
        rng=rng,
    )

    store.insert_recommendation(build_recommendation(form, result))

    logger.info(
        f"Recommended {result.treatment.name} for {form.patient_name} "
        f"({condition.condition_name}), score {result.score:.1f}"
    )
    return result, profile
