"""Treatment scoring against a patient preference profile.

This module implements the fitness function used by the optimizer:
- Priority weights: 0.5 for prioritized criteria, 0.33 otherwise
- Weights normalized to sum to 1
- Components: Effectiveness, Safety (100 - Side Effects), Cost (100 - Cost)
- Score = Weighted Sum × Age Factor × Severity Factor

Allergies and current medications on the profile do not enter the score.
"""

import logging

from treatment_optimizer.models import PatientProfile, Treatment

logger = logging.getLogger(__name__)

# Weighting constants
PRIORITY_WEIGHT = 0.5  # Weight for a prioritized criterion
DEFAULT_WEIGHT = 0.33  # Weight for a criterion without priority
SCORE_CEILING = 100.0  # Upper bound of catalog scores

# Patient adjustment constants
SENIOR_AGE_THRESHOLD = 65  # Ages strictly above this are penalized
SENIOR_AGE_FACTOR = 0.9
SEVERITY_DIVISOR = 200  # Severity factor = 1 + severity / 200


def calculate_priority_weights(patient: PatientProfile) -> dict[str, float]:
    """Assign raw weights from the patient's priority flags.

    Args:
        patient: Preference profile with priority flags.

    Returns:
        Dictionary of unnormalized effectiveness/safety/cost weights.
    """
    return {
        "effectiveness": (
            PRIORITY_WEIGHT if patient.prioritize_effectiveness else DEFAULT_WEIGHT
        ),
        "safety": PRIORITY_WEIGHT if patient.prioritize_safety else DEFAULT_WEIGHT,
        "cost": PRIORITY_WEIGHT if patient.prioritize_cost else DEFAULT_WEIGHT,
    }


def normalize_weights(weights: dict[str, float]) -> dict[str, float]:
    """Scale weights so they sum to 1.

    Args:
        weights: Raw weights keyed by criterion.

    Returns:
        Normalized weights with the same keys.
    """
    total = sum(weights.values())
    return {name: weight / total for name, weight in weights.items()}


def calculate_age_factor(age: int) -> float:
    """Return the age adjustment (0.9 above age 65, otherwise 1.0)."""
    return SENIOR_AGE_FACTOR if age > SENIOR_AGE_THRESHOLD else 1.0


def calculate_severity_factor(severity: float) -> float:
    """Return the severity adjustment (1 + severity / 200)."""
    return 1 + severity / SEVERITY_DIVISOR


def calculate_score_components(
    treatment: Treatment,
    patient: PatientProfile,
) -> dict[str, float]:
    """Calculate the full score breakdown for a treatment.

    Args:
        treatment: Treatment to evaluate.
        patient: Preference profile.

    Returns:
        Dictionary with:
        - effectiveness / safety / cost: component scores (0-100)
        - effectiveness_weight / safety_weight / cost_weight: normalized weights
        - base_score: weighted sum of components
        - age_factor / severity_factor: patient adjustments
        - score: final score
    """
    weights = normalize_weights(calculate_priority_weights(patient))

    components = {
        "effectiveness": treatment.effectiveness_score,
        "safety": SCORE_CEILING - treatment.side_effects_score,
        "cost": SCORE_CEILING - treatment.cost_score,
    }

    base_score = (
        components["effectiveness"] * weights["effectiveness"]
        + components["safety"] * weights["safety"]
        + components["cost"] * weights["cost"]
    )

    age_factor = calculate_age_factor(patient.age)
    severity_factor = calculate_severity_factor(patient.condition_severity)
    score = base_score * age_factor * severity_factor

    return {
        **components,
        "effectiveness_weight": weights["effectiveness"],
        "safety_weight": weights["safety"],
        "cost_weight": weights["cost"],
        "base_score": base_score,
        "age_factor": age_factor,
        "severity_factor": severity_factor,
        "score": score,
    }


def calculate_treatment_score(
    treatment: Treatment,
    patient: PatientProfile,
) -> float:
    """Score a treatment for a patient.

    Formula:
        Weighted Sum = Effectiveness × w_e + (100 - Side Effects) × w_s
                       + (100 - Cost) × w_c
        Score = Weighted Sum × Age Factor × (1 + Severity / 200)

    Args:
        treatment: Treatment with effectiveness, side effect and cost scores.
        patient: Preference profile with priorities, age and severity.

    Returns:
        Treatment score (higher is better).
    """
    score = calculate_score_components(treatment, patient)["score"]

    logger.debug(f"Score for {treatment.name} ({treatment.id}): {score:.2f}")

    return score


def rank_treatments(
    treatments: list[Treatment],
    patient: PatientProfile,
) -> list[tuple[Treatment, float]]:
    """Score every treatment and sort best first.

    Sorting is stable, so equal scores keep catalog order.

    Args:
        treatments: Treatments to rank.
        patient: Preference profile.

    Returns:
        List of (treatment, score) tuples in descending score order.
    """
    scored = [(t, calculate_treatment_score(t, patient)) for t in treatments]
    return sorted(scored, key=lambda item: item[1], reverse=True)
