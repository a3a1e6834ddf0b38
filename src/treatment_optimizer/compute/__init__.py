"""Computation module for Treatment Optimizer.

This module handles:
- Treatment scoring against patient preferences
- Hill climbing search for the recommended treatment
"""

from treatment_optimizer.compute.hill_climbing import (
    DEFAULT_MAX_ITERATIONS,
    EmptyCandidateSetError,
    find_better_treatment,
    hill_climbing_optimization,
    select_initial_treatment,
)
from treatment_optimizer.compute.scoring import (
    DEFAULT_WEIGHT,
    PRIORITY_WEIGHT,
    SENIOR_AGE_FACTOR,
    SENIOR_AGE_THRESHOLD,
    SEVERITY_DIVISOR,
    calculate_priority_weights,
    calculate_score_components,
    calculate_treatment_score,
    normalize_weights,
    rank_treatments,
)

__all__ = [
    # Scoring
    "calculate_priority_weights",
    "normalize_weights",
    "calculate_score_components",
    "calculate_treatment_score",
    "rank_treatments",
    # Constants
    "PRIORITY_WEIGHT",
    "DEFAULT_WEIGHT",
    "SENIOR_AGE_THRESHOLD",
    "SENIOR_AGE_FACTOR",
    "SEVERITY_DIVISOR",
    "DEFAULT_MAX_ITERATIONS",
    # Optimization
    "EmptyCandidateSetError",
    "find_better_treatment",
    "hill_climbing_optimization",
    "select_initial_treatment",
]
