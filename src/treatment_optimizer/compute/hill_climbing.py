"""Hill climbing search over the treatment catalog.

Greedy best-improvement local search with a full-neighborhood scan:
1. Start from a random treatment (or an explicit start index)
2. Score every other treatment and take the strictly best one
3. Move if it beats the current score, otherwise stop at the local optimum

The best neighbor score of every scan is recorded in the history, including
the final non-improving scan.
"""

import logging
import random

from treatment_optimizer.compute.scoring import (
    calculate_treatment_score,
    rank_treatments,
)
from treatment_optimizer.models import OptimizationResult, PatientProfile, Treatment

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITERATIONS = 100


class EmptyCandidateSetError(ValueError):
    """Raised when the optimizer is given no treatments to choose from."""


def select_initial_treatment(
    treatments: list[Treatment],
    rng: random.Random | None = None,
    start_index: int | None = None,
) -> Treatment:
    """Pick the starting treatment for the search.

    Args:
        treatments: Non-empty list of candidate treatments.
        rng: Random source for the uniform pick (fresh Random if None).
        start_index: Explicit index to start from; overrides rng.

    Returns:
        The starting treatment.

    Raises:
        IndexError: If start_index is outside the list.
    """
    if start_index is not None:
        if not 0 <= start_index < len(treatments):
            raise IndexError(
                f"start_index {start_index} out of range for "
                f"{len(treatments)} treatments"
            )
        return treatments[start_index]

    if rng is None:
        rng = random.Random()

    return treatments[rng.randrange(len(treatments))]


def hill_climbing_optimization(
    treatments: list[Treatment],
    patient: PatientProfile,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    rng: random.Random | None = None,
    start_index: int | None = None,
) -> OptimizationResult:
    """Find a locally optimal treatment for a patient.

    Args:
        treatments: Candidate treatments in catalog order. Ties between
            neighbors go to the one that appears first.
        patient: Preference profile used for scoring.
        max_iterations: Upper bound on loop iterations.
        rng: Random source for the starting treatment.
        start_index: Explicit starting index (for reproducible runs).

    Returns:
        OptimizationResult with the chosen treatment, its score, the number
        of iterations executed and the score history.

    Raises:
        EmptyCandidateSetError: If treatments is empty.
    """
    if not treatments:
        raise EmptyCandidateSetError("No treatments available")

    current = select_initial_treatment(treatments, rng=rng, start_index=start_index)
    current_score = calculate_treatment_score(current, patient)
    iterations = 0
    score_history = [current_score]

    logger.info(
        f"Starting hill climbing from {current.name} "
        f"(score {current_score:.2f}) over {len(treatments)} treatments"
    )

    while iterations < max_iterations:
        iterations += 1

        neighbors = [t for t in treatments if t.id != current.id]
        if not neighbors:
            break

        best_neighbor = neighbors[0]
        best_score = calculate_treatment_score(best_neighbor, patient)

        for neighbor in neighbors[1:]:
            neighbor_score = calculate_treatment_score(neighbor, patient)
            if neighbor_score > best_score:
                best_neighbor = neighbor
                best_score = neighbor_score

        score_history.append(best_score)

        if best_score <= current_score:
            break

        logger.debug(
            f"Iteration {iterations}: {current.name} ({current_score:.2f}) -> "
            f"{best_neighbor.name} ({best_score:.2f})"
        )
        current = best_neighbor
        current_score = best_score

    logger.info(
        f"Hill climbing settled on {current.name} with score "
        f"{current_score:.2f} after {iterations} iterations"
    )

    return OptimizationResult(
        treatment=current,
        score=current_score,
        iterations=iterations,
        score_history=score_history,
    )


def find_better_treatment(
    result: OptimizationResult,
    treatments: list[Treatment],
    patient: PatientProfile,
) -> tuple[Treatment, float] | None:
    """Return the global best treatment if the search stopped below it.

    Args:
        result: Outcome of a hill climbing run.
        treatments: Catalog to rank (may be empty).
        patient: Profile the treatments are scored against.

    Returns:
        (treatment, score) of the highest-scoring treatment when it beats the
        result, otherwise None.
    """
    ranked = rank_treatments(treatments, patient)
    if not ranked:
        return None

    best_treatment, best_score = ranked[0]
    if best_treatment.id != result.treatment.id and best_score > result.score:
        return best_treatment, best_score
    return None
