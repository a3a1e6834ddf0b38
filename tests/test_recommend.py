"""Tests for the recommendation workflow."""

import random

import pytest

from treatment_optimizer.compute.hill_climbing import EmptyCandidateSetError
from treatment_optimizer.models import (
    OptimizationResult,
    PatientCondition,
    PatientFormData,
    Treatment,
)
from treatment_optimizer.recommend import (
    build_patient_profile,
    build_recommendation,
    find_condition,
    generate_recommendation,
)
from treatment_optimizer.storage import RecommendationStore


class TestFindCondition:
    """Tests for condition lookup."""

    def test_finds_by_id(self, sample_conditions: list[PatientCondition]) -> None:
        """Known ids resolve to their condition."""
        condition = find_condition(sample_conditions, "cnd-oa")
        assert condition is not None
        assert condition.condition_name == "Osteoarthritis"

    @pytest.mark.parametrize("condition_id", ["", None, "cnd-unknown"])
    def test_missing_selection(
        self,
        sample_conditions: list[PatientCondition],
        condition_id: str | None,
    ) -> None:
        """Empty or unknown selections resolve to None."""
        assert find_condition(sample_conditions, condition_id) is None


class TestBuilders:
    """Tests for profile and record builders."""

    def test_profile_uses_condition_severity(
        self,
        sample_form: PatientFormData,
        sample_conditions: list[PatientCondition],
    ) -> None:
        """Profile should combine form input with condition severity."""
        profile = build_patient_profile(sample_form, sample_conditions[0])

        assert profile.age == 52
        assert profile.condition_severity == 60
        assert profile.allergies == ["penicillin"]
        assert profile.current_medications == ["metformin", "aspirin"]
        assert profile.prioritize_effectiveness is True
        assert profile.prioritize_safety is False

    def test_recommendation_record(
        self,
        sample_form: PatientFormData,
        strong_treatment: Treatment,
    ) -> None:
        """Record should carry form fields and the optimizer outcome."""
        result = OptimizationResult(
            treatment=strong_treatment,
            score=90.5,
            iterations=3,
            score_history=[70.0, 90.5, 80.0],
        )
        record = build_recommendation(sample_form, result)

        assert record.patient_name == "Jordan Smith"
        assert record.condition_id == "cnd-htn"
        assert record.recommended_treatment_id == "trt-strong"
        assert record.optimization_score == 90.5
        assert record.iterations == 3
        assert record.id is None


class TestGenerateRecommendation:
    """Tests for the end-to-end workflow."""

    def test_recommends_and_stores(
        self,
        store: RecommendationStore,
        sample_form: PatientFormData,
        sample_conditions: list[PatientCondition],
        sample_treatments: list[Treatment],
    ) -> None:
        """A valid request returns a result and stores one record."""
        result, profile = generate_recommendation(
            store,
            sample_form,
            sample_conditions,
            sample_treatments,
            rng=random.Random(0),
        )

        assert result.treatment.id == "trt-strong"
        assert profile.condition_severity == 60

        history = store.fetch_recommendations()
        assert history.height == 1
        row = history.row(0, named=True)
        assert row["recommended_treatment_id"] == "trt-strong"
        assert row["iterations"] == result.iterations
        assert row["optimization_score"] == pytest.approx(result.score)
        assert row["allergies"] == "penicillin"

    def test_score_reflects_severity(
        self,
        store: RecommendationStore,
        sample_form: PatientFormData,
        sample_conditions: list[PatientCondition],
        sample_treatments: list[Treatment],
    ) -> None:
        """Hypertension severity 60 scales the score by 1.3."""
        result, _ = generate_recommendation(
            store, sample_form, sample_conditions, sample_treatments
        )
        assert result.score == pytest.approx(101.1 / 1.16 * 1.3)

    def test_invalid_condition_rejected(
        self,
        store: RecommendationStore,
        sample_form: PatientFormData,
        sample_conditions: list[PatientCondition],
        sample_treatments: list[Treatment],
    ) -> None:
        """Unknown conditions are rejected before anything is stored."""
        sample_form.condition_id = "cnd-unknown"

        with pytest.raises(ValueError, match="valid condition"):
            generate_recommendation(
                store, sample_form, sample_conditions, sample_treatments
            )

        assert not store.recommendations_path.exists()

    def test_empty_catalog_rejected(
        self,
        store: RecommendationStore,
        sample_form: PatientFormData,
        sample_conditions: list[PatientCondition],
    ) -> None:
        """No treatments means no recommendation and no record."""
        with pytest.raises(EmptyCandidateSetError):
            generate_recommendation(store, sample_form, sample_conditions, [])

        assert not store.recommendations_path.exists()

    def test_iteration_cap_passed_through(
        self,
        store: RecommendationStore,
        sample_form: PatientFormData,
        sample_conditions: list[PatientCondition],
        sample_treatments: list[Treatment],
    ) -> None:
        """max_iterations should bound the stored iteration count."""
        result, _ = generate_recommendation(
            store,
            sample_form,
            sample_conditions,
            sample_treatments,
            max_iterations=0,
        )

        assert result.iterations == 0
        assert store.fetch_recommendations()["iterations"][0] == 0
