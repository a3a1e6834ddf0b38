"""Tests for catalog schema validation."""

import polars as pl

from treatment_optimizer.ingest.validators import (
    ValidationResult,
    validate_condition_schema,
    validate_score_ranges,
    validate_treatment_schema,
    validate_unique_ids,
)


class TestValidationResult:
    """Tests for ValidationResult dataclass."""

    def test_default_values(self) -> None:
        """ValidationResult should have sensible defaults."""
        result = ValidationResult(is_valid=True, message="OK")

        assert result.missing_columns == []
        assert result.row_count == 0
        assert result.warnings == []


class TestTreatmentSchema:
    """Tests for treatment schema validation."""

    def test_valid_catalog_passes(self, sample_treatment_df: pl.DataFrame) -> None:
        """Catalog with all columns should pass without warnings."""
        result = validate_treatment_schema(sample_treatment_df)

        assert result.is_valid is True
        assert result.row_count == 3
        assert result.warnings == []

    def test_missing_score_column_fails(self) -> None:
        """Catalog without cost_score should fail."""
        df = pl.DataFrame(
            {"id": ["1"], "name": ["A"], "effectiveness_score": [1],
             "side_effects_score": [1]}
        )
        result = validate_treatment_schema(df)

        assert result.is_valid is False
        assert result.missing_columns == ["cost_score"]

    def test_missing_optional_warns(self) -> None:
        """Missing category/description should only warn."""
        df = pl.DataFrame(
            {"id": ["1"], "name": ["A"], "effectiveness_score": [1],
             "side_effects_score": [1], "cost_score": [1]}
        )
        result = validate_treatment_schema(df)

        assert result.is_valid is True
        assert any("recommended" in w for w in result.warnings)

    def test_empty_catalog_warns(self, sample_treatment_df: pl.DataFrame) -> None:
        """An empty catalog is structurally valid but flagged."""
        result = validate_treatment_schema(sample_treatment_df.head(0))

        assert result.is_valid is True
        assert any("no rows" in w for w in result.warnings)


class TestConditionSchema:
    """Tests for condition schema validation."""

    def test_valid_conditions_pass(self, sample_condition_df: pl.DataFrame) -> None:
        """Conditions with all columns should pass."""
        assert validate_condition_schema(sample_condition_df).is_valid is True

    def test_missing_severity_column_fails(self) -> None:
        """Conditions without severity should fail."""
        df = pl.DataFrame({"id": ["1"], "condition_name": ["A"]})
        result = validate_condition_schema(df)

        assert result.is_valid is False
        assert result.missing_columns == ["severity"]

    def test_null_severity_fails(self) -> None:
        """Every condition needs a severity."""
        df = pl.DataFrame(
            {"id": ["1", "2"], "condition_name": ["A", "B"], "severity": [10.0, None]}
        )
        result = validate_condition_schema(df)

        assert result.is_valid is False
        assert "severity" in result.message


class TestScoreRanges:
    """Tests for score range validation."""

    def test_scores_in_range_pass(self, sample_treatment_df: pl.DataFrame) -> None:
        """Scores within [0, 100] should pass."""
        assert validate_score_ranges(sample_treatment_df).is_valid is True

    def test_boundaries_allowed(self) -> None:
        """0 and 100 are valid scores."""
        df = pl.DataFrame(
            {"effectiveness_score": [0, 100], "side_effects_score": [100, 0],
             "cost_score": [0, 100]}
        )
        assert validate_score_ranges(df).is_valid is True

    def test_out_of_range_fails(self) -> None:
        """Scores outside [0, 100] should fail and name the column."""
        df = pl.DataFrame(
            {"effectiveness_score": [101], "side_effects_score": [5],
             "cost_score": [-1]}
        )
        result = validate_score_ranges(df)

        assert result.is_valid is False
        assert "effectiveness_score" in result.message
        assert "cost_score" in result.message
        assert "side_effects_score" not in result.message

    def test_null_score_fails(self) -> None:
        """Empty scores should fail."""
        df = pl.DataFrame(
            {"effectiveness_score": [50.0, None], "side_effects_score": [5, 5],
             "cost_score": [5, 5]}
        )
        result = validate_score_ranges(df)

        assert result.is_valid is False
        assert "empty" in result.message

    def test_non_numeric_fails(self) -> None:
        """Text scores should fail."""
        df = pl.DataFrame(
            {"effectiveness_score": ["high"], "side_effects_score": [5],
             "cost_score": [5]}
        )
        result = validate_score_ranges(df)

        assert result.is_valid is False
        assert "not numeric" in result.message


class TestUniqueIds:
    """Tests for identifier uniqueness."""

    def test_unique_ids_pass(self, sample_treatment_df: pl.DataFrame) -> None:
        """Distinct ids should pass."""
        assert validate_unique_ids(sample_treatment_df).is_valid is True

    def test_duplicate_ids_fail(self) -> None:
        """Repeated ids should fail and be listed."""
        df = pl.DataFrame({"id": ["a", "b", "a"]})
        result = validate_unique_ids(df)

        assert result.is_valid is False
        assert "'a'" in result.message

    def test_null_ids_fail(self) -> None:
        """Empty ids should fail."""
        df = pl.DataFrame({"id": ["a", None]})
        assert validate_unique_ids(df).is_valid is False

    def test_missing_id_column_fails(self) -> None:
        """Missing id column should fail."""
        result = validate_unique_ids(pl.DataFrame({"name": ["a"]}))

        assert result.is_valid is False
        assert result.missing_columns == ["id"]
