"""Schema validation for treatment catalog sources."""

import logging
from dataclasses import dataclass, field

import polars as pl

logger = logging.getLogger(__name__)


# Required columns for each data source
TREATMENT_REQUIRED_COLUMNS = {
    "id",
    "name",
    "effectiveness_score",
    "side_effects_score",
    "cost_score",
}
TREATMENT_OPTIONAL_COLUMNS = {"category", "description"}

CONDITION_REQUIRED_COLUMNS = {"id", "condition_name", "severity"}
CONDITION_OPTIONAL_COLUMNS = {"description"}

SCORE_COLUMNS = ["effectiveness_score", "side_effects_score", "cost_score"]
SCORE_MIN = 0
SCORE_MAX = 100


@dataclass
class ValidationResult:
    """Result of a schema validation check.

    Attributes:
        is_valid: Whether the validation passed.
        message: Human-readable description of the result.
        missing_columns: List of required columns that are missing.
        row_count: Number of rows in the validated DataFrame.
        warnings: List of non-fatal issues detected.
    """

    is_valid: bool
    message: str
    missing_columns: list[str] = field(default_factory=list)
    row_count: int = 0
    warnings: list[str] = field(default_factory=list)


def _validate_columns(
    df: pl.DataFrame,
    source_name: str,
    required: set[str],
    optional: set[str],
) -> ValidationResult:
    """Check required and recommended columns of a DataFrame."""
    columns = set(df.columns)
    missing = required - columns

    if missing:
        return ValidationResult(
            is_valid=False,
            message=f"{source_name} missing required columns: {sorted(missing)}",
            missing_columns=sorted(missing),
            row_count=df.height,
        )

    warnings = []
    missing_optional = optional - columns
    if missing_optional:
        warnings.append(
            f"{source_name} missing recommended columns: {sorted(missing_optional)}"
        )

    if df.height == 0:
        warnings.append(f"{source_name} has no rows")

    return ValidationResult(
        is_valid=True,
        message=f"{source_name} schema valid with {df.height} rows",
        missing_columns=[],
        row_count=df.height,
        warnings=warnings,
    )


def validate_treatment_schema(df: pl.DataFrame) -> ValidationResult:
    """Validate treatment catalog schema.

    - Must contain id, name and the three score columns
    - category and description are recommended

    Args:
        df: DataFrame to validate.

    Returns:
        ValidationResult with status and details.
    """
    return _validate_columns(
        df, "Treatments", TREATMENT_REQUIRED_COLUMNS, TREATMENT_OPTIONAL_COLUMNS
    )


def validate_condition_schema(df: pl.DataFrame) -> ValidationResult:
    """Validate patient condition list schema.

    - Must contain id, condition_name and severity
    - Every severity must be present (it feeds the severity factor)

    Args:
        df: DataFrame to validate.

    Returns:
        ValidationResult with status and details.
    """
    result = _validate_columns(
        df, "Conditions", CONDITION_REQUIRED_COLUMNS, CONDITION_OPTIONAL_COLUMNS
    )
    if not result.is_valid:
        return result

    null_count = df["severity"].null_count()
    if null_count > 0:
        return ValidationResult(
            is_valid=False,
            message=f"Conditions have {null_count} rows without a severity",
            row_count=df.height,
            warnings=result.warnings,
        )

    return result


def validate_score_ranges(df: pl.DataFrame) -> ValidationResult:
    """Validate that every treatment score is numeric and within [0, 100].

    Args:
        df: Treatment DataFrame with the score columns present.

    Returns:
        ValidationResult listing every offending column.
    """
    problems = []

    for col in SCORE_COLUMNS:
        if col not in df.columns:
            problems.append(f"'{col}' is missing")
            continue

        if not df.schema[col].is_numeric():
            problems.append(f"'{col}' is not numeric ({df.schema[col]})")
            continue

        null_count = df[col].null_count()
        if null_count > 0:
            problems.append(f"'{col}' has {null_count} empty values")

        out_of_range = df.filter(
            (pl.col(col) < SCORE_MIN) | (pl.col(col) > SCORE_MAX)
        ).height
        if out_of_range > 0:
            problems.append(
                f"'{col}' has {out_of_range} values outside "
                f"[{SCORE_MIN}, {SCORE_MAX}]"
            )

    if problems:
        logger.warning(f"Score range validation failed: {problems}")
        return ValidationResult(
            is_valid=False,
            message="Invalid treatment scores: " + "; ".join(problems),
            row_count=df.height,
        )

    return ValidationResult(
        is_valid=True,
        message=f"All scores within [{SCORE_MIN}, {SCORE_MAX}]",
        row_count=df.height,
    )


def validate_unique_ids(
    df: pl.DataFrame,
    id_column: str = "id",
) -> ValidationResult:
    """Validate that identifiers are present and unique.

    The optimizer excludes the current treatment from its neighbors by id,
    so duplicates would silently drop candidates from every scan.

    Args:
        df: DataFrame to validate.
        id_column: Name of the identifier column.

    Returns:
        ValidationResult with status and details.
    """
    if id_column not in df.columns:
        return ValidationResult(
            is_valid=False,
            message=f"Missing identifier column '{id_column}'",
            missing_columns=[id_column],
            row_count=df.height,
        )

    null_count = df[id_column].null_count()
    if null_count > 0:
        return ValidationResult(
            is_valid=False,
            message=f"{null_count} rows have an empty '{id_column}'",
            row_count=df.height,
        )

    duplicates = (
        df.filter(pl.col(id_column).is_duplicated())[id_column].unique().to_list()
    )
    if duplicates:
        return ValidationResult(
            is_valid=False,
            message=f"Duplicate '{id_column}' values: {sorted(map(str, duplicates))}",
            row_count=df.height,
        )

    return ValidationResult(
        is_valid=True,
        message=f"All {df.height} '{id_column}' values are unique",
        row_count=df.height,
    )
