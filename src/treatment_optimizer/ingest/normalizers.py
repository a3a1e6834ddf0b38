"""Data normalization for treatment catalog sources.

This module handles:
- Column mapping/renaming for exported catalog files
- Type casting of identifiers, scores and severities
- Ordering by display name (the catalog's canonical order)
- Conversion of DataFrame rows to model records
"""

import logging

import polars as pl

from treatment_optimizer.models import PatientCondition, Treatment

logger = logging.getLogger(__name__)


# Maps raw column names to standardized names
TREATMENT_COLUMN_MAP = {
    "ID": "id",
    "Treatment ID": "id",
    "Name": "name",
    "Treatment Name": "name",
    "Category": "category",
    "Effectiveness": "effectiveness_score",
    "Effectiveness Score": "effectiveness_score",
    "Side Effects": "side_effects_score",
    "Side Effects Score": "side_effects_score",
    "Cost": "cost_score",
    "Cost Score": "cost_score",
    "Description": "description",
}

CONDITION_COLUMN_MAP = {
    "ID": "id",
    "Condition ID": "id",
    "Condition": "condition_name",
    "Condition Name": "condition_name",
    "Severity": "severity",
    "Description": "description",
}

TREATMENT_SCORE_COLUMNS = ["effectiveness_score", "side_effects_score", "cost_score"]


def _rename_columns(df: pl.DataFrame, column_map: dict[str, str]) -> pl.DataFrame:
    """Rename raw columns to standard names without clobbering existing ones."""
    for old_name, new_name in column_map.items():
        if old_name in df.columns and new_name not in df.columns:
            df = df.rename({old_name: new_name})
    return df


def _fill_text_columns(df: pl.DataFrame, columns: list[str]) -> pl.DataFrame:
    """Cast text columns to strings, adding empty ones where absent."""
    for col in columns:
        if col in df.columns:
            df = df.with_columns(pl.col(col).cast(pl.String).fill_null(""))
        else:
            df = df.with_columns(pl.lit("").alias(col))
    return df


def normalize_treatments(df: pl.DataFrame) -> pl.DataFrame:
    """Normalize a treatment catalog DataFrame.

    Renames known column aliases, casts identifiers to strings and scores to
    floats (unparseable values become null so validation can report them),
    fills missing text with "" and sorts by name.

    Args:
        df: Raw treatment DataFrame.

    Returns:
        Normalized DataFrame.
    """
    df = _rename_columns(df, TREATMENT_COLUMN_MAP)

    if "id" in df.columns:
        df = df.with_columns(pl.col("id").cast(pl.String))

    score_cols = [col for col in TREATMENT_SCORE_COLUMNS if col in df.columns]
    if score_cols:
        df = df.with_columns(
            [pl.col(col).cast(pl.Float64, strict=False) for col in score_cols]
        )

    df = _fill_text_columns(df, ["category", "description"])

    if "name" in df.columns:
        df = df.with_columns(pl.col("name").cast(pl.String)).sort(
            "name", maintain_order=True
        )

    logger.info(f"Normalized {df.height} treatments")
    return df


def normalize_conditions(df: pl.DataFrame) -> pl.DataFrame:
    """Normalize a patient condition DataFrame.

    Args:
        df: Raw condition DataFrame.

    Returns:
        Normalized DataFrame sorted by condition name.
    """
    df = _rename_columns(df, CONDITION_COLUMN_MAP)

    if "id" in df.columns:
        df = df.with_columns(pl.col("id").cast(pl.String))

    if "severity" in df.columns:
        df = df.with_columns(pl.col("severity").cast(pl.Float64, strict=False))

    df = _fill_text_columns(df, ["description"])

    if "condition_name" in df.columns:
        df = df.with_columns(pl.col("condition_name").cast(pl.String)).sort(
            "condition_name", maintain_order=True
        )

    logger.info(f"Normalized {df.height} conditions")
    return df


def _optional_text(value: object) -> str | None:
    return None if value is None else str(value)


def treatments_from_df(df: pl.DataFrame) -> list[Treatment]:
    """Convert normalized treatment rows to Treatment records.

    Row order is preserved.

    Args:
        df: Normalized treatment DataFrame.

    Returns:
        List of Treatment records.
    """
    return [
        Treatment(
            id=str(row["id"]),
            name=str(row["name"]),
            category=str(row.get("category") or ""),
            effectiveness_score=float(row["effectiveness_score"]),
            side_effects_score=float(row["side_effects_score"]),
            cost_score=float(row["cost_score"]),
            description=str(row.get("description") or ""),
            created_at=_optional_text(row.get("created_at")),
        )
        for row in df.iter_rows(named=True)
    ]


def conditions_from_df(df: pl.DataFrame) -> list[PatientCondition]:
    """Convert normalized condition rows to PatientCondition records.

    Args:
        df: Normalized condition DataFrame.

    Returns:
        List of PatientCondition records.
    """
    return [
        PatientCondition(
            id=str(row["id"]),
            condition_name=str(row["condition_name"]),
            severity=float(row["severity"]),
            description=str(row.get("description") or ""),
            created_at=_optional_text(row.get("created_at")),
        )
        for row in df.iter_rows(named=True)
    ]


def parse_list_input(text: str | None, separator: str = ",") -> list[str]:
    """Split free text into a list of trimmed, non-empty entries.

    Example: "penicillin, , latex" -> ["penicillin", "latex"]

    Args:
        text: Raw text (None is treated as empty).
        separator: Entry separator.

    Returns:
        List of entries in input order.
    """
    if not text:
        return []
    return [item.strip() for item in text.split(separator) if item.strip()]
