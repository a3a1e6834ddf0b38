"""Data ingestion module for Treatment Optimizer.

This module handles:
- Loading catalog files (CSV / Excel)
- Validating schemas and score ranges
- Normalizing rows into typed records
"""

from treatment_optimizer.ingest.loaders import (
    detect_file_type,
    load_csv_to_polars,
    load_excel_to_polars,
    load_file_auto,
)
from treatment_optimizer.ingest.normalizers import (
    conditions_from_df,
    normalize_conditions,
    normalize_treatments,
    parse_list_input,
    treatments_from_df,
)
from treatment_optimizer.ingest.validators import (
    ValidationResult,
    validate_condition_schema,
    validate_score_ranges,
    validate_treatment_schema,
    validate_unique_ids,
)

__all__ = [
    # Loaders
    "load_excel_to_polars",
    "load_csv_to_polars",
    "load_file_auto",
    "detect_file_type",
    # Validators
    "ValidationResult",
    "validate_treatment_schema",
    "validate_condition_schema",
    "validate_score_ranges",
    "validate_unique_ids",
    # Normalizers
    "normalize_treatments",
    "normalize_conditions",
    "treatments_from_df",
    "conditions_from_df",
    "parse_list_input",
]
