"""File-backed store for the treatment catalog and recommendation history.

The store is an explicit handle: build it once at start-up with
``RecommendationStore.from_settings`` and pass it to whatever needs to
fetch catalog data or record a recommendation.
"""

import dataclasses
import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path

import polars as pl

from treatment_optimizer.config import Settings
from treatment_optimizer.ingest.loaders import load_csv_to_polars, load_file_auto
from treatment_optimizer.ingest.normalizers import (
    conditions_from_df,
    normalize_conditions,
    normalize_treatments,
    treatments_from_df,
)
from treatment_optimizer.ingest.validators import (
    ValidationResult,
    validate_condition_schema,
    validate_score_ranges,
    validate_treatment_schema,
    validate_unique_ids,
)
from treatment_optimizer.models import PatientCondition, Recommendation, Treatment

logger = logging.getLogger(__name__)

TREATMENTS_FILE = "treatments.csv"
CONDITIONS_FILE = "patient_conditions.csv"
RECOMMENDATIONS_FILE = "recommendations.csv"

RECOMMENDATION_SCHEMA = {
    "id": pl.String,
    "patient_name": pl.String,
    "condition_id": pl.String,
    "age": pl.Int64,
    "allergies": pl.String,
    "current_medications": pl.String,
    "recommended_treatment_id": pl.String,
    "optimization_score": pl.Float64,
    "iterations": pl.Int64,
    "created_at": pl.String,
}


def _raise_if_invalid(result: ValidationResult, path: Path) -> None:
    for warning in result.warnings:
        logger.warning(f"{path.name}: {warning}")
    if not result.is_valid:
        logger.error(f"{path.name}: {result.message}")
        raise ValueError(f"{path.name}: {result.message}")


class RecommendationStore:
    """Catalog reader and recommendation log over a data directory.

    Attributes:
        data_dir: Directory holding the catalog and history files.
        treatments_path: Treatment catalog (CSV or Excel).
        conditions_path: Patient condition list (CSV or Excel).
        recommendations_path: Append-only recommendation history (CSV).
    """

    def __init__(
        self,
        data_dir: Path,
        treatments_file: str = TREATMENTS_FILE,
        conditions_file: str = CONDITIONS_FILE,
        recommendations_file: str = RECOMMENDATIONS_FILE,
    ) -> None:
        self.data_dir = Path(data_dir)
        self.treatments_path = self.data_dir / treatments_file
        self.conditions_path = self.data_dir / conditions_file
        self.recommendations_path = self.data_dir / recommendations_file

    @classmethod
    def from_settings(cls, settings: Settings) -> "RecommendationStore":
        """Create a store rooted at the configured data directory.

        Args:
            settings: Application settings.

        Returns:
            RecommendationStore instance.
        """
        settings.ensure_directories()
        logger.info(f"Using data directory: {settings.data_dir}")
        return cls(settings.data_dir)

    def _load(self, path: Path) -> pl.DataFrame:
        if not path.exists():
            raise FileNotFoundError(f"Data file not found: {path}")
        return load_file_auto(path)

    def fetch_treatments(self) -> list[Treatment]:
        """Load, validate and return the treatment catalog ordered by name.

        Returns:
            List of treatments.

        Raises:
            FileNotFoundError: If the catalog file does not exist.
            ValueError: If the catalog cannot be parsed or fails validation.
        """
        df = normalize_treatments(self._load(self.treatments_path))

        _raise_if_invalid(validate_treatment_schema(df), self.treatments_path)
        _raise_if_invalid(validate_score_ranges(df), self.treatments_path)
        _raise_if_invalid(validate_unique_ids(df), self.treatments_path)

        treatments = treatments_from_df(df)
        logger.info(f"Fetched {len(treatments)} treatments")
        return treatments

    def fetch_conditions(self) -> list[PatientCondition]:
        """Load, validate and return patient conditions ordered by name.

        Returns:
            List of conditions.

        Raises:
            FileNotFoundError: If the condition file does not exist.
            ValueError: If the file cannot be parsed or fails validation.
        """
        df = normalize_conditions(self._load(self.conditions_path))

        _raise_if_invalid(validate_condition_schema(df), self.conditions_path)
        _raise_if_invalid(validate_unique_ids(df), self.conditions_path)

        conditions = conditions_from_df(df)
        logger.info(f"Fetched {len(conditions)} conditions")
        return conditions

    def insert_recommendation(self, recommendation: Recommendation) -> Recommendation:
        """Append one recommendation to the history file.

        Args:
            recommendation: Record to store (id and created_at are assigned).

        Returns:
            The stored record with id and created_at populated.
        """
        stored = dataclasses.replace(
            recommendation,
            id=str(uuid.uuid4()),
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        row = pl.DataFrame([stored.to_record()], schema=RECOMMENDATION_SCHEMA)

        if self.recommendations_path.exists():
            with open(self.recommendations_path, "ab") as f:
                row.write_csv(f, include_header=False)
        else:
            self.recommendations_path.parent.mkdir(parents=True, exist_ok=True)
            row.write_csv(self.recommendations_path)

        logger.info(
            f"Stored recommendation {stored.id}: treatment "
            f"{stored.recommended_treatment_id} for {stored.patient_name}"
        )
        return stored

    def fetch_recommendations(self) -> pl.DataFrame:
        """Return the recommendation history, newest first.

        Returns:
            DataFrame with one row per stored recommendation (empty with the
            record columns when nothing has been stored).
        """
        if not self.recommendations_path.exists():
            return pl.DataFrame(schema=RECOMMENDATION_SCHEMA)

        df = load_csv_to_polars(
            self.recommendations_path, schema_overrides=RECOMMENDATION_SCHEMA
        )
        return df.sort("created_at", descending=True)
