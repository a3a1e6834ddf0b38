"""Shared pytest fixtures for Treatment Optimizer tests."""

import os
from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import polars as pl
import pytest

from treatment_optimizer.config import Settings
from treatment_optimizer.models import (
    PatientCondition,
    PatientFormData,
    PatientProfile,
    Treatment,
)
from treatment_optimizer.storage import RecommendationStore


@pytest.fixture
def mock_env_vars() -> Generator[dict[str, str], None, None]:
    """Set up mock environment variables for testing.

    Yields:
        Dictionary of mock environment variables.
    """
    env_vars = {
        "LOG_LEVEL": "DEBUG",
        "DATA_DIR": "/tmp/test_data",
        "MAX_ITERATIONS": "25",
        "RANDOM_SEED": "42",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def test_settings(mock_env_vars: dict[str, str]) -> Settings:
    """Create test settings with mock values."""
    return Settings.from_env()


@pytest.fixture
def strong_treatment() -> Treatment:
    """Highly effective treatment with moderate side effects and cost.

    Returns:
        Treatment scoring 101.1 / 1.16 for the effectiveness-first profile.
    """
    return Treatment(
        id="trt-strong",
        name="Strong Option",
        category="Medication",
        effectiveness_score=90,
        side_effects_score=10,
        cost_score=20,
        description="High efficacy",
    )


@pytest.fixture
def gentle_treatment() -> Treatment:
    """Less effective treatment that is safer and cheaper.

    Returns:
        Treatment scoring 91.05 / 1.16 for the effectiveness-first profile.
    """
    return Treatment(
        id="trt-gentle",
        name="Gentle Option",
        category="Therapy",
        effectiveness_score=60,
        side_effects_score=5,
        cost_score=10,
        description="Low risk",
    )


@pytest.fixture
def weak_treatment() -> Treatment:
    """Treatment that scores lowest under every priority combination."""
    return Treatment(
        id="trt-weak",
        name="Weak Option",
        category="Medication",
        effectiveness_score=30,
        side_effects_score=70,
        cost_score=90,
    )


@pytest.fixture
def sample_treatments(
    strong_treatment: Treatment,
    gentle_treatment: Treatment,
) -> list[Treatment]:
    """Two-treatment catalog, strong option first."""
    return [strong_treatment, gentle_treatment]


@pytest.fixture
def effectiveness_profile() -> PatientProfile:
    """Middle-aged patient prioritizing effectiveness, zero severity."""
    return PatientProfile(
        age=40,
        condition_severity=0,
        prioritize_effectiveness=True,
    )


@pytest.fixture
def sample_conditions() -> list[PatientCondition]:
    """Conditions ordered by name."""
    return [
        PatientCondition(
            id="cnd-htn",
            condition_name="Hypertension",
            severity=60,
            description="Elevated blood pressure",
        ),
        PatientCondition(
            id="cnd-oa",
            condition_name="Osteoarthritis",
            severity=40,
        ),
    ]


@pytest.fixture
def sample_form() -> PatientFormData:
    """Form input selecting Hypertension."""
    return PatientFormData(
        patient_name="Jordan Smith",
        condition_id="cnd-htn",
        age=52,
        allergies=["penicillin"],
        current_medications=["metformin", "aspirin"],
        prioritize_effectiveness=True,
    )


@pytest.fixture
def sample_treatment_df() -> pl.DataFrame:
    """Raw treatment catalog DataFrame, deliberately not sorted by name."""
    return pl.DataFrame(
        {
            "id": ["trt-002", "trt-001", "trt-003"],
            "name": ["Physical Therapy", "Biologic Infusion", "Surgery"],
            "category": ["Therapy", "Biologic", None],
            "effectiveness_score": [68, 92, 88],
            "side_effects_score": [5, 35, 30],
            "cost_score": [40, 90, 85],
            "description": ["Weekly sessions", "Monthly infusion", None],
        }
    )


@pytest.fixture
def sample_condition_df() -> pl.DataFrame:
    """Raw condition DataFrame."""
    return pl.DataFrame(
        {
            "id": ["cnd-2", "cnd-1"],
            "condition_name": ["Osteoarthritis", "Hypertension"],
            "severity": [40, 60],
            "description": ["Joint pain", "Blood pressure"],
        }
    )


@pytest.fixture
def data_dir(
    tmp_path: Path,
    sample_treatment_df: pl.DataFrame,
    sample_condition_df: pl.DataFrame,
) -> Path:
    """Data directory with treatment and condition CSV files."""
    sample_treatment_df.write_csv(tmp_path / "treatments.csv")
    sample_condition_df.write_csv(tmp_path / "patient_conditions.csv")
    return tmp_path


@pytest.fixture
def store(data_dir: Path) -> RecommendationStore:
    """Store over the sample data directory."""
    return RecommendationStore(data_dir)
