"""Treatment Optimizer.

Recommends a treatment for a patient by scoring the treatment catalog
against patient preferences and hill climbing to a local optimum.
"""

from treatment_optimizer.config import Settings
from treatment_optimizer.models import (
    OptimizationResult,
    PatientCondition,
    PatientProfile,
    Treatment,
)

__version__ = "0.1.0"
__all__ = [
    "Settings",
    "Treatment",
    "PatientCondition",
    "PatientProfile",
    "OptimizationResult",
]
