"""Reusable UI components for Treatment Optimizer."""

from treatment_optimizer.ui.components.patient_form import render_patient_form
from treatment_optimizer.ui.components.recommendation_result import (
    render_recommendation_result,
)

__all__ = [
    "render_patient_form",
    "render_recommendation_result",
]
