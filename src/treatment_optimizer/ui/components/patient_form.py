"""Patient data-entry form component for Treatment Optimizer."""

import streamlit as st

from treatment_optimizer.ingest.normalizers import parse_list_input
from treatment_optimizer.models import PatientCondition, PatientFormData

MIN_AGE = 1
MAX_AGE = 120


def render_patient_form(
    conditions: list[PatientCondition],
    key: str = "patient_form",
) -> PatientFormData | None:
    """Render the patient form.

    Allergies and medications are entered as comma-separated text.

    Args:
        conditions: Conditions offered in the condition picker.
        key: Unique key for the form widget.

    Returns:
        PatientFormData when the form is submitted with a patient name,
        otherwise None.
    """
    labels = {c.id: c.display_label for c in conditions}
    defaults = PatientFormData(patient_name="", condition_id="")

    with st.form(key):
        patient_name = st.text_input("Patient Name", placeholder="Enter patient name")

        condition_id = st.selectbox(
            "Medical Condition",
            options=[""] + list(labels.keys()),
            format_func=lambda cid: labels.get(cid, "Select a condition"),
        )

        age = st.number_input(
            "Age",
            min_value=MIN_AGE,
            max_value=MAX_AGE,
            value=defaults.age,
            step=1,
        )

        allergies_text = st.text_input(
            "Allergies (comma-separated)",
            placeholder="e.g., penicillin, latex",
        )
        medications_text = st.text_input(
            "Current Medications (comma-separated)",
            placeholder="e.g., metformin, lisinopril",
        )

        st.markdown("**Treatment Priorities**")
        prioritize_effectiveness = st.checkbox(
            "Prioritize Effectiveness", value=defaults.prioritize_effectiveness
        )
        prioritize_safety = st.checkbox(
            "Prioritize Safety", value=defaults.prioritize_safety
        )
        prioritize_cost = st.checkbox(
            "Prioritize Low Cost", value=defaults.prioritize_cost
        )

        submitted = st.form_submit_button(
            "Get Recommendation", type="primary", use_container_width=True
        )

    if not submitted:
        return None

    if not patient_name.strip():
        st.warning("Please enter the patient name")
        return None

    return PatientFormData(
        patient_name=patient_name.strip(),
        condition_id=condition_id or "",
        age=int(age),
        allergies=parse_list_input(allergies_text),
        current_medications=parse_list_input(medications_text),
        prioritize_effectiveness=prioritize_effectiveness,
        prioritize_safety=prioritize_safety,
        prioritize_cost=prioritize_cost,
    )
