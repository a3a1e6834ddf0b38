"""Data models for Treatment Optimizer."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Treatment:
    """Treatment option from the catalog.

    Attributes:
        id: Unique treatment identifier.
        name: Display name of the treatment.
        category: Treatment class (e.g., "Medication", "Therapy").
        effectiveness_score: Expected effectiveness (0-100, higher is better).
        side_effects_score: Side-effect burden (0-100, higher is worse).
        cost_score: Relative cost (0-100, higher is more expensive).
        description: Free-text description.
        created_at: Timestamp from the source catalog, if any.
    """

    id: str
    name: str
    category: str
    effectiveness_score: float
    side_effects_score: float
    cost_score: float
    description: str = ""
    created_at: str | None = None


@dataclass(frozen=True)
class PatientCondition:
    """Medical condition a patient can be treated for.

    Attributes:
        id: Unique condition identifier.
        condition_name: Display name of the condition.
        severity: Severity on the catalog's numeric scale.
        description: Free-text description.
        created_at: Timestamp from the source catalog, if any.
    """

    id: str
    condition_name: str
    severity: float
    description: str = ""
    created_at: str | None = None

    @property
    def display_label(self) -> str:
        """Return label used in condition pickers."""
        return f"{self.condition_name} (Severity: {self.severity:g})"


@dataclass
class PatientProfile:
    """Preference profile the scorer evaluates treatments against.

    Allergies and current medications are carried with the profile but
    are not part of the scoring formula.

    Attributes:
        age: Patient age in years.
        condition_severity: Severity of the selected condition.
        allergies: Reported allergies.
        current_medications: Medications the patient currently takes.
        prioritize_effectiveness: Weight effectiveness more heavily.
        prioritize_safety: Weight low side effects more heavily.
        prioritize_cost: Weight low cost more heavily.
    """

    age: int
    condition_severity: float
    allergies: list[str] = field(default_factory=list)
    current_medications: list[str] = field(default_factory=list)
    prioritize_effectiveness: bool = False
    prioritize_safety: bool = False
    prioritize_cost: bool = False


@dataclass
class PatientFormData:
    """Raw patient input collected by the data-entry form."""

    patient_name: str
    condition_id: str
    age: int = 30
    allergies: list[str] = field(default_factory=list)
    current_medications: list[str] = field(default_factory=list)
    prioritize_effectiveness: bool = True
    prioritize_safety: bool = False
    prioritize_cost: bool = False


@dataclass
class OptimizationResult:
    """Outcome of a hill climbing run.

    Attributes:
        treatment: Treatment the search settled on.
        score: Score of the chosen treatment.
        iterations: Number of loop iterations executed.
        score_history: Initial score followed by the best neighbor score
            of every completed neighbor scan.
    """

    treatment: Treatment
    score: float
    iterations: int
    score_history: list[float] = field(default_factory=list)

    @property
    def score_improvement(self) -> float:
        """Difference between the last and first recorded scores.

        The last entry is the best neighbor of the final scan, so it can
        sit below the chosen score when the search stopped at a peak.
        """
        if len(self.score_history) > 1:
            return self.score_history[-1] - self.score_history[0]
        return 0.0


@dataclass
class Recommendation:
    """Recommendation record appended to the history store.

    Attributes:
        patient_name: Patient name as entered on the form.
        condition_id: Selected condition identifier.
        age: Patient age in years.
        allergies: Reported allergies.
        current_medications: Current medications.
        recommended_treatment_id: Identifier of the chosen treatment.
        optimization_score: Score of the chosen treatment.
        iterations: Iterations the optimizer executed.
        id: Record identifier, assigned by the store.
        created_at: Insertion timestamp, assigned by the store.
    """

    patient_name: str
    condition_id: str
    age: int
    allergies: list[str]
    current_medications: list[str]
    recommended_treatment_id: str
    optimization_score: float
    iterations: int
    id: str | None = None
    created_at: str | None = None

    def to_record(self) -> dict[str, object]:
        """Convert to the flat row layout written by the store.

        Returns:
            Dictionary with list fields joined by ";".
        """
        return {
            "id": self.id,
            "patient_name": self.patient_name,
            "condition_id": self.condition_id,
            "age": self.age,
            "allergies": ";".join(self.allergies),
            "current_medications": ";".join(self.current_medications),
            "recommended_treatment_id": self.recommended_treatment_id,
            "optimization_score": self.optimization_score,
            "iterations": self.iterations,
            "created_at": self.created_at,
        }
