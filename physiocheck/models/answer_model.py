import re
from typing import Annotated, Any, Dict, List

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from physiocheck.catalog.catalog import category, red_flag_keys
from physiocheck.utils.logger import warn

_INT_PREFIX = re.compile(r"^\s*([+-]?)(\d+)")

# Longer digit runs all land in the top pain band
MAX_PREFIX_DIGITS = 6


# ---------------------------------------------------------
# Coercion helpers (answers are never rejected)
# ---------------------------------------------------------
def _as_text(v: Any) -> str:
    return v if isinstance(v, str) else ""


def _as_choices(v: Any) -> List[str]:
    if isinstance(v, str):
        return [v]
    if isinstance(v, (list, tuple, set, frozenset)):
        return [item for item in v if isinstance(item, str)]
    return []


def _as_int_prefix(v: Any) -> int:
    """
    Integer prefix of the answer: 7 -> 7, 7.9 -> 7, "7/10" -> 7.
    Anything without a leading integer reads as 0.
    """
    if isinstance(v, bool):
        return 0
    if isinstance(v, int):
        return v
    if isinstance(v, float):
        return int(v) if v == v and abs(v) != float("inf") else 0
    if isinstance(v, str):
        m = _INT_PREFIX.match(v)
        if not m:
            return 0
        sign, digits = m.group(1), m.group(2).lstrip("0") or "0"
        if len(digits) > MAX_PREFIX_DIGITS:
            digits = "9" * MAX_PREFIX_DIGITS
        return -int(digits) if sign == "-" else int(digits)
    return 0


Text = Annotated[str, BeforeValidator(_as_text)]
Choices = Annotated[List[str], BeforeValidator(_as_choices)]
Level = Annotated[int, BeforeValidator(_as_int_prefix)]


class _Section(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class SymptomAnswers(_Section):
    pain_level: Level = 0
    duration: Text = ""
    pain_pattern: Choices = Field(default_factory=list)
    pain_type: Choices = Field(default_factory=list)


class FunctionalAnswers(_Section):
    work_impact: Text = ""
    sleep_impact: Text = ""
    movement_patterns: Choices = Field(default_factory=list)
    activities_avoided: Choices = Field(default_factory=list)
    assistance_needed: Text = ""


class MedicalHistoryAnswers(_Section):
    previous_injuries: Text = ""
    surgery_history: Choices = Field(default_factory=list)
    chronic_conditions: Choices = Field(default_factory=list)
    medications: Text = ""


class DemographicsAnswers(_Section):
    age: Text = ""
    activity_level: Text = ""


# Payload section key -> (AnswerSet field, model)
SECTIONS = {
    "symptom_onset": ("symptoms", SymptomAnswers),
    "functional_assessment": ("functional", FunctionalAnswers),
    "medical_history": ("medical_history", MedicalHistoryAnswers),
    "demographics": ("demographics", DemographicsAnswers),
}


class AnswerSet(BaseModel):
    """
    Complete questionnaire submission handed to the scorer.

    - selected_body_areas: unique area ids, first-selection order kept for display
    - screening: screening question key -> "yes" / "no"
    - one model per remaining questionnaire section, all defaulted
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    selected_body_areas: List[str] = Field(default_factory=list)
    screening: Dict[str, str] = Field(default_factory=dict)
    symptoms: SymptomAnswers = Field(default_factory=SymptomAnswers)
    functional: FunctionalAnswers = Field(default_factory=FunctionalAnswers)
    medical_history: MedicalHistoryAnswers = Field(default_factory=MedicalHistoryAnswers)
    demographics: DemographicsAnswers = Field(default_factory=DemographicsAnswers)

    @field_validator("selected_body_areas", mode="before")
    @classmethod
    def unique_areas(cls, v: Any) -> List[str]:
        return list(dict.fromkeys(_as_choices(v)))

    @field_validator(
        "symptoms", "functional", "medical_history", "demographics", mode="before"
    )
    @classmethod
    def section_or_defaults(cls, v: Any, info: ValidationInfo) -> Any:
        model = cls.model_fields[info.field_name].annotation
        if isinstance(v, (model, dict)):
            return v
        if v is not None:
            warn(f"[answers] {info.field_name} is {type(v).__name__}, using defaults")
        return {}

    @field_validator("screening", mode="before")
    @classmethod
    def screening_text(cls, v: Any) -> Dict[str, str]:
        if not isinstance(v, dict):
            return {}
        return {str(k): a for k, a in v.items() if isinstance(a, str)}

    # -------------------------------------------------
    # Wizard payload
    # -------------------------------------------------
    @classmethod
    def from_payload(cls, payload: Any) -> "AnswerSet":
        """
        Build from the questionnaire submission shape:

            {"selectedBodyParts": [...],
             "answers": {"screening_questions": {...}, "symptom_onset": {...}, ...}}

        Never raises. A section that cannot be read falls back to its defaults.
        """
        if not isinstance(payload, dict):
            if payload is not None:
                warn(f"[answers] payload is {type(payload).__name__}, using empty answer set")
            return cls()

        areas = payload.get("selectedBodyParts") or payload.get("selectedBodyAreas")
        answers = payload.get("answers")
        if not isinstance(answers, dict):
            answers = {}

        fields: Dict[str, Any] = {
            "selected_body_areas": areas,
            "screening": answers.get("screening_questions"),
        }

        for key, (name, model) in SECTIONS.items():
            raw = answers.get(key)
            if raw is None:
                continue
            if not isinstance(raw, dict):
                warn(f"[answers] section '{key}' is {type(raw).__name__}, using defaults")
                continue
            try:
                fields[name] = model.model_validate(raw)
            except ValidationError as exc:
                warn(f"[answers] section '{key}' invalid ({exc.error_count()} errors), using defaults")

        return cls(**fields)

    # -------------------------------------------------
    # Helpers used by the rule tables
    # -------------------------------------------------
    def red_flags(self) -> List[str]:
        """Red-flag questions answered "yes", as display text, in catalog order."""
        return [
            key.replace("_", " ", 1)
            for key in red_flag_keys()
            if self.screening.get(key) == "yes"
        ]

    def touches(self, category_name: str) -> bool:
        members = category(category_name)
        return any(area in members for area in self.selected_body_areas)
