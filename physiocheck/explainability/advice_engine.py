# physiocheck/explainability/advice_engine.py
"""
Advisory text for a scored assessment.

All wording lives in catalog/advice.yaml. Area-specific entries carry a
`when: <category>` key and fire when any selected area belongs to that
category of the catalog membership table.
"""

from typing import Any, Dict, List

from physiocheck.catalog.catalog import body_area_name, load_advice
from physiocheck.models.answer_model import AnswerSet
from physiocheck.models.result_model import RiskLevel


def _area_entries(answers: AnswerSet, entries: List[Dict[str, Any]]) -> List[str]:
    triggered: List[str] = []

    for entry in entries or []:
        if answers.touches(entry.get("when", "")):
            triggered.extend(entry.get("text") or [])

    return triggered


def build_summary(answers: AnswerSet) -> str:
    areas = ", ".join(body_area_name(a) for a in answers.selected_body_areas)
    return load_advice()["summary"].format(areas=areas)


def build_recommendations(answers: AnswerSet, level: RiskLevel) -> List[str]:
    cfg = load_advice()["recommendations"]
    recommendations: List[str] = []

    lead = (cfg.get("lead") or {}).get(level.value)
    if lead:
        recommendations.append(lead)

    recommendations.extend(cfg.get("general") or [])
    recommendations.extend(_area_entries(answers, cfg.get("by_area")))

    return recommendations


def build_self_care_tips(answers: AnswerSet) -> List[str]:
    cfg = load_advice()["self_care"]
    return list(cfg.get("general") or []) + _area_entries(answers, cfg.get("by_area"))


def build_medical_attention(level: RiskLevel) -> List[str]:
    """Level-gated lead line, then the universal warning signs (always listed)."""
    cfg = load_advice()["medical_attention"]
    notices: List[str] = []

    lead = (cfg.get("lead") or {}).get(level.value)
    if lead:
        notices.append(lead)

    notices.extend(cfg.get("warning_signs") or [])
    return notices
