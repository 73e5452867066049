# physiocheck/risk/formatter.py

from typing import Any, Dict

from physiocheck.models.result_model import RiskAssessmentResult


def format_result(result: RiskAssessmentResult) -> Dict[str, Any]:
    """
    Convert a scoring result into the payload stored and displayed by the
    questionnaire front end (camelCase keys, plain lists).

    Field names are part of the contract with persistence and UI; add new
    keys rather than renaming existing ones.
    """
    return {
        "riskLevel": result.level.value,
        "riskScore": result.score,
        "riskFactors": list(result.factors),
        "summary": result.summary,
        "recommendations": list(result.recommendations),
        "selfCareTips": list(result.self_care_tips),
        "medicalAttention": list(result.medical_attention),
        "selectedBodyParts": list(result.selected_body_areas),
        "scoringProfile": result.profile,
    }
