# physiocheck/assess.py
"""
Submission entry point used by the questionnaire back end.

payload (wizard JSON) -> AnswerSet -> score -> formatted result
"""

from typing import Any, Dict, Optional

from physiocheck.models.answer_model import AnswerSet
from physiocheck.risk.formatter import format_result
from physiocheck.risk.profiles import get_profile
from physiocheck.risk.scorer import score
from physiocheck.utils.logger import info


def process_assessment(payload: Any, profile: Optional[str] = None) -> Dict[str, Any]:
    answers = AnswerSet.from_payload(payload)
    result = score(answers, get_profile(profile) if profile else None)

    info(
        f"[assess] level={result.level.value} score={result.score} "
        f"areas={len(result.selected_body_areas)} profile={result.profile}"
    )

    return format_result(result)
