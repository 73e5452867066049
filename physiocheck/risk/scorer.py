# physiocheck/risk/scorer.py
"""
Risk scorer.

score(answers) -> RiskAssessmentResult

Pure and total: no I/O beyond debug logging, no shared mutable state, never
raises for any AnswerSet. Unrecognized answer values match no rule and add 0.
"""

from typing import Optional

from physiocheck import config
from physiocheck.explainability.advice_engine import (
    build_medical_attention,
    build_recommendations,
    build_self_care_tips,
    build_summary,
)
from physiocheck.models.answer_model import AnswerSet
from physiocheck.models.result_model import RiskAssessmentResult, RiskLevel
from physiocheck.risk.profiles import KNOWN_VALUES, ScoringProfile, get_profile
from physiocheck.risk.rules import evaluate
from physiocheck.utils.logger import debug


def classify(score: int, has_red_flags: bool, profile: ScoringProfile) -> RiskLevel:
    if score >= profile.high_threshold or has_red_flags:
        return RiskLevel.HIGH
    if score >= profile.medium_threshold:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def _log_unrecognized(answers: AnswerSet) -> None:
    values = {
        "duration": answers.symptoms.duration,
        "work_impact": answers.functional.work_impact,
        "sleep_impact": answers.functional.sleep_impact,
    }
    for name, value in values.items():
        if value and value not in KNOWN_VALUES[name]:
            debug(f"[scorer] unrecognized {name}={value!r}, contributes 0")


def score(
    answers: AnswerSet,
    profile: Optional[ScoringProfile] = None,
) -> RiskAssessmentResult:
    profile = profile or get_profile(config.SCORING_PROFILE)

    _log_unrecognized(answers)

    total, factors, fired = evaluate(profile.rules, answers)
    level = classify(total, bool(answers.red_flags()), profile)

    debug(
        f"[scorer] profile={profile.name} score={total} "
        f"level={level.value} rules={','.join(fired) or '-'}"
    )

    return RiskAssessmentResult(
        level=level,
        score=total,
        factors=tuple(factors),
        summary=build_summary(answers),
        recommendations=tuple(build_recommendations(answers, level)),
        self_care_tips=tuple(build_self_care_tips(answers)),
        medical_attention=tuple(build_medical_attention(level)),
        selected_body_areas=tuple(answers.selected_body_areas),
        profile=profile.name,
    )
