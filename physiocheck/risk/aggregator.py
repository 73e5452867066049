# physiocheck/risk/aggregator.py

from collections import Counter
from typing import Any, Dict, Iterable, List, Optional, Tuple

from physiocheck.models.result_model import RiskAssessmentResult, RiskLevel

TOP_BODY_PARTS = 10


def _unpack(r: Any) -> Optional[Tuple[RiskLevel, int, List[str]]]:
    """(level, score, areas) from a result or a formatted payload; None if unusable."""
    if isinstance(r, RiskAssessmentResult):
        return r.level, r.score, list(r.selected_body_areas)

    if not isinstance(r, dict):
        return None

    level = RiskLevel.parse(r.get("riskLevel"))
    if level is None:
        return None

    score = r.get("riskScore")
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        score = 0

    areas = r.get("selectedBodyParts") or []
    if not isinstance(areas, list):
        areas = []

    return level, int(score), [a for a in areas if isinstance(a, str)]


def aggregate_levels(levels: Iterable[RiskLevel]) -> RiskLevel:
    """
    Highest level seen. HIGH > MEDIUM > LOW; nothing seen => LOW.
    """
    overall = RiskLevel.LOW

    for level in levels:
        if level is RiskLevel.HIGH:
            return RiskLevel.HIGH
        if level.rank > overall.rank:
            overall = level

    return overall


def summarize(results: Iterable[Any]) -> Dict[str, Any]:
    """
    Summary statistics over finished assessments.

    Accepts RiskAssessmentResult objects or formatted payloads (see
    formatter.format_result). Malformed entries are ignored.
    """
    levels: List[RiskLevel] = []
    scores: List[int] = []
    parts: Counter = Counter()

    for r in results:
        unpacked = _unpack(r)
        if unpacked is None:
            continue

        level, score, areas = unpacked
        levels.append(level)
        scores.append(score)
        parts.update(list(dict.fromkeys(areas)))

    counts = Counter(levels)

    distribution = [
        {"riskLevel": level.value, "count": counts[level]}
        for level in sorted(RiskLevel, key=lambda l: l.rank, reverse=True)
        if counts[level]
    ]

    return {
        "totalAssessments": len(levels),
        "highRiskAssessments": counts[RiskLevel.HIGH],
        "mediumRiskAssessments": counts[RiskLevel.MEDIUM],
        "lowRiskAssessments": counts[RiskLevel.LOW],
        "averageRiskScore": round(sum(scores) / len(scores), 2) if scores else 0,
        "riskDistribution": distribution,
        "commonBodyParts": [
            {"part": part, "count": count}
            for part, count in parts.most_common(TOP_BODY_PARTS)
        ],
        "overall": aggregate_levels(levels).value,
    }
