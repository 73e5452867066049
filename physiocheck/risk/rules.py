# physiocheck/risk/rules.py
"""
Weighted scoring rules.

A rule is a (predicate, weight, factor text) triple. Tables of rules are
evaluated in order; each triggered rule adds its weight and one factor line.
Rules never look at each other, so a table can be extended or reordered
without touching unrelated entries.
"""

from typing import Callable, List, Optional, Sequence, Tuple, Union

from physiocheck.models.answer_model import AnswerSet

Predicate = Callable[[AnswerSet], bool]
Weight = Union[int, Callable[[AnswerSet], int]]
FactorText = Union[str, Callable[[AnswerSet], str]]


class Rule:
    __slots__ = ("rule_id", "when", "weight", "factor")

    def __init__(self, rule_id: str, when: Predicate, weight: Weight, factor: FactorText):
        self.rule_id = rule_id
        self.when = when
        self.weight = weight
        self.factor = factor

    def __repr__(self) -> str:
        return f"Rule({self.rule_id!r})"

    def apply(self, answers: AnswerSet) -> Optional[Tuple[int, str]]:
        """(weight, factor) when the rule fires with a positive weight, else None."""
        if not self.when(answers):
            return None

        weight = self.weight(answers) if callable(self.weight) else self.weight
        if weight <= 0:
            return None

        factor = self.factor(answers) if callable(self.factor) else self.factor
        return int(weight), factor


def evaluate(rules: Sequence[Rule], answers: AnswerSet) -> Tuple[int, List[str], List[str]]:
    """
    Run a rule table.

    Returns (score, factors, fired rule ids).
    """
    score = 0
    factors: List[str] = []
    fired: List[str] = []

    for rule in rules:
        hit = rule.apply(answers)
        if hit is None:
            continue
        weight, factor = hit
        score += weight
        factors.append(factor)
        fired.append(rule.rule_id)

    return score, factors, fired


# ---------------------------------------------------------
# Predicate builders
# ---------------------------------------------------------
def equals(getter: Callable[[AnswerSet], str], value: str) -> Predicate:
    """Literal string match, no normalisation."""
    return lambda a: getter(a) == value


def contains(getter: Callable[[AnswerSet], Sequence[str]], value: str) -> Predicate:
    return lambda a: value in getter(a)


def yes(getter: Callable[[AnswerSet], str]) -> Predicate:
    return equals(getter, "yes")


def in_band(getter: Callable[[AnswerSet], int], lo: int, hi: Optional[int] = None) -> Predicate:
    """lo <= value < hi (hi open-ended when None)."""
    if hi is None:
        return lambda a: getter(a) >= lo
    return lambda a: lo <= getter(a) < hi


def both(first: Predicate, second: Predicate) -> Predicate:
    return lambda a: first(a) and second(a)


def any_of(*preds: Predicate) -> Predicate:
    return lambda a: any(p(a) for p in preds)
