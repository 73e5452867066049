# physiocheck/risk/profiles.py
"""
Rule tables and thresholds.

granular (default)
    The current weighting: banded pain, four duration buckets, body-area
    categories, spine / joint combinations, demographics and functional
    aggravators. HIGH >= 12, MEDIUM >= 6.

legacy
    The earlier constant-weight table kept for comparing historic results.
    HIGH >= 15, MEDIUM >= 8.

Red flags force HIGH in both.
All enumerated answers are matched as literal strings (case and punctuation).
"""

from typing import Dict, NamedTuple, Tuple

from physiocheck.risk.rules import (
    Rule,
    any_of,
    both,
    contains,
    equals,
    in_band,
    yes,
)

# ---------------------------------------------------------
# Answer values the tables know about
# ---------------------------------------------------------
DURATION_OVER_6_MONTHS = "More than 6 months"
DURATION_3_TO_6_MONTHS = "3-6 months"
DURATION_1_TO_3_MONTHS = "1-3 months"
DURATION_1_TO_4_WEEKS = "1-4 weeks"

WORK_UNABLE = "Unable to work/perform activities"
WORK_SEVERELY = "Severely"
WORK_MODERATELY = "Moderately"
WORK_SLIGHTLY = "Slightly"

SLEEP_UNABLE = "Unable to sleep due to symptoms"
SLEEP_FREQUENT = "Frequent sleep disturbance"
SLEEP_OCCASIONAL = "Occasional sleep disturbance"

AGE_70_PLUS = "70+ years"
AGE_60_TO_69 = "60 - 69 years"

ACTIVITY_EXTREME = "Extremely active (very hard exercise, physical job)"

# Value sets checked by the scorer's unrecognized-answer logging
KNOWN_VALUES = {
    "duration": (
        DURATION_OVER_6_MONTHS, DURATION_3_TO_6_MONTHS,
        DURATION_1_TO_3_MONTHS, DURATION_1_TO_4_WEEKS,
    ),
    "work_impact": (WORK_UNABLE, WORK_SEVERELY, WORK_MODERATELY, WORK_SLIGHTLY),
    "sleep_impact": (SLEEP_UNABLE, SLEEP_FREQUENT, SLEEP_OCCASIONAL),
}


# ---------------------------------------------------------
# Getters
# ---------------------------------------------------------
def pain_level(a):
    return a.symptoms.pain_level

def duration(a):
    return a.symptoms.duration

def pain_pattern(a):
    return a.symptoms.pain_pattern

def pain_type(a):
    return a.symptoms.pain_type

def work_impact(a):
    return a.functional.work_impact

def sleep_impact(a):
    return a.functional.sleep_impact

def movement_patterns(a):
    return a.functional.movement_patterns

def activities_avoided(a):
    return a.functional.activities_avoided

def assistance_needed(a):
    return a.functional.assistance_needed

def accident_cause(a):
    return a.screening.get("accident_cause", "")


def _has_history(choices) -> bool:
    return len(choices) > 0 and "None" not in choices


def _touches(category_name):
    return lambda a: a.touches(category_name)


def _red_flag_factor(a) -> str:
    return f"Red flags: {', '.join(a.red_flags())}"


def _pain_factor(label):
    return lambda a: f"{label} (level {a.symptoms.pain_level}/10)"


def _area_count(a) -> int:
    return len(a.selected_body_areas)


def _areas_factor(a) -> str:
    return f"Multiple affected areas ({_area_count(a)} areas)"


class ScoringProfile(NamedTuple):
    name: str
    rules: Tuple[Rule, ...]
    high_threshold: int
    medium_threshold: int


# ---------------------------------------------------------
# Granular table
# ---------------------------------------------------------
GRANULAR_RULES: Tuple[Rule, ...] = (
    # Red flags
    Rule("red_flags", lambda a: bool(a.red_flags()),
         lambda a: 15 * len(a.red_flags()), _red_flag_factor),

    # Pain level
    Rule("pain_very_severe", in_band(pain_level, 9), 12, _pain_factor("Very severe pain")),
    Rule("pain_severe", in_band(pain_level, 7, 9), 8, _pain_factor("Severe pain")),
    Rule("pain_moderate", in_band(pain_level, 5, 7), 5, _pain_factor("Moderate pain")),
    Rule("pain_mild", in_band(pain_level, 3, 5), 2, _pain_factor("Mild pain")),

    # Duration
    Rule("duration_chronic", equals(duration, DURATION_OVER_6_MONTHS), 5,
         "Chronic symptoms (>6 months)"),
    Rule("duration_prolonged", equals(duration, DURATION_3_TO_6_MONTHS), 3,
         "Prolonged symptoms (3-6 months)"),
    Rule("duration_persistent", equals(duration, DURATION_1_TO_3_MONTHS), 2,
         "Persistent symptoms (1-3 months)"),
    Rule("duration_recent", equals(duration, DURATION_1_TO_4_WEEKS), 1,
         "Recent symptoms (1-4 weeks)"),

    # Work impact
    Rule("work_unable", equals(work_impact, WORK_UNABLE), 8, "Severe functional limitation"),
    Rule("work_severe", equals(work_impact, WORK_SEVERELY), 6, "Significant functional impact"),
    Rule("work_moderate", equals(work_impact, WORK_MODERATELY), 4, "Moderate functional impact"),
    Rule("work_slight", equals(work_impact, WORK_SLIGHTLY), 2, "Mild functional impact"),

    # Sleep impact
    Rule("sleep_unable", equals(sleep_impact, SLEEP_UNABLE), 7, "Severe sleep disturbance"),
    Rule("sleep_frequent", equals(sleep_impact, SLEEP_FREQUENT), 5, "Frequent sleep problems"),
    Rule("sleep_occasional", equals(sleep_impact, SLEEP_OCCASIONAL), 3, "Occasional sleep problems"),

    # Pain pattern
    Rule("pattern_constant", contains(pain_pattern, "Constant"), 6, "Constant pain pattern"),
    Rule("pattern_night", contains(pain_pattern, "At night"), 5, "Night pain"),
    Rule("pattern_moving", contains(pain_pattern, "When moving"), 3, "Movement-related pain"),
    Rule("pattern_morning", contains(pain_pattern, "In the morning"), 2, "Morning stiffness/pain"),
    Rule("pattern_after_activity", contains(pain_pattern, "After activity"), 2, "Post-activity pain"),

    # Pain type
    Rule("type_sharp", contains(pain_type, "Sharp"), 4, "Sharp pain"),
    Rule("type_burning", contains(pain_type, "Burning"), 3, "Burning pain"),
    Rule("type_tingling", contains(pain_type, "Tingling"), 3, "Tingling sensation"),
    Rule("type_numbness", contains(pain_type, "Numbness"), 4, "Numbness"),
    Rule("type_weakness", contains(pain_type, "Weakness"), 5, "Muscle weakness"),

    # Medical history
    Rule("previous_injuries", yes(lambda a: a.medical_history.previous_injuries), 3,
         "Previous injuries to affected area"),
    Rule("surgery_history", lambda a: _has_history(a.medical_history.surgery_history), 4,
         "Previous surgeries"),
    Rule("chronic_conditions", lambda a: _has_history(a.medical_history.chronic_conditions), 3,
         "Chronic medical conditions"),
    Rule("medications", yes(lambda a: a.medical_history.medications), 2,
         "Currently taking medications"),

    # Cause
    Rule("accident_cause", yes(accident_cause), 4, "Symptoms caused by accident/fall"),

    # Body-area categories
    Rule("area_high_risk", _touches("high_risk"), 2, "High-risk body area affected"),
    Rule("area_moderate_risk", _touches("moderate_risk"), 1, "Moderate-risk body area affected"),

    # Spine combinations
    Rule("spine_neuro",
         both(_touches("spine"), any_of(contains(pain_type, "Tingling"), contains(pain_type, "Numbness"))),
         3, "Spine-related neurological symptoms"),
    Rule("spine_constant", both(_touches("spine"), contains(pain_pattern, "Constant")), 2,
         "Constant spine pain"),
    Rule("spine_walking", both(_touches("spine"), contains(movement_patterns, "Walking")), 2,
         "Spine pain affecting walking"),

    # Joint combinations
    Rule("joint_weakness", both(_touches("joint"), contains(pain_type, "Weakness")), 3,
         "Joint-related muscle weakness"),
    Rule("joint_assistance", both(_touches("joint"), yes(assistance_needed)), 2,
         "Joint requiring assistance"),

    # Demographics
    Rule("age_70_plus", equals(lambda a: a.demographics.age, AGE_70_PLUS), 3, "Advanced age (70+)"),
    Rule("age_60_69", equals(lambda a: a.demographics.age, AGE_60_TO_69), 2, "Older age (60-69)"),
    Rule("activity_extreme", equals(lambda a: a.demographics.activity_level, ACTIVITY_EXTREME), 2,
         "Extremely active lifestyle"),

    # Aggravating movements
    Rule("move_lifting", contains(movement_patterns, "Lifting objects"), 2, "Pain with lifting"),
    Rule("move_overhead", contains(movement_patterns, "Reaching overhead"), 2,
         "Pain with overhead activities"),
    Rule("move_bend_forward", contains(movement_patterns, "Bending forward"), 3,
         "Pain with forward bending"),
    Rule("move_bend_backward", contains(movement_patterns, "Bending backward"), 3,
         "Pain with backward bending"),
    Rule("move_twisting", contains(movement_patterns, "Twisting/rotating"), 3,
         "Pain with twisting/rotation"),
    Rule("move_walking", contains(movement_patterns, "Walking"), 4, "Pain with walking"),
    Rule("move_stairs", contains(movement_patterns, "Climbing stairs"), 3, "Pain with stair climbing"),

    # Avoided activities
    Rule("avoid_exercise", contains(activities_avoided, "Exercise/sports"), 2,
         "Avoiding exercise due to pain"),
    Rule("avoid_work", contains(activities_avoided, "Work activities"), 3, "Work activities affected"),

    # Daily assistance (independent of the joint rule above)
    Rule("assistance_needed", yes(assistance_needed), 4, "Requires assistance with daily activities"),
)


# ---------------------------------------------------------
# Legacy table
# ---------------------------------------------------------
LEGACY_RULES: Tuple[Rule, ...] = (
    Rule("red_flags", lambda a: bool(a.red_flags()),
         lambda a: 10 * len(a.red_flags()), _red_flag_factor),

    Rule("pain_severe", in_band(pain_level, 8), 8, _pain_factor("Severe pain")),
    Rule("pain_moderate_severe", in_band(pain_level, 6, 8), 4,
         _pain_factor("Moderate to severe pain")),

    Rule("duration_chronic", equals(duration, DURATION_OVER_6_MONTHS), 3,
         "Chronic symptoms (>6 months)"),
    Rule("duration_prolonged", equals(duration, DURATION_3_TO_6_MONTHS), 2,
         "Prolonged symptoms (3-6 months)"),

    Rule("work_unable", equals(work_impact, WORK_UNABLE), 6, "Severe functional limitation"),
    Rule("work_severe", equals(work_impact, WORK_SEVERELY), 4, "Significant functional impact"),

    Rule("sleep_unable", equals(sleep_impact, SLEEP_UNABLE), 5, "Severe sleep disturbance"),
    Rule("sleep_frequent", equals(sleep_impact, SLEEP_FREQUENT), 3, "Frequent sleep problems"),

    Rule("pattern_constant", contains(pain_pattern, "Constant"), 4, "Constant pain pattern"),
    Rule("pattern_night", contains(pain_pattern, "At night"), 3, "Night pain"),

    Rule("areas_many", lambda a: _area_count(a) >= 4, 3, _areas_factor),
    Rule("areas_several", lambda a: 2 <= _area_count(a) < 4, 1, _areas_factor),
)


PROFILES: Dict[str, ScoringProfile] = {
    "granular": ScoringProfile("granular", GRANULAR_RULES, high_threshold=12, medium_threshold=6),
    "legacy": ScoringProfile("legacy", LEGACY_RULES, high_threshold=15, medium_threshold=8),
}


def get_profile(name: str) -> ScoringProfile:
    try:
        return PROFILES[name]
    except KeyError:
        raise KeyError(
            f"Unknown scoring profile {name!r}; expected one of {sorted(PROFILES)}"
        ) from None
