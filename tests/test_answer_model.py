import pytest

from physiocheck.models.answer_model import AnswerSet


def test_full_payload_is_read():
    answers = AnswerSet.from_payload({
        "selectedBodyParts": ["lower_back", "knee_left"],
        "answers": {
            "screening_questions": {"fever": "yes", "weight_loss": "no"},
            "symptom_onset": {
                "pain_level": "7",
                "duration": "1-3 months",
                "pain_pattern": ["Constant"],
                "pain_type": ["Sharp", "Tingling"],
            },
            "functional_assessment": {
                "work_impact": "Severely",
                "movement_patterns": ["Walking"],
                "assistance_needed": "no",
            },
            "medical_history": {"surgery_history": ["None"], "medications": "yes"},
            "demographics": {"age": "70+ years"},
        },
    })

    assert answers.selected_body_areas == ["lower_back", "knee_left"]
    assert answers.screening == {"fever": "yes", "weight_loss": "no"}
    assert answers.symptoms.pain_level == 7
    assert answers.symptoms.pain_type == ["Sharp", "Tingling"]
    assert answers.functional.work_impact == "Severely"
    assert answers.medical_history.surgery_history == ["None"]
    assert answers.demographics.age == "70+ years"
    assert answers.demographics.activity_level == ""


def test_selected_body_areas_alias():
    answers = AnswerSet.from_payload({"selectedBodyAreas": ["neck"]})
    assert answers.selected_body_areas == ["neck"]


def test_duplicate_areas_keep_first_order():
    answers = AnswerSet.from_payload({"selectedBodyParts": ["neck", "chest", "neck"]})
    assert answers.selected_body_areas == ["neck", "chest"]


@pytest.mark.parametrize("payload", [None, [], "lower_back", 42, {}])
def test_unusable_payload_gives_empty_answers(payload):
    assert AnswerSet.from_payload(payload) == AnswerSet()


def test_malformed_sections_fall_back_to_defaults():
    answers = AnswerSet.from_payload({
        "selectedBodyParts": "neck",
        "answers": {
            "screening_questions": ["fever"],
            "symptom_onset": "severe",
            "functional_assessment": {"work_impact": 3, "movement_patterns": "Walking"},
        },
    })
    assert answers.selected_body_areas == ["neck"]
    assert answers.screening == {}
    assert answers.symptoms.pain_level == 0
    assert answers.functional.work_impact == ""
    assert answers.functional.movement_patterns == ["Walking"]


@pytest.mark.parametrize("raw,expected", [
    (8, 8),
    (7.9, 7),
    ("7/10", 7),
    (" 5", 5),
    ("severe", 0),
    (None, 0),
    (True, 0),
    (float("nan"), 0),
])
def test_pain_level_reads_integer_prefix(raw, expected):
    answers = AnswerSet.from_payload({"answers": {"symptom_onset": {"pain_level": raw}}})
    assert answers.symptoms.pain_level == expected


def test_non_string_choices_are_dropped():
    answers = AnswerSet.from_payload({"answers": {"symptom_onset": {
        "pain_type": ["Sharp", None, 3, "Burning"],
    }}})
    assert answers.symptoms.pain_type == ["Sharp", "Burning"]


def test_screening_drops_non_text_answers():
    answers = AnswerSet.from_payload({"answers": {"screening_questions": {
        "fever": True, "night_pain": "yes",
    }}})
    assert answers.screening == {"night_pain": "yes"}


def test_red_flags_replace_first_underscore():
    answers = AnswerSet(screening={
        "neurological_symptoms": "yes", "bowel_bladder": "yes", "fever": "Yes",
    })
    assert answers.red_flags() == ["neurological symptoms", "bowel bladder"]


def test_touches_uses_category_table():
    answers = AnswerSet(selected_body_areas=["upper_back"])
    assert answers.touches("back")
    assert answers.touches("spine")
    assert not answers.touches("neck")
    assert not answers.touches("no_such_category")


def test_overlong_pain_level_keeps_rest_of_section():
    answers = AnswerSet.from_payload({"answers": {"symptom_onset": {
        "pain_level": "9" * 5000,
        "duration": "More than 6 months",
        "pain_pattern": ["Constant"],
    }}})
    assert answers.symptoms.pain_level >= 9
    assert answers.symptoms.duration == "More than 6 months"
    assert answers.symptoms.pain_pattern == ["Constant"]


@pytest.mark.parametrize("raw,expected", [
    ("0000000008", 8),
    ("-" + "9" * 5000, -999999),
    ("+6", 6),
])
def test_pain_level_prefix_edge_cases(raw, expected):
    answers = AnswerSet.from_payload({"answers": {"symptom_onset": {"pain_level": raw}}})
    assert answers.symptoms.pain_level == expected


def test_null_body_parts_fall_back_to_alias():
    answers = AnswerSet.from_payload({
        "selectedBodyParts": None,
        "selectedBodyAreas": ["neck"],
    })
    assert answers.selected_body_areas == ["neck"]


@pytest.mark.parametrize("bad", [None, "severe", 3, ["Constant"]])
def test_direct_construction_defaults_bad_sections(bad):
    answers = AnswerSet(symptoms=bad, functional=bad, medical_history=bad, demographics=bad)
    assert answers == AnswerSet()
