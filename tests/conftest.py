import pytest

from physiocheck.models.answer_model import AnswerSet


def build(areas=None, **sections):
    """AnswerSet from wizard-style sections, e.g. build(["neck"], symptom_onset={...})."""
    return AnswerSet.from_payload({
        "selectedBodyParts": areas or [],
        "answers": sections,
    })


@pytest.fixture
def make_answers():
    return build
