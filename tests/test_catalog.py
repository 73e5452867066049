import pytest

from physiocheck.catalog.catalog import (
    CatalogError,
    body_area_name,
    category,
    load_advice,
    load_catalog,
    red_flag_keys,
)


def test_red_flag_catalog():
    keys = red_flag_keys()
    assert len(keys) == 10
    assert keys[0] == "weight_loss"
    assert keys[-1] == "fever"
    assert "accident_cause" not in keys


def test_body_area_names():
    assert body_area_name("knee_left") == "Left Knee"
    assert body_area_name("foot_right") == "Right Foot"
    assert body_area_name("unknown_area") == "unknown_area"


def test_categories():
    assert category("back") == frozenset({"lower_back", "upper_back"})
    assert category("spine") == frozenset({"lower_back", "upper_back", "neck"})
    assert "elbow_left" in category("joint")
    assert "elbow_left" not in category("moderate_risk")
    assert category("missing") == frozenset()


def test_missing_catalog_file(tmp_path):
    with pytest.raises(CatalogError):
        load_catalog(tmp_path / "nope.yaml")


def test_catalog_must_be_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- head\n- neck\n")
    with pytest.raises(CatalogError):
        load_catalog(path)


def test_catalog_sections_are_required(tmp_path):
    path = tmp_path / "partial.yaml"
    path.write_text("body_areas:\n  head: Head\nred_flags: [fever]\n")
    with pytest.raises(CatalogError, match="categories"):
        load_catalog(path)


def test_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("summary: [unclosed\n")
    with pytest.raises(CatalogError):
        load_advice(path)


def test_alternate_catalog(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text(
        "body_areas:\n  tail: Tail\n"
        "categories:\n  spine: [tail]\n"
        "red_flags: [fever]\n"
    )
    data = load_catalog(path)
    assert data["body_areas"] == {"tail": "Tail"}
    assert data["categories"]["spine"] == frozenset({"tail"})
    assert data["red_flags"] == ("fever",)


ADVICE_HEAD = (
    "summary: 'Areas: {areas}'\n"
    "medical_attention: {warning_signs: []}\n"
    "self_care: {general: []}\n"
)


@pytest.mark.parametrize("by_area", [
    "[back]",
    "[{when: back, text: 'not a list'}]",
    "[{text: [Stretch]}]",
    "back",
])
def test_malformed_area_advice_rejected_at_load(tmp_path, by_area):
    path = tmp_path / "advice.yaml"
    path.write_text(ADVICE_HEAD + f"recommendations:\n  by_area: {by_area}\n")
    with pytest.raises(CatalogError, match="by_area"):
        load_advice(path)


def test_well_formed_area_advice_loads(tmp_path):
    path = tmp_path / "advice.yaml"
    path.write_text(ADVICE_HEAD + "recommendations:\n  by_area: [{when: back, text: [Stretch]}]\n")
    assert load_advice(path)["recommendations"]["by_area"][0]["text"] == ["Stretch"]
