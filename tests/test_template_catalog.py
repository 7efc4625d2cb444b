"""Tests for the portfolio template catalog."""

import dataclasses

import pytest

from portfolioai.renderers import (
    DEFAULT_TEMPLATE_ID,
    TEMPLATES,
    get_template,
    list_templates,
    resolve_template,
)


def test_catalog_ids_in_order():
    """The four templates are listed in catalog order."""
    assert [t["id"] for t in list_templates()] == ["modern", "creative", "executive", "startup"]


def test_list_templates_entries():
    """Each entry carries id, name and description."""
    for entry in list_templates():
        assert set(entry) == {"id", "name", "description"}
        assert entry["name"] and entry["description"]


def test_get_template_exact_lookup():
    """get_template() returns None for unknown ids."""
    assert get_template("creative").primary_color == "#ff6b6b"
    assert get_template("Creative") is None
    assert get_template("retro") is None


@pytest.mark.parametrize("template_id, expected", [
    ("executive", "executive"),
    ("  STARTUP ", "startup"),
    ("retro", DEFAULT_TEMPLATE_ID),
    ("", DEFAULT_TEMPLATE_ID),
    (None, DEFAULT_TEMPLATE_ID),
])
def test_resolve_template(template_id, expected):
    """Ids are normalized; unknown ids resolve to the default."""
    assert resolve_template(template_id).id == expected


def test_default_palette():
    """The default template is the modern palette."""
    modern = TEMPLATES[DEFAULT_TEMPLATE_ID]
    assert (modern.primary_color, modern.secondary_color, modern.accent_color) == (
        "#667eea", "#764ba2", "#f093fb",
    )


def test_css_variables():
    """css_variables() maps custom properties to palette values."""
    variables = TEMPLATES["startup"].css_variables()
    assert variables["--primary-color"] == "#e74c3c"
    assert variables["--secondary-color"] == "#f39c12"
    assert variables["--accent-color"] == "#9b59b6"
    assert variables["--background-color"] == "#ffffff"


def test_as_dict_uses_camel_case():
    """The JSON form uses camelCase keys."""
    data = TEMPLATES["executive"].as_dict()
    assert data["primaryColor"] == "#2c3e50"
    assert data["gradientEnd"] == "#34495e"


def test_catalog_is_read_only():
    """Neither the catalog nor its templates can be modified."""
    with pytest.raises(TypeError):
        TEMPLATES["retro"] = TEMPLATES["modern"]
    with pytest.raises(dataclasses.FrozenInstanceError):
        TEMPLATES["modern"].primary_color = "#000000"
