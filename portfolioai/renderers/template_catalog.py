"""
Portfolio template catalog.

A template is a named palette: the renderer's layout is shared, only the
color and gradient tokens vary. The catalog is fixed at import time and
read-only; unknown ids resolve to the default template.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from ..logging_utils import LOG


@dataclass(frozen=True)
class TemplateConfig:
    id: str
    name: str
    description: str
    primary_color: str
    secondary_color: str
    accent_color: str
    background_color: str
    text_color: str
    text_light: str
    border_color: str
    shadow: str
    gradient_start: str
    gradient_end: str

    def css_variables(self) -> Dict[str, str]:
        """Custom properties for the stylesheet's :root block."""
        return {
            "--primary-color": self.primary_color,
            "--secondary-color": self.secondary_color,
            "--accent-color": self.accent_color,
            "--background-color": self.background_color,
            "--text-color": self.text_color,
            "--text-light": self.text_light,
            "--border-color": self.border_color,
            "--shadow": self.shadow,
        }

    def as_dict(self) -> Dict[str, str]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "primaryColor": self.primary_color,
            "secondaryColor": self.secondary_color,
            "accentColor": self.accent_color,
            "backgroundColor": self.background_color,
            "textColor": self.text_color,
            "textLight": self.text_light,
            "borderColor": self.border_color,
            "shadow": self.shadow,
            "gradientStart": self.gradient_start,
            "gradientEnd": self.gradient_end,
        }


DEFAULT_TEMPLATE_ID = "modern"

# Text and border tokens are common to every palette
_NEUTRALS = dict(
    background_color="#ffffff",
    text_color="#2d3748",
    text_light="#718096",
    border_color="#e2e8f0",
)

_TEMPLATES = (
    TemplateConfig(
        id="modern",
        name="Modern Developer",
        description="Clean, minimalist design perfect for tech roles",
        primary_color="#667eea",
        secondary_color="#764ba2",
        accent_color="#f093fb",
        shadow="0 10px 25px rgba(0, 0, 0, 0.1)",
        gradient_start="#667eea",
        gradient_end="#764ba2",
        **_NEUTRALS,
    ),
    TemplateConfig(
        id="creative",
        name="Creative Professional",
        description="Bold, colorful design for creative positions",
        primary_color="#ff6b6b",
        secondary_color="#4ecdc4",
        accent_color="#45b7d1",
        shadow="0 10px 25px rgba(255, 107, 107, 0.15)",
        gradient_start="#ff6b6b",
        gradient_end="#4ecdc4",
        **_NEUTRALS,
    ),
    TemplateConfig(
        id="executive",
        name="Executive",
        description="Professional, corporate-friendly layout",
        primary_color="#2c3e50",
        secondary_color="#34495e",
        accent_color="#3498db",
        shadow="0 10px 25px rgba(44, 62, 80, 0.15)",
        gradient_start="#2c3e50",
        gradient_end="#34495e",
        **_NEUTRALS,
    ),
    TemplateConfig(
        id="startup",
        name="Startup Ready",
        description="Dynamic design for fast-paced environments",
        primary_color="#e74c3c",
        secondary_color="#f39c12",
        accent_color="#9b59b6",
        shadow="0 10px 25px rgba(231, 76, 60, 0.15)",
        gradient_start="#e74c3c",
        gradient_end="#f39c12",
        **_NEUTRALS,
    ),
)

TEMPLATES: Mapping[str, TemplateConfig] = MappingProxyType({t.id: t for t in _TEMPLATES})


def get_template(template_id: str) -> Optional[TemplateConfig]:
    """Exact lookup; None for unknown ids."""
    return TEMPLATES.get(template_id)


def resolve_template(template_id: Optional[str]) -> TemplateConfig:
    """
    Template for `template_id`, or the default template when the id is
    unknown or empty. Never raises.
    """
    template = TEMPLATES.get((template_id or "").strip().lower())
    if template is None:
        LOG.debug("Unknown template %r, using %r", template_id, DEFAULT_TEMPLATE_ID)
        return TEMPLATES[DEFAULT_TEMPLATE_ID]
    return template


def list_templates() -> List[Dict[str, str]]:
    """
    List all templates with their descriptions.

    Returns:
        List of dicts with 'id', 'name' and 'description' keys, in catalog order
    """
    return [
        {"id": t.id, "name": t.name, "description": t.description}
        for t in TEMPLATES.values()
    ]
