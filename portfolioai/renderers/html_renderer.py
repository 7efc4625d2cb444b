"""
HTML/CSS portfolio renderer built on Jinja2 templates.

The page and its stylesheet are Jinja2 templates shipped with the package
(`renderers/templates/`). The HTML template is autoescaped, so profile text
cannot inject markup; the stylesheet only receives catalog values.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

from jinja2 import Environment, PackageLoader, select_autoescape

from ..shared import ProfileRecord, is_placeholder, is_placeholder_list
from .base import PortfolioRenderer, PortfolioSite
from .template_catalog import DEFAULT_TEMPLATE_ID, TemplateConfig, resolve_template

HTML_TEMPLATE = "index.html"
CSS_TEMPLATE = "styles.css"

# Skill bar widths cycle through this sequence so output stays deterministic
SKILL_LEVELS = (95, 90, 85, 92, 88, 80, 86, 78)


def target_role_summary(summary: str, target_role: Optional[str]) -> str:
    role = (target_role or "").strip()
    if not role:
        return summary
    return (
        f"{summary} Currently seeking opportunities as a {role} "
        f"to leverage my expertise and drive innovation."
    )


def safe_href(link: Optional[str]) -> str:
    """Only web links become hrefs; "github.com/x" gains a scheme."""
    if not link:
        return "#"
    lowered = link.lower()
    if lowered.startswith(("http://", "https://")):
        return link
    if lowered.startswith(("javascript:", "data:", "vbscript:")) or ":" in lowered.split("/", 1)[0]:
        return "#"
    return "https://" + link


def create_environment() -> Environment:
    env = Environment(
        loader=PackageLoader("portfolioai", "renderers/templates"),
        autoescape=select_autoescape(("html",)),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["safe_href"] = safe_href
    return env


class HtmlPortfolioRenderer(PortfolioRenderer):
    """
    Static HTML/CSS portfolio renderer.

    Produces an index.html that links styles.css, with sections in fixed
    order: hero, skills, experience, projects, education, footer. The
    projects section is left out when the profile carries only the
    "not found" placeholder.
    """

    def __init__(self, environment: Optional[Environment] = None):
        self.environment = environment or create_environment()

    def render(
        self,
        profile: ProfileRecord,
        template_id: str = DEFAULT_TEMPLATE_ID,
        target_role: Optional[str] = None,
    ) -> PortfolioSite:
        template = resolve_template(template_id)
        context = self._page_context(profile, template, target_role)
        html = self.environment.get_template(HTML_TEMPLATE).render(**context)
        css = self.environment.get_template(CSS_TEMPLATE).render(template=template)
        return PortfolioSite(html=html, css=css)

    def _page_context(
        self,
        profile: ProfileRecord,
        template: TemplateConfig,
        target_role: Optional[str],
    ) -> Dict[str, Any]:
        info = profile.personal_info
        technical = profile.skills.technical
        skill_bars: List[Dict[str, Any]] = []
        if not is_placeholder_list(technical):
            skill_bars = [
                {"name": skill, "level": SKILL_LEVELS[i % len(SKILL_LEVELS)]}
                for i, skill in enumerate(technical)
            ]

        return {
            "template": template,
            "info": info,
            "summary": target_role_summary(info.summary, target_role),
            "email": None if is_placeholder(info.email) else info.email,
            "phone": None if is_placeholder(info.phone) else info.phone,
            "location": None if is_placeholder(info.location) else info.location,
            "skill_bars": skill_bars,
            "technical_missing": technical[0] if not skill_bars and technical else None,
            "soft_skills": profile.skills.soft,
            "experience": profile.experience,
            "projects": None if is_placeholder_list(profile.projects) else profile.projects,
            "education": profile.education,
        }


_DEFAULT_RENDERER: Optional[HtmlPortfolioRenderer] = None


def render_portfolio(
    profile: Union[ProfileRecord, Mapping[str, Any]],
    template_id: str = DEFAULT_TEMPLATE_ID,
    target_role: Optional[str] = None,
) -> PortfolioSite:
    """
    Render a profile (ProfileRecord or its JSON dict form) to a static site.

    Raises:
        ValueError: If a dict profile is missing required fields
    """
    global _DEFAULT_RENDERER
    if not isinstance(profile, ProfileRecord):
        profile = ProfileRecord.from_dict(profile)
    if _DEFAULT_RENDERER is None:
        _DEFAULT_RENDERER = HtmlPortfolioRenderer()
    return _DEFAULT_RENDERER.render(profile, template_id, target_role)
