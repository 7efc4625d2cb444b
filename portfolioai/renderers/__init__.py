"""
Portfolio rendering interfaces and implementations.
"""

from .base import PortfolioRenderer, PortfolioSite
from .html_renderer import HtmlPortfolioRenderer, render_portfolio, target_role_summary
from .template_catalog import (
    DEFAULT_TEMPLATE_ID,
    TEMPLATES,
    TemplateConfig,
    get_template,
    list_templates,
    resolve_template,
)

__all__ = [
    "PortfolioRenderer",
    "PortfolioSite",
    "HtmlPortfolioRenderer",
    "render_portfolio",
    "target_role_summary",
    "DEFAULT_TEMPLATE_ID",
    "TEMPLATES",
    "TemplateConfig",
    "get_template",
    "list_templates",
    "resolve_template",
]
