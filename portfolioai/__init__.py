# portfolioai/__init__.py

from .errors import (
    CorruptedDocumentError,
    ExtractionError,
    InsufficientTextError,
    UnsupportedFormatError,
)
from .extractors import extract_text
from .pipeline import assemble_profile, extract_profile, extract_profile_sync, placeholder_fields
from .renderers import PortfolioSite, list_templates, render_portfolio
from .settings import ExtractionSettings, configure_defaults
from .shared import ProfileRecord

__all__ = [
    "ExtractionError",
    "UnsupportedFormatError",
    "CorruptedDocumentError",
    "InsufficientTextError",
    "ExtractionSettings",
    "configure_defaults",
    "extract_text",
    "extract_profile",
    "extract_profile_sync",
    "assemble_profile",
    "placeholder_fields",
    "ProfileRecord",
    "PortfolioSite",
    "render_portfolio",
    "list_templates",
]
