"""
Extraction settings.

Holds the tunables of the document extractors. Extractors receive an
explicit ExtractionSettings value at construction; when none is given they
fall back to the process-wide default, which can be replaced once at
startup with configure_defaults().
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .logging_utils import LOG


@dataclass(frozen=True)
class ExtractionSettings:
    max_pages: int = 15            # PDF pages read per document
    line_tolerance: float = 5.0    # vertical distance (PDF units) that starts a new line
    min_text_length: int = 100     # below this the document is treated as image-based/empty

    def __post_init__(self) -> None:
        if self.max_pages < 1:
            raise ValueError(f"max_pages must be positive, got {self.max_pages}")
        if self.line_tolerance < 0:
            raise ValueError(f"line_tolerance must not be negative, got {self.line_tolerance}")
        if self.min_text_length < 0:
            raise ValueError(f"min_text_length must not be negative, got {self.min_text_length}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ExtractionSettings":
        """
        Build settings from PORTFOLIOAI_* environment variables.

        Unset variables keep the dataclass defaults.
        """
        env = os.environ if environ is None else environ
        overrides = {}
        if env.get("PORTFOLIOAI_MAX_PAGES"):
            overrides["max_pages"] = int(env["PORTFOLIOAI_MAX_PAGES"])
        if env.get("PORTFOLIOAI_LINE_TOLERANCE"):
            overrides["line_tolerance"] = float(env["PORTFOLIOAI_LINE_TOLERANCE"])
        if env.get("PORTFOLIOAI_MIN_TEXT_LENGTH"):
            overrides["min_text_length"] = int(env["PORTFOLIOAI_MIN_TEXT_LENGTH"])
        return cls(**overrides)


_DEFAULT_SETTINGS = ExtractionSettings()


def get_default_settings() -> ExtractionSettings:
    return _DEFAULT_SETTINGS


def configure_defaults(settings: Optional[ExtractionSettings] = None, **overrides) -> ExtractionSettings:
    """
    Replace the process-wide default settings.

    Args:
        settings: Complete settings to install (defaults to the current ones)
        **overrides: Individual fields to change on top of `settings`

    Returns:
        The settings now in effect
    """
    global _DEFAULT_SETTINGS
    base = settings or _DEFAULT_SETTINGS
    _DEFAULT_SETTINGS = replace(base, **overrides) if overrides else base
    LOG.debug("Default extraction settings: %s", _DEFAULT_SETTINGS)
    return _DEFAULT_SETTINGS


__all__ = [
    "ExtractionSettings",
    "get_default_settings",
    "configure_defaults",
]
