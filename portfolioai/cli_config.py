"""
CLI configuration data structures.

Defines the per-command stage dataclasses and the UserConfig shared by the
gather / execute phases of the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from .settings import ExtractionSettings


class Command(Enum):
    """Top-level CLI commands."""

    EXTRACT = "extract"
    RENDER = "render"
    TEMPLATES = "templates"


@dataclass
class ExtractStage:
    """Configuration for the extract command."""
    sources: List[Path] = field(default_factory=list)  # Input PDF / DOCX files
    output: Optional[Path] = None  # Output JSON (single source only)
    target_dir: Optional[Path] = None  # One <stem>.json per source
    settings: Optional[ExtractionSettings] = None


@dataclass
class RenderStage:
    """Configuration for the render command."""
    profile: Path  # Input profile JSON
    template: str = "modern"
    target_role: Optional[str] = None
    output_dir: Optional[Path] = None  # index.html + styles.css
    archive: Optional[Path] = None  # ZIP with both files
    preview: Optional[Path] = None  # Single HTML file with inline CSS


@dataclass
class UserConfig:
    """Configuration gathered from user input."""

    command: Command
    extract: Optional[ExtractStage] = None
    render: Optional[RenderStage] = None

    # Execution settings
    strict: bool = False
    debug: bool = False
    verbosity: int = 0
    log_file: Optional[str] = None
