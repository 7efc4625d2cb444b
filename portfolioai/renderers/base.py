"""
Base interface for portfolio renderers.

Defines the contract for pluggable portfolio rendering implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional

from ..shared import ProfileRecord
from .template_catalog import DEFAULT_TEMPLATE_ID


@dataclass(frozen=True)
class PortfolioSite:
    """A rendered portfolio: the HTML page and the stylesheet it links."""
    html: str
    css: str

    def files(self) -> Dict[str, str]:
        """Static-site file name -> content."""
        return {"index.html": self.html, "styles.css": self.css}


class PortfolioRenderer(ABC):
    """
    Abstract base class for portfolio renderers.

    Implementations turn a ProfileRecord into a static site. Rendering is
    pure: no file or network I/O, and identical arguments must give
    identical output.
    """

    @abstractmethod
    def render(
        self,
        profile: ProfileRecord,
        template_id: str = DEFAULT_TEMPLATE_ID,
        target_role: Optional[str] = None,
    ) -> PortfolioSite:
        """
        Render a profile with the chosen template.

        Args:
            profile: The structured profile to render
            template_id: Template catalog id; unknown ids use the default template
            target_role: Optional role the candidate is seeking, appended to the summary

        Returns:
            PortfolioSite with the HTML document and its stylesheet
        """
        pass
