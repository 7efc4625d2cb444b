"""
Packaging of rendered portfolios.

Turns a PortfolioSite into the forms the UI hands to users: a single-file
preview with the stylesheet inlined, a directory of static files, or a ZIP
archive of them.
"""

from __future__ import annotations

import io
import zipfile
from pathlib import Path
from typing import List

from .logging_utils import LOG
from .renderers.base import PortfolioSite

STYLESHEET_LINK = '<link rel="stylesheet" href="styles.css">'

# Fixed member timestamp so identical sites give identical archives
_ZIP_DATE_TIME = (1980, 1, 1, 0, 0, 0)


def build_preview_document(site: PortfolioSite) -> str:
    """Single HTML document with the stylesheet in a <style> block."""
    style_block = f"<style>\n{site.css}</style>"
    if STYLESHEET_LINK in site.html:
        return site.html.replace(STYLESHEET_LINK, style_block, 1)
    return site.html.replace("</head>", f"{style_block}\n</head>", 1)


def write_site(site: PortfolioSite, directory: Path) -> List[Path]:
    """Write index.html and styles.css into `directory` (created if needed)."""
    directory.mkdir(parents=True, exist_ok=True)
    written = []
    for name, content in site.files().items():
        path = directory / name
        path.write_text(content, encoding="utf-8")
        written.append(path)
    LOG.info("Wrote portfolio site to %s", directory)
    return written


def build_site_archive(site: PortfolioSite) -> bytes:
    """ZIP archive holding index.html and styles.css."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name, content in site.files().items():
            info = zipfile.ZipInfo(name, date_time=_ZIP_DATE_TIME)
            info.compress_type = zipfile.ZIP_DEFLATED
            zf.writestr(info, content.encode("utf-8"))
    return buffer.getvalue()
