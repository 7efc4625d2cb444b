"""Tests for packaging rendered portfolios."""

import io
import zipfile
from pathlib import Path

from portfolioai.renderers import PortfolioSite
from portfolioai.site_bundle import (
    STYLESHEET_LINK,
    build_preview_document,
    build_site_archive,
    write_site,
)

SITE = PortfolioSite(
    html=f"<html><head>{STYLESHEET_LINK}</head><body>Hi</body></html>",
    css="body { color: red; }\n",
)


def test_preview_inlines_stylesheet():
    """The stylesheet link is replaced by a style block."""
    preview = build_preview_document(SITE)
    assert STYLESHEET_LINK not in preview
    assert "<style>\nbody { color: red; }\n</style>" in preview


def test_preview_without_link_inserts_before_head_end():
    """Pages without the link get the style block before </head>."""
    site = PortfolioSite(html="<html><head><title>x</title></head></html>", css="p {}\n")
    assert build_preview_document(site) == (
        "<html><head><title>x</title><style>\np {}\n</style>\n</head></html>"
    )


def test_write_site(tmp_path: Path):
    """index.html and styles.css are written into a new directory."""
    target = tmp_path / "out" / "site"
    written = write_site(SITE, target)
    assert [p.name for p in written] == ["index.html", "styles.css"]
    assert (target / "index.html").read_text(encoding="utf-8") == SITE.html
    assert (target / "styles.css").read_text(encoding="utf-8") == SITE.css


def test_archive_contents():
    """The archive holds both files."""
    with zipfile.ZipFile(io.BytesIO(build_site_archive(SITE))) as zf:
        assert sorted(zf.namelist()) == ["index.html", "styles.css"]
        assert zf.read("index.html").decode("utf-8") == SITE.html
        assert zf.read("styles.css").decode("utf-8") == SITE.css


def test_archive_is_reproducible():
    """Identical sites give byte-identical archives."""
    assert build_site_archive(SITE) == build_site_archive(SITE)
