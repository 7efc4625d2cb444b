"""
PDF text extractor implementation.

pdfplumber yields positioned words in content-stream order, which for
multi-column or designer resumes is not reading order. Words are re-sorted
top-to-bottom / left-to-right and grouped into lines by vertical position.
"""

from __future__ import annotations

import io
import warnings
from dataclasses import dataclass
from typing import Iterable, List

import pdfplumber

from ..errors import CorruptedDocumentError
from ..logging_utils import LOG
from .base import DocumentTextExtractor

# pdfminer warns about every malformed CropBox it meets
warnings.filterwarnings("ignore", category=UserWarning, module="pdfminer")


@dataclass(frozen=True)
class TextFragment:
    text: str
    x: float  # left edge
    y: float  # baseline, PDF user space (grows upwards)


def assemble_page_text(fragments: Iterable[TextFragment], line_tolerance: float) -> str:
    """
    Rebuild the reading order of one page.

    Fragments are visited by descending y, then ascending x; a new line
    starts whenever two successive fragments differ vertically by more than
    `line_tolerance`. Within a line, fragments are joined left to right.
    """
    ordered = sorted(fragments, key=lambda f: (-f.y, f.x))

    lines: List[List[TextFragment]] = []
    last_y = None
    for frag in ordered:
        if last_y is None or abs(last_y - frag.y) > line_tolerance:
            lines.append([])
        lines[-1].append(frag)
        last_y = frag.y

    return "\n".join(
        " ".join(f.text for f in sorted(line, key=lambda f: f.x))
        for line in lines
    )


def page_fragments(page) -> List[TextFragment]:
    """Positioned words of a pdfplumber page as TextFragments."""
    height = float(page.height)
    fragments = []
    for word in page.extract_words(keep_blank_chars=False, use_text_flow=False):
        text = word.get("text", "")
        if not text.strip():
            continue
        fragments.append(
            TextFragment(
                text=text,
                x=float(word["x0"]),
                y=height - float(word["bottom"]),
            )
        )
    return fragments


class PdfExtractor(DocumentTextExtractor):
    """
    Text extractor for PDF documents.

    This implementation:
    - Opens the byte buffer with pdfplumber
    - Reads at most `settings.max_pages` pages
    - Rebuilds reading order from positioned words on each page
    - Separates pages with a blank line
    """

    format_name = "pdf"

    def read_text(self, file_bytes: bytes) -> str:
        try:
            pdf = pdfplumber.open(io.BytesIO(file_bytes))
        except Exception as e:
            raise CorruptedDocumentError(
                "Invalid PDF file: the document could not be opened."
            ) from e

        with pdf:
            try:
                pages = pdf.pages
                LOG.info(
                    "PDF has %d page(s), reading up to %d",
                    len(pages),
                    self.settings.max_pages,
                )
                page_texts = [
                    assemble_page_text(page_fragments(page), self.settings.line_tolerance)
                    for page in pages[: self.settings.max_pages]
                ]
            except Exception as e:
                raise CorruptedDocumentError(
                    f"Invalid PDF file: failed to read page content ({type(e).__name__})."
                ) from e

        return "\n\n".join(page_texts)
