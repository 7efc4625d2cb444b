"""
DOCX text extractor implementation.

Extracts resume text from Word .docx files.
"""

from __future__ import annotations

from zipfile import BadZipFile

from lxml import etree

from ..errors import CorruptedDocumentError
from ..logging_utils import LOG
from .base import DocumentTextExtractor
from .docx_utils import DOCUMENT_PART, iter_document_paragraphs

BULLET_PREFIX = "• "
_BULLET_CHARS = ("•", "-", "*", "▪", "◦", "–")


class DocxExtractor(DocumentTextExtractor):
    """
    Text extractor for Microsoft Word .docx files.

    This implementation:
    - Opens the document as a ZIP package and parses word/document.xml
    - Emits one line per non-empty paragraph, in document order
    - Prefixes Word list items with a bullet so they read like PDF bullets
    """

    format_name = "docx"

    def read_text(self, file_bytes: bytes) -> str:
        try:
            paragraphs = list(iter_document_paragraphs(file_bytes))
        except BadZipFile as e:
            raise CorruptedDocumentError(
                "Invalid DOCX file: the document is not a valid Word package."
            ) from e
        except KeyError as e:
            raise CorruptedDocumentError(
                f"Invalid DOCX file: missing {DOCUMENT_PART}."
            ) from e
        except (etree.XMLSyntaxError, ValueError) as e:
            raise CorruptedDocumentError(
                f"Invalid DOCX file: {DOCUMENT_PART} could not be parsed ({e})."
            ) from e

        LOG.debug("DOCX document has %d non-empty paragraphs", len(paragraphs))

        lines = []
        for text, is_bullet, _style in paragraphs:
            if is_bullet and not text.startswith(_BULLET_CHARS):
                text = BULLET_PREFIX + text
            lines.append(text)
        return "\n".join(lines)
