"""
Document text extraction interfaces and implementations.

This module provides pluggable extractors, one per document format.
"""

from .base import DocumentTextExtractor, ensure_sufficient_text
from .docx_extractor import DocxExtractor
from .pdf_extractor import PdfExtractor, TextFragment, assemble_page_text
from .extractor_registry import (
    DOCX_MIME_TYPE,
    detect_format,
    extract_text,
    extractor_for,
    get_extractor,
    list_extractors,
    register_extractor,
    unregister_extractor,
)

register_extractor("pdf", PdfExtractor)
register_extractor("docx", DocxExtractor)

__all__ = [
    "DocumentTextExtractor",
    "DocxExtractor",
    "PdfExtractor",
    "TextFragment",
    "assemble_page_text",
    "ensure_sufficient_text",
    "DOCX_MIME_TYPE",
    "detect_format",
    "extract_text",
    "extractor_for",
    "get_extractor",
    "list_extractors",
    "register_extractor",
    "unregister_extractor",
]
