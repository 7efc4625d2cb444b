"""
Extraction error taxonomy.

Every failure that aborts a whole extraction is an ExtractionError. The
subclass tells the caller which remediation advice to show; per-field
parse misses are never errors (see portfolioai.parsers).
"""

from __future__ import annotations


class ExtractionError(Exception):
    """Base class for terminal document extraction failures."""

    advice = "Please try uploading your resume again."

    def __init__(self, message: str, advice: str | None = None):
        super().__init__(message)
        self.message = message
        if advice is not None:
            self.advice = advice

    def __str__(self) -> str:
        return self.message


class UnsupportedFormatError(ExtractionError):
    """The file is neither a PDF nor a DOCX document."""

    advice = "Please upload a PDF or DOCX file."


class CorruptedDocumentError(ExtractionError):
    """The bytes could not be parsed as the claimed format."""

    advice = "The file appears to be corrupted or invalid. Please try a different file."


class InsufficientTextError(ExtractionError):
    """The document parsed but yielded too little text to work with."""

    advice = (
        "The document seems to be image-based or empty. "
        "Please upload a text-based PDF or DOCX."
    )

    def __init__(self, message: str, text_length: int = 0, advice: str | None = None):
        super().__init__(message, advice)
        self.text_length = text_length


__all__ = [
    "ExtractionError",
    "UnsupportedFormatError",
    "CorruptedDocumentError",
    "InsufficientTextError",
]
