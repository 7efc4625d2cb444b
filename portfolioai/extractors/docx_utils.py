"""
Low-level DOCX / WordprocessingML helpers.

This module handles direct extraction of text from DOCX packages:
- reading the word/document.xml part from the ZIP container
- iterating document paragraphs
- detecting bullets and paragraph styles
- converting Word runs into plain text

It contains no resume-specific logic; field parsing is handled elsewhere.
"""

from __future__ import annotations

from io import BytesIO
from typing import Iterator, List, Tuple
from zipfile import ZipFile

from lxml import etree

from ..shared import normalize_text_for_processing

XML_PARSER = etree.XMLParser(recover=True, huge_tree=True)

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
DOCX_NS = {"w": W_NS}

DOCUMENT_PART = "word/document.xml"


def read_document_xml(docx_bytes: bytes) -> etree._Element:
    """
    Parse the main document part of a DOCX package.

    Raises:
        zipfile.BadZipFile: If the bytes are not a ZIP container
        KeyError: If the package has no word/document.xml part
        ValueError: If the part holds no parseable XML
    """
    with ZipFile(BytesIO(docx_bytes)) as z:
        xml_bytes = z.read(DOCUMENT_PART)
    root = etree.fromstring(xml_bytes, XML_PARSER)
    if root is None:
        raise ValueError(f"{DOCUMENT_PART} does not contain XML")
    return root


def iter_document_paragraphs(docx_bytes: bytes) -> Iterator[Tuple[str, bool, str]]:
    """
    Yield (text, is_bullet, style) for each paragraph in word/document.xml body.
    """
    root = read_document_xml(docx_bytes)

    for p in root.findall(".//w:body//w:p", DOCX_NS):
        text = extract_text_from_w_p(p)
        if not text:
            continue
        yield text, _p_is_bullet(p), _p_style(p)


def extract_text_from_w_p(p: etree._Element) -> str:
    parts: List[str] = []
    for node in p.iter():
        if not isinstance(node.tag, str):
            continue  # comments / processing instructions
        tag = etree.QName(node).localname
        if tag == "t" and node.text:
            parts.append(node.text)
        elif tag in ("noBreakHyphen", "softHyphen"):
            parts.append("-")
        elif tag in ("br", "cr"):
            parts.append("\n")
        elif tag == "tab":
            parts.append("\t")
    return normalize_text_for_processing("".join(parts)).strip()


def _p_style(p: etree._Element) -> str:
    pstyle = p.find(".//w:pPr/w:pStyle", DOCX_NS)
    if pstyle is None:
        return ""
    return pstyle.get(f"{{{W_NS}}}val", "") or ""


def _p_is_bullet(p: etree._Element) -> bool:
    # Word list formatting is usually in <w:numPr>
    if p.find(".//w:pPr/w:numPr", DOCX_NS) is not None:
        return True
    # Some templates use paragraph styles for lists; treat common list styles as bullets
    style = _p_style(p).lower()
    if style.startswith("list") or "bullet" in style:
        return True
    return False
