import io
import sys
import zipfile
from pathlib import Path
from typing import List, Sequence, Tuple, Union

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


SAMPLE_RESUME_LINES = [
    "ALEX JOHNSON",
    "Senior Software Engineer",
    "alex.johnson@email.com | (555) 123-4567 | San Francisco, CA",
    "linkedin.com/in/alexjohnson",
    "",
    "PROFESSIONAL SUMMARY",
    "Experienced software engineer with 8 years of experience building scalable web",
    "applications and leading cross-functional teams. Passionate about clean code and mentoring.",
    "",
    "EXPERIENCE",
    "Tech Corp Inc. | Senior Software Engineer | Jan 2020 - Present",
    "Lead development of a microservices platform serving 2 million users.",
    "• Reduced API latency by 40% through caching with Redis",
    "• Mentored a team of 5 junior developers",
    "Startup XYZ | Software Developer | Jun 2017 - Dec 2019",
    "Built customer-facing features for a SaaS analytics product.",
    "• Implemented real-time dashboards with React and Node.js",
    "• Ok",
    "",
    "EDUCATION",
    "Bachelor of Science in Computer Science | University of California, Berkeley | 2013 - 2017 | GPA: 3.8",
    "",
    "SKILLS",
    "JavaScript, TypeScript, Python, React, Node.js, PostgreSQL, AWS, Docker",
    "Leadership, Communication, Problem Solving, Teamwork",
    "",
    "PROJECTS",
    "E-commerce Platform - Full-stack online store with payments",
    "Built a scalable storefront handling thousands of daily orders.",
    "Technologies: React, Node.js, PostgreSQL, Stripe",
    "https://github.com/alexj/ecommerce",
    "Task Management App",
    "Collaborative task tracker with real-time updates and team chat.",
    "Tech Stack: Vue, Firebase",
]


@pytest.fixture
def sample_resume_text() -> str:
    return "\n".join(SAMPLE_RESUME_LINES)


# ------------------------- DOCX builder -------------------------

_W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

_CONTENT_TYPES = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
    '<Default Extension="xml" ContentType="application/xml"/>'
    '<Override PartName="/word/document.xml" '
    'ContentType="application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"/>'
    "</Types>"
)


def _xml_escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


Paragraph = Union[str, Tuple[str, bool]]


def make_docx_bytes(paragraphs: Sequence[Paragraph]) -> bytes:
    """
    Build a minimal .docx in memory.

    Each paragraph is a string, or (text, is_list_item) to mark it as a
    Word list paragraph (numPr) without a bullet glyph in its text.
    """
    body: List[str] = []
    for para in paragraphs:
        text, is_list = (para, False) if isinstance(para, str) else para
        ppr = '<w:pPr><w:numPr><w:ilvl w:val="0"/><w:numId w:val="1"/></w:numPr></w:pPr>' if is_list else ""
        run = f'<w:r><w:t xml:space="preserve">{_xml_escape(text)}</w:t></w:r>' if text else ""
        body.append(f"<w:p>{ppr}{run}</w:p>")

    document = (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<w:document xmlns:w="{_W_NS}"><w:body>{"".join(body)}</w:body></w:document>'
    )
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as zf:
        zf.writestr("[Content_Types].xml", _CONTENT_TYPES)
        zf.writestr("word/document.xml", document)
    return buffer.getvalue()


# ------------------------- PDF builder -------------------------

def _pdf_escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def make_pdf_bytes(pages: Sequence[Sequence[Union[str, Tuple[str, float, float]]]]) -> bytes:
    """
    Build a minimal text PDF in memory (Helvetica, US Letter).

    Each page is a list of lines. A plain string is placed at the left
    margin, one line below the previous; (text, x, y) places a fragment at
    an explicit position. Only ASCII text is supported.
    """
    font_obj = 3 + 2 * len(pages)
    objects: List[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        (
            "<< /Type /Pages /Kids ["
            + " ".join(f"{3 + 2 * i} 0 R" for i in range(len(pages)))
            + f"] /Count {len(pages)} >>"
        ).encode("ascii"),
    ]

    for i, lines in enumerate(pages):
        ops = ["BT", "/F1 11 Tf"]
        y = 740.0
        for line in lines:
            if isinstance(line, tuple):
                text, x, ly = line
            else:
                text, x, ly = line, 72.0, y
                y -= 16.0
            if text:
                ops.append(f"1 0 0 1 {x:.1f} {ly:.1f} Tm ({_pdf_escape(text)}) Tj")
        ops.append("ET")
        stream = "\n".join(ops).encode("latin-1")
        page = (
            f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            f"/Resources << /Font << /F1 {font_obj} 0 R >> >> /Contents {4 + 2 * i} 0 R >>"
        ).encode("ascii")
        content = b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream"
        objects.extend([page, content])

    objects.append(b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica /Encoding /WinAnsiEncoding >>")

    out = io.BytesIO()
    out.write(b"%PDF-1.4\n")
    offsets = []
    for num, obj in enumerate(objects, start=1):
        offsets.append(out.tell())
        out.write(b"%d 0 obj\n" % num + obj + b"\nendobj\n")
    xref_at = out.tell()
    out.write(b"xref\n0 %d\n" % (len(objects) + 1))
    out.write(b"0000000000 65535 f \n")
    for off in offsets:
        out.write(b"%010d 00000 n \n" % off)
    out.write(b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1))
    out.write(b"startxref\n%d\n%%%%EOF\n" % xref_at)
    return out.getvalue()


@pytest.fixture
def docx_builder():
    return make_docx_bytes


@pytest.fixture
def pdf_builder():
    return make_pdf_bytes
