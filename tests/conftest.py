import io

import pytest
from docx import Document

SAMPLE_RESUME = """\
Jane Doe
jane.doe@example.com | (555) 123-4567
github.com/janedoe | linkedin.com/in/jane-doe | https://janedoe.dev

Summary
Full-stack engineer who ships reliable web products.
Enjoys mentoring and clean code.

Skills
Python, React, Docker, PostgreSQL, Figma, Leadership

Experience
Software Engineer at Acme | Jan 2020 - Present
- Built the billing service
- Led migration to Kubernetes
Junior Developer, Initech (2017 - 2019)
• Maintained internal tools

Projects
Resume Site Builder
- Generates static sites from resumes
- Tech Stack: Python, Jinja2
- Source: https://example.com/builder

Education
B.S. Computer Science, 2017
State University
Graduated with honors
"""


@pytest.fixture
def sample_text():
    return SAMPLE_RESUME


@pytest.fixture
def sample_bytes():
    return SAMPLE_RESUME.encode("utf-8")


@pytest.fixture
def docx_bytes():
    doc = Document()
    for line in SAMPLE_RESUME.splitlines():
        doc.add_paragraph(line)
    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()


PDF_LINES = [
    "Jane Doe",
    "jane.doe@example.com",
    "Skills",
    "Python, Docker, React",
    "Experience",
    "Software Engineer at Acme | 2020 - 2023",
]


def _pdf_string(text):
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(lines):
    """One-page PDF with each line set in 14pt Helvetica, xref offsets computed."""
    ops = ["BT", "/F1 14 Tf", "18 TL", "72 720 Td"]
    ops += [f"({_pdf_string(ln)}) Tj T*" for ln in lines]
    ops.append("ET")
    stream = "\n".join(ops).encode("latin-1")

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for num, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % num + body + b"\nendobj\n"

    xref = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for off in offsets:
        out += b"%010d 00000 n \n" % off
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref
    return bytes(out)


@pytest.fixture
def pdf_lines():
    return list(PDF_LINES)


@pytest.fixture
def pdf_bytes():
    return build_pdf(PDF_LINES)
