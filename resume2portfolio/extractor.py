"""
Resume bytes ➜ normalised plain text
– PDF via pdfplumber, DOCX via python-docx, plain text as UTF-8
– strips `(cid:N)` glyph artifacts from PDFs
– suppresses verbose CropBox warnings from pdfplumber/pdfminer
"""
from __future__ import annotations
import io, re, logging, warnings
from typing import BinaryIO, Callable, Dict

import pdfplumber
from docx import Document

from .errors import ExtractionError, UnsupportedFormatError

# silence noisy PDF logging
logging.getLogger("pdfplumber").setLevel(logging.ERROR)
logging.getLogger("pdfminer").setLevel(logging.ERROR)
warnings.filterwarnings("ignore", category=UserWarning, module="pdfminer")

logger = logging.getLogger(__name__)

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TXT_MIME = "text/plain"

_CID_RE = re.compile(r"\(cid:\d+\)")
_BLANK_RUN = re.compile(r"\n{3,}")


def normalise_text(raw: str) -> str:
    """Trim every line, drop empty ones, keep at most one blank separator."""
    lines = [ln.strip() for ln in (raw or "").splitlines()]
    text = "\n".join(ln for ln in lines if ln)
    return _BLANK_RUN.sub("\n\n", text)


def pdf_to_text(data: bytes) -> str:
    with pdfplumber.open(io.BytesIO(data)) as pdf:
        pages = [p.extract_text() or "" for p in pdf.pages]
    return _CID_RE.sub("", "\n".join(pages))


def docx_to_text(data: bytes) -> str:
    doc = Document(io.BytesIO(data))
    parts = [p.text for p in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            parts.extend(cell.text for cell in row.cells)
    return "\n".join(parts)


def txt_to_text(data: bytes) -> str:
    return data.decode("utf-8-sig")


# mime → (format label, decoder)
EXTRACTORS: Dict[str, tuple[str, Callable[[bytes], str]]] = {
    PDF_MIME: ("pdf", pdf_to_text),
    DOCX_MIME: ("docx", docx_to_text),
    TXT_MIME: ("txt", txt_to_text),
}


def is_supported(mime_type: str | None) -> bool:
    return mime_type in EXTRACTORS


def _read_bytes(source: bytes | bytearray | BinaryIO) -> bytes:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    return source.read()


def extract_text(source: bytes | BinaryIO, mime_type: str) -> str:
    """Decode *source* according to *mime_type* and return normalised text."""
    if mime_type not in EXTRACTORS:
        raise UnsupportedFormatError(mime_type)

    fmt, decode = EXTRACTORS[mime_type]
    data = _read_bytes(source)
    try:
        raw = decode(data)
    except Exception as exc:  # decoder errors are library-specific
        logger.debug("%s decoder failed", fmt, exc_info=True)
        raise ExtractionError(fmt, exc) from exc
    return normalise_text(raw)
