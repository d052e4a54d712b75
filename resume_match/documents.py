"""
Document text extraction for PDF, DOCX and plain-text uploads.
"""

import io
import logging
import os

import pdfplumber
from docx import Document

from .config import DOCX_MIME_TYPE, PDF_MIME_TYPE, SUPPORTED_MIME_TYPES, TEXT_MIME_TYPE
from .errors import DocumentExtractionError, UnsupportedDocumentError

logger = logging.getLogger(__name__)


def guess_mime_type(filename: str) -> str:
    """
    Map a filename extension to a supported MIME type.

    Raises:
        UnsupportedDocumentError: If the extension is not .pdf, .docx or .txt
    """
    ext = os.path.splitext(filename or "")[1].lower()
    if ext not in SUPPORTED_MIME_TYPES:
        raise UnsupportedDocumentError(f"Unsupported document type: {filename!r}")
    return SUPPORTED_MIME_TYPES[ext]


def _read_pdf(data: bytes) -> str:
    text = []
    with pdfplumber.open(io.BytesIO(data)) as pdf:
        for page in pdf.pages:
            text.append(page.extract_text() or "")
    return "\n".join(text)


def _read_docx(data: bytes) -> str:
    doc = Document(io.BytesIO(data))
    lines = [p.text for p in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            lines.extend(cell.text for cell in row.cells)
    return "\n".join(lines)


def _read_text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


_READERS = {
    PDF_MIME_TYPE: _read_pdf,
    DOCX_MIME_TYPE: _read_docx,
    TEXT_MIME_TYPE: _read_text,
}


def extract_text(data: bytes, mime_type: str) -> str:
    """
    Extract raw text from document bytes.

    Args:
        data: File contents
        mime_type: One of the supported MIME types (parameters such as
            "; charset=utf-8" are ignored)

    Returns:
        Extracted text (may be empty for image-only PDFs)

    Raises:
        UnsupportedDocumentError: If the MIME type is not supported
        DocumentExtractionError: If the bytes are empty or cannot be parsed
    """
    base_type = (mime_type or "").split(";")[0].strip().lower()
    reader = _READERS.get(base_type)
    if reader is None:
        raise UnsupportedDocumentError(f"Unsupported document type: {mime_type!r}")
    if not data:
        raise DocumentExtractionError("Document is empty")

    try:
        text = reader(data)
    except Exception as e:
        logger.error(f"Failed to extract text from {base_type} document: {e}", exc_info=True)
        raise DocumentExtractionError(f"Could not read {base_type} document: {e}") from e

    logger.info(f"Extracted {len(text)} characters from {base_type} document")
    return text
