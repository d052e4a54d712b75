"""
Tests for document text extraction.
"""

import io
import unittest
from unittest.mock import MagicMock, patch

from docx import Document

from resume_match.config import DOCX_MIME_TYPE, PDF_MIME_TYPE, TEXT_MIME_TYPE
from resume_match.documents import extract_text, guess_mime_type
from resume_match.errors import AnalysisError, DocumentExtractionError, UnsupportedDocumentError


def make_docx() -> bytes:
    doc = Document()
    doc.add_paragraph("Backend engineer with Python and Docker")
    table = doc.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Skills"
    table.rows[0].cells[1].text = "Kubernetes"
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


class TestGuessMimeType(unittest.TestCase):

    def test_known_extensions(self):
        self.assertEqual(guess_mime_type("resume.PDF"), PDF_MIME_TYPE)
        self.assertEqual(guess_mime_type("job.docx"), DOCX_MIME_TYPE)
        self.assertEqual(guess_mime_type("notes.txt"), TEXT_MIME_TYPE)

    def test_unknown_extension(self):
        with self.assertRaises(UnsupportedDocumentError):
            guess_mime_type("photo.png")
        with self.assertRaises(UnsupportedDocumentError):
            guess_mime_type(None)


class TestExtractText(unittest.TestCase):

    def test_plain_text(self):
        self.assertEqual(extract_text("Python ✓".encode(), TEXT_MIME_TYPE), "Python ✓")

    def test_mime_parameters_ignored(self):
        self.assertEqual(extract_text(b"python", "text/plain; charset=utf-8"), "python")

    def test_docx_paragraphs_and_tables(self):
        text = extract_text(make_docx(), DOCX_MIME_TYPE)
        self.assertIn("Backend engineer with Python and Docker", text)
        self.assertIn("Kubernetes", text)

    @patch("resume_match.documents.pdfplumber.open")
    def test_pdf_pages_joined(self, mock_open):
        first, second = MagicMock(), MagicMock()
        first.extract_text.return_value = "Python developer"
        second.extract_text.return_value = None
        mock_open.return_value.__enter__.return_value.pages = [first, second]

        text = extract_text(b"%PDF-1.4 fake", PDF_MIME_TYPE)

        self.assertEqual(text, "Python developer\n")

    def test_unsupported_type(self):
        with self.assertRaises(UnsupportedDocumentError):
            extract_text(b"\x89PNG", "image/png")

    def test_empty_bytes(self):
        with self.assertRaises(DocumentExtractionError):
            extract_text(b"", TEXT_MIME_TYPE)

    def test_corrupt_docx(self):
        with self.assertRaises(DocumentExtractionError):
            extract_text(b"not a docx file", DOCX_MIME_TYPE)

    def test_errors_are_analysis_errors(self):
        with self.assertRaises(AnalysisError):
            extract_text(b"not a pdf", PDF_MIME_TYPE)


if __name__ == "__main__":
    unittest.main()
