"""
Error types raised by the collaborators around the scoring core.

Callers only need to catch AnalysisError; the subclasses say which
upstream step failed.
"""


class AnalysisError(ValueError):
    """Analysis of a resume/job pair failed."""


class DocumentExtractionError(AnalysisError):
    """Text could not be extracted from an uploaded document."""


class UnsupportedDocumentError(DocumentExtractionError):
    """The document type is not PDF, DOCX or plain text."""


class LLMScoringError(AnalysisError):
    """The language model scoring call failed."""


class MissingCredentialsError(LLMScoringError):
    """No API key was provided for the language model."""
