"""
Keyword-Based Resume Matching System

Estimates how well a resume matches a job description:
1. Categorized skill-term extraction (exact, then fuzzy keyword match)
2. Deterministic weighted-category scoring with human-readable details

An alternate LLM scoring strategy is available in resume_match.llm_scorer.

Usage:
    from resume_match import extract_and_score

    result = extract_and_score(resume_text, job_text)
    print(f"Match: {result.score}%")
"""

from .categories import get_categories
from .errors import AnalysisError
from .extractor import extract
from .matcher import analyze_documents, extract_and_score, match_multiple_jobs
from .models import MatchResult
from .scoring_engine import score
from .similarity import similarity

__all__ = [
    "AnalysisError",
    "MatchResult",
    "analyze_documents",
    "extract",
    "extract_and_score",
    "get_categories",
    "match_multiple_jobs",
    "score",
    "similarity",
]
__version__ = "1.0.0"
