"""
Main Matcher Module

Orchestrates the complete matching process:
1. Extract text from uploaded documents
2. Extract categorized terms from both texts
3. Score with the keyword engine (or the alternate LLM strategy)
"""

import logging
from typing import Any, Dict, List

from .documents import extract_text
from .errors import AnalysisError
from .extractor import extract
from .llm_scorer import score_with_llm
from .models import LLMSettings, MatchResult
from .scoring_engine import calculate_match_score

logger = logging.getLogger(__name__)

STRATEGIES = ("keyword", "llm")


def extract_and_score(resume_text: str, job_text: str) -> MatchResult:
    """
    Score a resume against a job description with the keyword engine.

    Never raises: empty or malformed text degrades to the floor score.

    Example:
        >>> result = extract_and_score(resume_text, job_text)
        >>> print(f"Match: {result.score}%")
    """
    resume_terms = extract(resume_text)
    job_terms = extract(job_text)
    return calculate_match_score(resume_terms, job_terms)


def analyze_texts(
    resume_text: str,
    job_text: str,
    strategy: str = "keyword",
    llm_settings: LLMSettings = None
) -> MatchResult:
    """
    Score two already-extracted texts with the chosen strategy.

    Raises:
        ValueError: If the strategy is unknown
        AnalysisError: If the LLM strategy fails
    """
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown strategy {strategy!r}, expected one of {STRATEGIES}")

    if strategy == "llm":
        return score_with_llm(resume_text, job_text, llm_settings)
    return extract_and_score(resume_text, job_text)


def analyze_documents(
    resume_bytes: bytes,
    resume_mime_type: str,
    job_bytes: bytes,
    job_mime_type: str,
    strategy: str = "keyword",
    llm_settings: LLMSettings = None
) -> MatchResult:
    """
    Extract text from both documents and score the pair.

    Args:
        resume_bytes: Resume file contents
        resume_mime_type: Resume MIME type (PDF, DOCX or plain text)
        job_bytes: Job description file contents
        job_mime_type: Job description MIME type
        strategy: "keyword" (default) or "llm"
        llm_settings: Required for the "llm" strategy

    Returns:
        MatchResult

    Raises:
        ValueError: If the strategy is unknown
        AnalysisError: If extraction or LLM scoring fails
    """
    logger.info("=" * 60)
    logger.info(f"STARTING RESUME ANALYSIS ({strategy})")
    logger.info("=" * 60)

    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown strategy {strategy!r}, expected one of {STRATEGIES}")

    try:
        logger.info("Step 1: Extracting document text...")
        resume_text = extract_text(resume_bytes, resume_mime_type)
        job_text = extract_text(job_bytes, job_mime_type)

        logger.info("Step 2: Scoring...")
        result = analyze_texts(resume_text, job_text, strategy, llm_settings)

    except AnalysisError as e:
        logger.error(f"Analysis failed: {e}", exc_info=True)
        raise

    logger.info(f"ANALYSIS COMPLETE - Score: {result.score}%")
    return result


def match_multiple_jobs(
    job_texts: List[str],
    resume_text: str
) -> List[Dict[str, Any]]:
    """
    Match a resume against multiple job descriptions.

    Args:
        job_texts: List of job description texts
        resume_text: Resume text

    Returns:
        List of match results, sorted by score (highest first). Ties keep
        input order.

    Example:
        >>> results = match_multiple_jobs([job1, job2, job3], resume_text)
        >>> for i, result in enumerate(results, 1):
        >>>     print(f"#{i}: job {result['job_index']} {result['score']}%")
    """
    logger.info(f"Matching resume against {len(job_texts)} jobs")

    resume_terms = extract(resume_text)
    results = []
    for i, job_text in enumerate(job_texts):
        result = calculate_match_score(resume_terms, extract(job_text))
        results.append({
            "job_index": i,
            "score": result.score,
            "details": result.details,
            "breakdown": result.breakdown,
            "missing": result.missing,
        })

    results.sort(key=lambda x: x["score"], reverse=True)

    if results:
        logger.info(f"Top match: job {results[0]['job_index']} at {results[0]['score']}%")

    return results
