"""
Deterministic Scoring Engine

All scoring functions are deterministic - same inputs produce same outputs.
No AI/LLM is used in this module.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from .categories import weighted_categories
from .config import SCORE_CEILING, SCORE_FLOOR
from .models import Category, MatchResult, TermSet
from .similarity import is_fuzzy_match

logger = logging.getLogger(__name__)


def find_matching_term(job_term: str, resume_terms: List[str]) -> Optional[str]:
    """First resume term that fuzzily matches the job term, if any."""
    for resume_term in resume_terms:
        if is_fuzzy_match(job_term, resume_term):
            return resume_term
    return None


def calculate_category_matches(
    job_terms: List[str],
    resume_terms: List[str]
) -> Tuple[List[str], List[str]]:
    """
    Split job terms into matched and missing, keeping extraction order.

    Args:
        job_terms: Terms extracted from the job description for one category
        resume_terms: Terms extracted from the resume for the same category

    Returns:
        (matched job terms, missing job terms)
    """
    matched, missing = [], []
    for job_term in job_terms:
        if find_matching_term(job_term, resume_terms) is not None:
            matched.append(job_term)
        else:
            missing.append(job_term)
    return matched, missing


def format_detail(category_name: str, matched: List[str]) -> str:
    return f"{category_name.capitalize()} skills matched: {', '.join(matched)}"


def normalize_score(total_score: float, total_weight: float) -> int:
    """
    Convert accumulated weighted score into a percentage.

    Formula:
    - totalWeight > 0: round(total_score / total_weight * 100), clamped to [40, 100]
    - otherwise: 40
    """
    if total_weight <= 0:
        return SCORE_FLOOR
    raw = round((total_score / total_weight) * 100)
    return max(SCORE_FLOOR, min(SCORE_CEILING, raw))


def calculate_match_score(
    resume_terms: TermSet,
    job_terms: TermSet,
    categories: Sequence[Category] = None
) -> MatchResult:
    """
    Calculate the weighted match score between two TermSets.

    For each weighted category, every job term counts as matched when some
    resume term in the same category is a fuzzy match. The category then
    earns (matched / job terms) * weight.

    Args:
        resume_terms: TermSet extracted from the resume
        job_terms: TermSet extracted from the job description
        categories: Optional category override, defaults to the weighted registry

    Returns:
        MatchResult with score, details, breakdown and missing terms
    """
    categories = categories or weighted_categories()
    resume_terms = resume_terms or {}
    job_terms = job_terms or {}

    total_score = 0.0
    total_weight = 0.0
    details = []
    breakdown = {}
    missing_terms = {}

    for category in categories:
        if category.weight <= 0:
            continue

        job_category_terms = list(job_terms.get(category.name) or [])
        resume_category_terms = list(resume_terms.get(category.name) or [])
        if not job_category_terms:
            logger.debug(f"{category.name}: no job terms, skipped")
            continue

        matched, missing = calculate_category_matches(job_category_terms, resume_category_terms)
        ratio = len(matched) / len(job_category_terms)
        total_score += ratio * category.weight
        total_weight += category.weight

        breakdown[category.name] = round(ratio * 100, 2)
        if missing:
            missing_terms[category.name] = missing
        if matched:
            details.append(format_detail(category.name, matched))

        logger.debug(
            f"{category.name}: {len(matched)}/{len(job_category_terms)} matched, "
            f"earned {ratio * category.weight:.2f} of {category.weight}"
        )

    final_score = normalize_score(total_score, total_weight)
    logger.info(f"Keyword match score: {final_score}% (weight {total_weight})")

    return MatchResult(
        score=final_score,
        details=details,
        breakdown=breakdown,
        missing=missing_terms,
        strategy="keyword",
    )


score = calculate_match_score
