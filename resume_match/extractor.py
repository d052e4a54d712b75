"""
Term Extractor

Turns raw document text into a TermSet: every token is classified into the
first category that claims it, exactly or fuzzily, or falls through to the
catch-all category.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from .categories import get_categories
from .config import MIN_TOKEN_LENGTH, OTHER_CATEGORY
from .models import Category, TermSet
from .similarity import is_fuzzy_match

logger = logging.getLogger(__name__)


def tokenize(text: Optional[str]) -> List[str]:
    """
    Lowercase the text, replace anything that is not alphanumeric or
    whitespace with a space, split, and drop tokens shorter than
    MIN_TOKEN_LENGTH.
    """
    if not text:
        return []
    cleaned = "".join(c if c.isalnum() or c.isspace() else " " for c in text.lower())
    return [t for t in cleaned.split() if len(t) >= MIN_TOKEN_LENGTH]


def empty_term_set(categories: Sequence[Category] = None) -> TermSet:
    categories = categories or get_categories()
    terms: TermSet = {c.name: [] for c in categories}
    terms.setdefault(OTHER_CATEGORY, [])
    return terms


def classify_token(
    token: str,
    categories: Sequence[Category] = None
) -> Tuple[str, str]:
    """
    Classify one token.

    Exact pass first over all categories, then a fuzzy pass in the same
    order. The first hit wins.

    Returns:
        (category name, term) where term is the canonical keyword for a
        fuzzy hit, or the token itself otherwise
    """
    categories = categories or get_categories()

    for category in categories:
        if category.has_keyword(token):
            return category.name, token

    for category in categories:
        for keyword in category.keywords:
            if is_fuzzy_match(token, keyword):
                logger.debug(f"Fuzzy match: {token!r} -> {keyword!r} ({category.name})")
                return category.name, keyword

    return OTHER_CATEGORY, token


def extract(text: Optional[str], categories: Sequence[Category] = None) -> TermSet:
    """
    Extract categorized terms from document text.

    Args:
        text: Raw document text (None or empty yields an empty TermSet)
        categories: Optional category override, defaults to the registry

    Returns:
        TermSet with every category key present
    """
    categories = categories or get_categories()
    terms = empty_term_set(categories)
    seen = {name: set() for name in terms}
    classified: Dict[str, Tuple[str, str]] = {}

    tokens = tokenize(text)
    for token in tokens:
        if token not in classified:
            classified[token] = classify_token(token, categories)
        name, term = classified[token]
        if term not in seen[name]:
            seen[name].add(term)
            terms[name].append(term)

    logger.debug(
        f"Extracted {len(tokens)} tokens: "
        + ", ".join(f"{name}={len(found)}" for name, found in terms.items())
    )
    return terms
