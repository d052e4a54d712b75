"""
Category Registry

Skill categories are built once, at import time, from config and exposed as
an ordered, immutable tuple.
"""

import logging
import re
from typing import Dict, List, Tuple

from .config import CATEGORY_KEYWORDS, CATEGORY_WEIGHTS, MIN_TOKEN_LENGTH, OTHER_CATEGORY
from .models import Category

logger = logging.getLogger(__name__)

_KEYWORD_PATTERN = re.compile(r"^[a-z0-9]+$")


def build_categories(
    weights: Dict[str, float],
    keywords: Dict[str, List[str]]
) -> Tuple[Category, ...]:
    """
    Build the ordered category tuple from weight and keyword mappings.

    Keywords must be single alphanumeric tokens of at least MIN_TOKEN_LENGTH
    characters, and no keyword may belong to two categories.

    Raises:
        ValueError: If the configuration breaks any of these rules
    """
    if OTHER_CATEGORY not in weights:
        raise ValueError(f"Missing catch-all category: {OTHER_CATEGORY}")

    categories = []
    owners: Dict[str, str] = {}
    for name, weight in weights.items():
        category = Category(name=name, weight=weight, keywords=keywords.get(name, []))
        for keyword in category.keywords:
            if len(keyword) < MIN_TOKEN_LENGTH or not _KEYWORD_PATTERN.match(keyword):
                raise ValueError(f"Keyword {keyword!r} in {name} is not a single token")
            if keyword in owners:
                raise ValueError(
                    f"Keyword {keyword!r} is declared in both {owners[keyword]} and {name}"
                )
            owners[keyword] = name
        categories.append(category)

    if any(c.weight > 0 for c in categories if c.name == OTHER_CATEGORY):
        raise ValueError(f"Catch-all category {OTHER_CATEGORY} cannot carry weight")

    logger.debug(f"Built {len(categories)} categories with {len(owners)} keywords")
    return tuple(categories)


_CATEGORIES = build_categories(CATEGORY_WEIGHTS, CATEGORY_KEYWORDS)


def get_categories() -> Tuple[Category, ...]:
    """All categories, in declaration order."""
    return _CATEGORIES


def weighted_categories() -> Tuple[Category, ...]:
    """Categories that take part in scoring (everything but the catch-all)."""
    return tuple(c for c in _CATEGORIES if c.name != OTHER_CATEGORY)


def get_category(name: str) -> Category:
    for category in _CATEGORIES:
        if category.name == name:
            return category
    raise KeyError(name)
