"""
String similarity used for fuzzy keyword classification and for matching
terms across documents.
"""

from rapidfuzz.distance import JaroWinkler

from .config import FUZZY_THRESHOLD


def similarity(a: str, b: str) -> float:
    """
    Normalized Jaro-Winkler similarity in [0, 1].

    Symmetric and reflexive. Empty against non-empty is 0, so a missing term
    never matches anything.
    """
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0
    return JaroWinkler.normalized_similarity(a, b)


def is_fuzzy_match(a: str, b: str, threshold: float = FUZZY_THRESHOLD) -> bool:
    """True when similarity is strictly above the threshold."""
    return similarity(a, b) > threshold
