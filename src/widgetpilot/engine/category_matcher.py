"""
WidgetPilot Category Matcher

Decides whether a category detected in the user's query is one of the
user's managed categories. In word matching short words never
contribute and words are compared whole, so "it" cannot match
"information technology".

Matching rules, applied per managed category in order:
1. Exact match: "steel" == "steel"
2. Detected equals the managed base (text before any parenthetical):
   "steel" matches "steel (hot rolled coil)"
3. Detected is a prefix of the base: "alum" matches "aluminum extrusions"
4. Every base word of MIN_WORD_LENGTH or more characters appears as a
   whole word in detected: "carbon steel" and "steel pipes" match "steel"
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

# Words shorter than this never contribute to a match ("it", "hr", ...)
MIN_WORD_LENGTH = 3


def normalize_category(value: str) -> str:
    """Lowercase and trim a category label."""
    return value.lower().strip()


def category_base(managed: str) -> str:
    """Return the part of a category label before any parenthetical."""
    return managed.split("(", 1)[0].strip()


def significant_words(text: str) -> list[str]:
    """Whitespace-separated words of at least MIN_WORD_LENGTH characters."""
    return [w for w in text.split() if len(w) >= MIN_WORD_LENGTH]


def matches_category(detected: str, managed: str) -> bool:
    """Check one normalized detected category against one managed category."""
    managed = normalize_category(managed)
    if not detected or not managed:
        return False

    # Rule 1: exact
    if detected == managed:
        return True

    base = category_base(managed)
    if not base:
        return False

    # Rule 2: detected equals the base
    if detected == base:
        return True

    # Rule 3: detected is a prefix of the base
    if base.startswith(detected):
        return True

    # Rule 4: all significant base words appear whole in detected
    base_words = significant_words(base)
    if base_words:
        detected_words = set(significant_words(detected))
        if all(word in detected_words for word in base_words):
            return True

    return False


def matches_any_category(
    detected: Optional[str],
    managed_categories: Optional[Iterable[str]],
) -> bool:
    """
    Check if a detected category matches any managed category.

    Args:
        detected: Category detected in the user's query
        managed_categories: The user's managed categories

    Returns:
        True if any managed category matches; False for empty or absent input

    Example:
        >>> matches_any_category("STEEL ", ["Steel (Hot Rolled Coil)"])
        True
        >>> matches_any_category("aluminum", ["steel", "copper"])
        False
    """
    if not detected or not managed_categories:
        return False

    normalized = normalize_category(detected)
    if not normalized:
        return False

    return any(matches_category(normalized, managed) for managed in managed_categories)
