"""Fixed word lists used by the scorers.

Both tables are module constants and are never mutated at runtime.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

STOPWORDS: FrozenSet[str] = frozenset({
    "that", "this", "with", "from", "they", "have", "been", "were", "will",
    "would", "could", "should", "about", "there", "their", "where", "when",
    "what", "which", "while", "through", "during", "before", "after", "above",
    "below", "between", "into", "onto", "upon", "within", "without",
})

# Insertion order is significant: categories are scanned in this order and
# keyword matches are reported in list order.
CATEGORY_TABLE: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "technology": (
        "tech", "ai", "software", "digital", "innovation", "coding",
        "development", "startup", "algorithm",
    ),
    "business": (
        "business", "entrepreneur", "marketing", "sales", "profit", "company",
        "corporate", "strategy",
    ),
    "lifestyle": (
        "life", "living", "daily", "routine", "habit", "wellness", "balance",
        "personal",
    ),
    "fitness": (
        "fitness", "workout", "exercise", "health", "gym", "training", "muscle",
        "strength",
    ),
    "travel": (
        "travel", "trip", "vacation", "journey", "adventure", "explore",
        "destination", "tourism",
    ),
    "food": (
        "food", "recipe", "cooking", "delicious", "meal", "restaurant",
        "cuisine", "flavor",
    ),
    "education": (
        "learn", "education", "study", "knowledge", "skill", "course",
        "training", "development",
    ),
    "creativity": (
        "creative", "art", "design", "inspiration", "idea", "innovation",
        "artistic", "imagination",
    ),
})

__all__ = ["STOPWORDS", "CATEGORY_TABLE"]
