"""Keyword/category hashtag matching.

Each category in the table is checked against the lower-cased input using plain
substring containment, so short keywords also match inside longer words
("ai" is found in "aiming").  A matched category yields a category tag scored
by the fraction of its keywords present, plus fixed-confidence tags for the
first few matched keywords.
"""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional, Sequence

from ..core.models import Hashtag
from ..core.vocabulary import CATEGORY_TABLE

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 8
KEYWORD_CONFIDENCE = 0.7
DEFAULT_KEYWORDS_PER_CATEGORY = 2


class CategoryScorer:
    def __init__(
        self,
        *,
        top_n: int = DEFAULT_TOP_N,
        keyword_confidence: float = KEYWORD_CONFIDENCE,
        keywords_per_category: int = DEFAULT_KEYWORDS_PER_CATEGORY,
        categories: Optional[Mapping[str, Sequence[str]]] = None,
    ) -> None:
        self.top_n = top_n
        self.keyword_confidence = keyword_confidence
        self.keywords_per_category = keywords_per_category
        self.categories = CATEGORY_TABLE if categories is None else categories

    def match_keywords(self, text: str, category: str) -> List[str]:
        """Return the keywords of *category* contained in *text*, in list order."""
        lowered = (text or "").lower()
        return [kw for kw in self.categories[category] if kw in lowered]

    def score(self, text: str) -> List[Hashtag]:
        """Return up to ``top_n`` category and keyword hashtags for *text*."""
        if not text:
            return []

        emitted: List[Hashtag] = []
        for category, keywords in self.categories.items():
            if not keywords:
                continue
            matches = self.match_keywords(text, category)
            if not matches:
                continue
            emitted.append(Hashtag(tag=f"#{category}", confidence=len(matches) / len(keywords)))
            for keyword in matches[: self.keywords_per_category]:
                emitted.append(Hashtag(tag=f"#{keyword}", confidence=self.keyword_confidence))
            logger.debug("Category '%s' matched %s", category, matches)

        # Stable sort: equal confidences keep table order.
        emitted.sort(key=lambda h: h.confidence, reverse=True)
        return emitted[: self.top_n]


__all__ = ["CategoryScorer", "DEFAULT_TOP_N", "KEYWORD_CONFIDENCE", "DEFAULT_KEYWORDS_PER_CATEGORY"]
