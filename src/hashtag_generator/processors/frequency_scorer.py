"""Word-frequency hashtag extraction.

Tokenizes the input, drops short tokens and stop-words, and turns the most
frequent remaining words into hashtags.  Confidence is twice the token's share
of the surviving tokens, capped at ``max_confidence``.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import AbstractSet, List, Optional

from ..core.models import Hashtag
from ..core.text_utils import tokenize
from ..core.vocabulary import STOPWORDS

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 12
DEFAULT_MIN_TOKEN_LENGTH = 4
DEFAULT_MAX_CONFIDENCE = 0.9


class FrequencyScorer:
    def __init__(
        self,
        *,
        top_n: int = DEFAULT_TOP_N,
        min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH,
        max_confidence: float = DEFAULT_MAX_CONFIDENCE,
        stopwords: Optional[AbstractSet[str]] = None,
    ) -> None:
        self.top_n = top_n
        self.min_token_length = min_token_length
        self.max_confidence = max_confidence
        self.stopwords = STOPWORDS if stopwords is None else stopwords

    def filter_tokens(self, text: str) -> List[str]:
        """Return the tokens that count towards frequency, in text order."""
        return [
            tok for tok in tokenize(text)
            if len(tok) >= self.min_token_length and tok not in self.stopwords
        ]

    def score(self, text: str) -> List[Hashtag]:
        """Return up to ``top_n`` hashtags for the most frequent words in *text*.

        Args:
            text: Free-form input text; empty input yields an empty list

        Returns:
            Hashtags ordered by descending count; equal counts keep the order in
            which the words first appeared
        """
        tokens = self.filter_tokens(text)
        total = len(tokens)
        if total == 0:
            return []

        # Counter preserves first-encounter order and sorted() is stable, so
        # ties resolve to whichever word appeared first.
        counts = Counter(tokens)
        ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)

        hashtags = [
            Hashtag(tag=f"#{word}", confidence=min(count / total * 2, self.max_confidence))
            for word, count in ranked[: self.top_n]
        ]
        logger.debug("Frequency scorer: %d tokens, %d distinct, %d tags", total, len(counts), len(hashtags))
        return hashtags


__all__ = ["FrequencyScorer", "DEFAULT_TOP_N", "DEFAULT_MIN_TOKEN_LENGTH", "DEFAULT_MAX_CONFIDENCE"]
