"""Shared text processing utilities.

Consolidates the normalization and tokenization used by the scorers, plus the
helper that renders a hashtag list as a single line of text.
"""

import re
from typing import Iterable, List, Optional

from .models import Hashtag

# ASCII word characters and whitespace survive; everything else becomes a space.
_NON_WORD_RE = re.compile(r"[^A-Za-z0-9_\s]")


def normalize_text(text: Optional[str]) -> str:
    """Lower-case text and replace punctuation with spaces.

    Only ASCII letters, digits and underscores are treated as word characters,
    so accented letters split a word the same way punctuation does.

    Args:
        text: Raw input text (``None`` is treated as empty)

    Returns:
        Lower-cased text with every non-word, non-space character replaced by a space

    Examples:
        >>> normalize_text("Hello, World!")
        'hello  world '
        >>> normalize_text("AI-powered")
        'ai powered'
    """
    if not text:
        return ""
    return _NON_WORD_RE.sub(" ", text.lower())


def tokenize(text: Optional[str]) -> List[str]:
    """Split normalized text on whitespace runs.

    Examples:
        >>> tokenize("We're building the future!")
        ['we', 're', 'building', 'the', 'future']
    """
    return normalize_text(text).split()


def is_blank(text: Optional[str]) -> bool:
    """Return True when *text* is None, empty or whitespace-only."""
    return not (text or "").strip()


def format_hashtags(hashtags: Iterable[Hashtag]) -> str:
    """Join tags with single spaces, ready to paste into a post.

    Examples:
        >>> format_hashtags([Hashtag("#tech", 0.7), Hashtag("#ai", 0.7)])
        '#tech #ai'
    """
    return " ".join(h.tag for h in hashtags)


__all__ = ["normalize_text", "tokenize", "is_blank", "format_hashtags"]
