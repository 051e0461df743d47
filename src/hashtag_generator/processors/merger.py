"""Combine scorer outputs into the final ranked hashtag list."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Set

from ..core.models import Hashtag

DEFAULT_LIMIT = 15


def dedupe(hashtags: Iterable[Hashtag]) -> List[Hashtag]:
    """Drop case-insensitive repeats of a tag, keeping the first occurrence."""
    seen: Set[str] = set()
    unique: List[Hashtag] = []
    for h in hashtags:
        if h.key in seen:
            continue
        seen.add(h.key)
        unique.append(h)
    return unique


def merge(a: Sequence[Hashtag], b: Sequence[Hashtag], limit: int = DEFAULT_LIMIT) -> List[Hashtag]:
    """Merge two hashtag lists.

    All of *a* precedes all of *b*, so when both produce the same tag the entry
    from *a* survives.  The deduplicated list is stable-sorted by descending
    confidence and truncated to *limit* entries.

    Args:
        a: Hashtags with precedence on duplicates (frequency scorer output)
        b: Hashtags appended after *a* (category scorer output)
        limit: Maximum number of hashtags to return; non-positive yields ``[]``

    Returns:
        Ranked, deduplicated hashtags
    """
    if limit <= 0:
        return []
    unique = dedupe(list(a) + list(b))
    unique.sort(key=lambda h: h.confidence, reverse=True)
    return unique[:limit]


__all__ = ["merge", "dedupe", "DEFAULT_LIMIT"]
