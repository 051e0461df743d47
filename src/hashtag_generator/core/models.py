"""Data models shared by the scorers and the merge stage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Hashtag:
    """A ``#``-prefixed tag paired with a heuristic confidence in [0, 1]."""

    tag: str
    confidence: float

    @property
    def key(self) -> str:
        """Case-insensitive identity used when deduplicating tags."""
        return self.tag.lower()

    def to_dict(self) -> Dict[str, Any]:
        return {"tag": self.tag, "confidence": self.confidence}


__all__ = ["Hashtag"]
