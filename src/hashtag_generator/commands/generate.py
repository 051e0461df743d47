"""
Generate command: propose hashtags for a block of text.

Pipeline
--------

- Frequency scorer and category scorer run independently on the raw text.
- Their outputs are merged (frequency first), deduplicated case-insensitively,
  sorted by confidence and truncated to ``output.limit``.

Notes
-----

- When ``embedding.enabled`` is set, an embedding probe is launched in the
  background before scoring.  It never changes the result; at most the caller
  waits ``embedding.wait_seconds`` for it so the summary can report whether it
  succeeded.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from ..core.config import ConfigManager, DEFAULT_SETTINGS
from ..core.models import Hashtag
from ..core.text_utils import is_blank
from ..processors.category_scorer import CategoryScorer
from ..processors.embedding_probe import EmbeddingProbe, ProbeHandle
from ..processors.frequency_scorer import FrequencyScorer
from ..processors.merger import merge

logger = logging.getLogger(__name__)


def build_scorers(settings: Optional[Dict[str, Dict[str, Any]]] = None) -> Tuple[FrequencyScorer, CategoryScorer]:
    """Instantiate both scorers from pipeline settings (defaults when omitted)."""
    settings = settings or DEFAULT_SETTINGS
    freq_cfg = settings.get("frequency") or {}
    cat_cfg = settings.get("categories") or {}
    freq_defaults = DEFAULT_SETTINGS["frequency"]
    cat_defaults = DEFAULT_SETTINGS["categories"]

    frequency = FrequencyScorer(
        top_n=int(freq_cfg.get("top_n", freq_defaults["top_n"])),
        min_token_length=int(freq_cfg.get("min_token_length", freq_defaults["min_token_length"])),
        max_confidence=float(freq_cfg.get("max_confidence", freq_defaults["max_confidence"])),
    )
    category = CategoryScorer(
        top_n=int(cat_cfg.get("top_n", cat_defaults["top_n"])),
        keyword_confidence=float(cat_cfg.get("keyword_confidence", cat_defaults["keyword_confidence"])),
        keywords_per_category=int(cat_cfg.get("keywords_per_category", cat_defaults["keywords_per_category"])),
    )
    return frequency, category


def generate_hashtags(
    text: str,
    settings: Optional[Dict[str, Dict[str, Any]]] = None,
    *,
    limit: Optional[int] = None,
) -> List[Hashtag]:
    """Run the pure scoring pipeline on *text*.

    Args:
        text: Free-form input text
        settings: Pipeline settings as returned by ``ConfigManager.get_pipeline_settings``
        limit: Optional override of ``output.limit``

    Returns:
        Ranked hashtags, at most ``limit`` long; ``[]`` for blank input
    """
    if is_blank(text):
        return []
    settings = settings or DEFAULT_SETTINGS
    if limit is None:
        limit = int((settings.get("output") or {}).get("limit", DEFAULT_SETTINGS["output"]["limit"]))

    frequency, category = build_scorers(settings)
    return merge(frequency.score(text), category.score(text), limit)


def start_probe(text: str, embedding_cfg: Dict[str, Any]) -> Optional[ProbeHandle]:
    """Launch the embedding probe; never raises."""
    try:
        probe = EmbeddingProbe(
            embedding_cfg.get("model") or DEFAULT_SETTINGS["embedding"]["model"],
            vendor=bool(embedding_cfg.get("vendor")),
        )
        return probe.launch(text)
    except Exception as e:
        logger.warning("Could not start embedding probe: %s", e)
        return None


def summary_message(hashtags: List[Hashtag], handle: Optional[ProbeHandle]) -> str:
    """Describe the result the way the generator reports it to users."""
    if handle is not None and handle.done() and handle.succeeded:
        return f"Generated {len(hashtags)} hashtags (embedding probe succeeded)"
    return f"Generated {len(hashtags)} hashtags using keyword analysis"


def run(
    config_path: Optional[str],
    text: str,
    *,
    limit: Optional[int] = None,
    probe: Optional[bool] = None,
) -> List[Hashtag]:
    """
    Generate hashtags for *text* using the configured pipeline.

    Args:
        config_path: Path to main config (default location when None)
        text: Input text
        limit: Optional override of ``output.limit``
        probe: Force the embedding probe on/off; None follows ``embedding.enabled``

    Returns:
        Ranked hashtags

    Raises:
        ValueError: If the configuration fails validation
    """
    cfg_mgr = ConfigManager(config_path)
    if not cfg_mgr.validate_config():
        raise ValueError(f"Invalid configuration at {cfg_mgr.config_path}")

    if is_blank(text):
        logger.warning("No text supplied; nothing to generate")
        return []

    settings = cfg_mgr.get_pipeline_settings()
    embedding_cfg = settings["embedding"]
    use_probe = embedding_cfg["enabled"] if probe is None else probe

    handle = start_probe(text, embedding_cfg) if use_probe else None

    hashtags = generate_hashtags(text, settings, limit=limit)

    if handle is not None:
        try:
            wait_seconds = float(embedding_cfg.get("wait_seconds") or 0)
            if wait_seconds > 0 and not handle.wait(wait_seconds):
                logger.info("Embedding probe still running after %.1fs; cancelling", wait_seconds)
                handle.cancel()
        except Exception as e:
            logger.warning("Waiting on embedding probe failed: %s", e)
            handle.cancel()

    logger.info(summary_message(hashtags, handle))
    return hashtags
