from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

from .commands import generate as generate_cmd
from .core.config import ConfigManager, DEFAULT_CONFIG_PATH
from .core.models import Hashtag
from .core.text_utils import format_hashtags

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = str(DEFAULT_CONFIG_PATH)

__all__ = [
    'Hashtag',
    'generate',
    'format_hashtags',
    'status',
]


def generate(
    text: str,
    *,
    limit: Optional[int] = None,
    probe: Optional[bool] = None,
    config_path: Optional[str] = None,
) -> List[Hashtag]:
    """Propose hashtags for *text* programmatically.

    Args:
        text: Free-form input text.
        limit: Maximum number of hashtags; defaults to ``output.limit`` (15).
        probe: Force the embedding probe on/off; None follows the config.
        config_path: Path to main YAML config; defaults to the data dir config.
    """
    cfg_path = config_path or _DEFAULT_CONFIG
    return generate_cmd.run(cfg_path, text, limit=limit, probe=probe)


def status(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Return configuration status for programmatic use."""
    cfg_path = config_path or _DEFAULT_CONFIG
    info: Dict[str, Any] = {'config_path': cfg_path}
    if not os.path.exists(cfg_path):
        info.update({'valid': False, 'error': f'Config file not found: {cfg_path}'})
        return info
    try:
        cm = ConfigManager(cfg_path)
        valid = cm.validate_config()
        info.update({
            'valid': bool(valid),
            'settings': cm.get_pipeline_settings() if valid else {},
        })
        return info
    except Exception as e:
        info.update({'valid': False, 'error': str(e)})
        return info
