"""Configuration management for the YAML config file."""

import copy
import logging
import math
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .paths import get_data_dir

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = get_data_dir() / "config"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.yaml"

DEFAULT_SETTINGS: Dict[str, Dict[str, Any]] = {
    "frequency": {
        "top_n": 12,
        "min_token_length": 4,
        "max_confidence": 0.9,
    },
    "categories": {
        "top_n": 8,
        "keyword_confidence": 0.7,
        "keywords_per_category": 2,
    },
    "output": {
        "limit": 15,
    },
    "embedding": {
        "enabled": False,
        "model": "all-MiniLM-L6-v2",
        "vendor": False,
        "wait_seconds": 0,
    },
}

_DEFAULT_CONFIG_TEMPLATE = """# Auto-generated default configuration for hashtag-generator
frequency:
  top_n: 12
  min_token_length: 4
  max_confidence: 0.9

categories:
  top_n: 8
  keyword_confidence: 0.7
  keywords_per_category: 2

output:
  limit: 15

# Best-effort embedding probe. Its result never changes the hashtags.
embedding:
  enabled: false
  model: "all-MiniLM-L6-v2"
  vendor: false
  wait_seconds: 0
"""

# (section, key) -> (expected kind, minimum, maximum)
_NUMERIC_RULES = {
    ("frequency", "top_n"): ("int", 0, None),
    ("frequency", "min_token_length"): ("int", 1, None),
    ("frequency", "max_confidence"): ("number", 0.0, 1.0),
    ("categories", "top_n"): ("int", 0, None),
    ("categories", "keyword_confidence"): ("number", 0.0, 1.0),
    ("categories", "keywords_per_category"): ("int", 0, None),
    ("output", "limit"): ("int", 0, None),
    ("embedding", "wait_seconds"): ("number", 0.0, 600.0),
}


def _write_template(path: Path, content: str) -> None:
    """Write templated YAML content to disk with a trailing newline."""
    path.write_text(content.strip() + "\n", encoding="utf-8")


def _is_kind(value: Any, kind: str) -> bool:
    if isinstance(value, bool):
        return False
    if kind == "int":
        return isinstance(value, int)
    return isinstance(value, (int, float)) and math.isfinite(value)


class ConfigManager:
    """Manages loading and validation of the YAML configuration file."""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize the manager and ensure a config file exists."""
        path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        if not path.is_absolute():
            path = path.resolve()
        self.config_path = str(path)
        self.base_dir = str(path.parent)
        self._config = None
        self._ensure_default_config()

    def load_config(self) -> Dict[str, Any]:
        """Load the main configuration file."""
        if self._config is None:
            try:
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    self._config = yaml.safe_load(f) or {}
                logger.info(f"Loaded configuration from {self.config_path}")
            except Exception as e:
                logger.error(f"Failed to load config from {self.config_path}: {e}")
                raise

        return self._config

    def _ensure_default_config(self) -> None:
        """Create the default configuration file if it is missing."""
        config_file = Path(self.config_path)
        if config_file.exists():
            return
        config_file.parent.mkdir(parents=True, exist_ok=True)
        _write_template(config_file, _DEFAULT_CONFIG_TEMPLATE)
        logger.info("Created default config.yaml at %s", config_file)

    def get_pipeline_settings(self) -> Dict[str, Dict[str, Any]]:
        """Return the effective settings: file values layered over the defaults."""
        config = self.load_config()
        settings = copy.deepcopy(DEFAULT_SETTINGS)
        if not isinstance(config, dict):
            return settings
        for section, defaults in settings.items():
            overrides = config.get(section) or {}
            if isinstance(overrides, dict):
                defaults.update({k: v for k, v in overrides.items() if k in defaults})
        return settings

    def validate_config(self) -> bool:
        """Validate the configuration file."""
        try:
            config = self.load_config()
            if not isinstance(config, dict):
                logger.error("Config root must be a mapping")
                return False

            for section in DEFAULT_SETTINGS:
                section_cfg = config.get(section)
                if section_cfg is not None and not isinstance(section_cfg, dict):
                    logger.error(f"Section '{section}' must be a mapping")
                    return False
                for key in (section_cfg or {}):
                    if key not in DEFAULT_SETTINGS[section]:
                        logger.warning(f"Unknown key '{section}.{key}' in config will be ignored")

            for (section, key), (kind, low, high) in _NUMERIC_RULES.items():
                value = (config.get(section) or {}).get(key)
                if value is None:
                    continue
                if not _is_kind(value, kind):
                    logger.error(f"'{section}.{key}' must be {'an integer' if kind == 'int' else 'a finite number'}")
                    return False
                if value < low or (high is not None and value > high):
                    bound = f">= {low}" if high is None else f"between {low} and {high}"
                    logger.error(f"'{section}.{key}' must be {bound}, got {value}")
                    return False

            embedding_cfg = config.get("embedding") or {}
            for flag in ("enabled", "vendor"):
                if flag in embedding_cfg and not isinstance(embedding_cfg[flag], bool):
                    logger.error(f"'embedding.{flag}' must be true or false")
                    return False
            model = embedding_cfg.get("model")
            if model is not None and (not isinstance(model, str) or not model.strip()):
                logger.error("'embedding.model' must be a non-empty string")
                return False

            logger.info("Configuration validation passed")
            return True

        except Exception as e:
            logger.error(f"Configuration validation failed: {e}")
            return False


__all__ = [
    "ConfigManager",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_CONFIG_DIR",
    "DEFAULT_SETTINGS",
]
