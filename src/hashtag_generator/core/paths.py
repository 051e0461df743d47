"""Utilities for locating the runtime data directory."""

from __future__ import annotations

import os
from pathlib import Path

_ENV_VAR = "HASHTAG_GENERATOR_DATA_DIR"
_DEFAULT_DIRNAME = ".hashtag_generator"
_REPO_ROOT = Path(__file__).resolve().parents[3]


def get_data_dir() -> Path:
    """Return the configured runtime data directory.

    Honors the HASHTAG_GENERATOR_DATA_DIR environment variable; otherwise
    defaults to ~/.hashtag_generator on the current platform.  A relative
    override is resolved against the repository root.
    """
    override = os.getenv(_ENV_VAR)
    if override is not None:
        cleaned = override.strip()
        if not cleaned:
            return (_REPO_ROOT / _DEFAULT_DIRNAME).resolve()
        candidate = Path(cleaned).expanduser()
        if not candidate.is_absolute():
            candidate = _REPO_ROOT / candidate
        return candidate.resolve()
    return (Path.home() / _DEFAULT_DIRNAME).resolve()


def resolve_data_dir(*relative: str, ensure_exists: bool = False) -> Path:
    """Resolve a directory inside the runtime data directory, creating it on request."""
    directory = get_data_dir().joinpath(*relative)
    if ensure_exists:
        directory.mkdir(parents=True, exist_ok=True)
    return directory


__all__ = [
    "get_data_dir",
    "resolve_data_dir",
]
