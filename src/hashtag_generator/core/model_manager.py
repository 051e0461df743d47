"""
Local caching of the embedding model used by the probe.

Vendoring downloads the model once into the runtime data directory so later
probes can load it without network access.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from .paths import resolve_data_dir


logger = logging.getLogger(__name__)

DEFAULT_MODEL_ALIAS = "all-MiniLM-L6-v2"
DEFAULT_MODEL_REPO = "sentence-transformers/all-MiniLM-L6-v2"


def has_model_files(path: str) -> bool:
    """Heuristic check that a local model folder is usable.

    Args:
        path: Path to model directory

    Returns:
        True if the directory contains a model config file
    """
    p = Path(path)
    if not p.exists() or not p.is_dir():
        return False
    candidates = [p / "config.json", p / "modules.json"]
    return any(c.exists() for c in candidates)


def _target_for(model_spec: str, models_root: Path) -> tuple[str, Path]:
    """Return (repo_id, local_dir) for a model spec."""
    if model_spec == DEFAULT_MODEL_ALIAS:
        return DEFAULT_MODEL_REPO, models_root / DEFAULT_MODEL_ALIAS
    if "/" in model_spec:
        last = re.sub(r"[^A-Za-z0-9._\-]", "_", model_spec.rsplit("/", 1)[-1])
        return model_spec, models_root / last
    return f"sentence-transformers/{model_spec}", models_root / model_spec


def ensure_local_model(model_spec: str) -> str:
    """Vendor *model_spec* under ``<data_dir>/models`` and return the local path.

    - An existing local model directory is returned unchanged.
    - The default alias maps to ``sentence-transformers/all-MiniLM-L6-v2``.
    - ``org/name`` specs download into ``models/<name>``; bare names are
      assumed to live under ``sentence-transformers/``.
    - On any failure (e.g., no network) *model_spec* is returned unchanged and the
      probe resolves it on its own.
    """
    if Path(model_spec).exists() and has_model_files(model_spec):
        return model_spec

    models_root = resolve_data_dir("models", ensure_exists=True)
    repo_id, target_dir = _target_for(model_spec, models_root)

    if has_model_files(str(target_dir)):
        return str(target_dir)

    try:
        from huggingface_hub import snapshot_download  # type: ignore
        target_dir.mkdir(parents=True, exist_ok=True)
        snapshot_download(repo_id=repo_id, local_dir=str(target_dir))
        return str(target_dir)
    except Exception as e:  # pragma: no cover - network optional
        logger.warning("Model vendor failed for '%s' -> %s: %s", repo_id, target_dir, e)
        return model_spec


__all__ = ["has_model_files", "ensure_local_model", "DEFAULT_MODEL_ALIAS"]
