"""Best-effort embedding probe.

Loads a FastEmbed text-embedding model (falling back to
``sentence_transformers``) and embeds the input text once.  The embedding is
discarded: hashtags always come from the keyword scorers, and a probe that
fails to load or run only produces a log line.

The probe runs on a daemon thread so callers never wait on model downloads or
inference unless they explicitly choose to via :meth:`ProbeHandle.wait`.
"""

from __future__ import annotations

# Set before any heavy imports to silence HF tokenizers warning.
import os as _os
_os.environ.setdefault("TOKENIZERS_PARALLELISM", "false")

import logging
import threading
from typing import Any, Optional

import numpy as np

from ..core.model_manager import ensure_local_model

logger = logging.getLogger(__name__)


_MODEL_ALIASES = {
    # Xenova publishes an ONNX export of these weights; FastEmbed ships the same
    # weights under the sentence-transformers name.
    "all-MiniLM-L6-v2": "sentence-transformers/all-MiniLM-L6-v2",
    "Xenova/all-MiniLM-L6-v2": "sentence-transformers/all-MiniLM-L6-v2",
}


def _load_text_embedding(model_name: str):
    """Return a FastEmbed ``TextEmbedding`` instance for the given model."""
    from fastembed import TextEmbedding  # type: ignore

    return TextEmbedding(model_name=model_name)


class _SentenceTransformerAdapter:
    """Thin wrapper that mimics the ``TextEmbedding`` interface."""

    def __init__(self, model_name: str) -> None:
        from sentence_transformers import SentenceTransformer  # type: ignore

        self._model = SentenceTransformer(model_name)

    def embed(self, documents, **_kwargs):
        docs = [documents] if isinstance(documents, str) else list(documents)
        if not docs:
            return []
        vectors = self._model.encode(docs, convert_to_numpy=True, show_progress_bar=False)
        if isinstance(vectors, np.ndarray) and vectors.ndim == 1:
            return [np.asarray(vectors, dtype=np.float32)]
        return [np.asarray(vec, dtype=np.float32) for vec in vectors]


def _load_sentence_transformer(model_name: str):
    """Return a SentenceTransformer-backed adapter."""

    return _SentenceTransformerAdapter(model_name)


class ProbeHandle:
    """Observer for one background probe run.

    Only status is exposed; the embedding itself is never kept.
    """

    def __init__(self) -> None:
        self._cancel = threading.Event()
        self._done = threading.Event()
        self.succeeded = False
        self.error: Optional[BaseException] = None
        self.backend: Optional[str] = None
        self._thread: Optional[threading.Thread] = None

    def cancel(self) -> None:
        """Ask the probe to stop before its next step (load or inference)."""
        self._cancel.set()

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    def done(self) -> bool:
        return self._done.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block up to *timeout* seconds; return True if the probe finished."""
        return self._done.wait(timeout)


class EmbeddingProbe:
    def __init__(self, model_name: str = "all-MiniLM-L6-v2", *, vendor: bool = False) -> None:
        # ``model_name`` is the configured value; ``_resolved_name`` is what
        # FastEmbed is asked to load.  Both are logged on failure.
        self.model_name = model_name
        self._resolved_name = _MODEL_ALIASES.get(model_name, model_name)
        self.vendor = vendor
        self._model: Optional[Any] = None
        self.backend: Optional[str] = None

    def load(self) -> bool:
        """Load the embedding backend once, logging a warning on failure."""
        if self._model is not None:
            return True

        try:
            self._model = _load_text_embedding(self._resolved_name)
            self.backend = "fastembed"
        except Exception as e:  # pragma: no cover - optional dependency
            logger.warning(
                "FastEmbed unavailable or model load failed for '%s' (%s). Attempting SentenceTransformer fallback.",
                self._resolved_name,
                e,
            )
            st_name = self.model_name
            try:
                # Vendored copies only serve the sentence-transformers backend.
                if self.vendor:
                    st_name = ensure_local_model(self.model_name)
                self._model = _load_sentence_transformer(st_name)
                self.backend = "sentence-transformers"
                logger.info("Using SentenceTransformer fallback for model '%s'", st_name)
            except Exception as fallback_err:  # pragma: no cover - optional dependency
                logger.warning(
                    "SentenceTransformer fallback unavailable (%s). Embedding probe disabled.",
                    fallback_err,
                )
        return self.available()

    def available(self) -> bool:
        """Return True when the embedding model loaded successfully."""
        return self._model is not None

    def embed(self, text: str) -> np.ndarray:
        """Embed *text* and return the vector; raises when no backend is loaded."""
        if not self.available():
            raise RuntimeError(f"No embedding backend available for '{self.model_name}'")
        vectors = list(self._model.embed([(text or "").strip()]))
        if not vectors:
            raise RuntimeError("Embedding backend returned no vectors")
        return np.asarray(vectors[0], dtype=np.float32)

    def _run(self, text: str, handle: ProbeHandle) -> None:
        try:
            if handle.cancelled:
                return
            self.load()
            if handle.cancelled:
                return
            vector = self.embed(text)
            handle.backend = self.backend
            handle.succeeded = True
            logger.debug("Embedding probe finished via %s (%d dims)", self.backend, vector.shape[-1])
        except Exception as exc:
            handle.error = exc
            logger.warning("Embedding probe failed, using keyword analysis only: %s", exc)
        finally:
            handle._done.set()

    def launch(self, text: str) -> ProbeHandle:
        """Start one probe attempt on a daemon thread and return its handle."""
        handle = ProbeHandle()
        thread = threading.Thread(
            target=self._run,
            args=(text, handle),
            name="embedding-probe",
            daemon=True,
        )
        handle._thread = thread
        thread.start()
        return handle


__all__ = ["EmbeddingProbe", "ProbeHandle"]
