"""Tests for runtime data directory resolution helpers."""

from __future__ import annotations

import os
import sys
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest import mock

# Ensure the repository's src/ directory is importable without installation.
REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from hashtag_generator.core.paths import get_data_dir, resolve_data_dir  # noqa: E402


class DataDirEnvironmentOverrideTests(unittest.TestCase):
    """Verify that HASHTAG_GENERATOR_DATA_DIR overrides the runtime data dir."""

    def test_get_data_dir_honors_environment_override(self) -> None:
        """get_data_dir should return the directory specified by the env var."""
        with TemporaryDirectory() as tmp:
            override = Path(tmp) / "custom-location"
            with mock.patch.dict(os.environ, {"HASHTAG_GENERATOR_DATA_DIR": str(override)}, clear=False):
                data_dir = get_data_dir()
        self.assertEqual(data_dir, override.resolve())

    def test_resolve_data_dir_creates_environment_override_directory(self) -> None:
        """resolve_data_dir should create the directory specified by the env var on request."""
        with TemporaryDirectory() as tmp:
            override = Path(tmp) / "nested" / "override"
            with mock.patch.dict(os.environ, {"HASHTAG_GENERATOR_DATA_DIR": str(override)}, clear=False):
                data_dir = resolve_data_dir(ensure_exists=True)
                self.assertTrue(override.exists(), "override directory was not created")
        self.assertEqual(data_dir, override.resolve())

    def test_resolve_data_dir_creates_subdirectory(self) -> None:
        with TemporaryDirectory() as tmp:
            with mock.patch.dict(os.environ, {"HASHTAG_GENERATOR_DATA_DIR": tmp}, clear=False):
                models = resolve_data_dir("models", ensure_exists=True)
                self.assertTrue(models.is_dir())
        self.assertEqual(models, Path(tmp).resolve() / "models")

    def test_resolve_data_dir_does_not_create_by_default(self) -> None:
        with TemporaryDirectory() as tmp:
            override = Path(tmp) / "untouched"
            with mock.patch.dict(os.environ, {"HASHTAG_GENERATOR_DATA_DIR": str(override)}, clear=False):
                resolve_data_dir("models")
            self.assertFalse(override.exists())


if __name__ == "__main__":
    unittest.main()
