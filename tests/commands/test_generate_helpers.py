import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[2]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from hashtag_generator.commands import generate  # noqa: E402
from hashtag_generator.core import model_manager  # noqa: E402
from hashtag_generator.core.config import DEFAULT_SETTINGS  # noqa: E402
from hashtag_generator.core.models import Hashtag  # noqa: E402
from hashtag_generator.core.text_utils import format_hashtags, is_blank, normalize_text, tokenize  # noqa: E402
from hashtag_generator.processors.embedding_probe import ProbeHandle  # noqa: E402


def test_has_model_files_detects_config(tmp_path):
    model_dir = tmp_path / "model"
    model_dir.mkdir()
    (model_dir / "config.json").write_text("{}", encoding="utf-8")
    assert model_manager.has_model_files(str(model_dir)) is True


def test_has_model_files_returns_false_for_empty_dir(tmp_path):
    empty_dir = tmp_path / "empty"
    empty_dir.mkdir()
    assert model_manager.has_model_files(str(empty_dir)) is False


def test_ensure_local_model_returns_existing_path(tmp_path):
    model_dir = tmp_path / "vendored"
    model_dir.mkdir()
    (model_dir / "modules.json").write_text("[]", encoding="utf-8")
    assert model_manager.ensure_local_model(str(model_dir)) == str(model_dir)


@pytest.mark.parametrize(
    "spec,repo,folder",
    [
        ("all-MiniLM-L6-v2", "sentence-transformers/all-MiniLM-L6-v2", "all-MiniLM-L6-v2"),
        ("Xenova/all-MiniLM-L6-v2", "Xenova/all-MiniLM-L6-v2", "all-MiniLM-L6-v2"),
        ("paraphrase-MiniLM-L3-v2", "sentence-transformers/paraphrase-MiniLM-L3-v2", "paraphrase-MiniLM-L3-v2"),
    ],
)
def test_target_for_model_specs(tmp_path, spec, repo, folder):
    repo_id, target = model_manager._target_for(spec, tmp_path)
    assert repo_id == repo
    assert target == tmp_path / folder


def test_normalize_text_replaces_punctuation():
    assert normalize_text("AI-powered, Clean_Tech!") == "ai powered  clean_tech "
    assert normalize_text(None) == ""


def test_tokenize_treats_accents_as_separators():
    assert tokenize("Café déjà-vu") == ["caf", "d", "j", "vu"]


def test_is_blank():
    assert is_blank(None)
    assert is_blank(" \t\n")
    assert not is_blank(" x ")


def test_format_hashtags_joins_with_spaces():
    tags = [Hashtag("#tech", 0.7), Hashtag("#ai", 0.7)]
    assert format_hashtags(tags) == "#tech #ai"
    assert format_hashtags([]) == ""


def test_build_scorers_uses_settings():
    settings = {
        "frequency": {"top_n": 2, "min_token_length": 5, "max_confidence": 0.5},
        "categories": {"top_n": 3, "keyword_confidence": 0.6, "keywords_per_category": 1},
    }
    frequency, category = generate.build_scorers(settings)
    assert (frequency.top_n, frequency.min_token_length, frequency.max_confidence) == (2, 5, 0.5)
    assert (category.top_n, category.keyword_confidence, category.keywords_per_category) == (3, 0.6, 1)


def test_generate_hashtags_defaults_match_settings():
    text = "technology technology technology innovation"
    assert generate.generate_hashtags(text) == generate.generate_hashtags(text, DEFAULT_SETTINGS)
    assert generate.generate_hashtags("   ") == []


def test_summary_message_variants():
    tags = [Hashtag("#tech", 0.7)]
    assert generate.summary_message(tags, None) == "Generated 1 hashtags using keyword analysis"

    handle = ProbeHandle()
    handle.succeeded = True
    assert "keyword analysis" in generate.summary_message(tags, handle)
    handle._done.set()
    assert generate.summary_message(tags, handle) == "Generated 1 hashtags (embedding probe succeeded)"
