import pytest

from ragchat.config import DEFAULT_API_BASE, DEFAULT_EMBEDDINGS_MODEL, DEFAULT_TEXT_MODEL, Settings

ENV_VARS = [
    "HF_TOKEN",
    "HF_EMBEDDINGS_MODEL",
    "HF_TEXT_MODEL",
    "HF_API_BASE",
    "HF_TIMEOUT_SECONDS",
    "RAG_CORPUS_PATH",
    "RAG_TOP_K",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings.from_env()

    assert settings.hf_token is None
    assert settings.embeddings_model == DEFAULT_EMBEDDINGS_MODEL
    assert settings.text_model == DEFAULT_TEXT_MODEL
    assert settings.api_base == DEFAULT_API_BASE
    assert settings.timeout_seconds is None
    assert settings.corpus_path is None
    assert settings.top_k == 4
    assert settings.log_level == "INFO"


def test_overrides(monkeypatch):
    monkeypatch.setenv("HF_TOKEN", "hf_abc")
    monkeypatch.setenv("HF_EMBEDDINGS_MODEL", "BAAI/bge-small-en-v1.5")
    monkeypatch.setenv("HF_TEXT_MODEL", "google/flan-t5-large")
    monkeypatch.setenv("HF_API_BASE", "https://router.example/")
    monkeypatch.setenv("HF_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("RAG_TOP_K", "2")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.hf_token == "hf_abc"
    assert settings.embeddings_model == "BAAI/bge-small-en-v1.5"
    assert settings.text_model == "google/flan-t5-large"
    assert settings.api_base == "https://router.example"
    assert settings.timeout_seconds == 12.5
    assert settings.top_k == 2
    assert settings.log_level == "DEBUG"


def test_empty_token_counts_as_missing(monkeypatch):
    monkeypatch.setenv("HF_TOKEN", "")
    assert Settings.from_env().hf_token is None


@pytest.mark.parametrize(
    "name, value",
    [("RAG_TOP_K", "zero"), ("RAG_TOP_K", "0"), ("HF_TIMEOUT_SECONDS", "-1"), ("HF_TIMEOUT_SECONDS", "soon")],
)
def test_invalid_numbers_fail_fast(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError, match=name):
        Settings.from_env()
