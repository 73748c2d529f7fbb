"""Environment-driven settings for the chat service."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_EMBEDDINGS_MODEL = "sentence-transformers/all-MiniLM-L6-v2"  # 384 dims
DEFAULT_TEXT_MODEL = "google/flan-t5-base"  # text2text-generation
DEFAULT_API_BASE = "https://api-inference.huggingface.co"
DEFAULT_TOP_K = 4


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    hf_token: Optional[str]
    embeddings_model: str = DEFAULT_EMBEDDINGS_MODEL
    text_model: str = DEFAULT_TEXT_MODEL
    api_base: str = DEFAULT_API_BASE
    timeout_seconds: Optional[float] = None
    corpus_path: Optional[str] = None
    top_k: int = DEFAULT_TOP_K
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        # HF_TOKEN is only checked per request so the service can boot without it
        return cls(
            hf_token=os.getenv("HF_TOKEN") or None,
            embeddings_model=os.getenv("HF_EMBEDDINGS_MODEL") or DEFAULT_EMBEDDINGS_MODEL,
            text_model=os.getenv("HF_TEXT_MODEL") or DEFAULT_TEXT_MODEL,
            api_base=(os.getenv("HF_API_BASE") or DEFAULT_API_BASE).rstrip("/"),
            timeout_seconds=_optional_float("HF_TIMEOUT_SECONDS"),
            corpus_path=os.getenv("RAG_CORPUS_PATH") or None,
            top_k=_positive_int("RAG_TOP_K", DEFAULT_TOP_K),
            log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        )
