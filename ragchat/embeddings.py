"""Remote feature-extraction client returning flat float32 vectors."""

import asyncio
from typing import Any, List, Sequence

import httpx
import numpy as np

from ragchat.errors import ResponseDecodeError
from ragchat.inference import decode_json, ensure_success, inference_headers
from ragchat.logging_config import log_latency

API_NAME = "Embeddings API"


def decode_embedding(payload: Any) -> np.ndarray:
    """Normalize a feature-extraction payload to a 1-D vector.

    Accepted shapes, tried in order:

    1. nested ``[[0.1, 0.2, ...]]`` -> the first inner list
    2. flat ``[0.1, 0.2, ...]`` -> the list itself

    Anything else raises :class:`ResponseDecodeError`.
    """
    if not isinstance(payload, list) or not payload:
        raise ResponseDecodeError(
            f"{API_NAME} returned an unexpected payload: {type(payload).__name__}"
        )

    values = payload[0] if isinstance(payload[0], list) else payload
    if not values or not all(
        isinstance(v, (int, float)) and not isinstance(v, bool) for v in values
    ):
        raise ResponseDecodeError(f"{API_NAME} returned a non-numeric vector")

    return np.asarray(values, dtype=np.float32)


class HFEmbeddingClient:
    def __init__(
        self,
        http: httpx.AsyncClient,
        *,
        token: str,
        model: str,
        api_base: str,
    ):
        self.http = http
        self.token = token
        self.model = model
        self.url = f"{api_base}/pipeline/feature-extraction/{model}"

    @log_latency("embeddings.embed")
    async def embed(self, text: str) -> np.ndarray:
        resp = await self.http.post(
            self.url,
            headers=inference_headers(self.token),
            json={"inputs": text},
        )
        await ensure_success(resp, API_NAME)
        return decode_embedding(decode_json(resp, API_NAME))

    async def embed_many(self, texts: Sequence[str]) -> List[np.ndarray]:
        return list(await asyncio.gather(*(self.embed(t) for t in texts)))
