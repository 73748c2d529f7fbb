"""Remote text2text generation client."""

import json
from typing import Any

import httpx

from ragchat.inference import decode_json, ensure_success, inference_headers
from ragchat.logging_config import log_latency

MAX_NEW_TOKENS = 240
TEMPERATURE = 0.2
API_NAME = "Text gen API"


def decode_generation(payload: Any) -> str:
    """Extract the answer from a generation payload.

    Tried in order: ``[{"generated_text": ...}]``, ``{"generated_text": ...}``,
    a bare string, then the compact JSON of whatever came back.
    """
    text = None
    if isinstance(payload, list):
        if payload and isinstance(payload[0], dict):
            text = payload[0].get("generated_text")
    elif isinstance(payload, dict):
        text = payload.get("generated_text")

    if not text or not isinstance(text, str):
        if isinstance(payload, str):
            text = payload
        else:
            text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return text.strip()


class HFGenerationClient:
    def __init__(
        self,
        http: httpx.AsyncClient,
        *,
        token: str,
        model: str,
        api_base: str,
        max_new_tokens: int = MAX_NEW_TOKENS,
        temperature: float = TEMPERATURE,
    ):
        self.http = http
        self.token = token
        self.model = model
        self.url = f"{api_base}/models/{model}"
        self.max_new_tokens = max_new_tokens
        self.temperature = temperature

    @log_latency("generation.generate")
    async def generate(self, prompt: str) -> str:
        resp = await self.http.post(
            self.url,
            headers=inference_headers(self.token),
            json={
                "inputs": prompt,
                "parameters": {
                    "max_new_tokens": self.max_new_tokens,
                    "temperature": self.temperature,
                },
            },
        )
        await ensure_success(resp, API_NAME)
        return decode_generation(decode_json(resp, API_NAME))
