"""Request and response plumbing shared by the inference API clients."""

from typing import Any

import httpx

from ragchat.errors import ResponseDecodeError, UpstreamError


def inference_headers(token: str) -> dict:
    return {
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
        "x-wait-for-model": "true",
    }


async def read_body(resp: httpx.Response) -> str:
    try:
        await resp.aread()
        return resp.text
    except httpx.HTTPError:
        return ""


async def ensure_success(resp: httpx.Response, api_name: str):
    if resp.is_success:
        return
    body = await read_body(resp)
    raise UpstreamError(
        f"{api_name} error: {resp.status_code} {body}",
        status=resp.status_code,
        body=body,
    )


def decode_json(resp: httpx.Response, api_name: str) -> Any:
    try:
        return resp.json()
    except ValueError as e:
        raise ResponseDecodeError(f"{api_name} returned invalid JSON: {e}") from e
