# adapters/online/_http.py
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable

import httpx

from core.exceptions import ParseError, TransportError

logger = logging.getLogger(__name__)


async def get_json(
    client: httpx.AsyncClient,
    url: str,
    params: Dict[str, Any],
    provider: str,
    passthrough_codes: Iterable[str] = (),
) -> Any:
    """GET and decode JSON, mapping failures onto TransportError / ParseError."""
    try:
        resp = await client.get(url, params=params)
    except httpx.TimeoutException as e:
        raise TransportError(f"{provider} timed out: {e}") from e
    except httpx.HTTPError as e:
        raise TransportError(f"{provider} unreachable: {e}") from e

    if resp.status_code >= 400:
        try:
            payload = resp.json()
        except ValueError:
            payload = resp.text
        if isinstance(payload, dict) and payload.get("code") in passthrough_codes:
            return payload
        logger.warning("%s answered %s: %s", provider, resp.status_code, payload)
        raise TransportError(f"{provider} error {resp.status_code}: {payload}")

    try:
        return resp.json()
    except ValueError as e:
        raise ParseError(f"{provider} returned a non-JSON body") from e
