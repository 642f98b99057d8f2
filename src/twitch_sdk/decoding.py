"""
Turning raw Helix responses into typed models.

Any mismatch between the upstream JSON and the expected model surfaces as a
DecodeError carrying the endpoint and a snippet of the body, never as a bare
pydantic or json exception.
"""

import json as jsonlib
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ValidationError

from twitch_sdk.exceptions import DecodeError
from twitch_sdk.transport.base import UnifiedResponse

M = TypeVar("M", bound=BaseModel)

SNIPPET_LENGTH = 200


async def decode_response(response: UnifiedResponse, model: type[M], endpoint: str) -> M:
    try:
        payload = await response.json()
    except DecodeError as err:
        raise DecodeError(
            f"{endpoint}: {err}", endpoint=endpoint, body_snippet=err.body_snippet
        ) from err
    try:
        return model.model_validate(payload)
    except ValidationError as err:
        raise DecodeError(
            f"{endpoint}: response does not match {model.__name__} "
            f"({err.error_count()} error(s))",
            endpoint=endpoint,
            body_snippet=response.text[:SNIPPET_LENGTH],
            details=err.errors(include_url=False),
        ) from err


def error_message(response: UnifiedResponse) -> str:
    """
    Human-readable message from a Helix or OAuth error body.

    Both use {"error": ..., "status": ..., "message": ...}; anything else
    falls back to the start of the raw body.
    """
    try:
        body = jsonlib.loads(response.text)
    except ValueError:
        return response.text[:SNIPPET_LENGTH]
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text[:SNIPPET_LENGTH]
