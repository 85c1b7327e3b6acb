"""
Shared-secret gate for every connector route.

The platform sends the secret inside the JSON body at
`requestContext.settings.secretKey`. The check runs before any body
validation, so a request without the right secret always gets 403.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import Depends, Request

from core.config import Settings
from core.deps import get_settings
from core.errors import AuthorizationError

logger = logging.getLogger(__name__)


async def read_json_body(request: Request) -> dict[str, Any]:
    """
    Parse the request body as a JSON object.

    Empty, malformed and non-object bodies all come back as `{}`.
    """
    raw = await request.body()
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except (ValueError, UnicodeDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def _extract_secret_key(body: dict[str, Any]) -> str | None:
    context = body.get("requestContext")
    if not isinstance(context, dict):
        return None
    settings = context.get("settings")
    if not isinstance(settings, dict):
        return None
    value = settings.get("secretKey")
    return value if isinstance(value, str) and value else None


async def require_secret_key(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    """
    Reject the request unless its secret matches the configured one.

    Returns the parsed body so handlers don't read it twice.
    """
    body = await read_json_body(request)
    provided = _extract_secret_key(body)
    # Plain equality: this is an integration key, not a user credential.
    if not settings.secret_key or provided is None or provided != settings.secret_key:
        logger.warning("unauthorized_request path=%s", request.url.path)
        raise AuthorizationError()
    return body
