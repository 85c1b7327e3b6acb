"""
Connector provisioning endpoint.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends

from auth import dependencies as auth_dependencies
from core.errors import ValidationError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/query/provision")
async def provision(
    body: dict[str, Any] = Depends(auth_dependencies.require_secret_key),
) -> dict:
    """
    Echo the platform's installation id back as the instance id.
    """
    context = body.get("requestContext") or {}
    installation_id = context.get("installationId") if isinstance(context, dict) else None
    if not installation_id:
        raise ValidationError("installationId is required.")

    logger.info("provisioned installation_id=%s", installation_id)
    return {
        "status": "success",
        "instanceId": installation_id,
        "message": "Provisioning complete.",
    }
