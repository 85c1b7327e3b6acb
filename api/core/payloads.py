"""
Request-body parsing helpers.

Bodies are read once by the access gate, so handlers validate the already
parsed dict against a pydantic model here instead of letting FastAPI bind it.
"""

from __future__ import annotations

from typing import Any, TypeVar

import pydantic
from pydantic import BaseModel

from .errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def _first_error_message(exc: pydantic.ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request body."
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = str(first.get("msg") or "invalid value")
    return f"{location}: {message}" if location else message


def parse_body(model: type[ModelT], body: dict[str, Any]) -> ModelT:
    try:
        return model.model_validate(body)
    except pydantic.ValidationError as exc:
        raise ValidationError(_first_error_message(exc)) from exc
