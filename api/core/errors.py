"""
Error taxonomy shared by every endpoint.

`main.py` turns any `ConnectorError` into `{"error": message}` with the
class's status code.
"""

from __future__ import annotations

from fastapi import status


class ConnectorError(RuntimeError):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthorizationError(ConnectorError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Unauthorized access."


class ValidationError(ConnectorError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request."


class NotFoundError(ConnectorError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found."


class InternalError(ConnectorError):
    # Callers only ever see the default message; details go to the log.
    def __init__(self, detail: str | None = None) -> None:
        super().__init__(None)
        self.detail = detail
