"""Translate adapter errors into user-facing UseCaseError instances."""

from __future__ import annotations

from typing import Optional

from aidex.adapters.api_errors import (
    ApiClientError,
    ApiError,
    ApiServerError,
    ApiTimeoutError,
    extract_error_hint,
)
from aidex.domain.ports import UseCaseError


def map_api_error(
    exc: Exception,
    *,
    default_code: str,
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map adapter exceptions to stable UseCaseError codes.

    Args:
        exc: Exception raised by a port call.
        default_code: Code used when ``exc`` is not an adapter error.
        default_message: Message used when ``exc`` carries no text.

    Returns:
        UseCaseError: Mapped error; ``exc`` itself when already a UseCaseError.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, ApiTimeoutError):
        return UseCaseError("REQUEST_TIMEOUT", "Request timed out. Check connection.")
    if isinstance(exc, ApiClientError):
        status = exc.status or 0
        if status in (401, 403):
            return UseCaseError("AUTH_FAILED", "Auth failed / API key invalid.")
        hint = exc.hint or extract_error_hint(exc.payload)
        label = f"Request failed (HTTP {status})" if status else "Request failed"
        return UseCaseError("REQUEST_FAILED", _compose_error_message(label, hint))
    if isinstance(exc, ApiServerError):
        return UseCaseError("SERVER_ERROR", "Directory service error, try again.")
    if isinstance(exc, ApiError):
        return UseCaseError("API_ERROR", str(exc))

    message = default_message or str(exc) or "Unexpected error."
    return UseCaseError(default_code, message)


def _compose_error_message(base: str, hint: Optional[str]) -> str:
    hint_text = (hint or "").strip()
    if hint_text:
        return f"{base}: {hint_text}"
    if base.endswith("."):
        return base
    return f"{base}."


__all__ = ["map_api_error"]
