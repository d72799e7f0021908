"""
Presence and well-formedness checks for request input.

Every check is pure: it reads the supplied mapping and returns a Result,
so a rejected request never reaches storage.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from restaurant_api.services.results import Result, ResultKind

# Identifiers must fit a signed 64-bit integer column
MIN_IDENTIFIER = -(2**63)
MAX_IDENTIFIER = 2**63 - 1


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def _coerce_identifier(value: Any) -> Optional[int]:
    """Return value as an int identifier, or None if it cannot be one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        identifier = value
    elif isinstance(value, str):
        try:
            identifier = int(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not MIN_IDENTIFIER <= identifier <= MAX_IDENTIFIER:
        return None
    return identifier


def require_identifier(
    params: Mapping[str, Any],
    key: str,
    message: Optional[str] = None,
) -> Result:
    """
    Require ``params[key]`` to be present and coercible to an integer ID.

    On success the result value is the coerced identifier.
    """
    raw = params.get(key)
    identifier = None if _is_blank(raw) else _coerce_identifier(raw)
    if identifier is None:
        return Result.failure(
            ResultKind.MISSING_PARAMETER,
            message or f"{key} parameter is required and must be an integer",
        )
    return Result.success(identifier)


def require_no_parameters(
    params: Mapping[str, Any],
    message: Optional[str] = None,
) -> Result:
    """Reject any non-empty parameter set."""
    if params:
        return Result.failure(
            ResultKind.UNEXPECTED_PARAMETER,
            message or f"unexpected parameters: {', '.join(sorted(params))}",
        )
    return Result.success()


def require_field(
    body: Mapping[str, Any],
    key: str,
    message: Optional[str] = None,
) -> Result:
    """Require ``body[key]`` to be a present, non-empty string."""
    value = body.get(key)
    if _is_blank(value) or not isinstance(value, str):
        return Result.failure(
            ResultKind.MISSING_FIELD,
            message or f"{key} field is required",
        )
    return Result.success(value)
