"""
Tagged results passed between the validator, the store and the service.

Failures are returned, never raised, so every caller decides explicitly what
to do with them.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ResultKind(str, Enum):
    SUCCESS = "success"
    MISSING_PARAMETER = "missing_parameter"
    UNEXPECTED_PARAMETER = "unexpected_parameter"
    MISSING_FIELD = "missing_field"
    STORAGE_FAILURE = "storage_failure"


CLIENT_INPUT_FAILURES = frozenset(
    {
        ResultKind.MISSING_PARAMETER,
        ResultKind.UNEXPECTED_PARAMETER,
        ResultKind.MISSING_FIELD,
    }
)


@dataclass(frozen=True)
class Result:
    """
    Outcome of a validation or storage step.

    ``value`` carries the payload on success (coerced parameter, row list or
    None for writes). ``error`` carries a human-readable message for client
    input failures and the raw storage detail for storage failures.
    """

    kind: ResultKind
    value: Any = None
    error: Any = None

    @property
    def ok(self) -> bool:
        return self.kind is ResultKind.SUCCESS

    @property
    def is_client_input_failure(self) -> bool:
        return self.kind in CLIENT_INPUT_FAILURES

    @property
    def is_storage_failure(self) -> bool:
        return self.kind is ResultKind.STORAGE_FAILURE

    @classmethod
    def success(cls, value: Any = None) -> "Result":
        return cls(kind=ResultKind.SUCCESS, value=value)

    @classmethod
    def failure(cls, kind: ResultKind, error: Any) -> "Result":
        if kind is ResultKind.SUCCESS:
            raise ValueError("failure() needs a failure kind")
        return cls(kind=kind, error=error)
