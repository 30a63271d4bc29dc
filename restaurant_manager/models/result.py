# models/result.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple


class ResultKind(str, Enum):
    OK = "ok"
    INVALID = "invalid"          # validation failure
    CONFLICT = "conflict"        # duplicate name
    NOT_FOUND = "not_found"
    PARTIAL = "partial"          # some fields applied, some rejected
    STORAGE = "storage"          # store write failed


@dataclass(frozen=True)
class Result:
    """
    Outcome of a construction or mutation.

    Truthy only on full success. ``message`` is the user-facing text;
    ``value`` carries the created entity for ``create`` calls; ``errors``
    collects individual field errors of a partial update.
    """
    kind: ResultKind
    message: Optional[str] = None
    value: Any = None
    errors: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.kind is ResultKind.OK

    @property
    def error(self) -> Optional[str]:
        return None if self.ok else self.message

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, message: Optional[str] = None, value: Any = None) -> "Result":
        return cls(ResultKind.OK, message, value)

    @classmethod
    def invalid(cls, message: str) -> "Result":
        return cls(ResultKind.INVALID, message)

    @classmethod
    def conflict(cls, message: str) -> "Result":
        return cls(ResultKind.CONFLICT, message)

    @classmethod
    def not_found(cls, message: str) -> "Result":
        return cls(ResultKind.NOT_FOUND, message)

    @classmethod
    def partial(cls, message: str, errors) -> "Result":
        return cls(ResultKind.PARTIAL, message, errors=tuple(errors))

    @classmethod
    def storage_error(cls, message: str) -> "Result":
        return cls(ResultKind.STORAGE, message)
