"""Result wrapper for pipeline stages that talk to external services.

A stage never raises past its boundary; it reports what happened in `status`
and always carries a usable `value` (real result, empty, or fallback).
"""

from typing import Generic, Literal, Optional, TypeVar
from pydantic import BaseModel

T = TypeVar("T")

Status = Literal["ok", "empty", "failed"]


class StageResult(BaseModel, Generic[T]):
    status: Status
    value: T
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        return self.status == "failed"
