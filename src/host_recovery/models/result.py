"""Result type for remote D-Bus calls."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from host_recovery.exceptions import RemoteCallFailed


class CallErrorKind(str, Enum):
    """Why a remote call failed."""

    UNREACHABLE = "unreachable"
    NOT_FOUND = "not_found"
    TIMEOUT = "timeout"
    FAILED = "failed"


class RemoteCallError(BaseModel):
    """Structured failure of a remote call."""

    model_config = ConfigDict(frozen=True)

    kind: CallErrorKind
    detail: str = Field(..., description="Human-readable failure message")
    name: Optional[str] = Field(
        None, description="D-Bus error name, if the peer replied with one"
    )

    def __str__(self) -> str:
        if self.name:
            return f"{self.name}: {self.detail}"
        return self.detail


class CallResult(BaseModel):
    """Either the decoded reply value or a RemoteCallError.

    Usage:
        result = await bus.get_property(target, "BootProgress")
        if not result.is_ok:
            ...  # inspect result.error
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Any = None
    error: Optional[RemoteCallError] = None

    @model_validator(mode="after")
    def value_or_error(self) -> "CallResult":
        if self.error is not None and self.value is not None:
            raise ValueError("CallResult cannot carry both a value and an error")
        return self

    @classmethod
    def ok(cls, value: Any = None) -> "CallResult":
        return cls(value=value)

    @classmethod
    def fail(
        cls, kind: CallErrorKind, detail: str, name: Optional[str] = None
    ) -> "CallResult":
        return cls(error=RemoteCallError(kind=kind, detail=detail, name=name))

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the value, or raise RemoteCallFailed carrying the error."""
        if self.error is not None:
            raise RemoteCallFailed(str(self.error), error=self.error)
        return self.value
