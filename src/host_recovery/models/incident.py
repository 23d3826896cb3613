"""Incident record submitted to the BMC error journal."""

import os
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


HOST_NOT_RUNNING = "xyz.openbmc_project.State.Error.HostNotRunning"


class Severity(str, Enum):
    """xyz.openbmc_project.Logging.Entry.Level values, in message form."""

    EMERGENCY = "xyz.openbmc_project.Logging.Entry.Level.Emergency"
    ALERT = "xyz.openbmc_project.Logging.Entry.Level.Alert"
    CRITICAL = "xyz.openbmc_project.Logging.Entry.Level.Critical"
    ERROR = "xyz.openbmc_project.Logging.Entry.Level.Error"
    WARNING = "xyz.openbmc_project.Logging.Entry.Level.Warning"
    NOTICE = "xyz.openbmc_project.Logging.Entry.Level.Notice"
    INFORMATIONAL = "xyz.openbmc_project.Logging.Entry.Level.Informational"
    DEBUG = "xyz.openbmc_project.Logging.Entry.Level.Debug"


class IncidentRecord(BaseModel):
    """Structured error passed to xyz.openbmc_project.Logging.Create.

    Built once per report and never mutated.
    """

    model_config = ConfigDict(frozen=True)

    message: str = Field(
        default=HOST_NOT_RUNNING, min_length=1, description="Error kind identifier"
    )
    severity: Severity = Field(default=Severity.ERROR, description="Entry level")
    additional_data: dict[str, str] = Field(
        ..., description="Auxiliary key/value metadata (must not be empty)"
    )

    @field_validator("additional_data")
    @classmethod
    def not_empty(cls, v: dict[str, str]) -> dict[str, str]:
        """The Create interface requires at least one metadata entry."""
        if not v:
            raise ValueError("additional_data must contain at least one entry")
        return v

    @classmethod
    def host_not_running(cls, pid: Optional[int] = None) -> "IncidentRecord":
        """Build the 'host not running after BMC restart' record.

        Args:
            pid: Reporting process id (defaults to the current process)

        Returns:
            IncidentRecord with _PID metadata
        """
        if pid is None:
            pid = os.getpid()
        return cls(additional_data={"_PID": str(pid)})

    def as_dbus_args(self) -> list:
        """Arguments for Create, matching signature 'ssa{ss}'."""
        return [self.message, self.severity.value, dict(self.additional_data)]
