"""Exceptions raised when a remote call cannot be completed."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from host_recovery.models.result import RemoteCallError


class RemoteCallFailed(RuntimeError):
    """A D-Bus call failed and the failure is fatal for this run."""

    def __init__(self, message: str, error: Optional["RemoteCallError"] = None):
        super().__init__(message)
        self.error = error


class BootProgressReadError(RemoteCallFailed):
    """BootProgress could not be read from the host state service."""


class IncidentReportError(RemoteCallFailed):
    """The logging service rejected or never received the Create call."""
