"""Incident reporting to the BMC error journal."""

import logging
from typing import Optional

from host_recovery.exceptions import IncidentReportError
from host_recovery.models.dbus import LOGGING_CREATE_TARGET, DbusTarget
from host_recovery.models.incident import IncidentRecord
from host_recovery.services.bus import DbusClient


class IncidentReporter:
    """Creates the HostNotRunning error entry via the logging service."""

    CREATE_METHOD = "Create"
    CREATE_SIGNATURE = "ssa{ss}"

    def __init__(self, bus: DbusClient, target: DbusTarget = LOGGING_CREATE_TARGET):
        """Initialize incident reporter.

        Args:
            bus: Connected D-Bus client
            target: Logging service object and Create interface
        """
        self.logger = logging.getLogger("host_recovery.reporter")
        self.bus = bus
        self.target = target

    async def report_host_not_running(self, pid: Optional[int] = None) -> IncidentRecord:
        """Log an error saying the host was booting when the BMC restarted.

        Args:
            pid: Process id recorded in the entry metadata (default: own pid)

        Returns:
            The submitted IncidentRecord

        Raises:
            IncidentReportError: If the Create call failed
            Exception: Any other failure is logged and re-raised unchanged
        """
        try:
            record = IncidentRecord.host_not_running(pid)
            result = await self.bus.call_method(
                self.target,
                self.CREATE_METHOD,
                self.CREATE_SIGNATURE,
                record.as_dbus_args(),
            )
        except Exception as e:
            self.logger.error(f"D-Bus call exception: {e}", exc_info=True)
            raise

        if not result.is_ok:
            self.logger.error(
                f"D-Bus call to {self.CREATE_METHOD} failed: "
                f"objpath={self.target.path}, interface={self.target.interface}, "
                f"exception={result.error}"
            )
            raise IncidentReportError(
                "Error in invoking D-Bus logging create interface",
                error=result.error,
            )

        self.logger.info(
            f"Created error log entry: message={record.message}, "
            f"severity={record.severity.value}"
        )
        return record
