"""Readiness gate for chassis power-on orchestration."""

import asyncio
import logging
from pathlib import Path


# Created by obmc-chassis-poweron@.target and removed once the target has
# completed and the chassis state manager has processed it.
CHASSIS_ON_FILE = "/run/openbmc/chassis@{}-on"


class ChassisReadinessGate:
    """Blocks the recovery check until chassis power on has completed."""

    POLL_INTERVAL = 1.0  # seconds

    def __init__(
        self,
        marker_template: str = CHASSIS_ON_FILE,
        instance: int = 0,
        poll_interval: float = POLL_INTERVAL,
    ):
        """Initialize readiness gate.

        Args:
            marker_template: Marker path with a '{}' placeholder for the instance
            instance: Chassis instance index (default: 0)
            poll_interval: Seconds between marker checks (default: 1.0)
        """
        self.logger = logging.getLogger("host_recovery.readiness")
        self.marker_template = marker_template
        self.instance = instance
        self.poll_interval = poll_interval

    @property
    def marker_path(self) -> Path:
        return Path(self.marker_template.format(self.instance))

    def is_chassis_target_complete(self) -> bool:
        """Return True once the chassis-on marker file is gone."""
        return not self.marker_path.exists()

    async def wait_for_chassis_ready(self) -> None:
        """Wait until the chassis-on marker disappears.

        Chassis power is on if this service starts, but the power-on target
        must complete before another systemd target transition is started.
        There is no timeout: the wait ends when the target completes or when
        the service is stopped on chassis power off.
        """
        while not self.is_chassis_target_complete():
            self.logger.debug("Waiting for chassis on target to complete")
            await asyncio.sleep(self.poll_interval)

        self.logger.info(
            "Chassis power on has completed, checking if host is "
            "still running after the BMC reboot"
        )
