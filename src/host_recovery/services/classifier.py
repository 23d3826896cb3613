"""Boot-state classifier: was the host booting when the BMC restarted?"""

import logging

from host_recovery.exceptions import BootProgressReadError
from host_recovery.models.boot_progress import is_boot_in_progress
from host_recovery.models.dbus import (
    BOOT_PROGRESS_PROPERTY,
    HOST_STATE_TARGET,
    DbusTarget,
)
from host_recovery.models.result import CallErrorKind, RemoteCallError
from host_recovery.services.bus import DbusClient


class BootStateClassifier:
    """Reads the last recorded BootProgress stage and classifies it."""

    def __init__(
        self,
        bus: DbusClient,
        target: DbusTarget = HOST_STATE_TARGET,
        property_name: str = BOOT_PROGRESS_PROPERTY,
    ):
        """Initialize boot-state classifier.

        Args:
            bus: Connected D-Bus client
            target: Host state object and boot progress interface
            property_name: Property holding the boot progress stage
        """
        self.logger = logging.getLogger("host_recovery.classifier")
        self.bus = bus
        self.target = target
        self.property_name = property_name

    async def was_host_booting(self) -> bool:
        """Check the last BootProgress to see if the host was booting.

        Returns:
            False if BootProgress is Unspecified, True for any other stage

        Raises:
            BootProgressReadError: If the property could not be read. The
                failure is never mapped to either outcome.
        """
        result = await self.bus.get_property(self.target, self.property_name)

        error = result.error
        if error is None and not isinstance(result.value, str):
            error = RemoteCallError(
                kind=CallErrorKind.FAILED,
                detail=f"Unexpected {self.property_name} value: {result.value!r}",
            )

        if error is not None:
            self.logger.error(
                f"Error reading {self.property_name}: error={error}, "
                f"service={self.target.service}, path={self.target.path}"
            )
            raise BootProgressReadError(
                f"Failed to read {self.property_name} from "
                f"{self.target.service} {self.target.path}: {error}",
                error=error,
            )

        stage = result.value
        if not is_boot_in_progress(stage):
            self.logger.info("Host was not booting before BMC reboot")
            return False

        self.logger.info(f"Host was booting before BMC reboot: bootprogress={stage}")
        return True
