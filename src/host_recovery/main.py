"""Entry point for the host reset recovery check.

Runs once per BMC restart: waits for chassis power on to complete, checks
whether the host was booting when the BMC went down, and creates a
HostNotRunning error entry if it was.
"""

import asyncio
import logging
import sys

from host_recovery.services.bus import DbusClient
from host_recovery.services.classifier import BootStateClassifier
from host_recovery.services.incident_reporter import IncidentReporter
from host_recovery.services.readiness import ChassisReadinessGate
from host_recovery.services.recovery import RecoveryOutcome, run_recovery_check
from host_recovery.utils.logging import setup_logger


LOG_FILE = "/var/log/host-recovery/host-recovery.log"


async def run() -> RecoveryOutcome:
    """Open the bus once and run the recovery check with default addressing."""
    async with DbusClient() as bus:
        return await run_recovery_check(
            gate=ChassisReadinessGate(),
            classifier=BootStateClassifier(bus),
            reporter=IncidentReporter(bus),
        )


def main() -> int:
    """Main entry point.

    Returns:
        0 whether or not an incident was reported. Remote call failures
        propagate so the process exits nonzero.
    """
    logger = setup_logger("host_recovery", LOG_FILE, level=logging.INFO)
    logger.info("Host reset recovery check starting...")

    outcome = asyncio.run(run())

    logger.info(f"Host reset recovery check finished: {outcome.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
