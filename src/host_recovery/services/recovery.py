"""Single-shot recovery check: readiness gate, classifier, reporter."""

import logging
from enum import Enum

from host_recovery.services.classifier import BootStateClassifier
from host_recovery.services.incident_reporter import IncidentReporter
from host_recovery.services.readiness import ChassisReadinessGate


logger = logging.getLogger("host_recovery.recovery")


class RecoveryOutcome(str, Enum):
    """Terminal result of one recovery check."""

    HOST_IDLE = "host_idle"
    INCIDENT_REPORTED = "incident_reported"


async def run_recovery_check(
    gate: ChassisReadinessGate,
    classifier: BootStateClassifier,
    reporter: IncidentReporter,
) -> RecoveryOutcome:
    """Run the check once, in strict order.

    The boot progress read only happens after the gate opens, and the
    incident is only reported when the host was booting. Failures from
    either remote call propagate unchanged.

    Returns:
        RecoveryOutcome describing which branch was taken
    """
    await gate.wait_for_chassis_ready()

    if not await classifier.was_host_booting():
        return RecoveryOutcome.HOST_IDLE

    # Host was booting before the BMC reboot so log an error.
    # TODO: start the host quiesce target once obmc-host-quiesce@.target
    # is wired up for this service.
    await reporter.report_host_not_running()
    logger.info("Reported host not running after BMC reboot")
    return RecoveryOutcome.INCIDENT_REPORTED
