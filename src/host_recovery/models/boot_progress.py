"""Boot progress stages published by the host state service."""

from enum import Enum


class ProgressStage(str, Enum):
    """Known xyz.openbmc_project.State.Boot.Progress stages.

    Only UNSPECIFIED carries meaning here: it is the value the host state
    service reports when no boot activity was recorded. The service may
    publish stages not listed below, so classification works on the raw
    property string rather than on this enum.
    """

    UNSPECIFIED = "xyz.openbmc_project.State.Boot.Progress.ProgressStages.Unspecified"
    PRIMARY_PROC_INIT = "xyz.openbmc_project.State.Boot.Progress.ProgressStages.PrimaryProcInit"
    BUS_INIT = "xyz.openbmc_project.State.Boot.Progress.ProgressStages.BusInit"
    MEMORY_INIT = "xyz.openbmc_project.State.Boot.Progress.ProgressStages.MemoryInit"
    SECONDARY_PROC_INIT = "xyz.openbmc_project.State.Boot.Progress.ProgressStages.SecondaryProcInit"
    PCI_INIT = "xyz.openbmc_project.State.Boot.Progress.ProgressStages.PCIInit"
    SYSTEM_SETUP = "xyz.openbmc_project.State.Boot.Progress.ProgressStages.SystemSetup"
    SYSTEM_INIT_COMPLETE = "xyz.openbmc_project.State.Boot.Progress.ProgressStages.SystemInitComplete"
    OS_START = "xyz.openbmc_project.State.Boot.Progress.ProgressStages.OSStart"
    OS_RUNNING = "xyz.openbmc_project.State.Boot.Progress.ProgressStages.OSRunning"
    MOTHERBOARD_INIT = "xyz.openbmc_project.State.Boot.Progress.ProgressStages.MotherboardInit"


def is_boot_in_progress(stage: str) -> bool:
    """Classify a BootProgress value.

    Args:
        stage: Fully-qualified stage string as read from D-Bus

    Returns:
        False only for the Unspecified sentinel, True for every other value
        (including OSRunning and stages unknown to ProgressStage)
    """
    return stage != ProgressStage.UNSPECIFIED.value
