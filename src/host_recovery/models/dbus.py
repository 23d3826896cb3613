"""D-Bus addressing for the remote services this checker talks to."""

from pydantic import BaseModel, ConfigDict, Field


class DbusTarget(BaseModel):
    """Service, object path and interface of a remote D-Bus object."""

    model_config = ConfigDict(frozen=True)

    service: str = Field(
        ...,
        pattern=r"^[A-Za-z_][\w-]*(\.[A-Za-z_][\w-]*)+$",
        description="Well-known bus name (e.g., 'xyz.openbmc_project.Logging')",
    )
    path: str = Field(
        ..., pattern=r"^/([\w]+(/[\w]+)*)?$", description="Absolute object path"
    )
    interface: str = Field(
        ...,
        pattern=r"^[A-Za-z_]\w*(\.[A-Za-z_]\w*)+$",
        description="Interface name",
    )

    def __str__(self) -> str:
        return f"{self.service}:{self.path} ({self.interface})"


PROPERTIES_INTERFACE = "org.freedesktop.DBus.Properties"
BOOT_PROGRESS_PROPERTY = "BootProgress"


def host_state_target(instance: int = 0) -> DbusTarget:
    """Boot progress interface of the host state object for an instance."""
    return DbusTarget(
        service="xyz.openbmc_project.State.Host",
        path=f"/xyz/openbmc_project/state/host{instance}",
        interface="xyz.openbmc_project.State.Boot.Progress",
    )


HOST_STATE_TARGET = host_state_target(0)

LOGGING_CREATE_TARGET = DbusTarget(
    service="xyz.openbmc_project.Logging",
    path="/xyz/openbmc_project/logging",
    interface="xyz.openbmc_project.Logging.Create",
)
