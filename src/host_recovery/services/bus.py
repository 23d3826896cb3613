"""System bus client returning CallResult values instead of raising."""

import logging
from typing import Any, Optional

from dbus_fast import BusType, Message, MessageType, Variant
from dbus_fast.aio import MessageBus
from dbus_fast.errors import DBusError

from host_recovery.models.dbus import PROPERTIES_INTERFACE, DbusTarget
from host_recovery.models.result import CallErrorKind, CallResult


_UNREACHABLE_ERRORS = {
    "org.freedesktop.DBus.Error.ServiceUnknown",
    "org.freedesktop.DBus.Error.NameHasNoOwner",
    "org.freedesktop.DBus.Error.Disconnected",
}
_NOT_FOUND_ERRORS = {
    "org.freedesktop.DBus.Error.UnknownObject",
    "org.freedesktop.DBus.Error.UnknownInterface",
    "org.freedesktop.DBus.Error.UnknownProperty",
    "org.freedesktop.DBus.Error.UnknownMethod",
    "org.freedesktop.DBus.Error.InvalidArgs",
}
_TIMEOUT_ERRORS = {
    "org.freedesktop.DBus.Error.NoReply",
    "org.freedesktop.DBus.Error.Timeout",
    "org.freedesktop.DBus.Error.TimedOut",
}


def classify_error_name(name: Optional[str]) -> CallErrorKind:
    """Map a D-Bus error name onto a CallErrorKind."""
    if name in _UNREACHABLE_ERRORS:
        return CallErrorKind.UNREACHABLE
    if name in _NOT_FOUND_ERRORS:
        return CallErrorKind.NOT_FOUND
    if name in _TIMEOUT_ERRORS:
        return CallErrorKind.TIMEOUT
    return CallErrorKind.FAILED


class DbusClient:
    """Single connection to the system bus shared by all remote calls.

    Open once with connect() (or ``async with DbusClient() as bus``) and
    close with disconnect(). Calls never raise for remote failures; they
    return a CallResult carrying a RemoteCallError instead.
    """

    def __init__(
        self,
        bus_type: BusType = BusType.SYSTEM,
        bus: Optional[MessageBus] = None,
    ):
        """Initialize D-Bus client.

        Args:
            bus_type: Bus to connect to (default: system bus)
            bus: Already connected MessageBus to reuse (skips connect())
        """
        self.logger = logging.getLogger("host_recovery.bus")
        self.bus_type = bus_type
        self._bus = bus

    @property
    def connected(self) -> bool:
        return self._bus is not None

    async def connect(self) -> "DbusClient":
        """Open the bus connection.

        Raises:
            OSError: If the bus socket cannot be reached
            dbus_fast.errors.AuthError: If authentication with the bus fails
        """
        if self._bus is None:
            self.logger.debug(f"Connecting to {self.bus_type.name.lower()} bus")
            self._bus = await MessageBus(bus_type=self.bus_type).connect()
        return self

    def disconnect(self) -> None:
        if self._bus is not None:
            self._bus.disconnect()
            self._bus = None
            self.logger.debug("Disconnected from bus")

    async def __aenter__(self) -> "DbusClient":
        return await self.connect()

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.disconnect()

    async def get_property(self, target: DbusTarget, name: str) -> CallResult:
        """Read a property via org.freedesktop.DBus.Properties.Get.

        Args:
            target: Object and interface owning the property
            name: Property name

        Returns:
            CallResult with the unwrapped variant value on success
        """
        result = await self._call(
            service=target.service,
            path=target.path,
            interface=PROPERTIES_INTERFACE,
            member="Get",
            signature="ss",
            body=[target.interface, name],
        )
        if not result.is_ok:
            return result

        body = result.value
        if not body:
            return CallResult.fail(
                CallErrorKind.FAILED, f"Empty reply reading property {name}"
            )
        value = body[0]
        if isinstance(value, Variant):
            value = value.value
        return CallResult.ok(value)

    async def call_method(
        self,
        target: DbusTarget,
        member: str,
        signature: str = "",
        body: Optional[list[Any]] = None,
    ) -> CallResult:
        """Invoke a method on the target interface.

        Returns:
            CallResult with the reply body (list of out-arguments) on success
        """
        return await self._call(
            service=target.service,
            path=target.path,
            interface=target.interface,
            member=member,
            signature=signature,
            body=body or [],
        )

    async def _call(
        self,
        service: str,
        path: str,
        interface: str,
        member: str,
        signature: str,
        body: list[Any],
    ) -> CallResult:
        if self._bus is None:
            return CallResult.fail(
                CallErrorKind.UNREACHABLE, "Not connected to the bus"
            )

        self.logger.debug(f"Calling {service} {path} {interface}.{member}")
        message = Message(
            destination=service,
            path=path,
            interface=interface,
            member=member,
            signature=signature,
            body=body,
        )

        try:
            reply = await self._bus.call(message)
        except DBusError as e:
            return CallResult.fail(classify_error_name(e.type), e.text, name=e.type)
        except (OSError, EOFError) as e:
            return CallResult.fail(
                CallErrorKind.UNREACHABLE, f"Bus connection lost: {e}"
            )

        if reply is None:
            return CallResult.fail(
                CallErrorKind.TIMEOUT, f"No reply to {interface}.{member}"
            )

        if reply.message_type == MessageType.ERROR:
            detail = reply.body[0] if reply.body else reply.error_name
            return CallResult.fail(
                classify_error_name(reply.error_name),
                str(detail),
                name=reply.error_name,
            )

        return CallResult.ok(list(reply.body))
