"""Unit tests for incident, addressing and result models."""

import os

import pytest
from pydantic import ValidationError

from host_recovery.exceptions import RemoteCallFailed
from host_recovery.models.dbus import (
    HOST_STATE_TARGET,
    LOGGING_CREATE_TARGET,
    DbusTarget,
    host_state_target,
)
from host_recovery.models.incident import HOST_NOT_RUNNING, IncidentRecord, Severity
from host_recovery.models.result import CallErrorKind, CallResult, RemoteCallError


@pytest.mark.unit
class TestIncidentRecord:
    """Test IncidentRecord construction."""

    def test_host_not_running_defaults(self):
        # Act
        record = IncidentRecord.host_not_running()

        # Assert
        assert record.message == HOST_NOT_RUNNING
        assert record.severity == Severity.ERROR
        assert record.additional_data == {"_PID": str(os.getpid())}

    def test_pid_is_string(self):
        record = IncidentRecord.host_not_running(pid=4242)

        assert record.additional_data["_PID"] == "4242"
        assert isinstance(record.additional_data["_PID"], str)

    def test_as_dbus_args(self):
        record = IncidentRecord.host_not_running(pid=7)

        assert record.as_dbus_args() == [
            "xyz.openbmc_project.State.Error.HostNotRunning",
            "xyz.openbmc_project.Logging.Entry.Level.Error",
            {"_PID": "7"},
        ]

    def test_record_is_frozen(self):
        record = IncidentRecord.host_not_running(pid=7)

        with pytest.raises(ValidationError):
            record.message = "other"

    def test_empty_additional_data_rejected(self):
        with pytest.raises(ValidationError):
            IncidentRecord(additional_data={})


@pytest.mark.unit
class TestDbusTarget:
    """Test D-Bus addressing constants and validation."""

    def test_host_state_target(self):
        assert HOST_STATE_TARGET.service == "xyz.openbmc_project.State.Host"
        assert HOST_STATE_TARGET.path == "/xyz/openbmc_project/state/host0"
        assert HOST_STATE_TARGET.interface == "xyz.openbmc_project.State.Boot.Progress"

    def test_host_state_target_instance(self):
        assert host_state_target(1).path == "/xyz/openbmc_project/state/host1"

    def test_logging_create_target(self):
        assert LOGGING_CREATE_TARGET.service == "xyz.openbmc_project.Logging"
        assert LOGGING_CREATE_TARGET.path == "/xyz/openbmc_project/logging"
        assert LOGGING_CREATE_TARGET.interface == "xyz.openbmc_project.Logging.Create"

    def test_relative_path_rejected(self):
        with pytest.raises(ValidationError):
            DbusTarget(service="a.b", path="relative/path", interface="a.b")

    def test_undotted_interface_rejected(self):
        with pytest.raises(ValidationError):
            DbusTarget(service="a.b", path="/a", interface="nodots")


@pytest.mark.unit
class TestCallResult:
    """Test CallResult value/error handling."""

    def test_ok_unwrap(self):
        result = CallResult.ok("value")

        assert result.is_ok
        assert result.unwrap() == "value"

    def test_fail_unwrap_raises(self):
        result = CallResult.fail(
            CallErrorKind.UNREACHABLE,
            "The name is not activatable",
            name="org.freedesktop.DBus.Error.ServiceUnknown",
        )

        assert not result.is_ok
        with pytest.raises(RemoteCallFailed, match="ServiceUnknown") as exc_info:
            result.unwrap()
        assert exc_info.value.error.kind == CallErrorKind.UNREACHABLE

    def test_value_and_error_rejected(self):
        with pytest.raises(ValidationError):
            CallResult(
                value="x",
                error=RemoteCallError(kind=CallErrorKind.FAILED, detail="boom"),
            )

    def test_error_str_without_name(self):
        error = RemoteCallError(kind=CallErrorKind.FAILED, detail="boom")

        assert str(error) == "boom"
