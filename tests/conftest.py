"""Global pytest fixtures and configuration."""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from host_recovery.models.boot_progress import ProgressStage  # noqa: E402
from host_recovery.models.result import CallResult  # noqa: E402


@pytest.fixture
def mock_bus():
    """Mock DbusClient: BootProgress reads OSStart, Create succeeds."""
    bus = MagicMock()
    bus.get_property = AsyncMock(
        return_value=CallResult.ok(ProgressStage.OS_START.value)
    )
    bus.call_method = AsyncMock(return_value=CallResult.ok([]))
    return bus


@pytest.fixture
def marker_template(tmp_path):
    """Chassis-on marker template inside a temp directory."""
    return str(tmp_path / "chassis@{}-on")


@pytest.fixture
def marker_file(marker_template):
    """Marker file for instance 0, created (present)."""
    path = Path(marker_template.format(0))
    path.touch()
    return path
