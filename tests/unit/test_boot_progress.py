"""Unit tests for boot progress classification."""

import pytest

from host_recovery.models.boot_progress import ProgressStage, is_boot_in_progress


@pytest.mark.unit
class TestIsBootInProgress:
    """Test is_boot_in_progress classification."""

    def test_unspecified_is_not_booting(self):
        assert is_boot_in_progress(ProgressStage.UNSPECIFIED.value) is False

    @pytest.mark.parametrize(
        "stage", [s for s in ProgressStage if s is not ProgressStage.UNSPECIFIED]
    )
    def test_every_other_known_stage_is_booting(self, stage):
        assert is_boot_in_progress(stage.value) is True

    def test_os_running_counts_as_booting(self):
        """A finished boot is still reported, the policy is coarse."""
        assert is_boot_in_progress(ProgressStage.OS_RUNNING.value) is True

    @pytest.mark.parametrize(
        "stage",
        [
            "xyz.openbmc_project.State.Boot.Progress.ProgressStages.FutureStage",
            "Unspecified",
            "",
        ],
    )
    def test_unknown_values_are_booting(self, stage):
        """Only the fully-qualified sentinel maps to not booting."""
        assert is_boot_in_progress(stage) is True
