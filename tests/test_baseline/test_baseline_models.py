"""Tests for the Baseline data structure."""

from __future__ import annotations

import dataclasses

import pytest

from lintbaseline.baseline.models import Baseline, BaselineStatus
from lintbaseline.models.lint_error import LintError


@pytest.fixture
def lint_errors_per_file() -> dict[str, list[LintError]]:
    return {
        "src/Foo.kt": [
            LintError(line=1, col=1, rule_id="standard:a"),
            LintError(line=2, col=1, rule_id="standard:b"),
        ],
        "src/Bar.kt": [LintError(line=3, col=1, rule_id="custom:c")],
    }


class TestBaselineStatus:
    """Test BaselineStatus."""

    def test_only_valid_provides_suppressions(self):
        assert BaselineStatus.VALID.provides_suppressions is True
        for status in (BaselineStatus.DISABLED, BaselineStatus.NOT_FOUND, BaselineStatus.INVALID):
            assert status.provides_suppressions is False

    def test_every_status_has_suppression_rule(self):
        """Should define provides_suppressions for every member."""
        for status in BaselineStatus:
            assert isinstance(status.provides_suppressions, bool)


class TestBaseline:
    """Test Baseline."""

    def test_valid_baseline(self, lint_errors_per_file):
        baseline = Baseline(
            status=BaselineStatus.VALID,
            path="baseline.xml",
            lint_errors_per_file=lint_errors_per_file,
        )

        assert baseline.is_valid
        assert baseline.provides_suppressions
        assert baseline.error_count == 3
        assert len(baseline.lint_errors_for("src/Foo.kt")) == 2
        assert baseline.lint_errors_for("src/Unknown.kt") == ()

    def test_lint_errors_are_read_only(self, lint_errors_per_file):
        """Should not expose a mutable mapping."""
        baseline = Baseline(
            status=BaselineStatus.VALID,
            path="baseline.xml",
            lint_errors_per_file=lint_errors_per_file,
        )

        with pytest.raises(TypeError):
            baseline.lint_errors_per_file["src/New.kt"] = ()  # type: ignore[index]
        assert isinstance(baseline.lint_errors_per_file["src/Foo.kt"], tuple)

    def test_detached_from_input(self, lint_errors_per_file):
        """Should not change when the input mapping changes afterwards."""
        baseline = Baseline(
            status=BaselineStatus.VALID,
            path="baseline.xml",
            lint_errors_per_file=lint_errors_per_file,
        )

        lint_errors_per_file["src/New.kt"] = []
        lint_errors_per_file["src/Foo.kt"].clear()

        assert "src/New.kt" not in baseline.lint_errors_per_file
        assert baseline.error_count == 3

    def test_frozen(self):
        baseline = Baseline(status=BaselineStatus.NOT_FOUND, path="baseline.xml")

        with pytest.raises(dataclasses.FrozenInstanceError):
            baseline.status = BaselineStatus.VALID  # type: ignore[misc]

    @pytest.mark.parametrize("status", [BaselineStatus.NOT_FOUND, BaselineStatus.INVALID, BaselineStatus.DISABLED])
    def test_only_valid_may_have_errors(self, status, lint_errors_per_file):
        """Should reject lint errors on a non-valid baseline."""
        with pytest.raises(ValueError, match="can not contain lint errors"):
            Baseline(status=status, path="baseline.xml", lint_errors_per_file=lint_errors_per_file)

    @pytest.mark.parametrize("status", [BaselineStatus.VALID, BaselineStatus.NOT_FOUND, BaselineStatus.INVALID])
    def test_path_required(self, status):
        """Should require a path unless disabled."""
        with pytest.raises(ValueError, match="requires a path"):
            Baseline(status=status)

    def test_disabled(self):
        baseline = Baseline.disabled()

        assert baseline.status == BaselineStatus.DISABLED
        assert baseline.path is None
        assert dict(baseline.lint_errors_per_file) == {}
        assert baseline.diagnostics == ()
