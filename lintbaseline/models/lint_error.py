"""
Lint error record shared by the linter, the baseline and the reporters.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class LintErrorStatus(Enum):
    """Origin of a lint error as seen by the reporting pipeline."""

    LINT_CAN_BE_AUTOCORRECTED = "lint_can_be_autocorrected"
    LINT_CAN_NOT_BE_AUTOCORRECTED = "lint_can_not_be_autocorrected"
    FORMAT_IS_AUTOCORRECTED = "format_is_autocorrected"
    BASELINE_IGNORED = "baseline_ignored"
    PARSE_EXCEPTION = "parse_exception"
    RULE_ENGINE_EXCEPTION = "rule_engine_exception"

    @classmethod
    def from_string(cls, value: str) -> "LintErrorStatus":
        """Create LintErrorStatus from string, case-insensitive."""
        return cls(value.lower())


@dataclass(frozen=True)
class LintError:
    """
    Single lint violation.

    Errors read from a baseline file have an empty ``detail`` because the
    baseline format does not store it. Use
    :func:`lintbaseline.baseline.matcher.is_same_lint_error` rather than
    ``==`` to compare a live error with a baseline entry.
    """

    line: int
    col: int
    rule_id: str
    detail: str = ""
    status: LintErrorStatus = LintErrorStatus.LINT_CAN_NOT_BE_AUTOCORRECTED

    @property
    def location(self) -> str:
        """Position in ``line:col`` form."""
        return f"{self.line}:{self.col}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "line": self.line,
            "col": self.col,
            "rule_id": self.rule_id,
            "detail": self.detail,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LintError":
        """Deserialize from dictionary."""
        return cls(
            line=int(data["line"]),
            col=int(data["col"]),
            rule_id=data["rule_id"],
            detail=data.get("detail", ""),
            status=LintErrorStatus.from_string(
                data.get("status", LintErrorStatus.LINT_CAN_NOT_BE_AUTOCORRECTED.value)
            ),
        )
