"""
Baseline data structure.

A Baseline is built once per load attempt and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from lintbaseline.models.lint_error import LintError


class BaselineStatus(Enum):
    """Outcome of loading a baseline file."""

    # Consumer did not request the baseline file to be loaded
    DISABLED = "disabled"
    # Baseline file is successfully parsed
    VALID = "valid"
    # Baseline file does not exist and needs to be generated first
    NOT_FOUND = "not_found"
    # Baseline file could not be parsed and needs to be regenerated
    INVALID = "invalid"

    @property
    def provides_suppressions(self) -> bool:
        """Whether lint errors of a baseline with this status may be suppressed."""
        return _PROVIDES_SUPPRESSIONS[self]


_PROVIDES_SUPPRESSIONS: dict[BaselineStatus, bool] = {
    BaselineStatus.DISABLED: False,
    BaselineStatus.VALID: True,
    BaselineStatus.NOT_FOUND: False,
    BaselineStatus.INVALID: False,
}

_missing = set(BaselineStatus) - set(_PROVIDES_SUPPRESSIONS)
if _missing:
    raise RuntimeError(f"No suppression rule for baseline status: {sorted(s.name for s in _missing)}")
del _missing


@dataclass(frozen=True)
class Baseline:
    """
    Baseline of lint errors to be ignored in subsequent lint runs.

    Attributes:
        status: Result of the load attempt.
        path: Path of the baseline file. Only ``None`` for a disabled baseline.
        lint_errors_per_file: Lint errors grouped by relative file path.
            Always empty unless the status is VALID.
        legacy_rule_references: Number of rule ids without a rule set id
            that were read from the file.
        diagnostics: Non-fatal messages produced while loading.
    """

    status: BaselineStatus
    path: Optional[str] = None
    lint_errors_per_file: Mapping[str, tuple[LintError, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    legacy_rule_references: int = 0
    diagnostics: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.status is not BaselineStatus.VALID and self.lint_errors_per_file:
            raise ValueError(f"Baseline with status {self.status.name} can not contain lint errors")
        if self.status is not BaselineStatus.DISABLED and self.path is None:
            raise ValueError(f"Baseline with status {self.status.name} requires a path")

        frozen = MappingProxyType(
            {file: tuple(errors) for file, errors in self.lint_errors_per_file.items()}
        )
        object.__setattr__(self, "lint_errors_per_file", frozen)
        object.__setattr__(self, "diagnostics", tuple(self.diagnostics))

    @classmethod
    def disabled(cls) -> "Baseline":
        """Baseline for a consumer that did not request loading one."""
        return cls(status=BaselineStatus.DISABLED)

    @property
    def is_valid(self) -> bool:
        return self.status is BaselineStatus.VALID

    @property
    def provides_suppressions(self) -> bool:
        return self.status.provides_suppressions

    @property
    def error_count(self) -> int:
        """Total number of lint errors over all files."""
        return sum(len(errors) for errors in self.lint_errors_per_file.values())

    def lint_errors_for(self, file: str) -> tuple[LintError, ...]:
        """Get the baseline errors of a file, empty when the file is unknown."""
        return self.lint_errors_per_file.get(file, ())
