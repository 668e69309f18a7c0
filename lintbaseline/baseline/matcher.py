"""
Matching of live lint errors against baseline entries.

``==`` on LintError can not be used: the baseline file does not store the
detail message, and older files store rule ids without a rule set id.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping

from lintbaseline.baseline.models import Baseline
from lintbaseline.models.lint_error import LintError
from lintbaseline.models.rule_id import prefix_with_standard_rule_set_id_when_missing


def is_same_lint_error(lint_error: LintError, other: LintError) -> bool:
    """Compare position and normalized rule id, ignoring detail and status."""
    return (
        lint_error.col == other.col
        and lint_error.line == other.line
        and prefix_with_standard_rule_set_id_when_missing(lint_error.rule_id)
        == prefix_with_standard_rule_set_id_when_missing(other.rule_id)
    )


def contains_lint_error(lint_errors: Iterable[LintError], lint_error: LintError) -> bool:
    """Check if ``lint_errors`` contains an error that is the same as ``lint_error``."""
    return any(is_same_lint_error(candidate, lint_error) for candidate in lint_errors)


def does_not_contain_lint_error(lint_errors: Iterable[LintError], lint_error: LintError) -> bool:
    """Check if ``lint_errors`` contains no error that is the same as ``lint_error``."""
    return not contains_lint_error(lint_errors, lint_error)


@dataclass
class BaselineDiff:
    """Live lint errors split into new ones and ones already in the baseline."""

    new_lint_errors: dict[str, list[LintError]] = field(default_factory=dict)
    baselined_lint_errors: dict[str, list[LintError]] = field(default_factory=dict)

    @property
    def new_count(self) -> int:
        """Number of new lint errors."""
        return sum(len(errors) for errors in self.new_lint_errors.values())

    @property
    def baselined_count(self) -> int:
        """Number of lint errors suppressed by the baseline."""
        return sum(len(errors) for errors in self.baselined_lint_errors.values())

    @property
    def has_new(self) -> bool:
        return self.new_count > 0


def diff_against_baseline(
    baseline: Baseline,
    lint_errors_per_file: Mapping[str, Iterable[LintError]],
) -> BaselineDiff:
    """
    Compare live lint errors with a baseline.

    Args:
        baseline: Loaded baseline.
        lint_errors_per_file: Live lint errors grouped by relative file path.

    Returns:
        BaselineDiff. When the baseline does not provide suppressions every
        lint error is new.
    """
    diff = BaselineDiff()

    for file, lint_errors in lint_errors_per_file.items():
        known = baseline.lint_errors_for(file) if baseline.provides_suppressions else ()
        for lint_error in lint_errors:
            if contains_lint_error(known, lint_error):
                diff.baselined_lint_errors.setdefault(file, []).append(lint_error)
            else:
                diff.new_lint_errors.setdefault(file, []).append(lint_error)

    return diff
