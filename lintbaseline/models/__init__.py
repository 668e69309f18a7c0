"""Data models for lintbaseline."""

from lintbaseline.models.lint_error import LintError, LintErrorStatus
from lintbaseline.models.rule_id import (
    RULE_ID_DELIMITER,
    STANDARD_RULE_SET_ID,
    has_rule_set_id,
    prefix_with_standard_rule_set_id_when_missing,
    split_rule_id,
)

__all__ = [
    "LintError",
    "LintErrorStatus",
    # Rule ids
    "RULE_ID_DELIMITER",
    "STANDARD_RULE_SET_ID",
    "has_rule_set_id",
    "prefix_with_standard_rule_set_id_when_missing",
    "split_rule_id",
]
