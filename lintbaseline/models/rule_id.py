"""
Rule identifier helpers.

Rule ids have the form ``<ruleSet>:<rule>``. Older baseline files only
stored ``<rule>`` for rules of the standard rule set, so a bare id is
read as belonging to ``standard``.
"""

from __future__ import annotations

STANDARD_RULE_SET_ID = "standard"
RULE_ID_DELIMITER = ":"


def has_rule_set_id(rule_id: str) -> bool:
    """Check whether the rule id carries a rule set prefix."""
    return RULE_ID_DELIMITER in rule_id


def prefix_with_standard_rule_set_id_when_missing(rule_id: str) -> str:
    """
    Prefix a rule id with the standard rule set id when it has no prefix.

    Idempotent: a prefixed id is returned unchanged.

    Examples:
        >>> prefix_with_standard_rule_set_id_when_missing("no-wildcard-imports")
        'standard:no-wildcard-imports'
        >>> prefix_with_standard_rule_set_id_when_missing("custom:max-line")
        'custom:max-line'
    """
    if has_rule_set_id(rule_id):
        return rule_id
    return f"{STANDARD_RULE_SET_ID}{RULE_ID_DELIMITER}{rule_id}"


def split_rule_id(rule_id: str) -> tuple[str, str]:
    """Split a rule id into ``(rule_set_id, rule)`` after normalizing it."""
    rule_set_id, _, rule = prefix_with_standard_rule_set_id_when_missing(rule_id).partition(
        RULE_ID_DELIMITER
    )
    return rule_set_id, rule
