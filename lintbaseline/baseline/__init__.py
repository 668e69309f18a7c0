"""
Baseline handling for lintbaseline.

Loads baseline files of previously accepted lint errors and matches live
lint errors against them, so only new violations get reported.
"""

from lintbaseline.baseline.loader import BaselineLoader, load_baseline, load_configured_baseline
from lintbaseline.baseline.matcher import (
    BaselineDiff,
    contains_lint_error,
    diff_against_baseline,
    does_not_contain_lint_error,
    is_same_lint_error,
)
from lintbaseline.baseline.models import Baseline, BaselineStatus
from lintbaseline.baseline.parser import (
    BaselineParseError,
    ParsedBaseline,
    parse_baseline,
    parse_baseline_file,
)
from lintbaseline.baseline.paths import relative_route

__all__ = [
    "Baseline",
    "BaselineStatus",
    # Loading
    "BaselineLoader",
    "load_baseline",
    "load_configured_baseline",
    # Parsing
    "BaselineParseError",
    "ParsedBaseline",
    "parse_baseline",
    "parse_baseline_file",
    # Matching
    "BaselineDiff",
    "contains_lint_error",
    "diff_against_baseline",
    "does_not_contain_lint_error",
    "is_same_lint_error",
    "relative_route",
]
