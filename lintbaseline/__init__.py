"""
lintbaseline - baselines of accepted lint errors

Loads baseline files of previously accepted lint errors so a linter can
suppress known violations while still reporting new ones.
"""

__version__ = "1.0.0"

from lintbaseline.baseline import (
    Baseline,
    BaselineStatus,
    contains_lint_error,
    does_not_contain_lint_error,
    load_baseline,
)
from lintbaseline.core.config import LintBaselineConfig
from lintbaseline.models import LintError, LintErrorStatus

__all__ = [
    "__version__",
    "Baseline",
    "BaselineStatus",
    "LintBaselineConfig",
    "LintError",
    "LintErrorStatus",
    "contains_lint_error",
    "does_not_contain_lint_error",
    "load_baseline",
]
