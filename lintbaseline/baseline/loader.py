"""
Baseline loader.

Loading a baseline never fails because of the file itself: a missing file
gives a NOT_FOUND baseline, and a file that can not be parsed is deleted
and gives an INVALID baseline so that the consumer regenerates it.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, Protocol

from lintbaseline.baseline.models import Baseline, BaselineStatus
from lintbaseline.baseline.parser import BaselineParseError, parse_baseline_file
from lintbaseline.utils.logging import get_logger

if TYPE_CHECKING:
    from lintbaseline.core.config import LintBaselineConfig


class DiagnosticsLogger(Protocol):
    """Logging interface the loader reports to."""

    def debug(self, msg: str, **context: Any) -> None: ...

    def info(self, msg: str, **context: Any) -> None: ...

    def warning(self, msg: str, **context: Any) -> None: ...

    def error(self, msg: str, exc: Optional[BaseException] = None, **context: Any) -> None: ...


def load_baseline(path: str, logger: Optional[DiagnosticsLogger] = None) -> Baseline:
    """
    Load the baseline from the file located on ``path``.

    Args:
        path: Path to the baseline file. May not be blank.
        logger: Receiver of non-fatal diagnostics. Defaults to the
            ``lintbaseline.baseline.loader`` component logger.

    Returns:
        Baseline with status VALID, NOT_FOUND or INVALID.

    Raises:
        ValueError: If ``path`` is blank or empty.
    """
    if not path or not path.strip():
        raise ValueError("Path for loading baseline may not be blank or empty")

    return BaselineLoader(path, logger or get_logger("loader", parent="baseline")).load()


def load_configured_baseline(
    config: "LintBaselineConfig",
    logger: Optional[DiagnosticsLogger] = None,
) -> Baseline:
    """Load the baseline configured in ``config``, or a disabled baseline when turned off."""
    if not config.baseline.enabled:
        return Baseline.disabled()
    return load_baseline(str(config.baseline.path), logger=logger)


class BaselineLoader:
    """Performs a single load attempt for one baseline path."""

    def __init__(self, path: str, logger: DiagnosticsLogger) -> None:
        self.path = path
        self.logger = logger

    def load(self) -> Baseline:
        baseline_file = Path(self.path)
        try:
            exists = baseline_file.exists()
        except (OSError, ValueError) as e:
            # Some unusable names raise instead of returning False
            self.logger.debug("Baseline file can not be accessed", path=self.path, reason=str(e))
            exists = False
        if not exists:
            self.logger.debug("Baseline file not found", path=self.path)
            return Baseline(status=BaselineStatus.NOT_FOUND, path=self.path)

        try:
            parsed = parse_baseline_file(baseline_file)
        except BaselineParseError as e:
            return self._invalidate(baseline_file, e)

        diagnostics: list[str] = []
        if parsed.legacy_rule_references > 0:
            message = (
                f"Baseline file '{self.path}' contains {parsed.legacy_rule_references} reference(s) "
                "to rule ids without a rule set id. For those references the rule set id "
                "'standard' is assumed. It is advised to regenerate this baseline file."
            )
            self.logger.warning(message)
            diagnostics.append(message)

        self.logger.debug(
            "Baseline loaded",
            path=self.path,
            files=len(parsed.lint_errors_per_file),
            errors=parsed.error_count,
        )
        return Baseline(
            status=BaselineStatus.VALID,
            path=self.path,
            lint_errors_per_file=parsed.lint_errors_per_file,
            legacy_rule_references=parsed.legacy_rule_references,
            diagnostics=tuple(diagnostics),
        )

    def _invalidate(self, baseline_file: Path, error: BaselineParseError) -> Baseline:
        """Delete a baseline file that can not be parsed and report it as INVALID."""
        diagnostics = [f"Unable to parse baseline file: {self.path} ({error.reason})"]
        self.logger.error("Unable to parse baseline file", path=self.path, reason=error.reason)

        try:
            baseline_file.unlink()
        except OSError as e:
            diagnostics.append(f"Unable to delete baseline file: {self.path} ({e})")
            self.logger.error("Unable to delete baseline file", path=self.path, reason=str(e))
        else:
            self.logger.info("Deleted invalid baseline file", path=self.path)

        return Baseline(
            status=BaselineStatus.INVALID,
            path=self.path,
            diagnostics=tuple(diagnostics),
        )
