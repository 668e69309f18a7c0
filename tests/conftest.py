"""Pytest configuration and shared fixtures."""

import logging
import os
import shutil
import tempfile
from pathlib import Path

import pytest

from lintbaseline.models.lint_error import LintError, LintErrorStatus


VALID_BASELINE = """<?xml version="1.0" encoding="utf-8"?>
<baseline version="1.0">
    <file name="src/main/kotlin/Foo.kt">
        <error line="12" column="5" source="standard:no-wildcard-imports" />
        <error line="30" column="1" source="standard:max-line-length" />
    </file>
    <file name="src/main/kotlin/Bar.kt">
        <error line="3" column="9" source="custom:no-println" />
    </file>
</baseline>
"""

LEGACY_BASELINE = """<?xml version="1.0" encoding="utf-8"?>
<baseline version="1.0">
    <file name="src/Foo.kt">
        <error line="12" column="5" source="rule-x" />
    </file>
</baseline>
"""

MALFORMED_BASELINE = """<?xml version="1.0" encoding="utf-8"?>
<baseline version="1.0">
    <file name="src/Foo.kt">
        <error line="12" column="5" source="standard:rule-x" />
    </file>
"""

NON_NUMERIC_BASELINE = """<?xml version="1.0" encoding="utf-8"?>
<baseline version="1.0">
    <file name="src/Foo.kt">
        <error line="twelve" column="5" source="standard:rule-x" />
    </file>
</baseline>
"""

UNKNOWN_ENCODING_BASELINE = """<?xml version="1.0" encoding="bogus"?>
<baseline/>
"""

NAMESPACED_BASELINE = """<?xml version="1.0" encoding="utf-8"?>
<baseline xmlns="urn:example:baseline">
    <file name="src/Foo.kt">
        <error line="12" column="5" source="standard:rule-x" />
    </file>
</baseline>
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp = tempfile.mkdtemp()
    yield Path(temp)
    shutil.rmtree(temp, ignore_errors=True)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory, monkeypatch):
    """Keep user configuration and LINTBASELINE_* variables out of the tests."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    for name in list(os.environ):
        if name.startswith("LINTBASELINE_"):
            monkeypatch.delenv(name)
    return home


@pytest.fixture(autouse=True)
def propagate_package_logs():
    """Let caplog see records of the lintbaseline logger after setup_logging ran."""
    logger = logging.getLogger("lintbaseline")
    handlers = list(logger.handlers)
    propagate = logger.propagate
    level = logger.level
    logger.handlers.clear()
    logger.propagate = True
    yield
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = handlers
    logger.propagate = propagate
    logger.setLevel(level)


@pytest.fixture
def write_baseline(temp_dir):
    """Write baseline content to a file in the temp dir and return its path."""
    def _write(content: str, name: str = "baseline.xml") -> Path:
        path = temp_dir / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def valid_baseline_file(write_baseline) -> Path:
    return write_baseline(VALID_BASELINE)


@pytest.fixture
def legacy_baseline_file(write_baseline) -> Path:
    return write_baseline(LEGACY_BASELINE)


@pytest.fixture
def malformed_baseline_file(write_baseline) -> Path:
    return write_baseline(MALFORMED_BASELINE)


@pytest.fixture
def non_numeric_baseline_file(write_baseline) -> Path:
    return write_baseline(NON_NUMERIC_BASELINE)


@pytest.fixture
def baseline_lint_error() -> LintError:
    """Lint error as read from a baseline file."""
    return LintError(
        line=12,
        col=5,
        rule_id="standard:no-wildcard-imports",
        detail="",
        status=LintErrorStatus.BASELINE_IGNORED,
    )


@pytest.fixture
def live_lint_error() -> LintError:
    """Lint error as reported by a lint run."""
    return LintError(
        line=12,
        col=5,
        rule_id="standard:no-wildcard-imports",
        detail="Wildcard import",
        status=LintErrorStatus.LINT_CAN_NOT_BE_AUTOCORRECTED,
    )


@pytest.fixture
def baseline_documents() -> dict[str, str]:
    """Baseline document contents by kind."""
    return {
        "valid": VALID_BASELINE,
        "legacy": LEGACY_BASELINE,
        "malformed": MALFORMED_BASELINE,
        "non_numeric": NON_NUMERIC_BASELINE,
        "unknown_encoding": UNKNOWN_ENCODING_BASELINE,
        "namespaced": NAMESPACED_BASELINE,
    }
