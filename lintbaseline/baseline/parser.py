"""
Parser for baseline files.

A baseline file looks like::

    <baseline>
        <file name="src/main/kotlin/Foo.kt">
            <error line="12" column="5" source="standard:no-wildcard-imports"/>
        </file>
    </baseline>

The element and attribute names are part of the on-disk format.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Union

from lintbaseline.models.lint_error import LintError, LintErrorStatus
from lintbaseline.models.rule_id import prefix_with_standard_rule_set_id_when_missing

FILE_TAG = "file"
FILE_NAME_ATTRIBUTE = "name"
ERROR_TAG = "error"
LINE_ATTRIBUTE = "line"
COLUMN_ATTRIBUTE = "column"
SOURCE_ATTRIBUTE = "source"


class BaselineParseError(Exception):
    """Raised when a baseline file can not be read or parsed."""

    def __init__(self, reason: str, path: Optional[Path] = None) -> None:
        self.reason = reason
        self.path = path
        message = reason
        if path:
            message = f"{message}\nPath: {path}"
        super().__init__(message)


@dataclass(frozen=True)
class ParsedBaseline:
    """Lint errors grouped by file name, plus the number of legacy rule ids seen."""

    lint_errors_per_file: dict[str, tuple[LintError, ...]] = field(default_factory=dict)
    legacy_rule_references: int = 0

    @property
    def error_count(self) -> int:
        return sum(len(errors) for errors in self.lint_errors_per_file.values())


def parse_baseline(stream: BinaryIO) -> ParsedBaseline:
    """
    Parse the byte stream of a baseline file.

    Args:
        stream: Readable binary stream containing the XML document.

    Returns:
        ParsedBaseline with the lint errors grouped by relative file name.

    Raises:
        BaselineParseError: The stream is unreadable, the document is not
            well-formed, or an error element has a missing or non-numeric
            position.
    """
    try:
        root = ET.parse(stream).getroot()
    except (ET.ParseError, LookupError, ValueError) as e:
        # An XML declaration naming an unknown or multi-byte encoding raises
        # LookupError or ValueError from expat instead of ParseError
        raise BaselineParseError(f"Malformed baseline document: {e}") from e
    except OSError as e:
        raise BaselineParseError(f"Unable to read baseline document: {e}") from e

    lint_errors_per_file: dict[str, tuple[LintError, ...]] = {}
    legacy_rule_references = 0

    for file_element in _iter_tag(root, FILE_TAG):
        file_name = file_element.get(FILE_NAME_ATTRIBUTE, "")
        lint_errors = []
        for error_element in _iter_tag(file_element, ERROR_TAG):
            lint_error, is_legacy = _parse_error_element(error_element, file_name)
            if is_legacy:
                legacy_rule_references += 1
            lint_errors.append(lint_error)
        lint_errors_per_file[file_name] = tuple(lint_errors)

    return ParsedBaseline(
        lint_errors_per_file=lint_errors_per_file,
        legacy_rule_references=legacy_rule_references,
    )


def parse_baseline_file(path: Union[str, Path]) -> ParsedBaseline:
    """Open and parse a baseline file. The file handle is always closed."""
    path = Path(path)
    try:
        with open(path, "rb") as stream:
            return parse_baseline(stream)
    except BaselineParseError as e:
        if e.path is None:
            raise BaselineParseError(e.reason, path=path) from e.__cause__
        raise
    except OSError as e:
        raise BaselineParseError(f"Unable to open baseline file: {e}", path=path) from e


def _local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix ElementTree puts on qualified tags."""
    return tag.rsplit("}", 1)[-1]


def _iter_tag(element: ET.Element, tag: str) -> Iterator[ET.Element]:
    """Descendants of ``element`` with local name ``tag``, whatever their namespace."""
    for descendant in element.iter():
        if isinstance(descendant.tag, str) and _local_name(descendant.tag) == tag:
            yield descendant


def _parse_error_element(element: ET.Element, file_name: str) -> tuple[LintError, bool]:
    """Build a lint error from an ``error`` element and report whether its rule id was legacy."""
    try:
        line = int(element.attrib[LINE_ATTRIBUTE])
        col = int(element.attrib[COLUMN_ATTRIBUTE])
    except KeyError as e:
        raise BaselineParseError(
            f"Error element in file '{file_name}' misses attribute {e.args[0]!r}"
        ) from e
    except ValueError as e:
        raise BaselineParseError(
            f"Error element in file '{file_name}' has a non-numeric position: {e}"
        ) from e

    source = element.get(SOURCE_ATTRIBUTE, "")
    # Older baseline files do not store the rule set id of standard rules
    rule_id = prefix_with_standard_rule_set_id_when_missing(source)

    lint_error = LintError(
        line=line,
        col=col,
        rule_id=rule_id,
        detail="",
        status=LintErrorStatus.BASELINE_IGNORED,
    )
    return lint_error, rule_id != source
