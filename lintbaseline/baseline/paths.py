"""Path helpers kept for compatibility with older consumers."""

from __future__ import annotations

import os
import warnings
from pathlib import Path
from typing import Union


def relative_route(path: Union[str, Path]) -> str:
    """
    Get the path relative to the current working directory, with forward slashes.

    A path outside of the working directory is relativized with ``..``
    segments. A relative path, or one that can not be relativized (another
    drive on Windows), is returned as is.

    .. deprecated::
        Consumers should compute relative paths themselves.
    """
    warnings.warn(
        "relative_route is deprecated and will be removed from the public API",
        DeprecationWarning,
        stacklevel=2,
    )
    path = Path(path)
    if not path.is_absolute():
        return str(path).replace(os.sep, "/")
    try:
        relative = os.path.relpath(path, Path.cwd())
    except ValueError:
        # No relative path between different drives
        relative = str(path)
    return relative.replace(os.sep, "/")
