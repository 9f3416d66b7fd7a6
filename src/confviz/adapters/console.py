"""Console setup for printing Unicode reports.

Switching the output encoding is a process-wide change without rollback,
so it is an explicit step callers opt into rather than a side effect of
choosing the Unicode symbols.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

logger = logging.getLogger(__name__)


def enable_unicode_console(*streams: TextIO) -> bool:
    """Reconfigure *streams* (default: stdout and stderr) to UTF-8.

    Streams that are already UTF-8 or cannot be reconfigured (for example
    ``StringIO`` or a test runner's capture) are left alone.

    Args:
        streams: Text streams to reconfigure.

    Returns:
        True if at least one stream was switched to UTF-8.

    Example:
        >>> import io
        >>> enable_unicode_console(io.StringIO())
        False
    """
    targets = streams or (sys.stdout, sys.stderr)
    switched = False
    for stream in targets:
        encoding = (getattr(stream, "encoding", None) or "").lower().replace("-", "")
        if encoding == "utf8" or not hasattr(stream, "reconfigure"):
            continue
        stream.reconfigure(encoding="utf-8")  # type: ignore[attr-defined]
        switched = True
    if switched:
        logger.debug("Console output encoding switched to UTF-8")
    return switched


__all__ = ["enable_unicode_console"]
