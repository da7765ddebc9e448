from __future__ import annotations

"""
Listing Source Reader.

Loads the raw lines of a tree listing from a file or from standard input.
The whole source is read before any parsing so that an unreadable input
never leaves a half-built scaffold behind.
"""

import sys
from typing import List, Optional, TextIO

from treescaffold.domain.constants import STDIN_SOURCE

# -----------------------------------------------------------------------------
# SOURCE READING OPERATIONS
# -----------------------------------------------------------------------------

def read_listing(
        source: str,
        encoding: str = "utf-8",
        stdin: Optional[TextIO] = None,
) -> List[str]:
    """
    Read every line of a listing source.

    Args:
        source: Path to the listing file, or '-' for standard input.
        encoding: Text encoding of the file or of standard input.
        stdin: Stream used for '-' (defaults to sys.stdin).

    Returns:
        List[str]: Lines without their line terminators.

    Raises:
        OSError: If the file cannot be opened or read.
        UnicodeDecodeError: If the content is not valid in ``encoding``.
    """
    if source == STDIN_SOURCE:
        stream = stdin if stdin is not None else sys.stdin
        return split_lines(_read_stream(stream, encoding))

    # newline="" keeps '\r' and other separators for split_lines to judge
    with open(source, "r", encoding=encoding, newline="") as f:
        return split_lines(f.read())


def split_lines(text: str) -> List[str]:
    """
    Split on '\\n' only, dropping one trailing '\\r' per line.

    Form feeds, '\\u2028' and other Unicode separators stay inside the
    line. A final terminator does not produce an extra empty line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _read_stream(stream: TextIO, encoding: str) -> str:
    """Decode the underlying byte buffer when the stream exposes one."""
    buffer = getattr(stream, "buffer", None)
    if buffer is not None:
        return buffer.read().decode(encoding)
    return stream.read()
