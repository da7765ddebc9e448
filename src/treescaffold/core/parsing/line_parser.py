from __future__ import annotations

"""
Tree Listing Line Parser.

Turns a single line of a textual directory listing into a ScaffoldEntry.
Two indentation dialects are recognized and selected per line:

1. Tree dialect: box-drawing connectors as printed by `tree`
   (│, ├──, └──).
2. Indent dialect: tabs and four-space runs, as in hand-typed outlines.

No state is carried between lines, so a listing may mix both dialects.
"""

from typing import Iterable, Iterator, Optional, Tuple

from treescaffold.domain.constants import (
    BRANCH_FILL,
    BRANCH_MARKERS,
    COMMENT_MARKER,
    DIR_MARKER,
    INDENT_UNIT,
    INDENT_WIDTH,
    TAB,
    TREE_CONNECTORS,
    VERTICAL,
)
from treescaffold.domain.scaffold_models import ScaffoldEntry

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_tree_line(line: str) -> Optional[ScaffoldEntry]:
    """
    Classify one listing line into an entry, or None when it holds no entry.

    Blank lines, lone vertical guides, comment-only lines and lines that
    collapse to an empty name are all ignored.

    Args:
        line: Raw text line, with or without its trailing newline.

    Returns:
        Optional[ScaffoldEntry]: The recognized entry, if any.
    """
    stripped = line.strip()
    if not stripped or stripped == VERTICAL:
        return None

    content = strip_comment(line)

    if has_tree_connectors(content):
        depth, name = _parse_tree_based(content)
    else:
        depth, name = _parse_indent_based(content)

    if not name:
        return None

    is_dir = name.endswith(DIR_MARKER)
    if is_dir:
        name = name.rstrip(DIR_MARKER)
        # A bare "/" names nothing; it is dropped rather than re-opening the current directory
        if not name:
            return None

    return ScaffoldEntry(name=name, is_dir=is_dir, depth=depth)


def parse_lines(lines: Iterable[str]) -> Iterator[ScaffoldEntry]:
    """Yield the entries of a listing, skipping lines that hold none."""
    for line in lines:
        entry = parse_tree_line(line)
        if entry is not None:
            yield entry


def strip_comment(line: str) -> str:
    """Drop everything from the first '#' onward. There is no escape syntax."""
    pos = line.find(COMMENT_MARKER)
    return line if pos < 0 else line[:pos]


def has_tree_connectors(text: str) -> bool:
    return any(c in TREE_CONNECTORS for c in text)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DIALECTS
# -----------------------------------------------------------------------------

def _parse_indent_based(text: str) -> Tuple[int, str]:
    """
    Measure tab / four-space indentation.

    Each tab and each run of four spaces is one level. Shorter space runs
    are absorbed without affecting depth.
    """
    depth = 0
    i = 0
    n = len(text)

    while i < n:
        if text[i] == TAB:
            depth += 1
            i += 1
        elif text.startswith(INDENT_UNIT, i):
            depth += 1
            i += INDENT_WIDTH
        elif text[i] == " ":
            i += 1
        else:
            break

    return depth, text[i:].strip()


def _parse_tree_based(text: str) -> Tuple[int, str]:
    """
    Measure box-drawing indentation.

    Every vertical guide is one level. A branch marker ends the prefix
    and adds one more level for the entry itself.
    """
    depth = 0
    i = 0
    n = len(text)
    has_branch = False

    while i < n:
        c = text[i]
        if c == VERTICAL:
            depth += 1
            i += 1
            while i < n and text[i] == " ":
                i += 1
        elif c == " ":
            i += 1
        elif c in BRANCH_MARKERS:
            has_branch = True
            i += 1
            while i < n and text[i] in BRANCH_FILL:
                i += 1
            break
        else:
            break

    if has_branch:
        depth += 1

    return depth, text[i:].strip()
