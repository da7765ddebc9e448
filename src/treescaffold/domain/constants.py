from __future__ import annotations

"""
Tree Listing Lexical Constants.

Box-drawing glyphs and markers recognized when reading textual
directory listings.
"""

from typing import FrozenSet

# -----------------------------------------------------------------------------
# CONNECTOR GLYPHS
# -----------------------------------------------------------------------------

VERTICAL = "│"
BRANCH_TEE = "├"
BRANCH_CORNER = "└"
HORIZONTAL = "─"

TREE_CONNECTORS: FrozenSet[str] = frozenset({VERTICAL, BRANCH_TEE, BRANCH_CORNER})
BRANCH_MARKERS: FrozenSet[str] = frozenset({BRANCH_TEE, BRANCH_CORNER})
BRANCH_FILL: FrozenSet[str] = frozenset({HORIZONTAL, " "})

# -----------------------------------------------------------------------------
# INDENTATION AND MARKERS
# -----------------------------------------------------------------------------

TAB = "\t"
INDENT_WIDTH = 4
INDENT_UNIT = " " * INDENT_WIDTH

COMMENT_MARKER = "#"
DIR_MARKER = "/"

# Reads from standard input when given as the input source
STDIN_SOURCE = "-"
