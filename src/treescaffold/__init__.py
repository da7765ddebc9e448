"""
Create directory and file hierarchies from textual tree listings.
"""

from treescaffold.core.parsing.line_parser import parse_lines, parse_tree_line
from treescaffold.core.pipeline.engine import run_scaffold
from treescaffold.core.scaffold.builder import create_scaffold
from treescaffold.domain.scaffold_models import CreatedEntry, ScaffoldEntry, ScaffoldResult

__version__ = "1.0.0"

__all__ = [
    "CreatedEntry",
    "ScaffoldEntry",
    "ScaffoldResult",
    "create_scaffold",
    "parse_lines",
    "parse_tree_line",
    "run_scaffold",
]
