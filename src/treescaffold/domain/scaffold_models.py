from __future__ import annotations

"""
Scaffold Domain Data Models.

Defines the records exchanged between the line parser, the scaffold
builder and the interface layer, plus the factory functions used to
report the outcome of a complete run.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# PARSER OUTPUT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ScaffoldEntry:
    """
    A single entry recognized in a tree listing line.

    Attributes:
        name: Base name of the entry, trailing '/' removed.
        is_dir: True when the listing marked the entry as a directory.
        depth: Nesting level, 0 being a direct child of the output root.
    """
    name: str
    is_dir: bool
    depth: int


# -----------------------------------------------------------------------------
# BUILDER OUTPUT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CreatedEntry:
    """Filesystem path materialized (or planned, in dry-run) by the builder."""
    path: str
    is_dir: bool

    @property
    def kind(self) -> str:
        return "dir" if self.is_dir else "file"


# -----------------------------------------------------------------------------
# RUN RESULT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ScaffoldResult:
    """
    Unified result object of a complete scaffold run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        input_source: Path of the listing, or '-' for stdin.
        output_dir: Absolute root under which entries were created.
        dry_run: True when no filesystem changes were made.
        entries: Created (or planned) entries in processing order.
        lines_read: Number of raw lines consumed from the source.
        lines_skipped: Lines that produced no entry.
        summary: Execution statistics for the interface layer.
    """
    ok: bool
    error: str

    input_source: str
    output_dir: str
    dry_run: bool

    entries: List[CreatedEntry] = field(default_factory=list)
    lines_read: int = 0
    lines_skipped: int = 0

    summary: Dict[str, Any] = field(default_factory=dict)

    @property
    def dirs_created(self) -> int:
        return sum(1 for e in self.entries if e.is_dir)

    @property
    def files_created(self) -> int:
        return sum(1 for e in self.entries if not e.is_dir)


# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        entries: Optional[List[CreatedEntry]] = None,
        lines_read: int = 0,
        lines_skipped: int = 0,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> ScaffoldResult:
    """
    Create a failed scaffold result instance.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        entries: Entries created before the failure (never rolled back).
        lines_read: Raw lines consumed before the failure.
        lines_skipped: Lines that produced no entry.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        ScaffoldResult: An immutable error result object.
    """
    return ScaffoldResult(
        ok=False,
        error=error,
        input_source=cfg.get("input_source", ""),
        output_dir=cfg.get("output_dir", ""),
        dry_run=cfg.get("dry_run", False),
        entries=entries or [],
        lines_read=lines_read,
        lines_skipped=lines_skipped,
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        entries: List[CreatedEntry],
        lines_read: int,
        lines_skipped: int,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> ScaffoldResult:
    """
    Create a successful scaffold result instance.

    Args:
        cfg: Final configuration used during execution.
        entries: Entries created (or planned) in order.
        lines_read: Raw lines consumed from the source.
        lines_skipped: Lines that produced no entry.
        summary_extra: Final execution metrics.

    Returns:
        ScaffoldResult: An immutable success result object.
    """
    return ScaffoldResult(
        ok=True,
        error="",
        input_source=cfg.get("input_source", ""),
        output_dir=cfg.get("output_dir", ""),
        dry_run=cfg.get("dry_run", False),
        entries=entries,
        lines_read=lines_read,
        lines_skipped=lines_skipped,
        summary=summary_extra or {},
    )
