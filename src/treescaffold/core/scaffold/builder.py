from __future__ import annotations

"""
Scaffold Builder.

Materializes an ordered sequence of ScaffoldEntry records as a directory
and file hierarchy. Nesting is tracked with a path stack whose slot 0 is
the output root; each record truncates the stack to ``depth + 1`` slots
and joins its name onto the top.
"""

import logging
import os
from typing import Callable, Iterable, List, Optional

from treescaffold.domain.scaffold_models import CreatedEntry, ScaffoldEntry
from treescaffold.infra.fs import ensure_dir, write_empty_file

logger = logging.getLogger(__name__)

CreatedCallback = Callable[[CreatedEntry], None]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def create_scaffold(
        entries: Iterable[ScaffoldEntry],
        base_dir: str,
        *,
        on_created: Optional[CreatedCallback] = None,
        dry_run: bool = False,
) -> List[CreatedEntry]:
    """
    Create the directories and empty files described by ``entries``.

    Directories are created with their missing ancestors and become the
    parent of deeper records that follow. Files are created empty, or
    truncated if they already exist. Depths are trusted as given: a record
    deeper than the currently open directories is joined onto the deepest
    one that is open.

    Processing stops at the first filesystem error; entries created up to
    that point are left in place.

    Args:
        entries: Parsed records in listing order.
        base_dir: Root directory of the scaffold.
        on_created: Optional callback invoked after each entry is handled.
        dry_run: If True, compute paths and notify without touching disk.

    Returns:
        List[CreatedEntry]: Handled entries in processing order.

    Raises:
        OSError: On the first directory or file creation failure.
        ValueError: If a name cannot be used as a path (embedded NUL).
    """
    path_stack: List[str] = [base_dir]
    created: List[CreatedEntry] = []

    for entry in entries:
        del path_stack[entry.depth + 1:]

        target = os.path.join(path_stack[-1], entry.name)

        if entry.is_dir:
            if not dry_run:
                ensure_dir(target)
            path_stack.append(target)
        elif not dry_run:
            write_empty_file(target)

        record = CreatedEntry(path=target, is_dir=entry.is_dir)
        created.append(record)
        logger.debug(f"{'Planned' if dry_run else 'Created'} {record.kind}: {target}")

        if on_created is not None:
            on_created(record)

    return created
