from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates a complete scaffold run:
1. Validates configuration and normalizes the output root.
2. Reads the listing source in full.
3. Parses each line into entries.
4. Builds the hierarchy (or plans it, in dry-run mode).
5. Packs counts and created paths into a ScaffoldResult.
"""

import logging
from typing import Any, Dict, List, Optional, TextIO

from treescaffold.core.parsing.line_parser import parse_lines
from treescaffold.core.pipeline.reader import read_listing
from treescaffold.core.pipeline.validator import validate_config
from treescaffold.core.scaffold.builder import CreatedCallback, create_scaffold
from treescaffold.domain.scaffold_models import (
    CreatedEntry,
    ScaffoldResult,
    create_error_result,
    create_success_result,
)

logger = logging.getLogger(__name__)


def run_scaffold(
        config: Optional[Dict[str, Any]],
        *,
        on_created: Optional[CreatedCallback] = None,
        stdin: Optional[TextIO] = None,
) -> ScaffoldResult:
    """
    Execute a full scaffold run.

    Input failures abort before anything is created. Filesystem failures
    abort at the first error; the result then lists the entries that were
    created before it.

    Args:
        config: The configuration dictionary (raw or partial).
        on_created: Optional per-entry notification callback.
        stdin: Stream used when the input source is '-'.

    Returns:
        ScaffoldResult: Object containing status, counts and created paths.
    """
    logger.info("Scaffold run started.")

    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    source = cfg["input_source"]
    output_dir = cfg["output_dir"]
    dry_run = cfg["dry_run"]

    # -------------------------------------------------------------------------
    # 1) Input acquisition
    # -------------------------------------------------------------------------
    try:
        lines = read_listing(source, encoding=cfg["encoding"], stdin=stdin)
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Cannot read input '{source}': {e}"
        logger.error(msg)
        return create_error_result(msg, cfg, summary_extra={"stage": "read"})

    logger.debug(f"Read {len(lines)} lines from {source}")

    # -------------------------------------------------------------------------
    # 2) Parsing
    # -------------------------------------------------------------------------
    entries = list(parse_lines(lines))
    skipped = len(lines) - len(entries)
    logger.debug(f"Parsed {len(entries)} entries ({skipped} lines skipped)")

    # -------------------------------------------------------------------------
    # 3) Building
    # -------------------------------------------------------------------------
    created: List[CreatedEntry] = []

    def _track(record: CreatedEntry) -> None:
        created.append(record)
        if on_created is not None:
            on_created(record)

    try:
        create_scaffold(entries, output_dir, on_created=_track, dry_run=dry_run)
    except (OSError, ValueError) as e:
        msg = f"Failed to create scaffold entry: {e}"
        logger.error(msg)
        return create_error_result(
            msg,
            cfg,
            entries=created,
            lines_read=len(lines),
            lines_skipped=skipped,
            summary_extra={"stage": "build", "planned": len(entries)},
        )

    logger.info(
        f"Scaffold run finished: {len(created)} entries "
        f"{'planned' if dry_run else 'created'} in {output_dir}"
    )

    return create_success_result(
        cfg,
        entries=created,
        lines_read=len(lines),
        lines_skipped=skipped,
        summary_extra={"planned": len(entries)},
    )
