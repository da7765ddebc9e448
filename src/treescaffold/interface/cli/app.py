from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, merging of configuration
sources (defaults, persisted file and CLI overrides), logging bootstrap,
scaffold execution and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from treescaffold.core.pipeline.engine import run_scaffold
from treescaffold.core.pipeline.validator import validate_config
from treescaffold.domain.config import get_default_config, load_config, save_config
from treescaffold.domain.scaffold_models import CreatedEntry, ScaffoldResult
from treescaffold.infra.logging import LoggingConfig, configure_logging, get_logger
from treescaffold.interface.cli import args as cli_args
from treescaffold.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_BUILD_FAILED = 1
EXIT_INPUT_FAILED = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    if args.input_source is None and not args.dump_config:
        parser.error(i18n.t("cli.errors.missing_input"))

    # 1. Resolve configuration hierarchy (defaults < persisted < CLI)
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 2. Logging bootstrap (console on stderr, optional file)
    configure_logging(LoggingConfig(
        level=clean_conf["log_level"],
        console=True,
        log_file=clean_conf["log_file"] or None,
    ))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    if args.save_config:
        save_config(clean_conf)
        print(i18n.t("cli.status.config_saved"))

    # 3. Scaffold execution
    on_created = None
    if clean_conf["verbose"] and not args.json_output:
        dry_run = clean_conf["dry_run"]

        def on_created(record: CreatedEntry) -> None:
            _print_created(record, dry_run)

    try:
        result = run_scaffold(clean_conf, on_created=on_created)
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED

    # 4. Output rendering
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return _exit_code(result)

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-None override values of known keys into ``base``.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in base and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_created(record: CreatedEntry, dry_run: bool) -> None:
    prefix = "cli.status.planned_" if dry_run else "cli.status.created_"
    print(i18n.t(prefix + record.kind, path=record.path))


def _print_human_summary(result: ScaffoldResult) -> None:
    """
    Print the outcome of a run: errors to stderr, confirmation to stdout.

    Args:
        result: The scaffold result to render.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        if result.entries:
            print(i18n.t("cli.status.partial", count=len(result.entries)), file=sys.stderr)
        return

    if result.dry_run:
        print(i18n.t("cli.status.dry_run", count=len(result.entries), path=result.output_dir))
        return

    print(i18n.t("cli.status.success", path=result.output_dir))


def _exit_code(result: ScaffoldResult) -> int:
    if result.ok:
        return EXIT_OK
    if result.summary.get("stage") == "read":
        return EXIT_INPUT_FAILED
    return EXIT_BUILD_FAILED

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
