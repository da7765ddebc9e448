from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from treescaffold.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the treescaffold CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="treescaffold",
        description=i18n.t("app.description"),
    )

    # --- Paths ---
    p.add_argument(
        "input_source",
        nargs="?",
        default=None,
        metavar="input_file",
        help=i18n.t("cli.args.input"),
    )
    p.add_argument(
        "output_dir",
        nargs="?",
        default=None,
        metavar="output_directory",
        help=i18n.t("cli.args.output"),
    )
    p.add_argument(
        "--encoding",
        default=None,
        help=i18n.t("cli.args.encoding"),
    )

    # --- Behavior ---
    p.add_argument(
        "-v", "--verbose",
        action=argparse.BooleanOptionalAction,
        default=None,
        help=i18n.t("cli.args.verbose"),
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help=i18n.t("cli.args.dry_run"),
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump"),
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help=i18n.t("cli.args.save"),
    )
    p.add_argument(
        "--log-file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Unset options map to None (or are omitted) so that persisted values
    survive the merge.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_source"] = args.input_source
    overrides["output_dir"] = args.output_dir
    overrides["encoding"] = args.encoding
    overrides["log_file"] = args.log_file
    overrides["verbose"] = args.verbose

    if args.dry_run:
        overrides["dry_run"] = True
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
