from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into a
BuildConfig for the tree builder.
"""

import argparse
from dataclasses import replace

from lottie_keypath.domain.config import BuildConfig, DuplicatePolicy, get_default_config

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the lottie-keypath CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="lottie-keypath",
        description="Print the KeyPath tree of a Lottie animation read from stdin or a file.",
    )

    # --- Input / Output ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Read the animation from FILE instead of standard input.",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Save the rendered tree to FILE instead of printing it.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit the tree as nested JSON objects.",
    )

    # --- Build Behaviour ---
    p.add_argument(
        "--strict-ids",
        action="store_true",
        help="Fail when two assets share the same identifier (default: first one wins).",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_config(args: argparse.Namespace) -> BuildConfig:
    """
    Translate the argparse Namespace into a build configuration.

    Args:
        args: Parsed command-line arguments.

    Returns:
        BuildConfig: Defaults with the command-line overrides applied.
    """
    config = get_default_config()
    if args.strict_ids:
        config = replace(config, duplicate_policy=DuplicatePolicy.STRICT)
    return config
