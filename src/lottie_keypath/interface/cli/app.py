from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, document acquisition from
standard input or a file, tree construction, and output rendering.
"""

import json
import os
import sys
from typing import List, Optional

from lottie_keypath.core.analysis.tree_builder import build_tree
from lottie_keypath.core.analysis.tree_renderer import (
    count_nodes,
    render_tree_into_string,
    tree_to_dict,
)
from lottie_keypath.core.io.loader import load_from_binary_stream, load_from_file, load_from_stream
from lottie_keypath.domain.errors import InputDecodeError, KeyPathError
from lottie_keypath.infra.fs import save_text
from lottie_keypath.infra.logging import LoggingConfig, configure_logging, get_logger
from lottie_keypath.interface.cli import args as cli_args

logger = get_logger(__name__)

NO_DATA_PLACEHOLDER = "<No Data>"

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Build failures are reported with a fixed placeholder and do not change
    the exit status.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (stderr only)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=None))

    # 3. Pre-flight input verification
    if args.input_path and not os.path.isfile(args.input_path):
        msg = f"Input file does not exist: {args.input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    config = cli_args.args_to_config(args)

    # 4. Acquisition and construction phase
    try:
        if args.input_path:
            document = load_from_file(args.input_path)
        elif hasattr(sys.stdin, "buffer"):
            document = load_from_binary_stream(sys.stdin.buffer)
        else:
            document = load_from_stream(sys.stdin)
        tree = build_tree(document, config)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130
    except (KeyPathError, OSError, RecursionError) as e:
        logger.error(f"KeyPath build failed: {e}")
        print(NO_DATA_PLACEHOLDER, file=sys.stderr)
        if isinstance(e, InputDecodeError):
            print(f"ERROR: {e}", file=sys.stderr)
        return 0

    logger.debug(f"Tree contains {count_nodes(tree)} node(s)")

    # 5. Output rendering phase
    if args.json_output:
        output = json.dumps(tree_to_dict(tree), ensure_ascii=False, indent=2) + "\n"
    else:
        output = render_tree_into_string(tree)

    if args.output_path:
        try:
            save_text(args.output_path, output)
        except OSError as e:
            logger.error(f"Failed to save tree to '{args.output_path}': {e}")
            print(f"ERROR: {e}", file=sys.stderr)
            return 1
        return 0

    sys.stdout.write(output)
    return 0

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
