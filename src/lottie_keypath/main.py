from __future__ import annotations

"""
Main Entry Point.

Routes execution to the CLI when arguments are given or a document is piped
on standard input, and to the GUI otherwise. Unhandled exceptions are logged
and reported on stderr.
"""

import logging
import os
import sys
import traceback
from typing import Any, List, Optional

# -----------------------------------------------------------------------------
# ENVIRONMENT INITIALIZATION
# -----------------------------------------------------------------------------

# Make the package importable when this file is executed directly
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)


# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Log an unhandled exception with its stack trace and exit with status 1.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))

    logger = logging.getLogger("lottie_keypath.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {value}\n{stack_trace}")

    print("CRITICAL ERROR (LOTTIE-KEYPATH)", file=sys.stderr)
    print(stack_trace, file=sys.stderr)
    sys.exit(1)


sys.excepthook = global_exception_handler


# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def _wants_cli(argv: List[str]) -> bool:
    """CLI mode when arguments are present or stdin is a pipe or a file."""
    if argv:
        return True
    stdin = sys.stdin
    return stdin is not None and not stdin.isatty()


def main(argv: Optional[List[str]] = None) -> int:
    """
    Detect execution context and delegate to the matching interface.

    Returns:
        int: Process exit code.
    """
    args = sys.argv[1:] if argv is None else argv

    if _wants_cli(args):
        from lottie_keypath.interface.cli.app import main as cli_main
        return cli_main(args)

    from lottie_keypath.interface.gui.app import main as gui_main
    gui_main()
    return 0


if __name__ == "__main__":
    sys.exit(main())
