from __future__ import annotations

"""
GUI Entrypoint.

Sets up file-backed logging, assembles the window, binds the lookup
controller and enters the Tk event loop.
"""

import logging

from lottie_keypath.infra.logging import LoggingConfig, configure_logging, get_default_log_path
from lottie_keypath.interface.gui.components.main_window import KeyPathWindow
from lottie_keypath.interface.gui.controllers.lookup_controller import LookupController

logger = logging.getLogger(__name__)


def main() -> None:
    """Launch the KeyPath viewer window."""
    configure_logging(LoggingConfig(level="INFO", console=True, log_file=get_default_log_path()))
    logger.info("GUI Lifecycle: Initializing KeyPath viewer")

    app = KeyPathWindow()
    controller = LookupController(app)
    app.bind_lookup(controller.on_lookup)

    app.mainloop()
    logger.info("GUI Lifecycle: Window closed")


if __name__ == "__main__":
    main()
