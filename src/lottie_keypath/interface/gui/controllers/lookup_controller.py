from __future__ import annotations

import logging
from typing import Optional, Protocol

from lottie_keypath.core.analysis.tree_builder import build_tree
from lottie_keypath.core.analysis.tree_renderer import count_nodes, render_tree_into_string
from lottie_keypath.core.io.loader import load_from_file
from lottie_keypath.domain.config import BuildConfig, get_default_config
from lottie_keypath.domain.errors import KeyPathError, NoFileSelectedError

logger = logging.getLogger(__name__)


class LookupView(Protocol):
    """Surface the controller needs from the window."""

    @property
    def selected_path(self) -> Optional[str]: ...

    def show_result(self, text: str) -> None: ...


class LookupController:
    """
    Runs a KeyPath lookup for the file chosen in the window.
    """

    def __init__(self, view: LookupView, config: Optional[BuildConfig] = None):
        self.view = view
        self.config = config or get_default_config()

    def generate_result(self) -> str:
        """Load the selected file and return its rendered KeyPath tree."""
        path = self.view.selected_path
        if not path:
            raise NoFileSelectedError()

        logger.info(f"Looking up KeyPaths of: {path}")
        document = load_from_file(path)
        tree = build_tree(document, self.config)
        logger.info(f"KeyPath tree ready ({count_nodes(tree)} nodes)")
        return render_tree_into_string(tree)

    def on_lookup(self) -> None:
        """Button handler. Failures are shown in place of the tree."""
        try:
            text = self.generate_result()
        except (KeyPathError, OSError, RecursionError) as e:
            logger.error(f"Lookup failed: {e}")
            self.view.show_result(str(e))
            return

        self.view.show_result(text)
