from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the per-user data directory holding diagnostic logs and persists
rendered trees to disk.
"""

import logging
import os

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "LottieKeyPath"
UNIX_APP_DIR_NAME = ".lottie_keypath"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the OS-specific directory for persistent application data.

    Standards:
    - Windows: %LOCALAPPDATA%/LottieKeyPath
    - Linux/Mac: ~/.lottie_keypath

    Returns:
        str: Absolute path to the application data directory.
    """
    path = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        logger.warning(f"Could not create data directory '{path}': {e}")

    return os.path.abspath(path)

# -----------------------------------------------------------------------------
# PERSISTENCE API
# -----------------------------------------------------------------------------

def save_text(save_path: str, content: str) -> None:
    """
    Write text to a file, creating parent directories as needed.

    Args:
        save_path: Target file path.
        content: Text to persist.

    Raises:
        OSError: If the file cannot be written.
    """
    out_dir = os.path.dirname(os.path.abspath(save_path))
    os.makedirs(out_dir, exist_ok=True)
    with open(save_path, "w", encoding="utf-8") as f:
        f.write(content)
    logger.info(f"Output saved to file: {save_path}")
