from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation to ensure the 'src' directory is importable.
2. Shared Lottie document fixtures used across unit tests.
"""

import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def precomp_document() -> Dict[str, Any]:
    """
    Return a small animation with one pre-composition used by two layers.

    Structure:
    Scene
      Background
        Fill
      Badge (precomp 'comp_0', referenced as 'Instance A')
        Star
      Badge (precomp 'comp_0', referenced as 'Instance B')
        Star
    """
    return {
        "v": "5.7.4",
        "fr": 30,
        "nm": "Scene",
        "assets": [
            {
                "id": "comp_0",
                "nm": "Badge",
                "layers": [
                    {"ty": 4, "nm": "Star", "shapes": []},
                ],
            },
            {"id": "image_0", "w": 100, "h": 100, "p": "img.png"},
        ],
        "layers": [
            {
                "ty": 4,
                "nm": "Background",
                "shapes": [
                    {"ty": "gr", "it": [{"ty": "fl", "nm": "Fill", "c": {"a": 0, "k": [1, 1, 1, 1]}}]},
                ],
            },
            {"ty": 0, "nm": "Instance A", "refId": "comp_0"},
            {"ty": 0, "nm": "Instance B", "refId": "comp_0"},
        ],
    }


@pytest.fixture
def sample_animation_path() -> str:
    """Path of the on-disk sample animation."""
    return os.path.join(FIXTURES_DIR, "sample_animation.json")
