from __future__ import annotations

"""
Build Configuration Domain.

Declares the Lottie field names the tree builder reads and the policy used
when the definitions collection repeats an identifier.
"""

from dataclasses import dataclass
from enum import Enum

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_NAME_FIELD = "nm"
DEFAULT_REFERENCE_FIELD = "refId"
DEFAULT_ASSETS_FIELD = "assets"
DEFAULT_ID_FIELD = "id"


class DuplicatePolicy(str, Enum):
    """Resolution strategy for repeated asset identifiers."""
    FIRST_WINS = "first"
    STRICT = "strict"


@dataclass(frozen=True)
class BuildConfig:
    """
    Immutable settings for a single tree build.

    Attributes:
        name_field: Field holding an entity's display name.
        reference_field: Field holding a reference to a reusable asset.
        assets_field: Root field holding the reusable definitions.
        id_field: Field identifying a definition inside the assets list.
        duplicate_policy: How repeated identifiers are handled.
    """
    name_field: str = DEFAULT_NAME_FIELD
    reference_field: str = DEFAULT_REFERENCE_FIELD
    assets_field: str = DEFAULT_ASSETS_FIELD
    id_field: str = DEFAULT_ID_FIELD
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.FIRST_WINS


def get_default_config() -> BuildConfig:
    """Return the configuration matching the Lottie wire format."""
    return BuildConfig()
