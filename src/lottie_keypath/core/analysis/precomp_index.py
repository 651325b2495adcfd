from __future__ import annotations

"""
Pre-composition Definition Index.

Scans the reusable definitions collection of a Lottie document and builds
the identifier lookup used to expand references during tree construction.
"""

import logging
from typing import Any, Optional

from lottie_keypath.domain.config import BuildConfig, DuplicatePolicy, get_default_config
from lottie_keypath.domain.errors import DuplicateAssetIdError
from lottie_keypath.domain.keypath_models import PrecompIndex, RawLottieObject

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_precomp_index(
        document: RawLottieObject,
        config: Optional[BuildConfig] = None,
) -> PrecompIndex:
    """
    Map each asset identifier to its definition.

    A missing or malformed assets collection yields an empty index. Entries
    that are not mappings or carry no identifier are skipped. The document
    is left untouched.

    Args:
        document: Decoded root of the Lottie document.
        config: Field names and duplicate policy. Defaults to Lottie names.

    Returns:
        PrecompIndex: Identifier to definition lookup.

    Raises:
        DuplicateAssetIdError: Under the strict policy, on a repeated identifier.
    """
    cfg = config or get_default_config()
    assets = document.get(cfg.assets_field) if isinstance(document, dict) else None
    if not isinstance(assets, list):
        if assets is not None:
            logger.debug(f"Ignoring non-list '{cfg.assets_field}' collection ({type(assets).__name__})")
        return {}

    index: PrecompIndex = {}
    for asset in assets:
        asset_id = _get_asset_id(asset, cfg.id_field)
        if asset_id is None:
            continue

        if asset_id in index:
            if cfg.duplicate_policy == DuplicatePolicy.STRICT:
                raise DuplicateAssetIdError(asset_id)
            logger.warning(f"Duplicate asset identifier '{asset_id}': keeping the first definition")
            continue

        index[asset_id] = asset

    logger.debug(f"Indexed {len(index)} asset definition(s)")
    return index

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _get_asset_id(asset: Any, id_field: str) -> Optional[str]:
    """Return the normalized identifier of an asset, or None if unusable."""
    if not isinstance(asset, dict):
        return None
    raw_id = asset.get(id_field)
    if raw_id is None:
        return None
    return str(raw_id)
