from __future__ import annotations

"""
KeyPath Tree Builder.

Walks a decoded Lottie document and produces the tree an After Effects style
key path would traverse. Named entities become nodes, unnamed wrappers are
transparent, and references to pre-compositions are expanded in place.
"""

import logging
from typing import Any, Iterable, Optional

from lottie_keypath.core.analysis.precomp_index import build_precomp_index
from lottie_keypath.core.analysis.resolver import resolve_self
from lottie_keypath.domain.config import BuildConfig, get_default_config
from lottie_keypath.domain.errors import MissingRootNameError
from lottie_keypath.domain.keypath_models import (
    BuildContext,
    KeyPathNode,
    RawLottieObject,
    create_build_context,
    create_node,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(document: RawLottieObject, config: Optional[BuildConfig] = None) -> KeyPathNode:
    """
    Build the KeyPath tree of a Lottie document.

    The definitions collection is indexed first and then skipped during the
    walk, so assets only appear where a layer references them. The input
    document is not modified and may be built again.

    Cyclic references are not detected; they end in RecursionError.

    Args:
        document: Decoded root of the Lottie document.
        config: Field names and duplicate policy. Defaults to Lottie names.

    Returns:
        KeyPathNode: Root of the constructed tree.

    Raises:
        MissingRootNameError: If the root has no usable name.
        DuplicateAssetIdError: Under the strict policy, on a repeated identifier.
    """
    cfg = config or get_default_config()

    root_key = get_key_by_object(document, cfg.name_field)
    if root_key is None:
        raise MissingRootNameError(cfg.name_field)

    # 1. Index pre-compositions so references can be resolved during the walk
    precomp_by_id = build_precomp_index(document, cfg)

    # 2. Recursive construction below a placeholder parent
    root_node = create_node(root_key)
    context = create_build_context(precomp_by_id, root_node)
    tree = _build_node(document, context, cfg, skip_field=cfg.assets_field)

    logger.debug(f"KeyPath tree built for '{tree.key}'")
    return tree


def get_key_by_object(obj: Any, name_field: str) -> Optional[str]:
    """
    Return the display name of a document node.

    Args:
        obj: Candidate node.
        name_field: Field holding the entity name.

    Returns:
        Optional[str]: The name, or None for unnamed nodes and non-mappings.
    """
    if not isinstance(obj, dict):
        return None
    key = obj.get(name_field)
    if key is None or key == "":
        return None
    return str(key)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (RECURSION)
# -----------------------------------------------------------------------------

def _build_node(
        obj: Any,
        context: BuildContext,
        cfg: BuildConfig,
        skip_field: Optional[str] = None,
) -> KeyPathNode:
    """Attach the subtree of one structured value and return its tree node."""
    self_obj = resolve_self(obj, context, cfg.reference_field)
    ref_node = _get_or_create_ref_node(self_obj, context, cfg.name_field)

    child_context = context
    if ref_node is not context.parent:
        child_context = create_build_context(context.precomp_by_id, ref_node)

    # The skipped field only applies to the root document itself
    if self_obj is not obj:
        skip_field = None

    for child in _iter_children(self_obj, skip_field):
        if isinstance(child, (dict, list)):
            _build_node(child, child_context, cfg)

    return ref_node


def _get_or_create_ref_node(self_obj: Any, context: BuildContext, name_field: str) -> KeyPathNode:
    """Start a new tree level for named nodes; unnamed nodes reuse the parent."""
    key = get_key_by_object(self_obj, name_field)
    if key is None:
        return context.parent

    ref_node = create_node(key)
    context.parent.children.append(ref_node)
    return ref_node


def _iter_children(self_obj: Any, skip_field: Optional[str]) -> Iterable[Any]:
    """Enumerate field values of a mapping or elements of a sequence in order."""
    if isinstance(self_obj, dict):
        return (value for name, value in self_obj.items() if name != skip_field)
    if isinstance(self_obj, list):
        return iter(self_obj)
    return iter(())
