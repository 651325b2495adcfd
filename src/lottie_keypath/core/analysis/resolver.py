from __future__ import annotations

"""
Reference Resolver.

Decides which object's fields stand for a visited node: the node itself, or
the pre-composition it references.
"""

from typing import Any

from lottie_keypath.domain.config import DEFAULT_REFERENCE_FIELD
from lottie_keypath.domain.keypath_models import BuildContext


def resolve_self(
        obj: Any,
        context: BuildContext,
        reference_field: str = DEFAULT_REFERENCE_FIELD,
) -> Any:
    """
    Return the effective self of a document node.

    When the node references a known definition, the definition replaces it
    entirely, so the resulting tree node is named after the definition.
    Unknown references and sequences are returned unchanged.

    Args:
        obj: Mapping or sequence taken from the document.
        context: Current build context holding the definition index.
        reference_field: Field holding the reference identifier.

    Returns:
        Any: The referenced definition, or the node itself.
    """
    if not isinstance(obj, dict):
        return obj

    ref_id = obj.get(reference_field)
    if ref_id is None:
        return obj

    # Reference ids are compared in their string form, like the index keys.
    referenced_precomp = context.precomp_by_id.get(str(ref_id))
    return referenced_precomp if referenced_precomp is not None else obj
