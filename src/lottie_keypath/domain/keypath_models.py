from __future__ import annotations

"""
KeyPath Tree Data Models.

Provides the structural nodes produced by the tree builder and the context
object threaded through the recursive traversal of a Lottie document.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

# -----------------------------------------------------------------------------
# TYPE ALIASES
# -----------------------------------------------------------------------------

RawLottieObject = Dict[str, Any]
PrecompIndex = Dict[str, RawLottieObject]

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class KeyPathNode:
    """
    Represents a named entity in the KeyPath tree.

    Attributes:
        key: Display name taken from the entity's name field.
        children: Named descendants in document enumeration order.
    """
    key: str
    children: List[KeyPathNode] = field(default_factory=list)


@dataclass(frozen=True)
class BuildContext:
    """
    Immutable traversal state for one recursion level.

    Attributes:
        precomp_by_id: Definition index shared by the whole build.
        parent: Node that receives newly created children.
    """
    precomp_by_id: PrecompIndex
    parent: KeyPathNode


def create_node(key: str) -> KeyPathNode:
    return KeyPathNode(key=key)


def create_build_context(precomp_by_id: PrecompIndex, parent: KeyPathNode) -> BuildContext:
    return BuildContext(precomp_by_id=precomp_by_id, parent=parent)
