from __future__ import annotations

"""
Unit tests for the KeyPath Tree Builder.

Verifies root name enforcement, projection of named nodes, transparent
unnamed wrappers, sequence flattening and pre-composition expansion.
"""

import copy

import pytest

from lottie_keypath.core.analysis.tree_builder import build_tree, get_key_by_object
from lottie_keypath.core.analysis.tree_renderer import render_tree_into_string
from lottie_keypath.domain.config import BuildConfig, DuplicatePolicy
from lottie_keypath.domain.errors import DuplicateAssetIdError, KeyPathError, MissingRootNameError
from lottie_keypath.domain.keypath_models import KeyPathNode


def shape(node: KeyPathNode):
    """Return the tree as nested (key, [children]) tuples."""
    return node.key, [shape(child) for child in node.children]


# -----------------------------------------------------------------------------
# Root handling
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("document", [
    {},
    {"layers": [{"nm": "L1"}]},
    {"nm": None},
    {"nm": ""},
    [],
])
def test_missing_root_name_raises(document):
    with pytest.raises(MissingRootNameError):
        build_tree(document)


def test_missing_root_name_is_a_keypath_error():
    assert issubclass(MissingRootNameError, KeyPathError)


def test_root_only_document():
    tree = build_tree({"nm": "Root", "v": "5.7.4", "fr": 30})
    assert shape(tree) == ("Root", [])


# -----------------------------------------------------------------------------
# Projection without references
# -----------------------------------------------------------------------------

def test_named_projection_preserves_enumeration_order():
    doc = {
        "nm": "Root",
        "layers": [
            {"nm": "A", "shapes": [{"nm": "A1"}, {"nm": "A2"}]},
            {"nm": "B"},
        ],
        "markers": [{"nm": "M"}],
    }

    tree = build_tree(doc)

    assert shape(tree) == ("Root", [
        ("A", [("A1", []), ("A2", [])]),
        ("B", []),
        ("M", []),
    ])


def test_unnamed_wrappers_are_transparent():
    """Children of unnamed mappings attach to the nearest named ancestor."""
    doc = {
        "nm": "Root",
        "layers": [
            {"ty": 4, "shapes": [{"ty": "gr", "it": [{"nm": "Deep"}]}]},
            {"ks": {"o": {"a": 0, "k": 100}}},
        ],
    }

    tree = build_tree(doc)

    assert shape(tree) == ("Root", [("Deep", [])])


def test_nested_sequences_are_flattened_in_order():
    doc = {"nm": "Root", "x": [[{"nm": "one"}], [{"nm": "two"}, [{"nm": "three"}]]]}

    tree = build_tree(doc)

    assert [c.key for c in tree.children] == ["one", "two", "three"]


def test_scalars_are_never_inspected():
    doc = {"nm": "Root", "refId": None, "values": ["nm", 1, True, None, "refId"]}
    assert shape(build_tree(doc)) == ("Root", [])


def test_non_string_names_are_stringified():
    assert get_key_by_object({"nm": 3}, "nm") == "3"
    assert get_key_by_object({"nm": ""}, "nm") is None
    assert get_key_by_object(["nm"], "nm") is None


# -----------------------------------------------------------------------------
# Reference expansion
# -----------------------------------------------------------------------------

def test_reference_takes_definition_name():
    doc = {
        "nm": "Root",
        "assets": [{"id": "X", "nm": "Target", "layers": [{"nm": "Inner"}]}],
        "layers": [{"refId": "X", "nm": "Source"}],
    }

    tree = build_tree(doc)

    assert shape(tree) == ("Root", [("Target", [("Inner", [])])])


def test_each_reference_site_gets_its_own_subtree(precomp_document):
    tree = build_tree(precomp_document)

    assert shape(tree) == ("Scene", [
        ("Background", [("Fill", [])]),
        ("Badge", [("Star", [])]),
        ("Badge", [("Star", [])]),
    ])
    assert tree.children[1] is not tree.children[2]


def test_assets_are_only_visible_through_references():
    doc = {"nm": "Root", "assets": [{"id": "unused", "nm": "Hidden"}]}
    assert shape(build_tree(doc)) == ("Root", [])


def test_unresolved_reference_is_traversed_as_itself():
    doc = {"nm": "Root", "layers": [{"nm": "L1", "refId": ""}, {"refId": "missing"}]}

    assert render_tree_into_string(build_tree(doc)) == "Root\n  L1\n"


def test_reference_to_unnamed_definition_collapses_into_parent():
    doc = {
        "nm": "Root",
        "assets": [{"id": "a", "layers": [{"nm": "Child"}]}],
        "layers": [{"nm": "Ignored", "refId": "a"}],
    }

    assert shape(build_tree(doc)) == ("Root", [("Child", [])])


def test_nested_references_are_expanded():
    doc = {
        "nm": "Root",
        "assets": [
            {"id": "outer", "nm": "Outer", "layers": [{"refId": "inner"}]},
            {"id": "inner", "nm": "Inner", "layers": [{"nm": "Leaf"}]},
        ],
        "layers": [{"refId": "outer"}],
    }

    assert shape(build_tree(doc)) == ("Root", [("Outer", [("Inner", [("Leaf", [])])])])


def test_nested_assets_field_is_ordinary_content():
    """Only the root-level definitions collection is skipped."""
    doc = {"nm": "Root", "layers": [{"nm": "L", "assets": [{"nm": "Nested"}]}]}

    assert shape(build_tree(doc)) == ("Root", [("L", [("Nested", [])])])


def test_root_reference_is_resolved():
    doc = {"nm": "Root", "refId": "a", "assets": [{"id": "a", "nm": "Def", "layers": [{"nm": "X"}]}]}

    tree = build_tree(doc)

    assert tree.key == "Def"
    assert [c.key for c in tree.children] == ["X"]


def test_duplicate_policy_is_forwarded_to_index():
    doc = {"nm": "Root", "assets": [{"id": "a"}, {"id": "a"}]}
    with pytest.raises(DuplicateAssetIdError):
        build_tree(doc, BuildConfig(duplicate_policy=DuplicatePolicy.STRICT))


def test_cyclic_reference_is_not_guarded():
    doc = {"nm": "Root", "assets": [{"id": "loop", "nm": "Loop", "layers": [{"refId": "loop"}]}],
           "layers": [{"refId": "loop"}]}

    with pytest.raises(RecursionError):
        build_tree(doc)


# -----------------------------------------------------------------------------
# Input ownership
# -----------------------------------------------------------------------------

def test_document_is_not_mutated(precomp_document):
    snapshot = copy.deepcopy(precomp_document)

    first = build_tree(precomp_document)
    second = build_tree(precomp_document)

    assert precomp_document == snapshot
    assert shape(first) == shape(second)
