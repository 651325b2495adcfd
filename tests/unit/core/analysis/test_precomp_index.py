from __future__ import annotations

"""
Unit tests for the Pre-composition Definition Index.

Verifies identifier lookup, tolerance to missing or malformed collections,
and both duplicate identifier policies.
"""

import copy
import logging

import pytest

from lottie_keypath.core.analysis.precomp_index import build_precomp_index
from lottie_keypath.domain.config import BuildConfig, DuplicatePolicy
from lottie_keypath.domain.errors import DuplicateAssetIdError


def test_index_maps_identifiers_to_definitions(precomp_document):
    """Every asset with an id is reachable by that id."""
    index = build_precomp_index(precomp_document)

    assert set(index) == {"comp_0", "image_0"}
    assert index["comp_0"]["nm"] == "Badge"
    assert index["comp_0"] is precomp_document["assets"][0]


def test_index_does_not_mutate_document(precomp_document):
    snapshot = copy.deepcopy(precomp_document)
    build_precomp_index(precomp_document)
    assert precomp_document == snapshot


@pytest.mark.parametrize("assets", [None, {}, "comp", 42])
def test_missing_or_malformed_collection_yields_empty_index(assets):
    """Absent and non-list collections are treated as empty."""
    doc = {"nm": "Root"}
    if assets is not None:
        doc["assets"] = assets

    assert build_precomp_index(doc) == {}


def test_entries_without_usable_identifier_are_skipped():
    doc = {
        "nm": "Root",
        "assets": [
            "not-a-mapping",
            {"nm": "No Id"},
            {"id": None, "nm": "Null Id"},
            {"id": "ok", "nm": "Kept"},
        ],
    }

    index = build_precomp_index(doc)

    assert list(index) == ["ok"]


def test_numeric_identifiers_are_normalized_to_strings():
    doc = {"nm": "Root", "assets": [{"id": 7, "nm": "Seven"}]}
    assert build_precomp_index(doc)["7"]["nm"] == "Seven"


def test_duplicate_identifier_first_definition_wins(caplog):
    """Default policy keeps the first definition and warns about the rest."""
    doc = {
        "nm": "Root",
        "assets": [
            {"id": "dup", "nm": "First"},
            {"id": "dup", "nm": "Second"},
        ],
    }

    with caplog.at_level(logging.WARNING):
        index = build_precomp_index(doc)

    assert index["dup"]["nm"] == "First"
    assert "dup" in caplog.text


def test_duplicate_identifier_strict_policy_raises():
    doc = {
        "nm": "Root",
        "assets": [
            {"id": "dup", "nm": "First"},
            {"id": "dup", "nm": "Second"},
        ],
    }
    config = BuildConfig(duplicate_policy=DuplicatePolicy.STRICT)

    with pytest.raises(DuplicateAssetIdError) as exc_info:
        build_precomp_index(doc, config)

    assert exc_info.value.asset_id == "dup"


def test_custom_field_names_are_honoured():
    doc = {"title": "Root", "defs": [{"key": "a", "title": "A"}]}
    config = BuildConfig(name_field="title", assets_field="defs", id_field="key")

    index = build_precomp_index(doc, config)

    assert index["a"]["title"] == "A"
