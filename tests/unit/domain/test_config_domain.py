from __future__ import annotations

"""
Unit tests for domain configuration and models.
"""

import dataclasses

import pytest

from lottie_keypath.domain.config import BuildConfig, DuplicatePolicy, get_default_config
from lottie_keypath.domain.keypath_models import create_build_context, create_node


def test_default_config_matches_lottie_fields():
    config = get_default_config()

    assert (config.name_field, config.reference_field) == ("nm", "refId")
    assert (config.assets_field, config.id_field) == ("assets", "id")
    assert config.duplicate_policy == DuplicatePolicy.FIRST_WINS


def test_config_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        BuildConfig().name_field = "other"  # type: ignore[misc]


def test_build_context_is_immutable_and_nodes_start_empty():
    node = create_node("Root")
    context = create_build_context({}, node)

    assert node.children == []
    assert context.parent is node
    with pytest.raises(dataclasses.FrozenInstanceError):
        context.parent = create_node("Other")  # type: ignore[misc]
