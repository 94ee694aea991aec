# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the activity catalog."""

import pytest

from discoverme.domains.activity import (
    MODULE_IDS,
    ModuleCategory,
    ModuleDifficulty,
    UnknownModuleError,
    get_module,
    list_modules,
    module_name,
)


class TestRoster:
    """Tests for the module roster."""

    def test_roster_order(self) -> None:
        """Test the launcher order of the five modules."""
        assert MODULE_IDS == (
            "art-pad",
            "puzzle-play",
            "music-maker",
            "math-explorer",
            "builder-zone",
        )

    def test_get_module(self) -> None:
        """Test looking up a module by id."""
        module = get_module("math-explorer")

        assert module.name == "Math Explorer"
        assert module.category == ModuleCategory.COGNITIVE
        assert module.difficulty == ModuleDifficulty.INTERMEDIATE

    def test_get_unknown_module(self) -> None:
        """Test unknown ids raise UnknownModuleError."""
        with pytest.raises(UnknownModuleError) as exc_info:
            get_module("story-time")

        assert exc_info.value.module_id == "story-time"

    def test_module_name_fallback(self) -> None:
        """Test display names fall back to the id."""
        assert module_name("art-pad") == "Art Pad"
        assert module_name("story-time") == "story-time"


class TestListModules:
    """Tests for list_modules."""

    def test_unfiltered(self) -> None:
        """Test the whole roster is listed in order."""
        assert [m.id for m in list_modules()] == list(MODULE_IDS)

    def test_by_category(self) -> None:
        """Test filtering by category."""
        modules = list_modules(category=ModuleCategory.CREATIVE)

        assert [m.id for m in modules] == ["art-pad", "music-maker"]

    def test_by_category_and_difficulty(self) -> None:
        """Test filters combine."""
        modules = list_modules(
            category=ModuleCategory.COGNITIVE,
            difficulty=ModuleDifficulty.INTERMEDIATE,
        )

        assert [m.id for m in modules] == ["puzzle-play", "math-explorer"]

    def test_no_match(self) -> None:
        """Test filters with no match return an empty list."""
        assert list_modules(category=ModuleCategory.SOCIAL) == []
