# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Activity module catalog.

The suite ships a fixed roster of five activity modules. Roster order is
significant: feedback recommendations pick the first module, in this order,
that has never been played.

Usage:
    from discoverme.domains.activity import get_module, list_modules

    art_pad = get_module("art-pad")
    creative = list_modules(category=ModuleCategory.CREATIVE)
"""

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class ModuleDifficulty(str, Enum):
    """Suggested difficulty of an activity module."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ModuleCategory(str, Enum):
    """Developmental area an activity module exercises."""

    CREATIVE = "creative"
    COGNITIVE = "cognitive"
    SOCIAL = "social"
    PHYSICAL = "physical"


class ActivityModule(BaseModel):
    """One activity in the suite."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Stable module identifier")
    name: str = Field(description="Display name")
    description: str = Field(description="One-line description for the launcher")
    color: str = Field(description="Launcher gradient classes")
    difficulty: ModuleDifficulty
    category: ModuleCategory


class UnknownModuleError(Exception):
    """Raised when a module id is not part of the roster.

    Attributes:
        module_id: The id that was looked up.
    """

    def __init__(self, module_id: str) -> None:
        self.module_id = module_id
        super().__init__(f"Activity module '{module_id}' not found")


MODULE_ROSTER: tuple[ActivityModule, ...] = (
    ActivityModule(
        id="art-pad",
        name="Art Pad",
        description="Express yourself through digital art and creativity",
        color="from-pink-400 to-rose-500",
        difficulty=ModuleDifficulty.BEGINNER,
        category=ModuleCategory.CREATIVE,
    ),
    ActivityModule(
        id="puzzle-play",
        name="Puzzle Play",
        description="Solve fun puzzles and brain teasers",
        color="from-blue-400 to-indigo-500",
        difficulty=ModuleDifficulty.INTERMEDIATE,
        category=ModuleCategory.COGNITIVE,
    ),
    ActivityModule(
        id="music-maker",
        name="Music Maker",
        description="Create beautiful melodies and rhythms",
        color="from-purple-400 to-violet-500",
        difficulty=ModuleDifficulty.BEGINNER,
        category=ModuleCategory.CREATIVE,
    ),
    ActivityModule(
        id="math-explorer",
        name="Math Explorer",
        description="Discover the magic of numbers and patterns",
        color="from-green-400 to-emerald-500",
        difficulty=ModuleDifficulty.INTERMEDIATE,
        category=ModuleCategory.COGNITIVE,
    ),
    ActivityModule(
        id="builder-zone",
        name="Builder Zone",
        description="Build amazing structures and creations",
        color="from-orange-400 to-amber-500",
        difficulty=ModuleDifficulty.ADVANCED,
        category=ModuleCategory.PHYSICAL,
    ),
)

MODULE_IDS: tuple[str, ...] = tuple(module.id for module in MODULE_ROSTER)

_MODULES_BY_ID: dict[str, ActivityModule] = {module.id: module for module in MODULE_ROSTER}


def get_module(module_id: str) -> ActivityModule:
    """Look up a module by id.

    Args:
        module_id: Module identifier, e.g. "art-pad".

    Returns:
        The matching ActivityModule.

    Raises:
        UnknownModuleError: If the id is not in the roster.
    """
    try:
        return _MODULES_BY_ID[module_id]
    except KeyError:
        raise UnknownModuleError(module_id) from None


def module_name(module_id: str) -> str:
    """Display name for a module id, falling back to the raw id."""
    module = _MODULES_BY_ID.get(module_id)
    return module.name if module else module_id


def list_modules(
    category: ModuleCategory | None = None,
    difficulty: ModuleDifficulty | None = None,
) -> list[ActivityModule]:
    """List roster modules, optionally filtered.

    Args:
        category: Only return modules in this category.
        difficulty: Only return modules at this difficulty.

    Returns:
        Matching modules in roster order.
    """
    modules = [
        module
        for module in MODULE_ROSTER
        if (category is None or module.category == category)
        and (difficulty is None or module.difficulty == difficulty)
    ]
    logger.debug(
        "Listed modules: category=%s, difficulty=%s, count=%d",
        category.value if category else "all",
        difficulty.value if difficulty else "all",
        len(modules),
    )
    return modules
