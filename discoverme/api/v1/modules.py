# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Activity catalog endpoints.

- GET / - List activity modules, filterable by category and difficulty
- GET /{module_id} - Get one activity module
"""

import logging

from fastapi import APIRouter, HTTPException, Query, status

from discoverme.domains.activity import (
    ActivityModule,
    ModuleCategory,
    ModuleDifficulty,
    UnknownModuleError,
    get_module,
    list_modules,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=list[ActivityModule],
    summary="List modules",
    description="List the activity roster in launcher order.",
)
async def get_modules(
    category: ModuleCategory | None = Query(default=None, description="Filter by category"),
    difficulty: ModuleDifficulty | None = Query(default=None, description="Filter by difficulty"),
) -> list[ActivityModule]:
    """List activity modules."""
    return list_modules(category=category, difficulty=difficulty)


@router.get(
    "/{module_id}",
    response_model=ActivityModule,
    summary="Get module",
)
async def get_module_by_id(module_id: str) -> ActivityModule:
    """Get one activity module.

    Raises:
        HTTPException: 404 if the module is not in the roster.
    """
    try:
        return get_module(module_id)
    except UnknownModuleError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
