# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Activity catalog domain.

Provides the fixed roster of activity modules and lookup helpers.
"""

from discoverme.domains.activity.catalog import (
    MODULE_IDS,
    MODULE_ROSTER,
    ActivityModule,
    ModuleCategory,
    ModuleDifficulty,
    UnknownModuleError,
    get_module,
    list_modules,
    module_name,
)

__all__ = [
    "ActivityModule",
    "ModuleCategory",
    "ModuleDifficulty",
    "UnknownModuleError",
    "MODULE_ROSTER",
    "MODULE_IDS",
    "get_module",
    "list_modules",
    "module_name",
]
