# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Engagement aggregation over session records.

Pure functions over an immutable snapshot of the session collection.
Modules appear in the order they are first encountered in the input.
"""

from collections.abc import Sequence

from discoverme.domains.analytics.schemas import ModuleEngagement
from discoverme.domains.tracking.models import SessionRecord


def total_duration(sessions: Sequence[SessionRecord]) -> int:
    """Sum of all session durations in seconds."""
    return sum(session.duration for session in sessions)


def mean_duration(sessions: Sequence[SessionRecord]) -> float:
    """Mean session duration in seconds; 0.0 for no sessions."""
    if not sessions:
        return 0.0
    return total_duration(sessions) / len(sessions)


def aggregate_engagement(sessions: Sequence[SessionRecord]) -> dict[str, ModuleEngagement]:
    """Group sessions by module.

    Args:
        sessions: Session records in any order.

    Returns:
        Mapping of module id to its engagement statistics. Averages are
        plain arithmetic means; every present module has at least one
        session.
    """
    totals: dict[str, list[int]] = {}

    for session in sessions:
        counts = totals.setdefault(session.module_id, [0, 0, 0])
        counts[0] += 1
        counts[1] += session.duration
        counts[2] += session.interactions

    return {
        module_id: ModuleEngagement(
            session_count=count,
            total_time=time_spent,
            total_interactions=interactions,
            average_duration=time_spent / count,
            average_interactions=interactions / count,
        )
        for module_id, (count, time_spent, interactions) in totals.items()
    }


def top_interests(sessions: Sequence[SessionRecord], limit: int = 3) -> list[str]:
    """Modules ranked by session count.

    Args:
        sessions: Session records in any order.
        limit: Maximum number of modules to return.

    Returns:
        Module ids by descending session count; ties keep the order in
        which modules were first encountered.
    """
    counts: dict[str, int] = {}
    for session in sessions:
        counts[session.module_id] = counts.get(session.module_id, 0) + 1

    ranked = sorted(counts, key=counts.__getitem__, reverse=True)
    return ranked[:limit]
