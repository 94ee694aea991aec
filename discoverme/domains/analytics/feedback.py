# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Rule-based feedback insights.

Feedback is produced by an ordered chain of independent rules. Each rule
looks at a precomputed FeedbackContext and either returns one insight or
None; no rule suppresses another. Insights keep rule order, they are not
sorted by confidence.

The chain, in order:
1. welcome: no sessions yet (short-circuits every other rule)
2. focus: mean duration >= 5 minutes, or quick completion under 1 minute
3. favorite_module: module with the most sessions
4. growing_engagement: recent sessions longer than earlier ones
5. active_explorer: most sessions are interaction-heavy
6. try_something_new: first roster module never played

Usage:
    from discoverme.domains.analytics import generate_feedback

    insights = generate_feedback(sessions)
"""

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from discoverme.domains.activity.catalog import MODULE_IDS, module_name
from discoverme.domains.analytics.aggregator import (
    aggregate_engagement,
    mean_duration,
    top_interests,
)
from discoverme.domains.analytics.schemas import (
    FeedbackInsight,
    InsightType,
    ModuleEngagement,
)
from discoverme.domains.tracking.models import SessionRecord

# Rule thresholds
FOCUS_THRESHOLD_SECONDS = 300
QUICK_THRESHOLD_SECONDS = 60
RECENT_WINDOW = 5
MIN_RECENT_SESSIONS = 3
GROWTH_FACTOR = 1.2
ACTIVE_INTERACTIONS = 20
ACTIVE_SESSION_RATIO = 0.7


@dataclass(frozen=True)
class FeedbackContext:
    """Values shared by the feedback rules, computed once per request.

    Attributes:
        sessions: Snapshot of the session collection.
        mean_duration: Mean session duration in seconds.
        engagements: Per-module engagement statistics.
    """

    sessions: tuple[SessionRecord, ...]
    mean_duration: float
    engagements: dict[str, ModuleEngagement] = field(default_factory=dict)

    @classmethod
    def from_sessions(cls, sessions: Sequence[SessionRecord]) -> "FeedbackContext":
        """Build the context for a session snapshot."""
        snapshot = tuple(sessions)
        return cls(
            sessions=snapshot,
            mean_duration=mean_duration(snapshot),
            engagements=aggregate_engagement(snapshot),
        )


@dataclass(frozen=True)
class FeedbackRule:
    """One predicate plus insight factory.

    Attributes:
        name: Stable rule name.
        evaluate: Returns an insight when the rule applies, else None.
    """

    name: str
    evaluate: Callable[[FeedbackContext], FeedbackInsight | None]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def welcome_insight() -> FeedbackInsight:
    """Insight shown before any session has been recorded."""
    return FeedbackInsight(
        type=InsightType.RECOMMENDATION,
        title="Welcome to DiscoverMe!",
        description=(
            "Start exploring activities to see personalized insights "
            "about your learning journey."
        ),
        confidence=1.0,
    )


def focus_insight(context: FeedbackContext) -> FeedbackInsight | None:
    """Long average sessions, or very quick ones."""
    average = context.mean_duration

    if average >= FOCUS_THRESHOLD_SECONDS:
        minutes = _round_half_up(average / 60)
        return FeedbackInsight(
            type=InsightType.ENGAGEMENT,
            title="Excellent Focus!",
            description=(
                f"You're spending an average of {minutes} minutes per session, "
                "showing great concentration."
            ),
            confidence=0.9,
            data={"averageSessionTime": average},
        )

    if average < QUICK_THRESHOLD_SECONDS:
        return FeedbackInsight(
            type=InsightType.ENGAGEMENT,
            title="Quick Learner",
            description="You complete activities quickly! Consider trying more complex challenges.",
            confidence=0.8,
            data={"averageSessionTime": average},
        )

    return None


def favorite_module_insight(context: FeedbackContext) -> FeedbackInsight | None:
    """The module played most often."""
    ranked = top_interests(context.sessions, limit=1)
    if not ranked:
        return None

    top_module = ranked[0]
    session_count = context.engagements[top_module].session_count
    return FeedbackInsight(
        type=InsightType.PREFERENCE,
        title="Favorite Activity",
        description=(
            f"You love {module_name(top_module)}! "
            f"You've played it {session_count} times."
        ),
        confidence=0.85,
        data={"topModule": top_module, "sessionCount": session_count},
    )


def growing_engagement_insight(context: FeedbackContext) -> FeedbackInsight | None:
    """Recent sessions noticeably longer than the ones before them.

    The five most recent sessions by start time are compared with every
    session that precedes them. With no earlier sessions the older mean
    is 0.
    """
    ordered = sorted(context.sessions, key=lambda s: s.start_timestamp, reverse=True)
    recent = ordered[:RECENT_WINDOW]
    older = ordered[RECENT_WINDOW:]

    if len(recent) < MIN_RECENT_SESSIONS:
        return None

    recent_avg = mean_duration(recent)
    older_avg = mean_duration(older)

    if recent_avg <= older_avg * GROWTH_FACTOR:
        return None

    return FeedbackInsight(
        type=InsightType.DEVELOPMENT,
        title="Growing Engagement",
        description="Your recent sessions are longer, showing increased interest and focus!",
        confidence=0.8,
        data={"recentAvgTime": recent_avg, "olderAvgTime": older_avg},
    )


def active_explorer_insight(context: FeedbackContext) -> FeedbackInsight | None:
    """Most sessions have many interactions."""
    total = len(context.sessions)
    active = sum(1 for s in context.sessions if s.interactions > ACTIVE_INTERACTIONS)

    if active <= total * ACTIVE_SESSION_RATIO:
        return None

    return FeedbackInsight(
        type=InsightType.ENGAGEMENT,
        title="Active Explorer",
        description="You interact extensively with activities, showing curiosity and engagement!",
        confidence=0.9,
        data={"highInteractionRatio": active / total},
    )


def try_something_new_insight(context: FeedbackContext) -> FeedbackInsight | None:
    """First roster module that has never been played."""
    played = {session.module_id for session in context.sessions}
    unplayed = [module_id for module_id in MODULE_IDS if module_id not in played]

    if not unplayed:
        return None

    recommended = unplayed[0]
    return FeedbackInsight(
        type=InsightType.RECOMMENDATION,
        title="Try Something New",
        description=f"Explore {module_name(recommended)} for a different type of challenge!",
        confidence=0.7,
        data={"recommendedModule": recommended},
    )


FEEDBACK_RULES: tuple[FeedbackRule, ...] = (
    FeedbackRule("focus", focus_insight),
    FeedbackRule("favorite_module", favorite_module_insight),
    FeedbackRule("growing_engagement", growing_engagement_insight),
    FeedbackRule("active_explorer", active_explorer_insight),
    FeedbackRule("try_something_new", try_something_new_insight),
)


def generate_feedback(
    sessions: Sequence[SessionRecord],
    rules: Sequence[FeedbackRule] = FEEDBACK_RULES,
) -> list[FeedbackInsight]:
    """Run the rule chain over a session snapshot.

    Args:
        sessions: Every stored session.
        rules: Rule chain to evaluate, in order.

    Returns:
        Insights in rule order. An empty collection yields exactly the
        welcome insight.
    """
    if not sessions:
        return [welcome_insight()]

    context = FeedbackContext.from_sessions(sessions)
    insights: list[FeedbackInsight] = []

    for rule in rules:
        insight = rule.evaluate(context)
        if insight is not None:
            insights.append(insight)

    return insights
