"""Streak calculations over activity dates."""

from collections.abc import Iterable
from datetime import date, timedelta

from health_tracker.domain.dashboard import StreakStats

ONE_DAY = timedelta(days=1)


def current_streak(dates: Iterable[date], today: date) -> int:
    """Count consecutive activity days ending today.

    Walks backward from today and stops at the first missing day. Dates after
    today are ignored.
    """
    streak = 0
    expected = today
    for day in sorted(set(dates), reverse=True):
        if day > expected:
            continue
        if day < expected:
            break
        streak += 1
        expected -= ONE_DAY
    return streak


def best_streak(dates: Iterable[date]) -> int:
    """Return the length of the longest run of consecutive days."""
    ordered = sorted(set(dates))
    if not ordered:
        return 0
    best = 1
    running = 1
    for previous, day in zip(ordered, ordered[1:]):
        if day - previous == ONE_DAY:
            running += 1
            best = max(best, running)
        else:
            running = 1
    return best


def calculate_streaks(dates: Iterable[date], today: date) -> StreakStats:
    """Return the current and best streak for a set of activity dates."""
    distinct = set(dates)
    if not distinct:
        return StreakStats(current=0, best=0)
    return StreakStats(
        current=current_streak(distinct, today),
        best=best_streak(distinct),
    )
