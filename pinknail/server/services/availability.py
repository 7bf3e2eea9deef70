"""
Booking slot grid calculations.

Pure helpers that turn the configured slot grid and one day's opening hours
into the list of bookable start times. Times are ``HH:MM`` strings and are
compared as minutes since midnight.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


def to_minutes(clock: str) -> int:
    """Convert ``HH:MM`` into minutes since midnight."""
    hours, minutes = clock.split(":")
    return int(hours) * 60 + int(minutes)


def to_clock(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def build_slot_grid(first_slot: str, last_slot: str, interval_minutes: int) -> List[str]:
    """
    List every slot start from ``first_slot`` to ``last_slot`` inclusive.

    Args:
        first_slot: Earliest start time (HH:MM)
        last_slot: Latest start time (HH:MM)
        interval_minutes: Distance between two consecutive slots

    Returns:
        Slot start times in ascending order
    """
    if interval_minutes <= 0:
        raise ValueError("interval_minutes must be positive")
    start, end = to_minutes(first_slot), to_minutes(last_slot)
    return [to_clock(minute) for minute in range(start, end + 1, interval_minutes)]


def slots_within_hours(
    grid: List[str],
    schedule: Optional[Dict[str, Any]],
    duration_minutes: int,
) -> List[str]:
    """
    Keep the slots of ``grid`` that fit inside one day's opening hours.

    A slot fits when it starts at or after opening and the appointment of
    ``duration_minutes`` ends at or before closing.

    Args:
        grid: Candidate slot start times
        schedule: ``{"openTime", "closeTime", "closed"}`` for the day, or None
            when the day has no entry
        duration_minutes: Length of the appointment

    Returns:
        The fitting slots, or an empty list for a closed day
    """
    if schedule is None or schedule.get("closed"):
        return []
    opens, closes = to_minutes(schedule["openTime"]), to_minutes(schedule["closeTime"])
    return [slot for slot in grid if to_minutes(slot) >= opens and to_minutes(slot) + duration_minutes <= closes]
