"""Group itinerary days into per-location segments.

The generator tells us where a day belongs in one of three ways, from most
to least reliable:

* an explicit ``_destination`` hint naming the place,
* a "Travel Day" hint, in which case the title arrow says where we arrive,
* nothing at all, in which case the title and activity text are searched.

Days that match nothing continue the previous day's location, or, before
any location is known, are spread evenly over the destination list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from nomad_segments.api.candidates import build_candidates
from nomad_segments.api.matching import (
    extract_transition_target,
    match_in_text,
    match_metadata,
    proportional_candidate,
    substring_either_way,
)
from nomad_segments.api.models import (
    TRAVEL_DAY_SENTINEL,
    Day,
    Itinerary,
    OriginKind,
    Segment,
    SegmentationResult,
    parse_itinerary,
)

logger = logging.getLogger(__name__)

UNKNOWN_LOCATION = "Unknown"


@dataclass
class _Accumulator:
    """State threaded through the day-by-day fold."""

    candidates: Sequence[str]
    total_days: int
    sentinel: str = TRAVEL_DAY_SENTINEL
    current: Optional[str] = None
    guessed: bool = False  # current came from the even-spread fallback
    order: List[str] = field(default_factory=list)
    segments: Dict[str, Segment] = field(default_factory=dict)
    day_locations: List[str] = field(default_factory=list)

    def settle(self, location: str, guessed: bool = False) -> str:
        """Make ``location`` the running location and record first sighting."""
        self.current = location
        self.guessed = guessed
        self.remember(location)
        return location

    def remember(self, location: str) -> None:
        if location not in self.order:
            self.order.append(location)

    def add(self, day: Day, day_number: int, location: str) -> None:
        self.day_locations.append(location)
        group = self.segments.get(location)
        if group is None:
            group = Segment(name=location, start_day=day_number, end_day=day_number)
            self.segments[location] = group
        group.days.append(day)
        group.end_day = day_number

    def result(self) -> SegmentationResult:
        return SegmentationResult(
            segments={name: self.segments[name] for name in self.order},
            order=list(self.order),
            day_locations=list(self.day_locations),
        )


def _first_candidate(acc: _Accumulator) -> str:
    return acc.candidates[0] if acc.candidates else UNKNOWN_LOCATION


def _classify_explicit(acc: _Accumulator, day: Day) -> str:
    hint = day.origin.name or ""
    matched = match_metadata(hint, acc.candidates)
    return acc.settle(hint if matched is None else matched)


def _classify_transition(acc: _Accumulator, day: Day) -> str:
    target = extract_transition_target(day.title)
    if target and acc.sentinel in target.lower():
        target = None

    if target is None:
        location = acc.current or _first_candidate(acc)
        acc.remember(location)
        return location

    matched = substring_either_way(target, acc.candidates)
    return acc.settle(target if matched is None else matched)


def _classify_by_text(acc: _Accumulator, day: Day, day_number: int) -> str:
    matched = match_in_text(day.signal_text(), acc.candidates)
    if matched is not None:
        return acc.settle(matched)

    # Continuation only follows a location some day actually named; a
    # previous even-spread guess is recomputed for this day instead.
    if acc.current and not acc.guessed:
        return acc.current

    fallback = proportional_candidate(day_number, acc.total_days, acc.candidates)
    return acc.settle(fallback if fallback is not None else UNKNOWN_LOCATION,
                      guessed=True)


def classify_day(acc: _Accumulator, day: Day, day_number: int) -> str:
    kind = day.origin.kind
    if kind is OriginKind.EXPLICIT:
        return _classify_explicit(acc, day)
    if kind is OriginKind.TRANSITION:
        return _classify_transition(acc, day)
    return _classify_by_text(acc, day, day_number)


def segment(itinerary: Itinerary, destination: Optional[str],
            sentinel: str = TRAVEL_DAY_SENTINEL) -> SegmentationResult:
    """Partition ``itinerary`` into location segments.

    Args:
        itinerary: Ordered days; list position + 1 is the day number.
        destination: Comma-separated destination string of the trip.

    Returns:
        A ``SegmentationResult`` whose segments iterate in first-seen order.
        A revisited location accumulates into its existing segment.
    """
    if not itinerary:
        return SegmentationResult()

    acc = _Accumulator(candidates=build_candidates(destination),
                       total_days=len(itinerary),
                       sentinel=sentinel.lower())

    for index, day in enumerate(itinerary):
        day_number = index + 1
        location = classify_day(acc, day, day_number)
        logger.debug("Day %d (%s) -> %s", day_number, day.origin.kind.value, location)
        acc.add(day, day_number, location)

    result = acc.result()
    logger.debug(
        "Segmented %d days for %r into %s",
        len(itinerary),
        destination,
        [f"{s.name}: {s.start_day}-{s.end_day}" for s in result],
    )
    return result


def segment_raw(raw_days: Any, destination: Optional[str],
                sentinel: str = TRAVEL_DAY_SENTINEL) -> SegmentationResult:
    """Parse generator JSON and segment it in one step."""
    return segment(parse_itinerary(raw_days, sentinel), destination, sentinel)
