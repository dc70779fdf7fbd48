"""Shared data structures for itinerary segmentation.

The AI generator hands us loosely-shaped JSON days. They are decoded once
into the dataclasses below so the segmenter never has to re-inspect the raw
``_destination`` field or guess at missing keys.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

TRAVEL_DAY_SENTINEL = "travel day"


class OriginKind(Enum):
    EXPLICIT = "explicit"      # _destination names a place
    TRANSITION = "transition"  # _destination is the "Travel Day" sentinel
    UNKNOWN = "unknown"        # no _destination at all


@dataclass(frozen=True)
class Origin:
    """Where a day claims to belong, decoded from ``_destination``."""

    kind: OriginKind
    name: Optional[str] = None


def decode_origin(raw: Optional[str], sentinel: str = TRAVEL_DAY_SENTINEL) -> Origin:
    if not raw:
        return Origin(OriginKind.UNKNOWN)
    if sentinel.lower() in raw.lower():
        return Origin(OriginKind.TRANSITION, raw)
    return Origin(OriginKind.EXPLICIT, raw)


@dataclass
class Activity:
    """A single activity line within a day."""

    description: str
    address: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: Any) -> "Activity":
        # Older generator output sometimes lists activities as bare strings.
        if isinstance(raw, str):
            return cls(description=raw)
        if not isinstance(raw, dict):
            return cls(description=str(raw))
        return cls(
            description=str(raw.get("description") or ""),
            address=str(raw["address"]) if raw.get("address") else None,
        )

    def to_dict(self) -> dict:
        return {"description": self.description, "address": self.address}


@dataclass
class Day:
    """One day of a trip itinerary."""

    day: int  # 1-based label from upstream; display only
    date: str
    title: str
    activities: List[Activity] = field(default_factory=list)
    origin: Origin = field(default_factory=lambda: Origin(OriginKind.UNKNOWN))

    @classmethod
    def from_dict(cls, raw: Dict[str, Any], index: int = 0,
                  sentinel: str = TRAVEL_DAY_SENTINEL) -> "Day":
        try:
            number = int(raw.get("day") or index + 1)
        except (TypeError, ValueError):
            number = index + 1

        hint = raw.get("_destination")
        if hint is not None and not isinstance(hint, str):
            raise ValueError(f"Day at position {index + 1}: _destination must be a string")

        activities = raw.get("activities") or []
        if not isinstance(activities, list):
            raise ValueError(f"Day at position {index + 1}: activities must be a list")

        return cls(
            day=number,
            date=str(raw.get("date") or ""),
            title=str(raw.get("title") or ""),
            activities=[Activity.from_raw(a) for a in activities],
            origin=decode_origin(hint, sentinel),
        )

    def to_dict(self) -> dict:
        data = {
            "day": self.day,
            "date": self.date,
            "title": self.title,
            "activities": [a.to_dict() for a in self.activities],
        }
        if self.origin.name is not None:
            data["_destination"] = self.origin.name
        return data

    def signal_text(self) -> str:
        """Lowercased title plus every activity description and address."""
        parts = [self.title]
        for activity in self.activities:
            parts.append(activity.description)
            parts.append(activity.address or "")
        return " ".join(parts).lower()


# An itinerary is the ordered list of days; position + 1 is the day number.
Itinerary = List[Day]


def parse_itinerary(raw_days: Any, sentinel: str = TRAVEL_DAY_SENTINEL) -> Itinerary:
    """Decode a JSON list of day dicts into ``Day`` objects."""
    if not isinstance(raw_days, list):
        raise ValueError("Itinerary must be a list of days")

    days = []
    for index, raw in enumerate(raw_days):
        if isinstance(raw, Day):
            days.append(raw)
            continue
        if not isinstance(raw, dict):
            raise ValueError(f"Day at position {index + 1} is not an object")
        days.append(Day.from_dict(raw, index, sentinel))
    return days


@dataclass
class Segment:
    """Days grouped under one location name."""

    name: str
    days: List[Day] = field(default_factory=list)
    start_day: int = 0
    end_day: int = 0

    @property
    def day_count(self) -> int:
        return len(self.days)

    @property
    def day_numbers(self) -> List[int]:
        return [d.day for d in self.days]

    def to_dict(self) -> dict:
        return {
            "days": [d.to_dict() for d in self.days],
            "startDay": self.start_day,
            "endDay": self.end_day,
        }


@dataclass
class SegmentationResult:
    """Output of the segmenter.

    ``segments`` is keyed by location name and iterates in ``order``.
    ``day_locations[i]`` is the location assigned to the day at index i.
    """

    segments: Dict[str, Segment] = field(default_factory=dict)
    order: List[str] = field(default_factory=list)
    day_locations: List[str] = field(default_factory=list)

    def __iter__(self):
        return (self.segments[name] for name in self.order)

    def __len__(self) -> int:
        return len(self.order)

    def to_dict(self) -> dict:
        return {
            "segments": {name: self.segments[name].to_dict() for name in self.order},
            "order": list(self.order),
            "dayLocations": list(self.day_locations),
        }

    def positions(self, name: str) -> List[int]:
        """1-based itinerary positions classified under ``name``."""
        if name not in self.segments:
            raise KeyError(name)
        return [i + 1 for i, loc in enumerate(self.day_locations) if loc == name]

    def to_summary(self) -> dict:
        """Compact form without day bodies, small enough for a cookie session."""
        return {
            "segments": {
                name: {
                    "dayPositions": self.positions(name),
                    "startDay": self.segments[name].start_day,
                    "endDay": self.segments[name].end_day,
                }
                for name in self.order
            },
            "order": list(self.order),
        }
