"""Tests for itinerary data structures."""

import pytest

from nomad_segments.api.models import (
    Activity,
    Day,
    Origin,
    OriginKind,
    Segment,
    decode_origin,
    parse_itinerary,
)


class TestDecodeOrigin:
    """Tests for _destination decoding."""

    def test_missing(self):
        assert decode_origin(None) == Origin(OriginKind.UNKNOWN)
        assert decode_origin("") == Origin(OriginKind.UNKNOWN)

    def test_explicit(self):
        assert decode_origin("Japan") == Origin(OriginKind.EXPLICIT, "Japan")

    def test_travel_day_variants(self):
        assert decode_origin("Travel Day").kind is OriginKind.TRANSITION
        assert decode_origin("travel day (flight)").kind is OriginKind.TRANSITION

    def test_custom_sentinel(self):
        assert decode_origin("Transit", sentinel="transit").kind is OriginKind.TRANSITION


class TestDay:
    """Tests for Day decoding."""

    def test_from_dict_full(self):
        day = Day.from_dict({
            "day": 2,
            "date": "2025-06-02",
            "title": "Kyoto temples",
            "activities": [{"description": "Kinkaku-ji", "address": "Kyoto"}],
            "_destination": "Japan",
        })
        assert day.day == 2
        assert day.activities == [Activity("Kinkaku-ji", "Kyoto")]
        assert day.origin == Origin(OriginKind.EXPLICIT, "Japan")

    def test_from_dict_tolerates_missing_fields(self):
        day = Day.from_dict({}, index=4)
        assert day.day == 5
        assert day.title == ""
        assert day.activities == []
        assert day.origin.kind is OriginKind.UNKNOWN

    def test_string_activities(self):
        day = Day.from_dict({"day": 1, "activities": ["Hike"]})
        assert day.activities == [Activity("Hike")]

    def test_signal_text(self):
        day = Day.from_dict({
            "day": 1,
            "title": "Arrival",
            "activities": [
                {"description": "Check in", "address": "Rua Augusta, Lisbon"},
                {"description": "Dinner"},
            ],
        })
        text = day.signal_text()
        assert text == text.lower()
        assert "arrival" in text
        assert "lisbon" in text
        assert "dinner" in text

    def test_to_dict_keeps_hint(self):
        raw = {
            "day": 1,
            "date": "2025-06-01",
            "title": "Paris → Rome",
            "activities": [{"description": "Train", "address": None}],
            "_destination": "Travel Day",
        }
        assert Day.from_dict(raw).to_dict() == raw

    def test_to_dict_without_hint(self):
        assert "_destination" not in Day.from_dict({"day": 1}).to_dict()


class TestParseItinerary:
    """Tests for parse_itinerary."""

    def test_rejects_non_list(self):
        with pytest.raises(ValueError):
            parse_itinerary("day 1")

    def test_rejects_non_object_day(self):
        with pytest.raises(ValueError, match="position 2"):
            parse_itinerary([{"day": 1}, "day 2"])

    def test_accepts_day_objects(self):
        day = Day.from_dict({"day": 1})
        assert parse_itinerary([day]) == [day]


class TestSegment:
    """Tests for Segment serialisation."""

    def test_to_dict_uses_camel_case(self):
        day = Day.from_dict({"day": 1, "title": "Rest"})
        segment = Segment("Peru", [day], 1, 1)
        data = segment.to_dict()
        assert data["startDay"] == 1
        assert data["endDay"] == 1
        assert data["days"] == [day.to_dict()]
        assert segment.day_count == 1


class TestFieldTypes:
    """Tests for loosely typed generator fields."""

    def test_non_string_hint_rejected(self):
        with pytest.raises(ValueError, match="position 3: _destination"):
            Day.from_dict({"day": 3, "_destination": 5}, index=2)

    def test_non_list_activities_rejected(self):
        with pytest.raises(ValueError, match="activities must be a list"):
            Day.from_dict({"day": 1, "activities": {"description": "Hike"}})

    def test_numeric_address_coerced(self):
        day = Day.from_dict({"day": 1, "activities": [{"description": "a", "address": 12}]})
        assert day.activities == [Activity("a", "12")]
        assert "12" in day.signal_text()

    def test_summary_lists_positions(self):
        from nomad_segments.api.segmenter import segment

        days = [Day.from_dict({"day": n, "title": t}, n - 1)
                for n, t in [(1, "Paris"), (2, "Rome"), (3, "Paris")]]
        summary = segment(days, "Paris, Rome").to_summary()
        assert summary["order"] == ["Paris", "Rome"]
        assert summary["segments"]["Paris"] == {"dayPositions": [1, 3], "startDay": 1, "endDay": 3}
