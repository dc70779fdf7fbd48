# nomad_segments/api/services/segment_service.py
"""Service layer for itinerary segmentation and session management."""

import logging
from typing import Dict, Any, List, Optional, Tuple
from flask import session

from nomad_segments.api.config import get_segmenter_config
from nomad_segments.api.models import Segment, SegmentationResult, parse_itinerary
from nomad_segments.api.segmenter import segment

logger = logging.getLogger(__name__)

SESSION_KEYS = ['current_segments', 'current_destination', 'current_days']


class SegmentService:
    """Validates itinerary payloads and runs the destination segmenter."""

    @staticmethod
    def unpack_payload(payload: Any) -> Tuple[str, List[Any]]:
        """Pull the destination string and raw day list out of a request body.

        Accepts either ``{"destination": ..., "itinerary": [...]}`` or the
        generator's trip object nested one level down under ``"itinerary"``.

        Raises:
            ValueError: If the payload has no usable day list
        """
        if not isinstance(payload, dict):
            raise ValueError("Request body must be a JSON object")

        days = payload.get("itinerary")
        destination = payload.get("destination")

        if isinstance(days, dict):
            destination = days.get("destination", destination)
            days = days.get("itinerary")

        if days is None:
            raise ValueError("Missing 'itinerary' day list")

        if destination is None:
            destination = ""
        if not isinstance(destination, str):
            raise ValueError("Invalid destination parameter")

        return destination, days

    @staticmethod
    def segment_itinerary(payload: Any) -> SegmentationResult:
        """Segment the itinerary carried in ``payload``.

        Args:
            payload: Decoded JSON request body

        Returns:
            Segmentation result

        Raises:
            ValueError: If the payload is malformed or too long
        """
        destination, raw_days = SegmentService.unpack_payload(payload)
        return SegmentService.segment_days(destination, raw_days)

    @staticmethod
    def segment_days(destination: str, raw_days: Any) -> SegmentationResult:
        """Segment an already unpacked day list.

        Raises:
            ValueError: If a day is malformed or the trip is too long
        """
        config = get_segmenter_config()

        days = parse_itinerary(raw_days, config["travel_sentinel"])
        if len(days) > config["max_days"]:
            raise ValueError(f"Itinerary has {len(days)} days; the limit is {config['max_days']}")

        result = segment(days, destination, config["travel_sentinel"])
        logger.info(f"Segmented {len(days)} days for '{destination}' into {len(result)} locations")
        return result

    @staticmethod
    def store_in_session(result: SegmentationResult, destination: str) -> None:
        """Store segmentation output in the Flask session.

        Only the compact summary (names, positions, day range) is kept; the
        day bodies stay with the caller, which keeps the cookie small for
        long trips.

        Args:
            result: Segmentation result
            destination: Destination string it was computed from
        """
        session['current_segments'] = result.to_summary()
        session['current_destination'] = destination
        session['current_days'] = len(result.day_locations)
        session.modified = True
        logger.debug(f"Stored segments in session for {destination}")

    @staticmethod
    def get_from_session() -> Optional[Dict[str, Any]]:
        """Get the last stored segmentation, or None if not found."""
        return session.get('current_segments')

    @staticmethod
    def get_session_info() -> Dict[str, Any]:
        """Get current session information."""
        return {
            'has_segments': 'current_segments' in session,
            'current_destination': session.get('current_destination'),
            'current_days': session.get('current_days')
        }

    @staticmethod
    def clear_session() -> None:
        """Clear segmentation data from session."""
        for key in SESSION_KEYS:
            session.pop(key, None)
        session.modified = True
        logger.debug("Cleared segments from session")

    @staticmethod
    def format_segment_label(segment: Segment) -> str:
        """Format the tab label for one location, e.g. ``Days 1-3 (3 days)``."""
        count = segment.day_count
        noun = "day" if count == 1 else "days"
        if segment.start_day == segment.end_day:
            return f"Day {segment.start_day} ({count} {noun})"
        return f"Days {segment.start_day}-{segment.end_day} ({count} {noun})"

    @staticmethod
    def build_labels(result: SegmentationResult) -> Dict[str, str]:
        return {s.name: SegmentService.format_segment_label(s) for s in result}

    @staticmethod
    def days_for_location(result: SegmentationResult, name: str) -> List[Dict[str, Any]]:
        """Return the days the map should show for one location.

        Raises:
            KeyError: If ``name`` is not one of the result's locations
        """
        return [d.to_dict() for d in result.segments[name].days]

    @staticmethod
    def positions_for_location(summary: Dict[str, Any], name: str) -> List[int]:
        """Return the 1-based day positions for one location of a stored summary.

        Raises:
            KeyError: If ``name`` is not one of the summary's locations
        """
        return list(summary['segments'][name]['dayPositions'])
