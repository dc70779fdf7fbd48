# nomad_segments/routes/travel.py
"""Travel routes and blueprint configuration."""

import logging
from flask import Blueprint, jsonify, request

from nomad_segments.api.services.segment_service import SegmentService

logger = logging.getLogger(__name__)

URL_PREFIX = "/travel"


def create_travel_blueprint():
    """Create and configure the travel blueprint.

    Returns:
        Configured Flask Blueprint
    """
    travel_bp = Blueprint("travel", __name__, url_prefix=URL_PREFIX)

    @travel_bp.route("/api/segments", methods=["GET", "POST", "DELETE"])
    def api_segments():
        """Segment a new itinerary, or retrieve / clear the last one."""
        if request.method == "POST":
            data = request.get_json(silent=True)

            try:
                destination, raw_days = SegmentService.unpack_payload(data)
                result = SegmentService.segment_days(destination, raw_days)
            except ValueError as e:
                logger.warning(f"Rejected segmentation request: {e}")
                return jsonify({"error": str(e)}), 400

            SegmentService.store_in_session(result, destination)

            body = result.to_dict()
            body["labels"] = SegmentService.build_labels(result)
            return jsonify(body)

        if request.method == "DELETE":
            SegmentService.clear_session()
            return jsonify({"status": "cleared"})

        stored = SegmentService.get_from_session()
        if stored:
            return jsonify(stored)
        return jsonify({"error": "No itinerary has been segmented yet"}), 404

    @travel_bp.route("/api/segments/<path:name>/days")
    def api_segment_days(name):
        """Return the day positions for one location, for the map panel."""
        stored = SegmentService.get_from_session()
        if not stored:
            return jsonify({"error": "No itinerary has been segmented yet"}), 404

        try:
            positions = SegmentService.positions_for_location(stored, name)
        except KeyError:
            return jsonify({"error": f"Unknown location: {name}"}), 404

        return jsonify({"location": name, "dayPositions": positions})

    @travel_bp.route("/api/session")
    def api_session():
        """Describe what the current session holds."""
        return jsonify(SegmentService.get_session_info())

    @travel_bp.route("/health")
    def health():
        """Health check endpoint."""
        return jsonify({"status": "ok", "service": "segments"})

    return travel_bp


__all__ = ['URL_PREFIX', 'create_travel_blueprint']
