"""Shared fixtures for segmenter tests."""

import pytest

from nomad_segments.api.models import Day


@pytest.fixture
def make_day():
    """Build a ``Day`` from the generator's JSON shape with sensible defaults."""

    def _make(number, title="Rest", activities=None, destination=None, date=""):
        raw = {
            "day": number,
            "date": date or f"2025-06-{number:02d}",
            "title": title,
            "activities": activities or [],
        }
        if destination is not None:
            raw["_destination"] = destination
        return Day.from_dict(raw, number - 1)

    return _make


@pytest.fixture
def app():
    from main import app as flask_app

    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
