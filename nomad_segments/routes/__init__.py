# nomad_segments/routes/__init__.py
from nomad_segments.routes.travel import URL_PREFIX, create_travel_blueprint

__all__ = ['URL_PREFIX', 'create_travel_blueprint']
