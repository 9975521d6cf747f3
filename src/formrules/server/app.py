"""Starlette app factory."""

from __future__ import annotations

from starlette.applications import Starlette

from formrules.server.routes_forms import routes as form_routes
from formrules.server.routes_system import routes as system_routes


def create_app() -> Starlette:
    """Create the HTTP API exposing form evaluation and rule validation."""
    return Starlette(routes=system_routes + form_routes)
