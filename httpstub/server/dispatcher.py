#!/usr/bin/env python3
"""
Request Dispatcher - route table and Flask application factory.

Dispatch runs in two phases for every request:

1. Auth phase: a before_request hook looks up the route for the path
   and runs its auth predicate. Unprotected and unknown paths pass.
   A failed check answers 401 with a Basic challenge.
2. Request phase: Flask's URL map matches the exact path and calls the
   route's handler. Unknown paths get Flask's default 404.

Import from: httpstub.server.dispatcher
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from flask import Flask, Response, request as flask_request

from httpstub.core.config import StubServerConfig
from httpstub.core.constants import ROUTE_METHODS
from httpstub.core.types import CannedResponse
from httpstub.server import handlers
from httpstub.server.auth import allow_all, check_basic_auth, challenge

__all__ = [
    'Route',
    'ROUTES',
    'StubResponse',
    'find_route',
    'authenticate',
    'to_response',
    'create_app',
]

logger = logging.getLogger("httpstub.server.dispatcher")


@dataclass(frozen=True)
class Route:
    """One canned endpoint: exact path, handler, and auth predicate."""
    path: str
    handler: Callable
    auth: Callable = allow_all


ROUTES: List[Route] = [
    Route('/hello.html', handlers.hello),
    Route('/basic_auth.html', handlers.header_reflect, auth=check_basic_auth),
    Route('/basic.json', handlers.basic_json),
    Route('/header_reflect.html', handlers.header_reflect),
    Route('/temporary_redirect.html', handlers.temporary_redirect),
    Route('/permanent_redirect.html', handlers.permanent_redirect),
    Route('/two_redirects.html', handlers.two_redirects),
    Route('/url_post.html', handlers.url_post),
]


class StubResponse(Response):
    """Response that only carries the headers a handler asked for."""
    default_mimetype = None


def find_route(path: str, routes: Optional[List[Route]] = None) -> Optional[Route]:
    """First route whose path equals `path` exactly."""
    for route in ROUTES if routes is None else routes:
        if route.path == path:
            return route
    return None


def authenticate(request, config: StubServerConfig,
                 routes: Optional[List[Route]] = None) -> bool:
    """Auth phase. True lets the request through to routing."""
    route = find_route(request.path, routes)
    if route is None:
        return True
    return route.auth(request, config)


def to_response(canned: CannedResponse) -> StubResponse:
    return StubResponse(canned.body, status=canned.status, headers=canned.headers)


def create_app(config: Optional[StubServerConfig] = None,
               routes: Optional[List[Route]] = None) -> Flask:
    """Build the Flask application serving `routes` (default ROUTES)."""
    config = config or StubServerConfig()
    routes = ROUTES if routes is None else routes

    app = Flask(__name__)

    @app.before_request
    def auth_phase():
        if not authenticate(flask_request, config, routes):
            logger.debug("401 %s %s", flask_request.method, flask_request.path)
            return to_response(challenge(config))
        return None

    for route in routes:
        app.add_url_rule(
            route.path,
            endpoint=route.path,
            view_func=_make_view(route),
            methods=ROUTE_METHODS,
        )

    return app


def _make_view(route: Route):
    def view():
        return to_response(route.handler(flask_request))
    view.__name__ = route.handler.__name__
    return view
