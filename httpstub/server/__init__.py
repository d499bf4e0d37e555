"""
httpstub Server - HTTP-facing layer over Flask/Werkzeug

Classes and modules:
- handlers   : One function per canned route
- auth       : Basic-auth gate and 401 challenge
- dispatcher : Route table, two-phase dispatch, Flask app factory
- lifecycle  : StubServer start/stop controller (background thread)
"""

from httpstub.server.dispatcher import ROUTES, Route, create_app
from httpstub.server.lifecycle import StubServer

__all__ = [
    'ROUTES',
    'Route',
    'create_app',
    'StubServer',
]
