#!/usr/bin/env python3
"""
Server Lifecycle - StubServer start/stop controller.

Runs the dispatcher's Flask app on a Werkzeug WSGI server owned by one
dedicated thread, with a blocking handshake in both directions:

- start() returns only after the serving thread has bound the port
- stop() returns only after the serving thread has closed the socket

The serving thread polls the server in bounded steps (poll_interval)
and checks the stop event between steps, so stop() takes at most one
poll interval plus the request in flight.

Import from: httpstub.server.lifecycle
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from werkzeug.serving import WSGIRequestHandler, make_server

from httpstub.core.config import StubServerConfig
from httpstub.core.constants import RAW_HEADERS_ENVIRON_KEY, SERVER_THREAD_NAME
from httpstub.core.types import ServerStartError, ServerState, ServerStateError
from httpstub.server.dispatcher import create_app

__all__ = ['StubServer']

logger = logging.getLogger("httpstub.server.lifecycle")
access_logger = logging.getLogger("httpstub.server.access")


class _AccessLogHandler(WSGIRequestHandler):
    """Send Werkzeug's per-request lines to logging instead of stderr.

    Also keeps the request headers exactly as received (case, order,
    repeats) in the environ, since the WSGI environ normalises them.
    """

    def make_environ(self):
        environ = super().make_environ()
        environ[RAW_HEADERS_ENVIRON_KEY] = list(self.headers.items())
        return environ

    def log(self, type, message, *args):
        level = logging.ERROR if type == 'error' else logging.DEBUG
        access_logger.log(level, "%s - " + message, self.address_string(), *args)


class StubServer:
    """Canned-response HTTP server running on a background thread.

    Usage:
        server = StubServer()              # 127.0.0.1:8080
        server.start()                     # Blocks until listening
        requests.get(server.base_url + '/hello.html')
        server.stop()                      # Blocks until the port is free

    Also usable as a context manager. Calling start() twice or stop()
    without start() raises ServerStateError.
    """

    def __init__(self, config: Optional[StubServerConfig] = None):
        self.config = config or StubServerConfig()
        self.app = create_app(self.config)

        self._lock = threading.Lock()
        self._state = ServerState.STOPPED
        self._thread: Optional[threading.Thread] = None
        self._stop_requested = threading.Event()   # keep-running guard
        self._listening = threading.Event()
        self._stopped = threading.Event()
        self._error: Optional[BaseException] = None
        self._port = self.config.port

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def state(self) -> ServerState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is ServerState.RUNNING

    @property
    def port(self) -> int:
        """Bound port once started (resolves port 0), else the configured one."""
        return self._port

    @property
    def base_url(self) -> str:
        return f"http://{self.config.host}:{self._port}"

    def get_base_url(self) -> str:
        return self.base_url

    # =========================================================================
    # START / STOP
    # =========================================================================

    def start(self) -> None:
        """Start serving and block until the port accepts connections."""
        with self._lock:
            if self._state is not ServerState.STOPPED:
                raise ServerStateError(
                    f"Cannot start: server is {self._state.name.lower()}")
            self._state = ServerState.STARTING
            self._error = None
            self._stop_requested.clear()
            self._listening.clear()
            self._stopped.clear()
            self._thread = threading.Thread(
                target=self._serve,
                name=SERVER_THREAD_NAME,
                daemon=True,
            )
            self._thread.start()

        if not self._listening.wait(self.config.start_timeout):
            self._stop_requested.set()
            self._thread.join(self.config.start_timeout)
            self._reset()
            raise ServerStartError(
                f"Server did not start listening within {self.config.start_timeout}s")

        if self._error is not None:
            error = self._error
            self._thread.join()
            self._reset()
            logger.error("Cannot start stub server on %s:%d: %s",
                         self.config.host, self.config.port, error)
            raise ServerStartError(
                f"Cannot start server on {self.config.host}:{self.config.port}") from error

        with self._lock:
            self._state = ServerState.RUNNING
        logger.info("Stub server listening on %s", self.base_url)

    def stop(self) -> None:
        """Stop serving and block until the socket is closed."""
        with self._lock:
            if self._state is not ServerState.RUNNING:
                raise ServerStateError(
                    f"Cannot stop: server is {self._state.name.lower()}")
            self._state = ServerState.STOPPING
            self._stop_requested.set()

        self._stopped.wait()
        self._thread.join()
        self._reset()
        logger.info("Stub server stopped")

    def _reset(self) -> None:
        with self._lock:
            self._thread = None
            self._state = ServerState.STOPPED

    # =========================================================================
    # SERVING THREAD
    # =========================================================================

    def _serve(self) -> None:
        try:
            server = make_server(
                self.config.host,
                self.config.port,
                self.app,
                threaded=False,
                request_handler=_AccessLogHandler,
            )
        except (Exception, SystemExit) as e:
            # Werkzeug reports bind failures with sys.exit(1)
            self._error = e
            self._listening.set()
            return

        server.timeout = self.config.poll_interval
        self._port = server.server_port
        self._listening.set()

        try:
            while not self._stop_requested.is_set():
                server.handle_request()
        finally:
            server.server_close()
            self._stopped.set()

    # =========================================================================
    # CONTEXT MANAGER
    # =========================================================================

    def __enter__(self) -> "StubServer":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
