"""HTTP server for tests.

Serves a Flask application from a background thread, bound to localhost at a
random port::

    with TestServer.with_root_response("hello from server") as server:
        requests.get(server.url).text  # 'hello from server'
"""

import logging
import threading

from flask import Flask, Response, request
from werkzeug.serving import make_server

logger = logging.getLogger(__name__)

PING_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


class TestServer:
    """Runs `app` until `close` is called or the ``with`` block exits."""
    __test__ = False

    def __init__(self, app: Flask, host: str = "127.0.0.1"):
        self._host = host
        self._server = make_server(host, 0, app, threaded=True)
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)
        self._thread.start()
        self._active = True
        logger.info("test server listening at %s", self.url)

    def __enter__(self) -> "TestServer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def port(self) -> int:
        """Port where the server accepts connections."""
        return self._server.server_port

    @property
    def url(self) -> str:
        return f"http://{self._host}:{self.port}"

    def close(self) -> None:
        """Shut down the server and wait for its thread to finish."""
        if not self._active:
            return
        self._active = False
        self._server.shutdown()
        self._server.server_close()
        self._thread.join()
        logger.info("test server at port %d stopped", self.port)

    @classmethod
    def with_routes(cls, app: Flask) -> "TestServer":
        """Create a server for an application with custom routes."""
        return cls(app)

    @classmethod
    def with_root_response(cls, response: str) -> "TestServer":
        """Create a server whose root route responds with the given text."""
        app = Flask(__name__)

        @app.route("/")
        def root():
            return Response(response, mimetype="text/plain")

        return cls(app)

    @classmethod
    def with_ping_route(cls, route: str) -> "TestServer":
        """Create a server that describes any request made under `route`.

        The response is plain text with ``key: value`` lines for the
        ``method`` and the ``path`` of the request.
        """
        app = Flask(__name__)

        @app.route(f"/{route}", defaults={"subpath": ""}, methods=PING_METHODS)
        @app.route(f"/{route}/<path:subpath>", methods=PING_METHODS)
        def ping(subpath):
            output = [f"method: {request.method}", f"path: {request.path}"]
            return Response("\n".join(output), mimetype="text/plain")

        return cls(app)
