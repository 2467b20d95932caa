"""Run the API in a background uvicorn server that can be started and stopped in-process.

Used by integration tests (and anything else embedding the service) to bring a
real HTTP server up and down around a block of work:

    with RecipeServer(create_app(), port=0) as server:
        httpx.get(f"{server.url}/recipes")
"""
import logging
import threading
import time
from typing import Optional

import uvicorn
from fastapi import FastAPI

logger = logging.getLogger(__name__)


class RecipeServer:
    """Uvicorn server running `app` on a daemon thread.

    With ``port=0`` uvicorn binds an ephemeral port; ``port`` and ``url`` hold
    the bound port once ``start()`` returns.
    """

    def __init__(self, app: FastAPI, host: str = "127.0.0.1", port: int = 8080,
                 log_level: str = "warning", startup_timeout: float = 10.0):
        self.app = app
        self.host = host
        self._requested_port = port
        self.port = port
        self.log_level = log_level
        self.startup_timeout = startup_timeout
        self._server: Optional[uvicorn.Server] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> "RecipeServer":
        """Start serving and block until the server accepts connections."""
        if self.running:
            raise RuntimeError("server already running")
        config = uvicorn.Config(self.app, host=self.host, port=self._requested_port,
                                log_level=self.log_level, lifespan="on")
        self._server = uvicorn.Server(config)
        self._thread = threading.Thread(target=self._server.run, name="recipe-server", daemon=True)
        self._thread.start()

        deadline = time.monotonic() + self.startup_timeout
        while not self._server.started:
            if not self._thread.is_alive():
                raise RuntimeError(f"server failed to start on {self.url}")
            if time.monotonic() > deadline:
                self.stop()
                raise TimeoutError(f"server did not start within {self.startup_timeout}s")
            time.sleep(0.01)
        self.port = self._server.servers[0].sockets[0].getsockname()[1]
        logger.info("Recipe server listening on %s", self.url)
        return self

    def stop(self) -> None:
        """Ask the server to exit and wait for its thread to finish."""
        if self._server is None or self._thread is None:
            return
        self._server.should_exit = True
        self._thread.join(timeout=self.startup_timeout)
        logger.info("Recipe server on %s stopped", self.url)
        self._server = None
        self._thread = None

    def __enter__(self) -> "RecipeServer":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
