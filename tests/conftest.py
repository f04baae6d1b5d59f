"""
Serve tests/stub_server.py with uvicorn on a free local port for the whole session.
"""

import socket
import threading
import time

import pytest
import uvicorn

from restclient.errors import RestClientError
from restclient.executor import get
from tests.stub_server import app as stub_app


def free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


def wait_for_server(base_url, timeout=10):
    deadline = time.time() + timeout
    while time.time() < deadline:
        try:
            if get(f"{base_url}/health", timeout=1) == {"status": "ok"}:
                return True
        except RestClientError:
            pass
        time.sleep(0.1)
    return False


@pytest.fixture(scope="session")
def base_url():
    port = free_port()
    server = uvicorn.Server(uvicorn.Config(stub_app, host="127.0.0.1", port=port, log_level="warning"))
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()
    url = f"http://127.0.0.1:{port}"
    if not wait_for_server(url):
        server.should_exit = True
        pytest.fail("Stub server did not start in time.")
    yield url
    server.should_exit = True
    thread.join(timeout=5)
