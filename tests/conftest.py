import io
import threading

import pytest
from werkzeug.serving import make_server

import mock_service
from console import Console


@pytest.fixture(autouse=True)
def fresh_store():
    mock_service.reset_store()
    yield


@pytest.fixture
def service_url():
    server = make_server("127.0.0.1", 0, mock_service.app, threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_port}"
    finally:
        server.shutdown()
        thread.join(timeout=5)


def make_console(*lines):
    stdin = io.StringIO("".join(line + "\n" for line in lines))
    return Console(stdin=stdin, stdout=io.StringIO())


@pytest.fixture
def console_factory():
    return make_console
