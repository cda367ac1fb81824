import http.server
import json
import socketserver
import sys
import threading
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    monkeypatch.delenv("MINICURL_TIMEOUT", raising=False)
    yield


class EchoHandler(http.server.BaseHTTPRequestHandler):
    """Echo request headers as JSON on ``/headers`` and request bodies on POST."""

    def _reply(self, body: bytes, content_type: str) -> None:
        self.send_response(200)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def do_GET(self) -> None:  # noqa: N802 - required by BaseHTTPRequestHandler
        if self.path.startswith("/headers"):
            # http.client decodes header bytes as latin-1; undo that to recover UTF-8.
            headers = {
                key: value.encode("iso-8859-1").decode("utf-8") for key, value in self.headers.items()
            }
            self._reply(json.dumps(headers, ensure_ascii=False).encode("utf-8"), "application/json")
            return
        self._reply(b"treasure map", "text/plain")

    def do_POST(self) -> None:  # noqa: N802
        length = int(self.headers.get("Content-Length", "0"))
        self._reply(self.rfile.read(length), self.headers.get("Content-Type", "text/plain"))

    def log_message(self, format: str, *args) -> None:  # noqa: N802
        return


@pytest.fixture(scope="module")
def echo_server() -> str:
    server = socketserver.TCPServer(("127.0.0.1", 0), EchoHandler)
    server.allow_reuse_address = True
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address
    yield f"http://{host}:{port}"
    server.shutdown()
    server.server_close()
