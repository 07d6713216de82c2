"""HTTP server that serves files from a directory and echoes POST bodies."""

import argparse
import sys
from dataclasses import dataclass, field
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from urllib.parse import urlsplit

PORT = 9975
ROOT_DIR = "/tmp/data"

_CONTENT_TYPES = {
    "gif": "image/gif",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "pdf": "application/pdf",
    "htm": "text/html; charset=utf8",
    "html": "text/html; charset=utf8",
    "txt": "text/plain; charset=utf8",
    "css": "text/css; charset=utf8",
}


@dataclass
class Response:
    """An HTTP response: status code, headers and body."""

    status: int = HTTPStatus.OK
    headers: dict = field(default_factory=dict)
    body: bytes = b""


def _text_response(data):
    return Response(
        HTTPStatus.OK,
        {"Content-Type": "text/plain; charset=utf8", "content-length": str(len(data))},
        bytes(data),
    )


def _not_found():
    return Response(HTTPStatus.NOT_FOUND)


def get_content_type(path):
    """Content type for a file, chosen by its extension."""
    suffix = Path(path).suffix
    if not suffix:
        return "text/plain"
    return _CONTENT_TYPES.get(suffix[1:], "text/plain; charset=utf8")


def route(method, path, body=b"", root_dir=ROOT_DIR):
    """Answer one request.

    GET serves ``root_dir`` joined with the path (``/`` means ``/index.html``),
    POST ``/echo`` returns the body, and anything else is 404.
    """
    if method == "GET":
        file_path = Path(str(root_dir) + ("/index.html" if path == "/" else path))
        try:
            data = file_path.read_bytes()
        except OSError:
            return _not_found()
        return Response(
            HTTPStatus.OK,
            {"Content-Type": get_content_type(file_path), "content-length": str(len(data))},
            data,
        )
    if method == "POST" and path == "/echo":
        return _text_response(body)
    return _not_found()


class _Handler(BaseHTTPRequestHandler):
    protocol_version = "HTTP/1.1"

    def _dispatch(self):
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length) if length else b""
        response = route(self.command, urlsplit(self.path).path, body, self.server.root_dir)
        self.send_response(response.status)
        for name, value in response.headers.items():
            self.send_header(name, value)
        if not any(name.lower() == "content-length" for name in response.headers):
            self.send_header("Content-Length", str(len(response.body)))
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(response.body)

    do_GET = do_POST = do_PUT = do_DELETE = do_PATCH = do_HEAD = _dispatch

    def log_message(self, format, *args):
        print(f"{self.address_string()} - {format % args}", file=sys.stderr)


def serve(host="0.0.0.0", port=PORT, root_dir=ROOT_DIR):
    """Serve requests forever."""
    with ThreadingHTTPServer((host, port), _Handler) as server:
        server.root_dir = root_dir
        print(f"Listening on http://{host}:{port}")
        server.serve_forever()


def main(argv=None):
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=PORT)
    parser.add_argument("--root", default=ROOT_DIR)
    args = parser.parse_args(argv)
    serve(args.host, args.port, args.root)
    return 0


if __name__ == "__main__":
    sys.exit(main())