"""HTTPS echo service: a help page at ``/`` and an echo at ``POST /echo``."""

import argparse
import ssl
import sys
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

from unidemos.webserver import Response

PORT = 9975
HELP_TEXT = "Hello from the TLS server! 🦀\nTry POST /echo"


def echo(method, path, body=b""):
    """Answer one request: help text, echo, or 404."""
    if method == "GET" and path == "/":
        data = HELP_TEXT.encode("utf-8")
    elif method == "POST" and path == "/echo":
        data = bytes(body)
    else:
        return Response(HTTPStatus.NOT_FOUND)
    return Response(
        HTTPStatus.OK,
        {"Content-Type": "text/plain; charset=utf8", "content-length": str(len(data))},
        data,
    )


def make_ssl_context(certfile, keyfile):
    """Server-side TLS context loaded with a certificate chain and private key."""
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
    context.load_cert_chain(certfile, keyfile)
    context.set_alpn_protocols(["http/1.1", "http/1.0"])
    return context


class _Handler(BaseHTTPRequestHandler):
    protocol_version = "HTTP/1.1"

    def _dispatch(self):
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length) if length else b""
        response = echo(self.command, urlsplit(self.path).path, body)
        self.send_response(response.status)
        for name, value in response.headers.items():
            self.send_header(name, value)
        if not response.headers:
            self.send_header("Content-Length", "0")
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(response.body)

    do_GET = do_POST = do_PUT = do_DELETE = do_PATCH = do_HEAD = _dispatch

    def log_message(self, format, *args):
        print(f"{self.address_string()} - {format % args}", file=sys.stderr)


class _TLSServer(ThreadingHTTPServer):
    def get_request(self):
        try:
            return super().get_request()
        except ssl.SSLError as err:
            print(f"failed to perform tls handshake: {err}", file=sys.stderr)
            raise


def serve(host="0.0.0.0", port=PORT, certfile="sample.pem", keyfile="sample.rsa"):
    """Serve HTTPS forever."""
    context = make_ssl_context(certfile, keyfile)
    print(f"Starting to serve on https://{host}:{port}")
    with _TLSServer((host, port), _Handler) as server:
        server.socket = context.wrap_socket(server.socket, server_side=True)
        server.serve_forever()


def main(argv=None):
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("certfile")
    parser.add_argument("keyfile")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=PORT)
    args = parser.parse_args(argv)
    serve(args.host, args.port, args.certfile, args.keyfile)
    return 0


if __name__ == "__main__":
    sys.exit(main())