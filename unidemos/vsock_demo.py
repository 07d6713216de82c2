"""Virtio socket demo: an echo server, or a client that prints what it receives."""

import argparse
import sys

from unidemos.vsock import VsockAddr, VsockListener, VsockStream

PORT = 9975
HOST_CID = 2
_BUFFER = 1000


def _write_all(stream, data):
    view = memoryview(data)
    while view:
        view = view[stream.write(view):]


def echo_loop(stream, out=None):
    """Print what the stream sends and send it back, until it closes or fails.

    Returns all bytes received.
    """
    out = sys.stdout if out is None else out
    received = bytearray()
    while True:
        try:
            chunk = stream.read(_BUFFER)
        except OSError as err:
            print(f"read err {err!r}", file=out)
            break
        out.write(chunk.decode("utf-8"))
        if not chunk:
            break
        received += chunk
        _write_all(stream, chunk)
    return bytes(received)


def print_loop(stream, out=None):
    """Print what the stream sends until a message reads ``exit`` or it closes.

    Returns the messages received.
    """
    out = sys.stdout if out is None else out
    messages = []
    while True:
        try:
            chunk = stream.read(_BUFFER)
        except OSError as err:
            print(f"read err {err!r}", file=out)
            break
        if not chunk:
            break
        msg = chunk.decode("utf-8")
        out.write(msg)
        messages.append(msg)
        if msg.strip() == "exit":
            break
    return messages


def main(argv=None):
    """Run the echo server, or with ``--client`` connect to the host and print."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--client", action="store_true")
    parser.add_argument("--cid", type=int, default=HOST_CID)
    parser.add_argument("--port", type=int, default=PORT)
    args = parser.parse_args(argv)

    if args.client:
        addr = VsockAddr(args.cid, args.port)
        with VsockStream.connect(addr) as stream:
            print_loop(stream)
    else:
        with VsockListener.bind(args.port) as listener:
            stream, _ = listener.accept()
            print("Try to read from vsock stream...")
            with stream:
                echo_loop(stream)
    return 0


if __name__ == "__main__":
    sys.exit(main())