"""Minimal TCP reader and UDP echo servers for exercising the network stack."""

import argparse
import socket
import sys

PORT = 9975
_BUFFER = 1000


def tcp_reader(host="0.0.0.0", port=PORT):
    """Accept one connection and print what it sends until it closes.

    Returns all bytes received.
    """
    received = bytearray()
    with socket.create_server((host, port)) as listener:
        connection, _ = listener.accept()
        with connection:
            while True:
                print("about to read")
                try:
                    chunk = connection.recv(_BUFFER)
                except OSError as err:
                    print(f"read err {err!r}")
                    break
                print(f"read {chunk.decode('utf-8')}", end="")
                if not chunk:
                    break
                received += chunk
    return bytes(received)


def _format_addr(addr):
    host, port = addr[0], addr[1]
    return f"[{host}]:{port}" if ":" in host else f"{host}:{port}"


def describe_datagram(msg, addr):
    """Describe a received message, without one trailing newline, and its sender."""
    shown = msg[:-1] if msg.endswith("\n") else msg
    return f'received "{shown}" from {_format_addr(addr)}'


def udp_echo(host="0.0.0.0", port=PORT):
    """Echo datagrams back until one starts with ``exit``; return the messages."""
    messages = []
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.bind((host, port))
        while True:
            try:
                data, addr = sock.recvfrom(_BUFFER)
            except OSError as err:
                print(f"recv function failed: {err!r}")
                break
            msg = data.decode("utf-8")
            print(describe_datagram(msg, addr))
            messages.append(msg)
            sock.sendto(msg.encode("utf-8"), addr)
            if msg.startswith("exit"):
                break
    return messages


def main(argv=None):
    """Command-line entry point: ``tcp`` or ``udp``."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("protocol", choices=("tcp", "udp"))
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=PORT)
    args = parser.parse_args(argv)
    if args.protocol == "tcp":
        tcp_reader(args.host, args.port)
    else:
        udp_echo(args.host, args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())