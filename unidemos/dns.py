"""Resolve a host name to its first IPv4 and IPv6 addresses."""

import argparse
import ipaddress
import socket
import sys

DEFAULT_NAME = "rust-lang.org"


def _first_address(name, family):
    infos = socket.getaddrinfo(name, None, family=family, type=socket.SOCK_STREAM)
    if not infos:
        raise OSError(f"no address found for {name}")
    host = infos[0][4][0].split("%", 1)[0]
    return ipaddress.ip_address(host)


def lookup(name):
    """Return the first IPv4 and the first IPv6 address of ``name``.

    Raises OSError when either lookup fails.
    """
    return _first_address(name, socket.AF_INET), _first_address(name, socket.AF_INET6)


def main(argv=None):
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("name", nargs="?", default=DEFAULT_NAME)
    args = parser.parse_args(argv)
    print(f"Search address of {args.name}...")
    ipv4, ipv6 = lookup(args.name)
    print(f"IPv4 address {ipv4}")
    print(f"IPv6 address {ipv6}")
    return 0


if __name__ == "__main__":
    sys.exit(main())