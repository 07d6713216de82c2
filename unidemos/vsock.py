"""Virtio socket listener and stream, shaped like TCP listeners and streams."""

import errno
import socket
from dataclasses import dataclass

VMADDR_CID_ANY = getattr(socket, "VMADDR_CID_ANY", 0xFFFFFFFF)
BACKLOG = 128
_U32_MAX = 0xFFFFFFFF
_AF_VSOCK = getattr(socket, "AF_VSOCK", None)


def _check_u32(name, value):
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"{name} must be an unsigned 32-bit integer, got {value}")


def _new_socket():
    if _AF_VSOCK is None:
        raise OSError(errno.EAFNOSUPPORT, "virtio sockets are not supported on this platform")
    return socket.socket(_AF_VSOCK, socket.SOCK_STREAM)


@dataclass(frozen=True)
class VsockAddr:
    """A virtio socket address: context id and port."""

    cid: int
    port: int

    def __post_init__(self):
        _check_u32("cid", self.cid)
        _check_u32("port", self.port)

    def as_tuple(self):
        """The address in the form the socket module expects."""
        return (self.cid, self.port)


class VsockStream:
    """A connected virtio socket."""

    def __init__(self, sock):
        self._sock = sock

    @classmethod
    def connect(cls, addr):
        """Open a stream connected to ``addr``."""
        sock = _new_socket()
        try:
            sock.connect(addr.as_tuple())
        except BaseException:
            sock.close()
            raise
        return cls(sock)

    def read(self, size=4096):
        """Read at most ``size`` bytes; an empty result means the peer is done."""
        return self._sock.recv(size)

    def write(self, data):
        """Write some of ``data`` and return how many bytes were written."""
        return self._sock.send(data)

    def fileno(self):
        return self._sock.fileno()

    def close(self):
        """Close the stream."""
        self._sock.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


class VsockListener:
    """A virtio socket server, listening for connections."""

    def __init__(self, sock):
        self._sock = sock

    @classmethod
    def bind(cls, port):
        """Bind to ``port`` on any context id and start listening."""
        _check_u32("port", port)
        sock = _new_socket()
        try:
            sock.bind((VMADDR_CID_ANY, port))
            sock.listen(BACKLOG)
        except BaseException:
            sock.close()
            raise
        return cls(sock)

    def accept(self):
        """Wait for a connection and return the stream and the peer address."""
        conn, (cid, port) = self._sock.accept()
        return VsockStream(conn), VsockAddr(cid, port)

    def fileno(self):
        return self._sock.fileno()

    def close(self):
        """Stop listening."""
        self._sock.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()