import io
import socket

import pytest

from unidemos.vsock import VsockStream
from unidemos.vsock_demo import echo_loop, main, print_loop


@pytest.fixture
def pair():
    left, right = socket.socketpair()
    yield VsockStream(left), right
    left.close()
    right.close()


def test_echo_loop_echoes_and_prints(pair):
    stream, peer = pair
    peer.sendall(b"hello\n")
    peer.shutdown(socket.SHUT_WR)
    out = io.StringIO()
    received = echo_loop(stream, out)
    assert received == b"hello\n"
    assert out.getvalue() == "hello\n"
    echoed = bytearray()
    while len(echoed) < len(received):
        echoed += peer.recv(100)
    assert bytes(echoed) == received


def test_echo_loop_reports_read_error(pair):
    stream, _ = pair
    stream.close()
    out = io.StringIO()
    assert echo_loop(stream, out) == b""
    assert out.getvalue().startswith("read err")


def test_print_loop_stops_on_exit(pair):
    stream, peer = pair
    peer.sendall(b"exit\n")
    out = io.StringIO()
    assert print_loop(stream, out) == ["exit\n"]
    assert out.getvalue() == "exit\n"


def test_print_loop_stops_at_end_of_stream(pair):
    stream, peer = pair
    peer.sendall(b"abc")
    peer.shutdown(socket.SHUT_WR)
    out = io.StringIO()
    messages = print_loop(stream, out)
    assert "".join(messages) == "abc"
    assert out.getvalue() == "abc"


def test_main_rejects_bad_port():
    with pytest.raises(ValueError):
        main(["--port", "-1"])


def test_main_client_rejects_bad_cid():
    with pytest.raises(ValueError):
        main(["--client", "--cid", "-5"])