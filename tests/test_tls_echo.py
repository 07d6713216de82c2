import pytest

from unidemos.tls_echo import HELP_TEXT, echo, make_ssl_context


def test_help_page():
    response = echo("GET", "/")
    assert response.status == 200
    assert response.body.decode("utf-8") == HELP_TEXT
    assert response.body.decode("utf-8").endswith("Try POST /echo")
    assert response.headers["content-length"] == str(len(response.body))
    assert response.headers["Content-Type"] == "text/plain; charset=utf8"


def test_echo_round_trip():
    payload = "Hello World".encode("utf-8")
    response = echo("POST", "/echo", payload)
    assert response.status == 200
    assert response.body == payload
    assert response.headers["content-length"] == str(len(payload))


@pytest.mark.parametrize("method, path", [("GET", "/echo"), ("PUT", "/"), ("POST", "/")])
def test_unknown_routes_are_404(method, path):
    response = echo(method, path, b"data")
    assert response.status == 404
    assert response.body == b""


def test_missing_certificate(tmp_path):
    with pytest.raises(OSError):
        make_ssl_context(tmp_path / "missing.pem", tmp_path / "missing.key")