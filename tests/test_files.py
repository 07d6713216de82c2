import pytest

from unidemos import files


def test_read_dir_lists_entries(tmp_path):
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "sub").mkdir()
    entries = files.read_dir(tmp_path)
    assert set(entries) == {tmp_path / "a.txt", tmp_path / "sub"}


def test_read_dir_empty_raises(tmp_path):
    with pytest.raises(ValueError):
        files.read_dir(tmp_path)


def test_read_dir_on_file_raises(tmp_path):
    target = tmp_path / "plain"
    target.write_text("x")
    with pytest.raises(NotADirectoryError):
        files.read_dir(target)


def test_read_version_returns_contents(tmp_path, capsys):
    version = tmp_path / "version"
    version.write_text("kernel 1\n")
    assert files.read_version(version) == "kernel 1\n"
    assert "contains 'kernel 1\\n'" in capsys.readouterr().err


def test_read_version_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        files.read_version(tmp_path / "missing")


def test_write_and_read_round_trip(tmp_path):
    target = tmp_path / "hello.txt"
    assert files.test_file(target) == "Hello, world!"
    assert target.read_text() == "Hello, world!"


def test_file_handles_every_path(tmp_path):
    paths = [tmp_path / "one.txt", tmp_path / "two.txt"]
    assert files.file(paths) == ["Hello, world!", "Hello, world!"]
    assert all(p.read_text() == "Hello, world!" for p in paths)