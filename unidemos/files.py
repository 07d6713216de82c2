"""File system checks: listing directories, reading and writing files."""

import sys
import tempfile
from pathlib import Path

CONTENTS = "Hello, world!"


def read_dir(path):
    """List the entries of a directory, which must exist and not be empty."""
    print(file=sys.stderr)
    directory = Path(path)
    if not directory.is_dir():
        raise NotADirectoryError(f"{path} is not a directory")
    print(f'Reading "{path}" directory entries', file=sys.stderr)
    entries = list(directory.iterdir())
    if not entries:
        raise ValueError(f"{path} has no entries")
    for entry in entries:
        print(f'Found "{entry}"', file=sys.stderr)
    return entries


def read_version(path="/proc/version"):
    """Read and report the contents of a version file."""
    print(file=sys.stderr)
    print(f"{path} contains", end="", file=sys.stderr)
    version = Path(path).read_text()
    print(f" {version!r}", file=sys.stderr)
    return version


def test_file(path):
    """Write a greeting to ``path``, read it back and return what was read."""
    print(f"{str(path):15} : writing", end="", file=sys.stderr)
    Path(path).write_text(CONTENTS)
    print(", reading", file=sys.stderr)
    read = Path(path).read_text()
    if read != CONTENTS:
        raise OSError(f"{path} holds {read!r} instead of {CONTENTS!r}")
    return read


def file(paths=None):
    """Run the write-and-read check on each path."""
    print(file=sys.stderr)
    if paths is None:
        paths = [Path(tempfile.gettempdir()) / "hello.txt"]
    return [test_file(path) for path in paths]


def run_fs(tmp_dir=None):
    """Read the kernel version, check file round trips and list ``/proc``."""
    read_version()
    file(None if tmp_dir is None else [Path(tmp_dir) / "hello.txt"])
    read_dir("/proc")