"""Directory probe: creates and removes a directory and describes every entry."""

import argparse
import datetime
import os
import stat
import sys
from pathlib import Path

TEST_DIR = "/tmp/data"


def _timestamp(seconds):
    return datetime.datetime.fromtimestamp(seconds, tz=datetime.timezone.utc).isoformat()


def describe_entry(path):
    """Print and return lines describing one directory entry."""
    path = Path(path)
    info = os.lstat(path)
    lines = ["", f"Path: {path}", f"Name: {path.name}"]
    if stat.S_ISDIR(info.st_mode):
        lines.append("Is dir!")
    elif stat.S_ISREG(info.st_mode):
        lines.append("Is file!")
        lines.append(f"Content: {path.read_text()}")
    elif stat.S_ISLNK(info.st_mode):
        lines.append("Is symlink!")
        lines.append(f"Points to file: {path.is_file()}")
    else:
        lines.append("Unknown type!")

    created = getattr(info, "st_birthtime", info.st_ctime)
    lines.append(f"Size: {info.st_size} bytes")
    lines.append(f"Accessed: {_timestamp(info.st_atime)}")
    lines.append(f"Created: {_timestamp(created)}")
    lines.append(f"Modified: {_timestamp(info.st_mtime)}")
    lines.append(f"Read only: {not info.st_mode & 0o222}")
    for line in lines:
        print(line)
    return lines


def run(test_dir=TEST_DIR):
    """Create and remove ``new_dir`` in ``test_dir`` and describe the entries present before.

    Raises NotADirectoryError when ``test_dir`` is not a directory and
    FileExistsError when ``new_dir`` already exists.
    """
    test_path = Path(test_dir)
    if not test_path.is_dir():
        raise NotADirectoryError(f"{test_dir} is not a directory")
    entries = sorted(test_path.iterdir())

    new_dir = test_path / "new_dir"
    new_dir.mkdir()
    try:
        descriptions = [describe_entry(entry) for entry in entries]
    finally:
        new_dir.rmdir()
    print("Done.")
    return descriptions


def main(argv=None):
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("test_dir", nargs="?", default=TEST_DIR)
    args = parser.parse_args(argv)
    run(args.test_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())