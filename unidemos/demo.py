"""A tour of basic runtime features: output, environment, arithmetic, threads, files and compute."""

import math
import os
import sys

from unidemos import files, laplace, matmul, pi, threads

GREETINGS = (
    "Hello from the demo! 🦀",
    "Hello, world!",
    "Привет, мир!",
    "こんにちは世界！",
    "你好世界！",
    "สวัสดีชาวโลก!",
    "Chào thế giới!",
)


def hello():
    """Print greetings in several languages and return them."""
    print(file=sys.stderr)
    for line in GREETINGS:
        print(line, file=sys.stderr)
    return list(GREETINGS)


def print_env(argv=None):
    """Print the command-line arguments and the environment variables."""
    args = sys.argv if argv is None else argv
    print(file=sys.stderr)
    print("Arguments:", file=sys.stderr)
    for argument in args:
        print(argument, file=sys.stderr)
    print(file=sys.stderr)
    print("Environment variables:", file=sys.stderr)
    for key, value in os.environ.items():
        print(f"{key}: {value}", file=sys.stderr)


def arithmetic():
    """Compute 2*pi, its exponential and the logarithm of that; return all three."""
    print(file=sys.stderr)
    x = math.pi * 2.0
    y = math.exp(x)
    z = math.log(y)
    print(f"x = {x}", file=sys.stderr)
    print(f"e^x = {y}", file=sys.stderr)
    print(f"ln(e^x) = {z}", file=sys.stderr)
    return x, y, z


def main(argv=None):
    """Run every part of the tour in turn."""
    args = sys.argv if argv is None else [sys.argv[0], *argv]
    hello()
    print_env(args)
    arithmetic()
    threads.sleep()
    threads.spawn()
    files.run_fs()
    pi.pi()
    matmul.matmul()
    laplace.laplace()
    return 0


if __name__ == "__main__":
    sys.exit(main())