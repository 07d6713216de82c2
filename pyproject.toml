[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unidemos"
version = "0.1.0"
description = "Small self-checking demo programs: numeric kernels, threads, files, sockets and HTTP services"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "demo",
    "smoke-test",
    "benchmark",
    "sockets",
    "matrix-multiplication",
    "http",
    "vsock",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
    "Topic :: System :: Benchmark",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
unidemos-demo = "unidemos.demo:main"
unidemos-sockets = "unidemos.simple_sockets:main"
unidemos-webserver = "unidemos.webserver:main"
unidemos-tls-echo = "unidemos.tls_echo:main"
unidemos-dns = "unidemos.dns:main"
unidemos-wasm-bench = "unidemos.wasm_bench:main"
unidemos-dir-probe = "unidemos.dir_probe:main"
unidemos-vsock = "unidemos.vsock_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["unidemos"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
