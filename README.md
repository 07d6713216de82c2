# unidemos

A collection of small, self-checking demo programs. Each one exercises one
part of a runtime environment (arithmetic, threads, the file system,
sockets, HTTP) and fails loudly if the result is wrong. They are useful as
smoke tests for a fresh machine, container or virtual machine. Several of
them expect a Linux system, for example `/proc` for the main tour and virtio
sockets for the vsock demo.

There are no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

### `unidemos-demo`

This command runs a tour and writes its report to standard error. The tour covers the following steps:

- greetings in several languages;
- the command-line arguments and the environment variables;
- `2*pi`, its exponential and the logarithm of that;
- a 0.1 s sleep that must last at least 0.1 s and at most 1.1 s;
- twice as many threads as CPUs, each checking that its own thread-local value is fresh and then emptied;
- `/proc/version` is read, `hello.txt` in the temporary directory is written and read back, and `/proc` is listed;
- pi computed by the midpoint rule, sequentially and split across threads, which must be within 1e-10 of the true value;
- timed matrix multiplications (row-major, Z-order, recursive Z-order, Strassen) on 64x64 matrices;
- a Laplace stencil solved by 1000 Jacobi steps on a 16x16 grid, whose residual must fall below 0.001.

### `unidemos-sockets tcp|udp [--host HOST] [--port PORT]`

- `tcp` accepts one connection. It prints what the connection sends until the connection closes.
- `udp` echoes datagrams back to their sender. It stops after a datagram that starts with `exit`.

### `unidemos-webserver [--host HOST] [--port PORT] [--root DIR]`

This is an HTTP server.

- `GET` serves files from `DIR`, which defaults to `/tmp/data`. The path `/` serves `index.html`.
- The content type is chosen from the file extension.
- `POST /echo` returns the request body.
- Every other request is answered with 404.

### `unidemos-tls-echo CERTFILE KEYFILE [--host HOST] [--port PORT]`

This is an HTTPS server using the given certificate chain and private key.

- `GET /` returns a short help text.
- `POST /echo` returns the body.
- Every other request is answered with 404.

### `unidemos-dns [NAME]`

This command prints the first IPv4 and the first IPv6 address of `NAME`. It fails if either lookup fails.

### `unidemos-wasm-bench [--calls N] [--file-iterations N] [--file-size BYTES] [--path PATH]`

This command checks that `fibonacci(30) == 832040` and then times the following:

- repeated Fibonacci calls;
- repeated creation and deletion of a large zero-filled file (100 MB by default);
- repeated reads of that file.

### `unidemos-dir-probe [TEST_DIR]`

This command works on `TEST_DIR`, which defaults to `/tmp/data`:

- it creates `new_dir` inside the directory;
- it prints the path, name and type of each entry that was there before, along with the contents of files, the size, times and whether the entry is read-only;
- it then removes `new_dir` again.

It fails if `new_dir` already exists.

### `unidemos-vsock [--client] [--cid CID] [--port PORT]`

- Without `--client`, this command listens on a virtio socket port. It echoes one connection back to itself until that connection closes.
- With `--client`, it connects to `CID` (default 2) and prints what it receives until a message reads `exit`.

Virtio sockets must be supported by the platform.

The network services use port 9975 by default and can be reached with
ordinary tools such as `nc` or `curl`.

## Library use

The computational parts are plain functions:

```python
from unidemos.matmul import seq_matmulz, matmul_strassen
from unidemos.wasm_bench import fibonacci

a = [1.0, 2.0, 3.0, 4.0]
b = [5.0, 6.0, 7.0, 8.0]
print(seq_matmulz(a, b))      # [19.0, 22.0, 43.0, 50.0]
print(matmul_strassen(a, b))  # same result
print(fibonacci(30))          # 832040
```

Matrices for the Z-order routines are flat lists laid out along a Morton
curve. Their length must be a power of four, otherwise `ValueError` is raised.

Other reusable pieces are:

- `unidemos.laplace.compute`;
- `unidemos.pi.calculate_pi`;
- `unidemos.webserver.route` and `unidemos.webserver.get_content_type`;
- `unidemos.tls_echo.echo`;
- `unidemos.dns.lookup`;
- `unidemos.vsock.VsockListener` and `unidemos.vsock.VsockStream`.

## What is not included

The package has none of the following:

- no event-driven (polled, non-blocking) TCP or UDP server;
- no server that listens on several ports at once;
- no standalone hello-world HTTP greeting services;
- no mutex stress test.

The socket servers that it does have handle one blocking socket at a time.