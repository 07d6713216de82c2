"""Self-checking demo programs: numeric kernels, threads, files, sockets, HTTP, DNS and vsock."""

__version__ = "0.1.0"