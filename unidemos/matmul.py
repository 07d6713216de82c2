"""Matrix multiplication in row-major order, Z-order and by Strassen's method."""

import sys
import time

MULT_CHUNK = 1 * 1024
_ODD_BITS = 0x5555_5555
_EVEN_BITS = 0xAAAA_AAAA


def splayed_bits_counter(limit):
    """Yield numbers whose set bits are all odd-position bits, in order, below ``limit``.

    The sequence runs 0b0, 0b1, 0b100, 0b101, 0b10000, 0b10001, ...
    """
    value = 0
    while True:
        prev = value & _ODD_BITS
        if prev >= limit:
            return
        # Setting the even bits makes the increment carry through them.
        value = (value | _EVEN_BITS) + 1
        yield prev


def _trailing_zeros(n):
    return (n & -n).bit_length() - 1


def _check_square(a, b):
    if len(a) != len(b):
        raise ValueError("matrices must have the same number of elements")
    n = len(a)
    if n == 0 or n & (n - 1) or _trailing_zeros(n) % 2:
        raise ValueError("matrices must be square with each side a power of two")


def seq_matmul(a, b):
    """Multiply two square matrices stored in row-major order."""
    if len(a) != len(b):
        raise ValueError("matrices must have the same number of elements")
    size = len(a)
    if size == 0:
        return []
    bits = _trailing_zeros(size) // 2
    n = 1 << bits
    columns = [b[j : n * n : n] for j in range(n)]
    dest = [0.0] * size
    for i in range(n):
        row = a[i << bits : (i << bits) + n]
        for j, column in enumerate(columns):
            dest[(i << bits) | j] = sum((x * y for x, y in zip(row, column)), 0.0)
    return dest


def seq_matmulz(a, b):
    """Multiply two square power-of-two matrices laid out in Z-order."""
    _check_square(a, b)
    n = len(a)
    ks = list(splayed_bits_counter(n))
    dest = []
    for ij in range(n):
        i = ij & _EVEN_BITS
        j = ij & _ODD_BITS
        dest.append(sum((a[i | k] * b[(k << 1) | j] for k in ks), 0.0))
    return dest


def _quarters(v):
    mid = len(v) // 2
    quarter = mid // 2
    return v[:quarter], v[quarter:mid], v[mid : mid + quarter], v[mid + quarter :]


def _add(x, y):
    return [p + q for p, q in zip(x, y)]


def _sub(x, y):
    return [p - q for p, q in zip(x, y)]


def _matmulz(a, b):
    if len(a) <= MULT_CHUNK:
        return seq_matmulz(a, b)
    a1, a2, a3, a4 = _quarters(a)
    b1, b2, b3, b4 = _quarters(b)
    upper = [
        *_matmulz(a1, b1),
        *_matmulz(a1, b2),
        *_matmulz(a3, b1),
        *_matmulz(a3, b2),
    ]
    lower = [
        *_matmulz(a2, b3),
        *_matmulz(a2, b4),
        *_matmulz(a4, b3),
        *_matmulz(a4, b4),
    ]
    return _add(upper, lower)


def matmulz(a, b):
    """Multiply two Z-order matrices by recursive splitting into quarters."""
    _check_square(a, b)
    return _matmulz(a, b)


def _strassen(a, b):
    if len(a) <= MULT_CHUNK:
        return seq_matmulz(a, b)
    a11, a12, a21, a22 = _quarters(a)
    b11, b12, b21, b22 = _quarters(b)
    m1 = _strassen(_add(a11, a22), _add(b11, b22))
    m2 = _strassen(_add(a21, a22), b11)
    m3 = _strassen(a11, _sub(b12, b22))
    m4 = _strassen(a22, _sub(b21, b11))
    m5 = _strassen(_add(a11, a12), b22)
    m6 = _strassen(_sub(a21, a11), _add(b11, b12))
    m7 = _strassen(_sub(a12, a22), _add(b21, b22))
    c11 = _sub(_add(_add(m1, m4), m7), m5)
    c12 = _add(m3, m5)
    c21 = _add(m2, m4)
    c22 = _sub(_add(_add(m1, m3), m6), m2)
    return c11 + c12 + c21 + c22


def matmul_strassen(a, b):
    """Multiply two Z-order matrices with Strassen's algorithm."""
    _check_square(a, b)
    return _strassen(a, b)


def _next_power_of_two(n):
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


def timed_matmul(size, func, name):
    """Time ``func`` on generated matrices and return the elapsed nanoseconds."""
    size = _next_power_of_two(size)
    n = size * size
    a = [float(i) for i in range(n)]
    b = [float(i + 7) for i in range(n)]
    start = time.perf_counter_ns()
    func(a, b)
    nanos = time.perf_counter_ns() - start
    print(f"{name}:\t{size}x{size} matrix: {nanos / 1e9} s", file=sys.stderr)
    return nanos


def matmul(size=64):
    """Run every algorithm on a ``size`` x ``size`` matrix and return the speedup."""
    print(file=sys.stderr)
    print("Matrix multiplication", file=sys.stderr)
    if size <= 1024:
        timed_matmul(size, seq_matmul, "seq row-major")
    seq = timed_matmul(size, seq_matmulz, "seq z-order") if size <= 2048 else 0
    par = timed_matmul(size, matmulz, "par z-order")
    timed_matmul(size, matmul_strassen, "par strassen")
    speedup = seq / max(par, 1)
    print(f"speedup: {speedup:.2f}x", file=sys.stderr)
    return speedup