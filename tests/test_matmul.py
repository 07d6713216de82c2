import pytest

from unidemos.matmul import (
    MULT_CHUNK,
    matmul,
    matmul_strassen,
    matmulz,
    seq_matmul,
    seq_matmulz,
    splayed_bits_counter,
    timed_matmul,
)


def test_splayed_counter():
    bits = list(splayed_bits_counter(64))
    assert bits == [0b0, 0b1, 0b100, 0b101, 0b10000, 0b10001, 0b10100, 0b10101]


def test_small_matrix():
    a = [1.0, 2.0, 3.0, 4.0]
    b = [5.0, 6.0, 7.0, 8.0]
    mul = [19.0, 22.0, 43.0, 50.0]
    assert matmulz(a, b) == mul
    assert seq_matmulz(a, b) == mul
    assert matmul_strassen(a, b) == mul
    assert seq_matmul(a, b) == mul


def test_large_matrix_parallel_matches_serial():
    n = 1 << 14
    assert n > MULT_CHUNK
    a = [float(i % 101) for i in range(n)]
    b = [float(i % 101 + 7) for i in range(n)]
    seqmul = seq_matmulz(a, b)
    assert matmulz(a, b) == seqmul
    assert matmul_strassen(a, b) == seqmul


def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError):
        seq_matmulz([1.0] * 4, [1.0] * 16)


def test_non_square_rejected():
    with pytest.raises(ValueError):
        matmulz([1.0] * 8, [1.0] * 8)
    with pytest.raises(ValueError):
        matmul_strassen([], [])


def test_timed_matmul_rounds_size_up(capsys):
    nanos = timed_matmul(3, seq_matmulz, "z")
    assert nanos >= 0
    assert "z:\t4x4 matrix:" in capsys.readouterr().err


def test_matmul_reports_all_algorithms(capsys):
    speedup = matmul(8)
    err = capsys.readouterr().err
    assert speedup > 0
    for name in ("seq row-major", "seq z-order", "par z-order", "par strassen"):
        assert f"{name}:\t8x8 matrix" in err
    assert "speedup:" in err