"""Jacobi stencil iterations solving Laplace's equation on a grid."""

import sys
import time


def _check(matrix, size_x, size_y):
    if size_x < 1 or size_y < 1:
        raise ValueError("grid dimensions must be positive")
    if len(matrix) != size_x * size_y:
        raise ValueError("matrix size does not match the grid dimensions")


def matrix_setup(size_x, size_y):
    """Return a row-major grid of zeros whose border cells are 1.0."""
    if size_x < 1 or size_y < 1:
        raise ValueError("grid dimensions must be positive")
    matrix = [0.0] * (size_x * size_y)
    for x in range(size_x):
        matrix[x] = 1.0
        matrix[(size_y - 1) * size_x + x] = 1.0
    for y in range(size_y):
        matrix[y * size_x] = 1.0
        matrix[y * size_x + size_x - 1] = 1.0
    return matrix


def get_residual(matrix, size_x, size_y):
    """Sum of squared changes one more Jacobi step would make."""
    _check(matrix, size_x, size_y)
    total = 0.0
    for y in range(1, size_y - 1):
        base = y * size_x
        for x in range(1, size_x - 1):
            new = (
                matrix[base + x - 1]
                + matrix[base + x + 1]
                + matrix[base + size_x + x]
                + matrix[base - size_x + x]
            ) * 0.25
            diff = new - matrix[base + x]
            total += diff * diff
    return total


def iteration(cur, size_x, size_y):
    """Return the grid after one Jacobi step; the border is left unchanged."""
    _check(cur, size_x, size_y)
    nxt = list(cur)
    for y in range(1, size_y - 1):
        base = y * size_x
        for x in range(1, size_x - 1):
            nxt[base + x] = (
                cur[base + x - 1]
                + cur[base + x + 1]
                + cur[base + size_x + x]
                + cur[base - size_x + x]
            ) * 0.25
    return nxt


def compute(matrix, size_x, size_y, iterations):
    """Run ``iterations`` Jacobi steps from ``matrix`` and return the residual."""
    current = list(matrix)
    for _ in range(iterations):
        current = iteration(current, size_x, size_y)
    return get_residual(current, size_x, size_y)


def laplace(size=16, iterations=1000):
    """Solve on a square grid, report the timing and return the residual."""
    print(file=sys.stderr)
    matrix = matrix_setup(size, size)
    print("Laplace iterations", file=sys.stderr)
    start = time.perf_counter()
    residual = compute(matrix, size, size, iterations)
    elapsed = time.perf_counter() - start
    print(
        f"{iterations} iterations: {elapsed:.6f}s (residual: {residual})",
        file=sys.stderr,
    )
    if not residual < 0.001:
        raise RuntimeError(f"Laplace iteration did not converge: residual {residual}")
    return residual