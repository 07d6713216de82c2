import pytest

from unidemos.laplace import (
    compute,
    get_residual,
    iteration,
    laplace,
    matrix_setup,
)


def test_setup_has_unit_border_and_zero_interior():
    size = 5
    matrix = matrix_setup(size, size)
    assert len(matrix) == size * size
    for y in range(size):
        for x in range(size):
            on_border = x in (0, size - 1) or y in (0, size - 1)
            assert matrix[y * size + x] == (1.0 if on_border else 0.0)


def test_residual_of_uniform_grid_is_zero():
    assert get_residual([1.0] * 36, 6, 6) == 0.0


def test_three_by_three_step():
    matrix = matrix_setup(3, 3)
    assert get_residual(matrix, 3, 3) == 1.0
    after = iteration(matrix, 3, 3)
    assert after == [1.0] * 9


def test_iteration_keeps_border_and_input():
    matrix = matrix_setup(6, 6)
    original = list(matrix)
    after = iteration(matrix, 6, 6)
    assert matrix == original
    for x in range(6):
        assert after[x] == 1.0
        assert after[30 + x] == 1.0


def test_residual_shrinks_with_more_iterations():
    matrix = matrix_setup(8, 8)
    assert compute(matrix, 8, 8, 50) < compute(matrix, 8, 8, 5)


def test_compute_converges():
    assert compute(matrix_setup(16, 16), 16, 16, 1000) < 0.001


def test_laplace_reports_residual(capsys):
    residual = laplace(16, 1000)
    assert residual < 0.001
    assert "1000 iterations:" in capsys.readouterr().err


def test_laplace_without_iterations_fails():
    with pytest.raises(RuntimeError):
        laplace(16, 0)


def test_bad_dimensions_rejected():
    with pytest.raises(ValueError):
        matrix_setup(0, 4)
    with pytest.raises(ValueError):
        get_residual([0.0] * 10, 3, 3)