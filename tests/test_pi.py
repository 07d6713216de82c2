import math

import pytest

from unidemos.pi import Mode, calculate_pi, pi


def test_sequential_is_close_to_pi():
    assert abs(calculate_pi(Mode.SEQUENTIAL) - math.pi) < 1e-10


def test_parallel_is_close_to_pi():
    assert abs(calculate_pi(Mode.PARALLEL) - math.pi) < 1e-10


def test_modes_agree():
    sequential, parallel = pi()
    assert math.isclose(sequential, parallel, rel_tol=0, abs_tol=1e-12)


def test_too_few_steps_is_inaccurate():
    with pytest.raises(ArithmeticError):
        calculate_pi(Mode.SEQUENTIAL, 10)


def test_non_positive_steps_rejected():
    with pytest.raises(ValueError):
        calculate_pi(Mode.PARALLEL, 0)


def test_report_names_the_mode(capsys):
    calculate_pi(Mode.SEQUENTIAL)
    assert "Calculating Pi (Sequential): " in capsys.readouterr().err