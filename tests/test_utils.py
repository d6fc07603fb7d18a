import sys
import math
import warnings

from pathlib import Path

import pytest

# Allow importing the package from the repository root
sys.path.append(str(Path(__file__).resolve().parents[1]))

from angles import utils


def test_ieee_divide():
    assert utils.ieee_divide(3.0, 2.0) == 1.5
    assert utils.ieee_divide(1.0, 0.0) == math.inf
    assert utils.ieee_divide(-1.0, 0) == -math.inf
    assert math.isnan(utils.ieee_divide(0.0, 0.0))


def test_ieee_fmod_keeps_dividend_sign():
    assert utils.ieee_fmod(7.0, 3.0) == 1.0
    assert utils.ieee_fmod(-7.0, 3.0) == -1.0
    # Python's ``%`` floors instead
    assert -7.0 % 3.0 == 2.0
    assert math.isnan(utils.ieee_fmod(math.inf, 3.0))
    assert math.isnan(utils.ieee_fmod(1.0, 0.0))


def test_ieee_trig():
    assert utils.ieee_sin(math.pi / 2) == pytest.approx(1.0)
    assert utils.ieee_cos(0.0) == 1.0
    assert utils.ieee_tan(math.pi / 4) == pytest.approx(1.0)
    for fn in (utils.ieee_sin, utils.ieee_cos, utils.ieee_tan):
        assert math.isnan(fn(math.inf))
        assert math.isnan(fn(math.nan))


def test_helpers_return_plain_floats():
    assert type(utils.ieee_divide(1.0, 4.0)) is float
    assert type(utils.ieee_fmod(5.0, 2.0)) is float
    assert type(utils.ieee_sin(0.5)) is float


def test_helpers_do_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        utils.ieee_divide(1.0, 0.0)
        utils.ieee_divide(0.0, 0.0)
        utils.ieee_fmod(math.inf, 1.0)
        utils.ieee_sin(math.inf)
        utils.ieee_tan(-math.inf)


def test_format_general():
    assert utils.format_general(90.0) == "90"
    assert utils.format_general(45.5) == "45.5"
    assert utils.format_general(0.1) == "0.1"
    assert utils.format_general(1e16) == "1e+16"
    assert utils.format_general(math.nan) == "nan"
    assert utils.format_general(-math.inf) == "-inf"
    value = 29.999999999999996
    assert float(utils.format_general(value)) == value
