import pytest

from primer.tempconv import (
    BOILING_C,
    FREEZING_C,
    Celsius,
    Fahrenheit,
    boiling_main,
    c_to_f,
    cf_main,
    f_to_c,
    format_g,
    ftoc_main,
)


def test_celsius_arithmetic():
    assert format_g(BOILING_C - FREEZING_C) == "100"
    boiling_f = c_to_f(BOILING_C)
    assert format_g(boiling_f - c_to_f(FREEZING_C)) == "180"


def test_celsius_string_forms():
    c = f_to_c(212.0)
    assert str(c) == "100°C"
    assert "%s" % c == "100°C"
    assert format_g(c) == "100"
    assert float(c) == 100.0


def test_conversions_return_scale_types():
    assert isinstance(f_to_c(32.0), Celsius)
    assert isinstance(c_to_f(0.0), Fahrenheit)
    assert str(c_to_f(100.0)) == "212°F"


@pytest.mark.parametrize(
    "value, want",
    [
        (100.0, "100"),
        (-273.15, "-273.15"),
        (100000.0, "100000"),
        (1e6, "1e+06"),
        (0.0001, "0.0001"),
        (1e-05, "1e-05"),
        (0.0, "0"),
    ],
)
def test_format_g(value, want):
    assert format_g(value) == want


def test_boiling_main(capsys):
    assert boiling_main([]) == 0
    assert capsys.readouterr().out == "boiling point = 212°F or 100°C\n"


def test_ftoc_main(capsys):
    assert ftoc_main([]) == 0
    assert capsys.readouterr().out == "32°F = 0°C\n212°F = 100°C\n"


def test_cf_main(capsys):
    assert cf_main(["-40"]) == 0
    assert capsys.readouterr().out == "-40°F = -40°C, -40°C = -40°F\n"


def test_cf_main_rejects_bad_number(capsys):
    assert cf_main(["abc"]) == 1
    err = capsys.readouterr().err
    assert 'parsing "abc": invalid syntax' in err