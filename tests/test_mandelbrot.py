import pytest

from primer.mandelbrot import (
    BLACK,
    acos_color,
    mandelbrot,
    newton,
    render,
    sqrt_color,
)


def test_origin_is_in_set():
    assert mandelbrot(0j) == BLACK


def test_far_point_escapes_immediately():
    assert mandelbrot(2 + 2j) == (255, 255, 255)


@pytest.mark.parametrize("z", [0.3 + 0.5j, -1.5 + 0.1j, 1 + 0j, -0.75 + 0.1j, 0.4j])
def test_mandelbrot_is_gray(z):
    r, g, b = mandelbrot(z)
    assert r == g == b


def test_newton_at_root():
    assert newton(1 + 0j) == (255, 255, 255)


def test_newton_at_zero_is_black():
    assert newton(0j) == BLACK


@pytest.mark.parametrize("z", [0.5 + 0.5j, -2 + 1j, 1.5 - 0.2j])
def test_newton_is_gray(z):
    r, g, b = newton(z)
    assert r == g == b


def test_acos_of_one_is_nearly_gray():
    color = acos_color(1 + 0j)
    assert all(abs(c - 192) <= 2 for c in color)


def test_sqrt_color_channels_in_range():
    for z in (0j, 1 + 1j, -4 + 0j, 3 - 2j):
        color = sqrt_color(z)
        assert len(color) == 3
        assert all(0 <= c <= 255 for c in color)


def test_render_size_and_corner():
    img = render(8, 6, mandelbrot)
    assert img.size == (8, 6)
    assert img.getpixel((0, 0)) == mandelbrot(complex(-2, -2))


def test_render_coordinate_mapping():
    def shade(z):
        return (round((z.real + 2) * 10), round((z.imag + 2) * 10), 0)

    img = render(4, 4, shade)
    assert img.getpixel((1, 2)) == (10, 20, 0)