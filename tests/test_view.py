import pytest

from fractol.view import (
    HEIGHT,
    WIDTH,
    FractalType,
    View,
    check_input,
    parse_fractal_type,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("julia", True),
        ("mandelbrot", True),
        ("Julia", False),
        ("mandel", False),
        ("", False),
        ("julia ", False),
    ],
)
def test_check_input(name, expected):
    assert check_input(name) is expected


def test_parse_fractal_type_known_names():
    assert parse_fractal_type("julia") is FractalType.JULIA
    assert parse_fractal_type("mandelbrot") is FractalType.MANDELBROT


@pytest.mark.parametrize("name", ["burning_ship", "", "MANDELBROT"])
def test_parse_fractal_type_rejects_unknown(name):
    with pytest.raises(ValueError):
        parse_fractal_type(name)


def test_default_view_matches_window():
    view = View()
    assert (view.width, view.height) == (WIDTH, HEIGHT)
    assert view.zoom == 1.0
    assert (view.move_x, view.move_y) == (0.0, 0.0)


def test_screen_center_maps_to_offset():
    view = View(move_x=0.25, move_y=-0.5)
    assert view.screen_to_complex(WIDTH / 2, HEIGHT / 2) == (0.25, -0.5)


def test_screen_corner_maps_to_zoom_extent():
    view = View(zoom=2.0, width=100, height=50)
    assert view.screen_to_complex(0, 0) == (-2.0, -2.0)


@pytest.mark.parametrize("button", [4, 5])
@pytest.mark.parametrize("x, y", [(0, 0), (300, 700), (1919, 1079)])
def test_zoom_keeps_point_under_cursor(button, x, y):
    view = View(zoom=1.5, move_x=0.1, move_y=-0.3)
    before = view.screen_to_complex(x, y)
    assert view.zoom_at(button, x, y) is True
    after = view.screen_to_complex(x, y)
    assert after == pytest.approx(before)


def test_zoom_in_shrinks_and_zoom_out_grows():
    view = View()
    view.zoom_at(4, 10, 10)
    assert view.zoom < 1.0
    view = View()
    view.zoom_at(5, 10, 10)
    assert view.zoom > 1.0


def test_zoom_in_then_out_restores_view():
    view = View(zoom=0.8, move_x=0.2, move_y=0.1)
    view.zoom_at(4, 500, 400)
    view.zoom_at(5, 500, 400)
    assert view.zoom == pytest.approx(0.8)
    assert view.move_x == pytest.approx(0.2)
    assert view.move_y == pytest.approx(0.1)


@pytest.mark.parametrize("button", [1, 2, 3, 6])
def test_other_buttons_do_nothing(button):
    view = View(zoom=1.3, move_x=0.4, move_y=0.6)
    assert view.zoom_at(button, 100, 100) is False
    assert (view.zoom, view.move_x, view.move_y) == (1.3, 0.4, 0.6)