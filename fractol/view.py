"""Fractal selection and the mapping between screen pixels and the complex plane."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

WIDTH = 1920
HEIGHT = 1080
TITLE = "fractol"

SCROLL_UP = 4
SCROLL_DOWN = 5
ZOOM_FACTOR = 1.2


class FractalType(Enum):
    """The fractals that can be displayed."""

    JULIA = "julia"
    MANDELBROT = "mandelbrot"


def check_input(name: str) -> bool:
    """True when name is the name of a supported fractal."""
    return name in {member.value for member in FractalType}


def parse_fractal_type(name: str) -> FractalType:
    """Return the fractal called name; raise ValueError for an unknown name."""
    if not check_input(name):
        raise ValueError(f"unknown fractal {name!r}: expected 'julia' or 'mandelbrot'")
    return FractalType(name)


@dataclass
class View:
    """Which fractal is shown, and where the window looks at the complex plane."""

    fractal_type: FractalType = FractalType.JULIA
    zoom: float = 1.0
    move_x: float = 0.0
    move_y: float = 0.0
    width: int = WIDTH
    height: int = HEIGHT

    def screen_to_complex(self, x: float, y: float) -> tuple[float, float]:
        """Return the (real, imaginary) point under the pixel at (x, y)."""
        re = (x - self.width / 2.0) / (0.5 * self.width) * self.zoom + self.move_x
        im = (y - self.height / 2.0) / (0.5 * self.height) * self.zoom + self.move_y
        return re, im

    def zoom_at(self, button: int, x: float, y: float) -> bool:
        """Zoom around the pixel at (x, y), keeping the point under it in place.

        Button 4 (wheel up) zooms in, button 5 (wheel down) zooms out; any other
        button leaves the view unchanged. Returns True when the view changed.
        """
        if button == SCROLL_UP:
            factor = 1.0 / ZOOM_FACTOR
        elif button == SCROLL_DOWN:
            factor = ZOOM_FACTOR
        else:
            return False
        re_center, im_center = self.screen_to_complex(x, y)
        if button == SCROLL_UP:
            self.zoom /= ZOOM_FACTOR
            self.move_x = re_center - (re_center - self.move_x) / ZOOM_FACTOR
            self.move_y = im_center - (im_center - self.move_y) / ZOOM_FACTOR
        else:
            self.zoom *= factor
            self.move_x = re_center - (re_center - self.move_x) * factor
            self.move_y = im_center - (im_center - self.move_y) * factor
        return True