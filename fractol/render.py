"""Escape-time rendering of the Julia and Mandelbrot sets into a pixel canvas."""

from __future__ import annotations

import numpy as np

from fractol.view import FractalType, View

MAX_ITER = 100
PALETTE = (0x9A8695, 0xC997A9, 0xDFC0BC, 0xF5EBCE)
INSIDE_COLOR = 0xFDF2F6
JULIA_C = (0.285, 0.0)

_PALETTE = np.array(PALETTE, dtype=np.uint32)


def pink_shade(iterations: int) -> int:
    """Return the 0xRRGGBB colour for a point that escaped after iterations steps.

    Points that never escaped (iterations == MAX_ITER) get the inside colour.
    """
    if not 0 <= iterations <= MAX_ITER:
        raise ValueError(f"iterations must be between 0 and {MAX_ITER}, got {iterations}")
    if iterations == MAX_ITER:
        return INSIDE_COLOR
    return PALETTE[(iterations * len(PALETTE)) // MAX_ITER % len(PALETTE)]


def _shade(counts: np.ndarray) -> np.ndarray:
    colors = _PALETTE[(counts * len(PALETTE)) // MAX_ITER % len(PALETTE)]
    return np.where(counts == MAX_ITER, np.uint32(INSIDE_COLOR), colors).astype(np.uint32)


class Canvas:
    """A width by height image of 0xRRGGBB pixels, indexed as pixels[y, x]."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width), dtype=np.uint32)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at (x, y); coordinates outside the canvas are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y, x] = color

    def rgb(self) -> np.ndarray:
        """Return the image as a (width, height, 3) array of 8-bit channels."""
        channels = np.stack(
            [(self.pixels >> shift) & 0xFF for shift in (16, 8, 0)], axis=-1
        ).astype(np.uint8)
        return channels.transpose(1, 0, 2)


def _grid(view: View, width: int, height: int) -> tuple[np.ndarray, np.ndarray]:
    xs = (np.arange(width) - width // 2) / (0.5 * width) * view.zoom + view.move_x
    ys = (np.arange(height) - height // 2) / (0.5 * height) * view.zoom + view.move_y
    re, im = np.meshgrid(xs, ys)
    return re, im


def _escape_counts(z_re, z_im, c_re, c_im) -> np.ndarray:
    """Count iterations of z -> z*z + c until |z| >= 2, at most MAX_ITER."""
    z_re = np.array(z_re, dtype=np.float64)
    z_im = np.array(z_im, dtype=np.float64)
    counts = np.zeros(z_re.shape, dtype=np.int64)
    with np.errstate(over="ignore", invalid="ignore"):
        for _ in range(MAX_ITER):
            active = z_re * z_re + z_im * z_im < 4
            if not active.any():
                break
            new_re = np.where(active, z_re * z_re - z_im * z_im + c_re, z_re)
            z_im = np.where(active, 2.0 * z_re * z_im + c_im, z_im)
            z_re = new_re
            counts += active
    return counts


def julia_iterations(view: View, width: int, height: int) -> np.ndarray:
    """Escape counts of the Julia set for c = 0.285 over a height by width grid."""
    re, im = _grid(view, width, height)
    return _escape_counts(re, im, *JULIA_C)


def _mandelbrot_iterations(view: View, width: int, height: int) -> np.ndarray:
    re, im = _grid(view, width, height)
    return _escape_counts(np.zeros_like(re), np.zeros_like(im), re, im)


def render_julia(view: View, canvas: Canvas) -> None:
    """Draw the Julia set seen through view onto canvas."""
    canvas.pixels[:, :] = _shade(julia_iterations(view, canvas.width, canvas.height))


def render_mandelbrot(view: View, canvas: Canvas) -> None:
    """Draw the Mandelbrot set seen through view onto canvas."""
    canvas.pixels[:, :] = _shade(_mandelbrot_iterations(view, canvas.width, canvas.height))


def render(view: View, canvas: Canvas) -> None:
    """Draw the fractal selected by view onto canvas."""
    if view.fractal_type is FractalType.JULIA:
        render_julia(view, canvas)
    else:
        render_mandelbrot(view, canvas)