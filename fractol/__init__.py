"""Interactive Julia and Mandelbrot set viewer, with small text and buffer helpers."""

__version__ = "0.1.0"