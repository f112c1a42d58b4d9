# fractol

A small fractal viewer. It draws either the Julia set for the constant
c = 0.285 + 0i or the Mandelbrot set, coloured by escape time in a palette
of pink shades, and lets you zoom in and out around the mouse pointer with
the scroll wheel.

## Installing

```
pip install .
```

The viewer needs `numpy` and `pygame`, which are installed with it.

## Running

```
fractol julia
fractol mandelbrot
```

Exactly one argument is expected, and it must be `julia` or `mandelbrot`.
Anything else prints an error message (in French) to standard error and
exits with status 1.

The window is 1920 by 1080 pixels and titled `fractol`. Each point is
iterated at most 100 times; points that never escape are drawn in a pale
pink, the others in one of four shades chosen by how quickly they escaped.

### Controls

| Input              | Action                                    |
|--------------------|-------------------------------------------|
| Scroll wheel up    | Zoom in by a factor of 1.2 at the cursor  |
| Scroll wheel down  | Zoom out by a factor of 1.2 at the cursor |
| Escape             | Quit                                      |
| Closing the window | Quit                                      |

Other mouse buttons redraw the frame without changing the view.

## Using it as a library

The pieces behind the viewer can be used on their own:

- `fractol.view` holds `FractalType`, `check_input`, `parse_fractal_type`
  (which raises `ValueError` for an unknown name) and the `View` dataclass,
  which maps screen pixels to the complex plane (`View.screen_to_complex`)
  and zooms around a point (`View.zoom_at`).
- `fractol.render` holds `pink_shade`, `julia_iterations` (an escape-count
  array for a whole frame), `Canvas` (a `pixels[y, x]` array of 0xRRGGBB
  values with `put_pixel` and `rgb`) and the `render_julia`,
  `render_mandelbrot` and `render` functions.
- `fractol.app` holds `FractolApp` and the `main` entry point.

```python
from fractol.render import Canvas, render
from fractol.view import FractalType, View

view = View(fractal_type=FractalType.MANDELBROT, width=320, height=180)
canvas = Canvas(320, 180)
render(view, canvas)
view.zoom_at(4, 160, 90)   # wheel up at the centre
render(view, canvas)
```

The package also carries a set of small text and buffer helpers with
C-library semantics:

- `fractol.chars`: ASCII classification, case mapping, `atoi` and `itoa`.
- `fractol.strings`: `strlen`, `strchr`, `strcmp`, `strlcpy`, `split`,
  `strtrim`, `substr` and relatives; searches return indices or `None`.
- `fractol.memory`: `memset`, `memcpy`, `memmove`, `memcmp`, `memchr`,
  `bzero` and `calloc` over `bytearray`s.
- `fractol.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` to a
  text stream.
- `fractol.printf`: `format_printf` and `print_formatted`, supporting
  `%c %s %d %i %u %x %X %p %%`.
- `fractol.linked_list`: a singly linked `LinkedList` of `Node`s.

## What it does not do

The viewer has no panning with the keyboard, no choice of Julia constant,
iteration limit or colour palette from the command line, and no way to save
an image; the view can only be changed with the scroll wheel.

## Running the tests

```
pip install .[test]
pytest
```