"""The interactive fractal window and the command-line entry point."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

import pygame

from fractol.render import Canvas, render
from fractol.view import HEIGHT, TITLE, WIDTH, FractalType, View, check_input, parse_fractal_type

USAGE_ERROR = (
    "Le nombre de paramètres ou bien le nom de set est invalide. "
    "Merci d inclure le bon set de fractale: julia ou mandelbrot.\n"
)


class FractolApp:
    """A window showing one fractal, zoomed with the mouse wheel."""

    def __init__(self, fractal_type: FractalType, width: int = WIDTH, height: int = HEIGHT) -> None:
        self.view = View(fractal_type=fractal_type, width=width, height=height)
        self.canvas = Canvas(width, height)
        self.running = False
        self._screen: Optional[pygame.Surface] = None

    def redraw(self) -> None:
        """Render the fractal and show it if the window is open."""
        render(self.view, self.canvas)
        if self._screen is not None:
            surface = pygame.surfarray.make_surface(self.canvas.rgb())
            self._screen.blit(surface, (0, 0))
            pygame.display.flip()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """React to one event; return False when the window should close."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN:
            x, y = event.pos
            self.view.zoom_at(event.button, x, y)
            self.redraw()
        return True

    def run(self) -> None:
        """Open the window and process events until it is closed."""
        pygame.display.init()
        try:
            self._screen = pygame.display.set_mode((self.view.width, self.view.height))
            pygame.display.set_caption(TITLE)
            self.redraw()
            self.running = True
            while self.running:
                self.running = self.handle_event(pygame.event.wait())
        finally:
            self.running = False
            self._screen = None
            pygame.display.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show the fractal named on the command line; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1 or not check_input(args[0]):
        sys.stderr.write(USAGE_ERROR)
        return 1
    FractolApp(parse_fractal_type(args[0])).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())