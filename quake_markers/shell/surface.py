"""Drawing surface interface - Imperative Shell.

Markers draw through this narrow interface so they never depend on a
particular graphics library.
"""

from contextlib import contextmanager
from typing import Iterator, Protocol

from quake_markers.core.config import Color


class DrawingSurface(Protocol):
    """Minimal immediate-mode drawing API with a style stack."""

    def push_style(self) -> None:
        """Save the current fill, stroke and stroke weight."""

    def pop_style(self) -> None:
        """Restore the most recently saved style."""

    def fill(self, color: Color) -> None: ...

    def stroke(self, color: Color) -> None: ...

    def stroke_weight(self, weight: float) -> None: ...

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None: ...

    def ellipse(self, x: float, y: float, width: float, height: float) -> None:
        """Draw an ellipse centered on (x, y)."""

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        """Draw a rectangle with its top-left corner at (x, y)."""

    def text(self, value: str, x: float, y: float) -> None:
        """Draw text with its top-left corner at (x, y)."""

    def text_width(self, value: str) -> float: ...


@contextmanager
def style_scope(surface: DrawingSurface) -> Iterator[DrawingSurface]:
    """Save the surface style on entry and restore it on every exit path."""
    surface.push_style()
    try:
        yield surface
    finally:
        surface.pop_style()
