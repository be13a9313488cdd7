"""Pillow Drawing Surface - Imperative Shell.

Implements DrawingSurface on top of a Pillow image. All pixel I/O for
markers goes through here.
"""

from dataclasses import dataclass, replace

from PIL import Image, ImageDraw, ImageFont

from quake_markers.core.config import Color


class StyleStackError(RuntimeError):
    """pop_style() was called without a matching push_style()."""


@dataclass(frozen=True)
class _Style:
    fill: Color | None = (255, 255, 255)
    stroke: Color | None = (0, 0, 0)
    stroke_weight: float = 1


class PillowSurface:
    """Drawing surface backed by PIL.ImageDraw.

    Keeps a style stack so markers can save and restore fill, stroke and
    stroke weight around their drawing.
    """

    def __init__(self, image: Image.Image) -> None:
        """Initialize surface.

        Args:
            image: Image to draw on (drawn in place)
        """
        self.image = image
        self._draw = ImageDraw.Draw(image)
        self._font = ImageFont.load_default()
        self._style = _Style()
        self._saved: list[_Style] = []

    @property
    def depth(self) -> int:
        """Number of saved styles not yet restored."""
        return len(self._saved)

    def push_style(self) -> None:
        self._saved.append(self._style)

    def pop_style(self) -> None:
        if not self._saved:
            raise StyleStackError("pop_style() without matching push_style()")
        self._style = self._saved.pop()

    def fill(self, color: Color) -> None:
        self._style = replace(self._style, fill=tuple(color))

    def stroke(self, color: Color) -> None:
        self._style = replace(self._style, stroke=tuple(color))

    def stroke_weight(self, weight: float) -> None:
        self._style = replace(self._style, stroke_weight=weight)

    def _width(self) -> int:
        return max(1, int(round(self._style.stroke_weight)))

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._draw.line(
            [(x1, y1), (x2, y2)],
            fill=self._style.stroke,
            width=self._width(),
        )

    def ellipse(self, x: float, y: float, width: float, height: float) -> None:
        half_w, half_h = abs(width) / 2, abs(height) / 2
        self._draw.ellipse(
            [x - half_w, y - half_h, x + half_w, y + half_h],
            fill=self._style.fill,
            outline=self._style.stroke,
            width=self._width(),
        )

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        # Negative sizes extend left/up from (x, y); Pillow wants x0 <= x1
        x0, x1 = sorted((x, x + width))
        y0, y1 = sorted((y, y + height))
        self._draw.rectangle(
            [x0, y0, x1, y1],
            fill=self._style.fill,
            outline=self._style.stroke,
            width=self._width(),
        )

    def text(self, value: str, x: float, y: float) -> None:
        self._draw.text((x, y), value, fill=self._style.fill, font=self._font)

    def text_width(self, value: str) -> float:
        return self._draw.textlength(value, font=self._font)
