"""Raster composition of styled icons.

Each icon is drawn onto a square RGBA surface in a fixed order:

1. background shape, clipped to circle / rounded square / square
2. effect (drop shadow or glow) for the icon draw only
3. the normalized icon, scaled into the padded box

The effect is scoped to a single draw and cleared afterwards, so a
surface never carries shadow state from one icon to the next.
"""

import io
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator

from PIL import Image, ImageColor, ImageDraw, ImageFilter

from .errors import EncodingError, RasterLoadError
from .libraries import DrawingConvention
from .normalize import normalize_svg
from .style import BackgroundShape, StyleConfig

log = logging.getLogger(__name__)

RGBA = tuple[int, int, int, int]
Rasterizer = Callable[[str, int], Image.Image]

# Effect parameters
SHADOW_COLOR: RGBA = (0, 0, 0, 77)  # 30% black
SHADOW_BLUR = 16
SHADOW_OFFSET_Y = 8
GLOW_BLUR = 20

ROUNDED_CORNER_RATIO = 0.1


@dataclass(frozen=True)
class Shadow:
    """Shadow drawn beneath an image."""

    color: RGBA
    blur: float
    offset_x: int = 0
    offset_y: int = 0


def corner_radius(shape: BackgroundShape, size: int) -> float:
    """Corner radius of the background shape.

    Examples:
        >>> corner_radius("circle", 144)
        72.0
        >>> corner_radius("square", 144)
        0
    """
    if shape == "circle":
        return size / 2
    if shape == "rounded":
        return size * ROUNDED_CORNER_RATIO
    return 0


def icon_layout(size: int, padding: float) -> tuple[float, float]:
    """Padding in pixels and edge length of the icon box.

    Args:
        size: Output edge length in pixels.
        padding: Margin on each side, percent of ``size``.

    Returns:
        Tuple of (padding_px, icon_box_size).
    """
    padding_px = size * padding / 100
    return padding_px, size - 2 * padding_px


def shadow_for(style: StyleConfig) -> Shadow | None:
    """Shadow implied by the style's effect, None for no effect."""
    if style.effect == "shadow":
        return Shadow(color=SHADOW_COLOR, blur=SHADOW_BLUR, offset_y=SHADOW_OFFSET_Y)
    if style.effect == "glow":
        return Shadow(color=ImageColor.getcolor(style.background_color, "RGBA"), blur=GLOW_BLUR)
    return None


class DrawingSurface:
    """Square RGBA canvas with a transient shadow state."""

    def __init__(self, size: int):
        self.size = size
        self.image = Image.new("RGBA", (size, size), (0, 0, 0, 0))
        self.shadow: Shadow | None = None

    def fill_background(self, shape: BackgroundShape, color: str) -> None:
        """Fill the background shape. The clip only applies to this fill."""
        box = (0, 0, self.size - 1, self.size - 1)
        radius = corner_radius(shape, self.size)

        mask = Image.new("L", (self.size, self.size), 0)
        draw = ImageDraw.Draw(mask)
        if shape == "circle":
            draw.ellipse(box, fill=255)
        elif radius > 0:
            draw.rounded_rectangle(box, radius=radius, fill=255)
        else:
            draw.rectangle(box, fill=255)

        fill = Image.new("RGBA", (self.size, self.size), ImageColor.getcolor(color, "RGBA"))
        self.image.paste(fill, (0, 0), mask)

    @contextmanager
    def effect(self, shadow: Shadow | None) -> Iterator["DrawingSurface"]:
        """Activate a shadow for the draws inside the block."""
        self.shadow = shadow
        try:
            yield self
        finally:
            self.shadow = None

    def _draw_shadow(self, image: Image.Image, x: int, y: int) -> None:
        shadow = self.shadow
        alpha = image.getchannel("A")
        if shadow.color[3] < 255:
            opacity = shadow.color[3] / 255
            alpha = alpha.point(lambda a: round(a * opacity))

        mask = Image.new("L", self.image.size, 0)
        mask.paste(alpha, (x + shadow.offset_x, y + shadow.offset_y))
        if shadow.blur > 0:
            mask = mask.filter(ImageFilter.GaussianBlur(radius=shadow.blur / 2))

        layer = Image.new("RGBA", self.image.size, shadow.color[:3] + (0,))
        layer.putalpha(mask)
        self.image.alpha_composite(layer)

    def draw_image(self, image: Image.Image, x: int, y: int) -> None:
        """Draw an RGBA image with its top-left corner at (x, y)."""
        if self.shadow is not None:
            self._draw_shadow(image, x, y)
        self.image.alpha_composite(image, dest=(x, y))

    def encode(self) -> bytes:
        """Encode the surface as PNG."""
        buffer = io.BytesIO()
        try:
            self.image.save(buffer, format="PNG")
        except (OSError, ValueError) as e:
            raise EncodingError(f"Failed to create PNG: {e}") from e
        data = buffer.getvalue()
        if not data:
            raise EncodingError("Failed to create PNG: encoder produced no data")
        return data


class Compositor:
    """Renders icon markup into styled PNG images.

    Args:
        rasterizer: Callable turning SVG markup and an edge length into an
            RGBA image. Defaults to the CairoSVG backed rasterizer.
    """

    def __init__(self, rasterizer: Rasterizer | None = None):
        if rasterizer is None:
            from .rasterize import svg_to_image

            rasterizer = svg_to_image
        self.rasterizer = rasterizer

    def _load_icon(self, markup: str, box: int, icon_id: str) -> Image.Image:
        try:
            icon = self.rasterizer(markup, box)
        except Exception as e:
            raise RasterLoadError(icon_id, str(e)) from e
        icon = icon.convert("RGBA")
        if icon.size != (box, box):
            icon = icon.resize((box, box), Image.LANCZOS)
        return icon

    def render(
        self,
        markup: str,
        style: StyleConfig,
        icon_id: str,
        convention: DrawingConvention | None = None,
        size: int | None = None,
    ) -> bytes:
        """Render one icon.

        Args:
            markup: Raw SVG markup of the icon.
            style: Style configuration.
            icon_id: Identifier used in error messages.
            convention: Drawing convention of the icon's collection.
            size: Output edge length; defaults to ``style.icon_size``.

        Returns:
            PNG bytes of a ``size`` x ``size`` image.

        Raises:
            RasterLoadError: If the markup cannot be rasterized.
            EncodingError: If the PNG cannot be produced.
        """
        size = size or style.icon_size
        padding_px, box_size = icon_layout(size, style.padding)
        offset = round(padding_px)
        box = max(1, round(box_size))

        surface = DrawingSurface(size)
        surface.fill_background(style.background_shape, style.background_color)

        with surface.effect(shadow_for(style)):
            icon_markup = normalize_svg(markup, style, box, convention)
            icon = self._load_icon(icon_markup, box, icon_id)
            surface.draw_image(icon, offset, offset)

        log.debug("Rendered %s at %dpx (box %dpx)", icon_id, size, box)
        return surface.encode()
