"""SVG rasterization backed by CairoSVG."""

import io

import cairosvg
from PIL import Image


def svg_to_image(markup: str, size: int) -> Image.Image:
    """Rasterize SVG markup into a square RGBA image.

    Args:
        markup: SVG document text.
        size: Output width and height in pixels.

    Returns:
        RGBA image of ``size`` x ``size`` pixels.
    """
    png = cairosvg.svg2png(
        bytestring=markup.encode("utf-8"),
        output_width=size,
        output_height=size,
    )
    with Image.open(io.BytesIO(png)) as image:
        return image.convert("RGBA")
