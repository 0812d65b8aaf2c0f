"""SVG style normalization.

Rewrites third-party icon markup so that every icon of a pack is drawn in
one foreground color. How paint attributes are rewritten depends on the
drawing convention of the icon's collection:

- stroke: strokes carry the drawing; filled shapes that also stroke are
  emptied so only the outline is painted.
- fill: filled shapes carry the drawing; stroke attributes are removed.
- mixed (or unknown): fills are repainted, and strokes are repainted only
  if the document uses strokes at all.

Markup that cannot be parsed is returned unchanged.
"""

import logging
from xml.etree import ElementTree as ET

from .libraries import DrawingConvention
from .style import StyleConfig
from .utils import format_number, is_svg_root, parse_svg_string, serialize_svg

log = logging.getLogger(__name__)

STROKE_ATTRIBUTES = ("stroke", "stroke-width")


def is_paintable_fill(value: str | None) -> bool:
    """Check if a fill value should be repainted.

    A fill is paintable when present, not ``none`` and not a paint-server
    reference such as ``url(#gradient)``.
    """
    if value is None:
        return False
    return value != "none" and not value.startswith("url(")


def has_stroke(element: ET.Element) -> bool:
    """Check if an element carries any stroke attribute."""
    return any(element.get(attr) is not None for attr in STROKE_ATTRIBUTES)


def _descendants(root: ET.Element) -> list[ET.Element]:
    return [elem for elem in root.iter() if elem is not root and isinstance(elem.tag, str)]


def _paint_stroke(element: ET.Element, color: str, width: float) -> None:
    element.set("stroke", color)
    element.set("stroke-width", format_number(width))


def _strip_stroke(element: ET.Element) -> None:
    for attr in STROKE_ATTRIBUTES:
        element.attrib.pop(attr, None)


def _repaint_fills(elements: list[ET.Element], color: str) -> None:
    for elem in elements:
        if is_paintable_fill(elem.get("fill")):
            elem.set("fill", color)


def _apply_stroke_convention(root: ET.Element, style: StyleConfig) -> None:
    for elem in [root, *_descendants(root)]:
        if not has_stroke(elem):
            continue
        _paint_stroke(elem, style.foreground_color, style.stroke_width)
        if elem is not root and is_paintable_fill(elem.get("fill")):
            elem.set("fill", "none")


def _apply_fill_convention(root: ET.Element, style: StyleConfig) -> None:
    elements = _descendants(root)
    _repaint_fills(elements, style.foreground_color)
    for elem in [root, *elements]:
        _strip_stroke(elem)


def _apply_mixed_convention(root: ET.Element, style: StyleConfig) -> None:
    elements = _descendants(root)
    _repaint_fills(elements, style.foreground_color)

    stroked = [elem for elem in [root, *elements] if has_stroke(elem)]
    for elem in stroked:
        _paint_stroke(elem, style.foreground_color, style.stroke_width)


def normalize_svg(
    markup: str,
    style: StyleConfig,
    pixel_size: float,
    convention: DrawingConvention | None = None,
) -> str:
    """Apply the style's foreground color to SVG markup.

    Args:
        markup: Source SVG document.
        style: Style configuration (foreground color and stroke width).
        pixel_size: Width and height written on the root element.
        convention: Drawing convention of the icon's collection; None
            is treated like ``"mixed"``.

    Returns:
        The rewritten markup, or ``markup`` itself if it could not be
        parsed or its root is not an ``<svg>`` element.
    """
    try:
        root = parse_svg_string(markup)
    except ET.ParseError as e:
        log.debug("Leaving unparsable markup unchanged: %s", e)
        return markup

    if not is_svg_root(root):
        log.debug("Leaving markup without <svg> root unchanged")
        return markup

    size = format_number(pixel_size)
    root.set("width", size)
    root.set("height", size)

    if convention == "stroke":
        _apply_stroke_convention(root, style)
    elif convention == "fill":
        _apply_fill_convention(root, style)
    else:
        _apply_mixed_convention(root, style)

    # Root paint is set last so inherited and currentColor paint resolve
    # to the foreground regardless of convention.
    root.set("fill", style.foreground_color)
    root.set("color", style.foreground_color)

    return serialize_svg(root)
