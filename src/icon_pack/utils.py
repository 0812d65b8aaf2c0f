"""Utility functions for SVG parsing and serialization."""

from xml.etree import ElementTree as ET

# SVG namespace mappings
SVG_NAMESPACES = {
    "svg": "http://www.w3.org/2000/svg",
    "xlink": "http://www.w3.org/1999/xlink",
}


def register_namespaces() -> None:
    """Register SVG namespaces to preserve prefixes when writing.

    The SVG namespace is registered as the default namespace so that
    serialized documents keep plain ``<svg>``/``<path>`` tags.
    """
    ET.register_namespace("", SVG_NAMESPACES["svg"])
    ET.register_namespace("xlink", SVG_NAMESPACES["xlink"])


def parse_svg_string(markup: str) -> ET.Element:
    """Parse SVG markup and return the root element.

    Args:
        markup: SVG document text.

    Returns:
        Root element of the parsed SVG.

    Raises:
        ET.ParseError: If the markup is not valid XML.
    """
    register_namespaces()
    return ET.fromstring(markup)


def serialize_svg(root: ET.Element) -> str:
    """Serialize an SVG element tree back to a string."""
    register_namespaces()
    return ET.tostring(root, encoding="unicode")


def get_local_name(tag: str) -> str:
    """Extract local name from a namespaced tag.

    Args:
        tag: Full tag name, possibly with namespace.

    Returns:
        Local name without namespace prefix.

    Example:
        >>> get_local_name("{http://www.w3.org/2000/svg}rect")
        'rect'
    """
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def is_svg_root(element: ET.Element) -> bool:
    """Check if an element is an ``<svg>`` document element."""
    return isinstance(element.tag, str) and get_local_name(element.tag) == "svg"


def format_number(value: float) -> str:
    """Format a number for an SVG attribute.

    Integral values are written without a fractional part.

    Examples:
        >>> format_number(2.0)
        '2'
        >>> format_number(86.4)
        '86.4'
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
