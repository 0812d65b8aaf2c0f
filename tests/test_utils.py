"""Tests for icon_pack.utils module."""

import pytest
from pathlib import Path
from xml.etree import ElementTree as ET

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from icon_pack.utils import (
    SVG_NAMESPACES,
    format_number,
    get_local_name,
    is_svg_root,
    parse_svg_string,
    serialize_svg,
)


class TestGetLocalName:
    """Tests for get_local_name function."""

    def test_with_namespace(self):
        assert get_local_name("{http://www.w3.org/2000/svg}path") == "path"

    def test_without_namespace(self):
        assert get_local_name("rect") == "rect"

    def test_empty_namespace(self):
        assert get_local_name("{}rect") == "rect"

    def test_complex_local_name(self):
        assert get_local_name("{http://example.com}my-element") == "my-element"


class TestIsSvgRoot:
    """Tests for is_svg_root function."""

    def test_namespaced_svg(self):
        assert is_svg_root(ET.Element(f"{{{SVG_NAMESPACES['svg']}}}svg")) is True

    def test_plain_svg(self):
        assert is_svg_root(ET.Element("svg")) is True

    def test_other_root(self):
        assert is_svg_root(ET.Element("html")) is False


class TestFormatNumber:
    """Tests for format_number function."""

    @pytest.mark.parametrize(
        "value,expected",
        [(2, "2"), (2.0, "2"), (144, "144"), (86.4, "86.4"), (1.5, "1.5")],
    )
    def test_values(self, value, expected):
        assert format_number(value) == expected


class TestParseAndSerialize:
    """Tests for parse_svg_string and serialize_svg."""

    def test_default_namespace_preserved(self):
        markup = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M0 0"/></svg>'
        output = serialize_svg(parse_svg_string(markup))
        assert "ns0:" not in output
        assert "svg:" not in output
        assert output.startswith("<svg")
        assert 'xmlns="http://www.w3.org/2000/svg"' in output

    def test_xlink_prefix_preserved(self):
        markup = (
            '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink">'
            '<use xlink:href="#a"/></svg>'
        )
        output = serialize_svg(parse_svg_string(markup))
        assert 'xlink:href="#a"' in output

    def test_invalid_markup_raises(self):
        with pytest.raises(ET.ParseError):
            parse_svg_string("<svg><path></svg>")
