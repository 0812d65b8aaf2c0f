"""Tests for icon_pack.identifiers module."""

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from icon_pack.errors import InvalidIconIdError
from icon_pack.identifiers import (
    icon_file_name,
    join_icon_id,
    normalize_icon_name,
    split_icon_id,
)


class TestJoinAndSplit:
    """Tests for join_icon_id and split_icon_id."""

    def test_join(self):
        assert join_icon_id("lucide", "home") == "lucide:home"

    def test_split(self):
        assert split_icon_id("lucide:home") == ("lucide", "home")

    def test_split_keeps_extra_separators_in_name(self):
        assert split_icon_id("mdi:a:b:c") == ("mdi", "a:b:c")

    @pytest.mark.parametrize(
        "collection,name",
        [
            ("lucide", "home"),
            ("material-symbols", "settings-outline"),
            ("mdi", "name:with:colons"),
            ("ph", "My Icon"),
        ],
    )
    def test_split_inverts_join(self, collection, name):
        assert split_icon_id(join_icon_id(collection, name)) == (collection, name)

    def test_missing_separator(self):
        with pytest.raises(InvalidIconIdError, match="separator"):
            split_icon_id("lucide")

    def test_empty_name(self):
        with pytest.raises(InvalidIconIdError, match="empty name"):
            split_icon_id("lucide:")

    def test_empty_collection(self):
        with pytest.raises(InvalidIconIdError, match="empty collection"):
            split_icon_id(":home")

    def test_invalid_id_is_value_error(self):
        with pytest.raises(ValueError):
            split_icon_id("")


class TestNormalizeIconName:
    """Tests for normalize_icon_name function."""

    def test_spaces(self):
        assert normalize_icon_name("My Icon") == "my-icon"

    def test_whitespace_runs(self):
        assert normalize_icon_name("MY  ICON") == "my-icon"

    def test_tabs_and_newlines(self):
        assert normalize_icon_name("a\t\nb") == "a-b"

    def test_already_normalized(self):
        assert normalize_icon_name("my-icon") == "my-icon"

    @pytest.mark.parametrize("name", ["My Icon", "MY  ICON", "my-icon", " Lead Trail ", "x"])
    def test_idempotent(self, name):
        once = normalize_icon_name(name)
        assert normalize_icon_name(once) == once


class TestIconFileName:
    """Tests for icon_file_name function."""

    def test_simple(self):
        assert icon_file_name("lucide:home") == "lucide-home.png"

    def test_name_is_normalized(self):
        assert icon_file_name("ph:Big  Arrow") == "ph-big-arrow.png"

    def test_invalid_id(self):
        with pytest.raises(InvalidIconIdError):
            icon_file_name("home")
