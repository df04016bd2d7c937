"""Tests for elpparser.version."""

from __future__ import annotations

import pytest

from elpparser.errors import ElpFormatError
from elpparser.version import ContentFormat, detect_format


def test_content_xml_is_version_three() -> None:
    assert detect_format(["resources/a.png", "content.xml"]) == ContentFormat(3, "content.xml")


def test_contentv3_xml_is_version_two() -> None:
    assert detect_format(["contentv3.xml", "images/logo.png"]) == ContentFormat(2, "contentv3.xml")


def test_content_xml_wins_when_both_are_present() -> None:
    assert detect_format(["contentv3.xml", "content.xml"]).version == 3


def test_missing_content_entry_raises() -> None:
    with pytest.raises(ElpFormatError, match="No content XML found"):
        detect_format(["index.html"])
