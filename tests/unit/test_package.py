"""
Tests for the top-level package interface.
"""
import thoughty
from thoughty import generate_text_file, parse_text_file
from thoughty.dataclasses.txt_entry import EntryRecord


class TestPackageDocs:
    """The package docstring describes the default layout."""

    def test_documented_headers_match_encoder(self):
        """Header examples are what the encoder writes with default tokens."""
        text = generate_text_file([
            EntryRecord("2024-01-15", 1, ["work", "ideas"], "a"),
            EntryRecord("2024-01-15", 2, ["home"], "b"),
        ])
        for header in ("---2024-01-15--[work,ideas]", "---2--[home]"):
            assert header in thoughty.__doc__
            assert header in text

    def test_docstring_example(self):
        """The usage example in the docstring works."""
        text = generate_text_file([{"date": "2024-01-15", "content": "Hi"}])
        assert parse_text_file(text)[0].content == "Hi"

    def test_version(self):
        """The package exposes its version."""
        assert thoughty.__version__ == "2.0.0"
