"""
Unit tests for cilog_common.models and cilog_common.exceptions.

Tests parsing of the buildbot API objects and log chunk detagging.
"""

from cilog_common.exceptions import BuilderNotFound, FetchError
from cilog_common.models import Build, Builder, Log, LogChunk, Step


class TestBuilder:
    """Test suite for Builder class."""

    def test_from_dict(self):
        """Test that builders parse from API objects, ignoring extra keys."""
        builder = Builder.from_dict(
            {"name": "package_linux64", "builderid": 4, "tags": ["linux"]}
        )

        assert builder == Builder(name="package_linux64", builderid=4)

    def test_package_and_tester_builders_are_mirrored(self):
        """Test that package_ and tester_ builders are mirrored."""
        assert Builder("package_linux64", 1).is_mirrored
        assert Builder("tester_macos64", 2).is_mirrored

    def test_other_builders_are_not_mirrored(self):
        """Test that builders outside the two families are not mirrored."""
        assert not Builder("docs", 3).is_mirrored
        assert not Builder("whitespace_package_linux64", 4).is_mirrored
        assert not Builder("Package_linux64", 5).is_mirrored


class TestCompletionFlags:
    """Test suite for the complete flag on builds, steps and logs."""

    def test_complete_true(self):
        assert Build.from_dict({"buildid": 10, "complete": True}).complete
        assert Step.from_dict({"number": 1, "complete": True}).complete
        assert Log.from_dict({"logid": 5, "complete": True}).complete

    def test_missing_complete_means_incomplete(self):
        """Test that objects without a complete flag are treated as running."""
        assert not Build.from_dict({"buildid": 10}).complete
        assert not Step.from_dict({"number": 1, "complete": None}).complete
        assert not Log.from_dict({"logid": 5, "complete": False}).complete


class TestLogChunk:
    """Test suite for LogChunk detagging."""

    def test_strips_stream_tags(self):
        """Test that the first character of every line is dropped."""
        assert LogChunk("ihello\noworld").detagged() == "hello\nworld"

    def test_keeps_trailing_newline(self):
        """Test that a trailing newline survives detagging."""
        assert LogChunk("oline one\neline two\n").detagged() == "line one\nline two\n"

    def test_tag_only_lines_become_empty(self):
        """Test that a line holding only its tag becomes an empty line."""
        assert LogChunk("ofirst\no\nhlast").detagged() == "first\n\nlast"

    def test_empty_content(self):
        assert LogChunk("").detagged() == ""

    def test_from_dict(self):
        chunk = LogChunk.from_dict({"content": "ohi\n", "firstline": 0, "logid": 1})
        assert chunk.content == "ohi\n"


class TestExceptions:
    """Test suite for error types."""

    def test_fetch_error_carries_url(self):
        error = FetchError("http://example.com/api/v2/builders")

        assert error.url == "http://example.com/api/v2/builders"
        assert str(error) == "Unable to GET http://example.com/api/v2/builders"

    def test_builder_not_found_is_key_error(self):
        """Test that BuilderNotFound can be caught as a KeyError."""
        error = BuilderNotFound("package_nope")

        assert isinstance(error, KeyError)
        assert error.builder_name == "package_nope"
        assert str(error) == "Unknown builder: package_nope"
