"""Tests for the ID3v2 tag header."""

import io

import pytest

from mp3_tag_reader.errors import NoTagPresent, TagTooLarge, TruncatedHeader
from mp3_tag_reader.header import TagHeader


class TestTagHeader:
    """Test parsing and serializing the 10-byte header."""

    def test_parse(self):
        """Test parsing a v2.3 header."""
        header = TagHeader.from_bytes(b"ID3\x03\x00\x40\x00\x00\x02\x01")
        assert header.major == 3
        assert header.minor == 0
        assert header.flags == 0x40
        assert header.size == 257
        assert header.tag_end == 267
        assert header.version_string == "ID3v2.3.0"

    def test_parse_v24(self):
        """Test parsing a v2.4 header."""
        header = TagHeader.from_bytes(b"ID3\x04\x00\x00\x7f\x7f\x7f\x7f")
        assert header.version_string == "ID3v2.4.0"
        assert header.size == 0x0FFFFFFF

    def test_parse_ignores_trailing_bytes(self):
        """Only the first ten bytes are read."""
        header = TagHeader.from_bytes(b"ID3\x03\x00\x00\x00\x00\x00\x05" + b"TIT2")
        assert header.size == 5

    def test_truncated(self):
        """Fewer than ten bytes raise TruncatedHeader."""
        with pytest.raises(TruncatedHeader) as excinfo:
            TagHeader.from_bytes(b"ID3\x03\x00")
        assert excinfo.value.got == 5

    def test_missing_marker(self):
        """Data without the ID3 marker raises NoTagPresent."""
        with pytest.raises(NoTagPresent) as excinfo:
            TagHeader.from_bytes(b"\xff\xfb\x90\x64" + b"\x00" * 6, "x.mp3")
        assert excinfo.value.record.is_empty()
        assert "x.mp3" in str(excinfo.value)

    def test_from_file(self):
        """Test reading a header from a stream."""
        f = io.BytesIO(b"ID3\x03\x00\x00\x00\x00\x00\x0aREST")
        header = TagHeader.from_file(f)
        assert header.size == 10
        assert f.tell() == 10

    def test_with_size_keeps_version_and_flags(self):
        """Only the size bytes change."""
        raw = b"ID3\x04\x01\x80\x00\x00\x00\x10"
        header = TagHeader.from_bytes(raw)
        assert header.with_size(257) == b"ID3\x04\x01\x80\x00\x00\x02\x01"
        assert header.to_bytes() == raw

    def test_with_size_too_large(self):
        """Sizes beyond 28 bits raise TagTooLarge."""
        header = TagHeader.default()
        with pytest.raises(TagTooLarge):
            header.with_size(2**28)

    def test_default(self):
        """The default header is ID3v2.3.0 without flags."""
        header = TagHeader.default()
        assert header.version_string == "ID3v2.3.0"
        assert header.flags == 0
        assert header.to_bytes() == b"ID3\x03\x00\x00\x00\x00\x00\x00"

    def test_constructed_header(self):
        """Test serializing a header built without raw bytes."""
        header = TagHeader(major=4, minor=0, flags=0, size=3)
        assert header.to_bytes() == b"ID3\x04\x00\x00\x00\x00\x00\x03"
