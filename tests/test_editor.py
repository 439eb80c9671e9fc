"""Tests for editing a single tag field."""

from unittest.mock import patch

import pytest

from mp3_tag_reader.editor import edit
from mp3_tag_reader.errors import NoTagPresent, NotAnAudioFile, UnknownField
from mp3_tag_reader.header import TagHeader
from mp3_tag_reader.reader import read


def read_bytes(path):
    with open(path, "rb") as f:
        return f.read()


class TestEdit:
    """Test editor.edit()."""

    def test_edit_title(self, tagged_mp3, audio_payload):
        """Test editing the title."""
        edit(tagged_mp3, "title", "B")
        record = read(tagged_mp3)
        assert record.title == b"B"
        assert record.artist == b"Some Artist"
        assert record.album == b"Some Album"
        assert record.year == b"1999"
        assert record.comment == b"a comment"
        assert record.genre == b"Rock"

        with open(tagged_mp3, "rb") as f:
            header = TagHeader.from_file(f)
            f.seek(header.tag_end)
            assert f.read() == audio_payload

    @pytest.mark.parametrize("name", ["title", "artist", "album", "year", "comment", "genre"])
    def test_every_field_can_be_edited(self, tagged_mp3, name):
        """Each of the six fields can be edited."""
        edit(tagged_mp3, name, "new value")
        assert getattr(read(tagged_mp3), name) == b"new value"

    def test_value_replaces_instead_of_appending(self, tagged_mp3):
        """The new value replaces the old one entirely."""
        edit(tagged_mp3, "artist", "X")
        edit(tagged_mp3, "artist", "Y")
        assert read(tagged_mp3).artist == b"Y"

    def test_sets_field_missing_from_tag(self, make_tag, make_frame, mp3_file):
        """A field absent from the tag is added."""
        path = mp3_file(make_tag([make_frame(b"TIT2", b"T")]))
        edit(path, "genre", "Blues")
        record = read(path)
        assert record.title == b"T"
        assert record.genre == b"Blues"

    def test_empty_value(self, tagged_mp3):
        """An empty value is written as an empty frame."""
        edit(tagged_mp3, "comment", "")
        assert read(tagged_mp3).comment == b""

    def test_text_encoding(self, tagged_mp3):
        """String values are encoded with the given encoding."""
        edit(tagged_mp3, "artist", "Motörhead", encoding="latin-1")
        assert read(tagged_mp3).artist == b"Mot\xf6rhead"

    def test_bytes_value(self, tagged_mp3):
        """Bytes values are stored as given."""
        edit(tagged_mp3, "year", b"\x00raw")
        assert read(tagged_mp3).year == b"\x00raw"

    def test_unknown_field_leaves_file_unchanged(self, tagged_mp3):
        """An unknown field fails without modifying the file."""
        before = read_bytes(tagged_mp3)
        with pytest.raises(UnknownField) as excinfo:
            edit(tagged_mp3, "lyrics", "x")
        assert excinfo.value.name == "lyrics"
        assert read_bytes(tagged_mp3) == before

    def test_field_name_is_case_sensitive(self, tagged_mp3):
        """Field names must be lowercase."""
        with pytest.raises(UnknownField):
            edit(tagged_mp3, "Title", "x")

    def test_unknown_field_does_not_write(self, tagged_mp3):
        """An unknown field never reaches the writer."""
        with patch("mp3_tag_reader.editor.writer.write") as mock_write:
            with pytest.raises(UnknownField):
                edit(tagged_mp3, "lyrics", "x")
        mock_write.assert_not_called()

    def test_file_without_tag_fails(self, mp3_file, audio_payload):
        """NoTagPresent propagates from the reader."""
        data = b"\xff\xfb\x90\x64" + audio_payload
        path = mp3_file(data)
        with pytest.raises(NoTagPresent):
            edit(path, "title", "x")
        assert read_bytes(path) == data

    def test_not_an_audio_file(self, mp3_file, make_tag):
        """Test that a non-MP3 extension is rejected."""
        with pytest.raises(NotAnAudioFile):
            edit(mp3_file(make_tag([]), name="song.wav"), "title", "x")
