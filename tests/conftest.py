"""Pytest configuration and fixtures.

The fixtures build synthetic MP3 files byte by byte so that tests do not
depend on the codec under test to produce their input.
"""

import struct

import pytest

# Fake audio payload; contains every byte value, including 0x00 and 0xFF
AUDIO = bytes(range(256)) * 8


def _syncsafe(value):
    return bytes([(value >> 21) & 0x7F, (value >> 14) & 0x7F, (value >> 7) & 0x7F, value & 0x7F])


@pytest.fixture
def audio_payload():
    """Audio bytes that follow the tag in generated files."""
    return AUDIO


@pytest.fixture
def make_frame():
    """Return a function building one frame: id | plain BE size | flags | content."""

    def _make_frame(frame_id, content, declared_size=None):
        size = len(content) if declared_size is None else declared_size
        return struct.pack(">4sI2s", frame_id, size, b"\x00\x00") + content

    return _make_frame


@pytest.fixture
def make_tag():
    """Return a function building a full tag: header + frames + padding."""

    def _make_tag(frames, major=3, minor=0, flags=0, padding=0, declared_size=None):
        body = b"".join(frames) + b"\x00" * padding
        size = len(body) if declared_size is None else declared_size
        return b"ID3" + bytes([major, minor, flags]) + _syncsafe(size) + body

    return _make_tag


@pytest.fixture
def mp3_file(tmp_path):
    """Return a function writing bytes to a file in tmp_path and returning its path."""

    def _mp3_file(data, name="song.mp3"):
        path = tmp_path / name
        path.write_bytes(data)
        return str(path)

    return _mp3_file


@pytest.fixture
def tagged_mp3(make_frame, make_tag, mp3_file):
    """An MP3 file with all six fields, an unknown frame, padding and audio."""
    frames = [
        make_frame(b"TIT2", b"A"),
        make_frame(b"TPE1", b"Some Artist"),
        make_frame(b"TXXX", b"\x00custom\x00value"),
        make_frame(b"TALB", b"Some Album"),
        make_frame(b"TYER", b"1999"),
        make_frame(b"COMM", b"a comment"),
        make_frame(b"TCON", b"Rock"),
    ]
    return mp3_file(make_tag(frames, padding=64) + AUDIO)
