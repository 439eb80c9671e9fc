"""Exceptions raised by the tag reader, writer and editor.

All of them derive from Id3Error so callers (the CLI) can catch the whole
family in one place. Frame-level truncation is not an error: the reader
stops iterating and returns what it decoded so far.
"""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .tagrecord import TagRecord


class Id3Error(Exception):
    """Base class for tag codec errors."""


class NotAnAudioFile(Id3Error, ValueError):
    """The filename does not carry a recognized audio extension."""

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"File does not appear to be an MP3 file: {filename}")


class Id3IOError(Id3Error, OSError):
    """Opening, reading, writing, or replacing a file failed.

    When the final replace step fails, temp_path names the staged file that
    was left behind for recovery.
    """

    def __init__(self, message: str, filename: Optional[str] = None,
                 temp_path: Optional[str] = None):
        self.filename = filename
        self.temp_path = temp_path
        super().__init__(message)

    def __str__(self):
        return self.args[0] if self.args else ""


class TruncatedHeader(Id3Error, EOFError):
    """Fewer than 10 bytes were available where a tag header was expected."""

    def __init__(self, got: int, filename: Optional[str] = None):
        self.got = got
        self.filename = filename
        where = f" in {filename}" if filename else ""
        super().__init__(f"Incomplete ID3 header{where}: expected 10 bytes, got {got}")


class NoTagPresent(Id3Error):
    """The file does not start with the "ID3" marker.

    Absence of a tag is not corruption; the empty record is attached so that
    callers that only want to display tags can use it directly.
    """

    def __init__(self, filename: Optional[str] = None,
                 record: Optional["TagRecord"] = None):
        if record is None:
            from .tagrecord import TagRecord
            record = TagRecord()
        self.filename = filename
        self.record = record
        where = f" in {filename}" if filename else ""
        super().__init__(f"No ID3 tag found{where}")


class UnknownField(Id3Error, ValueError):
    """An edit named a field outside title/artist/album/year/comment/genre."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tag: {name!r}")


class TagTooLarge(Id3Error, ValueError):
    """Encoded frames do not fit in the header or frame size field."""
