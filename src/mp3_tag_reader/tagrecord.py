"""In-memory representation of one file's ID3 metadata."""

from enum import Enum
from typing import Dict, Iterator, Optional, Tuple

from .constants import ENCODING, FRAME_IDS
from .errors import UnknownField
from .utils import decode_text


class Field(Enum):
    """The six fields the codec understands.

    Declaration order is the order frames are written in.
    """

    TITLE = "title"
    ARTIST = "artist"
    ALBUM = "album"
    YEAR = "year"
    COMMENT = "comment"
    GENRE = "genre"

    @property
    def frame_id(self) -> bytes:
        return FRAME_IDS[self.value]

    @classmethod
    def from_name(cls, name: str) -> "Field":
        """Look up a field by its exact (case-sensitive) name.

        Raises:
            UnknownField: If name is not one of the six field names
        """
        try:
            return cls(name)
        except ValueError:
            raise UnknownField(name) from None

    @classmethod
    def from_frame_id(cls, frame_id: bytes) -> Optional["Field"]:
        return _FIELDS_BY_FRAME_ID.get(frame_id)


_FIELDS_BY_FRAME_ID = {field.frame_id: field for field in Field}


class TagRecord:
    """Decoded tag: a version string plus six optional byte-string fields.

    A field is None when no such frame was present (or it was never set).
    Content is not validated; empty and non null-free values are accepted.

    The record can be used as a context manager; leaving the block clears
    every field.
    """

    __slots__ = ("version", "title", "artist", "album", "year", "comment", "genre")

    def __init__(self, version: Optional[str] = None, **fields: Optional[bytes]):
        self.version = version
        for field in Field:
            setattr(self, field.value, None)
        for name, value in fields.items():
            self[Field.from_name(name)] = value

    @classmethod
    def dummy(cls) -> "TagRecord":
        """Placeholder record written by the `write` command."""
        record = cls(version="ID3v2.3")
        for field in Field:
            record[field] = f"dummy {field.value}".encode("ascii")
        return record

    def __getitem__(self, field: Field) -> Optional[bytes]:
        return getattr(self, field.value)

    def __setitem__(self, field: Field, value: Optional[bytes]):
        if value is not None:
            value = bytes(value)
        setattr(self, field.value, value)

    def __enter__(self) -> "TagRecord":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.clear()
        return False

    def __repr__(self):
        parts = [f"version={self.version!r}"]
        parts.extend(f"{field.value}={value!r}" for field, value in self.items())
        return f"TagRecord({', '.join(parts)})"

    def items(self) -> Iterator[Tuple[Field, bytes]]:
        """Yield (field, value) for every set field, in output order."""
        for field in Field:
            value = self[field]
            if value is not None:
                yield field, value

    def is_empty(self) -> bool:
        return all(self[field] is None for field in Field)

    def clear(self) -> None:
        self.version = None
        for field in Field:
            self[field] = None

    def set_text(self, field: Field, text: str, encoding: str = ENCODING) -> None:
        self[field] = text.encode(encoding)

    def text(self, field: Field, encoding: str = ENCODING) -> Optional[str]:
        value = self[field]
        if value is None:
            return None
        return decode_text(value, encoding)

    def as_dict(self, encoding: str = ENCODING) -> Dict[str, Optional[str]]:
        """Decoded view of the record, keyed by field name."""
        data: Dict[str, Optional[str]] = {"version": self.version}
        for field in Field:
            data[field.value] = self.text(field, encoding)
        return data
