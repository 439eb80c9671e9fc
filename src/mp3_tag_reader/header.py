"""The 10-byte ID3v2 tag header."""

from typing import BinaryIO, Optional

from .constants import DEFAULT_HEADER_PREFIX, HEADER_SIZE, ID3_MARKER, MAX_TAG_SIZE
from .errors import NoTagPresent, TagTooLarge, TruncatedHeader
from .utils import int_to_syncsafe, syncsafe_to_int


class TagHeader:
    """Outer tag header: "ID3" | major | minor | flags | sync-safe size.

    `size` is the declared size of the tag body, excluding the header itself.
    """

    def __init__(self, major: int = 3, minor: int = 0, flags: int = 0, size: int = 0,
                 raw: Optional[bytes] = None):
        self.major = major
        self.minor = minor
        self.flags = flags
        self.size = size
        self.raw = raw

    @property
    def version_string(self) -> str:
        return f"ID3v2.{self.major}.{self.minor}"

    @property
    def tag_end(self) -> int:
        """Offset of the first byte after the tag (header included)."""
        return HEADER_SIZE + self.size

    def to_bytes(self) -> bytes:
        return self.with_size(self.size)

    def with_size(self, size: int) -> bytes:
        """Serialize the header unchanged except for a new body size.

        Raises:
            TagTooLarge: If size does not fit in 28 bits
        """
        if size < 0 or size > MAX_TAG_SIZE:
            raise TagTooLarge(
                f"Tag body of {size} bytes exceeds the maximum of {MAX_TAG_SIZE} bytes"
            )
        if self.raw is not None:
            prefix = self.raw[:6]
        else:
            prefix = ID3_MARKER + bytes([self.major, self.minor, self.flags])
        return prefix + int_to_syncsafe(size)

    def __repr__(self):
        return (f"TagHeader(version={self.version_string!r}, "
                f"flags=0x{self.flags:02x}, size={self.size})")

    @staticmethod
    def default() -> "TagHeader":
        """Header used when a file has no tag yet (ID3v2.3.0, no flags)."""
        return TagHeader.from_bytes(DEFAULT_HEADER_PREFIX + b"\x00" * 4)

    @staticmethod
    def from_bytes(data: bytes, filename: Optional[str] = None) -> "TagHeader":
        """Parse a tag header.

        Raises:
            TruncatedHeader: If fewer than 10 bytes were supplied
            NoTagPresent: If the data does not start with "ID3"
        """
        if len(data) < HEADER_SIZE:
            raise TruncatedHeader(len(data), filename)
        data = bytes(data[:HEADER_SIZE])
        if data[:3] != ID3_MARKER:
            raise NoTagPresent(filename)
        return TagHeader(
            major=data[3],
            minor=data[4],
            flags=data[5],
            size=syncsafe_to_int(data[6:10]),
            raw=data,
        )

    @staticmethod
    def from_file(f: BinaryIO, filename: Optional[str] = None) -> "TagHeader":
        """Read and parse the header at the current position of f."""
        return TagHeader.from_bytes(f.read(HEADER_SIZE), filename)
