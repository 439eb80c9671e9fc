"""Frame codec: decode and encode individual ID3v2 frames.

Frame sizes are plain big-endian 32-bit integers for every tag version.
ID3v2.4 declares them sync-safe, so v2.4 frames larger than 127 bytes are
read with the wrong size; the tag header's size is always sync-safe.
"""

import logging
import os
import struct
from typing import BinaryIO, Iterator, NamedTuple, Optional

from .constants import (
    FRAME_FLAGS,
    FRAME_HEADER_FORMAT,
    FRAME_HEADER_SIZE,
    MAX_FRAME_SIZE,
    PADDING_ID,
)
from .errors import TagTooLarge
from .tagrecord import Field, TagRecord

logger = logging.getLogger(__name__)


class RawFrame(NamedTuple):
    """One frame as found in the file; only exists while iterating."""

    frame_id: bytes
    size: int
    flags: bytes
    payload: bytes
    offset: int

    @property
    def name(self) -> str:
        return self.frame_id.decode("latin-1")


def read_frame(f: BinaryIO) -> Optional[RawFrame]:
    """Decode the frame starting at the current position of f.

    Returns:
        The frame, or None when iteration must stop: padding (an all-zero
        identifier) was reached, or the header or payload is truncated.
    """
    offset = f.tell()
    header = f.read(FRAME_HEADER_SIZE)
    if header[:4] == PADDING_ID:
        logger.debug("Padding reached at offset %d", offset)
        return None
    if len(header) < FRAME_HEADER_SIZE:
        logger.warning(
            "Truncated frame header at offset %d: expected %d bytes, got %d",
            offset, FRAME_HEADER_SIZE, len(header),
        )
        return None

    frame_id, size, flags = struct.unpack(FRAME_HEADER_FORMAT, header)
    start = f.tell()
    available = f.seek(0, os.SEEK_END) - start
    f.seek(start)
    if size > available:
        logger.warning(
            "Truncated frame %r at offset %d: declared %d bytes, only %d available",
            frame_id, offset, size, available,
        )
        return None

    payload = f.read(size)
    return RawFrame(frame_id, size, flags, payload, offset)


def iter_frames(f: BinaryIO, tag_end: int) -> Iterator[RawFrame]:
    """Yield frames from the current position of f until tag_end.

    A frame whose payload runs past tag_end is still returned as long as the
    bytes are physically present.
    """
    while f.tell() < tag_end:
        frame = read_frame(f)
        if frame is None:
            return
        if f.tell() > tag_end:
            logger.warning(
                "Frame %r at offset %d extends %d bytes past the tag end",
                frame.frame_id, frame.offset, f.tell() - tag_end,
            )
        yield frame


def decode_frames(f: BinaryIO, tag_end: int, record: TagRecord) -> TagRecord:
    """Populate record from the frames between the current position and tag_end.

    Unrecognized frames are skipped. A later frame with the same identifier
    replaces an earlier one.
    """
    for frame in iter_frames(f, tag_end):
        field = Field.from_frame_id(frame.frame_id)
        if field is None:
            logger.debug("Skipping frame %r (%d bytes)", frame.frame_id, frame.size)
            continue
        logger.debug("Decoded %s from frame %r (%d bytes)", field.value, frame.frame_id, frame.size)
        record[field] = frame.payload
    return record


def encode_frame(frame_id: bytes, content: Optional[bytes]) -> bytes:
    """Encode a single frame; absent content produces no bytes at all."""
    if content is None:
        return b""
    if len(frame_id) != 4:
        raise ValueError(f"Frame identifier must be 4 bytes, got {frame_id!r}")
    if len(content) > MAX_FRAME_SIZE:
        raise TagTooLarge(f"Frame {frame_id!r} content of {len(content)} bytes is too large")
    return struct.pack(FRAME_HEADER_FORMAT, frame_id, len(content), FRAME_FLAGS) + content


def encode_frames(record: TagRecord) -> bytes:
    """Encode every set field of record, in fixed output order."""
    return b"".join(encode_frame(field.frame_id, value) for field, value in record.items())
