"""Read ID3v2 tags from MP3 files."""

import logging
from typing import BinaryIO, Iterable, List, Optional, Tuple

from .errors import Id3IOError, NoTagPresent, NotAnAudioFile
from .frame import RawFrame, decode_frames, iter_frames
from .header import TagHeader
from .tagrecord import TagRecord
from .utils import has_audio_extension

logger = logging.getLogger(__name__)


def from_file(f: BinaryIO, filename: Optional[str] = None) -> TagRecord:
    """Return a TagRecord given a file object positioned at the tag header.

    Raises:
        TruncatedHeader: If fewer than 10 header bytes are available
        NoTagPresent: If the file does not start with "ID3"; the exception's
            record attribute holds an all-unset TagRecord
    """
    header = TagHeader.from_file(f, filename)
    record = TagRecord(version=header.version_string)
    logger.debug("Found %r in %s", header, filename or "<stream>")
    return decode_frames(f, f.tell() + header.size, record)


def read(filename: str, extensions: Optional[Iterable[str]] = None) -> TagRecord:
    """Return the TagRecord stored in filename.

    Args:
        filename: Path to the MP3 file
        extensions: Recognized audio extensions (defaults to .mp3)

    Raises:
        NotAnAudioFile: If the extension is not recognized
        Id3IOError: If the file cannot be opened or read
        TruncatedHeader: If the file is shorter than a tag header
        NoTagPresent: If the file carries no ID3 tag
    """
    if not has_audio_extension(filename, extensions):
        raise NotAnAudioFile(filename)

    try:
        with open(filename, "rb") as f:
            return from_file(f, filename)
    except OSError as e:
        raise Id3IOError(f"Cannot read {filename}: {e}", filename) from e


def read_frames(filename: str,
                extensions: Optional[Iterable[str]] = None) -> Tuple[TagHeader, List[RawFrame]]:
    """Return the tag header of filename and every frame in its tag.

    Unlike read(), unrecognized frames are kept; iteration stops at the same
    padding and truncation conditions.

    Raises:
        Same as read()
    """
    if not has_audio_extension(filename, extensions):
        raise NotAnAudioFile(filename)

    try:
        with open(filename, "rb") as f:
            header = TagHeader.from_file(f, filename)
            return header, list(iter_frames(f, header.tag_end))
    except OSError as e:
        raise Id3IOError(f"Cannot read {filename}: {e}", filename) from e


def read_or_empty(filename: str, extensions: Optional[Iterable[str]] = None) -> TagRecord:
    """Like read(), but a file without a tag yields an all-unset record."""
    try:
        return read(filename, extensions)
    except NoTagPresent as e:
        logger.info("No ID3 tag in %s", filename)
        return e.record
