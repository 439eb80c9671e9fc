"""Write ID3v2 tags to MP3 files.

The tag is rewritten as a whole: the new tag is staged in a temporary file
next to the original, followed by the untouched audio payload, and the
temporary file then replaces the original in one atomic step.
"""

import contextlib
import logging
import os
import shutil
import tempfile
from typing import BinaryIO, Iterable, Optional, Tuple

from .constants import BUFFER_SIZE, HEADER_SIZE, ID3_MARKER
from .errors import Id3IOError, NotAnAudioFile, TruncatedHeader
from .frame import encode_frames
from .header import TagHeader
from .tagrecord import TagRecord
from .utils import has_audio_extension

logger = logging.getLogger(__name__)


def _source_header(f: BinaryIO, filename: str) -> Tuple[TagHeader, int]:
    """Return the header to reuse and the offset where the audio payload starts.

    A tagged file keeps its own header (version and flags) and its audio
    starts after the old tag: 10 bytes plus the declared tag size. An
    untagged file gets a fresh ID3v2.3 header and all of it is audio.
    """
    data = f.read(HEADER_SIZE)
    if len(data) < HEADER_SIZE:
        raise TruncatedHeader(len(data), filename)
    if data[:3] != ID3_MARKER:
        logger.info("No ID3 tag in %s, creating a new ID3v2.3 tag", filename)
        return TagHeader.default(), 0
    header = TagHeader.from_bytes(data, filename)
    return header, header.tag_end


def to_file(src: BinaryIO, dst: BinaryIO, record: TagRecord, filename: str = "<stream>",
            buffer_size: int = BUFFER_SIZE) -> int:
    """Write the retagged contents of src into dst.

    Returns:
        Number of audio payload bytes copied
    """
    header, audio_start = _source_header(src, filename)
    frames = encode_frames(record)
    dst.write(header.with_size(len(frames)))
    dst.write(frames)

    src.seek(0, os.SEEK_END)
    file_size = src.tell()
    if audio_start > file_size:
        logger.warning(
            "Tag in %s declares %d bytes but the file only has %d; no audio copied",
            filename, audio_start, file_size,
        )
    src.seek(audio_start)
    shutil.copyfileobj(src, dst, buffer_size)
    copied = max(file_size - audio_start, 0)
    logger.debug(
        "Wrote %d bytes of frames, copied %d audio bytes from offset %d",
        len(frames), copied, audio_start,
    )
    return copied


def write(filename: str, record: TagRecord, extensions: Optional[Iterable[str]] = None,
          buffer_size: int = BUFFER_SIZE) -> None:
    """Rewrite the tag of filename with the fields of record.

    Only the six known fields are written, in fixed order; absent fields are
    omitted. The original header's version and flags are kept.

    Args:
        filename: Path to the MP3 file
        record: Tag values to write (not modified)
        extensions: Recognized audio extensions (defaults to .mp3)
        buffer_size: Copy buffer size for the audio payload

    Raises:
        NotAnAudioFile: If the extension is not recognized
        TruncatedHeader: If the file is shorter than a tag header
        TagTooLarge: If the encoded frames do not fit in the tag header
        Id3IOError: If any file operation fails. If the final replace fails,
            the staged file is left in place and named by temp_path.
    """
    if not has_audio_extension(filename, extensions):
        raise NotAnAudioFile(filename)

    directory = os.path.dirname(os.path.abspath(filename))
    try:
        src = open(filename, "rb")
    except OSError as e:
        raise Id3IOError(f"Cannot open {filename} for reading: {e}", filename) from e

    with src:
        try:
            fd, temp_path = tempfile.mkstemp(
                prefix=f".{os.path.basename(filename)}.", suffix=".tmp", dir=directory
            )
        except OSError as e:
            raise Id3IOError(f"Cannot create temporary file in {directory}: {e}", filename) from e

        try:
            with os.fdopen(fd, "wb") as dst:
                to_file(src, dst, record, filename, buffer_size)
            shutil.copymode(filename, temp_path)
        except OSError as e:
            with contextlib.suppress(OSError):
                os.unlink(temp_path)
            raise Id3IOError(f"Cannot write tags to {filename}: {e}", filename) from e
        except BaseException:
            with contextlib.suppress(OSError):
                os.unlink(temp_path)
            raise

    try:
        os.replace(temp_path, filename)
    except OSError as e:
        raise Id3IOError(
            f"Cannot replace {filename} with {temp_path}: {e}", filename, temp_path
        ) from e

    logger.info("Wrote tags to %s", filename)
