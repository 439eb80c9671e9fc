from pathlib import Path
from typing import Iterable, Optional

from .constants import ENCODING, MAX_TAG_SIZE, SUPPORTED_EXTENSIONS


def syncsafe_to_int(data: bytes) -> int:
    """Decode a 4-byte sync-safe integer.

    Each byte contributes its low 7 bits, most significant byte first, so
    the value can never contain a 0xFF byte that looks like an MPEG frame sync.

    Args:
        data: Exactly 4 bytes (e.g. bytes 6-9 of the tag header)

    Returns:
        Decoded integer in the range 0 .. 2**28 - 1
    """
    if len(data) != 4:
        raise ValueError(f"Sync-safe integer needs 4 bytes, got {len(data)}")
    return ((data[0] & 0x7F) << 21 |
            (data[1] & 0x7F) << 14 |
            (data[2] & 0x7F) << 7 |
            (data[3] & 0x7F))


def int_to_syncsafe(value: int) -> bytes:
    """Encode an integer as 4 sync-safe bytes.

    Args:
        value: Integer in the range 0 .. 2**28 - 1

    Returns:
        4 bytes, 7 significant bits each

    Raises:
        ValueError: If value does not fit in 28 bits
    """
    if value < 0 or value > MAX_TAG_SIZE:
        raise ValueError(f"Value {value} does not fit in a sync-safe integer")
    return bytes([
        (value >> 21) & 0x7F,
        (value >> 14) & 0x7F,
        (value >> 7) & 0x7F,
        value & 0x7F,
    ])


def has_audio_extension(filename: str, extensions: Optional[Iterable[str]] = None) -> bool:
    """Check that filename ends with one of the recognized audio extensions.

    The comparison is case-sensitive: `song.MP3` is rejected.
    """
    if extensions is None:
        extensions = SUPPORTED_EXTENSIONS
    return Path(filename).suffix in set(extensions)


def decode_text(data: bytes, encoding: str = ENCODING) -> str:
    """Decode raw frame content for display.

    Try the configured encoding first, then fall back to Latin-1, which can
    decode any byte sequence.
    """
    try:
        return str(data, encoding)
    except UnicodeDecodeError:
        return str(data, "latin-1")
