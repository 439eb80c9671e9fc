"""MPEG audio stream summary, shown next to the tag by the view command."""

import logging
from typing import Any, Dict, Optional

import mutagen
from mutagen.mp3 import MP3

logger = logging.getLogger(__name__)


def stream_info(filename: str) -> Optional[Dict[str, Any]]:
    """Return length, bitrate, sample rate and channels of an MP3 stream.

    Returns:
        Dict with the stream properties, or None if mutagen cannot find a
        valid MPEG stream in the file
    """
    try:
        audio = MP3(filename)
    except mutagen.MutagenError as e:
        logger.debug("No MPEG stream info for %s: %s", filename, e)
        return None

    info = audio.info
    return {
        "length": round(info.length, 2),
        "bitrate": info.bitrate,
        "sample_rate": info.sample_rate,
        "channels": info.channels,
    }
