"""MP3 Tag Reader.

Reads, displays and rewrites the ID3v2 tag at the start of MP3 files.

Main modules:
    reader: Parse the tag header and frames into a TagRecord
    writer: Rewrite a file with a new tag, keeping its audio payload
    editor: Change a single field (read, modify, write)
    cli: Command-line interface (mp3tag command)

Core modules:
    tagrecord: TagRecord and the Field enumeration
    header: The 10-byte tag header
    frame: Frame encoding and decoding
    config: Configuration management
    constants: Format constants
    utils: Sync-safe integers and other helpers
"""

try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("mp3-tag-reader")
except PackageNotFoundError:
    # Package not installed; read directly from pyproject.toml
    try:
        from pathlib import Path
        import tomllib

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            __version__ = tomllib.load(f)["project"]["version"]
    except (OSError, KeyError, ValueError):
        __version__ = "unknown"

from .editor import edit
from .errors import (
    Id3Error,
    Id3IOError,
    NoTagPresent,
    NotAnAudioFile,
    TagTooLarge,
    TruncatedHeader,
    UnknownField,
)
from .reader import read, read_or_empty
from .tagrecord import Field, TagRecord
from .writer import write

__all__ = [
    "read",
    "read_or_empty",
    "write",
    "edit",
    "TagRecord",
    "Field",
    "Id3Error",
    "Id3IOError",
    "NoTagPresent",
    "NotAnAudioFile",
    "TagTooLarge",
    "TruncatedHeader",
    "UnknownField",
]
