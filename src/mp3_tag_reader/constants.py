# Outer tag header layout (ID3v2):
# "ID3" | major | minor | flags | size (4 bytes, sync-safe)
ID3_MARKER = b"ID3"
HEADER_SIZE = 10

# Header written when the source file carries no ID3 tag at all
# ID3v2.3.0, no flags
DEFAULT_HEADER_PREFIX = ID3_MARKER + b"\x03\x00\x00"

# Frame header layout:
# identifier (4 ASCII bytes) | size (4 bytes, plain big-endian) | flags (2 bytes)
FRAME_HEADER_SIZE = 10
FRAME_HEADER_FORMAT = ">4sI2s"
FRAME_FLAGS = b"\x00\x00"
PADDING_ID = b"\x00\x00\x00\x00"

# Sync-safe integers keep 7 bits per byte, so 4 bytes hold at most 2**28 - 1
MAX_TAG_SIZE = 0x0FFFFFFF
MAX_FRAME_SIZE = 0xFFFFFFFF

# Output order of the known frames is fixed and matches Field declaration order
FRAME_IDS = {
    "title": b"TIT2",
    "artist": b"TPE1",
    "album": b"TALB",
    "year": b"TYER",
    "comment": b"COMM",
    "genre": b"TCON",
}

FIELD_NAMES = list(FRAME_IDS)

SUPPORTED_EXTENSIONS = [".mp3"]

ENCODING = "utf-8"

# Copy buffer for splicing the audio payload
BUFFER_SIZE = 8192  # 8KB
