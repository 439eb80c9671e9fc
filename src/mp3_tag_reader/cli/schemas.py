"""Pydantic schemas for JSON output.

Used by the --json option of the view and inspect commands, and for the
error object printed when a --json command fails.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response for all commands."""

    status: Literal["error"] = "error"
    error: str = Field(
        description="Machine-readable error code",
        examples=["no_tag", "truncated_header", "not_an_audio_file", "io_error"],
    )
    message: str = Field(description="Human-readable error description")


class StreamInfo(BaseModel):
    """MPEG stream properties reported by mutagen."""

    length: float = Field(ge=0, description="Duration in seconds")
    bitrate: int = Field(ge=0, description="Bitrate in bits per second")
    sample_rate: int = Field(ge=0, description="Sample rate in Hz")
    channels: int = Field(ge=0, description="Number of channels")


class TagResponse(BaseModel):
    """Decoded tag of one file (view command).

    Fields that are absent from the tag are null.
    """

    status: Literal["success"] = "success"
    file: str = Field(description="Path to the MP3 file")
    version: Optional[str] = Field(default=None, description="ID3v2 version, e.g. ID3v2.3.0")
    title: Optional[str] = None
    artist: Optional[str] = None
    album: Optional[str] = None
    year: Optional[str] = None
    comment: Optional[str] = None
    genre: Optional[str] = None
    stream: Optional[StreamInfo] = Field(default=None, description="Audio stream properties")


class FrameInfo(BaseModel):
    """One raw frame as stored in the file (inspect command)."""

    id: str = Field(description="4-character frame identifier")
    offset: int = Field(ge=0, description="Offset of the frame header in the file")
    size: int = Field(ge=0, description="Declared payload size in bytes")
    field: Optional[str] = Field(default=None, description="Tag field the frame maps to")


class InspectResponse(BaseModel):
    """Header and frame layout of a tag (inspect command)."""

    status: Literal["success"] = "success"
    file: str = Field(description="Path to the MP3 file")
    version: str = Field(description="ID3v2 version")
    flags: int = Field(ge=0, le=255, description="Header flag byte")
    tag_size: int = Field(ge=0, description="Declared tag size (sync-safe decoded)")
    frames: List[FrameInfo] = Field(default_factory=list)

