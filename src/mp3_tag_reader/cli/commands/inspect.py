"""Inspect command - Display the raw header and frame layout of a tag."""

import argparse

from rich.console import Console
from rich.table import Table

from ...reader import read_frames
from ...tagrecord import Field
from ..schemas import FrameInfo, InspectResponse


def cmd_inspect(args: argparse.Namespace) -> None:
    """Show the tag header and every frame, including unrecognized ones.

    Args:
        args: Parsed command-line arguments
    """
    header, frames = read_frames(args.filename, args.settings.get_extensions())

    frame_infos = []
    for frame in frames:
        field = Field.from_frame_id(frame.frame_id)
        frame_infos.append(FrameInfo(
            id=frame.name,
            offset=frame.offset,
            size=frame.size,
            field=field.value if field else None,
        ))

    if args.json:
        response = InspectResponse(
            file=args.filename,
            version=header.version_string,
            flags=header.flags,
            tag_size=header.size,
            frames=frame_infos,
        )
        print(response.model_dump_json(indent=2))
        return

    console = Console()

    table = Table(title="Tag Header", show_header=False)
    table.add_column("Field", style="cyan", width=15)
    table.add_column("Value", style="magenta")
    table.add_row("Version", header.version_string)
    table.add_row("Flags", f"0x{header.flags:02x}")
    table.add_row("Tag Size", f"{header.size:,} bytes")
    table.add_row("Audio Offset", f"{header.tag_end:,}")
    table.add_row("Frame Count", str(len(frame_infos)))
    console.print(table)

    if args.quiet or not frame_infos:
        return

    console.print()
    frame_table = Table(title="Frames")
    frame_table.add_column("ID", style="cyan")
    frame_table.add_column("Offset", justify="right")
    frame_table.add_column("Size", justify="right")
    frame_table.add_column("Field", style="magenta")
    for info in frame_infos:
        frame_table.add_row(info.id, str(info.offset), str(info.size), info.field or "-")
    console.print(frame_table)
