"""View command - Display the tag of an MP3 file."""

import argparse

from rich.console import Console
from rich.table import Table

from ...reader import read_or_empty
from ...stream_info import stream_info
from ...tagrecord import Field
from ..schemas import StreamInfo, TagResponse


def cmd_view(args: argparse.Namespace) -> None:
    """Read and display the tags of an MP3 file.

    A file without an ID3 tag is shown with every field as N/A.

    Args:
        args: Parsed command-line arguments
    """
    settings = args.settings
    encoding = settings.get_encoding()
    record = read_or_empty(args.filename, settings.get_extensions())
    info = stream_info(args.filename)

    if args.json:
        response = TagResponse(
            file=args.filename,
            stream=StreamInfo(**info) if info else None,
            **record.as_dict(encoding),
        )
        print(response.model_dump_json(indent=2))
        return

    table = Table(title=f"ID3 Tag: {args.filename}", show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="magenta")

    table.add_row("Version", record.version or "N/A")
    for field in Field:
        value = record.text(field, encoding)
        table.add_row(field.value.capitalize(), value if value is not None else "N/A")

    if info:
        table.add_section()
        table.add_row("Length", f"{info['length']:.2f} s")
        table.add_row("Bitrate", f"{info['bitrate'] // 1000} kbps")
        table.add_row("Sample rate", f"{info['sample_rate']} Hz")
        table.add_row("Channels", str(info["channels"]))

    Console().print(table)
