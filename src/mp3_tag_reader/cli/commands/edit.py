"""Edit command - Change one field of an MP3 file's tag."""

import argparse

from ...editor import edit


def cmd_edit(args: argparse.Namespace) -> None:
    """Set a single tag field and rewrite the file.

    Args:
        args: Parsed command-line arguments
    """
    settings = args.settings
    edit(
        args.filename,
        args.field,
        args.value,
        extensions=settings.get_extensions(),
        encoding=settings.get_encoding(),
        buffer_size=settings.get_buffer_size(),
    )
    print("Tag edited successfully.")
