"""Write command - Replace the tag of an MP3 file with placeholder values."""

import argparse
import logging

from ...tagrecord import TagRecord
from ...writer import write


def cmd_write(args: argparse.Namespace) -> None:
    """Write the dummy tag (every field set to "dummy <field>").

    Args:
        args: Parsed command-line arguments
    """
    settings = args.settings

    with TagRecord.dummy() as record:
        logging.info("Writing dummy tags to: %s", args.filename)
        write(
            args.filename,
            record,
            extensions=settings.get_extensions(),
            buffer_size=settings.get_buffer_size(),
        )

    print("Tags written successfully.")
