"""CLI command implementations.

Each module in this package implements a specific mp3tag subcommand:
    view.py: Display the tag of a file
    write.py: Write the placeholder tag
    edit.py: Change a single field
    inspect.py: Display the raw header and frame layout
"""

from .view import cmd_view
from .write import cmd_write
from .edit import cmd_edit
from .inspect import cmd_inspect

__all__ = [
    "cmd_view",
    "cmd_write",
    "cmd_edit",
    "cmd_inspect",
]
