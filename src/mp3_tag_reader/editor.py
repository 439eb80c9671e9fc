"""Read-modify-write of a single tag field."""

import logging
from typing import Iterable, Optional, Union

from . import reader, writer
from .constants import BUFFER_SIZE, ENCODING
from .tagrecord import Field


logger = logging.getLogger(__name__)


def edit(filename: str, field_name: str, value: Union[str, bytes],
         extensions: Optional[Iterable[str]] = None, encoding: str = ENCODING,
         buffer_size: int = BUFFER_SIZE) -> None:
    """Replace one field of the tag in filename and rewrite the file.

    The field name is checked before the file is touched. A file without a
    tag cannot be edited: NoTagPresent propagates from the reader. Other
    fields keep their current values.

    Raises:
        UnknownField: If field_name is not a recognized field
        plus anything reader.read() or writer.write() raise
    """
    field = Field.from_name(field_name)
    if isinstance(value, str):
        value = value.encode(encoding)

    with reader.read(filename, extensions) as record:
        logger.debug("Setting %s of %s: %r -> %r", field.value, filename, record[field], value)
        record[field] = value
        writer.write(filename, record, extensions, buffer_size)

    logger.info("Edited %s of %s", field.value, filename)
