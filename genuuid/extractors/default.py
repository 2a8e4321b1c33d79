"""Content-hash identifier: MD5 of the whole file in GUID layout."""

import hashlib
import logging
import uuid
from typing import BinaryIO

from ..guid import from_raw_bytes
from ..source import Source, open_source, rewind

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1 << 16


def content_identifier(stream: BinaryIO) -> uuid.UUID:
    """MD5 of stream from its first byte to EOF."""
    md5 = hashlib.md5()
    rewind(stream)
    for chunk in iter(lambda: stream.read(CHUNK_SIZE), b""):
        md5.update(chunk)
    return from_raw_bytes(md5.digest())


def default(source: Source) -> uuid.UUID:
    """
    Identifier for any readable file.

    Same bytes, same identifier, whatever the file is called.
    """
    with open_source(source) as stream:
        result = content_identifier(stream)
    logger.debug("default md5sum -> %s", result)
    return result
