"""
Input handling shared by every extractor.

A source is either a filesystem path or an open binary stream. Paths are
opened and closed here; streams belong to the caller and are left open
with their position restored.
"""

import io
import os
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Optional, Union

Source = Union[str, "os.PathLike[str]", BinaryIO]


def is_path(source: Source) -> bool:
    return isinstance(source, (str, bytes, os.PathLike))


def source_name(source: Source) -> Optional[str]:
    """File name of a source, if it has one."""
    if is_path(source):
        return os.fsdecode(source)
    name = getattr(source, "name", None)
    if isinstance(name, (str, os.PathLike)):
        return os.fsdecode(name)
    return None


@contextmanager
def open_source(source: Source) -> Iterator[BinaryIO]:
    """Yield a seekable binary stream for source.

    OSError from opening a path propagates to the caller.
    """
    if is_path(source):
        with open(source, "rb") as f:
            yield f
        return

    if not source.seekable():
        yield io.BytesIO(source.read())
        return

    position = source.tell()
    try:
        yield source
    finally:
        source.seek(position)


def rewind(stream: BinaryIO) -> BinaryIO:
    stream.seek(0)
    return stream
