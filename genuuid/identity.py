"""
Document Identity - one stable UUID per document file.

Picks an extractor by file extension; unknown extensions get the
content-hash identifier.

Usage:
    from genuuid.identity import identifier_for

    identifier_for("book.epub")                    # embedded uuid or MD5
    with open("paper.pdf", "rb") as f:
        identifier_for(f)                          # extension from f.name
    identifier_for(io.BytesIO(data), name="x.fb2") # explicit name
"""

import io
import logging
import os
import uuid
from typing import Callable, Optional

from .extractors.default import default
from .extractors.docx import docx
from .extractors.epub import epub
from .extractors.fb2 import fb2
from .extractors.pdf import pdf
from .source import Source, is_path, source_name

logger = logging.getLogger(__name__)

Extractor = Callable[[Source], uuid.UUID]

# .docm, .xps and friends rarely carry an identifier; they hash like
# any other file.
EXTRACTORS: dict[str, Extractor] = {
    ".pdf": pdf,
    ".epub": epub,
    ".fb2": fb2,
    ".fbd": fb2,
    ".docx": docx,
}


def extractor_for(name: Optional[str]) -> Extractor:
    """Extractor for a file name, by case-insensitive extension."""
    if not name:
        return default
    ext = os.path.splitext(name)[1].lower()
    return EXTRACTORS.get(ext, default)


def identifier_for(source: Source, name: Optional[str] = None) -> uuid.UUID:
    """
    Stable identifier for a document.

    Args:
        source: path or binary stream
        name: file name used to pick the format (defaults to the path or
            the stream's .name)

    Returns:
        uuid.UUID; only errors reading the input itself propagate.
    """
    name = name or source_name(source)
    extractor = extractor_for(name)
    # a pipe is read once; the fallback below must hash the same bytes
    if not is_path(source) and not source.seekable():
        source = io.BytesIO(source.read())
    try:
        return extractor(source)
    except OSError:
        raise
    except Exception:
        logger.exception("%s: %s extractor failed", name, extractor.__name__)
    return default(source)
