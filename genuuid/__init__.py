"""
genuuid — stable UUIDs for document files.

Embedded identifiers are read where the format has one; everything else
gets the MD5 of its content, so the same bytes always map to the same UUID.

Modules:
  identity.py    format dispatch: identifier_for(path_or_stream)
  extractors/    pdf, epub, fb2, docx, default (content hash)
  guid.py        byte-order normalization, token parsing
  archive.py     XML entries inside ZIP containers
  chain.py       ordered, error-tolerant strategy chains
"""

import logging

from .guid import IdentifierFormatError, change_byte_order, parse_identifier
from .identity import (
    EXTRACTORS, default, docx, epub, extractor_for, fb2, identifier_for, pdf,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "identifier_for", "extractor_for", "EXTRACTORS",
    "pdf", "epub", "fb2", "docx", "default",
    "parse_identifier", "change_byte_order", "IdentifierFormatError",
]
