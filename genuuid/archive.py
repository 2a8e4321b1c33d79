"""
XML inside ZIP containers (EPUB, DOCX) and small ElementTree helpers.

Usage:
    from genuuid.archive import xml_in_zip, find_path

    opf_path = xml_in_zip(stream, "META-INF/container.xml", rootfile_path)

xml_in_zip never raises for a broken container: a missing entry, a corrupt
archive, bad XML, or an extract callback that blows up all come back as
None. Each call opens its own ZipFile over the same stream, so callers can
query several entries of one file one after another.
"""

import logging
import zipfile
import xml.etree.ElementTree as ET
from typing import BinaryIO, Callable, Optional, TypeVar

from .chain import FATAL_ERRORS
from .source import rewind

logger = logging.getLogger(__name__)

T = TypeVar("T")

UTF8_BOM = b"\xef\xbb\xbf"


def parse_xml(data: bytes) -> ET.Element:
    """Parse an XML document from bytes. Raises ET.ParseError."""
    if data.startswith(UTF8_BOM):
        data = data[len(UTF8_BOM):]
    return ET.fromstring(data.lstrip())


def find_path(element: Optional[ET.Element], *tags: str) -> Optional[ET.Element]:
    """Walk down child elements by tag; None as soon as a step is missing."""
    for tag in tags:
        if element is None:
            return None
        element = element.find(tag)
    return element


def qualified(namespace: str, name: str) -> str:
    """ElementTree's {namespace}name spelling."""
    return f"{{{namespace}}}{name}"


def xml_in_zip(stream: BinaryIO, entry: str, extract: Callable[[ET.Element], T]) -> Optional[T]:
    """Parse one XML entry of a ZIP container and hand its root to extract."""
    try:
        with zipfile.ZipFile(rewind(stream)) as zf:
            data = zf.read(entry)
        root = parse_xml(data)
        return extract(root)
    except FATAL_ERRORS:
        raise
    except Exception as e:
        logger.debug("%s: %s: %s", entry, e.__class__.__name__, e)
        return None
