"""FictionBook (.fb2, .fbd) identifiers from description/document-info/id."""

import logging
import uuid
import xml.etree.ElementTree as ET
from typing import Optional

from ..archive import find_path, qualified
from ..chain import FATAL_ERRORS
from ..guid import parse_fb2_id
from ..source import Source, open_source, rewind, source_name
from .default import content_identifier

logger = logging.getLogger(__name__)

FB2_NS = "http://www.gribuser.ru/xml/fictionbook/2.0"

ID_PATH = ("description", "document-info", "id")


def _tag(namespace: str, name: str) -> str:
    return qualified(namespace, name) if namespace else name


def document_id(root: ET.Element) -> Optional[str]:
    """Text of FictionBook/description/document-info/id, namespaced or not."""
    for namespace in (FB2_NS, ""):
        if root.tag == _tag(namespace, "FictionBook"):
            element = find_path(root, *(_tag(namespace, tag) for tag in ID_PATH))
            return element.text if element is not None else None
    return None


def fb2(source: Source) -> uuid.UUID:
    """Identifier of a FictionBook file or stream."""
    with open_source(source) as stream:
        result = None
        try:
            root = ET.parse(rewind(stream)).getroot()
            value = document_id(root)
            logger.debug("%s: document-info/id %r", source_name(source), value)
            result = parse_fb2_id(value)
        except FATAL_ERRORS:
            raise
        except Exception as e:
            logger.debug("%s: %s", source_name(source), e)

        if result is None:
            result = content_identifier(stream)
    return result
