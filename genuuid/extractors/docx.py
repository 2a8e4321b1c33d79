"""
DOCX identifiers.

Word 2013+ writes <w15:docId w15:val="{...}"/> into word/settings.xml.
Older files may carry a custom property set whose fmtid is used instead.
"""

import logging
import uuid
import xml.etree.ElementTree as ET
from typing import Optional

from ..archive import find_path, qualified, xml_in_zip
from ..guid import parse_identifier
from ..source import Source, open_source, source_name
from .default import content_identifier

logger = logging.getLogger(__name__)

SETTINGS_PATH = "word/settings.xml"
CUSTOM_PROPS_PATH = "docProps/custom.xml"

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
W15_NS = "http://schemas.microsoft.com/office/word/2012/wordml"
CUSTOM_NS = "http://schemas.openxmlformats.org/officeDocument/2006/custom-properties"


def settings_doc_id(root: ET.Element) -> Optional[uuid.UUID]:
    if root.tag != qualified(W_NS, "settings"):
        return None
    doc_id = find_path(root, qualified(W15_NS, "docId"))
    if doc_id is None:
        return None
    return parse_identifier(doc_id.get(qualified(W15_NS, "val")))


def custom_property_fmtid(root: ET.Element) -> Optional[uuid.UUID]:
    if root.tag != qualified(CUSTOM_NS, "Properties"):
        return None
    prop = find_path(root, qualified(CUSTOM_NS, "property"))
    if prop is None:
        return None
    return parse_identifier(prop.get("fmtid"))


def docx(source: Source) -> uuid.UUID:
    """Identifier of a DOCX file or stream."""
    with open_source(source) as stream:
        result = xml_in_zip(stream, SETTINGS_PATH, settings_doc_id)
        if result is None:
            result = xml_in_zip(stream, CUSTOM_PROPS_PATH, custom_property_fmtid)
        if result is None:
            logger.debug("%s: no docId or custom fmtid", source_name(source))
            result = content_identifier(stream)
    return result
