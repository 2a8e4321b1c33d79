"""
PDF identifiers.

Where a PDF keeps its identity, in lookup order:
    1. XMP metadata, <xmpMM:DocumentID> element     (usually "uuid:...")
    2. XMP metadata, rdf:Description/@xmpMM:DocumentID
    3. trailer /ID array, first entry (16 raw bytes)
    4. MD5 of the file
"""

import logging
import uuid
import xml.etree.ElementTree as ET
from functools import cached_property
from typing import Optional

from pypdf import PdfReader
from pypdf.generic import TextStringObject

from ..archive import parse_xml, qualified
from ..chain import FATAL_ERRORS, Chain
from ..guid import from_raw_bytes, parse_identifier
from ..source import Source, open_source, rewind, source_name
from .default import content_identifier

logger = logging.getLogger(__name__)

XMP_MM = "http://ns.adobe.com/xap/1.0/mm/"
RDF = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"

DOCUMENT_ID = qualified(XMP_MM, "DocumentID")
DESCRIPTION = qualified(RDF, "Description")


class PdfDocument:
    """An open PdfReader plus its lazily parsed XMP packet."""

    def __init__(self, reader: PdfReader):
        self.reader = reader

    @cached_property
    def xmp(self) -> Optional[ET.Element]:
        catalog = self.reader.trailer["/Root"].get_object()
        metadata = catalog.get("/Metadata")
        if metadata is None:
            return None
        return parse_xml(metadata.get_object().get_data())


def _string_bytes(value) -> bytes:
    """Raw bytes of a PDF string object, whatever pypdf decoded it to.

    get_original_bytes() re-encodes with a BOM when pypdf guessed UTF-16
    (it does after rebuilding a broken xref); original_bytes does not.
    """
    if isinstance(value, TextStringObject):
        return value.original_bytes
    return bytes(value)


# ─────────────────────────────────────────────────────────────────────────────
# Strategies
# ─────────────────────────────────────────────────────────────────────────────

def xmp_document_id(doc: PdfDocument) -> Optional[uuid.UUID]:
    if doc.xmp is None:
        return None
    element = next(doc.xmp.iter(DOCUMENT_ID), None)
    if element is None or not element.text:
        return None
    return parse_identifier(element.text)


def xmp_description_attribute(doc: PdfDocument) -> Optional[uuid.UUID]:
    if doc.xmp is None:
        return None
    for description in doc.xmp.iter(DESCRIPTION):
        value = description.get(DOCUMENT_ID)
        if value is not None:
            return parse_identifier(value)
    return None


def trailer_id(doc: PdfDocument) -> Optional[uuid.UUID]:
    ids = doc.reader.trailer.get("/ID")
    if ids is None:
        return None
    ids = ids.get_object()
    if len(ids) == 0:
        return None
    return from_raw_bytes(_string_bytes(ids[0].get_object()))


PDF_CHAIN = Chain([
    xmp_document_id,
    xmp_description_attribute,
    trailer_id,
], name="pdf")


def pdf(source: Source) -> uuid.UUID:
    """Identifier of a PDF file or stream."""
    with open_source(source) as stream:
        try:
            reader = PdfReader(rewind(stream), strict=False)
        except FATAL_ERRORS:
            raise
        except Exception as e:
            logger.debug("%s: unreadable PDF: %s", source_name(source), e)
            return content_identifier(stream)

        result = PDF_CHAIN.execute(PdfDocument(reader))
        if result is None:
            result = content_identifier(stream)
    return result
