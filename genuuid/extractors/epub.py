"""
EPUB identifiers.

META-INF/container.xml names the package document (.opf); the package
document's <dc:identifier> entries and its unique-identifier attribute are
searched in PACKAGE_CHAIN order. Anything missing or broken along the way
falls back to the MD5 of the file.
"""

import logging
import uuid
import xml.etree.ElementTree as ET
from typing import Optional

from ..archive import find_path, qualified, xml_in_zip
from ..chain import Chain
from ..guid import parse_identifier
from ..source import Source, open_source, source_name
from .default import content_identifier

logger = logging.getLogger(__name__)

CONTAINER_PATH = "META-INF/container.xml"

CONTAINER_NS = "urn:oasis:names:tc:opendocument:xmlns:container"
OPF_NS = "http://www.idpf.org/2007/opf"
DC_NS = "http://purl.org/dc/elements/1.1/"

UUID_SCHEMES = ("uuid", "calibre")


def rootfile_path(container: ET.Element) -> str:
    """full-path of the first rootfile listed in container.xml."""
    rootfile = find_path(
        container,
        qualified(CONTAINER_NS, "rootfiles"),
        qualified(CONTAINER_NS, "rootfile"),
    )
    path = rootfile.get("full-path") if rootfile is not None else None
    if not path:
        raise ValueError("container.xml has no rootfile full-path")
    return path


def _identifiers(package: ET.Element) -> list:
    metadata = find_path(package, qualified(OPF_NS, "metadata"))
    if metadata is None:
        return []
    return metadata.findall(qualified(DC_NS, "identifier"))


def _scheme(identifier: ET.Element) -> str:
    scheme = identifier.get(qualified(OPF_NS, "scheme"), identifier.get("scheme"))
    return (scheme or "").lower()


# ─────────────────────────────────────────────────────────────────────────────
# Strategies (subject: root element of the package document)
# ─────────────────────────────────────────────────────────────────────────────

def scheme_identifier(package: ET.Element) -> Optional[uuid.UUID]:
    for identifier in _identifiers(package):
        if _scheme(identifier) in UUID_SCHEMES:
            return parse_identifier(identifier.text)
    return None


def first_identifier_id(package: ET.Element) -> Optional[uuid.UUID]:
    identifiers = _identifiers(package)
    if not identifiers:
        return None
    return parse_identifier(identifiers[0].get("id"))


def uuid_id_identifier(package: ET.Element) -> Optional[uuid.UUID]:
    for identifier in _identifiers(package):
        if (identifier.get("id") or "").lower() == "uuid":
            return parse_identifier(identifier.text)
    return None


def unique_identifier(package: ET.Element) -> Optional[uuid.UUID]:
    return parse_identifier(package.get("unique-identifier"))


PACKAGE_CHAIN = Chain([
    scheme_identifier,
    first_identifier_id,
    uuid_id_identifier,
    unique_identifier,
], name="epub")


def epub(source: Source) -> uuid.UUID:
    """Identifier of an EPUB file or stream."""
    with open_source(source) as stream:
        result = None
        opf_path = xml_in_zip(stream, CONTAINER_PATH, rootfile_path)
        if opf_path is None:
            logger.debug("%s: no package document in %s", source_name(source), CONTAINER_PATH)
        else:
            result = xml_in_zip(stream, opf_path, PACKAGE_CHAIN.execute)

        if result is None:
            result = content_identifier(stream)
    return result
