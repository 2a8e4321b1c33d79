"""
genuuid Test Fixtures

Builds small but structurally real documents on disk: EPUB and DOCX
containers (zipfile), FictionBook XML, and hand-assembled PDFs with an
optional XMP packet and trailer /ID.

Run with: pytest tests/ -v
"""
import zipfile

import pytest


# =============================================================================
# Identifiers used across the suite
# =============================================================================

EMBEDDED_UUID = "9b2f0c1e-8d3a-4f5b-9c7d-1e2f3a4b5c6d"
OTHER_UUID = "0f1e2d3c-4b5a-6978-8796-a5b4c3d2e1f0"
TRAILER_BYTES = bytes(range(16))
TRAILER_UUID = "00010203-0405-0607-0809-0a0b0c0d0e0f"


# =============================================================================
# EPUB
# =============================================================================

CONTAINER_XML = """<?xml version="1.0" encoding="UTF-8"?>
<container version="1.0" xmlns="urn:oasis:names:tc:opendocument:xmlns:container">
  <rootfiles>
    <rootfile full-path="{opf_path}" media-type="application/oebps-package+xml"/>
  </rootfiles>
</container>
"""

OPF_TEMPLATE = """<?xml version="1.0" encoding="utf-8"?>
<package xmlns="http://www.idpf.org/2007/opf" unique-identifier="{unique}" version="2.0">
  <metadata xmlns:dc="http://purl.org/dc/elements/1.1/" xmlns:opf="http://www.idpf.org/2007/opf">
    <dc:title>Test book</dc:title>
    {identifiers}
  </metadata>
  <manifest/>
  <spine/>
</package>
"""


# =============================================================================
# DOCX
# =============================================================================

SETTINGS_XML = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<w:settings xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main"
            xmlns:w15="http://schemas.microsoft.com/office/word/2012/wordml">
  <w:zoom w:percent="100"/>
  {doc_id}
</w:settings>
"""

CUSTOM_XML = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<Properties xmlns="http://schemas.openxmlformats.org/officeDocument/2006/custom-properties"
            xmlns:vt="http://schemas.openxmlformats.org/officeDocument/2006/docPropsVTypes">
  <property fmtid="{fmtid}" pid="2" name="Reviewer"><vt:lpwstr>someone</vt:lpwstr></property>
</Properties>
"""


# =============================================================================
# FB2
# =============================================================================

FB2_TEMPLATE = (
    '<?xml version="1.0" encoding="{encoding}"?>\n'
    '<FictionBook{xmlns}>'
    '<description>'
    '<title-info><book-title>Книга</book-title></title-info>'
    '<document-info>{id_element}</document-info>'
    '</description>'
    '<body><section><p>Текст</p></section></body>'
    '</FictionBook>\n'
)

FB2_XMLNS = ' xmlns="http://www.gribuser.ru/xml/fictionbook/2.0"'


# =============================================================================
# PDF
# =============================================================================

XMP_ELEMENT = """<?xpacket begin="\ufeff" id="W5M0MpCehiHzreSzNTczkc9d"?>
<x:xmpmeta xmlns:x="adobe:ns:meta/">
  <rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#">
    <rdf:Description rdf:about="" xmlns:xmpMM="http://ns.adobe.com/xap/1.0/mm/">
      <xmpMM:DocumentID>{document_id}</xmpMM:DocumentID>
    </rdf:Description>
  </rdf:RDF>
</x:xmpmeta>
<?xpacket end="w"?>"""

XMP_ATTRIBUTE = """<?xpacket begin="\ufeff" id="W5M0MpCehiHzreSzNTczkc9d"?>
<x:xmpmeta xmlns:x="adobe:ns:meta/">
  <rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#">
    <rdf:Description rdf:about="" xmlns:dc="http://purl.org/dc/elements/1.1/"/>
    <rdf:Description rdf:about="" xmlns:xmpMM="http://ns.adobe.com/xap/1.0/mm/"
        xmpMM:DocumentID="{document_id}"/>
  </rdf:RDF>
</x:xmpmeta>
<?xpacket end="w"?>"""


def build_pdf(xmp=None, trailer_id=None):
    """Assemble a one-page PDF with a correct xref table."""
    if isinstance(xmp, str):
        xmp = xmp.encode("utf-8")

    catalog = b"<< /Type /Catalog /Pages 2 0 R"
    if xmp is not None:
        catalog += b" /Metadata 4 0 R"
    catalog += b" >>"

    objects = [
        catalog,
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 72 72] >>",
    ]
    if xmp is not None:
        objects.append(
            b"<< /Type /Metadata /Subtype /XML /Length %d >>\nstream\n" % len(xmp)
            + xmp + b"\nendstream"
        )

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_at = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset

    trailer = b"<< /Size %d /Root 1 0 R" % (len(objects) + 1)
    if trailer_id is not None:
        hex_id = trailer_id.hex().upper().encode("ascii")
        trailer += b" /ID [<" + hex_id + b"> <" + hex_id + b">]"
    trailer += b" >>"

    out += b"trailer\n" + trailer + b"\nstartxref\n" + str(xref_at).encode("ascii") + b"\n%%EOF\n"
    return bytes(out)


def build_zip(path, entries):
    with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, data in entries.items():
            zf.writestr(name, data)
    return path


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def make_epub(tmp_path):
    """Factory: EPUB with the given <dc:identifier> markup."""
    def _make(identifiers="", unique="BookId", opf_path="OEBPS/content.opf",
              container=True, name="book.epub"):
        entries = {"mimetype": "application/epub+zip"}
        if container:
            entries["META-INF/container.xml"] = CONTAINER_XML.format(opf_path=opf_path)
        entries[opf_path] = OPF_TEMPLATE.format(identifiers=identifiers, unique=unique)
        return build_zip(tmp_path / name, entries)
    return _make


@pytest.fixture
def make_docx(tmp_path):
    """Factory: DOCX with optional w15:docId and custom property fmtid."""
    def _make(doc_id=None, fmtid=None, name="doc.docx"):
        entries = {"word/document.xml": "<w:document xmlns:w='urn:x'/>"}
        if doc_id is not None:
            entries["word/settings.xml"] = SETTINGS_XML.format(
                doc_id=f'<w15:docId w15:val="{doc_id}"/>'
            )
        else:
            entries["word/settings.xml"] = SETTINGS_XML.format(doc_id="")
        if fmtid is not None:
            entries["docProps/custom.xml"] = CUSTOM_XML.format(fmtid=fmtid)
        return build_zip(tmp_path / name, entries)
    return _make


@pytest.fixture
def make_fb2(tmp_path):
    """Factory: FictionBook file with the given document-info/id text."""
    def _make(doc_id, namespace=True, encoding="utf-8", name="book.fb2"):
        id_element = "" if doc_id is None else f"<id>{doc_id}</id>"
        text = FB2_TEMPLATE.format(
            encoding=encoding,
            xmlns=FB2_XMLNS if namespace else "",
            id_element=id_element,
        )
        path = tmp_path / name
        path.write_bytes(text.encode(encoding))
        return path
    return _make


@pytest.fixture
def make_pdf(tmp_path):
    """Factory: PDF file with optional XMP packet and trailer /ID."""
    def _make(xmp=None, trailer_id=None, name="paper.pdf"):
        path = tmp_path / name
        path.write_bytes(build_pdf(xmp=xmp, trailer_id=trailer_id))
        return path
    return _make
