"""
Per-format extractors.

Each module exposes one function of the same name that takes a path or a
binary stream and always returns a uuid.UUID:
    pdf      - XMP DocumentID, then trailer /ID
    epub     - package document dc:identifier / unique-identifier
    fb2      - description/document-info/id
    docx     - w15:docId, then custom property fmtid
    default  - MD5 of the content (fallback for all of the above)
"""
