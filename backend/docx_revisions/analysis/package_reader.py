import io
import zipfile
from dataclasses import dataclass
from typing import Optional

from docx_revisions.analysis.errors import MalformedPackage

DOCUMENT_PART = 'word/document.xml'
COMMENTS_PART = 'word/comments.xml'


@dataclass(frozen=True)
class DocumentParts:
    document_xml: str
    comments_xml: Optional[str] = None


def read_package(data: bytes) -> DocumentParts:
    """Abre o .docx em memória e lê apenas o corpo e os comentários."""
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        file_list = zf.namelist()
        if DOCUMENT_PART not in file_list:
            raise MalformedPackage(DOCUMENT_PART)
        document_xml = zf.read(DOCUMENT_PART).decode('utf-8')

        # comments.xml é opcional
        comments_xml = None
        if COMMENTS_PART in file_list:
            comments_xml = zf.read(COMMENTS_PART).decode('utf-8')

    return DocumentParts(document_xml=document_xml, comments_xml=comments_xml)
