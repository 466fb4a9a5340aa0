"""
Fixtures compartilhadas: montam pacotes .docx mínimos em memória.
"""

import io
import zipfile

import pytest

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

CONTENT_TYPES = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
    '<Default Extension="xml" ContentType="application/xml"/>'
    '</Types>'
)


def wrap_body(body_xml: str) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<w:document xmlns:w="{W_NS}"><w:body>{body_xml}</w:body></w:document>'
    )


def wrap_comments(comments_xml: str) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<w:comments xmlns:w="{W_NS}">{comments_xml}</w:comments>'
    )


def build_docx(body_xml: str | None = None, comments_xml: str | None = None, extra_parts: dict | None = None) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("[Content_Types].xml", CONTENT_TYPES)
        if body_xml is not None:
            zf.writestr("word/document.xml", wrap_body(body_xml))
        if comments_xml is not None:
            zf.writestr("word/comments.xml", wrap_comments(comments_xml))
        for name, content in (extra_parts or {}).items():
            zf.writestr(name, content)
    return buffer.getvalue()


@pytest.fixture
def make_docx():
    return build_docx


@pytest.fixture
def sample_docx() -> bytes:
    """Documento com uma revisão de cada tipo e um comentário ancorado."""
    body = (
        '<w:p>'
        '<w:r><w:t xml:space="preserve">The </w:t></w:r>'
        '<w:ins w:id="1" w:author="Alice" w:date="2024-01-01T00:00:00Z">'
        '<w:r><w:t>quick</w:t></w:r>'
        '</w:ins>'
        '<w:del w:id="2" w:author="Bob" w:date="2024-01-02T00:00:00Z">'
        '<w:r><w:delText>slow</w:delText></w:r>'
        '</w:del>'
        '<w:commentRangeStart w:id="0"/>'
        '<w:r><w:t>brown fox</w:t></w:r>'
        '<w:commentRangeEnd w:id="0"/>'
        '<w:r><w:commentReference w:id="0"/></w:r>'
        '</w:p>'
        '<w:p>'
        '<w:moveFrom w:id="3" w:author="Carol" w:date="2024-01-03T00:00:00Z">'
        '<w:r><w:t>jumps</w:t></w:r>'
        '</w:moveFrom>'
        '<w:moveTo w:id="4" w:author="Carol" w:date="2024-01-03T00:00:00Z">'
        '<w:r><w:t>jumps</w:t></w:r>'
        '</w:moveTo>'
        '</w:p>'
    )
    comments = (
        '<w:comment w:id="0" w:author="Dave" w:date="2024-01-04T00:00:00Z">'
        '<w:p><w:r><w:t>Which fox?</w:t></w:r></w:p>'
        '</w:comment>'
    )
    return build_docx(body, comments)
