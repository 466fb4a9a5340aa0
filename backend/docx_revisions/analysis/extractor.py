from docx_revisions.analysis.change_scanner import (
    scan_deletions,
    scan_insertions,
    scan_move_from,
    scan_move_to,
)
from docx_revisions.analysis.comment_scanner import resolve_comment_anchors, scan_comments
from docx_revisions.analysis.errors import DocxRevisionsError, ExtractionFailed
from docx_revisions.analysis.ooxml import parse_xml
from docx_revisions.analysis.package_reader import read_package
from docx_revisions.models.pydantic_models import ExtractionResult


def extract_track_changes(docx_bytes: bytes) -> ExtractionResult:
    """
    Extrai inserções, exclusões, movimentações e comentários de um .docx.

    Levanta MalformedPackage se word/document.xml não existir e
    ExtractionFailed para qualquer outra falha de leitura ou parsing.
    """
    try:
        parts = read_package(docx_bytes)

        # Parse único do corpo, reaproveitado por todos os scanners
        body = parse_xml(parts.document_xml)
        insertions = scan_insertions(body)
        deletions = scan_deletions(body)
        move_from = scan_move_from(body)
        move_to = scan_move_to(body)

        comments = scan_comments(parts.comments_xml)
        comments = resolve_comment_anchors(body, comments)
    except DocxRevisionsError:
        raise
    except Exception as e:
        raise ExtractionFailed(str(e) or e.__class__.__name__) from e

    return ExtractionResult(
        insertions=insertions,
        deletions=deletions,
        move_from=move_from,
        move_to=move_to,
        comments=comments,
    )
