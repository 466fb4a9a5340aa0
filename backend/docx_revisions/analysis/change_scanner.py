from typing import Callable, List

from docx_revisions.analysis.ooxml import (
    XmlInput,
    extract_deleted_text,
    extract_run_text,
    get_attrib,
    iter_word_elements,
    parse_xml,
)
from docx_revisions.models.pydantic_models import ChangeKind, TrackChange

# Módulo que localiza as marcas de revisão (w:ins, w:del, w:moveFrom, w:moveTo)
# no corpo do documento. Cada elemento vira um TrackChange; blocos sem texto
# (ex.: w:ins dentro de w:rPr marcando o fim de parágrafo) são descartados.


def _scan_changes(
    document_xml: XmlInput,
    tag_name: str,
    kind: ChangeKind,
    text_extractor: Callable[[XmlInput], str],
) -> List[TrackChange]:
    root = parse_xml(document_xml)
    changes: List[TrackChange] = []

    for elem in iter_word_elements(root, tag_name):
        text = text_extractor(elem)
        if not text:
            continue
        changes.append(TrackChange(
            kind=kind,
            author=get_attrib(elem, 'author', 'Unknown'),
            date=get_attrib(elem, 'date', ''),
            text=text,
            id=get_attrib(elem, 'id'),
        ))

    return changes


def scan_insertions(document_xml: XmlInput) -> List[TrackChange]:
    return _scan_changes(document_xml, 'ins', ChangeKind.INSERTION, extract_run_text)


def scan_deletions(document_xml: XmlInput) -> List[TrackChange]:
    # Texto deletado fica em w:delText, não em w:t
    return _scan_changes(document_xml, 'del', ChangeKind.DELETION, extract_deleted_text)


def scan_move_from(document_xml: XmlInput) -> List[TrackChange]:
    return _scan_changes(document_xml, 'moveFrom', ChangeKind.MOVE_FROM, extract_run_text)


def scan_move_to(document_xml: XmlInput) -> List[TrackChange]:
    return _scan_changes(document_xml, 'moveTo', ChangeKind.MOVE_TO, extract_run_text)
