from bisect import bisect_right
from typing import Dict, List, Optional, Tuple

from docx_revisions.analysis.ooxml import (
    XmlInput,
    extract_run_text,
    get_attrib,
    is_word_tag,
    iter_word_elements,
    parse_xml,
)
from docx_revisions.models.pydantic_models import Comment


def scan_comments(comments_xml: Optional[XmlInput]) -> List[Comment]:
    """Lê as definições w:comment de comments.xml.

    Diferente das revisões, comentários sem texto também são mantidos.
    """
    if comments_xml is None:
        return []

    root = parse_xml(comments_xml)
    return [
        Comment(
            id=get_attrib(elem, 'id', ''),
            author=get_attrib(elem, 'author', 'Unknown'),
            date=get_attrib(elem, 'date', ''),
            text=extract_run_text(elem),
        )
        for elem in iter_word_elements(root, 'comment')
    ]


def _index_comment_ranges(root) -> Tuple[Dict[str, Tuple[int, int]], List[int], List[str]]:
    # Percorre o corpo uma vez: cada elemento recebe um índice sequencial.
    # Início: vale a primeira ocorrência do id. Fim: vale a última.
    starts: Dict[str, int] = {}
    ends: Dict[str, int] = {}
    run_positions: List[int] = []
    run_texts: List[str] = []

    for position, elem in enumerate(root.iter()):
        if is_word_tag(elem, 't'):
            run_positions.append(position)
            run_texts.append(elem.text or "")
        elif is_word_tag(elem, 'commentRangeStart'):
            c_id = get_attrib(elem, 'id')
            if c_id is not None and c_id not in starts:
                starts[c_id] = position
        elif is_word_tag(elem, 'commentRangeEnd'):
            c_id = get_attrib(elem, 'id')
            if c_id is not None:
                ends[c_id] = position

    ranges = {c_id: (start, ends[c_id]) for c_id, start in starts.items() if c_id in ends}
    return ranges, run_positions, run_texts


def resolve_comment_anchors(document_xml: XmlInput, comments: List[Comment]) -> List[Comment]:
    """Associa a cada comentário o texto delimitado pelos seus marcadores.

    O trecho é o texto dos runs w:t estritamente entre commentRangeStart e
    commentRangeEnd, em ordem de documento. Comentários sem par de marcadores
    válido (fim depois do início) voltam inalterados.
    """
    if not comments:
        return []

    root = parse_xml(document_xml)
    ranges, run_positions, run_texts = _index_comment_ranges(root)

    resolved: List[Comment] = []
    for comment in comments:
        span = ranges.get(comment.id)
        if span is None or span[1] <= span[0]:
            resolved.append(comment)
            continue
        start, end = span
        first = bisect_right(run_positions, start)
        last = bisect_right(run_positions, end)
        anchored_text = "".join(run_texts[first:last])
        resolved.append(comment.model_copy(update={'anchored_text': anchored_text}))

    return resolved
