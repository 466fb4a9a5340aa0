import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

from docx_revisions.analysis.comment_scanner import resolve_comment_anchors, scan_comments
from docx_revisions.analysis.ooxml import get_attrib, iter_word_elements, parse_xml
from docx_revisions.analysis.package_reader import read_package


def inspect(docx_path):
    p = Path(docx_path)
    if not p.exists():
        print('File not found:', docx_path)
        return
    parts = read_package(p.read_bytes())
    if parts.comments_xml is None:
        print('No comments.xml present in', docx_path)
        return
    root = parse_xml(parts.document_xml)

    # Conta marcadores por id para achar âncoras duplicadas
    counts = {}
    for tag in ('commentRangeStart', 'commentRangeEnd'):
        for el in iter_word_elements(root, tag):
            cid = get_attrib(el, 'id')
            if cid is None:
                continue
            counts[(cid, tag)] = counts.get((cid, tag), 0) + 1
    dup = {key: cnt for key, cnt in counts.items() if cnt > 1}
    if dup:
        print('Comment IDs with repeated range markers:')
        for (cid, tag), cnt in dup.items():
            print(cid, tag, cnt)

    comments = resolve_comment_anchors(root, scan_comments(parts.comments_xml))
    print(f'Found {len(comments)} comments in {docx_path}')
    for c in comments:
        print('---')
        print('id:', c.id, 'author:', c.author)
        print('text:', c.text[:300])
        print('anchored:', c.anchored_text if c.anchored_text is not None else '<no anchor>')


if __name__ == '__main__':
    if len(sys.argv) < 2:
        print('Usage: inspect_comment_anchors.py <path_to_docx>')
        sys.exit(1)
    inspect(sys.argv[1])
