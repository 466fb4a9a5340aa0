import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

from docx_revisions.analysis.errors import DocxRevisionsError
from docx_revisions.analysis.extractor import extract_track_changes
from docx_revisions.models.pydantic_models import ExtractionResponse


def inspect(docx_path):
    p = Path(docx_path)
    if not p.exists():
        print('File not found:', docx_path)
        return 1
    try:
        result = extract_track_changes(p.read_bytes())
    except DocxRevisionsError as e:
        print('Erro:', e)
        return 1
    response = ExtractionResponse(filename=p.name, summary=result.summary(), changes=result)
    print(response.model_dump_json(indent=2, exclude_none=True))
    return 0


if __name__ == '__main__':
    if len(sys.argv) < 2:
        print('Usage: inspect_track_changes.py <path_to_docx>')
        sys.exit(1)
    sys.exit(inspect(sys.argv[1]))
