import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool

from docx_revisions.analysis.errors import DocxRevisionsError
from docx_revisions.analysis.extractor import extract_track_changes
from docx_revisions.api.auth import verify_api_key
from docx_revisions.core.config import Settings, get_settings
from docx_revisions.models.pydantic_models import ExtractionResponse

logger = logging.getLogger(__name__)

DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

router = APIRouter()


def _is_docx(file: UploadFile) -> bool:
    filename = (file.filename or "").lower()
    return file.content_type == DOCX_MIME_TYPE or filename.endswith(".docx")


@router.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@router.post(
    "/extract-track-changes",
    response_model=ExtractionResponse,
    response_model_exclude_none=True,
    dependencies=[Depends(verify_api_key)],
)
async def extract_track_changes_endpoint(
    file: UploadFile | None = File(None),
    settings: Settings = Depends(get_settings),
):
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No file uploaded. Please upload a .docx file.")
    if not _is_docx(file):
        raise HTTPException(status_code=400, detail="Only .docx files are accepted")

    # Lê no máximo limite + 1 byte para detectar arquivos grandes demais
    file_content = await file.read(settings.MAX_UPLOAD_SIZE + 1)
    if len(file_content) > settings.MAX_UPLOAD_SIZE:
        max_mb = settings.MAX_UPLOAD_SIZE // (1024 * 1024)
        raise HTTPException(status_code=400, detail=f"File too large. Maximum size is {max_mb}MB.")

    try:
        result = await run_in_threadpool(extract_track_changes, file_content)
    except DocxRevisionsError as e:
        logger.exception("Error processing file %s", file.filename)
        raise HTTPException(status_code=500, detail=f"Failed to process file: {e}")

    summary = result.summary()
    logger.info(
        "Processed %s: %d insertions, %d deletions, %d moves, %d comments",
        file.filename,
        summary.total_insertions,
        summary.total_deletions,
        summary.total_moves,
        summary.total_comments,
    )
    return ExtractionResponse(filename=file.filename, summary=summary, changes=result)
