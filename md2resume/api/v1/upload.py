"""Markdown upload endpoint."""

from fastapi import APIRouter, File, HTTPException, UploadFile, status
from pydantic import BaseModel

from md2resume.config import settings

router = APIRouter()

MARKDOWN_EXTENSIONS = (".md", ".markdown")
MARKDOWN_MIME_TYPE = "text/markdown"


class UploadResponse(BaseModel):
    """Contents of an uploaded Markdown résumé."""

    success: bool = True
    filename: str
    content: str


def is_markdown(file: UploadFile) -> bool:
    """Accept by MIME type or by file extension."""
    if file.content_type == MARKDOWN_MIME_TYPE:
        return True
    return (file.filename or "").lower().endswith(MARKDOWN_EXTENSIONS)


@router.post(
    "/upload",
    response_model=UploadResponse,
    summary="Upload a Markdown résumé",
)
async def upload_markdown(file: UploadFile = File(...)) -> UploadResponse:
    """Read an uploaded Markdown file and return its text."""
    if not is_markdown(file):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only .md and .markdown files are supported",
        )

    data = await file.read(settings.max_upload_bytes + 1)
    if len(data) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File exceeds {settings.max_upload_bytes} bytes",
        )

    try:
        content = data.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="File is not valid UTF-8 text",
        )

    return UploadResponse(filename=file.filename or "resume.md", content=content)
