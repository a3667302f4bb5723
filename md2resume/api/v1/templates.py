"""Résumé template catalogue endpoints."""

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from md2resume.core.templates import get_template, list_templates
from md2resume.models.template import ResumeTemplate

router = APIRouter()


class TemplateListResponse(BaseModel):
    """All available templates."""

    success: bool = True
    templates: list[ResumeTemplate]


@router.get("", response_model=TemplateListResponse, summary="List all templates")
async def get_templates() -> TemplateListResponse:
    """Return the template catalogue."""
    return TemplateListResponse(templates=list_templates())


@router.get(
    "/{template_id}",
    response_model=ResumeTemplate,
    summary="Get a single template",
)
async def get_template_by_id(template_id: str) -> ResumeTemplate:
    """Fetch template details."""
    template = get_template(template_id)
    if not template:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Template not found")
    return template
