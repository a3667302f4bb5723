"""Résumé presentation template models."""

from pydantic import BaseModel, ConfigDict


class ResumeTemplate(BaseModel):
    """A presentation theme offered by the résumé renderer."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
