"""Deployment history models."""

from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from md2resume.models.deployment import DeployStatus, utc_now

DEFAULT_TITLE = "Untitled Resume"
DEFAULT_TEMPLATE_ID = "hacker-black"


class HistoryEntry(BaseModel):
    """Input for recording a successful deployment."""

    content_id: str
    primary_url: str
    mirror_urls: list[str] = Field(default_factory=list)
    file_name: str | None = None
    title: str | None = None
    template_id: str | None = None
    deployed_at: datetime = Field(default_factory=utc_now)


class HistoryRecord(BaseModel):
    """A successful deployment kept in the history ledger."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    title: str = DEFAULT_TITLE
    file_name: str | None = None
    content_id: str
    primary_url: str
    mirror_urls: tuple[str, ...] = ()
    template_id: str = DEFAULT_TEMPLATE_ID
    deployed_at: datetime
    status: DeployStatus = "success"

    @classmethod
    def from_entry(cls, entry: HistoryEntry) -> "HistoryRecord":
        """Create a record from an entry, filling defaulted fields."""
        return cls(
            title=entry.title or DEFAULT_TITLE,
            file_name=entry.file_name,
            content_id=entry.content_id,
            primary_url=entry.primary_url,
            mirror_urls=tuple(entry.mirror_urls),
            template_id=entry.template_id or DEFAULT_TEMPLATE_ID,
            deployed_at=entry.deployed_at,
        )
