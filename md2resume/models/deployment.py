"""Deployment data models."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

UNKNOWN_CONTENT_ID = "unknown"


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class DeploymentMode(str, Enum):
    """How a deployment reaches the publishing network."""

    REAL = "real"
    MOCK = "mock"


class ErrorClassification(str, Enum):
    """Closed set of failure kinds a deployment can end in."""

    TOOL_NOT_INSTALLED = "tool-not-installed"
    SOURCE_NOT_FOUND = "source-not-found"
    TIMEOUT = "timeout"
    NETWORK_UNREACHABLE = "network-unreachable"
    PARSE_FAILURE = "parse-failure"
    UNKNOWN = "unknown"


class InstallGuide(BaseModel):
    """Instructions for installing the PinMe CLI."""

    model_config = ConfigDict(frozen=True)

    package: str = "pinme"
    install_command: str = "npm install -g pinme"
    verify_command: str = "pinme --version"
    steps: list[str] = Field(
        default_factory=lambda: [
            "Open a terminal",
            "Run: npm install -g pinme",
            "Verify: pinme --version",
            "Retry the deployment",
        ]
    )
    message: str = """
Please install the PinMe CLI:
1. Open a terminal
2. Run: npm install -g pinme
3. Verify: pinme --version
4. Retry the deployment
"""


class DeploymentRequest(BaseModel):
    """A document on local storage that should be published."""

    model_config = ConfigDict(frozen=True)

    source_path: str = Field(..., min_length=1)
    title: str | None = None
    template_id: str | None = None
    file_name: str | None = None


class DeploymentFailure(BaseModel):
    """Structured error attached to an unsuccessful deployment."""

    classification: ErrorClassification
    message: str
    install_guide: InstallGuide | None = None
    details: dict[str, Any] = Field(default_factory=dict)


class DeploymentResult(BaseModel):
    """Result of a deployment."""

    success: bool
    mode: DeploymentMode = DeploymentMode.REAL

    content_id: str | None = None
    primary_url: str | None = None
    mirror_urls: list[str] = Field(default_factory=list)

    raw_upload_output: str = ""
    raw_list_output: str = ""

    file_name: str | None = None
    title: str | None = None
    template_id: str | None = None

    deployed_at: datetime = Field(default_factory=utc_now)
    duration_ms: int = 0

    error: DeploymentFailure | None = None

    @classmethod
    def failed(
        cls, failure: DeploymentFailure, request: DeploymentRequest | None = None
    ) -> "DeploymentResult":
        """Build a failed result; identifiers and URLs stay empty."""
        return cls(
            success=False,
            file_name=request.file_name if request else None,
            title=request.title if request else None,
            template_id=request.template_id if request else None,
            error=failure,
        )


class PublishOutcome(BaseModel):
    """What a publishing backend recovered for one upload."""

    content_id: str | None = None
    url: str | None = None
    raw_upload_output: str = ""
    raw_list_output: str = ""


class DeployContentInput(BaseModel):
    """HTML content plus metadata, as submitted to the deploy endpoint.

    Accepts the camelCase keys sent by the browser front end as well.
    """

    html_content: str = Field(
        ..., min_length=1, validation_alias=AliasChoices("html_content", "htmlContent")
    )
    file_name: str | None = Field(
        default=None, validation_alias=AliasChoices("file_name", "fileName")
    )
    title: str | None = None
    template_id: str | None = Field(
        default=None, validation_alias=AliasChoices("template_id", "templateId")
    )


DeployStatus = Literal["success"]
