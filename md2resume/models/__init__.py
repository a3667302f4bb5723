"""Data models for MD2Resume."""

from md2resume.models.deployment import (
    UNKNOWN_CONTENT_ID,
    DeployContentInput,
    DeploymentFailure,
    DeploymentMode,
    DeploymentRequest,
    DeploymentResult,
    ErrorClassification,
    InstallGuide,
    PublishOutcome,
)
from md2resume.models.history import HistoryEntry, HistoryRecord
from md2resume.models.template import ResumeTemplate

__all__ = [
    # Deployment models
    "UNKNOWN_CONTENT_ID",
    "DeployContentInput",
    "DeploymentFailure",
    "DeploymentMode",
    "DeploymentRequest",
    "DeploymentResult",
    "ErrorClassification",
    "InstallGuide",
    "PublishOutcome",
    # History models
    "HistoryEntry",
    "HistoryRecord",
    # Template models
    "ResumeTemplate",
]
