"""Core functionality for MD2Resume."""

from md2resume.core.exceptions import (
    CommandError,
    CommandFailedError,
    CommandNotFoundError,
    CommandTimeoutError,
    DeploymentError,
    InvocationError,
    InvocationTimeoutError,
    MD2ResumeError,
    NetworkUnreachableError,
    ParseFailureError,
    SourceNotFoundError,
    ToolNotInstalledError,
)
from md2resume.core.history import HistoryLedger, get_history_ledger

__all__ = [
    "CommandError",
    "CommandFailedError",
    "CommandNotFoundError",
    "CommandTimeoutError",
    "DeploymentError",
    "InvocationError",
    "InvocationTimeoutError",
    "MD2ResumeError",
    "NetworkUnreachableError",
    "ParseFailureError",
    "SourceNotFoundError",
    "ToolNotInstalledError",
    "HistoryLedger",
    "get_history_ledger",
]
