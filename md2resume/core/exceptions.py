"""Custom exceptions for MD2Resume."""

from typing import Any

from md2resume.models.deployment import ErrorClassification, InstallGuide


class MD2ResumeError(Exception):
    """Base exception for MD2Resume."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


# Subprocess-level failures, raised by the command runner


class CommandError(MD2ResumeError):
    """A PinMe CLI invocation did not complete successfully."""

    def __init__(
        self, message: str, args: list[str], details: dict[str, Any] | None = None
    ):
        super().__init__(message, {"command": " ".join(args), **(details or {})})
        self.command_args = args


class CommandNotFoundError(CommandError):
    """The executable could not be spawned."""

    def __init__(self, args: list[str]):
        super().__init__(f"Command not found: {args[0]}", args)


class CommandTimeoutError(CommandError):
    """The command exceeded its timeout and was killed."""

    def __init__(self, args: list[str], timeout: float):
        super().__init__(
            f"Command timed out after {timeout:g}s: {' '.join(args)}",
            args,
            {"timeout": timeout},
        )
        self.timeout = timeout


class CommandFailedError(CommandError):
    """The command exited with a non-zero status."""

    def __init__(self, args: list[str], returncode: int, output: str):
        super().__init__(
            f"Command exited with status {returncode}: {' '.join(args)}",
            args,
            {"returncode": returncode, "output": output},
        )
        self.returncode = returncode
        self.output = output


# Deployment failures, one per classification


class DeploymentError(MD2ResumeError):
    """Deployment to IPFS failed."""

    classification = ErrorClassification.UNKNOWN

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(f"Deployment failed: {message}", details)


class ToolNotInstalledError(DeploymentError):
    """The PinMe CLI is not callable in this environment."""

    classification = ErrorClassification.TOOL_NOT_INSTALLED

    def __init__(self, install_guide: InstallGuide):
        super().__init__("PinMe CLI is not installed")
        self.install_guide = install_guide


class SourceNotFoundError(DeploymentError):
    """The document to publish does not exist or cannot be read."""

    classification = ErrorClassification.SOURCE_NOT_FOUND

    def __init__(self, source_path: str):
        super().__init__(
            f"Source file not found or unreadable: {source_path}",
            {"source_path": source_path},
        )


class InvocationTimeoutError(DeploymentError):
    """A PinMe subcommand ran past its timeout."""

    classification = ErrorClassification.TIMEOUT


class NetworkUnreachableError(DeploymentError):
    """PinMe reported that the publishing network could not be reached."""

    classification = ErrorClassification.NETWORK_UNREACHABLE


class ParseFailureError(DeploymentError):
    """No access URL could be recovered from the PinMe output."""

    classification = ErrorClassification.PARSE_FAILURE

    def __init__(self, upload_output: str, list_output: str):
        super().__init__(
            "Could not recover access URL from PinMe output",
            {"raw_upload_output": upload_output, "raw_list_output": list_output},
        )


class InvocationError(DeploymentError):
    """Any other failure while invoking PinMe."""

    classification = ErrorClassification.UNKNOWN
