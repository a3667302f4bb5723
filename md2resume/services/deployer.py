"""Deployment service.

Publishes rendered résumés to IPFS and returns their access URLs.
"""

import os
import time
from functools import lru_cache
from pathlib import Path
from typing import Callable

from md2resume.config import settings
from md2resume.core.exceptions import (
    CommandFailedError,
    CommandNotFoundError,
    CommandTimeoutError,
    DeploymentError,
    InvocationError,
    InvocationTimeoutError,
    NetworkUnreachableError,
    ParseFailureError,
    SourceNotFoundError,
    ToolNotInstalledError,
)
from md2resume.core.history import HistoryLedger, get_history_ledger
from md2resume.models.deployment import (
    UNKNOWN_CONTENT_ID,
    DeployContentInput,
    DeploymentFailure,
    DeploymentRequest,
    DeploymentResult,
    ErrorClassification,
    InstallGuide,
)
from md2resume.models.history import HistoryEntry
from md2resume.publishing.backends import PublishingBackend, get_publishing_backend
from md2resume.publishing.gateways import mirror_urls
from md2resume.utils.files import materialize_source
from md2resume.utils.logging import get_logger

logger = get_logger(__name__)

# Substrings in failed PinMe output that point at connectivity problems
NETWORK_ERROR_MARKERS = (
    "enotfound",
    "econnrefused",
    "econnreset",
    "etimedout",
    "eai_again",
    "getaddrinfo",
    "socket hang up",
    "network error",
    "network is unreachable",
    "fetch failed",
)


class DeploymentService:
    """Publishes documents through a publishing backend.

    The service:
    1. Selects a backend (real PinMe CLI or mock) for the call
    2. Checks the backend is available
    3. Validates the source document
    4. Publishes and recovers the CID and access URL
    5. Records successful deployments in the history ledger

    Failed deployments are never retried here. Re-uploading to IPFS can mint
    a new identifier, so retrying is left to the caller.
    """

    def __init__(
        self,
        ledger: HistoryLedger,
        backend_factory: Callable[[], PublishingBackend] = get_publishing_backend,
        gateway_templates: list[str] | None = None,
        temp_directory: str | Path | None = None,
    ):
        self.ledger = ledger
        self._backend_factory = backend_factory
        self.gateway_templates = (
            list(gateway_templates)
            if gateway_templates is not None
            else list(settings.gateway_templates)
        )
        self.temp_directory = Path(temp_directory or settings.temp_directory)

    async def probe(self) -> bool:
        """Check whether the current backend can publish."""
        backend = self._backend_factory()
        return await backend.is_available()

    async def deploy(self, request: DeploymentRequest) -> DeploymentResult:
        """Publish ``request.source_path``.

        Never raises: every failure comes back as a result with
        ``success=False`` and a classified ``error``.
        """
        start_time = time.time()
        backend: PublishingBackend | None = None

        try:
            # Invalid deployment settings surface here and are classified below
            backend = self._backend_factory()

            logger.info(
                "deployer.started",
                mode=backend.mode.value,
                source=request.source_path,
                title=request.title,
            )

            result = await self._publish(backend, request)
        except DeploymentError as e:
            result = DeploymentResult.failed(self._failure_from(e), request)
        except Exception as e:
            logger.exception("deployer.unexpected_error")
            result = DeploymentResult.failed(
                DeploymentFailure(
                    classification=ErrorClassification.UNKNOWN,
                    message=str(e) or type(e).__name__,
                ),
                request,
            )

        if backend is not None:
            result.mode = backend.mode
        result.duration_ms = int((time.time() - start_time) * 1000)

        if result.success:
            self.ledger.record(
                HistoryEntry(
                    content_id=result.content_id or UNKNOWN_CONTENT_ID,
                    primary_url=result.primary_url or "",
                    mirror_urls=result.mirror_urls,
                    file_name=result.file_name,
                    title=result.title,
                    template_id=result.template_id,
                    deployed_at=result.deployed_at,
                )
            )
            logger.info(
                "deployer.completed",
                mode=result.mode.value,
                content_id=result.content_id,
                url=result.primary_url,
                duration_ms=result.duration_ms,
            )
        else:
            logger.error(
                "deployer.failed",
                mode=result.mode.value,
                classification=result.error.classification.value if result.error else None,
                error=result.error.message if result.error else None,
                duration_ms=result.duration_ms,
            )

        return result

    async def deploy_content(self, data: DeployContentInput) -> DeploymentResult:
        """Write HTML to a scoped temp file, publish it, then remove the file."""
        try:
            with materialize_source(
                data.html_content, data.file_name, self.temp_directory
            ) as path:
                request = DeploymentRequest(
                    source_path=str(path),
                    title=data.title,
                    template_id=data.template_id,
                    file_name=path.name,
                )
                return await self.deploy(request)
        except OSError as e:
            logger.exception("deployer.temp_file_error")
            return DeploymentResult.failed(
                DeploymentFailure(
                    classification=ErrorClassification.UNKNOWN,
                    message=f"Could not prepare file for upload: {e}",
                )
            )

    async def _publish(
        self, backend: PublishingBackend, request: DeploymentRequest
    ) -> DeploymentResult:
        if not await backend.is_available():
            raise ToolNotInstalledError(InstallGuide())

        source = Path(request.source_path)
        if not source.is_file() or not os.access(source, os.R_OK):
            raise SourceNotFoundError(request.source_path)

        try:
            outcome = await backend.publish(source)
        except CommandNotFoundError:
            raise ToolNotInstalledError(InstallGuide())
        except CommandTimeoutError as e:
            raise InvocationTimeoutError(e.message, e.details)
        except CommandFailedError as e:
            if self._is_network_error(e.output):
                raise NetworkUnreachableError(
                    "Could not reach the IPFS network", e.details
                )
            raise InvocationError(e.message, e.details)

        if not outcome.url:
            raise ParseFailureError(outcome.raw_upload_output, outcome.raw_list_output)

        return DeploymentResult(
            success=True,
            content_id=outcome.content_id or UNKNOWN_CONTENT_ID,
            primary_url=outcome.url,
            mirror_urls=mirror_urls(outcome.content_id, self.gateway_templates),
            raw_upload_output=outcome.raw_upload_output,
            raw_list_output=outcome.raw_list_output,
            file_name=request.file_name or source.name,
            title=request.title,
            template_id=request.template_id,
        )

    def _failure_from(self, error: DeploymentError) -> DeploymentFailure:
        """Convert a deployment exception into a structured failure."""
        return DeploymentFailure(
            classification=error.classification,
            message=error.message,
            install_guide=getattr(error, "install_guide", None),
            details=error.details,
        )

    def _is_network_error(self, output: str) -> bool:
        lowered = output.lower()
        return any(marker in lowered for marker in NETWORK_ERROR_MARKERS)


_deployment_service: DeploymentService | None = None


@lru_cache
def get_deployment_service() -> DeploymentService:
    """Get the deployment service singleton."""
    global _deployment_service
    if _deployment_service is None:
        _deployment_service = DeploymentService(ledger=get_history_ledger())
    return _deployment_service
