"""Publishing backends.

``PinMeBackend`` drives the real PinMe CLI. ``MockBackend`` simulates a
deployment without touching the CLI or the network. Which one serves a call
is decided by ``get_publishing_backend`` from the ``PINME_MOCK_MODE`` flag.
"""

import asyncio
import base64
import secrets
import time
from abc import ABC, abstractmethod
from pathlib import Path

from md2resume.config import Settings, load_settings
from md2resume.core.exceptions import CommandError
from md2resume.models.deployment import DeploymentMode, PublishOutcome
from md2resume.publishing import parser
from md2resume.publishing.gateways import ens_url
from md2resume.publishing.runner import CommandRunner
from md2resume.utils.logging import get_logger

logger = get_logger(__name__)

MOCK_CID_PREFIX = "bafybei"


class PublishingBackend(ABC):
    """Capability to publish a local file to IPFS."""

    @property
    @abstractmethod
    def mode(self) -> DeploymentMode:
        """Deployment mode this backend implements."""
        pass

    @abstractmethod
    async def is_available(self) -> bool:
        """Whether the backend can publish right now."""
        pass

    @abstractmethod
    async def publish(self, source: Path) -> PublishOutcome:
        """Upload ``source`` and recover its identifier and access URL.

        Command failures propagate as ``CommandError`` subclasses. A missing
        URL is not an error here; the outcome simply carries ``url=None``.
        """
        pass


class PinMeBackend(PublishingBackend):
    """Publishes through the ``pinme`` command-line tool."""

    def __init__(
        self,
        command: str = "pinme",
        probe_timeout: float = 10.0,
        upload_timeout: float = 60.0,
        list_timeout: float = 30.0,
        settle_delay: float = 2.0,
        runner: CommandRunner | None = None,
    ):
        self.command = command
        self.probe_timeout = probe_timeout
        self.upload_timeout = upload_timeout
        self.list_timeout = list_timeout
        self.settle_delay = settle_delay
        self.runner = runner or CommandRunner()

    @property
    def mode(self) -> DeploymentMode:
        return DeploymentMode.REAL

    async def is_available(self) -> bool:
        """Run ``pinme --version``; any failure means unavailable."""
        try:
            await self.runner.run([self.command, "--version"], self.probe_timeout)
        except CommandError as e:
            logger.info("pinme.unavailable", command=self.command, error=str(e))
            return False
        return True

    async def publish(self, source: Path) -> PublishOutcome:
        upload = await self.runner.run(
            [self.command, "upload", str(source)], self.upload_timeout
        )
        upload_output = upload.combined

        # Give the network time to register the upload before listing it
        await asyncio.sleep(self.settle_delay)

        listing = await self.runner.run(
            [self.command, "list", "-l", "1"], self.list_timeout
        )
        list_output = listing.combined

        parsed = parser.parse(list_output, fallback_text=upload_output)

        logger.info(
            "pinme.output_parsed",
            content_id=parsed.content_id,
            url=parsed.url,
            content_id_matcher=parsed.content_id_matcher,
            url_matcher=parsed.url_matcher,
        )

        return PublishOutcome(
            content_id=parsed.content_id,
            url=parsed.url,
            raw_upload_output=upload_output,
            raw_list_output=list_output,
        )


class MockBackend(PublishingBackend):
    """Simulates a successful deployment with a synthetic CID."""

    def __init__(self, settle_delay: float = 2.0):
        self.settle_delay = settle_delay

    @property
    def mode(self) -> DeploymentMode:
        return DeploymentMode.MOCK

    async def is_available(self) -> bool:
        return True

    async def publish(self, source: Path) -> PublishOutcome:
        # Same wait as a real upload so callers see realistic latency
        await asyncio.sleep(self.settle_delay)

        content_id = generate_mock_cid()
        url = ens_url(content_id[-12:])

        logger.info(
            "pinme.mock_deployment",
            source=str(source),
            content_id=content_id,
            url=url,
        )

        return PublishOutcome(
            content_id=content_id,
            url=url,
            raw_upload_output=f"[mock] uploaded {source.name}\nIPFS CID: {content_id}\n",
            raw_list_output=f"[mock] ENS URL: {url}\nIPFS CID: {content_id}\n",
        )


def _b32(data: bytes) -> str:
    return base64.b32encode(data).decode("ascii").rstrip("=").lower()


def generate_mock_cid() -> str:
    """Build a CID-shaped identifier from the clock plus a random suffix."""
    stamp = time.time_ns().to_bytes(8, "big")
    return MOCK_CID_PREFIX + _b32(stamp) + _b32(secrets.token_bytes(6))


def get_publishing_backend(settings: Settings | None = None) -> PublishingBackend:
    """Select the backend for one deployment from current settings."""
    settings = settings or load_settings()

    if settings.pinme_mock_mode:
        return MockBackend(settle_delay=settings.pinme_settle_delay)

    return PinMeBackend(
        command=settings.pinme_command,
        probe_timeout=settings.pinme_probe_timeout,
        upload_timeout=settings.pinme_upload_timeout,
        list_timeout=settings.pinme_list_timeout,
        settle_delay=settings.pinme_settle_delay,
    )
