"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from md2resume.api.deps import get_deployer, get_ledger
from md2resume.core.history import HistoryLedger
from md2resume.main import app
from md2resume.publishing.backends import MockBackend, PinMeBackend
from md2resume.publishing.runner import CommandOutput, CommandRunner
from md2resume.services.deployer import DeploymentService

SAMPLE_CID = "bafybeigdyrzt5sfp7udm7hu76uh7y26nf3efuylqabf3oclgtqy55fbzdi"
SAMPLE_ENS_URL = "https://a1b2c3d4.pinit.eth.limo"

SAMPLE_UPLOAD_OUTPUT = f"""
✔ Uploading resume.html
✔ Upload successful
IPFS CID: {SAMPLE_CID}
"""

SAMPLE_LIST_OUTPUT = f"""
Upload history (latest 1):
1. resume.html
   IPFS CID: {SAMPLE_CID}
   ENS URL: {SAMPLE_ENS_URL}
   Size: 12.3 KB
"""

GATEWAY_TEMPLATES = [
    "https://ipfs.io/ipfs/{cid}",
    "https://{cid}.ipfs.dweb.link",
]


class FakeRunner(CommandRunner):
    """Stands in for the PinMe CLI.

    ``responses`` maps a subcommand (``--version``, ``upload``, ``list``) to
    a ``CommandOutput`` to return or an exception to raise.
    """

    def __init__(self):
        self.calls: list[list[str]] = []
        self.responses: dict[str, CommandOutput | Exception] = {
            "--version": CommandOutput(0, "pinme 1.0.0\n", ""),
            "upload": CommandOutput(0, SAMPLE_UPLOAD_OUTPUT, ""),
            "list": CommandOutput(0, SAMPLE_LIST_OUTPUT, ""),
        }
        self.uploaded: list[Path] = []

    async def run(self, args: list[str], timeout: float) -> CommandOutput:
        self.calls.append(list(args))
        subcommand = args[1]
        if subcommand == "upload":
            self.uploaded.append(Path(args[2]))
        response = self.responses.get(subcommand, CommandOutput(0, "", ""))
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def subcommands(self) -> list[str]:
        return [call[1] for call in self.calls]


@pytest.fixture
def fake_runner() -> FakeRunner:
    """A fake PinMe CLI that succeeds by default."""
    return FakeRunner()


@pytest.fixture
def ledger() -> HistoryLedger:
    """Create a small, isolated history ledger."""
    return HistoryLedger(capacity=5)


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Directory where deployments materialize their files."""
    return tmp_path / "temp"


@pytest.fixture
def real_deployer(
    ledger: HistoryLedger, fake_runner: FakeRunner, temp_dir: Path
) -> DeploymentService:
    """Deployment service driving the fake CLI through the real backend."""
    return DeploymentService(
        ledger=ledger,
        backend_factory=lambda: PinMeBackend(settle_delay=0, runner=fake_runner),
        gateway_templates=GATEWAY_TEMPLATES,
        temp_directory=temp_dir,
    )


@pytest.fixture
def mock_deployer(ledger: HistoryLedger, temp_dir: Path) -> DeploymentService:
    """Deployment service in mock mode with no settling delay."""
    return DeploymentService(
        ledger=ledger,
        backend_factory=lambda: MockBackend(settle_delay=0),
        gateway_templates=GATEWAY_TEMPLATES,
        temp_directory=temp_dir,
    )


@pytest.fixture
async def client(
    ledger: HistoryLedger, mock_deployer: DeploymentService
) -> AsyncClient:
    """Create an async test client wired to isolated dependencies."""
    app.dependency_overrides[get_ledger] = lambda: ledger
    app.dependency_overrides[get_deployer] = lambda: mock_deployer

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def sample_html() -> str:
    """Minimal rendered résumé."""
    return "<!DOCTYPE html><html><body><h1>Jane Doe</h1><p>Engineer</p></body></html>"
