"""Unit tests for the command runner and publishing backends."""

import re
import sys
import time
from pathlib import Path

import pytest

from conftest import SAMPLE_CID, SAMPLE_ENS_URL, FakeRunner
from md2resume.config import Settings
from md2resume.core.exceptions import (
    CommandFailedError,
    CommandNotFoundError,
    CommandTimeoutError,
)
from md2resume.models.deployment import DeploymentMode
from md2resume.publishing.backends import (
    MockBackend,
    PinMeBackend,
    generate_mock_cid,
    get_publishing_backend,
)
from md2resume.publishing.gateways import ens_url, mirror_urls
from md2resume.publishing.parser import CID_PATTERN, ENS_URL_PATTERN
from md2resume.publishing.runner import CommandRunner


class TestCommandRunner:
    """Tests for CommandRunner against real child processes."""

    @pytest.fixture
    def runner(self) -> CommandRunner:
        return CommandRunner()

    @pytest.mark.asyncio
    async def test_captures_both_streams(self, runner: CommandRunner):
        """Test stdout and stderr are captured verbatim."""
        output = await runner.run(
            [
                sys.executable,
                "-c",
                "import sys; print('out'); print('err', file=sys.stderr)",
            ],
            timeout=10,
        )

        assert output.returncode == 0
        assert output.stdout.strip() == "out"
        assert output.stderr.strip() == "err"
        assert "out" in output.combined and "err" in output.combined

    @pytest.mark.asyncio
    async def test_nonzero_exit(self, runner: CommandRunner):
        """Test a non-zero exit raises with the captured output."""
        with pytest.raises(CommandFailedError) as exc_info:
            await runner.run(
                [sys.executable, "-c", "import sys; print('nope'); sys.exit(3)"],
                timeout=10,
            )

        assert exc_info.value.returncode == 3
        assert "nope" in exc_info.value.output

    @pytest.mark.asyncio
    async def test_missing_executable(self, runner: CommandRunner):
        """Test an unknown executable raises CommandNotFoundError."""
        with pytest.raises(CommandNotFoundError):
            await runner.run(["/nonexistent/bin/pinme", "--version"], timeout=5)

    @pytest.mark.asyncio
    async def test_timeout_kills_child(self, runner: CommandRunner):
        """Test an overrunning command is killed and reported."""
        started = time.monotonic()
        with pytest.raises(CommandTimeoutError) as exc_info:
            await runner.run(
                [sys.executable, "-c", "import time; time.sleep(30)"],
                timeout=0.5,
            )

        assert exc_info.value.timeout == 0.5
        assert time.monotonic() - started < 10


class TestPinMeBackend:
    """Tests for PinMeBackend."""

    @pytest.fixture
    def backend(self, fake_runner: FakeRunner) -> PinMeBackend:
        return PinMeBackend(command="pinme", settle_delay=0, runner=fake_runner)

    @pytest.mark.asyncio
    async def test_available(self, backend: PinMeBackend, fake_runner: FakeRunner):
        """Test the probe runs the version command."""
        assert await backend.is_available() is True
        assert fake_runner.calls == [["pinme", "--version"]]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            CommandNotFoundError(["pinme", "--version"]),
            CommandTimeoutError(["pinme", "--version"], 10),
            CommandFailedError(["pinme", "--version"], 1, ""),
        ],
    )
    async def test_unavailable(
        self, backend: PinMeBackend, fake_runner: FakeRunner, error: Exception
    ):
        """Test any probe failure means unavailable."""
        fake_runner.responses["--version"] = error
        assert await backend.is_available() is False

    @pytest.mark.asyncio
    async def test_publish(self, backend: PinMeBackend, fake_runner: FakeRunner, tmp_path: Path):
        """Test upload then list, parsed into an outcome."""
        source = tmp_path / "resume.html"

        outcome = await backend.publish(source)

        assert fake_runner.calls == [
            ["pinme", "upload", str(source)],
            ["pinme", "list", "-l", "1"],
        ]
        assert outcome.content_id == SAMPLE_CID
        assert outcome.url == SAMPLE_ENS_URL

    @pytest.mark.asyncio
    async def test_settle_delay(self, fake_runner: FakeRunner, tmp_path: Path):
        """Test the backend waits between upload and list."""
        backend = PinMeBackend(settle_delay=0.2, runner=fake_runner)

        started = time.monotonic()
        await backend.publish(tmp_path / "resume.html")

        assert time.monotonic() - started >= 0.2

    @pytest.mark.asyncio
    async def test_publish_propagates_command_errors(
        self, backend: PinMeBackend, fake_runner: FakeRunner, tmp_path: Path
    ):
        """Test command failures are left for the caller to classify."""
        fake_runner.responses["list"] = CommandTimeoutError(["pinme", "list"], 30)

        with pytest.raises(CommandTimeoutError):
            await backend.publish(tmp_path / "resume.html")


class TestMockBackend:
    """Tests for MockBackend."""

    @pytest.mark.asyncio
    async def test_always_available(self):
        """Test mock mode never needs the CLI."""
        assert await MockBackend(settle_delay=0).is_available() is True

    @pytest.mark.asyncio
    async def test_publish(self, tmp_path: Path):
        """Test a synthetic but well-formed outcome."""
        outcome = await MockBackend(settle_delay=0).publish(tmp_path / "resume.html")

        assert re.fullmatch(CID_PATTERN, outcome.content_id)
        assert re.fullmatch(ENS_URL_PATTERN, outcome.url)
        assert outcome.content_id in outcome.raw_list_output

    def test_mock_cids_are_distinct(self):
        """Test generated CIDs differ between calls."""
        cids = {generate_mock_cid() for _ in range(50)}
        assert len(cids) == 50
        assert all(cid.startswith("bafybei") for cid in cids)


class TestBackendSelection:
    """Tests for get_publishing_backend."""

    def test_real_mode(self):
        """Test the PinMe backend is configured from settings."""
        backend = get_publishing_backend(
            Settings(pinme_mock_mode=False, pinme_command="/opt/pinme", pinme_upload_timeout=90)
        )

        assert isinstance(backend, PinMeBackend)
        assert backend.mode == DeploymentMode.REAL
        assert backend.command == "/opt/pinme"
        assert backend.upload_timeout == 90

    def test_mock_mode(self):
        """Test the mock flag selects the mock backend."""
        backend = get_publishing_backend(Settings(pinme_mock_mode=True, pinme_settle_delay=0.5))

        assert isinstance(backend, MockBackend)
        assert backend.mode == DeploymentMode.MOCK
        assert backend.settle_delay == 0.5

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch):
        """Test the environment flag is read on every call."""
        monkeypatch.setenv("PINME_MOCK_MODE", "1")
        assert isinstance(get_publishing_backend(), MockBackend)

        monkeypatch.setenv("PINME_MOCK_MODE", "0")
        assert isinstance(get_publishing_backend(), PinMeBackend)


class TestGateways:
    """Tests for access URL helpers."""

    def test_mirror_urls(self):
        """Test templates are filled in order without duplicates."""
        templates = [
            "https://ipfs.io/ipfs/{cid}",
            "https://{cid}.ipfs.dweb.link",
            "https://ipfs.io/ipfs/{cid}",
        ]

        assert mirror_urls("bafyabc", templates) == [
            "https://ipfs.io/ipfs/bafyabc",
            "https://bafyabc.ipfs.dweb.link",
        ]

    def test_mirror_urls_without_cid(self):
        """Test no mirrors are derived for an unknown CID."""
        assert mirror_urls(None, ["https://ipfs.io/ipfs/{cid}"]) == []

    def test_ens_url(self):
        """Test the ENS URL template."""
        assert ens_url("ABC123") == "https://abc123.pinit.eth.limo"
