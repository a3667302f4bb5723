"""Async subprocess runner for the PinMe CLI."""

import asyncio
from dataclasses import dataclass

from md2resume.core.exceptions import (
    CommandFailedError,
    CommandNotFoundError,
    CommandTimeoutError,
)
from md2resume.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CommandOutput:
    """Captured result of a finished command."""

    returncode: int
    stdout: str
    stderr: str

    @property
    def combined(self) -> str:
        """Standard output followed by standard error, verbatim."""
        return self.stdout + self.stderr


class CommandRunner:
    """Runs a command to completion with a timeout.

    Raises ``CommandNotFoundError`` when the executable cannot be spawned,
    ``CommandTimeoutError`` when it outlives ``timeout`` (the child is
    killed first) and ``CommandFailedError`` on a non-zero exit status.
    """

    async def run(self, args: list[str], timeout: float) -> CommandOutput:
        logger.debug("command.started", cmd=" ".join(args), timeout=timeout)

        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            logger.info("command.not_found", cmd=args[0], error=str(e))
            raise CommandNotFoundError(args) from e

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(), timeout=timeout
            )
        except asyncio.TimeoutError:
            await self._terminate(process)
            logger.warning("command.timeout", cmd=" ".join(args), timeout=timeout)
            raise CommandTimeoutError(args, timeout)

        output = CommandOutput(
            returncode=process.returncode if process.returncode is not None else -1,
            stdout=stdout.decode(errors="replace") if stdout else "",
            stderr=stderr.decode(errors="replace") if stderr else "",
        )

        logger.debug(
            "command.completed",
            cmd=" ".join(args),
            returncode=output.returncode,
            stdout_len=len(output.stdout),
            stderr_len=len(output.stderr),
        )

        if output.returncode != 0:
            raise CommandFailedError(args, output.returncode, output.combined)

        return output

    async def _terminate(self, process: asyncio.subprocess.Process) -> None:
        """Kill a child that overran its timeout and reap it."""
        if process.returncode is not None:
            return
        try:
            process.kill()
        except ProcessLookupError:
            return
        await process.wait()
