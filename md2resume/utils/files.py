"""Scoped temporary files for documents being published."""

import shutil
import tempfile
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from md2resume.utils.logging import get_logger

logger = get_logger(__name__)


def default_file_name() -> str:
    """Name used when the caller does not supply one."""
    return f"resume-{int(time.time() * 1000)}.html"


def safe_file_name(file_name: str | None) -> str:
    """Keep only the final path component; fall back to a generated name."""
    name = Path(file_name).name if file_name else ""
    if not name or name in {".", ".."}:
        return default_file_name()
    return name


@contextmanager
def materialize_source(
    content: str, file_name: str | None, directory: str | Path
) -> Iterator[Path]:
    """Write ``content`` to a fresh private directory for the block's duration.

    Each call gets its own directory so concurrent deployments with the same
    file name never collide. The directory is removed on every exit path;
    a removal failure is logged and never raised.
    """
    base = Path(directory)
    base.mkdir(parents=True, exist_ok=True)
    workdir = Path(tempfile.mkdtemp(prefix="deploy-", dir=base))

    try:
        path = workdir / safe_file_name(file_name)
        path.write_text(content, encoding="utf-8")
        yield path
    finally:
        try:
            shutil.rmtree(workdir)
        except OSError as e:
            logger.warning("temp_file.cleanup_failed", path=str(workdir), error=str(e))
