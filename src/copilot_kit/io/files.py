"""Atomic, write-if-changed persistence of the generated README."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from contextlib import suppress
from pathlib import Path

from copilot_kit.constants.config import README_TEMP_PREFIX, README_TEMP_SUFFIX
from copilot_kit.model import WriteOutcome
from copilot_kit.types import WriteStatus

logger = logging.getLogger(__name__)


def write_text_atomic(
    *,
    path: Path,
    content: str,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Persist text atomically by writing to a temp file then renaming."""
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            newline="",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(content)
        os.chmod(temp_name, _target_mode(path))
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise

    assert temp_name is not None
    os.replace(temp_name, path)


def _target_mode(path: Path) -> int:
    """Permission bits the written file should end up with.

    An existing file keeps its mode; a new one gets the umask default, as
    ``open()`` would give it.
    """
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_if_changed(path: Path, content: str, *, check: bool = False) -> WriteOutcome:
    """Write *content* to *path* only when it differs byte-for-byte.

    With ``check`` set nothing is written; a pending change is reported as
    ``stale`` instead.
    """
    status: WriteStatus
    if path.exists():
        if path.read_bytes() == content.encode("utf-8"):
            return WriteOutcome(path=path, status="unchanged")
        status = "updated"
    else:
        status = "created"

    if check:
        logger.debug("Check mode: %s would be %s", path, status)
        return WriteOutcome(path=path, status="stale")

    write_text_atomic(
        path=path,
        content=content,
        temp_prefix=README_TEMP_PREFIX,
        temp_suffix=README_TEMP_SUFFIX,
    )
    return WriteOutcome(path=path, status=status)
