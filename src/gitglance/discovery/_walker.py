"""Filesystem walk that finds git working copies."""

import os
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from gitglance.utils import GIT_DIR_NAME

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


def _device_of(path: str) -> int | None:
    try:
        return os.stat(path).st_dev
    except OSError:
        return None


def discover(
    root: Path | str,
    *,
    cross_filesystems: bool = True,
    exclude: Iterable[str] = (),
    logger: "FilteringBoundLogger | None" = None,
) -> list[Path]:
    """Find every directory under ``root`` that holds a ``.git`` directory.

    Symlinks are not followed and ``.git`` directories are never entered.
    Working copies are descended into so nested repositories are found.
    Unreadable directories are skipped.

    Args:
        root: Directory to scan, ``~`` is expanded.
        cross_filesystems: Descend into directories on other filesystems.
        exclude: Directory names never descended into.
        logger: Optional structured logger.

    Returns:
        Working copy paths, sorted.
    """
    top = os.path.abspath(os.path.expanduser(os.fspath(root)))
    excluded = set(exclude)
    root_device = _device_of(top)
    found: list[Path] = []

    def onerror(err: OSError) -> None:
        if logger is not None:
            logger.debug("discovery_unreadable", path=err.filename)

    for dirpath, dirnames, _ in os.walk(top, onerror=onerror, followlinks=False):
        if GIT_DIR_NAME in dirnames and os.path.isdir(
            os.path.join(dirpath, GIT_DIR_NAME)
        ):
            found.append(Path(dirpath))

        kept = [d for d in dirnames if d != GIT_DIR_NAME and d not in excluded]
        if not cross_filesystems:
            kept = [
                d
                for d in kept
                if _device_of(os.path.join(dirpath, d)) == root_device
            ]
        dirnames[:] = kept

    found.sort()
    if logger is not None:
        logger.debug("discovery_complete", root=top, found=len(found))
    return found
