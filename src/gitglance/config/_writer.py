# pyright: reportAny=false, reportExplicitAny=false
"""Writing the ``[repos]`` table and checking configuration age."""

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pendulum
import tomli_w

from gitglance.config._loader import read_toml_file
from gitglance.config._models._repos import RepositoryReference, repos_to_table
from gitglance.exceptions import ConfigWriteError

if TYPE_CHECKING:
    from pendulum import DateTime


def render_repos_config(
    refs: Iterable[RepositoryReference],
    existing: dict[str, Any] | None = None,
) -> str:
    """Render a configuration document whose ``[repos]`` table lists ``refs``.

    Args:
        refs: Repositories in the order they should appear.
        existing: Parsed configuration whose other sections are kept.

    Returns:
        The TOML document.
    """
    data = dict(existing or {})
    data["repos"] = repos_to_table(refs)
    return tomli_w.dumps(data)


def write_repos_config(path: Path, refs: Iterable[RepositoryReference]) -> None:
    """Rewrite the ``[repos]`` table of the config file at ``path``.

    Every other section of an existing file is preserved. Missing parent
    directories are created.

    Raises:
        ConfigLoadError: If the existing file cannot be parsed.
        ConfigWriteError: If the file cannot be written.
    """
    existing = read_toml_file(path) if path.is_file() else {}
    document = render_repos_config(refs, existing)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_text(document, encoding="utf-8")
    except OSError as e:
        msg = f"Failed to write config file {path}: {e}"
        raise ConfigWriteError(msg, path=path) from e


def config_modified_at(path: Path) -> "DateTime | None":
    """Return the modification time of ``path`` in UTC, or None if unreadable."""
    try:
        mtime = path.stat().st_mtime
    except OSError:
        return None
    return pendulum.from_timestamp(mtime, tz="UTC")


def config_age_days(path: Path) -> int | None:
    """Return the age of ``path`` in whole days, or None if it cannot be read."""
    modified = config_modified_at(path)
    if modified is None:
        return None
    return max((pendulum.now("UTC") - modified).in_days(), 0)


def is_config_stale(path: Path | None, max_age_days: int) -> bool:
    """Whether the config file was last modified more than ``max_age_days`` ago.

    A limit of 0 disables the check. A missing file is never stale.
    """
    if path is None or max_age_days <= 0:
        return False
    modified = config_modified_at(path)
    if modified is None:
        return False
    return modified < pendulum.now("UTC").subtract(days=max_age_days)
