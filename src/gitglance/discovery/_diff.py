"""Comparison of a discovery run with the configured repositories."""

import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from gitglance.config import RepositoryReference, RepoTag
from gitglance.utils import abbreviate_home, expand_repo_path


@dataclass(frozen=True, slots=True)
class DiscoveryDiff:
    """Difference between discovered and configured working copies.

    Attributes:
        added: Discovered working copies missing from the configuration.
        missing: Configured repositories under the root that were not found.
    """

    added: tuple[Path, ...] = ()
    missing: tuple[Path, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.added and not self.missing


def _normalize(path: Path | str) -> Path:
    return Path(os.path.normpath(os.path.abspath(os.path.expanduser(path))))


def _is_within(path: Path, root: Path) -> bool:
    return path == root or path.is_relative_to(root)


def diff_discovery(
    discovered: Iterable[Path],
    refs: Iterable[RepositoryReference],
    root: Path | str,
) -> DiscoveryDiff:
    """Compare discovered working copies with the ``[repos]`` table.

    Ignored repositories count as configured. Configured paths outside
    ``root`` are never reported missing.
    """
    top = _normalize(root)
    found = [_normalize(p) for p in discovered]
    configured = [_normalize(expand_repo_path(ref.path)) for ref in refs]

    found_set = set(found)
    configured_set = set(configured)

    added = tuple(p for p in found if p not in configured_set)
    missing = tuple(
        p for p in configured if _is_within(p, top) and p not in found_set
    )
    return DiscoveryDiff(added=added, missing=missing)


def merge_discovered(
    discovered: Sequence[Path],
    refs: Iterable[RepositoryReference],
    root: Path | str,
    *,
    home: Path | None = None,
) -> list[RepositoryReference]:
    """Build the ``[repos]`` entries after a discovery run.

    Existing entries keep their position and tag unless they lie under
    ``root`` and were not found again. Newly found working copies are
    appended, tagged for checking.
    """
    top = _normalize(root)
    found_set = {_normalize(p) for p in discovered}

    merged: list[RepositoryReference] = []
    known: set[Path] = set()
    for ref in refs:
        path = _normalize(expand_repo_path(ref.path))
        if _is_within(path, top) and path not in found_set:
            continue
        merged.append(ref)
        known.add(path)

    for path in discovered:
        if _normalize(path) in known:
            continue
        merged.append(
            RepositoryReference.parse(abbreviate_home(path, home), RepoTag.CHECK)
        )
    return merged
