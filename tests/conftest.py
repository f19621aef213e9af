"""Shared test fixtures for gitglance tests."""

from pathlib import Path

import pytest
from rich.console import Console

from gitglance.config import RepositoryReference, RepoTag


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """A fake home directory used for display-path abbreviation."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def make_ref():
    """Build a RepositoryReference from a path and a tag letter."""

    def _make(path: Path | str, tag: str = "c") -> RepositoryReference:
        return RepositoryReference.parse(str(path), RepoTag(tag))

    return _make
