"""Configured repository references."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum

from gitglance.utils import strip_trailing_separator


class RepoTag(StrEnum):
    """Whether a configured repository is checked or ignored."""

    CHECK = "c"
    IGNORE = "i"


@dataclass(frozen=True, slots=True)
class RepositoryReference:
    """A repository entry from the ``[repos]`` table.

    Two references are equal when their normalized paths are equal; the tag
    does not take part in identity.

    Attributes:
        path: Path as written in the configuration, trailing separator removed.
            A leading ``~`` is kept for display.
        tag: Check or ignore.
    """

    path: str
    tag: RepoTag = field(default=RepoTag.CHECK, compare=False)

    @classmethod
    def parse(
        cls, path: str, tag: RepoTag | str = RepoTag.CHECK
    ) -> "RepositoryReference":
        """Build a reference with its path normalized."""
        return cls(path=strip_trailing_separator(path), tag=RepoTag(tag))

    @property
    def checked(self) -> bool:
        """Whether this repository takes part in status runs."""
        return self.tag is RepoTag.CHECK


def parse_repos(data: Mapping[str, str]) -> tuple[RepositoryReference, ...]:
    """Parse the ``[repos]`` table, keeping insertion order.

    When two entries normalize to the same path, the first position is kept
    and the later tag wins.
    """
    refs: dict[str, RepositoryReference] = {}
    for path, tag in data.items():
        ref = RepositoryReference.parse(path, tag)
        refs[ref.path] = ref
    return tuple(refs.values())


def repos_to_table(refs: Iterable[RepositoryReference]) -> dict[str, str]:
    """Render references back into a ``[repos]`` table."""
    return {ref.path: ref.tag.value for ref in refs}
