"""Status signature models.

A status signature is the transient result of probing one repository: its
branch, its uncommitted line counts, and the flags describing how it relates
to its upstream. Signatures are computed per repository per run and discarded
after display.
"""

from dataclasses import dataclass, fields
from enum import StrEnum


class RemoteFlag(StrEnum):
    """Remote-relationship flags in display order.

    The value of each member is the glyph printed for it.
    """

    BARE = "(bare)"
    AHEAD = "^"
    BEHIND = "v"
    DIVERGED = "^v"
    UNTRACKED = "+"
    STAGED = "_"
    STASHED = "S"

    @property
    def glyph(self) -> str:
        """The glyph shown in the status line."""
        return self.value

    @property
    def description(self) -> str:
        """Human-readable meaning, used by the legend."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[RemoteFlag, str] = {
    RemoteFlag.BARE: "bare repository",
    RemoteFlag.AHEAD: "ahead of upstream",
    RemoteFlag.BEHIND: "behind upstream",
    RemoteFlag.DIVERGED: "diverged from upstream",
    RemoteFlag.UNTRACKED: "untracked files",
    RemoteFlag.STAGED: "changes staged for commit",
    RemoteFlag.STASHED: "stash not empty",
}


@dataclass(frozen=True, slots=True)
class LocalChangeStats:
    """Line counts of uncommitted changes to tracked files.

    Attributes:
        added: Lines added across all modified tracked files.
        removed: Lines removed across all modified tracked files.
    """

    added: int = 0
    removed: int = 0

    @property
    def is_empty(self) -> bool:
        return self.added == 0 and self.removed == 0

    def __str__(self) -> str:
        return f"+{self.added}-{self.removed}"


@dataclass(frozen=True, slots=True)
class UpstreamComparison:
    """How a branch relates to its upstream.

    The three flags are independent; ``diverged`` may be set together with
    ``ahead`` and ``behind``.
    """

    ahead: bool = False
    behind: bool = False
    diverged: bool = False


@dataclass(frozen=True, slots=True)
class RemoteFlags:
    """Set of remote-relationship flags for one repository.

    Field order matches the display order of ``RemoteFlag``.
    """

    bare: bool = False
    ahead: bool = False
    behind: bool = False
    diverged: bool = False
    untracked: bool = False
    staged: bool = False
    stashed: bool = False

    def active(self) -> tuple[RemoteFlag, ...]:
        """Return the set flags in display order."""
        return tuple(
            RemoteFlag[f.name.upper()] for f in fields(self) if getattr(self, f.name)
        )

    def __str__(self) -> str:
        return "".join(flag.glyph for flag in self.active())


@dataclass(frozen=True, slots=True)
class StatusSignature:
    """Status of one repository as shown in a status line.

    Attributes:
        path: Display path of the repository.
        branch: Checked-out branch, empty when detached or unavailable.
        local: Uncommitted line counts, None when there is nothing to report.
        remote: Remote-relationship flags.
    """

    path: str
    branch: str = ""
    local: LocalChangeStats | None = None
    remote: RemoteFlags = RemoteFlags()

    @property
    def local_segment(self) -> str:
        return f"l:{self.local}" if self.local is not None else ""

    @property
    def remote_segment(self) -> str:
        remote = str(self.remote)
        return f"r:{remote}" if remote else ""

    @property
    def composite(self) -> str:
        """Local and remote segments joined by a single space."""
        return " ".join(s for s in (self.local_segment, self.remote_segment) if s)

    @property
    def is_clean(self) -> bool:
        return not self.composite

    def format_line(self) -> str:
        """Render ``<path>:<branch> <composite>``."""
        return f"{self.path}:{self.branch} {self.composite}"
