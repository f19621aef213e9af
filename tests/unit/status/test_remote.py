"""Tests for the remote-relationship analyzer."""

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from gitglance.config import ComparatorKind
from gitglance.status import (
    NO_UPSTREAM,
    RemoteFlags,
    StructuredComparator,
    TextPatternComparator,
    UpstreamComparator,
    UpstreamComparison,
    collect_remote_flags,
    find_upstream_line,
    get_comparator,
    remote_status,
)
from gitglance.utils import ScriptResult

if TYPE_CHECKING:
    from pytest_mock import MockerFixture

STATUS_AHEAD = """On branch main
Your branch is ahead of 'origin/main' by 1 commit.
  (use "git push" to publish your local commits)

nothing to commit, working tree clean
"""

STATUS_BEHIND = """On branch main
Your branch is behind 'origin/main' by 2 commits, and can be fast-forwarded.
  (use "git pull" to update your local branch)

nothing to commit, working tree clean
"""

STATUS_DIVERGED = """On branch main
Your branch and 'origin/main' have diverged,
and have 1 and 1 different commits each, respectively.
  (use "git pull" if you want to integrate the remote branch with yours)

nothing to commit, working tree clean
"""

STATUS_UP_TO_DATE = """On branch main
Your branch is up to date with 'origin/main'.

nothing to commit, working tree clean
"""

STATUS_NO_UPSTREAM_DIRTY = """On branch main
Changes to be committed:
  (use "git restore --staged <file>..." to unstage)
\tnew file:   added.txt

Untracked files:
  (use "git add <file>..." to include in what will be committed)
\tnotes.txt

"""


def ok(stdout: str = "") -> ScriptResult:
    return ScriptResult(success=True, exit_code=0, stdout=stdout)


def failed(exit_code: int = 128) -> ScriptResult:
    return ScriptResult(success=True, exit_code=exit_code, stderr="fatal")


FakeGit = Callable[..., ScriptResult]


def fake_git(
    *,
    status: str = STATUS_UP_TO_DATE,
    rev_parse: ScriptResult | None = None,
    diff_files: ScriptResult | None = None,
    stash: str = "",
    rev_list: ScriptResult | None = None,
    status_result: ScriptResult | None = None,
    calls: list[Sequence[str]] | None = None,
) -> FakeGit:
    responses = {
        "rev-parse": rev_parse or ok(".git\n"),
        "diff-files": diff_files or ok(),
        "status": status_result or ok(status),
        "stash": ok(stash),
        "rev-list": rev_list or failed(),
    }

    def _run(args: Sequence[str], cwd: Path | str, **_: object) -> ScriptResult:
        if calls is not None:
            calls.append(tuple(args))
        return responses[args[0]]

    return _run


class TestFindUpstreamLine:
    def test_returns_marker_line(self) -> None:
        assert find_upstream_line(STATUS_AHEAD) == (
            "Your branch is ahead of 'origin/main' by 1 commit."
        )

    def test_none_without_upstream(self) -> None:
        assert find_upstream_line(STATUS_NO_UPSTREAM_DIRTY) is None


class TestTextPatternComparator:
    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            (STATUS_AHEAD, UpstreamComparison(ahead=True)),
            (STATUS_BEHIND, UpstreamComparison(behind=True)),
            (STATUS_DIVERGED, UpstreamComparison(diverged=True)),
            (STATUS_UP_TO_DATE, UpstreamComparison()),
            (STATUS_NO_UPSTREAM_DIRTY, NO_UPSTREAM),
        ],
        ids=["ahead", "behind", "diverged", "up-to-date", "no-upstream"],
    )
    def test_classification(self, status: str, expected: UpstreamComparison) -> None:
        assert TextPatternComparator().compare("/repo", status) == expected

    def test_empty_status_is_treated_as_no_upstream(self) -> None:
        assert TextPatternComparator().compare("/repo", "") == NO_UPSTREAM


class TestStructuredComparator:
    def test_counts(self, mocker: "MockerFixture") -> None:
        run_git = mocker.patch(
            "gitglance.status._remote.run_git", return_value=ok("0\t3\n")
        )

        result = StructuredComparator().compare("/repo", "", timeout_ms=500)

        assert result == UpstreamComparison(ahead=True)
        args = run_git.call_args
        assert args.args[0] == [
            "rev-list",
            "--left-right",
            "--count",
            "@{upstream}...HEAD",
        ]
        assert args.kwargs["timeout_ms"] == 500

    def test_behind(self, mocker: "MockerFixture") -> None:
        _ = mocker.patch("gitglance.status._remote.run_git", return_value=ok("2\t0\n"))

        assert StructuredComparator().compare("/repo", "") == UpstreamComparison(
            behind=True
        )

    def test_both_counts_mean_diverged(self, mocker: "MockerFixture") -> None:
        _ = mocker.patch("gitglance.status._remote.run_git", return_value=ok("1\t1\n"))

        assert StructuredComparator().compare("/repo", "") == UpstreamComparison(
            ahead=True, behind=True, diverged=True
        )

    def test_no_upstream(self, mocker: "MockerFixture") -> None:
        _ = mocker.patch("gitglance.status._remote.run_git", return_value=failed())

        assert StructuredComparator().compare("/repo", "") == NO_UPSTREAM

    def test_unparseable_output(self, mocker: "MockerFixture") -> None:
        _ = mocker.patch("gitglance.status._remote.run_git", return_value=ok("what\n"))

        assert StructuredComparator().compare("/repo", "") == NO_UPSTREAM


class TestGetComparator:
    def test_text(self) -> None:
        assert isinstance(get_comparator("text"), TextPatternComparator)

    def test_structured(self) -> None:
        comparator = get_comparator(ComparatorKind.STRUCTURED)

        assert isinstance(comparator, StructuredComparator)
        assert isinstance(comparator, UpstreamComparator)

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValueError, match="nope"):
            _ = get_comparator("nope")


class TestCollectRemoteFlags:
    def test_git_cannot_run(self, mocker: "MockerFixture") -> None:
        calls: list[Sequence[str]] = []
        _ = mocker.patch(
            "gitglance.status._remote.run_git",
            side_effect=fake_git(rev_parse=failed(), calls=calls),
        )

        assert collect_remote_flags("/missing") == RemoteFlags()
        assert calls == [("rev-parse", "--git-dir")]

    def test_up_to_date_is_empty(self, mocker: "MockerFixture") -> None:
        _ = mocker.patch("gitglance.status._remote.run_git", side_effect=fake_git())

        assert collect_remote_flags("/repo") == RemoteFlags()

    def test_strictly_ahead(self, mocker: "MockerFixture") -> None:
        _ = mocker.patch(
            "gitglance.status._remote.run_git",
            side_effect=fake_git(status=STATUS_AHEAD),
        )

        flags = collect_remote_flags("/repo")

        assert str(flags) == "^"
        assert not (flags.behind or flags.untracked or flags.staged or flags.stashed)

    def test_no_upstream_sets_all_relationship_flags(
        self, mocker: "MockerFixture"
    ) -> None:
        _ = mocker.patch(
            "gitglance.status._remote.run_git",
            side_effect=fake_git(status=STATUS_NO_UPSTREAM_DIRTY),
        )

        flags = collect_remote_flags("/repo")

        assert flags.ahead and flags.behind and flags.diverged
        assert flags.untracked and flags.staged
        assert str(flags) == "^v^v+_"

    def test_stash(self, mocker: "MockerFixture") -> None:
        _ = mocker.patch(
            "gitglance.status._remote.run_git",
            side_effect=fake_git(stash="stash@{0}: WIP on main: abc123 msg\n"),
        )

        assert str(collect_remote_flags("/repo")) == "S"

    def test_bare_repository(self, mocker: "MockerFixture") -> None:
        _ = mocker.patch(
            "gitglance.status._remote.run_git",
            side_effect=fake_git(diff_files=failed(128), status=""),
        )

        flags = collect_remote_flags("/repo.git")

        assert flags.bare
        assert str(flags).startswith("(bare)")

    def test_diff_files_exit_one_is_not_bare(self, mocker: "MockerFixture") -> None:
        _ = mocker.patch(
            "gitglance.status._remote.run_git",
            side_effect=fake_git(diff_files=failed(1)),
        )

        assert not collect_remote_flags("/repo").bare

    def test_uses_given_comparator(self, mocker: "MockerFixture") -> None:
        _ = mocker.patch("gitglance.status._remote.run_git", side_effect=fake_git())

        class AlwaysBehind:
            def compare(
                self, path: Path | str, status_text: str, *, timeout_ms: int = 0
            ) -> UpstreamComparison:
                return UpstreamComparison(behind=True)

        assert remote_status("/repo", AlwaysBehind()) == "v"

    def test_all_calls_are_read_only(self, mocker: "MockerFixture") -> None:
        calls: list[Sequence[str]] = []
        _ = mocker.patch(
            "gitglance.status._remote.run_git",
            side_effect=fake_git(calls=calls),
        )

        _ = collect_remote_flags("/repo")

        assert {c[0] for c in calls} == {"rev-parse", "diff-files", "status", "stash"}

    @pytest.mark.parametrize(
        "status_result",
        [
            failed(128),
            ScriptResult(success=False, exit_code=None, timed_out=True),
        ],
        ids=["failed", "timed-out"],
    )
    def test_unavailable_report_is_not_no_upstream(
        self, mocker: "MockerFixture", status_result: ScriptResult
    ) -> None:
        comparator = mocker.MagicMock(spec=TextPatternComparator)
        _ = mocker.patch(
            "gitglance.status._remote.run_git",
            side_effect=fake_git(
                status_result=status_result,
                stash="stash@{0}: WIP on main: abc123 msg\n",
            ),
        )

        flags = collect_remote_flags("/repo", comparator)

        assert str(flags) == "S"
        comparator.compare.assert_not_called()

    def test_bare_repository_with_failed_report(
        self, mocker: "MockerFixture"
    ) -> None:
        _ = mocker.patch(
            "gitglance.status._remote.run_git",
            side_effect=fake_git(diff_files=failed(128), status_result=failed(128)),
        )

        assert str(collect_remote_flags("/repo.git")) == "(bare)^v^v"
