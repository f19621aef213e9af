import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest

GitRunner = Callable[..., str]

FIVE_LINES = "one\ntwo\nthree\nfour\nfive\n"


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def isolated_git(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Keep the user's git configuration out of the tests."""
    gitconfig = tmp_path_factory.mktemp("gitconfig") / "config"
    _ = gitconfig.write_text(
        "[user]\n"
        "\temail = test@example.com\n"
        "\tname = Test User\n"
        "[init]\n"
        "\tdefaultBranch = main\n"
        "[commit]\n"
        "\tgpgsign = false\n"
    )
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(gitconfig))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")


@pytest.fixture
def git() -> GitRunner:
    """Run a git command in a directory and return its stdout."""

    def _git(cwd: Path, *args: str) -> str:
        result = subprocess.run(  # noqa: S603
            ["git", *args],  # noqa: S607
            cwd=str(cwd),
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout

    return _git


@pytest.fixture
def init_repo(git: GitRunner) -> Callable[[Path], Path]:
    """Initialize an empty working copy at the given path."""

    def _init(path: Path) -> Path:
        path.mkdir(parents=True, exist_ok=True)
        _ = git(path, "init", "-q")
        return path

    return _init


@pytest.fixture
def commit_file(git: GitRunner) -> Callable[..., None]:
    """Write a file and commit it."""

    def _commit(repo: Path, name: str, content: str, message: str = "update") -> None:
        _ = (repo / name).write_text(content)
        _ = git(repo, "add", name)
        _ = git(repo, "commit", "-q", "-m", message)

    return _commit


@pytest.fixture
def remote_repo(
    tmp_path: Path,
    git: GitRunner,
    init_repo: Callable[[Path], Path],
    commit_file: Callable[..., None],
) -> Path:
    """A bare repository holding one commit on main."""
    remote = tmp_path / "remote.git"
    remote.mkdir()
    _ = git(remote, "init", "-q", "--bare")

    seed = init_repo(tmp_path / "seed")
    commit_file(seed, "a.txt", FIVE_LINES, "initial")
    _ = git(seed, "remote", "add", "origin", str(remote))
    _ = git(seed, "push", "-q", "origin", "main")
    return remote


@pytest.fixture
def work_repo(tmp_path: Path, git: GitRunner, remote_repo: Path) -> Path:
    """A clone of ``remote_repo`` whose main branch tracks origin/main."""
    _ = git(tmp_path, "clone", "-q", str(remote_repo), "work")
    return tmp_path / "work"


@pytest.fixture
def other_clone(tmp_path: Path, git: GitRunner, remote_repo: Path) -> Path:
    """A second clone used to push commits the work clone has not seen."""
    _ = git(tmp_path, "clone", "-q", str(remote_repo), "other")
    return tmp_path / "other"
