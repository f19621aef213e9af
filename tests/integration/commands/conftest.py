import os
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from rich.console import Console

from gitglance.cli import CLIContext, create_app

if TYPE_CHECKING:
    from pytest_mock import MockerFixture


@pytest.fixture(autouse=True)
def cli_env(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, mocker: "MockerFixture"
) -> Path:
    """Isolate the CLI from the user's configuration, logs, and home.

    Returns the path used as the default user config file.
    """
    for key in list(os.environ):
        if key.startswith("GITGLANCE_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("GITGLANCE_LOGGING__FILE", str(tmp_path / "logs" / "cli.log"))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))

    config_path = tmp_path / "user" / "config.toml"
    for target in (
        "gitglance.config._discovery.get_user_config_path",
        "gitglance.cli._commands._config.get_user_config_path",
        "gitglance.cli._commands._discover.get_user_config_path",
    ):
        _ = mocker.patch(target, return_value=config_path)

    CLIContext.reset()
    return config_path


@pytest.fixture
def gitglance_cli(console: Console) -> Callable[..., int]:
    """Run the CLI with global options and return the exit code."""
    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> int:
        try:
            app.meta(list(args))
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else 1
        else:
            return 0

    return _run


@pytest.fixture
def write_config(cli_env: Path) -> Callable[[str], Path]:
    """Write the default user config file."""

    def _write(content: str) -> Path:
        cli_env.parent.mkdir(parents=True, exist_ok=True)
        _ = cli_env.write_text(content)
        return cli_env

    return _write
