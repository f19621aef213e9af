"""Integration tests for the config commands."""

import tomllib
from collections.abc import Callable
from pathlib import Path

import pytest


class TestConfigShow:
    def test_shows_merged_configuration(
        self,
        write_config: Callable[[str], Path],
        gitglance_cli: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _ = write_config('[status]\ntimeout_ms = 500\n\n[repos]\n"~/src/a" = "c"\n')

        exit_code = gitglance_cli("config", "show")

        assert exit_code == 0
        data = tomllib.loads(capsys.readouterr().out)
        assert data["status"]["timeout_ms"] == 500
        assert data["status"]["comparator"] == "text"
        assert data["repos"] == {"~/src/a": "c"}

    def test_environment_overrides(
        self,
        monkeypatch: pytest.MonkeyPatch,
        gitglance_cli: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("GITGLANCE_STATUS__COMPARATOR", "structured")

        exit_code = gitglance_cli("config", "show")

        assert exit_code == 0
        data = tomllib.loads(capsys.readouterr().out)
        assert data["status"]["comparator"] == "structured"


class TestConfigPath:
    def test_default_path(
        self,
        cli_env: Path,
        gitglance_cli: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        exit_code = gitglance_cli("config", "path")

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == str(cli_env)

    def test_explicit_path(
        self,
        tmp_path: Path,
        gitglance_cli: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        config = tmp_path / "custom.toml"
        _ = config.write_text("")

        exit_code = gitglance_cli("--config", str(config), "config", "path")

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == str(config)

    def test_explicit_missing_path(
        self,
        tmp_path: Path,
        gitglance_cli: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        exit_code = gitglance_cli("--config", str(tmp_path / "nope.toml"), "config")

        assert exit_code == 1
        assert "Config file not found" in capsys.readouterr().err
