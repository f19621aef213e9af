"""Configuration source discovery."""

from pathlib import Path
from typing import Any

import platformdirs

from gitglance.config._defaults import DEFAULT_CONFIG
from gitglance.config._models._common import ConfigSource, ConfigSourceName
from gitglance.utils import APP_NAME


def get_user_config_path() -> Path:
    r"""Get platform-specific user config file path.

    - Linux: ``~/.config/gitglance/config.toml``
    - macOS: ``~/Library/Application Support/gitglance/config.toml``
    - Windows: ``%APPDATA%\gitglance\config.toml``

    The path is returned whether or not the file exists.
    """
    return platformdirs.user_config_path(APP_NAME) / "config.toml"


def discover_sources(
    *,
    config_path: Path | None = None,
    include_env: bool = True,
    include_cli: bool = False,
    cli_overrides: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny]
) -> list[ConfigSource]:
    """List configuration sources, highest precedence first.

    File sources carry no values yet; ``Config.load`` reads them.

    Args:
        config_path: File used in place of the platform user config.
        include_env: Include the environment as a source.
        include_cli: Include CLI overrides as a source.
        cli_overrides: CLI override values.

    Returns:
        Sources ordered CLI, ENV, USER, DEFAULT (disabled ones omitted).
    """
    sources: list[ConfigSource] = []

    if include_cli:
        overrides = cli_overrides or {}
        sources.append(
            ConfigSource(
                name=ConfigSourceName.CLI,
                path=None,
                exists=bool(overrides),
                values=overrides,
            )
        )

    if include_env:
        sources.append(
            ConfigSource(name=ConfigSourceName.ENV, path=None, exists=True, values={})
        )

    user_path = config_path if config_path is not None else get_user_config_path()
    sources.append(
        ConfigSource(
            name=ConfigSourceName.USER,
            path=user_path,
            exists=user_path.is_file(),
            values={},
        )
    )

    sources.append(
        ConfigSource(
            name=ConfigSourceName.DEFAULT,
            path=None,
            exists=True,
            values=DEFAULT_CONFIG,
        )
    )
    return sources
