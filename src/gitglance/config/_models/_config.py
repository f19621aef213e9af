# pyright: reportExplicitAny=false, reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Configuration container with typed access.

This module provides the Config class, the interface the CLI and the batch
runner use to read gitglance configuration.
"""

from pathlib import Path
from typing import Any, ClassVar, TypeVar, overload

import tomli_w
from pydantic import BaseModel, ConfigDict, PrivateAttr

from gitglance.config._defaults import DEFAULT_CONFIG
from gitglance.config._loader import (
    copy_value,
    deep_merge,
    parse_env_vars,
    read_toml_file,
)
from gitglance.config._models._common import ConfigSource, ConfigSourceName
from gitglance.config._models._discovery import DiscoveryConfiguration
from gitglance.config._models._logging import LoggingConfig
from gitglance.config._models._repos import RepositoryReference, parse_repos
from gitglance.config._models._status import StatusConfiguration

T = TypeVar("T")


class Config(BaseModel):
    """Configuration container with typed access.

    Instances are immutable. Use the factory methods rather than the
    constructor.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    _data: dict[str, Any] = PrivateAttr(default_factory=dict)
    _sources: tuple[ConfigSource, ...] = PrivateAttr(default=())
    _logging: LoggingConfig = PrivateAttr(default_factory=LoggingConfig)
    _status: StatusConfiguration = PrivateAttr(default_factory=StatusConfiguration)
    _discovery: DiscoveryConfiguration = PrivateAttr(
        default_factory=DiscoveryConfiguration
    )
    _repos: tuple[RepositoryReference, ...] = PrivateAttr(default=())

    def __init__(
        self,
        *,
        _data: dict[str, Any] | None = None,
        _sources: tuple[ConfigSource, ...] = (),
    ) -> None:
        """Initialize from a merged, validated configuration dictionary.

        Args:
            _data: The complete merged configuration dictionary.
            _sources: Sources that contributed to this configuration.
        """
        super().__init__()
        data = _data if _data is not None else copy_value(DEFAULT_CONFIG)
        self._data = data
        self._sources = _sources
        self._logging = LoggingConfig.model_validate(data.get("logging", {}))
        self._status = StatusConfiguration.model_validate(data.get("status", {}))
        self._discovery = DiscoveryConfiguration.model_validate(
            data.get("discovery", {})
        )
        self._repos = parse_repos(data.get("repos", {}))

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        *,
        validate: bool = True,
    ) -> "Config":
        """Create configuration from a dictionary merged over the defaults.

        Raises:
            ConfigValidationError: If validation fails (when validate=True).
        """
        # Deferred import to avoid circular dependency
        from gitglance.config._validation import (  # noqa: PLC0415
            raise_if_validation_errors,
            validate_config,
        )

        merged = deep_merge(DEFAULT_CONFIG, data)
        if validate:
            raise_if_validation_errors(validate_config(merged))
        return cls(_data=merged)

    @classmethod
    def from_file(
        cls,
        path: Path,
        *,
        validate: bool = True,
    ) -> "Config":
        """Load configuration from a single file over the defaults.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigLoadError: If the file cannot be parsed.
            ConfigValidationError: If validation fails.
        """
        from gitglance.config._validation import (  # noqa: PLC0415
            raise_if_validation_errors,
            validate_config,
        )

        data = read_toml_file(path)
        source = ConfigSource(
            name=ConfigSourceName.USER,
            path=path,
            exists=True,
            values=data,
        )

        merged = deep_merge(DEFAULT_CONFIG, data)
        if validate:
            raise_if_validation_errors(validate_config(merged), source=str(path))
        return cls(_data=merged, _sources=(source,))

    @classmethod
    def load(
        cls,
        *,
        config_path: Path | None = None,
        include_env: bool = True,
        include_cli: bool = False,
        cli_overrides: dict[str, Any] | None = None,
    ) -> "Config":
        """Load merged configuration from all sources.

        Sources are merged in precedence order (defaults -> user -> env ->
        cli).

        Args:
            config_path: File used in place of the platform user config.
            include_env: Include ``GITGLANCE_*`` environment variables.
            include_cli: Include CLI overrides.
            cli_overrides: CLI override values, used if include_cli is True.

        Returns:
            Merged configuration object.

        Raises:
            ConfigLoadError: If the config file cannot be parsed.
            ConfigValidationError: If the merged config fails validation.
        """
        from gitglance.config._discovery import discover_sources  # noqa: PLC0415
        from gitglance.config._validation import (  # noqa: PLC0415
            raise_if_validation_errors,
            validate_config,
        )

        sources = discover_sources(
            config_path=config_path,
            include_env=include_env,
            include_cli=include_cli,
            cli_overrides=cli_overrides,
        )

        merged: dict[str, Any] = {}
        loaded_sources: list[ConfigSource] = []

        # Sources are discovered highest-to-lowest, merge lowest first
        for source in reversed(sources):
            values: dict[str, Any] = {}

            if source.name == ConfigSourceName.DEFAULT:
                values = source.values
            elif source.name == ConfigSourceName.ENV:
                values = parse_env_vars()
            elif source.name == ConfigSourceName.CLI:
                values = source.values
            elif source.path is not None and source.exists:
                values = read_toml_file(source.path)

            loaded_sources.append(
                ConfigSource(
                    name=source.name,
                    path=source.path,
                    exists=source.exists,
                    values=values,
                )
            )
            if values:
                merged = deep_merge(merged, values)

        raise_if_validation_errors(validate_config(merged))

        return cls(_data=merged, _sources=tuple(reversed(loaded_sources)))

    @property
    def sources(self) -> list[ConfigSource]:
        """Return the sources that contributed, highest precedence first."""
        return list(self._sources)

    @property
    def file_path(self) -> Path | None:
        """Return the configuration file that was read, if any."""
        for source in self._sources:
            if source.path is not None and source.exists:
                return source.path
        return None

    @property
    def logging(self) -> LoggingConfig:
        """Return the logging configuration section."""
        return self._logging

    @property
    def status(self) -> StatusConfiguration:
        """Return the status configuration section."""
        return self._status

    @property
    def discovery(self) -> DiscoveryConfiguration:
        """Return the discovery configuration section."""
        return self._discovery

    @property
    def repos(self) -> tuple[RepositoryReference, ...]:
        """Return configured repositories in configuration order."""
        return self._repos

    @overload
    def get(self, key: str) -> Any: ...

    @overload
    def get(self, key: str, default: T) -> T: ...

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-notation key.

        Examples:
            >>> config.get("status.comparator")
            'text'
            >>> config.get("nonexistent", "fallback")
            'fallback'
        """
        current: Any = self._data
        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of the effective configuration."""
        return copy_value(self._data)

    def to_toml(self) -> str:
        """Render the effective configuration as TOML."""
        return tomli_w.dumps(self.to_dict())
