"""Configuration models."""

from gitglance.config._models._common import (
    ComparatorKind,
    ConfigSource,
    ConfigSourceName,
    LogFormat,
    LogLevel,
)
from gitglance.config._models._config import Config
from gitglance.config._models._discovery import DiscoveryConfiguration
from gitglance.config._models._logging import LoggingConfig
from gitglance.config._models._repos import (
    RepositoryReference,
    RepoTag,
    parse_repos,
    repos_to_table,
)
from gitglance.config._models._status import StatusConfiguration

__all__ = [
    "ComparatorKind",
    "Config",
    "ConfigSource",
    "ConfigSourceName",
    "DiscoveryConfiguration",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "RepoTag",
    "RepositoryReference",
    "StatusConfiguration",
    "parse_repos",
    "repos_to_table",
]
