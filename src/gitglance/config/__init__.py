"""gitglance configuration.

Loading, validation, and typed access to configuration values, plus
rewriting of the ``[repos]`` table.

Example:
    >>> from gitglance.config import Config
    >>> config = Config.load()
    >>> config.status.comparator
    <ComparatorKind.TEXT: 'text'>
"""

from gitglance.exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
    ConfigWriteError,
)

from ._defaults import DEFAULT_CONFIG
from ._discovery import discover_sources, get_user_config_path
from ._load import STRICT_CONFIG_ENV, safe_load_config
from ._loader import (
    ENV_PREFIX,
    copy_value,
    deep_merge,
    parse_env_vars,
    parse_string_value,
    read_toml_file,
    set_nested_key,
)
from ._models import (
    ComparatorKind,
    Config,
    ConfigSource,
    ConfigSourceName,
    DiscoveryConfiguration,
    LogFormat,
    LoggingConfig,
    LogLevel,
    RepositoryReference,
    RepoTag,
    StatusConfiguration,
    parse_repos,
    repos_to_table,
)
from ._validation import (
    ValidationIssue,
    raise_if_validation_errors,
    validate_config,
    validate_source,
)
from ._writer import (
    config_age_days,
    config_modified_at,
    is_config_stale,
    render_repos_config,
    write_repos_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "ENV_PREFIX",
    "STRICT_CONFIG_ENV",
    "ComparatorKind",
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "ConfigSource",
    "ConfigSourceName",
    "ConfigValidationError",
    "ConfigWriteError",
    "DiscoveryConfiguration",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "RepoTag",
    "RepositoryReference",
    "StatusConfiguration",
    "ValidationIssue",
    "config_age_days",
    "config_modified_at",
    "copy_value",
    "deep_merge",
    "discover_sources",
    "get_user_config_path",
    "is_config_stale",
    "parse_env_vars",
    "parse_repos",
    "parse_string_value",
    "raise_if_validation_errors",
    "read_toml_file",
    "render_repos_config",
    "repos_to_table",
    "safe_load_config",
    "set_nested_key",
    "validate_config",
    "validate_source",
    "write_repos_config",
]
