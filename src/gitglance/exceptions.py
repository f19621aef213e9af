"""gitglance exceptions."""

from pathlib import Path
from typing import Any


class GitGlanceError(Exception):
    """Base exception for gitglance errors."""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(GitGlanceError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source


class ConfigWriteError(ConfigError):
    """Raised when a generated configuration cannot be written.

    Attributes:
        path: The configuration file that could not be written.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        """Initialize with error message and path context.

        Args:
            message: Human-readable error message.
            path: The configuration file that could not be written.
        """
        super().__init__(message)
        self.path: Path | None = path


# =============================================================================
# Repository Exceptions
# =============================================================================


class RepositoryError(GitGlanceError):
    """Base exception for per-repository errors."""


class InaccessiblePathError(RepositoryError):
    """Raised when a configured path is not an accessible directory.

    Attributes:
        path: The path that could not be entered.
    """

    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        """Initialize with error message and path context.

        Args:
            message: Human-readable error message.
            path: The path that could not be entered.
        """
        super().__init__(message)
        self.path: Path | str | None = path


class GitCommandError(RepositoryError):
    """Raised when a checked git invocation fails.

    Attributes:
        git_args: The git arguments that were run.
        exit_code: Process exit code, or None if git could not be started.
        stderr: Standard error captured from git.
    """

    def __init__(
        self,
        message: str,
        *,
        git_args: tuple[str, ...] = (),
        exit_code: int | None = None,
        stderr: str = "",
    ) -> None:
        """Initialize with error message and command context.

        Args:
            message: Human-readable error message.
            git_args: The git arguments that were run.
            exit_code: Process exit code, or None if git could not be started.
            stderr: Standard error captured from git.
        """
        super().__init__(message)
        self.git_args: tuple[str, ...] = git_args
        self.exit_code: int | None = exit_code
        self.stderr: str = stderr
