import os
from pathlib import Path

import platformdirs

APP_NAME = "gitglance"


def get_log_dir() -> Path:
    """Get the platform-specific directory for gitglance log files."""
    return platformdirs.user_log_path(APP_NAME)


def get_cli_log_file() -> Path:
    """Get the path to the CLI log file.

    Returns:
        Path to the CLI log file (may not exist yet).
    """
    return get_log_dir() / "gitglance.log"


def strip_trailing_separator(path: str) -> str:
    """Strip trailing path separators, keeping a bare root intact.

    Examples:
        >>> strip_trailing_separator("/src/project/")
        '/src/project'
        >>> strip_trailing_separator("/")
        '/'
    """
    stripped = path.rstrip("/" + os.sep)
    return stripped or path[:1]


def expand_repo_path(path: str | Path) -> Path:
    """Expand ``~`` and strip trailing separators from a configured path."""
    return Path(strip_trailing_separator(os.path.expanduser(str(path))))


def abbreviate_home(path: str | Path, home: Path | None = None) -> str:
    """Render a path for display with the home directory shown as ``~``.

    Args:
        path: Path to render.
        home: Home directory override, defaults to ``Path.home()``.

    Returns:
        Display string with the home prefix abbreviated and no trailing
        separator.
    """
    text = strip_trailing_separator(str(path))
    home_text = strip_trailing_separator(str(home if home is not None else Path.home()))
    if home_text in ("", "/"):
        return text
    if text == home_text:
        return "~"
    if text.startswith(home_text + os.sep):
        return "~" + text[len(home_text) :]
    return text
