"""Default configuration values.

These values are used when no other configuration source provides them.
DEFAULT_CONFIG is a plain dict so it can feed deep_merge directly; the merge
functions copy, so the module-level dict is never mutated.
"""

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "logging": {
        "level": "info",
        "format": "json",
        "file": "",
    },
    "status": {
        "fetch": False,
        "comparator": "text",
        "timeout_ms": 0,
        "max_age_days": 30,
    },
    "discovery": {
        "root": "~",
        "cross_filesystems": True,
        "exclude": ["node_modules", ".venv", "__pycache__"],
    },
    "repos": {},
}
