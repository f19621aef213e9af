"""Discovery configuration model."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class DiscoveryConfiguration(BaseModel):
    """Discovery section.

    Attributes:
        root: Directory scanned by ``discover`` when none is given.
        cross_filesystems: Descend into directories on other filesystems.
        exclude: Directory names never descended into.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    root: str = "~"
    cross_filesystems: bool = True
    exclude: tuple[str, ...] = ("node_modules", ".venv", "__pycache__")
