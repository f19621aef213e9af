"""Status run configuration model."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from gitglance.config._models._common import ComparatorKind


class StatusConfiguration(BaseModel):
    """Status section.

    Attributes:
        fetch: Fetch from each remote before computing status.
        comparator: Upstream comparator used by the remote analyzer.
        timeout_ms: Timeout per git invocation in milliseconds, 0 for none.
        max_age_days: Warn when the config file is older than this many days,
            0 disables the check.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    fetch: bool = False
    comparator: ComparatorKind = ComparatorKind.TEXT
    timeout_ms: int = Field(default=0, ge=0)
    max_age_days: int = Field(default=30, ge=0)
