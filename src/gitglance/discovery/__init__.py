"""Working copy discovery and comparison with the configuration."""

from gitglance.discovery._diff import DiscoveryDiff, diff_discovery, merge_discovered
from gitglance.discovery._walker import discover

__all__ = [
    "DiscoveryDiff",
    "diff_discovery",
    "discover",
    "merge_discovered",
]
