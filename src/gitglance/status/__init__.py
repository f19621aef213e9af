"""Repository status inference.

Given a directory, decide whether it is a git working copy and compute a
compact status signature: uncommitted line counts plus flags describing the
relationship to the upstream branch.
"""

from gitglance.status._composer import collect_signature, compose_status, refresh_remote
from gitglance.status._credentials import count_ssh_identities, describe_credentials
from gitglance.status._local import collect_local_changes, local_status, parse_numstat
from gitglance.status._models import (
    LocalChangeStats,
    RemoteFlag,
    RemoteFlags,
    StatusSignature,
    UpstreamComparison,
)
from gitglance.status._detect import is_accessible_dir, is_working_copy
from gitglance.status._remote import (
    NO_UPSTREAM,
    ComparatorKind,
    StructuredComparator,
    TextPatternComparator,
    UpstreamComparator,
    collect_remote_flags,
    find_upstream_line,
    get_comparator,
    remote_status,
)
from gitglance.status._runner import (
    BatchReport,
    render_legend,
    render_signature,
    run_all,
    run_batch,
    select_checked,
)

__all__ = [
    "NO_UPSTREAM",
    "BatchReport",
    "ComparatorKind",
    "LocalChangeStats",
    "RemoteFlag",
    "RemoteFlags",
    "StatusSignature",
    "StructuredComparator",
    "TextPatternComparator",
    "UpstreamComparator",
    "UpstreamComparison",
    "collect_local_changes",
    "collect_remote_flags",
    "collect_signature",
    "compose_status",
    "count_ssh_identities",
    "describe_credentials",
    "find_upstream_line",
    "get_comparator",
    "is_accessible_dir",
    "is_working_copy",
    "local_status",
    "parse_numstat",
    "refresh_remote",
    "remote_status",
    "render_legend",
    "render_signature",
    "run_all",
    "run_batch",
    "select_checked",
]
