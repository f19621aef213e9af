"""Credential context shown in the batch header."""

from gitglance.utils import ScriptConfig, run_script

# ssh-add -l exit codes: 0 lists keys, 1 means the agent holds none
_SSH_ADD_NO_IDENTITIES = 1


def count_ssh_identities(*, timeout_ms: int = 5000) -> int | None:
    """Count identities loaded in the running ssh-agent.

    Returns:
        Number of loaded identities, or None if no agent is reachable.
    """
    result = run_script(ScriptConfig(args=("ssh-add", "-l"), timeout_ms=timeout_ms))
    if not result.success:
        return None
    if result.exit_code == 0:
        return len([line for line in result.stdout.splitlines() if line.strip()])
    if result.exit_code == _SSH_ADD_NO_IDENTITIES:
        return 0
    return None


def describe_credentials(*, timeout_ms: int = 5000) -> str:
    """Summarize the ssh-agent state for the batch header."""
    count = count_ssh_identities(timeout_ms=timeout_ms)
    if count is None:
        return "ssh-agent: not running"
    if count == 0:
        return "ssh-agent: no identities loaded"
    noun = "identity" if count == 1 else "identities"
    return f"ssh-agent: {count} {noun} loaded"
