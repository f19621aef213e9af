"""Execution utilities for external commands.

This module provides reusable utilities for executing external commands with
an explicit working directory, optional timeout handling, output capture, and
error management. Commands never inherit a changed process working directory;
every invocation names its own ``cwd``.
"""

import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

# Zero disables the timeout
DEFAULT_TIMEOUT_MS: int = 0

# Maximum output size in bytes kept in log entries
MAX_OUTPUT_BYTES: int = 4096


@dataclass(frozen=True, slots=True)
class ScriptConfig:
    """Configuration for command execution.

    Attributes:
        args: Program and arguments to execute.
        cwd: Working directory for execution.
        env: Additional environment variables to set.
        stdin: Optional stdin data to pipe to the command.
        timeout_ms: Execution timeout in milliseconds (0 disables it).
    """

    args: tuple[str, ...] = ()
    cwd: str | Path | None = None
    env: dict[str, str] = field(default_factory=dict)
    stdin: bytes | None = None
    timeout_ms: int = DEFAULT_TIMEOUT_MS


@dataclass(frozen=True, slots=True)
class ScriptResult:
    """Result from command execution.

    Attributes:
        success: Whether the command was started and ran to completion.
        exit_code: Process exit code, or None if execution failed.
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        error: Error message if execution failed (timeout, not found, etc.).
        timed_out: Whether the command timed out.
        command_not_found: Whether the command was not found.
    """

    success: bool
    exit_code: int | None = None
    stdout: str = ""
    stderr: str = ""
    error: str | None = None
    timed_out: bool = False
    command_not_found: bool = False

    @property
    def ok(self) -> bool:
        """Whether the command ran and exited with status 0."""
        return self.success and self.exit_code == 0


def truncate_output(output: str, max_bytes: int = MAX_OUTPUT_BYTES) -> str:
    """Truncate output to max bytes, preserving valid UTF-8.

    Args:
        output: The string to truncate.
        max_bytes: Maximum size in bytes.

    Returns:
        Truncated string with indicator if truncated.
    """
    if not output:
        return output

    encoded = output.encode("utf-8")
    if len(encoded) <= max_bytes:
        return output

    # Use 'ignore' to skip incomplete multi-byte sequences at the end
    truncated = encoded[:max_bytes].decode("utf-8", errors="ignore")

    return truncated + "\n... [output truncated]"


def run_script(config: ScriptConfig) -> ScriptResult:
    """Execute an external command.

    Handles timeouts, missing commands, unusable working directories, and
    captures stdout/stderr.

    Args:
        config: Script configuration specifying args, env, cwd, timeout, etc.

    Returns:
        ScriptResult with execution outcome.
    """
    if not config.args:
        return ScriptResult(
            success=False,
            error="No command specified",
        )

    env = {**os.environ, **config.env}
    cwd = str(config.cwd) if config.cwd else None
    timeout_seconds = config.timeout_ms / 1000.0 if config.timeout_ms > 0 else None

    try:
        result = subprocess.run(  # noqa: S603
            list(config.args),
            env=env,
            cwd=cwd,
            input=config.stdin,
            capture_output=True,
            timeout=timeout_seconds,
            check=False,
        )
    except subprocess.TimeoutExpired:
        return ScriptResult(
            success=False,
            error=f"Command timed out after {timeout_seconds}s",
            timed_out=True,
        )
    except FileNotFoundError as e:
        # Raised both for a missing executable and for a missing cwd
        return ScriptResult(
            success=False,
            error=str(e),
            command_not_found=cwd is None or Path(cwd).is_dir(),
        )
    except OSError as e:
        return ScriptResult(
            success=False,
            error=str(e),
        )

    return ScriptResult(
        success=True,
        exit_code=result.returncode,
        stdout=result.stdout.decode("utf-8", errors="replace"),
        stderr=result.stderr.decode("utf-8", errors="replace"),
    )
