"""
External command execution with a bounded deadline.

Every probe goes through run_command(); a timeout, a missing binary or a
non-zero exit are all reported as ok=False rather than raised.
"""

from __future__ import annotations
import shutil
import subprocess
import time
from typing import Any, Dict, List, Optional
import logging

logger = logging.getLogger('powerstat.runner')

DEFAULT_TIMEOUT = 2.0


def command_exists(name: str) -> bool:
    """Check if an executable is on PATH."""
    return shutil.which(name) is not None


def run_command(command: List[str], timeout: Optional[float] = None) -> Dict[str, Any]:
    """
    Run a command and capture its output.

    Args:
        command: Command and arguments as list
        timeout: Deadline in seconds (default: DEFAULT_TIMEOUT)

    Returns:
        Dict with keys: ok (bool), returncode, stdout (trimmed), stderr, error
    """
    if timeout is None:
        timeout = DEFAULT_TIMEOUT

    started = time.monotonic()
    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout
        )
    except subprocess.TimeoutExpired:
        logger.debug(
            f"Command timed out after {timeout}s: {command[0]}",
            extra={"command": command, "error_code": "timeout"}
        )
        return {'ok': False, 'returncode': None, 'stdout': '', 'stderr': '', 'error': 'timeout'}
    except (FileNotFoundError, PermissionError) as e:
        logger.debug(
            f"Command not runnable: {command[0]}: {e}",
            extra={"command": command, "error_code": "not_found"}
        )
        return {'ok': False, 'returncode': None, 'stdout': '', 'stderr': '', 'error': str(e)}
    except Exception as e:
        logger.debug(
            f"Command failed: {command[0]}: {e}",
            extra={"command": command, "error_code": "exec_failed"}
        )
        return {'ok': False, 'returncode': None, 'stdout': '', 'stderr': '', 'error': str(e)}

    duration_ms = round((time.monotonic() - started) * 1000, 1)
    ok = result.returncode == 0
    if not ok:
        logger.debug(
            f"Command exited with {result.returncode}: {command[0]}",
            extra={"command": command, "duration_ms": duration_ms, "error_code": "exit_status"}
        )

    return {
        'ok': ok,
        'returncode': result.returncode,
        'stdout': result.stdout.strip(),
        'stderr': result.stderr,
        'error': None if ok else f"exit status {result.returncode}",
        'duration_ms': duration_ms,
    }
