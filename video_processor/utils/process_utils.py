"""
Helpers for running external command-line processes.
"""

import os
import shlex
import subprocess
from typing import List, Optional, Sequence

from loguru import logger


def display_cmd(cmd_list: Sequence[str]) -> str:
    """Joins a command list into a string that can be pasted into a shell."""
    if os.name == "nt":
        return subprocess.list2cmdline(list(cmd_list))
    return shlex.join(cmd_list)


def as_text(stream) -> str:
    """Returns captured output as text, whatever form subprocess handed it back in."""
    if stream is None:
        return ""
    if isinstance(stream, bytes):
        return stream.decode("utf-8", errors="replace")
    return stream


def run_cmd(
    cmd_list: List[str],
    timeout: Optional[float] = None,
) -> subprocess.CompletedProcess:
    """
    Executes an external command and captures its output.

    This is a wrapper around `subprocess.run` that feeds no standard input,
    captures stdout and stderr as text, and logs the command and its output.

    Args:
        cmd_list: The command to execute as a list of arguments.
        timeout: Seconds to wait before the process is killed. None waits forever.

    Returns:
        The `subprocess.CompletedProcess` of the finished command, whatever its
        exit status.

    Raises:
        ValueError: if `cmd_list` is empty.
        OSError: if the process could not be started (e.g. executable not found).
        subprocess.TimeoutExpired: if `timeout` elapsed; the process has been killed.
    """
    if not cmd_list:
        raise ValueError("run_cmd received an empty command list.")

    # --- Step 1: Log the command in a form that can be pasted into a shell ---
    display_cmd_str = display_cmd(cmd_list)
    logger.debug(f"Executing command: {display_cmd_str}")

    # --- Step 2: Run it to completion ---
    try:
        result = subprocess.run(
            cmd_list,
            stdin=subprocess.DEVNULL,  # Never wait on a prompt.
            capture_output=True,  # Capture stdout and stderr.
            text=True,
            encoding="utf-8",
            errors="replace",  # Encoders may print bytes that are not UTF-8.
            timeout=timeout,  # None waits forever.
            shell=False,
        )
    except FileNotFoundError:
        logger.error(
            f"Command not found: '{cmd_list[0]}'. Ensure it is installed or configure its path in 'config.user.yaml'."
        )
        raise
    except subprocess.TimeoutExpired:
        logger.error(f"Command timed out after {timeout} seconds: {display_cmd_str}")
        raise

    # --- Step 3: Log the output; stderr is only interesting when the command failed ---
    if result.stdout and len(result.stdout) > 500:
        logger.trace(f"Command stdout (truncated): {result.stdout[:500]}...")
    elif result.stdout:
        logger.trace(f"Command stdout: {result.stdout}")

    if result.stderr and result.returncode != 0:
        logger.debug(f"Command stderr (error, rc={result.returncode}): {result.stderr}")
    elif result.stderr:
        logger.trace(f"Command stderr (non-error, rc={result.returncode}): {result.stderr}")

    return result
