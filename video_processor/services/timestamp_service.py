"""
Copies file modification times from a source onto its encoded output.
"""
import os
from pathlib import Path

from ..domain.exceptions import IoFailureException


def replicate_timestamps(source: Path, target: Path) -> None:
    """
    Sets both the access and modification time of `target` to the modification
    time of `source`.

    `target` must already exist.

    Raises:
        IoFailureException: if `source` cannot be read or `target` cannot be updated.
    """
    try:
        mtime_ns = source.stat().st_mtime_ns
        os.utime(target, ns=(mtime_ns, mtime_ns))
    except OSError as e:
        raise IoFailureException(f"Could not copy modification time from '{source}' to '{target}': {e}") from e
