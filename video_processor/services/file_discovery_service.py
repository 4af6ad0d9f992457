"""
Discovers the source files of a batch and names their outputs.

Discovery is not recursive: only regular files directly inside the scanned
directory are considered, and a subdirectory is skipped even when its name
carries a source extension.
"""

import re
from pathlib import Path
from typing import List

from loguru import logger

from ..domain.exceptions import IoFailureException


def discover_files(directory: Path, source_pattern: re.Pattern) -> List[Path]:
    """
    Lists the regular files in `directory` whose name matches `source_pattern`.

    Files are returned sorted by path so the processing order and the logs are
    the same from one run to the next.

    Args:
        directory: The directory to scan. Its subdirectories are not entered.
        source_pattern: Case-insensitive suffix matcher built from the source
            extensions (see `domain.extensions.suffix_matcher`).

    Returns:
        The matching files; an empty list if there are none.

    Raises:
        IoFailureException: if the directory cannot be listed.
    """
    try:
        children = list(directory.iterdir())
    except OSError as e:
        raise IoFailureException(f"Could not list directory '{directory}': {e}") from e

    files = sorted(
        child for child in children if source_pattern.search(child.name) and child.is_file()
    )
    logger.debug(f"Discovered {len(files)} of {len(children)} entries in '{directory}'.")
    return files


def resolve_output_path(input_path: Path, target_extension: str, source_pattern: re.Pattern) -> Path:
    """
    Derives the output path for `input_path`.

    The output sits next to the input and keeps its base name, with the matched
    source suffix replaced by `.<target_extension>`. No filesystem access takes
    place; an existing file at the returned path will be overwritten by the
    encoder. For example "/x/a.MOV" with target "mp4" gives "/x/a.mp4".
    """
    match = source_pattern.search(input_path.name)
    stem = input_path.name[: match.start()] if match else input_path.name
    return input_path.parent / f"{stem}.{target_extension}"
