"""
Data models for a single batch run.

`SourceSpec` is built once at startup and never mutated. The outcome types
describe what happened to each discovered file; they live only for the
duration of the run and are used for reporting.
"""
import enum
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from ..config.video import DEFAULT_SOURCE_EXTENSIONS, DEFAULT_TARGET_EXTENSION
from .exceptions import InvalidDirectoryException
from .extensions import normalize, suffix_matcher


@dataclass(frozen=True)
class SourceSpec:
    """
    Immutable configuration of one batch run.

    Attributes:
        root_dir (Path): Absolute path of the directory to scan.
        source_extensions (tuple[str, ...]): Extensions of files to transcode.
        target_extension (str): Extension given to the produced files.
        source_pattern (re.Pattern): Case-insensitive suffix matcher derived from
            `source_extensions`, computed once at construction.
    """

    root_dir: Path
    source_extensions: tuple[str, ...] = DEFAULT_SOURCE_EXTENSIONS
    target_extension: str = DEFAULT_TARGET_EXTENSION
    source_pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "source_extensions", tuple(normalize(ext) for ext in self.source_extensions))
        object.__setattr__(self, "target_extension", normalize(self.target_extension))
        object.__setattr__(self, "root_dir", validate_directory(self.root_dir))
        object.__setattr__(self, "source_pattern", suffix_matcher(self.source_extensions))


def validate_directory(path: Path | str) -> Path:
    """
    Resolves `path` to an absolute directory path.

    Raises:
        InvalidDirectoryException: if the path does not exist or is not a directory.
    """
    resolved = Path(path).expanduser().resolve()
    if not resolved.exists():
        raise InvalidDirectoryException(resolved, "does not exist")
    if not resolved.is_dir():
        raise InvalidDirectoryException(resolved, "is not a directory")
    return resolved


@dataclass(frozen=True)
class TranscodeSuccess:
    source: Path
    output: Path


@dataclass(frozen=True)
class TranscodeFailure:
    source: Path
    diagnostic: str


TranscodeOutcome = Union[TranscodeSuccess, TranscodeFailure]


class BatchState(enum.Enum):
    IDLE = "idle"
    DISCOVERING = "discovering"
    NO_FILES = "no_files"
    PROCESSING = "processing"
    DONE = "done"


@dataclass
class BatchResult:
    """Final state of a run and the outcome of every processed file, in order."""

    state: BatchState
    outcomes: list[TranscodeOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> list[TranscodeSuccess]:
        return [o for o in self.outcomes if isinstance(o, TranscodeSuccess)]

    @property
    def failed(self) -> list[TranscodeFailure]:
        return [o for o in self.outcomes if isinstance(o, TranscodeFailure)]
