"""Shared fixtures: a loguru capture sink and /bin/sh stand-ins for HandBrakeCLI."""

import os
import stat
from pathlib import Path

import pytest
from loguru import logger

# Succeeds and writes the output file, except for inputs whose file name
# contains "fail", for which it prints "boom" on stderr and exits 3.
ENCODER_STUB = """#!/bin/sh
in=""
out=""
while [ $# -gt 0 ]; do
    case "$1" in
        -i) in="$2"; shift ;;
        -o) out="$2"; shift ;;
    esac
    shift
done
case "${in##*/}" in
    *fail*) echo "boom" >&2; exit 3 ;;
esac
printf 'encoded\\n' > "$out"
"""


def write_script(path: Path, body: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def encoder_stub(tmp_path) -> Path:
    return write_script(tmp_path / "bin" / "HandBrakeCLI", ENCODER_STUB)


@pytest.fixture
def script_factory(tmp_path):
    def _make(body: str, name: str = "HandBrakeCLI") -> Path:
        return write_script(tmp_path / "bin" / name, "#!/bin/sh\n" + body)

    return _make


@pytest.fixture
def video_dir(tmp_path) -> Path:
    directory = tmp_path / "videos"
    directory.mkdir()
    return directory


def make_video(directory: Path, name: str, mtime: int = 1_000_000_000) -> Path:
    path = directory / name
    path.write_bytes(b"raw footage")
    os.utime(path, (mtime, mtime))
    return path


@pytest.fixture
def log_records():
    records = []
    handler_id = logger.add(lambda m: records.append(m.record), level="DEBUG", format="{message}")
    yield records
    logger.remove(handler_id)


def make_undecodable_video(directory: Path, prefix: str) -> Path:
    """Creates a video whose file name is not valid UTF-8, or skips the test."""
    name = os.fsdecode(prefix.encode() + b"\xff.mov")
    try:
        return make_video(directory, name)
    except (OSError, UnicodeEncodeError):
        pytest.skip("filesystem does not accept non-UTF-8 file names")
