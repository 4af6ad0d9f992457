"""
On-disk records of a batch run, separate from the console log.

Failures are appended to a plain text file so they can be read by a person;
successes are kept in a YAML list so they can be processed by other tools.
Both are only written when a log directory is given on the command line.
"""

from datetime import datetime
from pathlib import Path
from typing import Dict, List

import yaml
from loguru import logger

from ..config.common import ERROR_LOG_FILE_NAME, SUCCESS_LOG_FILE_NAME


class Log:
    """
    Base class for the file logs: resolves and creates the log directory.
    """

    # Separator line between entries of text logs.
    linesep_marker: str = "=" * 50

    def __init__(self, log_dir: Path):
        self.log_file_path: Path
        self.log_dir: Path = log_dir.resolve()
        self.log_dir.mkdir(parents=True, exist_ok=True)


class ErrorLog(Log):
    """
    Appends human-readable error messages to a text file.
    """

    def __init__(self, error_log_dir: Path, filename: str = ERROR_LOG_FILE_NAME):
        super().__init__(error_log_dir)
        self.log_file_path = self.log_dir / filename

    def write(self, *error_messages: str):
        """
        Appends the given messages, one per line, followed by a separator line.

        A failure to write is reported through the console logger, together with
        the messages themselves so they are not lost.
        """
        if not error_messages:
            return

        content_to_write = "\n".join(error_messages) + "\n" + self.linesep_marker + "\n"
        try:
            # File names are not always valid UTF-8 on POSIX; escape what cannot be encoded.
            with self.log_file_path.open("a", encoding="utf-8", errors="backslashreplace") as f:
                f.write(content_to_write)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to write to error log {self.log_file_path}: {e}")
            logger.error("Original error messages attempted to log:")
            for msg in error_messages:
                logger.error(f"  - {msg}")


class SuccessLog(Log):
    """
    Keeps a YAML list of successfully encoded files.

    Every entry gets an increasing `index`. The whole list is rewritten on each
    write so the file is always a valid YAML document, and entries from earlier
    runs in the same directory are preserved.
    """

    def __init__(self, success_log_dir: Path, filename: str = SUCCESS_LOG_FILE_NAME):
        super().__init__(success_log_dir)
        self.log_file_path = self.log_dir / filename
        self.log_entries: List[Dict] = []

    def load(self) -> List[Dict]:
        if not self.log_file_path.is_file():
            return []
        try:
            with self.log_file_path.open("r", encoding="utf-8") as f:
                loaded_entries = yaml.safe_load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Error reading/parsing success log {self.log_file_path}: {e}. Starting a new log.")
            return []
        if loaded_entries is None:
            return []
        if not isinstance(loaded_entries, list):
            logger.warning(f"Success log {self.log_file_path} contained unexpected data. Starting a new log.")
            return []
        return loaded_entries

    def write(self, source: Path, output: Path):
        self.log_entries = self.load()
        # Hand-edited entries may carry anything as an index; only integers count.
        current_max_index = max(
            (
                entry["index"]
                for entry in self.log_entries
                if isinstance(entry, dict) and isinstance(entry.get("index"), int)
            ),
            default=0,
        )
        self.log_entries.append(
            {
                "index": current_max_index + 1,
                "source": str(source),
                "output": str(output),
                "output_size": output.stat().st_size if output.is_file() else None,
                "finished_at": datetime.now().isoformat(timespec="seconds"),
            }
        )

        try:
            with self.log_file_path.open("w", encoding="utf-8", errors="backslashreplace") as f:
                yaml.dump(
                    self.log_entries,
                    f,
                    default_flow_style=False,
                    sort_keys=False,
                    allow_unicode=True,
                    indent=4,
                    width=220,
                )
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Failed to write to success log {self.log_file_path}: {e}")
