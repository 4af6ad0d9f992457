"""
Runs HandBrakeCLI for a single file.

The encoder is an opaque external collaborator: its exit status is the only
signal of success. Nothing it prints is interpreted; stdout and stderr are
only captured so they can be reported when the run fails.
"""
import subprocess
from pathlib import Path
from typing import List, Optional

from loguru import logger

from ..config.common import ENCODE_TIMEOUT_SECONDS
from ..config.video import (
    DIAGNOSTIC_FOOTER,
    DIAGNOSTIC_STDERR_HEADER,
    DIAGNOSTIC_STDOUT_HEADER,
    HANDBRAKE_OPTIONS,
)
from ..domain.exceptions import EncodeFailureException
from ..utils.module_checker import Modules
from ..utils.process_utils import as_text, run_cmd


class HandBrakeEncoder:
    """
    Encodes one input file into one output file with the fixed option set.

    Attributes:
        executable (str): Path or name of the HandBrakeCLI executable.
        timeout (Optional[float]): Seconds a single encode may take before it is
            killed and reported as failed. None waits indefinitely.
    """

    def __init__(self, executable: Optional[str] = None, timeout: Optional[float] = ENCODE_TIMEOUT_SECONDS):
        self.executable = executable or Modules.get_handbrake_path()
        self.timeout = timeout

    def build_command(self, input_path: Path, output_path: Path) -> List[str]:
        return [
            self.executable,
            *HANDBRAKE_OPTIONS,
            "-i", str(input_path),
            "-o", str(output_path),
        ]

    def invoke(self, input_path: Path, output_path: Path) -> None:
        """
        Runs the encoder and waits for it to exit.

        On success the output file has been created (or overwritten) by
        HandBrakeCLI itself.

        Raises:
            EncodeFailureException: if the encoder exited with a non-zero status,
                could not be started, or exceeded `timeout`.
        """
        cmd = self.build_command(input_path, output_path)
        try:
            result = run_cmd(cmd, timeout=self.timeout)
        except subprocess.TimeoutExpired as e:
            diagnostic = self.format_diagnostic(as_text(e.stdout), as_text(e.stderr))
            raise EncodeFailureException(
                None, f"HandBrakeCLI timed out after {self.timeout} seconds.\n{diagnostic}".rstrip("\n")
            ) from e
        except OSError as e:
            raise EncodeFailureException(None, f"HandBrakeCLI could not be started: {e}") from e

        if result.returncode != 0:
            raise EncodeFailureException(result.returncode, self.format_diagnostic(result.stdout, result.stderr))
        logger.debug(f"HandBrakeCLI finished for '{input_path.name}' -> '{output_path.name}'.")

    @staticmethod
    def format_diagnostic(stdout: str, stderr: str) -> str:
        """
        Builds the failure text from the captured streams.

        stderr comes first, then stdout; each non-empty stream is framed by a
        header and a footer line. Empty streams are left out entirely, so two
        empty streams give an empty string.
        """
        message = ""
        for header, text in ((DIAGNOSTIC_STDERR_HEADER, stderr), (DIAGNOSTIC_STDOUT_HEADER, stdout)):
            if text:
                if not text.endswith("\n"):
                    text += "\n"
                message += f"{header}\n{text}{DIAGNOSTIC_FOOTER}\n"
        return message
