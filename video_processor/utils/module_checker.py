"""
This module provides the Modules class to locate and verify the external
HandBrakeCLI executable the pipeline depends on.
"""
import shutil
import subprocess
from pathlib import Path

from loguru import logger

from ..config.common import DEFAULT_HANDBRAKE_PATH, HANDBRAKE_EXE_NAME, HANDBRAKE_PATH


class Modules:
    """
    Operations related to the external HandBrakeCLI module.

    The executable is looked up in this order: the `paths.handbrake_cli` entry
    of `config.user.yaml`, the default install location, then the system PATH.
    """

    @staticmethod
    def get_handbrake_path(configured: Path | None = HANDBRAKE_PATH) -> str:
        """
        Determines the HandBrakeCLI executable to use.

        Returns:
            The absolute path of the executable if one was found on disk,
            otherwise the bare executable name so the OS resolves it at launch.
        """
        if configured:
            if configured.is_file():
                logger.debug(f"Using HandBrakeCLI from configured path: '{configured}'")
                return str(configured)
            logger.warning(
                f"`handbrake_cli` is configured as '{configured}', but no file exists there. Falling back."
            )

        if DEFAULT_HANDBRAKE_PATH.is_file():
            return str(DEFAULT_HANDBRAKE_PATH)

        found = shutil.which(HANDBRAKE_EXE_NAME)
        return found or HANDBRAKE_EXE_NAME

    @staticmethod
    def verify_handbrake(executable: str) -> bool:
        """
        Runs `HandBrakeCLI --version` and logs the first line of its output.

        Returns:
            True if the executable ran and exited successfully, False otherwise.
            A failure is logged but never raised, since every file of the batch
            will report the same problem with full detail.
        """
        try:
            result = subprocess.run(
                [executable, "--version"],
                check=True,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=60,
            )
        except subprocess.CalledProcessError as e:
            logger.error(f"HandBrakeCLI version command failed (return code {e.returncode}):\n{e.stderr}")
            return False
        except FileNotFoundError:
            logger.error(
                f"HandBrakeCLI not found at '{executable}'. Install it or set `paths.handbrake_cli` "
                "in 'config.user.yaml'."
            )
            return False
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.error(f"Could not run HandBrakeCLI at '{executable}': {e}")
            return False

        lines = (result.stdout or result.stderr).splitlines()
        logger.info(f"HandBrakeCLI version check successful: {lines[0] if lines else executable}")
        return True
