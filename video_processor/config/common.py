"""
Common configuration settings used throughout the application.

User-specific overrides are read from a 'config.user.yaml' file located at the
project root. This allows pointing the application at a HandBrakeCLI binary
outside the usual locations, or bounding how long a single encode may run,
without touching the source code.
"""
from pathlib import Path

import yaml
from loguru import logger

# --- User-Defined Configuration ---

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
USER_CONFIG_PATH = PROJECT_ROOT / "config.user.yaml"

# Default install location of HandBrakeCLI on macOS/Homebrew and most Linux
# packages. Used when no path is configured and the file exists.
DEFAULT_HANDBRAKE_PATH = Path("/usr/local/bin/HandBrakeCLI")

# Executable name looked up on the system PATH as the last resort.
HANDBRAKE_EXE_NAME = "HandBrakeCLI"


def load_user_config(config_path: Path = USER_CONFIG_PATH) -> dict:
    """
    Reads the user configuration file and returns its content as a dictionary.

    A missing file is normal and yields an empty dictionary. A file that cannot
    be read or parsed is reported as a warning and also yields an empty
    dictionary, so the application always falls back to its defaults.
    """
    if not config_path.is_file():
        logger.debug(f"User config '{config_path}' not found. Using defaults.")
        return {}
    try:
        with config_path.open("r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not load or parse '{config_path}': {e}")
        return {}
    if not isinstance(user_config, dict):
        logger.warning(f"User config '{config_path}' is not a mapping. Ignoring it.")
        return {}
    return user_config


def configured_handbrake_path(user_config: dict) -> Path | None:
    paths_config = user_config.get("paths") or {}
    handbrake_str = paths_config.get("handbrake_cli")
    return Path(handbrake_str) if handbrake_str else None


def configured_timeout(user_config: dict) -> float | None:
    encoding_config = user_config.get("encoding") or {}
    timeout = encoding_config.get("timeout_seconds")
    if timeout is None:
        return None
    try:
        timeout = float(timeout)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring invalid encoding.timeout_seconds value: {timeout!r}")
        return None
    return timeout if timeout > 0 else None


_user_config = load_user_config()

# Path to the HandBrakeCLI executable from 'config.user.yaml', or None.
HANDBRAKE_PATH: Path | None = configured_handbrake_path(_user_config)

# Upper bound in seconds for a single encoder run, or None to wait forever.
ENCODE_TIMEOUT_SECONDS: float | None = configured_timeout(_user_config)


# --- Logging Configuration ---

# The format string for the Loguru logger.
LOGGER_FORMAT = (
    "<green>{time:MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR")

# File names used when a log directory is given on the command line.
ERROR_LOG_FILE_NAME = "error.txt"
SUCCESS_LOG_FILE_NAME = "success_log.yaml"
