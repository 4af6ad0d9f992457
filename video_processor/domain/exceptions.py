"""
Defines custom exception types for the Video Processor.

All custom exceptions inherit from the base `VideoProcessorException`. They fall
into two families:

- `ConfigurationException`: raised while the run configuration is being built.
  These are fatal; no file is processed.
- `ProcessingException`: raised while a single file is being processed. The
  batch pipeline turns these into a failed outcome for that file and moves on
  to the next one.
"""
from pathlib import Path


class VideoProcessorException(Exception):
    """Base class for all custom exceptions in the Video Processor."""

    pass


# --- Configuration Exceptions ---
class ConfigurationException(VideoProcessorException):
    """Base class for errors in the startup configuration."""

    pass


class InvalidExtensionException(ConfigurationException):
    """
    Raised when a file extension token fails validation.

    A valid token is 1 to 50 lowercase letters or digits after surrounding
    whitespace has been trimmed and the text lower-cased.
    """

    def __init__(self, token: str):
        self.token = token
        super().__init__(
            f"Invalid file extension {token!r}: file extensions must contain only "
            "lowercase letters and numbers."
        )


class InvalidDirectoryException(ConfigurationException):
    """Raised when the directory to scan does not exist or is not a directory."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Invalid directory '{path}': {reason}")


# --- Processing Exceptions ---
class ProcessingException(VideoProcessorException):
    """Base class for errors confined to a single file of the batch."""

    pass


class EncodeFailureException(ProcessingException):
    """
    Raised when the external encoder did not finish with exit status 0.

    `diagnostic` holds the labeled stderr/stdout blocks captured from the
    encoder. It may be empty when the encoder wrote nothing.
    """

    def __init__(self, returncode: int | None, diagnostic: str):
        self.returncode = returncode
        self.diagnostic = diagnostic
        message = diagnostic
        if returncode is not None:
            message = f"HandBrakeCLI exited with status {returncode}.\n{diagnostic}".rstrip("\n")
        super().__init__(message)


class IoFailureException(ProcessingException):
    """Raised when a filesystem operation on one file of the batch fails."""

    pass
