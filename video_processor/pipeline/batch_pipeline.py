"""
The batch pipeline: one directory, one file at a time.

For every discovered file the output path is derived, HandBrakeCLI is run and
the source modification time is copied onto the output. Each file ends in a
`TranscodeSuccess` or a `TranscodeFailure`; a failure never stops the loop and
nothing is cleaned up after it.
"""
from pathlib import Path
from typing import Optional

from loguru import logger

from ..domain.exceptions import ProcessingException
from ..domain.models import (
    BatchResult,
    BatchState,
    SourceSpec,
    TranscodeFailure,
    TranscodeOutcome,
    TranscodeSuccess,
)
from ..services.encoder_service import HandBrakeEncoder
from ..services.file_discovery_service import discover_files, resolve_output_path
from ..services.logging_service import ErrorLog, SuccessLog
from ..services.timestamp_service import replicate_timestamps

NO_FILES_MESSAGE = "No files found in dir with the source extension(s)."


class BatchRunner:
    """
    Processes every matching file of `spec.root_dir`, sequentially.

    States move Idle -> Discovering -> (NoFiles | Processing) -> Done. A failure
    on one file is logged and the loop continues with the next one; nothing is
    rolled back and partially written outputs are left in place.
    """

    def __init__(
        self,
        spec: SourceSpec,
        encoder: Optional[HandBrakeEncoder] = None,
        error_log: Optional[ErrorLog] = None,
        success_log: Optional[SuccessLog] = None,
    ):
        self.spec = spec
        self.encoder = encoder or HandBrakeEncoder()
        self.error_log = error_log
        self.success_log = success_log
        self.state = BatchState.IDLE

    def run(self) -> BatchResult:
        # --- Step 1: Discover the files to process ---
        self.state = BatchState.DISCOVERING
        paths = discover_files(self.spec.root_dir, self.spec.source_pattern)

        if not paths:
            self.state = BatchState.NO_FILES
            # A warning, so it is still shown with --log-level WARNING.
            logger.warning(NO_FILES_MESSAGE)
            return BatchResult(self.state)

        # --- Step 2: Process each file, in discovery order ---
        self.state = BatchState.PROCESSING
        result = BatchResult(self.state)
        num_paths = len(paths)
        for i, in_path in enumerate(paths, start=1):
            logger.info(f"[{i}/{num_paths}] Processing {in_path}")
            outcome = self.process_single_file(in_path)
            self._report(outcome)
            result.outcomes.append(outcome)

        # --- Step 3: Summarize ---
        self.state = BatchState.DONE
        result.state = self.state
        logger.info(
            f"Finished processing {num_paths} file(s): "
            f"{len(result.succeeded)} succeeded, {len(result.failed)} failed."
        )
        return result

    def process_single_file(self, in_path: Path) -> TranscodeOutcome:
        try:
            out_path = resolve_output_path(in_path, self.spec.target_extension, self.spec.source_pattern)
            self.encoder.invoke(in_path, out_path)
            replicate_timestamps(in_path, out_path)
        except ProcessingException as e:
            return TranscodeFailure(in_path, str(e))
        return TranscodeSuccess(in_path, out_path)

    def _report(self, outcome: TranscodeOutcome):
        """Logs an outcome and records it in the file logs, if any. Never raises for I/O problems."""
        match outcome:
            case TranscodeSuccess(source=source, output=output):
                logger.success(f"Encoded {source.name} -> {output}")
                if self.success_log:
                    self.success_log.write(source, output)
            case TranscodeFailure(source=source, diagnostic=diagnostic):
                message = f"An error occurred while processing {source}. No cleanup efforts were made."
                logger.warning(f"{message}\n{diagnostic}")
                if self.error_log:
                    self.error_log.write(message, diagnostic)
