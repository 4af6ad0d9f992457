"""
Main entry point for the Video Processor.

Parses the command line, configures logging, checks that HandBrakeCLI can be
started and runs the batch over the requested directory.
"""

import sys
from typing import Optional, Sequence

from loguru import logger

from video_processor.cli import build_source_spec, get_args
from video_processor.config.common import ENCODE_TIMEOUT_SECONDS, LOGGER_FORMAT
from video_processor.domain.exceptions import VideoProcessorException
from video_processor.pipeline import BatchRunner
from video_processor.services.encoder_service import HandBrakeEncoder
from video_processor.services.logging_service import ErrorLog, SuccessLog
from video_processor.utils.module_checker import Modules

_handler_id: Optional[int] = None


def configure_logger(level: str):
    global _handler_id
    if _handler_id is None:
        logger.remove()
    else:
        logger.remove(_handler_id)
    _handler_id = logger.add(sys.stderr, level=level, format=LOGGER_FORMAT)


configure_logger("INFO")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Runs one batch and returns the process exit status.

    The status is 0 once processing has started, whatever happened to the
    individual files, unless `--fail-on-error` was given.
    """
    args = get_args(argv)
    configure_logger("DEBUG" if args.debug else args.log_level)
    logger.debug(f"Parsed arguments: {args}")

    spec = build_source_spec(args)
    logger.info(f"Scanning {spec.root_dir} for: {', '.join(spec.source_extensions)} -> {spec.target_extension}")

    executable = Modules.get_handbrake_path()
    if not args.skip_check:
        Modules.verify_handbrake(executable)
    encoder = HandBrakeEncoder(
        executable, timeout=args.timeout if args.timeout is not None else ENCODE_TIMEOUT_SECONDS
    )

    error_log = ErrorLog(args.log_dir) if args.log_dir else None
    success_log = SuccessLog(args.log_dir) if args.log_dir else None
    runner = BatchRunner(spec, encoder=encoder, error_log=error_log, success_log=success_log)

    try:
        result = runner.run()
    except VideoProcessorException as e:
        logger.error(f"Batch aborted: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted. The file being encoded may be left incomplete.")
        return 130

    logger.success("Video Processor finished.")
    if args.fail_on_error and result.failed:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
