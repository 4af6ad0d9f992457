"""
Services Package for the Video Processor.

Each service performs one step of the per-file sequence and knows nothing
about the batch around it:

- **File Discovery (`discover_files`, `resolve_output_path`):** lists the
  matching files directly inside the scanned directory and derives where each
  one's output goes.
- **Encoder (`HandBrakeEncoder`):** runs HandBrakeCLI for one input/output pair
  and turns a non-zero exit status into an `EncodeFailureException`.
- **Timestamps (`replicate_timestamps`):** copies the source's modification
  time onto the output.
- **Logging (`ErrorLog`, `SuccessLog`):** optional on-disk records of failures
  (plain text) and successes (YAML), separate from the console log.

The `BatchRunner` in `video_processor.pipeline` orchestrates them.
"""
