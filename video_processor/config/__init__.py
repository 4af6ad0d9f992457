"""
Configuration Package for the Video Processor.

Static settings live here so the pipeline and services never hardcode paths,
option lists or log formats:

- `common`: logger format, user configuration (`config.user.yaml`), encoder
  binary location, log file names.
- `video`: default source/target extensions and the fixed HandBrakeCLI
  option set applied to every file.
"""
