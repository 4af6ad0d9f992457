"""
Video Processor: a directory-scoped batch driver for HandBrakeCLI.

The package is laid out in layers:

- `config`: static settings, the fixed encoder option list and the optional
  `config.user.yaml` overrides.
- `domain`: extension tokens, the immutable run configuration, outcome types
  and the exception hierarchy.
- `services`: discovery, output naming, the encoder invocation and timestamp
  replication.
- `pipeline`: the `BatchRunner` that ties the services together.
- `utils`: subprocess helpers and the encoder availability check.
"""

__version__ = "1.0.0"
