"""
The batch pipeline of the Video Processor.

`BatchRunner` discovers the files of one directory and takes each of them
through output naming, encoding and timestamp replication, one at a time.
"""
from .batch_pipeline import NO_FILES_MESSAGE, BatchRunner

__all__ = ["BatchRunner", "NO_FILES_MESSAGE"]
