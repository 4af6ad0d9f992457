"""
Core domain models of the Video Processor.

Modules:
    exceptions.py: The error taxonomy. Configuration errors abort a run before
                   it starts; processing errors are isolated to one file.
    extensions.py: Validation and normalization of file-extension tokens and
                   the case-insensitive suffix matcher built from them.
    models.py: The immutable `SourceSpec` run configuration, the per-file
               outcome types and the batch state enumeration.
"""
