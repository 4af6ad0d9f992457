"""
Utilities Package for the Video Processor.

Modules:
    - process_utils.py: Runs external commands with captured output and
      consistent logging.
    - module_checker.py: Locates the HandBrakeCLI executable and verifies that
      it can be started.
"""
