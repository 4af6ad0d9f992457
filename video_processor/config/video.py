"""
Configuration settings related to video processing.

The HandBrakeCLI option list is a fixed policy: every file in a batch is
encoded with exactly these options, followed by `-i <input> -o <output>`.
"""

# --- Extension Settings ---
DEFAULT_SOURCE_EXTENSIONS = ("mov", "avi")
DEFAULT_TARGET_EXTENSION = "mp4"

# An extension token is 1 to 50 lowercase letters or digits.
EXTENSION_PATTERN = r"^[a-z0-9]{1,50}$"

# --- Encoder Settings ---
HANDBRAKE_OPTIONS = (
    "--format", "av_mp4",  # mp4 container
    "-O",  # optimize mp4 files for HTTP streaming
    "--encoder", "x264",  # H.264 video
    "--encopts",
    "ref=5:analyse=all:rc-lookahead=60:vbv-maxrate=17500:trellis=2:subme=10:bframes=5"
    ":level=3.1:direct=auto:vbv-bufsize=17500:b-adapt=2:me=umh:merange=24",
    "--quality", "16",
    "--two-pass",
    "--rate", "30",
    "--pfr",
    "--aencoder", "ca_aac",  # AAC audio
    "--crop", "0:0:0:0",  # don't crop
    "--auto-anamorphic",
)

# --- Diagnostic Formatting ---
# Marker lines wrapping the captured encoder streams in failure messages.
DIAGNOSTIC_STDERR_HEADER = "> HandBrakeCLI STDERR " + ">" * 58
DIAGNOSTIC_STDOUT_HEADER = "> HandBrakeCLI STDOUT " + ">" * 58
DIAGNOSTIC_FOOTER = "<" * 80
