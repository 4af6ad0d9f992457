from pathlib import Path

import pytest

from video_processor.config.video import (
    DIAGNOSTIC_FOOTER,
    DIAGNOSTIC_STDERR_HEADER,
    DIAGNOSTIC_STDOUT_HEADER,
)
from video_processor.domain.exceptions import EncodeFailureException
from video_processor.services.encoder_service import HandBrakeEncoder

EXPECTED_OPTIONS = [
    "--format", "av_mp4",
    "-O",
    "--encoder", "x264",
    "--encopts",
    "ref=5:analyse=all:rc-lookahead=60:vbv-maxrate=17500:trellis=2:subme=10:bframes=5:level=3.1"
    ":direct=auto:vbv-bufsize=17500:b-adapt=2:me=umh:merange=24",
    "--quality", "16",
    "--two-pass",
    "--rate", "30",
    "--pfr",
    "--aencoder", "ca_aac",
    "--crop", "0:0:0:0",
    "--auto-anamorphic",
]


def test_build_command_order():
    encoder = HandBrakeEncoder("/opt/HandBrakeCLI")
    cmd = encoder.build_command(Path("/v/in.mov"), Path("/v/in.mp4"))
    assert cmd == ["/opt/HandBrakeCLI", *EXPECTED_OPTIONS, "-i", "/v/in.mov", "-o", "/v/in.mp4"]


def test_invoke_passes_arguments_to_encoder(script_factory, tmp_path):
    args_file = tmp_path / "args.txt"
    stub = script_factory(f'printf "%s\\n" "$@" > "{args_file}"\n')

    HandBrakeEncoder(str(stub)).invoke(Path("/v/a b.mov"), Path("/v/a b.mp4"))

    assert args_file.read_text().splitlines() == [*EXPECTED_OPTIONS, "-i", "/v/a b.mov", "-o", "/v/a b.mp4"]


def test_invoke_success_creates_output(encoder_stub, tmp_path):
    source = tmp_path / "clip.mov"
    source.write_text("raw")
    output = tmp_path / "clip.mp4"

    HandBrakeEncoder(str(encoder_stub)).invoke(source, output)

    assert output.read_text() == "encoded\n"


def test_invoke_feeds_no_stdin(script_factory, tmp_path):
    stub = script_factory("cat > /dev/null\n")
    HandBrakeEncoder(str(stub), timeout=10).invoke(tmp_path / "a.mov", tmp_path / "a.mp4")


def test_invoke_failure_reports_both_streams(script_factory, tmp_path):
    stub = script_factory('echo "progress 50%"\necho "boom" >&2\nexit 2\n')

    with pytest.raises(EncodeFailureException) as exc_info:
        HandBrakeEncoder(str(stub)).invoke(tmp_path / "a.mov", tmp_path / "a.mp4")

    error = exc_info.value
    assert error.returncode == 2
    assert error.diagnostic == (
        f"{DIAGNOSTIC_STDERR_HEADER}\nboom\n{DIAGNOSTIC_FOOTER}\n"
        f"{DIAGNOSTIC_STDOUT_HEADER}\nprogress 50%\n{DIAGNOSTIC_FOOTER}\n"
    )
    assert "exited with status 2" in str(error)


def test_invoke_failure_with_silent_encoder(script_factory, tmp_path):
    stub = script_factory("exit 1\n")

    with pytest.raises(EncodeFailureException) as exc_info:
        HandBrakeEncoder(str(stub)).invoke(tmp_path / "a.mov", tmp_path / "a.mp4")

    assert exc_info.value.returncode == 1
    assert exc_info.value.diagnostic == ""


def test_invoke_missing_executable(tmp_path):
    with pytest.raises(EncodeFailureException, match="could not be started"):
        HandBrakeEncoder(str(tmp_path / "no-such-binary")).invoke(tmp_path / "a.mov", tmp_path / "a.mp4")


def test_invoke_timeout_kills_encoder(script_factory, tmp_path):
    stub = script_factory("exec sleep 30\n")

    with pytest.raises(EncodeFailureException, match="timed out"):
        HandBrakeEncoder(str(stub), timeout=0.5).invoke(tmp_path / "a.mov", tmp_path / "a.mp4")


def test_format_diagnostic_skips_empty_streams():
    assert HandBrakeEncoder.format_diagnostic("", "") == ""
    only_stdout = HandBrakeEncoder.format_diagnostic("done\n", "")
    assert only_stdout == f"{DIAGNOSTIC_STDOUT_HEADER}\ndone\n{DIAGNOSTIC_FOOTER}\n"
    assert DIAGNOSTIC_STDERR_HEADER not in only_stdout
