from video_processor.utils import module_checker
from video_processor.utils.module_checker import Modules


def test_get_handbrake_path_prefers_configured_file(tmp_path):
    configured = tmp_path / "HandBrakeCLI"
    configured.write_text("")
    assert Modules.get_handbrake_path(configured) == str(configured)


def test_get_handbrake_path_falls_back_to_path_lookup(tmp_path, monkeypatch, log_messages):
    monkeypatch.setattr(module_checker, "DEFAULT_HANDBRAKE_PATH", tmp_path / "missing-default")
    monkeypatch.setattr(module_checker.shutil, "which", lambda name: f"/usr/bin/{name}")

    assert Modules.get_handbrake_path(tmp_path / "missing-configured") == "/usr/bin/HandBrakeCLI"
    assert any("Falling back" in m for m in log_messages)


def test_get_handbrake_path_bare_name_when_nothing_found(tmp_path, monkeypatch):
    monkeypatch.setattr(module_checker, "DEFAULT_HANDBRAKE_PATH", tmp_path / "missing-default")
    monkeypatch.setattr(module_checker.shutil, "which", lambda name: None)

    assert Modules.get_handbrake_path(None) == "HandBrakeCLI"


def test_verify_handbrake_success(script_factory, log_messages):
    stub = script_factory('echo "HandBrake 1.7.3"\n')
    assert Modules.verify_handbrake(str(stub)) is True
    assert any("HandBrake 1.7.3" in m for m in log_messages)


def test_verify_handbrake_non_zero_exit(script_factory):
    stub = script_factory('echo "bad option" >&2\nexit 1\n')
    assert Modules.verify_handbrake(str(stub)) is False


def test_verify_handbrake_missing_executable(tmp_path, log_messages):
    assert Modules.verify_handbrake(str(tmp_path / "nothing-here")) is False
    assert any("not found" in m for m in log_messages)
