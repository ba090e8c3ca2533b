import logging

import app


def write_settings(tmp_path, device="retrospy_gc_box", extra=""):
    path = tmp_path / "settings.yaml"
    path.write_text(f"device: {device}\n{extra}", encoding="utf-8")
    return str(path)


def test_list_devices(tmp_path, capsys):
    extra = "layouts:\n  - id: custom_pad\n    buttons: [0]\n"
    assert app.main(["--settings", write_settings(tmp_path, extra=extra), "--list-devices"]) == 0
    out = capsys.readouterr().out
    assert "retrospy_gc_box: RetroSpy Arduino Nintendo GameCube. 12 Buttons, 6 Axes" in out
    assert "custom_pad: custom_pad. 1 Buttons, 0 Axes" in out


def test_replay_run(tmp_path, caplog, make_gc_line):
    capture = tmp_path / "capture.txt"
    capture.write_text(make_gc_line(pressed=(0, 1)) + "\n")
    with caplog.at_level(logging.INFO, logger="spybridge"):
        code = app.main(["--settings", write_settings(tmp_path), "--replay", str(capture)])
    assert code == 0
    assert "buttons=[0, 1]" in caplog.text


def test_unknown_device_exits_with_error(tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger="spybridge"):
        code = app.main(["--settings", write_settings(tmp_path, device="does-not-exist"), "--replay", "x"])
    assert code == 2
    assert "does-not-exist" in caplog.text


def test_device_override(tmp_path):
    capture = tmp_path / "capture.txt"
    capture.write_text("11111111\n")
    code = app.main(["--settings", write_settings(tmp_path, device="does-not-exist"),
                     "--device", "retrospy_nes", "--replay", str(capture)])
    assert code == 0


def test_missing_serial_port(tmp_path):
    assert app.main(["--settings", write_settings(tmp_path)]) == 2


def test_settings_required():
    assert app.main([]) == 2


def test_missing_replay_file(tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger="spybridge"):
        code = app.main(["--settings", write_settings(tmp_path), "--replay", str(tmp_path / "nope.txt")])
    assert code == 2
    assert "nope.txt" in caplog.text


def test_malformed_settings_exit_with_error(tmp_path):
    bad = [
        "policy: frame\n",
        "serial: {baud: fast}\n",
        "layouts:\n  - id: pad\n    axes:\n      - {offset: abc, width: 8}\n",
    ]
    for extra in bad:
        assert app.main(["--settings", write_settings(tmp_path, extra=extra), "--list-devices"]) == 2
