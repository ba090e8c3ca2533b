import pytest

from core.driver import AxisPolicy, ButtonPolicy, DriverPolicy
from core.errors import SettingsError
from settings import Settings


def write(tmp_path, text):
    path = tmp_path / "settings.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_defaults(tmp_path):
    settings = Settings.load_settings(write(tmp_path, "device: retrospy_gc_box\n"))
    assert settings.device == "retrospy_gc_box"
    assert settings.policy == DriverPolicy()
    assert settings.serial.port is None
    assert settings.serial.baud == 115200
    assert settings.layouts == []


def test_full_settings(tmp_path):
    path = write(tmp_path, """
device: pad
policy:
  buttons: frame
  axes: frame
  clamp: true
serial:
  port: /dev/ttyACM0
  baud: 9600
  timeout: 0.5
layouts:
  - id: pad
    buttons: [0, 1, 2]
""")
    settings = Settings.load_settings(path)
    assert settings.policy == DriverPolicy(ButtonPolicy.FRAME, AxisPolicy.FRAME, True)
    assert settings.serial.port == "/dev/ttyACM0"
    assert settings.serial.baud == 9600
    assert settings.serial.timeout == pytest.approx(0.5)
    assert settings.layouts == [{"id": "pad", "buttons": [0, 1, 2]}]


@pytest.mark.parametrize("text", [
    "",
    "policy: {buttons: frame}\n",
    "device: pad\npolicy: {buttons: latch}\n",
    "device: pad\npolicy: {axes: hold}\n",
    "- just\n- a list\n",
    "device: [unclosed\n",
    "device: pad\npolicy: frame\n",
    "device: pad\nserial: /dev/ttyUSB0\n",
    "device: pad\nserial: {baud: fast}\n",
    "device: pad\nserial: {timeout: soon}\n",
    "device: pad\npolicy: {clamp: \"false\"}\n",
    "device: pad\nlayouts: 5\n",
])
def test_rejects(tmp_path, text):
    with pytest.raises(SettingsError):
        Settings.load_settings(write(tmp_path, text))


def test_missing_file(tmp_path):
    with pytest.raises(SettingsError):
        Settings.load_settings(str(tmp_path / "nope.yaml"))
