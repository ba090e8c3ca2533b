"""Settings: load the YAML file that selects and parameterizes a driver"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

import yaml

from core.driver import DriverPolicy
from core.errors import SettingsError
from devices.serial_tap import DEFAULT_BAUD

LOG = logging.getLogger("spybridge.settings")


@dataclass
class SerialSettings:
    port: Optional[str] = None
    baud: int = DEFAULT_BAUD
    timeout: float = 0.1


@dataclass
class Settings:
    device: str
    policy: DriverPolicy = field(default_factory=DriverPolicy)
    serial: SerialSettings = field(default_factory=SerialSettings)
    layouts: List[dict] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict):
        if not isinstance(data, dict):
            raise SettingsError("settings must be a mapping")
        device = data.get("device")
        if not device:
            raise SettingsError("settings missing 'device'")

        pol = data.get("policy") or {}
        if not isinstance(pol, dict):
            raise SettingsError(f"'policy' must be a mapping, got {pol!r}")
        try:
            policy = DriverPolicy.from_names(
                buttons=pol.get("buttons", "sticky"),
                axes=pol.get("axes", "skip_zero"),
                clamp=pol.get("clamp", False),
            )
        except ValueError as e:
            raise SettingsError(f"bad policy: {e}") from None

        ser = data.get("serial") or {}
        if not isinstance(ser, dict):
            raise SettingsError(f"'serial' must be a mapping, got {ser!r}")
        try:
            serial_settings = SerialSettings(
                port=ser.get("port"),
                baud=int(ser.get("baud", DEFAULT_BAUD)),
                timeout=float(ser.get("timeout", 0.1)),
            )
        except (TypeError, ValueError) as e:
            raise SettingsError(f"bad serial settings: {e}") from None

        layouts = data.get("layouts") or []
        if not isinstance(layouts, list):
            raise SettingsError(f"'layouts' must be a list, got {layouts!r}")
        return cls(str(device), policy, serial_settings, list(layouts))

    @classmethod
    def load_settings(cls, path: str):
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise SettingsError(f"cannot read settings {path}: {e}") from None
        except yaml.YAMLError as e:
            raise SettingsError(f"invalid YAML in {path}: {e}") from None
        LOG.debug("loaded settings from %s: %s", path, data)
        return cls.from_dict(data)
