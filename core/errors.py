"""Error taxonomy for spybridge

Only configuration-time problems are errors. Noisy or short telemetry lines
are never raised; the decoder absorbs them.
"""


class SpyBridgeError(Exception):
    """Base class for all spybridge errors."""


class UnknownDeviceError(SpyBridgeError, KeyError):
    """Raised when a device identifier has no registered driver factory."""

    def __init__(self, device_id, known=()):
        self.device_id = device_id
        self.known = tuple(known)
        super().__init__(device_id)

    def __str__(self):
        known = ", ".join(self.known) or "none"
        return f"unknown device '{self.device_id}' (registered: {known})"


class LayoutError(SpyBridgeError, ValueError):
    """Raised when a device layout table is inconsistent."""


class SettingsError(SpyBridgeError):
    """Raised when the settings file is missing or incomplete."""
