"""Device driver: layout table + canonical state

One DeviceDriver per physical adapter. `read` folds a telemetry line into the
driver's private state; consumers only ever see `snapshot()` copies.
"""
import enum
import logging
from dataclasses import dataclass

from core.decoder import decode_button, decode_frame_axis
from core.layout import DeviceLayout
from core.state import PRESSED, RELEASED, CanonicalGamepadState, GamepadBuffer

LOG = logging.getLogger("spybridge.driver")


class ButtonPolicy(enum.Enum):
    STICKY = "sticky"  # a frame only asserts; reset() releases
    FRAME = "frame"  # the frame is authoritative; a cleared bit releases


class AxisPolicy(enum.Enum):
    SKIP_ZERO = "skip_zero"  # a decoded 0.0 keeps the previous value
    FRAME = "frame"  # every decoded value is written, 0.0 included


@dataclass(frozen=True)
class DriverPolicy:
    """How a frame updates the canonical state.

    The defaults reproduce the RetroSpy box behaviour: buttons latch until
    reset and a neutral reading does not re-centre an axis.
    """
    buttons: ButtonPolicy = ButtonPolicy.STICKY
    axes: AxisPolicy = AxisPolicy.SKIP_ZERO
    clamp: bool = False

    @classmethod
    def from_names(cls, buttons="sticky", axes="skip_zero", clamp=False):
        if not isinstance(clamp, bool):
            raise ValueError(f"clamp must be true or false, got {clamp!r}")
        return cls(ButtonPolicy(buttons), AxisPolicy(axes), clamp)


class DeviceDriver:
    def __init__(self, layout: DeviceLayout, policy: DriverPolicy = None):
        self.layout = layout
        self.policy = policy or DriverPolicy()
        self._info = layout.describe()
        self._state = GamepadBuffer()
        self.reset()

    @property
    def device_id(self) -> str:
        return self.layout.device_id

    def reset(self):
        """Return every axis to 0.0 and release every button."""
        self._state = GamepadBuffer(
            axes=[0.0] * self.layout.axis_count,
            buttons=[RELEASED] * self.layout.button_count,
        )

    def read(self, line: str):
        """Fold one telemetry line into the current state. Never raises on line content."""
        state = self._state
        sticky = self.policy.buttons is ButtonPolicy.STICKY
        for i, pos in enumerate(self.layout.button_positions):
            if decode_button(line, pos):
                state.buttons[i] = PRESSED
            elif not sticky:
                state.buttons[i] = RELEASED

        skip_zero = self.policy.axes is AxisPolicy.SKIP_ZERO
        for i, frame in enumerate(self.layout.axis_frames):
            value = decode_frame_axis(line, frame, self.layout.base_for(frame))
            if value == 0.0 and skip_zero:
                continue
            if self.policy.clamp:
                value = max(-1.0, min(1.0, value))
            state.axes[i] = value
        LOG.debug("%s read %r -> axes=%s", self.device_id, line, state.axes)

    def snapshot(self) -> CanonicalGamepadState:
        return self._state.freeze(self.device_id)

    def describe(self) -> str:
        return self._info

    def __repr__(self):
        return f"DeviceDriver({self.device_id!r}, policy={self.policy})"
