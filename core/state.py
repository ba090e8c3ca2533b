"""State models and lightweight DTOs"""
from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class ButtonState:
    pressed: bool = False

    @property
    def value(self) -> int:
        # value is derived so it can never disagree with pressed
        return 1 if self.pressed else 0

    def to_dict(self) -> Dict[str, object]:
        return {"pressed": self.pressed, "value": self.value}


RELEASED = ButtonState(False)
PRESSED = ButtonState(True)


@dataclass(frozen=True)
class CanonicalGamepadState:
    """Read-only snapshot of a gamepad, independent of the device that produced it.

    Axes are floats (nominally -1..1), buttons are ButtonState values. Both are
    tuples so a consumer holding a snapshot cannot reach back into the driver.
    """
    device: str
    axes: Tuple[float, ...] = ()
    buttons: Tuple[ButtonState, ...] = ()

    def pressed(self) -> List[int]:
        """Indices of buttons currently pressed."""
        return [i for i, b in enumerate(self.buttons) if b.pressed]

    def to_dict(self) -> dict:
        return {
            "device": self.device,
            "axes": list(self.axes),
            "buttons": [b.to_dict() for b in self.buttons],
        }


@dataclass
class GamepadBuffer:
    """Mutable working copy owned by exactly one DeviceDriver."""
    axes: List[float] = field(default_factory=list)
    buttons: List[ButtonState] = field(default_factory=list)

    def freeze(self, device: str) -> CanonicalGamepadState:
        return CanonicalGamepadState(device, tuple(self.axes), tuple(self.buttons))
