"""Device layout tables

A DeviceLayout describes where one adapter type puts its button flags and
analog fields inside a telemetry line. Layouts are immutable; adding a
device means adding a table, not code.
"""
import enum
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from core.errors import LayoutError


class AxisEncoding(enum.Enum):
    OFFSET_BINARY = "offset_binary"  # unsigned, centred on base
    SIGNED = "signed"  # two's complement, centred on 0


@dataclass(frozen=True)
class AxisFrame:
    offset: int
    width: int
    invert: bool = False
    encoding: AxisEncoding = AxisEncoding.OFFSET_BINARY
    base: Optional[int] = None  # overrides DeviceLayout.axis_base when set

    def __post_init__(self):
        if self.offset < 0:
            raise LayoutError(f"axis offset must be >= 0, got {self.offset}")
        if self.width <= 0:
            raise LayoutError(f"axis width must be > 0, got {self.width}")
        if self.base is not None and self.base <= 0:
            raise LayoutError(f"axis base must be > 0, got {self.base}")

    @property
    def end(self) -> int:
        return self.offset + self.width

    @classmethod
    def from_dict(cls, data: dict):
        if not isinstance(data, dict):
            raise LayoutError(f"axis frame must be a mapping, got {type(data).__name__}")
        try:
            encoding = AxisEncoding(data.get("encoding", AxisEncoding.OFFSET_BINARY.value))
        except ValueError:
            raise LayoutError(f"unknown axis encoding: {data.get('encoding')!r}") from None
        invert = data.get("invert", False)
        if not isinstance(invert, bool):
            raise LayoutError(f"axis invert must be true or false, got {invert!r}")
        try:
            offset = int(data["offset"])
            width = int(data["width"])
            base = int(data["base"]) if data.get("base") is not None else None
        except KeyError as e:
            raise LayoutError(f"axis frame missing key {e}") from None
        except (TypeError, ValueError) as e:
            raise LayoutError(f"axis frame values must be integers: {e}") from None
        return cls(offset, width, invert, encoding, base)


@dataclass(frozen=True)
class DeviceLayout:
    device_id: str
    name: str
    button_positions: Tuple[int, ...] = ()
    axis_frames: Tuple[AxisFrame, ...] = ()
    axis_base: int = 128

    def __post_init__(self):
        # accept lists from callers but store tuples so the table cannot change
        object.__setattr__(self, "button_positions", tuple(self.button_positions))
        object.__setattr__(self, "axis_frames", tuple(self.axis_frames))
        if not self.device_id:
            raise LayoutError("layout needs a device id")
        if self.axis_base <= 0:
            raise LayoutError(f"{self.device_id}: axis base must be > 0, got {self.axis_base}")
        for pos in self.button_positions:
            if pos < 0:
                raise LayoutError(f"{self.device_id}: button bit position must be >= 0, got {pos}")

    @property
    def button_count(self) -> int:
        return len(self.button_positions)

    @property
    def axis_count(self) -> int:
        return len(self.axis_frames)

    @property
    def frame_length(self) -> int:
        """Shortest line that covers every button flag and axis field."""
        ends = [p + 1 for p in self.button_positions] + [f.end for f in self.axis_frames]
        return max(ends, default=0)

    def base_for(self, frame: AxisFrame) -> int:
        return frame.base if frame.base is not None else self.axis_base

    def describe(self) -> str:
        return f"{self.name}. {self.button_count} Buttons, {self.axis_count} Axes"

    @classmethod
    def anchored(cls, device_id: str, name: str, button_positions: Iterable[int],
                 anchors: Sequence[int], field_offset: int, field_width: int,
                 inverted: Optional[Sequence[bool]] = None, axis_base: int = 128,
                 encoding: AxisEncoding = AxisEncoding.OFFSET_BINARY):
        """Build a layout whose axis fields sit a fixed distance after each anchor."""
        inverted = list(inverted) if inverted is not None else [False] * len(anchors)
        if len(inverted) != len(anchors):
            raise LayoutError(
                f"{device_id}: {len(inverted)} invert flags for {len(anchors)} axis anchors")
        frames = tuple(
            AxisFrame(anchor + field_offset, field_width, invert, encoding)
            for anchor, invert in zip(anchors, inverted)
        )
        return cls(device_id, name, tuple(button_positions), frames, axis_base)

    @classmethod
    def from_dict(cls, data: dict):
        """Build a layout from a mapping as loaded from YAML."""
        if not isinstance(data, dict):
            raise LayoutError(f"layout entry must be a mapping, got {type(data).__name__}")
        device_id = data.get("id")
        if not device_id:
            raise LayoutError("layout entry missing 'id'")
        try:
            buttons = tuple(int(p) for p in data.get("buttons", []) or [])
        except (TypeError, ValueError):
            raise LayoutError(f"{device_id}: button positions must be integers") from None
        axes = data.get("axes", []) or []
        if not isinstance(axes, list):
            raise LayoutError(f"{device_id}: axes must be a list")
        frames = tuple(AxisFrame.from_dict(a) for a in axes)
        try:
            axis_base = int(data.get("axis_base", 128))
        except (TypeError, ValueError):
            raise LayoutError(f"{device_id}: axis base must be an integer") from None
        return cls(
            device_id=str(device_id),
            name=str(data.get("name", device_id)),
            button_positions=buttons,
            axis_frames=frames,
            axis_base=axis_base,
        )
