"""RetroSpy GameCube box layout

The Arduino firmware prints one line per poll: button flags as '0'/'1'
characters near the start of the line, then six 8-bit analog fields
(stick X/Y, C-stick X/Y, L/R triggers) each 15 characters after its anchor.
Both Y axes come out inverted relative to the browser gamepad model.
"""
from core.layout import DeviceLayout

DEVICE_ID = "retrospy_gc_box"

BUTTON_BITS = (2, 3, 4, 5, 6, 8, 9, 10, 11, 12, 13, 14)
AXIS_ANCHORS = (0, 8, 16, 24, 32, 40)
AXIS_FIELD_OFFSET = 15
AXIS_FIELD_WIDTH = 8
AXIS_INVERTED = (False, True, False, True, False, False)
AXIS_BASE = 128

LAYOUT = DeviceLayout.anchored(
    DEVICE_ID,
    "RetroSpy Arduino Nintendo GameCube",
    BUTTON_BITS,
    AXIS_ANCHORS,
    AXIS_FIELD_OFFSET,
    AXIS_FIELD_WIDTH,
    inverted=AXIS_INVERTED,
    axis_base=AXIS_BASE,
)
