"""RetroSpy N64 layout

16 button flags followed by the analog stick as two signed bytes.
"""
from core.layout import AxisEncoding, AxisFrame, DeviceLayout

DEVICE_ID = "retrospy_n64"

# A B Z Start Up Down Left Right, two reserved bits, L R C-Up C-Down C-Left C-Right
BUTTON_BITS = (0, 1, 2, 3, 4, 5, 6, 7, 10, 11, 12, 13, 14, 15)

LAYOUT = DeviceLayout(
    DEVICE_ID,
    "RetroSpy Arduino Nintendo 64",
    BUTTON_BITS,
    (
        AxisFrame(16, 8, encoding=AxisEncoding.SIGNED),
        AxisFrame(24, 8, invert=True, encoding=AxisEncoding.SIGNED),
    ),
    axis_base=128,
)
