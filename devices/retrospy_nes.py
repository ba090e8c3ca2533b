"""RetroSpy NES layout: A B Select Start Up Down Left Right, no analog."""
from core.layout import DeviceLayout

DEVICE_ID = "retrospy_nes"

LAYOUT = DeviceLayout(DEVICE_ID, "RetroSpy Arduino NES", tuple(range(8)))
