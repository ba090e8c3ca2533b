import pytest

from devices import retrospy_gc


def gc_line(pressed=(), axes=None):
    """Build a full RetroSpy GameCube frame.

    `pressed` are button indices, `axes` maps axis index -> raw 8-bit value.
    Axes not given are sent as the neutral 128.
    """
    axes = axes or {}
    chars = ["0"] * retrospy_gc.LAYOUT.frame_length
    for idx in pressed:
        chars[retrospy_gc.BUTTON_BITS[idx]] = "1"
    for idx, frame in enumerate(retrospy_gc.LAYOUT.axis_frames):
        raw = axes.get(idx, retrospy_gc.AXIS_BASE)
        chars[frame.offset:frame.end] = format(raw, "08b")
    return "".join(chars)


@pytest.fixture
def make_gc_line():
    return gc_line
