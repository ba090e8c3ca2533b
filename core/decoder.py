"""Bit-frame decoding helpers

Pure functions that turn a fragment of a telemetry line into a button flag or
a normalized axis value. The serial link is noisy, so none of these raise:
out-of-range positions read as "not set" and unparsable fields read as 0.0.
"""
import logging

from core.layout import AxisEncoding, AxisFrame

LOG = logging.getLogger("spybridge.decoder")

_BINARY = frozenset("01")


def decode_button(line: str, position: int) -> bool:
    """True iff the character at `position` is '1'."""
    if position < 0 or position >= len(line):
        return False
    return line[position] == "1"


def _clean_field(line: str, frame: AxisFrame) -> str:
    field = line[frame.offset:frame.end]
    cleaned = "".join(c if c in _BINARY else "0" for c in field)
    if cleaned != field:
        # nulls and other noise count as cleared bits
        LOG.debug("noisy field at %d: %r -> %s", frame.offset, field, cleaned)
    return cleaned


def _parse_field(line: str, frame: AxisFrame):
    field = _clean_field(line, frame)
    if not field:
        return None
    return int(field, 2)


def _finish(value: float, invert: bool) -> float:
    if value == 0:
        # no inversion on zero, avoids -0.0
        return 0.0
    return -value if invert else value


def decode_axis(line: str, frame: AxisFrame, base: int) -> float:
    """Decode an offset-binary field: (raw - base) / base, optionally inverted.

    The result is not clamped; a field wider than the base allows can exceed 1.0.
    """
    raw = _parse_field(line, frame)
    if raw is None:
        return 0.0
    return _finish((raw - base) / base, frame.invert)


def decode_signed_axis(line: str, frame: AxisFrame, base: int) -> float:
    """Decode a two's complement field: signed / base, optionally inverted."""
    raw = _parse_field(line, frame)
    if raw is None:
        return 0.0
    # sign bit is the top bit of the declared width, even on a truncated field
    if raw >= 1 << (frame.width - 1):
        raw -= 1 << frame.width
    return _finish(raw / base, frame.invert)


_STRATEGIES = {
    AxisEncoding.OFFSET_BINARY: decode_axis,
    AxisEncoding.SIGNED: decode_signed_axis,
}


def decode_frame_axis(line: str, frame: AxisFrame, base: int) -> float:
    """Decode one axis field using the frame's encoding."""
    return _STRATEGIES[frame.encoding](line, frame, base)
