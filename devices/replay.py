"""Replay reader: feed captured telemetry lines through a driver

Useful for offline captures (one frame per line) and for tests.
"""
import logging
from typing import Iterable

from core.driver import DeviceDriver
from core.reader import LineReader

LOG = logging.getLogger("spybridge.replay")


class ReplayReader(LineReader):
    name = "ReplayReader"

    def __init__(self, driver: DeviceDriver, lines: Iterable[str], interval: float = 0.0):
        super().__init__(driver)
        self._lines = lines
        self.interval = interval

    @classmethod
    def from_file(cls, driver: DeviceDriver, path: str, interval: float = 0.0):
        with open(path, "r", encoding="ascii", errors="replace") as f:
            lines = f.readlines()
        LOG.info("loaded %d lines from %s", len(lines), path)
        return cls(driver, lines, interval)

    def run(self):
        """Process every line in the caller's thread."""
        self._stop.clear()
        self._loop()

    def _loop(self):
        for line in self._lines:
            if self._stop.is_set():
                break
            self.feed(line)
            if self.interval:
                self._stop.wait(self.interval)
        LOG.info("replay finished after %d lines", self.lines_read)
