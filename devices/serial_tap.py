"""Serial reader for RetroSpy-style Arduino taps

The Arduino sits on the controller bus and prints one ASCII line per poll
over USB serial. This reader owns the port and keeps reconnecting if the
board is unplugged.
"""
import logging

import serial

from core.driver import DeviceDriver
from core.reader import LineReader

LOG = logging.getLogger("spybridge.serial")

DEFAULT_BAUD = 115200


class SerialTapReader(LineReader):
    name = "SerialTapReader"

    def __init__(self, driver: DeviceDriver, port: str, baud: int = DEFAULT_BAUD,
                 timeout: float = 0.1, retry_interval: float = 1.0):
        super().__init__(driver)
        self.port = port
        self.baud = baud
        self.timeout = timeout
        self.retry_interval = retry_interval
        self._serial = None

    def _open(self):
        try:
            ser = serial.Serial(self.port, self.baud, timeout=self.timeout)
            ser.reset_input_buffer()
            LOG.info("opened %s @ %d baud", self.port, self.baud)
            return ser
        except serial.SerialException as e:
            LOG.warning("failed to open %s: %s", self.port, e)
            return None

    def stop(self):
        super().stop()
        self._close()

    def _close(self):
        if self._serial is not None:
            try:
                self._serial.close()
            except serial.SerialException:
                LOG.debug("error closing %s", self.port, exc_info=True)
            self._serial = None

    def _loop(self):
        while not self._stop.is_set():
            if self._serial is None:
                self._serial = self._open()
                if self._serial is None:
                    self._stop.wait(self.retry_interval)
                    continue
            try:
                raw = self._serial.readline()
            except serial.SerialException:
                LOG.exception("error reading %s; will attempt reconnect", self.port)
                self._close()
                self._stop.wait(self.retry_interval)
                continue
            if not raw:
                continue
            # undecodable bytes become U+FFFD, which the decoder reads as a cleared bit
            self.feed(raw.decode("ascii", errors="replace"))
