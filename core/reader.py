"""Base reader abstraction

A reader pulls telemetry lines from somewhere, pushes each one through a
DeviceDriver and hands the resulting snapshot to its subscribers.
"""
import abc
import logging
import threading

from core.driver import DeviceDriver

LOG = logging.getLogger("spybridge.reader")


class DeviceReader(abc.ABC):
    @abc.abstractmethod
    def start(self):
        raise NotImplementedError

    @abc.abstractmethod
    def stop(self):
        raise NotImplementedError

    @abc.abstractmethod
    def subscribe(self, callback):
        raise NotImplementedError


class LineReader(DeviceReader):
    """Shared thread/subscriber plumbing for line-oriented sources.

    Subclasses implement `_loop`, calling `feed(line)` for every line received
    and checking `self._stop` between lines.
    """

    name = "LineReader"

    def __init__(self, driver: DeviceDriver):
        self.driver = driver
        self._subs = []
        self._t = None
        self._stop = threading.Event()
        self.lines_read = 0

    def subscribe(self, callback):
        self._subs.append(callback)

    def start(self):
        if self.running:
            LOG.debug("%s already running", self.name)
            return
        self._stop.clear()
        self._t = threading.Thread(target=self._loop, name=self.name, daemon=True)
        self._t.start()
        LOG.info("%s started for %s", self.name, self.driver.device_id)

    def stop(self):
        self._stop.set()
        if self._t:
            self._t.join(timeout=1.0)
            self._t = None

    @property
    def running(self) -> bool:
        return self._t is not None and self._t.is_alive()

    def feed(self, line: str):
        """Decode one line and emit the resulting snapshot."""
        self.driver.read(line.rstrip("\r\n"))
        self.lines_read += 1
        self._emit(self.driver.snapshot())

    def _emit(self, state):
        LOG.debug("%s: emit %r", self.name, state)
        for cb in self._subs:
            try:
                cb(state)
            except Exception:
                LOG.exception("subscriber callback failed")

    @abc.abstractmethod
    def _loop(self):
        raise NotImplementedError
