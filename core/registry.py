"""Driver registry: device id -> driver factory"""
import logging
from typing import Callable, Dict, Iterable, Optional

from core.driver import DeviceDriver, DriverPolicy
from core.errors import UnknownDeviceError
from core.layout import DeviceLayout

LOG = logging.getLogger("spybridge.registry")

DriverFactory = Callable[[], DeviceDriver]


class DriverRegistry:
    """Maps device identifiers to factories and tracks the active driver.

    The registry holds no telemetry; every `create` returns an independent
    driver, so several adapters can run side by side.
    """

    def __init__(self):
        self._factories: Dict[str, DriverFactory] = {}
        self._active: Optional[DeviceDriver] = None

    def register(self, device_id: str, factory: DriverFactory):
        if device_id in self._factories:
            LOG.info("replacing driver factory for %s", device_id)
        self._factories[device_id] = factory

    def register_layout(self, layout: DeviceLayout, policy: DriverPolicy = None):
        self.register(layout.device_id, lambda: DeviceDriver(layout, policy))

    def load_layouts(self, entries: Iterable[dict], policy: DriverPolicy = None):
        """Register user-defined layouts given as plain mappings."""
        for entry in entries:
            layout = DeviceLayout.from_dict(entry)
            self.register_layout(layout, policy)
            LOG.info("registered layout %s (%s)", layout.device_id, layout.describe())

    def device_ids(self):
        return sorted(self._factories)

    def __contains__(self, device_id):
        return device_id in self._factories

    def create(self, device_id: str) -> DeviceDriver:
        try:
            factory = self._factories[device_id]
        except KeyError:
            raise UnknownDeviceError(device_id, self.device_ids()) from None
        driver = factory()
        driver.reset()
        return driver

    def activate(self, device_id: str) -> DeviceDriver:
        """Create a driver and make it the active one.

        On UnknownDeviceError the previously active driver stays in place.
        """
        driver = self.create(device_id)
        self._active = driver
        LOG.info("active driver: %s", driver.describe())
        return driver

    def deactivate(self):
        self._active = None

    @property
    def active(self) -> Optional[DeviceDriver]:
        return self._active


def default_registry(policy: DriverPolicy = None) -> DriverRegistry:
    """Registry pre-loaded with the built-in RetroSpy layouts."""
    from devices import retrospy_gc, retrospy_n64, retrospy_nes

    registry = DriverRegistry()
    for layout in (retrospy_gc.LAYOUT, retrospy_n64.LAYOUT, retrospy_nes.LAYOUT):
        registry.register_layout(layout, policy)
    return registry
