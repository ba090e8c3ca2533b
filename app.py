"""Entry point for spybridge

Selects a driver from the settings file, attaches a serial tap (or a replay
capture) and logs the canonical gamepad state as it changes.
"""
import argparse
import logging
import sys
import time

from core.errors import SettingsError, SpyBridgeError
from core.registry import default_registry
from devices.replay import ReplayReader
from devices.serial_tap import SerialTapReader
from settings import Settings

LOG = logging.getLogger("spybridge")


def build_parser():
    parser = argparse.ArgumentParser(description="spybridge: controller bus tap -> canonical gamepad state")
    parser.add_argument("--settings", help="YAML settings file")
    parser.add_argument("--device", help="override the device id from the settings file")
    parser.add_argument("--replay", metavar="FILE", help="decode a captured line file instead of a serial port")
    parser.add_argument("--list-devices", action="store_true", help="print the registered device ids and exit")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level (default: INFO)")
    parser.add_argument("--log-format", default="%(levelname)s:%(name)s:%(message)s",
                        help="Logging format string (default: %(levelname)s:%(name)s:%(message)s)")
    parser.add_argument("--debug-modules", nargs="*", default=[],
                        help="Modules to set to DEBUG level (e.g., 'decoder', 'driver', 'serial', 'registry')")
    return parser


def make_reader(settings, driver, replay=None):
    if replay:
        try:
            return ReplayReader.from_file(driver, replay)
        except OSError as e:
            raise SettingsError(f"cannot read replay file {replay}: {e}") from None
    if not settings.serial.port:
        raise SettingsError("no serial port configured and no --replay file given")
    return SerialTapReader(driver, settings.serial.port, settings.serial.baud, settings.serial.timeout)


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format=args.log_format)
    for module in args.debug_modules:
        logging.getLogger(f"spybridge.{module}").setLevel(logging.DEBUG)

    try:
        settings = Settings.load_settings(args.settings) if args.settings else None
        policy = settings.policy if settings else None
        registry = default_registry(policy)
        if settings:
            registry.load_layouts(settings.layouts, policy)

        if args.list_devices:
            for device_id in registry.device_ids():
                print(f"{device_id}: {registry.create(device_id).describe()}")
            return 0
        if settings is None:
            raise SettingsError("--settings is required")

        driver = registry.activate(args.device or settings.device)
        reader = make_reader(settings, driver, args.replay)
    except SpyBridgeError as e:
        LOG.error("%s", e)
        return 2

    last = None

    def on_state(state):
        nonlocal last
        LOG.debug("state %s", state)
        if state != last:
            last = state
            LOG.info("buttons=%s axes=%s", state.pressed(), ["%.3f" % a for a in state.axes])

    reader.subscribe(on_state)

    try:
        reader.start()
        LOG.info("spybridge running (Ctrl+C to stop)")
        while reader.running:
            time.sleep(0.5)
    except KeyboardInterrupt:
        LOG.info("shutdown requested")
    finally:
        reader.stop()
        registry.deactivate()
    return 0


if __name__ == "__main__":
    sys.exit(main())
