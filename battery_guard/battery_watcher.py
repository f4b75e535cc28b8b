import time
from enum import Enum
from typing import Optional

from loguru import logger

from .battery_monitor import BatteryInfo, BatteryReadError
from .settings import MonitorSettings


class BatteryAlert(Enum):
    LOW = ("Battery Low", "Battery is at {percent:g}%. Please charge your laptop.")
    HIGH = ("Battery High", "Battery is at {percent:g}%. Consider unplugging your laptop.")

    def __init__(self, title, template):
        self.title = title
        self.template = template

    def message(self, percent: float) -> str:
        return self.template.format(percent=percent)


def evaluate_thresholds(percent: float, settings: MonitorSettings) -> Optional[BatteryAlert]:
    """Return the alert for a battery percentage, or None when it sits between the thresholds.

    Both thresholds are inclusive. Plug state is not taken into account.
    """
    if percent <= settings.LOW_BATTERY_THRESHOLD:
        return BatteryAlert.LOW
    if percent >= settings.HIGH_BATTERY_THRESHOLD:
        return BatteryAlert.HIGH
    return None


class BatteryWatcher:
    """
    Polls the battery at a fixed interval and shows a notification whenever the
    level is outside the LOW/HIGH window.

    Args:
        reader: object with get_battery_level() -> BatteryInfo, raising BatteryReadError on failure
        notifier: object with notify(title, message) -> bool
        settings: thresholds and poll interval
        sleep: blocking sleep function, injectable for tests
        clock: monotonic clock used to keep ticks on a fixed cadence
    """

    def __init__(self, reader, notifier, settings: Optional[MonitorSettings] = None,
                 sleep=time.sleep, clock=time.monotonic):
        self.reader = reader
        self.notifier = notifier
        self.settings = settings or MonitorSettings()
        self._sleep = sleep
        self._clock = clock

    def tick(self) -> Optional[BatteryAlert]:
        """Run one check-and-notify cycle. Never raises for a failed read or notification."""
        try:
            battery_info = self.reader.get_battery_level()
        except BatteryReadError as e:
            logger.warning(f"Error getting battery level. Skipping check. Error: {e}")
            return None
        except Exception:
            logger.exception("Unexpected error while reading the battery. Skipping check.")
            return None

        self._log_reading(battery_info)

        alert = evaluate_thresholds(battery_info.percent, self.settings)
        if alert is None:
            logger.debug("Battery level within range; no notification")
            return None

        try:
            self.notifier.notify(alert.title, alert.message(battery_info.percent))
        except Exception:
            logger.exception(f"{alert.title} notification failed; not retrying")
        return alert

    def run_forever(self) -> None:
        """Tick every POLL_INTERVAL seconds until the process is stopped."""
        logger.info(
            f"Battery watcher running: notify at <= {self.settings.LOW_BATTERY_THRESHOLD}% "
            f"and >= {self.settings.HIGH_BATTERY_THRESHOLD}%, checking every {self.settings.POLL_INTERVAL:g}s"
        )
        while True:
            started = self._clock()
            self.tick()
            elapsed = self._clock() - started
            self._sleep(max(0.0, self.settings.POLL_INTERVAL - elapsed))

    def _log_reading(self, battery_info: BatteryInfo) -> None:
        time_left = battery_info.time_left_formatted or "unknown"
        logger.info(
            f"Battery %: {battery_info.percent:g} | Status: {battery_info.status} | "
            f"Plugged In: {battery_info.power_plugged} | Time left: {time_left}"
        )
