import psutil
from typing import Optional
from dataclasses import dataclass


class BatteryReadError(Exception):
    """Raised when the current battery state cannot be read."""


@dataclass
class BatteryInfo:
    """Data class to hold one battery reading."""
    percent: float
    power_plugged: bool
    status: str
    time_left_formatted: Optional[str] = None


class BatteryMonitor:
    """
    Reads the local battery state through psutil.
    """

    def get_battery_level(self) -> BatteryInfo:
        """
        Read the current battery level and plug state.

        Returns:
            BatteryInfo: a fresh reading.

        Raises:
            BatteryReadError: if psutil fails or reports no battery.
        """
        try:
            battery = psutil.sensors_battery()
        except Exception as e:
            raise BatteryReadError(f"psutil could not read the battery: {e}") from e

        if battery is None:
            raise BatteryReadError("No battery detected on this system")

        percent = float(battery.percent)
        power_plugged = bool(battery.power_plugged)

        return BatteryInfo(
            percent=percent,
            power_plugged=power_plugged,
            status=self._determine_battery_status(percent, power_plugged),
            time_left_formatted=self._format_time_left(battery.secsleft),
        )

    def _format_time_left(self, secsleft) -> Optional[str]:
        if secsleft in (psutil.POWER_TIME_UNLIMITED, psutil.POWER_TIME_UNKNOWN):
            return None
        if secsleft is None or secsleft < 0:
            return None
        secsleft = int(secsleft)
        hours = secsleft // 3600
        minutes = (secsleft % 3600) // 60
        return f"{hours}h {minutes}m"

    def _determine_battery_status(self, percent: float, power_plugged: bool) -> str:
        """
        Determine the battery status based on percentage and power state.

        Args:
            percent: Battery percentage (0-100)
            power_plugged: Whether the power adapter is connected

        Returns:
            str: Battery status description
        """
        if power_plugged:
            if percent == 100:
                return "Fully charged"
            return "Charging"
        if percent <= 10:
            return "Critical"
        if percent <= 20:
            return "Low"
        return "Discharging"

    def is_battery_available(self) -> bool:
        """
        Check if a battery is available on the system.

        Returns:
            bool: True if battery is detected, False otherwise
        """
        try:
            return psutil.sensors_battery() is not None
        except Exception:
            return False
