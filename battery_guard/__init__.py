"""
Battery 20-80: notifies when the laptop battery leaves the 20%-80% window.
"""

from .battery_monitor import BatteryMonitor, BatteryInfo, BatteryReadError
from .battery_watcher import BatteryAlert, BatteryWatcher, evaluate_thresholds
from .notifier import DesktopNotifier
from .settings import MonitorSettings

__all__ = [
    'BatteryMonitor', 'BatteryInfo', 'BatteryReadError',
    'BatteryAlert', 'BatteryWatcher', 'evaluate_thresholds',
    'DesktopNotifier', 'MonitorSettings',
]
