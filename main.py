import os
from battery_guard import BatteryMonitor, BatteryWatcher, DesktopNotifier, MonitorSettings
from battery_guard.logging_setup import configure_logging
from dotenv import load_dotenv
from loguru import logger

load_dotenv()


def build_watcher():
    battery_monitor = BatteryMonitor()
    if not battery_monitor.is_battery_available():
        logger.warning("No battery detected right now; will keep checking every interval")

    return BatteryWatcher(
        reader=battery_monitor,
        notifier=DesktopNotifier(),
        settings=MonitorSettings(),
    )


def main():
    log_file = configure_logging(os.getenv("LOGS_FOLDER", "./logs"))
    logger.info(f"== Battery 20%-80% running (logging to {log_file}) ==")

    watcher = build_watcher()
    try:
        watcher.run_forever()
    except KeyboardInterrupt:
        logger.info("Battery watcher stopped")


if __name__ == "__main__":
    main()
