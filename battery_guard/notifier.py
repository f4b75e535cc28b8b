from loguru import logger
from plyer import notification


class DesktopNotifier:
    def __init__(self, app_name="Battery 20-80", timeout=10):
        self.app_name = app_name
        self.timeout = timeout

    def notify(self, title: str, message: str) -> bool:
        """
        Show a desktop notification.
        Returns True if the OS accepted it, False otherwise. Failures are logged, never retried.
        """
        try:
            logger.info(f"Showing notification: {title} - {message}")
            notification.notify(
                app_name=self.app_name,
                title=title,
                message=message,
                timeout=self.timeout,
            )
            return True
        except NotImplementedError as e:
            logger.error(f"No notification backend available on this platform: {e}")
            return False
        except Exception as e:
            logger.error(f"Failed to show notification '{title}': {e}")
            return False
