import unittest
from unittest.mock import patch

from battery_guard.notifier import DesktopNotifier


class TestDesktopNotifier(unittest.TestCase):
    @patch("battery_guard.notifier.notification")
    def test_notify_success(self, notification):
        notifier = DesktopNotifier(app_name="Battery 20-80", timeout=5)
        self.assertTrue(notifier.notify("Battery Low", "Battery is at 19%. Please charge your laptop."))
        notification.notify.assert_called_once_with(
            app_name="Battery 20-80",
            title="Battery Low",
            message="Battery is at 19%. Please charge your laptop.",
            timeout=5,
        )

    @patch("battery_guard.notifier.notification")
    def test_notify_failure_returns_false(self, notification):
        notification.notify.side_effect = OSError("dbus not running")
        self.assertFalse(DesktopNotifier().notify("Battery High", "unplug"))
        self.assertEqual(notification.notify.call_count, 1)

    @patch("battery_guard.notifier.notification")
    def test_missing_backend_returns_false(self, notification):
        notification.notify.side_effect = NotImplementedError("No usable implementation found!")
        self.assertFalse(DesktopNotifier().notify("Battery High", "unplug"))


if __name__ == '__main__':
    unittest.main()
