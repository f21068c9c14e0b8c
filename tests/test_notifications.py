"""Tests for the per-request toast queue."""

from employee_directory.notifications import Notifier, Toast


def test_toasts_keep_order_and_level():
    notifier = Notifier()
    notifier.success("Saved")
    notifier.error("Email: is invalid")
    notifier.info("Loading")

    assert notifier.toasts == (
        Toast("success", "Saved"),
        Toast("error", "Email: is invalid"),
        Toast("info", "Loading"),
    )


def test_drain_empties_queue():
    notifier = Notifier()
    notifier.error("Failed")

    assert notifier.drain() == [Toast("error", "Failed")]
    assert notifier.drain() == []
