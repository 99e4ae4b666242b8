"""Desktop notifications through ``notify-send``."""

import logging
import subprocess

logger = logging.getLogger(__name__)

NOTIFY_COMMAND = "notify-send"


def send_desktop_notification(title: str, body: str) -> bool:
    """Show a desktop notification.

    Returns:
        True if the notification was sent; a failure is only logged
    """
    try:
        result = subprocess.run(
            [NOTIFY_COMMAND, title, body],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        logger.warning("Failed to send desktop notification: %s", e)
        return False

    if result.returncode != 0:
        logger.warning(
            "Failed to send desktop notification: %s", result.stderr.strip()
        )
        return False
    return True
