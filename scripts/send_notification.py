"""Send a broadcast or assignment notification through the notification endpoint."""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import get_settings
from app.logging_config import configure_logging
from app.models.schemas import NotificationKind
from app.services.notification_service import NotificationDeliveryError, NotificationDispatcher


logger = logging.getLogger("scripts.send_notification")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Trigger a task notification email",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Announce a new project to two workers
  python scripts/send_notification.py --title "Landing page redesign" a@example.com b@example.com

  # Notify an assignee
  python scripts/send_notification.py --kind assignment --title "API audit" dev@example.com
        """
    )
    parser.add_argument("recipients", nargs="*", help="Recipient email addresses")
    parser.add_argument("--title", required=True, help="Task title used as the subject")
    parser.add_argument(
        "--kind",
        choices=[kind.value for kind in NotificationKind],
        default=NotificationKind.BROADCAST.value,
        help="Notification type (default: broadcast)"
    )
    parser.add_argument("--endpoint", help="Override NOTIFICATION_ENDPOINT_URL")
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> int:
    settings = get_settings()
    dispatcher = NotificationDispatcher.from_settings(settings)
    if args.endpoint:
        dispatcher.endpoint_url = args.endpoint

    try:
        sent = await dispatcher.send(args.recipients, args.title, args.kind)
    except NotificationDeliveryError as err:
        logger.error("Notification not sent: %s", err)
        return 1

    if not sent:
        logger.warning("No recipients given; nothing sent")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
