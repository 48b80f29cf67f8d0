"""Run one notification generation pass from the command line.

Intended to be scheduled (cron, a container job) once per day::

    python -m scripts.check_notifications
"""

from __future__ import annotations

import argparse
import logging
from datetime import datetime

from app.application.use_cases.notifications import (
    NotificationGenerationError,
    generate_notifications,
)
from app.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the generation job."""

    parser = argparse.ArgumentParser(
        description="Generate the notifications due today for every active rule.",
    )
    parser.add_argument(
        "--now",
        type=datetime.fromisoformat,
        default=None,
        help="Reference time of the run in ISO format (default: current time)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every matched asset and skipped duplicate.",
    )
    return parser.parse_args()


def main() -> None:
    """Generate notifications and print how many were created."""

    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    initialize_database()

    session = SessionLocal()
    try:
        result = generate_notifications(session, now=args.now)
    except (NotificationGenerationError, ValueError) as exc:
        session.rollback()
        raise SystemExit(f"Notification generation failed: {exc}") from exc
    else:
        print(f"Generated {result.count} notifications")
        for notification in result.notifications:
            print(f"  [{notification.type}] {notification.user_id}: {notification.title}")
    finally:
        session.close()


if __name__ == "__main__":
    main()
