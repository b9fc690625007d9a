"""Process entry point: serve the API, or print one user's snapshot."""

from __future__ import annotations

import argparse
import logging
import sys

import uvicorn

from profile_snapshot.domain.exceptions import ProfileSnapshotError
from profile_snapshot.infrastructure.config import get_settings
from profile_snapshot.interface.schemas import SnapshotResponse
from profile_snapshot.interface.sync_client import get_snapshot

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="profile-snapshot")
    parser.add_argument(
        "username",
        nargs="?",
        help="print this user's snapshot and exit (omit to start the API server)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the full snapshot as JSON instead of the summary text",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )

    if args.username is None:
        uvicorn.run(
            "profile_snapshot.interface.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
        )
        return 0

    try:
        snapshot = get_snapshot(args.username, settings=settings)
    except ProfileSnapshotError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return 1

    if args.json:
        print(SnapshotResponse.from_snapshot(snapshot).model_dump_json(by_alias=True, indent=2))
    else:
        print(snapshot.summary_string, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
