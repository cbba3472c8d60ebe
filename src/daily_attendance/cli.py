"""Command-line entry point for the daily attendance run.

Exit code 0 means the run reached DONE; any fatal error is logged with its
traceback to stderr and exits 1.
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from typing import Optional

from dotenv import load_dotenv

from config import get_settings_module

from .common.datetime_utils import current_run_day
from .container import build_container, build_pipeline
from .settings import RunSettings

logger = logging.getLogger("daily_attendance")


def _parse_args(argv: Optional[list[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create today's attendance records and sheet for a department")
    parser.add_argument("--dept", help="department code (env DEPT, default ECA)")
    parser.add_argument("--tz", dest="timezone", help="IANA time zone (env TZ, default Asia/Kolkata)")
    parser.add_argument(
        "--expire-days",
        dest="expire_days",
        type=int,
        help="signed URL lifetime in days (env SIGNED_URL_EXPIRE_DAYS, default 7)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = _parse_args(argv)
    load_dotenv(override=False)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        settings = importlib.import_module(get_settings_module())
        if getattr(settings, "DEBUG", False):
            logging.getLogger().setLevel(logging.DEBUG)

        run_settings = RunSettings.from_settings(
            settings,
            dept=args.dept,
            timezone=args.timezone,
            expire_days=args.expire_days,
        )
        container = build_container(db_config=run_settings.db_config)
        pipeline = build_pipeline(container, run_settings)
        pipeline.run(current_run_day(run_settings.timezone))
    except Exception:
        logger.exception("Attendance initialization failed")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
