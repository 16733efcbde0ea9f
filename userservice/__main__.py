#!/usr/bin/env python3
"""
Console entry point.

Usage:
  python -m userservice [--database-url sqlite:///users.db] [--log-level DEBUG] [--create-tables]
"""
from __future__ import annotations

import argparse
import os
import sys

from sqlalchemy.exc import SQLAlchemyError

from userservice.console import UserConsoleApp
from userservice.core.config import get_settings
from userservice.core.logging import configure_logging, get_logger
from userservice.db.create_tables import create_all
from userservice.db.session import dispose_engine
from userservice.services.user_service import UserService


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="userservice", description="Interactive user management console")
    ap.add_argument("--database-url", help="SQLAlchemy URL (default: $DATABASE_URL)")
    ap.add_argument("--log-level", help="Logging level (default: $LOG_LEVEL or INFO)")
    ap.add_argument("--create-tables", action="store_true", help="Create the users table before starting")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.database_url:
        os.environ["DATABASE_URL"] = args.database_url
        get_settings.cache_clear()
    settings = get_settings()
    configure_logging(level=args.log_level or settings.log_level, json_logs=settings.log_json)
    log = get_logger("userservice")

    try:
        if args.create_tables:
            create_all()
        UserConsoleApp(UserService()).run()
    except (RuntimeError, SQLAlchemyError) as exc:
        log.error("Application error: %s", exc)
        sys.stderr.write(f"Error: {exc}\n")
        return 1
    finally:
        dispose_engine()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
