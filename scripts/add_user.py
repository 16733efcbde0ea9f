#!/usr/bin/env python3
"""
Create one user directly in the database configured by DATABASE_URL.

Usage:
  python scripts/add_user.py --name "Ann" --email ann@example.com [--age 40]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Make the userservice package importable when run from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from userservice.core.config import get_settings  # noqa: E402
from userservice.core.logging import configure_logging  # noqa: E402
from userservice.db.session import dispose_engine  # noqa: E402
from userservice.domain.errors import UserServiceError  # noqa: E402
from userservice.services.user_service import UserService  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Create a user record")
    ap.add_argument("--name", required=True, help="Full name")
    ap.add_argument("--email", required=True, help="Unique email address")
    ap.add_argument("--age", type=int, help="Age in years (0-150)")
    args = ap.parse_args()

    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    try:
        user = UserService().create_user(args.name, args.email, args.age)
    except UserServiceError as exc:
        raise SystemExit(f"Error: {exc.message}") from exc
    finally:
        dispose_engine()
    print("OK: user created")
    print(f"  ID: {user.id}")
    print(f"  Email: {user.email}")


if __name__ == "__main__":
    main()
