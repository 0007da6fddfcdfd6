"""Print a bearer token for a user id (local development only).

Usage:
    python -m scripts.create_dev_token <user_id> [minutes]

Requires: SECRET_KEY (same value the API uses).
"""

import sys
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

from app.infrastructure.security.jwt import create_access_token


def main() -> None:
    load_dotenv(Path(__file__).resolve().parent.parent / ".env", override=True)
    if len(sys.argv) < 2:
        print("Usage: python -m scripts.create_dev_token <user_id> [minutes]", file=sys.stderr)
        sys.exit(1)
    minutes = int(sys.argv[2]) if len(sys.argv) > 2 else 60
    print(create_access_token(sys.argv[1], expires_delta=timedelta(minutes=minutes)))


if __name__ == "__main__":
    main()
