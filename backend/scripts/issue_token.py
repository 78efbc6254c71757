"""Print a bearer token for a user id, for local runs without the identity provider.

    python scripts/issue_token.py user_123 --minutes 240
"""
import argparse
import sys

from liftlog.security import create_access_token


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("user_id", help="subject claim, i.e. the owner id of the workouts")
    parser.add_argument("--minutes", type=int, default=None, help="lifetime (default: ACCESS_TOKEN_EXPIRE_MINUTES)")
    args = parser.parse_args(argv)
    print(create_access_token(args.user_id, expires_minutes=args.minutes))
    return 0


if __name__ == "__main__":
    sys.exit(main())
