import sys

from jwt_issuer.errors import TokenIssueError
from jwt_issuer.jwt_utils import issue

USAGE = "Usage: jwt-issue SECRET_KEY PAYLOAD_JSON"


def main(secret_key: str, payload: str) -> None:
    try:
        token = issue(secret_key, payload)
    except TokenIssueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(token)


def run() -> None:
    args = sys.argv[1:]
    if len(args) != 2:
        print(USAGE, file=sys.stderr)
        sys.exit(2)
    main(*args)


if __name__ == "__main__":
    run()
