"""Command line access to the GitHub REST API."""

import argparse
import json
import sys

import httpx

from .config import ConfigurationError
from .logging_setup import setup_logging
from .records import ResponseParseError


def _parse_params(pairs: list[str]) -> dict:
    params = {}
    for p in pairs:
        k, _, v = p.partition("=")
        params[k] = v
    return params


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Call the GitHub REST API (token from GITHUB_TOKEN)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: LOG_LEVEL or WARNING; DEBUG shows each request)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # api subcommand
    api_parser = subparsers.add_parser(
        "api",
        help="Call any REST endpoint and print the JSON response",
    )
    api_parser.add_argument(
        "endpoint",
        help="API endpoint path (e.g., repos/owner/repo/license)",
    )
    api_parser.add_argument(
        "--param",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Query parameter (repeatable, e.g., --param per_page=100)",
    )
    api_parser.add_argument(
        "--method",
        default="GET",
        choices=["GET", "POST", "PUT", "PATCH", "DELETE"],
        type=str.upper,
        help="HTTP method (default: GET)",
    )
    api_parser.add_argument(
        "--data",
        default=None,
        help="JSON request body for POST/PUT/PATCH/DELETE",
    )

    # user subcommand
    user_parser = subparsers.add_parser("user", help="Show a user's profile")
    user_parser.add_argument("username", help="GitHub login")

    subparsers.add_parser("rate-limit", help="Show the remaining rate limit")
    subparsers.add_parser("zen", help="Print a random GitHub design philosophy")

    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if args.command is None:
        parser.print_help()
        return 0

    payload = None
    if args.command == "api" and args.data:
        try:
            payload = json.loads(args.data)
        except json.JSONDecodeError as e:
            api_parser.error(f"--data is not valid JSON: {e}")

    try:
        if args.command == "api":
            from .manager import GitHubManager

            with GitHubManager() as manager:
                params = _parse_params(args.param)
                resp = manager.send_request(
                    args.method, args.endpoint, params=params or None, payload=payload
                )
            if isinstance(resp.body, str):
                sys.stdout.write(resp.body)
            else:
                json.dump(resp.body, sys.stdout, indent=2)
            sys.stdout.write("\n")
        elif args.command == "user":
            from .models import ReturnFormat
            from .users import UsersManager

            with UsersManager() as manager:
                body = manager.get_user(args.username, format=ReturnFormat.JSON)
            json.dump(body, sys.stdout, indent=2)
            sys.stdout.write("\n")
        elif args.command == "rate-limit":
            from .meta import RateLimitManager

            with RateLimitManager() as manager:
                overview = manager.get_rate_limit()
            for name in ("core", "search", "graphql"):
                rate = getattr(overview.resources, name)
                if rate is not None:
                    print(f"{name}: {rate.remaining}/{rate.limit} remaining (resets at {rate.reset})")
        elif args.command == "zen":
            from .meta import MetaManager

            with MetaManager() as manager:
                print(manager.get_zen())
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except (httpx.HTTPError, ResponseParseError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
