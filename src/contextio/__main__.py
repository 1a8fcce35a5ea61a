import argparse
import sys
from typing import Dict, Iterable

from .actions import Action
from .client import ContextIO
from .config import get_settings, setup_logging
from .exceptions import ContextIOError, InvalidInputError


def parse_param_pairs(pairs: Iterable[str]) -> Dict[str, str]:
    """Parse ``NAME=VALUE`` strings into a parameter mapping."""
    params = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name.strip():
            raise InvalidInputError(f"Expected NAME=VALUE, got: {pair!r}")
        params[name.strip()] = value
    return params


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contextio", description="Call a Context.IO API action"
    )
    parser.add_argument("action", nargs="?", help="Action name, e.g. all_messages")
    parser.add_argument("--key", help="OAuth consumer key (or CONTEXTIO_CONSUMER_KEY)")
    parser.add_argument(
        "--secret", help="OAuth consumer secret (or CONTEXTIO_CONSUMER_SECRET)"
    )
    parser.add_argument("--account", help="Account id or email address of the mailbox")
    parser.add_argument(
        "-p",
        "--param",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Request parameter, may be repeated",
    )
    parser.add_argument("--api-version", help="API version")
    parser.add_argument("--insecure", action="store_true", help="Use HTTP instead of HTTPS")
    parser.add_argument(
        "--auth-headers",
        action="store_true",
        help="Send OAuth parameters in the Authorization header",
    )
    parser.add_argument("--list-actions", action="store_true", help="List actions and exit")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def list_actions() -> None:
    for action in Action:
        spec = action.spec
        allowed = ", ".join(spec.allowed) or "-"
        print(f"{action.value:<28} {spec.method:<5} {spec.path:<26} {allowed}")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.list_actions:
        list_actions()
        return 0

    settings = get_settings()
    if args.debug or settings.debug:
        setup_logging("DEBUG")
    else:
        setup_logging(settings.log_level)

    overrides = {
        "consumer_key": args.key or settings.consumer_key,
        "consumer_secret": args.secret or settings.consumer_secret,
    }
    if args.api_version:
        overrides["api_version"] = args.api_version
    if args.insecure:
        overrides["ssl"] = False
    if args.auth_headers:
        overrides["auth_headers"] = True

    try:
        if not args.action:
            raise InvalidInputError("An action is required (see --list-actions)")
        action = Action.from_name(args.action)
        params = parse_param_pairs(args.param)
        if args.account and not action.spec.scoped:
            raise InvalidInputError(f"{action.value} does not take --account")

        with ContextIO.from_settings(settings, **overrides) as client:
            response = client.execute(action, args.account, params)
    except InvalidInputError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 2
    except ContextIOError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print(response.body)
    return 1 if response.has_error else 0


if __name__ == "__main__":
    sys.exit(main())
