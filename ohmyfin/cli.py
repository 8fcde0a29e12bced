"""Command-line front end: ohmyfin <track|change|validate|ssi> [--field value ...]

Credentials come from OHMYFIN_API_KEY (or .env) unless --api-key is given.
"""

import argparse
import asyncio
import json
import sys
from typing import Any, Dict, List, Optional

import httpx

from ohmyfin.client import Ohmyfin
from ohmyfin.config import SDK_VERSION, Settings
from ohmyfin.exceptions import ApiError, OhmyfinError
from ohmyfin.observability.logging import setup_logging

# CLI name -> (client method, request fields)
OPERATIONS: Dict[str, tuple] = {
    "track": ("track", ["uetr", "ref", "amount", "date", "currency"]),
    "change": (
        "change",
        [
            "uetr",
            "ref",
            "amount",
            "date",
            "currency",
            "status",
            "role",
            "swift",
            "nextName",
            "nextSwift",
            "message",
            "details",
        ],
    ),
    "validate": (
        "validate",
        [
            "beneficiary_bic",
            "currency",
            "correspondent_bic",
            "correspondent_account",
            "beneficiary_iban",
            "beneficiary_owner",
            "beneficiary_country",
            "beneficiary_region",
            "sender_bic",
            "sender_correspondent_bic",
        ],
    ),
    "ssi": ("get_ssi", ["swift", "currency"]),
}


def _number(value: str) -> Any:
    try:
        return int(value)
    except ValueError:
        return float(value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ohmyfin", description="Ohmyfin API command-line client")
    parser.add_argument("--version", action="version", version=f"%(prog)s {SDK_VERSION}")
    parser.add_argument("--api-key", help="API key (default: $OHMYFIN_API_KEY)")
    parser.add_argument("--base-url", help="API base URL (default: $OHMYFIN_BASE_URL or https://ohmyfin.ai)")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("--log-level", help="Log level (default: $OHMYFIN_LOG_LEVEL or INFO)")

    subparsers = parser.add_subparsers(dest="operation", required=True)
    for name, (_, fields) in OPERATIONS.items():
        sub = subparsers.add_parser(name)
        for field in fields:
            sub.add_argument(f"--{field}", dest=field, type=_number if field == "amount" else str)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {
        key: value
        for key, value in (
            ("api_key", args.api_key),
            ("base_url", args.base_url),
            ("timeout_seconds", args.timeout),
            ("log_level", args.log_level),
        )
        if value is not None
    }
    settings = Settings().model_copy(update=overrides)
    setup_logging(settings.log_level.upper(), settings.service_name)

    method_name, fields = OPERATIONS[args.operation]
    params = {field: getattr(args, field) for field in fields if getattr(args, field) is not None}

    async def run() -> Any:
        async with Ohmyfin.from_settings(settings) as client:
            return await getattr(client, method_name)(**params)

    try:
        result = asyncio.run(run())
    except ApiError as e:
        print(
            json.dumps({"message": e.message, "statusCode": e.status_code, "errors": e.errors}),
            file=sys.stderr,
        )
        return 1
    except OhmyfinError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except httpx.RequestError as e:
        print(f"transport error: {e!r}", file=sys.stderr)
        return 2

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
