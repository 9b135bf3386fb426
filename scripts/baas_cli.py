#!/usr/bin/env python3
"""Command-line helper for the BaaS platform API.

Credentials are read from the environment (see ``BaasConfig.from_env``):
- BAAS_ACCESS_ID, BAAS_ACCESS_KEY (required)
- BAAS_DOMAIN, BAAS_CA, BAAS_DEBUG, BAAS_TIMEOUT (optional)

Subcommands:
  sign METHOD key=value ...       print every signing stage for one request
  call OPERATION key=value ...    optionally log in, then call one operation

Values are parsed as JSON when possible (``pageNum=1`` is the integer 1,
``ids=[1,2]`` a list) and used as plain strings otherwise.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pybaas import BaasClient, BaasConfig, BaasError, compute_auth_code  # noqa: E402


def _parse_pairs(pairs: list[str]) -> dict[str, Any]:
    parsed: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise SystemExit(f"Expected key=value, got {pair!r}")
        try:
            parsed[key] = json.loads(raw)
        except json.JSONDecodeError:
            parsed[key] = raw
    return parsed


def _cmd_sign(args: argparse.Namespace) -> int:
    config = BaasConfig.from_env()
    stages: list[tuple[str, Any]] = []
    compute_auth_code(
        args.method,
        config.access_id,
        config.access_key,
        _parse_pairs(args.params),
        nonce=args.nonce,
        timestamp=args.timestamp,
        trace=lambda stage, value: stages.append((stage, value)),
    )
    width = max(len(stage) for stage, _ in stages)
    for stage, value in stages:
        if stage == "signingKey" and not args.show_key:
            value = "<redacted>"
        print(f"{stage:<{width}}  {value}")
    return 0


async def _cmd_call(args: argparse.Namespace) -> int:
    config = BaasConfig.from_env()
    parameters = _parse_pairs(args.params)

    async with BaasClient(config) as client:
        session = None
        if args.login_name:
            session = await client.login(
                app_token=args.app_token or "",
                login_name=args.login_name,
                password=args.password or "",
            )
        result = await client.call(args.operation, parameters, session=session)

    print(f"HTTP {result.status} {result.reason or ''}".rstrip())
    if result.body is not None:
        if isinstance(result.body, str):
            print(result.body)
        else:
            print(json.dumps(result.body, indent=2, ensure_ascii=False, sort_keys=True))
    return 0


def _list_operations() -> int:
    for op in BaasClient.operations():
        print(f"{op.name:<36} {op.method:<6} {op.path}")
    return 0


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="BaaS platform API helper")
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    sign = sub.add_parser("sign", help="Compute an authCode and print each stage")
    sign.add_argument("method", help="HTTP method, e.g. GET")
    sign.add_argument("params", nargs="*", help="Signed parameters as key=value")
    sign.add_argument("--nonce", default=None, help="Fixed nonce (default: new UUID)")
    sign.add_argument("--timestamp", type=int, default=None, help="Fixed epoch ms (default: now)")
    sign.add_argument("--show-key", action="store_true", help="Print the derived signing key.")

    call = sub.add_parser("call", help="Call a catalog operation")
    call.add_argument("operation", help="Operation name or Swagger operationId")
    call.add_argument("params", nargs="*", help="Operation parameters as key=value")
    call.add_argument("--login-name", default=None, help="Log in first with this user.")
    call.add_argument("--password", default=None)
    call.add_argument("--app-token", default=None)

    sub.add_parser("operations", help="List catalog operations")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        if args.command == "sign":
            return _cmd_sign(args)
        if args.command == "operations":
            return _list_operations()
        return asyncio.run(_cmd_call(args))
    except BaasError as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
