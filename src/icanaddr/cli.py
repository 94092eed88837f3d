"""Command line front end.

Usage:
    icanaddr create CALLER NONCE [--network mainnet]
    icanaddr create2 CALLER CODE_HASH SALT [--network testnet]
    icanaddr encode RAW_ADDRESS [--network private]

Pass --json before the command to print the full result instead of the bare
address.
"""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from icanaddr.config import get_settings
from icanaddr.contracts import Create2Request, CreateRequest
from icanaddr.ican import to_ican
from icanaddr.networks import NetworkType
from icanaddr.service import derive
from icanaddr.types import Address

logger = logging.getLogger(__name__)


def _network(value: str) -> NetworkType:
    try:
        return NetworkType(value.lower())
    except ValueError:
        return NetworkType.from_prefix(value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="icanaddr",
        description="Derive checksummed ICAN contract addresses",
    )
    parser.add_argument("--json", action="store_true", help="Print result as JSON")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--network",
        type=_network,
        default=None,
        help="mainnet, testnet, private (or cb/ab/ce); defaults to ICAN_DEFAULT_NETWORK",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", parents=[common], help="CREATE address from caller and nonce")
    create.add_argument("caller", help="Deploying account (44 hex chars)")
    create.add_argument("nonce", type=int, help="Deploying account nonce")

    create2 = sub.add_parser("create2", parents=[common], help="CREATE2 address from caller, code hash and salt")
    create2.add_argument("caller", help="Deploying account (44 hex chars)")
    create2.add_argument("code_hash", help="keccak-256 of the init code (0x hex)")
    create2.add_argument("salt", help="uint256 salt (decimal or 0x hex)")

    encode = sub.add_parser("encode", parents=[common], help="Checksum-encode a raw 20-byte address")
    encode.add_argument("address", help="Raw address (40 hex chars)")

    return parser


def run(args: argparse.Namespace) -> str:
    """Execute a parsed command and return the text to print."""
    if args.command == "encode":
        network = args.network or get_settings().default_network
        ican = to_ican(Address.from_hex(args.address), network)
        if args.json:
            return json.dumps({"address": str(ican), "network": network.value})
        return str(ican)

    if args.command == "create":
        request = CreateRequest(caller=args.caller, nonce=args.nonce, network=args.network)
    else:
        request = Create2Request(
            caller=args.caller,
            code_hash=args.code_hash,
            salt=args.salt,
            network=args.network,
        )

    result = derive(request)
    if args.json:
        return result.model_dump_json()
    return result.address


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        settings = get_settings()
    except ValueError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=settings.effective_log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        output = run(args)
    except ValueError as e:
        logger.debug(f"{args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
