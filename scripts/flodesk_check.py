#!/usr/bin/env python3
"""
Flodesk Connection Check
Verifies an API key, lists segments and subscribes a test contact
"""

import argparse
import logging
import os
import sys
from pathlib import Path

# Add src to python path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from autoresponder_core.accounts import InMemoryAccountStore
from autoresponder_core.adapters import get_default_registry
from autoresponder_core.config import load_config
from autoresponder_core.contracts import SubscribeSettings

API_KEY_VAR = "FLODESK_API_KEY"
CHECK_ACCOUNT = "cli"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Check a Flodesk integration")
    parser.add_argument(
        "--api-key", default=None, help=f"API key (defaults to ${API_KEY_VAR})"
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("connect", help="Validate the API key")
    sub.add_parser("segments", help="List segments as id<TAB>name")

    subscribe = sub.add_parser("subscribe", help="Subscribe a contact")
    subscribe.add_argument("--email", required=True)
    subscribe.add_argument("--segment", required=True, help="Segment id")
    subscribe.add_argument("--name", default=None, help="Display name")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(asctime)s] %(name)s %(levelname)s: %(message)s",
    )

    api_key = args.api_key or os.getenv(API_KEY_VAR, "")

    try:
        config = load_config()
    except ValueError as e:
        print(f"❌ {e}")
        return 1

    accounts = InMemoryAccountStore()
    adapter = get_default_registry(accounts, config=config).get("flodesk")

    if args.command == "connect":
        result = adapter.connect({"api_key": api_key})
        if not result.ok:
            print(f"❌ {result.error}")
            return 1
        print("✅ API key is valid")
        return 0

    if args.command == "segments":
        result = adapter.list_segments({"api_key": api_key})
        if not result.ok:
            print(f"❌ {result.error}")
            return 1
        for segment in result.data:
            print(f"{segment.id}\t{segment.name}")
        return 0

    # subscribe
    if api_key:
        accounts.save_account(CHECK_ACCOUNT, {"api_key": api_key})
    settings = SubscribeSettings(service_account=CHECK_ACCOUNT, segment_id=args.segment)
    result = adapter.subscribe(settings, args.email, args.name)
    if not result.ok:
        print(f"❌ {result.error}")
        return 1
    print(f"✅ Subscribed {args.email}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
