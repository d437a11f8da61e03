#!/usr/bin/env python3
"""
Command-line interface for Show Me short links.

Usage:
    python showme_cli.py create <url> [--debug]
    python showme_cli.py resolve <link_id>
    python showme_cli.py info <link_id>
    python showme_cli.py health
"""

import argparse
import asyncio
import json
import sys
import os
from typing import Optional

# Add repository root to path when run from a checkout
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from showme.exceptions import ShowMeError
from showme.linkid import LinkIdGenerator
from showme.service import ShortLinkService
from showme.store import create_store
from showme.common.logging_config import setup_logging


class ShowMeCLI:
    """Command-line interface for short links."""

    def __init__(
        self,
        redis_url: Optional[str] = None,
        key_prefix: str = "showme:link:",
        id_length: int = 6,
        verbose: bool = False,
        service: Optional[ShortLinkService] = None,
    ):
        self.redis_url = redis_url
        self.key_prefix = key_prefix
        self.id_length = id_length
        self.logger = setup_logging(level="DEBUG" if verbose else "ERROR")
        self.service = service

    async def initialize(self):
        """Open the store and build the service."""
        if self.service is not None:
            return

        store = await create_store(
            redis_url=self.redis_url,
            key_prefix=self.key_prefix,
            logger=self.logger,
        )
        self.service = ShortLinkService(
            store=store,
            id_generator=LinkIdGenerator(length=self.id_length),
            logger=self.logger,
        )

    async def cleanup(self):
        if self.service:
            await self.service.close()

    def _emit(self, data: dict, error: bool = False) -> int:
        print(json.dumps(data, indent=2), file=sys.stderr if error else sys.stdout)
        return 1 if error else 0

    async def create(self, target: str, debug: bool = False) -> int:
        """Create a short link."""
        try:
            if debug:
                link = await self.service.create_debug(target)
            else:
                link = await self.service.create(target)
        except ShowMeError as e:
            return self._emit({"success": False, "error": e.code, "detail": e.message}, error=True)

        return self._emit({"success": True, **link.to_dict()})

    async def resolve(self, link_id: str) -> int:
        """Print the redirect target of a short link."""
        try:
            target = await self.service.resolve(link_id)
        except ShowMeError as e:
            return self._emit({"success": False, "error": e.code, "detail": e.message}, error=True)

        return self._emit({"success": True, "id": link_id, "target_url": target})

    async def info(self, link_id: str) -> int:
        """Print the full record of a short link."""
        try:
            link = await self.service.get_link(link_id)
        except ShowMeError as e:
            return self._emit({"success": False, "error": e.code, "detail": e.message}, error=True)

        return self._emit({"success": True, **link.to_dict()})

    async def health(self) -> int:
        """Check store health."""
        health_status = await self.service.health_check()
        return self._emit(
            {"success": health_status["overall"], "health": health_status},
            error=not health_status["overall"],
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Show Me short link CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create a short link
  %(prog)s create https://example.com/long/url

  # Store an arbitrary payload (no URL validation)
  %(prog)s create "graph TB; A-->B" --debug

  # Where does a link point?
  %(prog)s resolve abc123
        """
    )

    parser.add_argument(
        "--redis-url",
        default=os.getenv("REDIS_URL"),
        help="Redis connection URL (default: from REDIS_URL env; in-memory if unset)"
    )
    parser.add_argument(
        "--key-prefix",
        default=os.getenv("STORE_KEY_PREFIX", "showme:link:"),
        help="Namespace prefix for link keys"
    )
    parser.add_argument(
        "--id-length",
        type=int,
        default=int(os.getenv("LINK_ID_LENGTH", "6")),
        help="Length of generated link IDs"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    create_parser = subparsers.add_parser("create", help="Create a short link")
    create_parser.add_argument("target", help="URL (or payload with --debug)")
    create_parser.add_argument("--debug", action="store_true", help="Skip URL validation")

    resolve_parser = subparsers.add_parser("resolve", help="Get the target of a short link")
    resolve_parser.add_argument("link_id", help="Short link ID")

    info_parser = subparsers.add_parser("info", help="Get the full short link record")
    info_parser.add_argument("link_id", help="Short link ID")

    subparsers.add_parser("health", help="Check store health")

    return parser


async def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    cli = ShowMeCLI(
        redis_url=args.redis_url,
        key_prefix=args.key_prefix,
        id_length=args.id_length,
        verbose=args.verbose,
    )

    try:
        await cli.initialize()

        if args.command == "create":
            return await cli.create(args.target, debug=args.debug)
        elif args.command == "resolve":
            return await cli.resolve(args.link_id)
        elif args.command == "info":
            return await cli.info(args.link_id)
        elif args.command == "health":
            return await cli.health()
        else:
            parser.print_help()
            return 1

    finally:
        await cli.cleanup()


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
