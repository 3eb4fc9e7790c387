#!/usr/bin/env python3
"""
Command-line interface for previewing routing decisions.

Usage:
    python routing_cli.py evaluate <rules.json> [--user-agent UA] [--header K=V]...
                                   [--query K=V]... [--random-percent P]
    python routing_cli.py aliases [--category CATEGORY]
"""

import argparse
import json
import sys
import os
from typing import Dict, List, Optional

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from smart_routing.aliases import list_aliases
from smart_routing.common.logging_config import setup_logging
from smart_routing.config import load_config
from smart_routing.context import build_request_context
from smart_routing.engine import RoutingEngine
from smart_routing.schemas import parse_rules


def parse_pairs(pairs: Optional[List[str]]) -> Dict[str, str]:
    """Parse repeated ``KEY=VALUE`` arguments.

    Raises:
        ValueError: If an argument has no '='
    """
    result = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got '{pair}'")
        result[key.strip()] = value.strip()
    return result


class RoutingCLI:
    """Command-line interface for the routing engine."""

    def __init__(self, verbose: bool = False):
        """Initialize CLI."""
        self.config = load_config()
        self.logger = setup_logging(
            level="DEBUG" if verbose else "WARNING",
            log_file=self.config.log_file,
            json_format=self.config.log_json,
        )
        self.engine = RoutingEngine(
            logger=self.logger,
            weighted_suppresses_plain=self.config.weighted_suppresses_plain,
        )

    def evaluate(
        self,
        rules_file: str,
        user_agent: str = "",
        headers: Optional[List[str]] = None,
        query: Optional[List[str]] = None,
        random_percent: Optional[float] = None,
    ) -> int:
        """Evaluate a rule file against a simulated request."""
        try:
            with open(rules_file, "r", encoding="utf-8") as f:
                payload = json.load(f)

            if isinstance(payload, dict):
                payload = payload.get("rules", [])

            rules = parse_rules(payload)
            context = build_request_context(
                user_agent=user_agent,
                headers=parse_pairs(headers),
                query=parse_pairs(query),
                random_percent=random_percent,
                config=self.config,
            )
            result = self.engine.evaluate(rules, context)

            print(json.dumps({
                "success": True,
                "result": result.to_dict(),
                "context": context.to_dict(),
            }, indent=2))
            return 0

        except (OSError, ValueError) as e:
            # json.JSONDecodeError is a ValueError
            print(json.dumps({
                "success": False,
                "error": str(e)
            }, indent=2), file=sys.stderr)
            return 1

    def aliases(self, category: Optional[str] = None) -> int:
        """List condition aliases."""
        aliases = [alias.to_dict() for alias in list_aliases(category)]
        print(json.dumps({
            "success": True,
            "count": len(aliases),
            "aliases": aliases,
        }, indent=2, ensure_ascii=False))
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Smart Routing CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Evaluate rules for an iPhone visitor from Spain
  %(prog)s evaluate rules.json --user-agent "Mozilla/5.0 (iPhone; ...)" --header cf-ipcountry=ES

  # Pin the A/B sample
  %(prog)s evaluate rules.json --random-percent 95

  # List time aliases
  %(prog)s aliases --category time
        """
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    evaluate_parser = subparsers.add_parser("evaluate", help="Evaluate a rule file")
    evaluate_parser.add_argument("rules_file", help="JSON file with a list of rules")
    evaluate_parser.add_argument("--user-agent", default="", help="User-Agent of the simulated request")
    evaluate_parser.add_argument("--header", action="append", help="Request header as KEY=VALUE")
    evaluate_parser.add_argument("--query", action="append", help="Query parameter as KEY=VALUE")
    evaluate_parser.add_argument("--random-percent", type=float, help="Fixed A/B sample in [0, 100)")

    aliases_parser = subparsers.add_parser("aliases", help="List condition aliases")
    aliases_parser.add_argument("--category", help="Only this category")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    cli = RoutingCLI(verbose=args.verbose)

    if args.command == "evaluate":
        return cli.evaluate(
            args.rules_file,
            user_agent=args.user_agent,
            headers=args.header,
            query=args.query,
            random_percent=args.random_percent,
        )
    elif args.command == "aliases":
        return cli.aliases(args.category)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
