"""Main CLI entry point for the HubSpot connector."""

import argparse
import json
import logging
import sys

from hubspot_connector.core import (
    ClientConfig,
    IntegrationError,
    load_config,
    save_config,
)
from hubspot_connector.client import CompaniesApiClient

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )
    # Suppress httpx INFO logs, they include the API key in the URL
    logging.getLogger("httpx").setLevel(logging.WARNING)


def resolve_config(args) -> ClientConfig:
    """Use --api-key when given, otherwise the environment and config file."""
    if args.api_key:
        return ClientConfig(api_key=args.api_key)
    return load_config()


def collect_properties(args) -> dict:
    """Gather the company properties passed on the command line."""
    properties = {}
    if getattr(args, "merchant_id", None) is not None:
        properties["merchant_id"] = args.merchant_id
    if args.risk_tag:
        properties["company_risk_tag"] = args.risk_tag
    if args.domain is not None:
        properties["domain"] = args.domain
    return properties


def cmd_find_company(args):
    """Handle the find-company command."""
    with CompaniesApiClient(resolve_config(args)) as client:
        company_id = client.find_company(collect_properties(args))

    if company_id is None:
        print("Company not found")
    else:
        print(company_id)


def cmd_update_company(args):
    """Handle the update-company command."""
    with CompaniesApiClient(resolve_config(args)) as client:
        properties = client.update_company(args.company_id, collect_properties(args))

    if properties is None:
        print("Company not found")
    else:
        print(json.dumps(properties, indent=2))


def cmd_save_config(args):
    """Handle the save-config command."""
    if not args.api_key:
        raise IntegrationError("API Key is required to create API Client!")

    config = ClientConfig(api_key=args.api_key, timeout_seconds=args.timeout)
    path = save_config(config)
    print(f"✓ Saved configuration to {path}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all sub-commands."""
    parser = argparse.ArgumentParser(
        prog="hubspot-connector",
        description="HubSpot companies connector CLI",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--api-key", help="HubSpot API key (or set HUBSPOT_API_KEY env var)")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Find command
    find_parser = subparsers.add_parser("find-company", help="Find a company ID by merchant ID")
    find_parser.add_argument("--merchant-id", required=True, help="Merchant ID to match")
    find_parser.add_argument("--domain", help="Company domain to match")
    find_parser.add_argument("--risk-tag", action="append", help="Risk tag to match (repeatable)")
    find_parser.set_defaults(func=cmd_find_company)

    # Update command
    update_parser = subparsers.add_parser("update-company", help="Update a company's properties")
    update_parser.add_argument("--company-id", required=True, type=int, help="HubSpot company ID")
    update_parser.add_argument("--merchant-id", help="New merchant ID")
    update_parser.add_argument("--domain", help="New company domain")
    update_parser.add_argument("--risk-tag", action="append", help="Risk tag (repeatable)")
    update_parser.set_defaults(func=cmd_update_company)

    # Save-config command
    save_parser = subparsers.add_parser("save-config", help="Store the API key in the config file")
    save_parser.add_argument("--timeout", type=float, default=10.0, help="Request timeout in seconds")
    save_parser.set_defaults(func=cmd_save_config)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        args.func(args)
    except IntegrationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
