#!/usr/bin/env python3
"""
Price a parcel with the Correios calculator and print the result.

Example:
    python scripts/run_quote.py 04014 13631009 09951420 1.5 1 18 10 10 0
    python scripts/run_quote.py 04014 13631009 09951420 1.5 1 18 10 10 0 --json --mock
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from pprint import pprint

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from correios_quote.error_messages import load_error_messages
from correios_quote.integrations.clients.mocks.correios import MockCorreiosProvider
from correios_quote.integrations.clients.real_http.correios import CorreiosHttpProvider
from correios_quote.integrations.policy.quotation_service import QuotationService
from correios_quote.utils.config_loader import load_correios_config


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Correios price & deadline quote")
    parser.add_argument("service_code")
    parser.add_argument("origin_postal_code")
    parser.add_argument("destination_postal_code")
    parser.add_argument("weight", help="kg, '.' or ',' as decimal separator")
    parser.add_argument("package_format", help="1 box, 2 roll/prism, 3 envelope")
    parser.add_argument("length")
    parser.add_argument("height")
    parser.add_argument("width")
    parser.add_argument("diameter")
    parser.add_argument("--company-code", default="")
    parser.add_argument("--password", default="")
    parser.add_argument("--hand-delivery", action="store_true")
    parser.add_argument("--declared-value", default="0")
    parser.add_argument("--receipt-notice", action="store_true")
    parser.add_argument("--json", action="store_true", help="Print the JSON text instead of the mapping")
    parser.add_argument("--mock", action="store_true", help="Use the offline mock provider")
    parser.add_argument("--config", type=Path, default=None, help="Path to correios.yml")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    cfg = load_correios_config(args.config)
    provider = MockCorreiosProvider() if args.mock else CorreiosHttpProvider.from_config(cfg)
    service = QuotationService(
        provider=provider,
        localize=load_error_messages(cfg.messages_path),
        public_service_codes=set(cfg.public_service_codes),
    )

    result = service.quote(
        {
            "service_code": args.service_code,
            "origin_postal_code": args.origin_postal_code,
            "destination_postal_code": args.destination_postal_code,
            "weight": args.weight,
            "package_format": args.package_format,
            "length": args.length,
            "height": args.height,
            "width": args.width,
            "diameter": args.diameter,
            "company_code": args.company_code,
            "password": args.password,
            "hand_delivery": args.hand_delivery,
            "declared_value": args.declared_value,
            "receipt_notice": args.receipt_notice,
        }
    )

    if args.json:
        print(result.to_json())
    else:
        pprint(result.to_dict())
    return 0 if result.is_success else 1


if __name__ == "__main__":
    sys.exit(main())
