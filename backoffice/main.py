"""Command-line entry point: Swiss QR-bill for an invoice record."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .core.payment_record import UnsupportedCurrencyError
from .services.qr_bill import QRBillService, QRBillValidationError


def setup_logging(verbose: bool = False):
    """Sets up basic logging for the CLI tool."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
    )


def load_invoice(path: Path) -> dict:
    """Read an invoice JSON record from the record store."""
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def main(argv: Optional[list[str]] = None) -> int:
    """Validate an invoice and print its QR-bill payload."""
    parser = argparse.ArgumentParser(description="Generate the Swiss QR-bill payload of an invoice.")
    parser.add_argument("invoice_file", type=Path, help="Path to the invoice JSON record.")
    parser.add_argument("--png", type=Path, help="Write the QR code image to this PNG file.")
    parser.add_argument("--check", action="store_true", help="Only validate, do not print the payload.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    service = QRBillService()

    try:
        invoice = load_invoice(args.invoice_file)
        if args.check:
            result = service.validate(invoice)
            if not result.valid:
                logging.error(result.error_message)
                return 1
            logging.info(f"{args.invoice_file} is ready for QR-bill generation")
            return 0

        payload = service.generate_payload(invoice)
        if args.png:
            args.png.write_bytes(service.renderer.generate_qr_image(payload))
            logging.info(f"QR code written to {args.png}")
    except FileNotFoundError:
        logging.error(f"Invoice file not found: {args.invoice_file}")
        return 1
    except json.JSONDecodeError:
        logging.error(f"Invalid JSON in file: {args.invoice_file}")
        return 1
    except (QRBillValidationError, UnsupportedCurrencyError) as e:
        logging.error(str(e))
        return 1

    sys.stdout.write(payload + '\n')
    return 0


if __name__ == '__main__':
    sys.exit(main())
