"""Swiss Payments Code (SPC) payload encoding."""

import logging
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from .constants import (
    ADDRESS_TYPE_STRUCTURED,
    CODING,
    MAX_AMOUNT,
    MAX_CITY,
    MAX_COUNTRY,
    MAX_HOUSE_NUMBER,
    MAX_MESSAGE,
    MAX_NAME,
    MAX_POSTAL_CODE,
    MAX_STREET,
    PAYLOAD_LINE_COUNT,
    QR_TYPE,
    TRAILER,
    VERSION,
)
from .payment_record import Amount, Party, PaymentRecord, to_decimal
from .reference import ReferenceScheme, classify_reference

logger = logging.getLogger(__name__)

# Six empty fields, without the address type the SIX layout puts first
# (seven fields there); amount therefore lands on line 18.
ULTIMATE_CREDITOR_FIELDS = 6
TWO_PLACES = Decimal("0.01")


def sanitize_field(value: Optional[str], max_length: int) -> str:
    """Replace line breaks with spaces, trim and truncate to max_length."""
    if not value:
        return ''
    cleaned = re.sub(r'\r\n|\r|\n', ' ', str(value)).strip()
    return cleaned[:max_length]


def format_amount(amount: Amount) -> str:
    """
    Format an amount with exactly two decimals and '.' as separator.

    Absent, non-finite, negative and out-of-range amounts yield an
    empty string (open amount).
    """
    try:
        value = to_decimal(amount)
    except ValueError:
        logger.debug("Unusable amount %r encoded as open amount", amount)
        return ''
    if value is None or value < 0 or value > MAX_AMOUNT:
        return ''
    value = value.copy_abs()  # -0 -> 0
    return f"{value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP):f}"


def _address_fields(party: Party) -> list[str]:
    return [
        sanitize_field(party.name, MAX_NAME),
        sanitize_field(party.street, MAX_STREET),
        sanitize_field(party.house_number, MAX_HOUSE_NUMBER),
        sanitize_field(party.postal_code, MAX_POSTAL_CODE),
        sanitize_field(party.city, MAX_CITY),
        sanitize_field(party.country, MAX_COUNTRY).upper(),
    ]


def encode(record: PaymentRecord) -> str:
    """
    Encode a payment record as the SPC text record of a Swiss QR-bill.

    The record is written as it is given: validation happens beforehand
    (see QRBillValidator). The output always has 31 lines:

    SPC | 0200 | 1 | account | S | creditor (6) | ultimate creditor (6, empty)
    | amount | currency | debtor address type + debtor (7) | reference type
    | reference | message | EPD | billing information (empty)

    Args:
        record: The payment data

    Returns:
        The newline separated payload
    """
    classification = classify_reference(record.account, record.reference)
    if classification.scheme is ReferenceScheme.NON:
        reference = ''
    else:
        reference = classification.normalized_reference

    values = [QR_TYPE, VERSION, CODING, record.account, ADDRESS_TYPE_STRUCTURED]
    values.extend(_address_fields(record.creditor))
    values.extend([''] * ULTIMATE_CREDITOR_FIELDS)
    values.extend([format_amount(record.amount), record.currency])
    if record.has_debtor:
        values.append(ADDRESS_TYPE_STRUCTURED)
        values.extend(_address_fields(record.debtor))
    else:
        values.extend([''] * 7)
    values.extend([
        classification.scheme.value,
        reference,
        sanitize_field(record.message, MAX_MESSAGE),
        TRAILER,
        '',  # billing information
    ])
    return '\n'.join(values)


def parse(payload: str) -> Optional[PaymentRecord]:
    """
    Parse an SPC payload back into a payment record.

    Args:
        payload: The QR text record

    Returns:
        PaymentRecord or None if the payload is not an SPC 0200 record
    """
    try:
        lines = payload.replace('\r\n', '\n').split('\n')
        if len(lines) != PAYLOAD_LINE_COUNT:
            return None
        if lines[0] != QR_TYPE or lines[1] != VERSION or lines[29] != TRAILER:
            return None

        creditor = Party(*lines[5:11])
        debtor = Party(*lines[20:26]) if lines[19] == ADDRESS_TYPE_STRUCTURED else Party()

        return PaymentRecord(
            account=lines[3],
            creditor=creditor,
            amount=Decimal(lines[17]) if lines[17] else None,
            currency=lines[18],
            debtor=debtor,
            reference=lines[27],
            message=lines[28],
        )
    except (ValueError, AttributeError, ArithmeticError):
        return None
