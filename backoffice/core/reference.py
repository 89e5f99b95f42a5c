"""Payment reference classification for Swiss QR-bills."""

import re
from dataclasses import dataclass
from enum import Enum

from stdnum import iban, iso11649
from stdnum.exceptions import InvalidChecksum, ValidationError

from .constants import IBAN_ALLOWED_COUNTRIES, MOD10_TABLE, QR_IID, QR_REFERENCE_LENGTH


class ReferenceScheme(str, Enum):
    """Reference type label written to the payload."""
    QRR = "QRR"
    SCOR = "SCOR"
    NON = "NON"


class ReferenceStatus(str, Enum):
    """Outcome of a reference check."""
    VALID = "valid"
    MISSING = "missing"
    MALFORMED = "malformed"
    CHECKSUM_MISMATCH = "checksum_mismatch"
    SCHEME_MISMATCH = "scheme_mismatch"


MESSAGES = {
    ReferenceStatus.MISSING: (
        "A QR-IBAN requires a 27-digit QR reference. Either supply one "
        "or use a regular IBAN and clear the reference field."
    ),
    ReferenceStatus.MALFORMED: {
        ReferenceScheme.QRR: (
            "The reference does not match a 27-digit QR reference; either "
            "supply one or clear the reference field."
        ),
        ReferenceScheme.SCOR: (
            "The reference is not a valid RF creditor reference (ISO 11649); "
            "either correct it or clear the reference field."
        ),
    },
    ReferenceStatus.CHECKSUM_MISMATCH: {
        ReferenceScheme.QRR: (
            "The check digit of the QR reference is wrong. Please verify "
            "the reference number."
        ),
        ReferenceScheme.SCOR: (
            "The check digits of the RF creditor reference are wrong. Please "
            "verify the reference number."
        ),
    },
    ReferenceStatus.SCHEME_MISMATCH: {
        ReferenceScheme.QRR: (
            "A numeric QR reference can only be used with a QR-IBAN. Use a "
            "QR-IBAN, an RF creditor reference or clear the reference field."
        ),
        ReferenceScheme.SCOR: (
            "A QR-IBAN requires a 27-digit QR reference, RF creditor "
            "references are only allowed with a regular IBAN."
        ),
    },
}


@dataclass(frozen=True)
class ReferenceClassification:
    """Scheme and validity of a payment reference for a given account."""
    scheme: ReferenceScheme
    normalized_reference: str
    status: ReferenceStatus = ReferenceStatus.VALID
    message: str = ""

    @property
    def valid(self) -> bool:
        return self.status is ReferenceStatus.VALID

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'scheme': self.scheme.value,
            'normalized_reference': self.normalized_reference,
            'status': self.status.value,
            'valid': self.valid,
            'message': self.message,
        }


def compact(value: str) -> str:
    """Strip all whitespace and upper-case the value."""
    return re.sub(r'\s', '', value or '').upper()


def qr_check_digit(digits: str) -> int:
    """
    Calculate the mod 10 recursive check digit of a digit string.

    Args:
        digits: The reference without its check digit

    Returns:
        The check digit (0-9)
    """
    carry = 0
    for char in digits:
        carry = MOD10_TABLE[carry][int(char)]
    return (10 - carry) % 10


def is_valid_qr_reference(reference: str) -> bool:
    """Check that a reference is 27 digits with a correct check digit."""
    if not reference or len(reference) != QR_REFERENCE_LENGTH:
        return False
    if not reference.isascii() or not reference.isdigit():
        return False
    return qr_check_digit(reference[:-1]) == int(reference[-1])


def is_qr_iban(account: str) -> bool:
    """
    Check whether an account is a QR-IBAN.

    QR-IBANs are Swiss or Liechtenstein IBANs whose institution id
    (digits 5 to 9) lies in the reserved QR-IID range.
    """
    account = iban.compact(account or '')
    if account[:2] not in IBAN_ALLOWED_COUNTRIES:
        return False
    iid = account[4:9]
    if len(iid) != 5 or not (iid.isascii() and iid.isdigit()):
        return False
    return QR_IID["start"] <= int(iid) <= QR_IID["end"]


def _scheme_for(reference: str, qr_account: bool) -> ReferenceScheme:
    """Reference scheme implied by the shape of a normalized reference."""
    if not reference:
        return ReferenceScheme.NON
    if reference.startswith("RF"):
        return ReferenceScheme.SCOR
    if reference.isascii() and reference.isdigit():
        return ReferenceScheme.QRR
    return ReferenceScheme.QRR if qr_account else ReferenceScheme.SCOR


def _rejected(scheme: ReferenceScheme, reference: str, status: ReferenceStatus) -> ReferenceClassification:
    message = MESSAGES[status]
    if isinstance(message, dict):
        message = message[scheme]
    return ReferenceClassification(scheme, reference, status, message)


def _check_qr_reference(reference: str) -> ReferenceStatus:
    if len(reference) != QR_REFERENCE_LENGTH or not (reference.isascii() and reference.isdigit()):
        return ReferenceStatus.MALFORMED
    if not is_valid_qr_reference(reference):
        return ReferenceStatus.CHECKSUM_MISMATCH
    return ReferenceStatus.VALID


def _check_creditor_reference(reference: str) -> ReferenceStatus:
    try:
        iso11649.validate(reference)
    except InvalidChecksum:
        return ReferenceStatus.CHECKSUM_MISMATCH
    except ValidationError:
        return ReferenceStatus.MALFORMED
    return ReferenceStatus.VALID


def classify_reference(account: str, raw_reference: str) -> ReferenceClassification:
    """
    Classify a payment reference against the creditor account.

    A QR-IBAN requires a QRR reference; a regular IBAN accepts either no
    reference (NON) or an RF creditor reference (SCOR).

    Args:
        account: Creditor IBAN or QR-IBAN
        raw_reference: Reference as entered, whitespace is ignored

    Returns:
        ReferenceClassification with the derived scheme and status
    """
    reference = compact(raw_reference)
    qr_account = is_qr_iban(account)
    scheme = _scheme_for(reference, qr_account)

    if qr_account:
        if scheme is ReferenceScheme.NON:
            return _rejected(scheme, reference, ReferenceStatus.MISSING)
        if scheme is ReferenceScheme.SCOR:
            return _rejected(scheme, reference, ReferenceStatus.SCHEME_MISMATCH)
        status = _check_qr_reference(reference)
    else:
        if scheme is ReferenceScheme.NON:
            return ReferenceClassification(scheme, reference)
        if scheme is ReferenceScheme.QRR:
            return _rejected(scheme, reference, ReferenceStatus.SCHEME_MISMATCH)
        status = _check_creditor_reference(reference)

    if status is not ReferenceStatus.VALID:
        return _rejected(scheme, reference, status)
    return ReferenceClassification(scheme, reference)
