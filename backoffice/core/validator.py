"""Pre-flight validation of payment records before QR-bill generation."""

import logging
from dataclasses import dataclass
from typing import Optional

from stdnum import iban

from .constants import IBAN_ALLOWED_COUNTRIES, MAX_AMOUNT
from .payment_record import PaymentRecord, to_decimal
from .reference import ReferenceClassification, classify_reference

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of QR-bill validation."""
    valid: bool
    error_message: Optional[str] = None
    checks: Optional[dict] = None
    reference: Optional[ReferenceClassification] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'valid': self.valid,
            'error_message': self.error_message,
            'checks': dict(self.checks or {}),
            'reference': self.reference.to_dict() if self.reference else None,
        }


class QRBillValidator:
    """Validate payment records so that only payable QR-bills are produced."""

    def validate(self, record: PaymentRecord) -> ValidationResult:
        """
        Validate a payment record.

        Performs the following checks:
        1. Creditor account is a valid CH/LI IBAN
        2. Creditor name, postal code, city and country are present
        3. Amount is absent or a non-negative number with two decimals
        4. Reference matches the account (QRR for QR-IBAN, SCOR/NON otherwise)

        Args:
            record: The payment record to validate

        Returns:
            ValidationResult with validation status and details
        """
        checks = {
            'account_valid': False,
            'creditor_complete': False,
            'amount_valid': False,
            'reference_valid': False,
        }

        # Step 1: Account
        if not record.account:
            return self._fail("The creditor IBAN is missing", checks)
        if not iban.is_valid(record.account):
            return self._fail(f"The creditor IBAN '{record.account}' is not valid", checks)
        if record.account[:2] not in IBAN_ALLOWED_COUNTRIES:
            return self._fail(
                f"The creditor IBAN must start with: {', '.join(IBAN_ALLOWED_COUNTRIES)}",
                checks
            )
        checks['account_valid'] = True

        # Step 2: Creditor address
        creditor = record.creditor
        missing = [
            label for label, value in (
                ('name', creditor.name),
                ('postal code', creditor.postal_code),
                ('city', creditor.city),
            )
            if not (value or '').strip()
        ]
        if missing:
            return self._fail(f"Creditor {', '.join(missing)} missing", checks)
        country = (creditor.country or '').strip()
        if len(country) != 2 or not country.isalpha():
            return self._fail("The creditor country must be a two-letter code", checks)
        checks['creditor_complete'] = True

        # Step 3: Amount
        error = self._check_amount(record.amount)
        if error:
            return self._fail(error, checks)
        checks['amount_valid'] = True

        # Step 4: Reference
        classification = classify_reference(record.account, record.reference)
        if not classification.valid:
            return self._fail(classification.message, checks, classification)
        checks['reference_valid'] = True

        return ValidationResult(valid=True, checks=checks, reference=classification)

    @staticmethod
    def _check_amount(amount) -> Optional[str]:
        """Return an error message for an unusable amount, None if valid."""
        try:
            value = to_decimal(amount)
        except ValueError as e:
            return str(e)
        if value is None:
            return None
        if value < 0:
            return "The amount cannot be negative"
        if value > MAX_AMOUNT:
            return "The amount cannot be larger than 999'999'999.99"
        if value * 100 % 1:
            return "The amount cannot have more than two decimals"
        return None

    @staticmethod
    def _fail(
        message: str,
        checks: dict,
        reference: Optional[ReferenceClassification] = None
    ) -> ValidationResult:
        logger.debug("QR-bill validation failed: %s", message)
        return ValidationResult(
            valid=False,
            error_message=message,
            checks=checks,
            reference=reference
        )
