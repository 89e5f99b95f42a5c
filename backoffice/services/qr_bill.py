"""QR-bill generation service used by the invoice editor."""

import logging
from typing import Optional, Union

from ..core.payload import encode
from ..core.payment_record import PaymentRecord
from ..core.validator import QRBillValidator, ValidationResult
from .qr_renderer import QRBillRenderer

logger = logging.getLogger(__name__)


class QRBillError(Exception):
    """Base exception for QR-bill generation."""


class QRBillValidationError(QRBillError):
    """Raised when an invoice cannot be turned into a payable QR-bill."""

    def __init__(self, result: ValidationResult):
        super().__init__(result.error_message)
        self.result = result


class QRBillService:
    """Validate, encode and render the QR code of an invoice draft."""

    def __init__(
        self,
        validator: Optional[QRBillValidator] = None,
        renderer: Optional[QRBillRenderer] = None
    ):
        self.validator = validator or QRBillValidator()
        self.renderer = renderer or QRBillRenderer()

    @staticmethod
    def to_record(invoice: Union[PaymentRecord, dict]) -> PaymentRecord:
        """Accept either a PaymentRecord or an invoice JSON record."""
        if isinstance(invoice, PaymentRecord):
            return invoice
        return PaymentRecord.from_invoice(invoice)

    def validate(self, invoice: Union[PaymentRecord, dict]) -> ValidationResult:
        """Check whether a payable QR-bill can be generated for an invoice."""
        return self.validator.validate(self.to_record(invoice))

    def generate_payload(self, invoice: Union[PaymentRecord, dict]) -> str:
        """
        Generate the SPC payload of an invoice.

        Raises:
            QRBillValidationError: If the invoice fails validation
        """
        record = self.to_record(invoice)
        result = self.validator.validate(record)
        if not result.valid:
            logger.warning("QR-bill generation blocked: %s", result.error_message)
            raise QRBillValidationError(result)

        payload = encode(record)
        logger.debug("Encoded QR-bill payload for account %s", record.account)
        return payload

    def generate_for_invoice(self, invoice: Union[PaymentRecord, dict]) -> tuple[str, str]:
        """
        Generate QR-bill payload and image for an invoice.

        Args:
            invoice: PaymentRecord or invoice JSON record

        Returns:
            Tuple of (payload, png_data_url)

        Raises:
            QRBillValidationError: If the invoice fails validation
        """
        payload = self.generate_payload(invoice)
        return payload, self.renderer.generate_data_url(payload)
