"""API bridge for pywebview - exposes QR-bill functionality to the frontend."""

import logging
from typing import Any

from ..core.reference import classify_reference
from ..services.qr_bill import QRBillService, QRBillValidationError

logger = logging.getLogger(__name__)


class API:
    """
    API class exposed to frontend via pywebview.

    All methods return: {success: bool, data?: any, error?: string}
    """

    def __init__(self, qr_bill: QRBillService = None):
        """Initialize API with the QR-bill service."""
        self.qr_bill = qr_bill or QRBillService()

    def _response(self, success: bool, data: Any = None, error: str = None) -> dict:
        """Create standardized API response."""
        return {'success': success, 'data': data, 'error': error}

    # ============ QR-bill ============

    def qrbill_validate(self, invoice: dict) -> dict:
        """Validate an invoice draft before QR/PDF generation."""
        try:
            result = self.qr_bill.validate(invoice)
            return self._response(result.valid, result.to_dict(), result.error_message)
        except Exception as e:
            logger.exception("QR-bill validation failed")
            return self._response(False, error=str(e))

    def qrbill_classify_reference(self, account: str, reference: str) -> dict:
        """Classify a payment reference for the reference input field."""
        try:
            classification = classify_reference(account, reference)
            return self._response(
                classification.valid,
                classification.to_dict(),
                classification.message or None
            )
        except Exception as e:
            logger.exception("Reference classification failed")
            return self._response(False, error=str(e))

    def qrbill_payload(self, invoice: dict) -> dict:
        """Get the SPC payload of an invoice draft."""
        try:
            payload = self.qr_bill.generate_payload(invoice)
            return self._response(True, {'payload': payload})
        except QRBillValidationError as e:
            return self._response(False, e.result.to_dict(), str(e))
        except Exception as e:
            logger.exception("QR-bill payload generation failed")
            return self._response(False, error=str(e))

    def qrbill_generate(self, invoice: dict) -> dict:
        """
        Generate the QR-bill for an invoice draft.

        Returns the payload and the QR image as PNG data URL, or the
        validation error that blocks generation.
        """
        try:
            payload, qr_image = self.qr_bill.generate_for_invoice(invoice)
            return self._response(True, {'payload': payload, 'qr_image': qr_image})
        except QRBillValidationError as e:
            return self._response(False, e.result.to_dict(), str(e))
        except Exception as e:
            logger.exception("QR-bill generation failed")
            return self._response(False, error=str(e))
