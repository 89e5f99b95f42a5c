# Services module
from .qr_renderer import QRBillRenderer
from .qr_bill import QRBillService, QRBillError, QRBillValidationError

__all__ = ['QRBillRenderer', 'QRBillService', 'QRBillError', 'QRBillValidationError']
