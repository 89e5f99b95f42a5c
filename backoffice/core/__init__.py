# Core module
from .payload import encode, parse
from .payment_record import Party, PaymentRecord, UnsupportedCurrencyError
from .reference import (
    ReferenceClassification,
    ReferenceScheme,
    ReferenceStatus,
    classify_reference,
    is_qr_iban,
    is_valid_qr_reference,
)
from .validator import QRBillValidator, ValidationResult

__all__ = [
    'encode', 'parse', 'Party', 'PaymentRecord', 'UnsupportedCurrencyError',
    'ReferenceClassification', 'ReferenceScheme', 'ReferenceStatus',
    'classify_reference', 'is_qr_iban', 'is_valid_qr_reference',
    'QRBillValidator', 'ValidationResult',
]
