"""Read model of the payment data printed on a Swiss QR-bill."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from .constants import ALLOWED_CURRENCIES
from .reference import compact

Amount = Union[Decimal, float, int, str, None]


class UnsupportedCurrencyError(ValueError):
    """Raised when a currency other than CHF or EUR is given."""


@dataclass(frozen=True)
class Party:
    """Creditor or debtor with a structured address."""
    name: str = ""
    street: str = ""
    house_number: str = ""
    postal_code: str = ""
    city: str = ""
    country: str = ""

    @property
    def is_empty(self) -> bool:
        return not any(
            (value or '').strip()
            for value in (self.name, self.street, self.house_number,
                          self.postal_code, self.city, self.country)
        )

    @classmethod
    def from_dict(cls, data: dict, prefix: str) -> 'Party':
        """Create Party from the prefixed keys of an invoice record."""
        def get(key):
            value = data.get(f"{prefix}{key}")
            return "" if value is None else str(value)

        return cls(
            name=get('Name'),
            street=get('Street'),
            house_number=get('HouseNr'),
            postal_code=get('Zip'),
            city=get('City'),
            country=get('Country'),
        )

    def to_dict(self, prefix: str) -> dict:
        """Convert to prefixed invoice record keys."""
        return {
            f"{prefix}Name": self.name,
            f"{prefix}Street": self.street,
            f"{prefix}HouseNr": self.house_number,
            f"{prefix}Zip": self.postal_code,
            f"{prefix}City": self.city,
            f"{prefix}Country": self.country,
        }


def to_decimal(amount: Amount) -> Optional[Decimal]:
    """
    Convert an amount to Decimal.

    Returns None for an absent amount (None or blank string).

    Raises:
        ValueError: If the amount is not a finite number
    """
    if amount is None:
        return None
    if isinstance(amount, bool):
        raise ValueError("Amount must be a number")
    if isinstance(amount, str):
        amount = amount.strip()
        if not amount:
            return None
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except InvalidOperation:
        raise ValueError(f"Amount '{amount}' is not a number") from None
    if not value.is_finite():
        raise ValueError("Amount must be a finite number")
    return value


@dataclass(frozen=True)
class PaymentRecord:
    """Payment data of one invoice, as consumed by the QR-bill encoder."""
    account: str
    creditor: Party
    currency: str = "CHF"
    amount: Amount = None
    debtor: Party = field(default_factory=Party)
    reference: str = ""
    message: str = ""

    def __post_init__(self):
        object.__setattr__(self, 'account', compact(self.account))
        currency = (self.currency or '').strip().upper()
        if currency not in ALLOWED_CURRENCIES:
            raise UnsupportedCurrencyError(
                f"Currency can only be one of: {', '.join(ALLOWED_CURRENCIES)} (got '{self.currency}')"
            )
        object.__setattr__(self, 'currency', currency)

    @property
    def has_debtor(self) -> bool:
        return not self.debtor.is_empty

    def to_dict(self) -> dict:
        """Convert to invoice record keys."""
        data = {'creditorIban': self.account}
        data.update(self.creditor.to_dict('creditor'))
        data.update(self.debtor.to_dict('debtor'))
        data.update({
            'total': '' if self.amount is None else self.amount,
            'currency': self.currency,
            'reference': self.reference,
            'unstructuredMessage': self.message,
        })
        return data

    @classmethod
    def from_invoice(cls, data: dict) -> 'PaymentRecord':
        """
        Create PaymentRecord from an invoice JSON record.

        Args:
            data: Invoice record with camelCase keys (creditorIban,
                creditorName, ..., debtorName, ..., total, currency,
                reference, unstructuredMessage)
        """
        total = data.get('total')
        if total == '':
            total = None
        return cls(
            account=data.get('creditorIban') or '',
            creditor=Party.from_dict(data, 'creditor'),
            debtor=Party.from_dict(data, 'debtor'),
            amount=total,
            currency=data.get('currency') or 'CHF',
            reference=data.get('reference') or '',
            message=data.get('unstructuredMessage') or '',
        )
