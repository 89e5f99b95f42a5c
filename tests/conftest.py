"""Shared fixtures for the QR-bill tests."""

import pytest

from backoffice.core.payment_record import Party, PaymentRecord

QR_IBAN = "CH4431999123000889012"
IBAN = "CH9300762011623852957"
QR_REFERENCE = "210000000003139471430009017"
CREDITOR_REFERENCE = "RF18539007547034"


@pytest.fixture
def creditor():
    return Party(
        name="Muster Design GmbH",
        street="Bahnhofstrasse",
        house_number="12",
        postal_code="8001",
        city="Zürich",
        country="CH",
    )


@pytest.fixture
def debtor():
    return Party(
        name="Pia Rutschmann",
        street="Marktgasse",
        house_number="28",
        postal_code="9400",
        city="Rorschach",
        country="CH",
    )


@pytest.fixture
def qr_record(creditor, debtor):
    """Record for a QR-IBAN with a QRR reference."""
    return PaymentRecord(
        account=QR_IBAN,
        creditor=creditor,
        debtor=debtor,
        amount=199.95,
        currency="CHF",
        reference=QR_REFERENCE,
        message="2024-001",
    )


@pytest.fixture
def plain_record(creditor):
    """Record for a regular IBAN without reference and without debtor."""
    return PaymentRecord(account=IBAN, creditor=creditor, amount="50", currency="EUR")


@pytest.fixture
def invoice():
    """Invoice JSON record as stored by the record store."""
    return {
        'id': 'inv-2024-001',
        'createdAt': '2024-03-01T09:00:00.000Z',
        'creditorIban': 'CH44 3199 9123 0008 8901 2',
        'creditorName': 'Muster Design GmbH',
        'creditorStreet': 'Bahnhofstrasse',
        'creditorHouseNr': '12',
        'creditorZip': '8001',
        'creditorCity': 'Zürich',
        'creditorCountry': 'CH',
        'debtorName': 'Pia Rutschmann',
        'debtorStreet': 'Marktgasse',
        'debtorHouseNr': '28',
        'debtorZip': '9400',
        'debtorCity': 'Rorschach',
        'debtorCountry': 'CH',
        'total': 199.95,
        'subtotal': 185.65,
        'vatAmount': 14.30,
        'vatEnabled': True,
        'currency': 'CHF',
        'reference': '21 00000 00003 13947 14300 09017',
        'unstructuredMessage': '2024-001',
        'items': [],
        'status': 'open',
        'paidAt': None,
    }
