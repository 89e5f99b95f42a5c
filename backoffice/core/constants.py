"""Constants of the Swiss Payments Code (SPC) standard."""

from decimal import Decimal

QR_TYPE = "SPC"
VERSION = "0200"
CODING = "1"  # Latin character set
TRAILER = "EPD"
ADDRESS_TYPE_STRUCTURED = "S"

ALLOWED_CURRENCIES = ('CHF', 'EUR')
IBAN_ALLOWED_COUNTRIES = ('CH', 'LI')

# Institution id range (IBAN digits 5-9) reserved for QR-IBANs
QR_IID = {"start": 30000, "end": 31999}

QR_REFERENCE_LENGTH = 27
MAX_AMOUNT = Decimal("999999999.99")

# Maximum field lengths
MAX_NAME = 70
MAX_STREET = 70
MAX_HOUSE_NUMBER = 16
MAX_POSTAL_CODE = 16
MAX_CITY = 35
MAX_COUNTRY = 2
MAX_MESSAGE = 140

PAYLOAD_LINE_COUNT = 31

# Mod 10 recursive carry table: MOD10_TABLE[carry][digit] -> next carry
MOD10_TABLE = (
    (0, 9, 4, 6, 8, 2, 7, 1, 3, 5),
    (9, 4, 6, 8, 2, 7, 1, 3, 5, 0),
    (4, 6, 8, 2, 7, 1, 3, 5, 0, 9),
    (6, 8, 2, 7, 1, 3, 5, 0, 9, 4),
    (8, 2, 7, 1, 3, 5, 0, 9, 4, 6),
    (2, 7, 1, 3, 5, 0, 9, 4, 6, 8),
    (7, 1, 3, 5, 0, 9, 4, 6, 8, 2),
    (1, 3, 5, 0, 9, 4, 6, 8, 2, 7),
    (3, 5, 0, 9, 4, 6, 8, 2, 7, 1),
    (5, 0, 9, 4, 6, 8, 2, 7, 1, 3),
)
