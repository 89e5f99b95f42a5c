"""Tests for QR-bill image rendering and the generation service."""

import base64
from io import BytesIO

import pytest
from PIL import Image

from backoffice.core.payload import encode
from backoffice.services.qr_bill import QRBillError, QRBillService, QRBillValidationError
from backoffice.services.qr_renderer import QRBillRenderer

from .conftest import QR_REFERENCE

RED = (255, 0, 0)
WHITE = (255, 255, 255)


@pytest.fixture
def service():
    return QRBillService(renderer=QRBillRenderer(box_size=4, border=4))


class TestQRBillRenderer:
    """Test QR image generation with the Swiss cross."""

    def test_png_output(self, qr_record, service):
        png = service.renderer.generate_qr_image(encode(qr_record))
        assert png.startswith(b"\x89PNG")
        img = Image.open(BytesIO(png))
        assert img.size[0] == img.size[1]

    def test_swiss_cross_overlay(self):
        renderer = QRBillRenderer(box_size=10, border=4)
        img = renderer.make_image("SPC\n0200\n1")
        width, height = img.size
        cross_size = round(width * renderer.cross_ratio)
        x = (width - cross_size) // 2
        y = (height - cross_size) // 2

        # red square corners, white cross center
        assert img.getpixel((x + 1, y + 1)) == RED
        assert img.getpixel((x + cross_size - 2, y + cross_size - 2)) == RED
        assert img.getpixel((width // 2, height // 2)) == WHITE
        assert img.getpixel((width // 2, y + 1)) == WHITE
        assert img.getpixel((x + 1, height // 2)) == WHITE

    def test_quiet_zone_is_white(self):
        img = QRBillRenderer(box_size=5, border=4).make_image("SPC")
        assert img.getpixel((0, 0)) == WHITE
        assert img.getpixel((19, 19)) == WHITE

    def test_data_url(self):
        url = QRBillRenderer(box_size=2).generate_data_url("SPC")
        assert url.startswith("data:image/png;base64,")
        png = base64.b64decode(url.split(",", 1)[1])
        assert png.startswith(b"\x89PNG")

    @pytest.mark.parametrize("ratio", [0, 1, -0.1])
    def test_invalid_cross_ratio(self, ratio):
        with pytest.raises(ValueError, match="cross_ratio"):
            QRBillRenderer(cross_ratio=ratio)


class TestQRBillService:
    """Test validate-then-encode generation."""

    def test_generate_payload_from_invoice_dict(self, service, invoice):
        payload = service.generate_payload(invoice)
        lines = payload.split("\n")
        assert len(lines) == 31
        assert lines[17] == "199.95"
        assert lines[27] == QR_REFERENCE

    def test_generate_payload_from_record(self, service, qr_record):
        assert service.generate_payload(qr_record).startswith("SPC\n0200\n1\n")

    def test_generate_for_invoice(self, service, invoice):
        payload, data_url = service.generate_for_invoice(invoice)
        assert payload.split("\n")[29] == "EPD"
        assert data_url.startswith("data:image/png;base64,")

    def test_invalid_reference_blocks_generation(self, service, invoice):
        invoice['reference'] = ''
        with pytest.raises(QRBillValidationError, match="27-digit QR reference") as exc_info:
            service.generate_for_invoice(invoice)
        assert exc_info.value.result.checks['amount_valid']
        assert isinstance(exc_info.value, QRBillError)

    def test_open_amount_is_allowed(self, service, invoice):
        invoice['total'] = ''
        assert service.generate_payload(invoice).split("\n")[17] == ""

    def test_validate(self, service, invoice):
        assert service.validate(invoice).valid
        invoice['creditorIban'] = ''
        assert not service.validate(invoice).valid
