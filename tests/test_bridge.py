"""Tests for the frontend API bridge."""

import pytest

from backoffice.api.bridge import API
from backoffice.services.qr_bill import QRBillService
from backoffice.services.qr_renderer import QRBillRenderer

from .conftest import CREDITOR_REFERENCE, IBAN, QR_IBAN, QR_REFERENCE


@pytest.fixture
def api():
    return API(QRBillService(renderer=QRBillRenderer(box_size=2)))


class TestQRBillBridge:
    """Test the {success, data, error} responses."""

    def test_validate_success(self, api, invoice):
        response = api.qrbill_validate(invoice)
        assert response['success'] is True
        assert response['error'] is None
        assert response['data']['reference']['scheme'] == 'QRR'

    def test_validate_failure(self, api, invoice):
        invoice['reference'] = CREDITOR_REFERENCE
        response = api.qrbill_validate(invoice)
        assert response['success'] is False
        assert response['data']['reference']['status'] == 'scheme_mismatch'
        assert response['error']

    def test_validate_unsupported_currency(self, api, invoice):
        invoice['currency'] = 'USD'
        response = api.qrbill_validate(invoice)
        assert response['success'] is False
        assert 'CHF, EUR' in response['error']

    def test_classify_reference(self, api):
        response = api.qrbill_classify_reference(QR_IBAN, QR_REFERENCE)
        assert response == {
            'success': True,
            'data': {
                'scheme': 'QRR',
                'normalized_reference': QR_REFERENCE,
                'status': 'valid',
                'valid': True,
                'message': '',
            },
            'error': None,
        }

    def test_classify_reference_mismatch(self, api):
        response = api.qrbill_classify_reference(IBAN, QR_REFERENCE)
        assert response['success'] is False
        assert response['data']['status'] == 'scheme_mismatch'

    def test_payload(self, api, invoice):
        response = api.qrbill_payload(invoice)
        assert response['success'] is True
        assert response['data']['payload'].split('\n')[3] == QR_IBAN

    def test_generate(self, api, invoice):
        response = api.qrbill_generate(invoice)
        assert response['success'] is True
        assert response['data']['qr_image'].startswith('data:image/png;base64,')

    def test_generate_blocked(self, api, invoice):
        invoice['creditorName'] = ''
        response = api.qrbill_generate(invoice)
        assert response['success'] is False
        assert response['error'] == 'Creditor name missing'
        assert response['data']['checks']['creditor_complete'] is False

    def test_generate_with_broken_record(self, api):
        response = api.qrbill_generate(None)
        assert response['success'] is False
        assert response['data'] is None
