"""Pytest fixtures for the quotation pipeline tests."""

import pytest

from correios_quote.error_messages import load_error_messages
from correios_quote.integrations.clients.mocks.correios import MockCorreiosProvider
from correios_quote.integrations.policy.quotation_service import QuotationService


@pytest.fixture
def localizer():
    """Packaged pt-BR error message table."""
    return load_error_messages()


@pytest.fixture
def mock_provider():
    return MockCorreiosProvider(fields={"Valor": "24,90", "PrazoEntrega": "4"})


@pytest.fixture
def service(mock_provider, localizer):
    return QuotationService(provider=mock_provider, localize=localizer)


@pytest.fixture
def sample_params():
    """SEDEX box from Limeira to Diadema, no contract."""
    return {
        "service_code": "04014",
        "origin_postal_code": "13631009",
        "destination_postal_code": "09951420",
        "weight": "1.5",
        "package_format": 1,
        "length": 18,
        "height": 10,
        "width": 10,
        "diameter": 0,
    }
