"""
Correios price & deadline quotation client.

Typical use:

    from correios_quote import QuotationService
    from correios_quote.integrations.clients.real_http.correios import CorreiosHttpProvider

    result = QuotationService(CorreiosHttpProvider()).quote({
        "service_code": "04014",
        "origin_postal_code": "13631-009",
        "destination_postal_code": "09951-420",
        "weight": "1,5",
        "package_format": 1,
        "length": 18, "height": 10, "width": 10, "diameter": 0,
    })
    result.to_dict()
"""
from .integrations.policy.quotation_service import QuotationService

__all__ = ["QuotationService"]
