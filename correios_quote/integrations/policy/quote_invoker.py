"""
Quote invoker.

Serializes a validated QuoteRequest into the CalcPrecoPrazo parameter set and
hands it to whichever QuoteProvider is wired in. One call per request; retries
are out of scope, and TransportError from the provider propagates unchanged.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict

from correios_quote.integrations.contracts.interfaces import QuoteProvider, QuoteRequest, RawQuoteResponse

logger = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """Render 18.0 as "18", 1.5 as "1.5" and 1e-05 as "0.00001".

    Uses the shortest exact representation of the float, never exponent notation.
    """
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text or "0"


def build_provider_params(request: QuoteRequest) -> Dict[str, str]:
    return {
        "nCdEmpresa": request.company_code or "",
        "sDsSenha": request.password or "",
        "nCdServico": request.service_code,
        "sCepOrigem": request.origin_postal_code,
        "sCepDestino": request.destination_postal_code,
        "nVlPeso": format_number(request.weight_kg),
        "nCdFormato": str(int(request.package_format)),
        "nVlComprimento": format_number(request.length_cm),
        "nVlAltura": format_number(request.height_cm),
        "nVlLargura": format_number(request.width_cm),
        "nVlDiametro": format_number(request.diameter_cm),
        "sCdMaoPropria": request.hand_delivery,
        "nVlValorDeclarado": format_number(request.declared_value),
        "sCdAvisoRecebimento": request.receipt_notice,
    }


class QuoteInvoker:
    def __init__(self, provider: QuoteProvider) -> None:
        self.provider = provider

    def invoke(self, request: QuoteRequest) -> RawQuoteResponse:
        params = build_provider_params(request)
        logger.info(
            "Requesting quote: service=%s %s -> %s weight=%s format=%s",
            params["nCdServico"],
            params["sCepOrigem"],
            params["sCepDestino"],
            params["nVlPeso"],
            params["nCdFormato"],
        )
        response = self.provider.fetch_quote(params)
        logger.info("Carrier answered with error code %r", response.error_code)
        return response
