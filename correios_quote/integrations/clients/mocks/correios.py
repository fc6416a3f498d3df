"""Mock Correios client.

Returns carrier-shaped `cServico` answers without touching the network, and
keeps every parameter set it received in `calls` so tests can check what would
have been sent. Pass `error_code`/`error_message` to simulate a carrier refusal.
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, Mapping, Optional

from correios_quote.integrations.contracts.interfaces import NO_ERROR_CODE, YES, QuoteProvider, RawQuoteResponse

logger = logging.getLogger(__name__)

_DEADLINES = {"04014": 3, "04510": 8, "04782": 2, "04790": 1, "04804": 1}
_CENTS = Decimal("0.01")


def _brl(value: Decimal) -> str:
    return str(value.quantize(_CENTS, rounding=ROUND_HALF_UP)).replace(".", ",")


def _number(value: str) -> Decimal:
    try:
        return Decimal(value or "0")
    except ArithmeticError:
        return Decimal("0")


def build_default_mock(params: Mapping[str, str]) -> Dict[str, str]:
    service_code = params.get("nCdServico", "")
    weight = _number(params.get("nVlPeso", "0"))
    base = Decimal("18.50") + Decimal("6.40") * math.ceil(weight)
    hand_delivery = Decimal("7.00") if params.get("sCdMaoPropria") == YES else Decimal("0")
    receipt_notice = Decimal("5.50") if params.get("sCdAvisoRecebimento") == YES else Decimal("0")
    declared = _number(params.get("nVlValorDeclarado", "0")) * Decimal("0.015")

    return {
        "Codigo": service_code,
        "Valor": _brl(base + hand_delivery + receipt_notice + declared),
        "PrazoEntrega": str(_DEADLINES.get(service_code, 5)),
        "ValorMaoPropria": _brl(hand_delivery),
        "ValorAvisoRecebimento": _brl(receipt_notice),
        "ValorValorDeclarado": _brl(declared),
        "EntregaDomiciliar": "S",
        "EntregaSabado": "N",
        "Erro": NO_ERROR_CODE,
        "MsgErro": "",
        "ValorSemAdicionais": _brl(base),
        "obsFim": "",
    }


class MockCorreiosProvider(QuoteProvider):
    def __init__(
        self,
        error_code: str = NO_ERROR_CODE,
        error_message: str = "",
        fields: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.error_code = error_code
        self.error_message = error_message
        self.fields = dict(fields or {})
        self.calls: List[Dict[str, str]] = []

    def fetch_quote(self, params: Mapping[str, str]) -> RawQuoteResponse:
        self.calls.append(dict(params))
        logger.info("[MOCK] CalcPrecoPrazo for service %s", params.get("nCdServico"))

        if self.error_code != NO_ERROR_CODE:
            fields = {
                "Codigo": params.get("nCdServico", ""),
                "Erro": self.error_code,
                "MsgErro": self.error_message,
            }
            return RawQuoteResponse(error_code=self.error_code, error_message=self.error_message, fields=fields)

        fields = build_default_mock(params)
        fields.update(self.fields)
        return RawQuoteResponse(error_code=fields["Erro"], error_message=fields["MsgErro"], fields=fields)
