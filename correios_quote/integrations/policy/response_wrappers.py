from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, Optional

from pydantic import ValidationError

from correios_quote.integrations.contracts.interfaces import (
    NO_ERROR_CODE,
    FailureKind,
    RawQuoteResponse,
    ValidationCode,
)
from correios_quote.integrations.contracts.quotes import QuoteResult
from correios_quote.integrations.errors import MalformedResponseError, TransportError

Localizer = Callable[[str], str]

VALIDATION_MESSAGE = "Erro na validação dos dados"
TRANSPORT_ERROR_CODE = "transport_error"

_NUMERIC_CODE = re.compile(r"^[+-]?\d+$")


def is_no_error(code: str) -> bool:
    """Codes such as "0" and "000" both mean the carrier priced the parcel."""
    value = (code or "").strip()
    if value == NO_ERROR_CODE:
        return True
    return bool(_NUMERIC_CODE.match(value)) and int(value) == 0


def map_provider_response(raw: RawQuoteResponse, localize: Localizer) -> QuoteResult:
    if not is_no_error(raw.error_code):
        return QuoteResult.failure(
            FailureKind.PROVIDER,
            code=raw.error_code,
            raw_message=raw.error_message,
            friendly_message=localize(raw.error_code),
        )

    fields = raw.fields
    try:
        return QuoteResult.success(
            service_code=str(_first_non_empty(fields, "Codigo")),
            price=_coerce_amount(_first_non_empty(fields, "Valor"), "Valor"),
            deadline_days=_coerce_days(_first_non_empty(fields, "PrazoEntrega")),
            hand_delivery_fee=_coerce_amount(_first_non_empty(fields, "ValorMaoPropria", default="0"), "ValorMaoPropria"),
            receipt_notice_fee=_coerce_amount(
                _first_non_empty(fields, "ValorAvisoRecebimento", default="0"), "ValorAvisoRecebimento"
            ),
            declared_value_fee=_coerce_amount(
                _first_non_empty(fields, "ValorValorDeclarado", default="0"), "ValorValorDeclarado"
            ),
            price_without_extras=_optional_amount(fields.get("ValorSemAdicionais"), "ValorSemAdicionais"),
            home_delivery=_yes_no(fields.get("EntregaDomiciliar")),
            saturday_delivery=_yes_no(fields.get("EntregaSabado")),
            remarks=str(fields.get("obsFim") or "").strip(),
        )
    except ValidationError as exc:
        raise MalformedResponseError(f"Quote response validation failed: {exc}", payload=dict(fields)) from exc


def map_validation_error(code: ValidationCode, localize: Localizer) -> QuoteResult:
    return QuoteResult.failure(
        FailureKind.VALIDATION,
        code=code.value,
        raw_message=VALIDATION_MESSAGE,
        friendly_message=localize(code.value),
    )


def map_transport_error(exc: TransportError, localize: Localizer) -> QuoteResult:
    return QuoteResult.failure(
        FailureKind.TRANSPORT,
        code=TRANSPORT_ERROR_CODE,
        raw_message=str(exc),
        friendly_message=localize(TRANSPORT_ERROR_CODE),
    )


def _first_non_empty(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        value = data.get(key)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    if default is not None:
        return default
    raise MalformedResponseError(f"Missing required field. Checked keys: {', '.join(keys)}", payload=dict(data))


def _coerce_amount(value: Any, label: str) -> Decimal:
    # Carrier amounts come as "1.234,56"; thousands dots go, the comma becomes the separator.
    text = str(value).strip()
    if "," in text:
        text = text.replace(".", "").replace(",", ".")
    try:
        amount = Decimal(text)
    except InvalidOperation as exc:
        raise MalformedResponseError(f"Invalid {label}: {value!r}") from exc
    if not amount.is_finite() or amount < 0:
        raise MalformedResponseError(f"{label} must be a non-negative amount; got {value!r}.")
    return amount


def _optional_amount(value: Any, label: str) -> Optional[Decimal]:
    if value is None or not str(value).strip():
        return None
    return _coerce_amount(value, label)


def _coerce_days(value: Any) -> int:
    try:
        days = int(str(value).strip())
    except ValueError as exc:
        raise MalformedResponseError(f"Invalid PrazoEntrega: {value!r}") from exc
    if days < 0:
        raise MalformedResponseError(f"PrazoEntrega must be >= 0; got {days}.")
    return days


def _yes_no(value: Any) -> Optional[bool]:
    text = str(value or "").strip().upper()
    if text == "S":
        return True
    if text == "N":
        return False
    return None
