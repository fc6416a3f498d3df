"""Coerce raw quotation input into a QuoteRequest.

Input arrives from forms, query strings and scripts, so every field may be a
string, a number or missing. Nothing here raises: text is sanitized, decimals
accept either `.` or `,`, and numbers that cannot be read become 0 (logged).
Rejecting bad data is the validator's job.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Mapping, Optional

from correios_quote.integrations.contracts.interfaces import NO, YES, QuoteRequest

from .postal_code import PostalCodeCanonicalizer, canonicalize_postal_code

logger = logging.getLogger(__name__)

_TAGS = re.compile(r"<[^>]*>")


def _as_str(v: Any) -> str:
    return "" if v is None else str(v)


def sanitize_text(value: Any) -> str:
    """Drop markup and non-printable characters, then trim."""
    text = _TAGS.sub("", _as_str(value))
    return "".join(ch for ch in text if ch.isprintable()).strip()


def _optional_text(value: Any) -> Optional[str]:
    return sanitize_text(value) or None


def _flag(value: Any) -> str:
    if isinstance(value, bool):
        return YES if value else NO
    return YES if sanitize_text(value).upper() == YES else NO


def parse_decimal(value: Any, field: str) -> float:
    if value is None:
        return 0.0
    try:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            number = float(value)
        else:
            text = sanitize_text(value).replace(",", ".")
            if not text:
                return 0.0
            number = float(text)
    except (OverflowError, ValueError):
        logger.warning("Could not read %s as a number; using 0", field)
        return 0.0
    if not math.isfinite(number) or number < 0:
        logger.warning("Out of range %s=%r; using 0", field, number)
        return 0.0
    return number


def parse_int(value: Any, field: str) -> int:
    return int(parse_decimal(value, field))


def normalize_quote_parameters(
    params: Mapping[str, Any],
    canonicalize: PostalCodeCanonicalizer = canonicalize_postal_code,
) -> QuoteRequest:
    """Build a QuoteRequest from a loosely-typed parameter bag.

    Recognised keys: service_code, origin_postal_code, destination_postal_code,
    weight, package_format, length, height, width, diameter, company_code,
    password, hand_delivery, declared_value, receipt_notice.
    """
    return QuoteRequest(
        service_code=sanitize_text(params.get("service_code")),
        origin_postal_code=canonicalize(sanitize_text(params.get("origin_postal_code"))),
        destination_postal_code=canonicalize(sanitize_text(params.get("destination_postal_code"))),
        weight_kg=parse_decimal(params.get("weight"), "weight"),
        package_format=parse_int(params.get("package_format"), "package_format"),
        length_cm=parse_decimal(params.get("length"), "length"),
        height_cm=parse_decimal(params.get("height"), "height"),
        width_cm=parse_decimal(params.get("width"), "width"),
        diameter_cm=parse_decimal(params.get("diameter"), "diameter"),
        company_code=_optional_text(params.get("company_code")),
        password=_optional_text(params.get("password")),
        hand_delivery=_flag(params.get("hand_delivery", NO)),
        declared_value=parse_decimal(params.get("declared_value"), "declared_value"),
        receipt_notice=_flag(params.get("receipt_notice", NO)),
    )
