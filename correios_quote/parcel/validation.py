"""Carrier business rules checked before a quote is requested.

Rules run in a fixed order and the first one that fails is reported; the
remaining rules are not evaluated. A request that passes every rule is
returned with the envelope correction applied (envelopes have no height).
"""

from __future__ import annotations

import dataclasses
from typing import AbstractSet, Callable, Optional, Tuple

from correios_quote.integrations.contracts.interfaces import (
    PUBLIC_SERVICE_CODES,
    PackageFormat,
    QuoteRequest,
    ValidationCode,
)

ENVELOPE_MAX_WEIGHT_KG = 1.0

Rule = Callable[[QuoteRequest], Optional[ValidationCode]]


def contract_rule(public_service_codes: AbstractSet[str]) -> Rule:
    def check(request: QuoteRequest) -> Optional[ValidationCode]:
        if not request.company_code and request.service_code not in public_service_codes:
            return ValidationCode.MISSING_CONTRACT_CREDENTIALS
        return None

    return check


def roll_diameter_rule(request: QuoteRequest) -> Optional[ValidationCode]:
    if request.package_format == PackageFormat.ROLL and request.diameter_cm == 0:
        return ValidationCode.DIAMETER_REQUIRED
    return None


def envelope_weight_rule(request: QuoteRequest) -> Optional[ValidationCode]:
    if request.package_format == PackageFormat.ENVELOPE and request.weight_kg > ENVELOPE_MAX_WEIGHT_KG:
        return ValidationCode.ENVELOPE_WEIGHT_EXCEEDED
    return None


def origin_rule(request: QuoteRequest) -> Optional[ValidationCode]:
    if not request.origin_postal_code:
        return ValidationCode.ORIGIN_POSTAL_CODE_REQUIRED
    return None


def destination_rule(request: QuoteRequest) -> Optional[ValidationCode]:
    if not request.destination_postal_code:
        return ValidationCode.DESTINATION_POSTAL_CODE_REQUIRED
    return None


def build_rules(public_service_codes: AbstractSet[str] = PUBLIC_SERVICE_CODES) -> Tuple[Rule, ...]:
    return (
        contract_rule(public_service_codes),
        roll_diameter_rule,
        envelope_weight_rule,
        origin_rule,
        destination_rule,
    )


def validate_quote_request(
    request: QuoteRequest,
    public_service_codes: AbstractSet[str] = PUBLIC_SERVICE_CODES,
) -> Tuple[QuoteRequest, Optional[ValidationCode]]:
    """Return the request to invoke with and the first violated rule, if any."""
    for rule in build_rules(public_service_codes):
        code = rule(request)
        if code is not None:
            return request, code

    if request.package_format == PackageFormat.ENVELOPE and request.height_cm != 0:
        request = dataclasses.replace(request, height_cm=0.0)
    return request, None
