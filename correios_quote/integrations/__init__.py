"""
Integrations layer.
This package contains all code used to talk to the Correios pricing service:
- contracts: request / raw response / result shapes
- clients: the real HTTP client and the offline mock
- policy: invoker, result mapper and the QuotationService pipeline

Key rule:
- Callers MUST NOT call Correios directly; they go through QuotationService
  with a QuoteProvider.
"""

from .contracts.interfaces import (
    PUBLIC_SERVICE_CODES,
    FailureKind,
    PackageFormat,
    QuoteProvider,
    QuoteRequest,
    RawQuoteResponse,
    ValidationCode,
)
from .contracts.quotes import QuoteFailure, QuoteResult, QuoteSuccess
from .errors import IntegrationError, MalformedResponseError, TransportError

__all__ = [
    # contracts
    "PUBLIC_SERVICE_CODES", "FailureKind", "PackageFormat", "QuoteProvider",
    "QuoteRequest", "RawQuoteResponse", "ValidationCode",
    "QuoteFailure", "QuoteResult", "QuoteSuccess",
    # errors
    "IntegrationError", "MalformedResponseError", "TransportError",
]
