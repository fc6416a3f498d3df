"""
Quotation Service for the Correios price & deadline calculator

Runs the quotation pipeline for one parcel:
  normalize -> validate -> invoke carrier -> map result

Any failure ends the pipeline early and comes back as a QuoteFailure; the
carrier is never called when local validation fails. The service holds only
injected collaborators, so a single instance can be shared between callers.
"""

import logging
from typing import AbstractSet, Any, Callable, Mapping, Optional

from correios_quote.error_handler import ErrorHandler
from correios_quote.error_messages import load_error_messages
from correios_quote.integrations.contracts.interfaces import PUBLIC_SERVICE_CODES, QuoteProvider
from correios_quote.integrations.contracts.quotes import QuoteResult
from correios_quote.integrations.errors import TransportError
from correios_quote.integrations.policy.quote_invoker import QuoteInvoker
from correios_quote.integrations.policy.response_wrappers import map_provider_response, map_validation_error
from correios_quote.parcel.normalizer import normalize_quote_parameters
from correios_quote.parcel.postal_code import PostalCodeCanonicalizer, canonicalize_postal_code
from correios_quote.parcel.validation import validate_quote_request

logger = logging.getLogger(__name__)


class QuotationService:
    def __init__(
        self,
        provider: QuoteProvider,
        localize: Optional[Callable[[str], str]] = None,
        canonicalize: PostalCodeCanonicalizer = canonicalize_postal_code,
        public_service_codes: AbstractSet[str] = PUBLIC_SERVICE_CODES,
    ):
        self.invoker = QuoteInvoker(provider)
        self.localize = localize or load_error_messages()
        self.canonicalize = canonicalize
        self.public_service_codes = frozenset(public_service_codes)
        self.error_handler = ErrorHandler(self.localize)

    def quote(self, params: Mapping[str, Any]) -> QuoteResult:
        """
        Price a parcel. Never raises for validation, carrier or transport failures.
        """
        request = normalize_quote_parameters(params, canonicalize=self.canonicalize)

        request, violation = validate_quote_request(request, self.public_service_codes)
        if violation is not None:
            logger.info("Quote request rejected locally: %s", violation.value)
            return map_validation_error(violation, self.localize)

        try:
            raw = self.invoker.invoke(request)
            return map_provider_response(raw, self.localize)
        except TransportError as exc:
            return self.error_handler.handle_transport_error(
                exc, context={"service_code": request.service_code}
            )
