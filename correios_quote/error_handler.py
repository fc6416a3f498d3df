"""Error handling helpers for the quotation pipeline."""
from typing import Any, Callable, Dict
import logging

from correios_quote.integrations.contracts.quotes import QuoteResult
from correios_quote.integrations.errors import TransportError
from correios_quote.integrations.policy.response_wrappers import map_transport_error

logger = logging.getLogger(__name__)


class ErrorHandler:
    def __init__(self, localize: Callable[[str], str]) -> None:
        self.localize = localize

    def handle_transport_error(self, exc: TransportError, context: Dict[str, Any] = None) -> QuoteResult:
        logger.error(
            "Correios call failed: %s (context=%s, payload=%s)",
            exc,
            context or {},
            exc.payload,
            exc_info=True,
        )
        return map_transport_error(exc, self.localize)
