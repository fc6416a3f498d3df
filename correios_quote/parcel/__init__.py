"""
Parcel intake: turns loosely-typed caller input into a QuoteRequest and checks
it against the carrier's business rules before anything goes over the wire.
"""
from .normalizer import normalize_quote_parameters
from .postal_code import canonicalize_postal_code
from .validation import validate_quote_request

__all__ = [
    "canonicalize_postal_code",
    "normalize_quote_parameters",
    "validate_quote_request",
]
