"""
Contracts (data models).

This folder defines the request/response shapes exchanged with the Correios
pricing service:
- QuoteRequest: the normalized parcel + contract data sent to the carrier
- RawQuoteResponse: one `cServico` entry as returned by the carrier
- QuoteResult: the Success | Failure union handed back to callers

Both mock and real HTTP clients speak these contracts, so the validator and the
result mapper never depend on which transport is wired in.
"""
