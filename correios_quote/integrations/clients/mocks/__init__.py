"""
Mock integration clients.

These clients return fake (but carrier-shaped) responses without calling the
Correios web service. They are used when:
- running tests, or developing offline
- Correios is unreachable and the rest of the pipeline still needs exercising

Important:
- Mock clients implement the SAME QuoteProvider interface as the real HTTP client.

Switching to real:
Provider selection happens in ONE place (correios_quote/api/main.py).
"""
