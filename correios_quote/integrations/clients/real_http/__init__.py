"""
Real HTTP integration clients.

These clients communicate with the Correios web service over HTTP.

Important:
- Must implement the same QuoteProvider interface as the mock clients
- Must return data shaped according to correios_quote/integrations/contracts/*

Switching:
The selection of mock vs real clients happens in correios_quote/api/main.py only.
"""
