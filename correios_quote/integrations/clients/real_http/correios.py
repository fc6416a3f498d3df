"""
Real Correios HTTP Client.

Purpose:
- Sends one CalcPrecoPrazo request to the Correios web service (HTTP GET binding)
- Reads the first `cServico` entry of the XML answer into a RawQuoteResponse

Implementation notes:
- Uses requests, synchronously; the only timeout is `timeout_seconds`
- Network errors, HTTP error statuses and unreadable XML raise TransportError
- Business errors (Erro != 0) are NOT raised here; the result mapper handles them

Important:
- Keep this client as the ONLY place where Correios HTTP calls are made.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional, Union
from xml.etree import ElementTree

import requests

from correios_quote.integrations.contracts.interfaces import QuoteProvider, RawQuoteResponse
from correios_quote.integrations.errors import MalformedResponseError, TransportError
from correios_quote.utils.config_loader import CorreiosConfig

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://ws.correios.com.br/calculador/CalcPrecoPrazo.asmx/CalcPrecoPrazo"


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def parse_calc_preco_prazo(body: Union[bytes, str]) -> RawQuoteResponse:
    try:
        root = ElementTree.fromstring(body)
    except ElementTree.ParseError as exc:
        raise MalformedResponseError(f"Unreadable Correios response: {exc}", payload={"body": str(body[:500])}) from exc

    service = next((el for el in root.iter() if _local_name(el.tag) == "cServico"), None)
    if service is None:
        raise MalformedResponseError("Correios response has no cServico entry", payload={"body": str(body[:500])})

    fields = {_local_name(child.tag): (child.text or "").strip() for child in service}
    if "Erro" not in fields:
        raise MalformedResponseError("Correios response has no Erro field", payload=fields)

    return RawQuoteResponse(
        error_code=fields["Erro"],
        error_message=fields.get("MsgErro", ""),
        fields=fields,
    )


class CorreiosHttpProvider(QuoteProvider):
    def __init__(self, base_url: Optional[str] = None, timeout_seconds: Optional[float] = None) -> None:
        self.base_url = base_url or os.getenv("CORREIOS_WS_URL", DEFAULT_BASE_URL)
        self.timeout_seconds = timeout_seconds or float(os.getenv("CORREIOS_TIMEOUT_SECONDS", "15"))

    @classmethod
    def from_config(cls, cfg: CorreiosConfig) -> "CorreiosHttpProvider":
        return cls(base_url=cfg.base_url, timeout_seconds=cfg.timeout_seconds)

    def fetch_quote(self, params: Mapping[str, str]) -> RawQuoteResponse:
        # requests puts the full query string (sDsSenha included) in its error
        # messages, so neither the text nor the cause is carried over.
        try:
            resp = requests.get(self.base_url, params=dict(params), timeout=self.timeout_seconds)
            resp.raise_for_status()
        except requests.HTTPError as e:
            raise TransportError(
                f"Correios returned HTTP {e.response.status_code}",
                payload={"status_code": e.response.status_code, "body": e.response.text[:500]},
            ) from None
        except requests.RequestException as e:
            raise TransportError(f"Could not reach Correios: {type(e).__name__}") from None

        logger.info("Correios response received: status=%s", resp.status_code)
        return parse_calc_preco_prazo(resp.content)
