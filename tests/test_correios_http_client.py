import pytest
import requests

from correios_quote.integrations.clients.real_http import correios as correios_http
from correios_quote.integrations.clients.real_http.correios import CorreiosHttpProvider, parse_calc_preco_prazo
from correios_quote.integrations.errors import MalformedResponseError, TransportError
from correios_quote.utils.config_loader import CorreiosConfig

SUCCESS_XML = b"""<?xml version="1.0" encoding="utf-8"?>
<cResultado xmlns:xsd="http://www.w3.org/2001/XMLSchema" xmlns="http://tempuri.org/">
  <Servicos>
    <cServico>
      <Codigo>04014</Codigo>
      <Valor>24,90</Valor>
      <PrazoEntrega>4</PrazoEntrega>
      <ValorMaoPropria>0,00</ValorMaoPropria>
      <ValorAvisoRecebimento>0,00</ValorAvisoRecebimento>
      <ValorValorDeclarado>0,00</ValorValorDeclarado>
      <EntregaDomiciliar>S</EntregaDomiciliar>
      <EntregaSabado>N</EntregaSabado>
      <Erro>0</Erro>
      <MsgErro />
      <ValorSemAdicionais>24,90</ValorSemAdicionais>
      <obsFim />
    </cServico>
  </Servicos>
</cResultado>"""

ERROR_XML = b"""<?xml version="1.0" encoding="utf-8"?>
<cResultado xmlns="http://tempuri.org/">
  <Servicos>
    <cServico>
      <Codigo>04014</Codigo>
      <Valor>0,00</Valor>
      <PrazoEntrega>0</PrazoEntrega>
      <Erro>-3</Erro>
      <MsgErro>CEP de destino invalido.</MsgErro>
    </cServico>
  </Servicos>
</cResultado>"""

PARAMS = {"nCdServico": "04014", "sCepOrigem": "13631009", "sCepDestino": "09951420"}


class FakeResponse:
    def __init__(self, content: bytes = b"", status_code: int = 200):
        self.content = content
        self.status_code = status_code
        self.text = content.decode("utf-8", errors="replace")

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error", response=self)


def _fake_get(response=None, exc=None, captured=None):
    def fake_get(url, params=None, timeout=None):
        if captured is not None:
            captured.update({"url": url, "params": params, "timeout": timeout})
        if exc is not None:
            raise exc
        return response

    return fake_get


def test_success_response_is_parsed(monkeypatch):
    captured = {}
    monkeypatch.setattr(correios_http.requests, "get", _fake_get(FakeResponse(SUCCESS_XML), captured=captured))
    provider = CorreiosHttpProvider(base_url="http://correios.test/CalcPrecoPrazo", timeout_seconds=3)

    raw = provider.fetch_quote(PARAMS)

    assert raw.error_code == "0"
    assert raw.error_message == ""
    assert raw.fields["Valor"] == "24,90"
    assert raw.fields["PrazoEntrega"] == "4"
    assert captured == {"url": "http://correios.test/CalcPrecoPrazo", "params": PARAMS, "timeout": 3}


def test_carrier_error_is_returned_not_raised(monkeypatch):
    monkeypatch.setattr(correios_http.requests, "get", _fake_get(FakeResponse(ERROR_XML)))

    raw = CorreiosHttpProvider(base_url="http://correios.test").fetch_quote(PARAMS)

    assert raw.error_code == "-3"
    assert raw.error_message == "CEP de destino invalido."


def test_http_error_status_raises_transport_error(monkeypatch):
    monkeypatch.setattr(correios_http.requests, "get", _fake_get(FakeResponse(b"oops", status_code=503)))

    with pytest.raises(TransportError) as excinfo:
        CorreiosHttpProvider(base_url="http://correios.test").fetch_quote(PARAMS)

    assert excinfo.value.payload["status_code"] == 503


def test_network_failure_raises_transport_error(monkeypatch):
    monkeypatch.setattr(correios_http.requests, "get", _fake_get(exc=requests.ConnectionError("refused")))

    with pytest.raises(TransportError, match="ConnectionError"):
        CorreiosHttpProvider(base_url="http://correios.test").fetch_quote(PARAMS)


def test_timeout_raises_transport_error(monkeypatch):
    monkeypatch.setattr(correios_http.requests, "get", _fake_get(exc=requests.Timeout("read timed out")))

    with pytest.raises(TransportError):
        CorreiosHttpProvider(base_url="http://correios.test").fetch_quote(PARAMS)


def test_non_xml_body_is_malformed():
    with pytest.raises(MalformedResponseError):
        parse_calc_preco_prazo(b"<html><body>Service Unavailable")


def test_missing_cservico_is_malformed():
    with pytest.raises(MalformedResponseError):
        parse_calc_preco_prazo(b"<cResultado><Servicos /></cResultado>")


def test_missing_error_field_is_malformed():
    with pytest.raises(MalformedResponseError):
        parse_calc_preco_prazo(b"<cResultado><Servicos><cServico><Valor>1,00</Valor></cServico></Servicos></cResultado>")


def test_from_config():
    cfg = CorreiosConfig(base_url="http://correios.test/calc", timeout_seconds=7)
    provider = CorreiosHttpProvider.from_config(cfg)
    assert provider.base_url == "http://correios.test/calc"
    assert provider.timeout_seconds == 7


def test_environment_defaults(monkeypatch):
    monkeypatch.setenv("CORREIOS_WS_URL", "http://env.test/calc")
    monkeypatch.setenv("CORREIOS_TIMEOUT_SECONDS", "4.5")

    provider = CorreiosHttpProvider()

    assert provider.base_url == "http://env.test/calc"
    assert provider.timeout_seconds == 4.5


def test_network_failure_does_not_expose_credentials(monkeypatch):
    leaky = requests.ConnectionError(
        "Max retries exceeded with url: /calc?nCdEmpresa=08082650&sDsSenha=TopSecret99&nCdServico=04162"
    )
    monkeypatch.setattr(correios_http.requests, "get", _fake_get(exc=leaky))

    with pytest.raises(TransportError) as excinfo:
        CorreiosHttpProvider(base_url="http://correios.test").fetch_quote(dict(PARAMS, sDsSenha="TopSecret99"))

    assert "TopSecret99" not in str(excinfo.value)
    assert excinfo.value.__cause__ is None
    assert excinfo.value.__suppress_context__ is True


def test_http_error_status_does_not_chain_the_request_url(monkeypatch):
    monkeypatch.setattr(correios_http.requests, "get", _fake_get(FakeResponse(b"oops", status_code=500)))

    with pytest.raises(TransportError) as excinfo:
        CorreiosHttpProvider(base_url="http://correios.test").fetch_quote(PARAMS)

    assert excinfo.value.__cause__ is None
    assert excinfo.value.__suppress_context__ is True
