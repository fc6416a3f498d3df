import logging

from correios_quote.error_handler import ErrorHandler
from correios_quote.integrations.contracts.interfaces import FailureKind
from correios_quote.integrations.errors import TransportError


def test_handle_transport_error_returns_failure(caplog):
    eh = ErrorHandler(localize=lambda code: f"msg:{code}")

    with caplog.at_level(logging.ERROR):
        out = eh.handle_transport_error(TransportError("boom", payload={"status_code": 502}), context={"k": "v"})

    assert out.outcome.kind is FailureKind.TRANSPORT
    assert out.outcome.raw_message == "boom"
    assert out.outcome.friendly_message == "msg:transport_error"
    assert "boom" in caplog.text
