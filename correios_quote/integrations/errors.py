"""Typed errors raised by the integrations layer."""

from __future__ import annotations

from typing import Any, Dict, Optional


class IntegrationError(RuntimeError):
    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}


class TransportError(IntegrationError):
    """The remote call could not complete (network, HTTP status, protocol)."""


class MalformedResponseError(TransportError):
    """The carrier answered, but with a body we cannot interpret."""
