from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, Mapping, Optional


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class PackageFormat(IntEnum):
    BOX = 1
    ROLL = 2                             # roll / prism, needs a diameter
    ENVELOPE = 3


class ValidationCode(str, Enum):
    MISSING_CONTRACT_CREDENTIALS = "missing_contract_credentials"
    DIAMETER_REQUIRED = "diameter_required"
    ENVELOPE_WEIGHT_EXCEEDED = "envelope_weight_exceeded"
    ORIGIN_POSTAL_CODE_REQUIRED = "origin_postal_code_required"
    DESTINATION_POSTAL_CODE_REQUIRED = "destination_postal_code_required"


class FailureKind(str, Enum):
    VALIDATION = "validation"
    PROVIDER = "provider"
    TRANSPORT = "transport"


YES = "S"
NO = "N"

# Services Correios sells without a contract (SEDEX, PAC, SEDEX 12, SEDEX 10, SEDEX Hoje).
PUBLIC_SERVICE_CODES = frozenset({"04014", "04510", "04782", "04790", "04804"})

NO_ERROR_CODE = "0"


# ---------------------------------------------------------------------------
# Request / raw response
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class QuoteRequest:
    service_code: str
    origin_postal_code: str              # digits only, "" when absent
    destination_postal_code: str
    weight_kg: float
    package_format: int                  # PackageFormat value, kept as int so unknown formats reach the carrier
    length_cm: float = 0.0
    height_cm: float = 0.0
    width_cm: float = 0.0
    diameter_cm: float = 0.0
    company_code: Optional[str] = None
    password: Optional[str] = None
    hand_delivery: str = NO              # S / N
    declared_value: float = 0.0
    receipt_notice: str = NO             # S / N


@dataclass(frozen=True)
class RawQuoteResponse:
    error_code: str
    error_message: str = ""
    fields: Dict[str, str] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Abstract provider interface
# ---------------------------------------------------------------------------

class QuoteProvider(ABC):
    """Every pricing transport (real HTTP, mock) must implement this interface."""

    @abstractmethod
    def fetch_quote(self, params: Mapping[str, str]) -> RawQuoteResponse:
        """Perform one CalcPrecoPrazo call with the carrier's parameter names.

        Raises TransportError when the call itself cannot complete.
        """
