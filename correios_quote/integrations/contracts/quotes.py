"""
Quote result contracts.

A quotation ends in exactly one of two shapes:
- QuoteSuccess: the carrier priced the parcel (price, deadline, extra fees)
- QuoteFailure: local validation, the carrier, or the transport refused it

`QuoteResult` wraps the pair as a discriminated union so a result can never
hold both at once. Callers read it through two views, `to_dict()` and
`to_json()`, which always carry the same fields and values.
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .interfaces import FailureKind


class QuoteSuccess(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    service_code: str
    price: Decimal
    deadline_days: int
    hand_delivery_fee: Decimal = Decimal("0")
    receipt_notice_fee: Decimal = Decimal("0")
    declared_value_fee: Decimal = Decimal("0")
    price_without_extras: Optional[Decimal] = None
    home_delivery: Optional[bool] = None
    saturday_delivery: Optional[bool] = None
    remarks: str = ""


class QuoteFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["failure"] = "failure"
    kind: FailureKind
    code: str
    raw_message: str = ""
    friendly_message: str = ""


QuoteOutcome = Annotated[Union[QuoteSuccess, QuoteFailure], Field(discriminator="status")]


class QuoteResult(BaseModel):
    """Sole output of a quotation; owned by the caller."""

    model_config = ConfigDict(frozen=True)

    outcome: QuoteOutcome

    @classmethod
    def success(cls, **fields: Any) -> "QuoteResult":
        return cls(outcome=QuoteSuccess(**fields))

    @classmethod
    def failure(cls, kind: FailureKind, code: str, raw_message: str = "", friendly_message: str = "") -> "QuoteResult":
        return cls(
            outcome=QuoteFailure(kind=kind, code=code, raw_message=raw_message, friendly_message=friendly_message)
        )

    @property
    def is_success(self) -> bool:
        return isinstance(self.outcome, QuoteSuccess)

    def to_dict(self) -> Dict[str, Any]:
        return self.outcome.model_dump(mode="json", exclude={"status"})

    def to_json(self) -> str:
        # Rendered from to_dict() so both views stay field-for-field identical.
        return json.dumps(self.to_dict(), ensure_ascii=False)
