"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import os
from typing import Any, Dict, Optional, Union

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from correios_quote.error_messages import load_error_messages
from correios_quote.integrations.contracts.interfaces import QuoteProvider
from correios_quote.integrations.policy.quotation_service import QuotationService
from correios_quote.utils.config_loader import load_correios_config

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Correios Quote API",
    description="Postage price and delivery deadline from the Correios calculator",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================

correios_cfg = load_correios_config()


def build_provider() -> QuoteProvider:
    if os.getenv("CORREIOS_USE_MOCK", "").lower() in ("1", "true", "yes"):
        from correios_quote.integrations.clients.mocks.correios import MockCorreiosProvider

        logger.info("Using mock Correios provider")
        return MockCorreiosProvider()

    from correios_quote.integrations.clients.real_http.correios import CorreiosHttpProvider

    return CorreiosHttpProvider.from_config(correios_cfg)


quotation_service = QuotationService(
    provider=build_provider(),
    localize=load_error_messages(correios_cfg.messages_path),
    public_service_codes=set(correios_cfg.public_service_codes),
)


def get_quotation_service() -> QuotationService:
    return quotation_service


# ============================================================================
# MODELS
# ============================================================================

Loose = Optional[Union[str, float]]


class QuoteRequestBody(BaseModel):
    service_code: str
    origin_postal_code: str = ""
    destination_postal_code: str = ""
    weight: Loose = None
    package_format: Loose = Field(default=1, description="1 box, 2 roll/prism, 3 envelope")
    length: Loose = None
    height: Loose = None
    width: Loose = None
    diameter: Loose = None
    company_code: Optional[str] = None
    password: Optional[str] = None
    hand_delivery: Optional[Union[str, bool]] = "N"
    declared_value: Loose = None
    receipt_notice: Optional[Union[str, bool]] = "N"


class QuoteResponseBody(BaseModel):
    success: bool
    result: Dict[str, Any]


# ============================================================================
# ROUTES
# ============================================================================

@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.post("/api/v1/quotes", response_model=QuoteResponseBody)
def create_quote(body: QuoteRequestBody, service: QuotationService = Depends(get_quotation_service)):
    result = service.quote(body.model_dump())
    return QuoteResponseBody(success=result.is_success, result=result.to_dict())
