"""
Configuration loader for the Correios quotation client
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).parent.parent / "config"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "correios.yml"


class CorreiosConfig(BaseModel):
    """Carrier endpoint, timeout and contract-free services"""

    base_url: str = "http://ws.correios.com.br/calculador/CalcPrecoPrazo.asmx/CalcPrecoPrazo"
    timeout_seconds: float = Field(default=15.0, gt=0, le=300)
    public_service_codes: List[str] = Field(
        default_factory=lambda: ["04014", "04510", "04782", "04790", "04804"]
    )
    messages_path: Path = Path("error_messages.yml")


def load_correios_config(config_path: Optional[Path] = None) -> CorreiosConfig:
    """
    Load and validate the client configuration from a YAML file

    Args:
        config_path: Path to config file. Defaults to the packaged config/correios.yml

    Returns:
        Validated CorreiosConfig, with environment overrides applied and
        messages_path made absolute

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if os.getenv("CORREIOS_WS_URL"):
        data["base_url"] = os.environ["CORREIOS_WS_URL"]
    if os.getenv("CORREIOS_TIMEOUT_SECONDS"):
        data["timeout_seconds"] = os.environ["CORREIOS_TIMEOUT_SECONDS"]

    try:
        cfg = CorreiosConfig(**data)
    except ValidationError as e:
        logger.error("Correios config validation failed: %s", e)
        raise

    if not cfg.messages_path.is_absolute():
        cfg.messages_path = config_path.parent / cfg.messages_path
    logger.info("Successfully loaded Correios config from %s", config_path)
    return cfg
