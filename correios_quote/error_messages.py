"""Error code -> friendly message lookup."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Mapping, Optional

import yaml

from correios_quote.utils.config_loader import CONFIG_DIR

logger = logging.getLogger(__name__)

DEFAULT_MESSAGES_PATH = CONFIG_DIR / "error_messages.yml"
DEFAULT_FALLBACK = "Não foi possível calcular o frete (código {code})."


class ErrorMessageLocalizer:
    """Callable mapping an error code to a user-facing message.

    Unknown codes get the fallback template (which may use `{code}`).
    """

    def __init__(self, messages: Mapping[str, str], fallback: str = DEFAULT_FALLBACK) -> None:
        self.messages: Dict[str, str] = {str(k): str(v) for k, v in messages.items()}
        self.fallback = fallback

    def __call__(self, code: str) -> str:
        key = str(code).strip()
        if key in self.messages:
            return self.messages[key]
        logger.debug("No friendly message for code %r", key)
        return self.fallback.format(code=key)


def load_error_messages(path: Optional[Path] = None) -> ErrorMessageLocalizer:
    if path is None:
        path = DEFAULT_MESSAGES_PATH

    if not path.exists():
        raise FileNotFoundError(f"Error message table not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    messages = data.get("messages") or {}
    fallback = data.get("fallback") or DEFAULT_FALLBACK
    logger.info("Loaded %d error messages from %s", len(messages), path)
    return ErrorMessageLocalizer(messages, fallback=fallback)
