"""Brazilian postal code (CEP) helpers."""

from __future__ import annotations

import re
from typing import Any, Callable

PostalCodeCanonicalizer = Callable[[Any], str]

_NON_DIGITS = re.compile(r"\D")


def canonicalize_postal_code(value: Any) -> str:
    """Strip formatting from a CEP.

    Accepts "13631-009", "13.631-009", " 13631009 " and returns "13631009".
    Anything without digits comes back as "".
    """
    if value is None:
        return ""
    return _NON_DIGITS.sub("", str(value))
