"""Text normalization utilities.

Policy:
- Apply NFC early for consistency.
- For classifier lookups: lowercase only (the bundled dataset is lowercase).
- For question file fields: trim and collapse inner whitespace.
"""

from __future__ import annotations

import re
import unicodedata as ud

_WS_RE = re.compile(r"\s+")


def normalize_text_nfc(text: str) -> str:
    """Apply Unicode NFC to input text (safe for None-like inputs)."""
    if text is None:
        return ""
    return ud.normalize("NFC", str(text))


def normalize_response(text: str) -> str:
    """Canonical case form of a learner's typed response.

    Whitespace is preserved; "uh huh" and "uhhuh" are different inputs to the
    distance metric.
    """
    return normalize_text_nfc(text).lower()


def clean_field(text: str) -> str:
    """NFC, collapse whitespace runs to a single space and trim."""
    if not text:
        return ""
    return _WS_RE.sub(" ", normalize_text_nfc(text)).strip()
