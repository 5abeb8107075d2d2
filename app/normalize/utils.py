from __future__ import annotations

import re

# c++, c#, node.js and ci/cd survive normalization intact.
_DISALLOWED_RE = re.compile(r"[^a-z0-9\s\-/+#.]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str | None) -> str:
    """Lowercase, replace anything outside [a-z0-9 whitespace - / + # .] with a space, collapse spaces."""
    if not text:
        return ""
    lowered = str(text).lower()
    cleaned = _DISALLOWED_RE.sub(" ", lowered)
    return _WHITESPACE_RE.sub(" ", cleaned).strip()


def split_tokens(text: str | None) -> list[str]:
    normalized = normalize_text(text)
    if not normalized:
        return []
    return normalized.split(" ")
