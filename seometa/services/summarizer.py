from typing import Optional

from seometa.services.normalizer import normalize

# Default summary bound used for meta descriptions and JSON-LD.
DEFAULT_MAX_LENGTH = 150

_ELLIPSIS = "..."


def summarize(raw: Optional[str], max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """Return the normalised text of *raw*, truncated to *max_length* characters.

    When truncation happens the result ends with ``"..."`` and is exactly
    *max_length* long.  Bounds smaller than the ellipsis itself are clamped
    up to ``len("...")``.
    """
    text = normalize(raw)
    max_length = max(max_length, len(_ELLIPSIS))
    if len(text) <= max_length:
        return text
    return text[: max_length - len(_ELLIPSIS)] + _ELLIPSIS
