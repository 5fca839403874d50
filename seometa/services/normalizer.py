"""Markup stripping and whitespace normalisation for raw storefront content.

Stripping is regex-based rather than a full HTML parse.  A ``<script>`` or
``<style>`` block with no closing tag is not treated as a block: only its
opening tag is removed and the remaining body stays in the text.
"""

import re
from typing import Optional

# Whole <script>/<style> blocks, including their content.  These must be
# removed before generic tags or their bodies would surface as visible text.
_SCRIPT_RE = re.compile(r"<script\b[^>]*>[\s\S]*?</script\s*>", re.IGNORECASE)
_STYLE_RE = re.compile(r"<style\b[^>]*>[\s\S]*?</style\s*>", re.IGNORECASE)

# Any remaining tag (opening, closing, self-closing, comment, doctype)
_TAG_RE = re.compile(r"<[^>]+>")

_WHITESPACE_RE = re.compile(r"\s+")


def normalize(raw: Optional[str]) -> str:
    """Return *raw* as plain text with markup removed and whitespace collapsed.

    Every tag is replaced by a single space so that adjacent inline elements
    (``<b>foo</b><i>bar</i>``) do not fuse into one word.  Empty or ``None``
    input yields an empty string.
    """
    if not raw:
        return ""

    text = _SCRIPT_RE.sub("", raw)
    text = _STYLE_RE.sub("", text)
    text = _TAG_RE.sub(" ", text)
    # Stray brackets outside a tag (e.g. "size < 10") are dropped as well
    text = text.replace("<", " ").replace(">", " ")
    return _WHITESPACE_RE.sub(" ", text).strip()
