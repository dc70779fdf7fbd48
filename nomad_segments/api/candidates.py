"""Turn the free-text trip destination into the ordered candidate list."""

from __future__ import annotations

import re
from typing import List, Optional

_PARENTHETICAL = re.compile(r"\s*\([^)]*\)")

# Chunked generation joins country and capital for Denmark only; the UI has
# always shown it as the country. Other composite names are left alone.
_NORMALISED = {"Denmark Copenhagen": "Denmark"}


def clean_destination(piece: str) -> str:
    cleaned = _PARENTHETICAL.sub("", piece.strip())
    return _NORMALISED.get(cleaned, cleaned)


def build_candidates(destination: Optional[str]) -> List[str]:
    """Split ``"France (Paris), Italy"`` into ``["France", "Italy"]``.

    An empty destination still yields one (empty) candidate so every day
    has somewhere to fall back to.
    """
    return [clean_destination(piece) for piece in (destination or "").split(",")]
