"""Heuristics for pinning a piece of text to one of the trip's candidates.

Each strategy is a plain function returning the matched candidate or
``None``; the segmenter decides the order they are tried in.
"""

from __future__ import annotations

import math
import re
from typing import List, Optional, Sequence

# "Paris → Rome" means travelling to Rome. Only the first arrow counts.
_TRANSITION = re.compile(r"(?:→|⟶|➔|->)\s*(.+)$")

# Words this short are connectors ("the", "and", "del") not place names.
MIN_SIGNIFICANT_LENGTH = 4


def substring_either_way(text: str, candidates: Sequence[str]) -> Optional[str]:
    """First candidate contained in ``text`` or containing it, ignoring case."""
    needle = text.lower()
    for candidate in candidates:
        lowered = candidate.lower()
        if lowered in needle or needle in lowered:
            return candidate
    return None


def match_metadata(name: str, candidates: Sequence[str]) -> Optional[str]:
    """Match an explicit ``_destination`` hint against the candidates.

    Same as :func:`substring_either_way` except that the reverse direction
    ignores a trailing " copenhagen" the chunked generator appends.
    """
    lowered_name = name.lower()
    trimmed_name = lowered_name.replace(" copenhagen", "")
    for candidate in candidates:
        lowered = candidate.lower()
        if lowered in lowered_name or trimmed_name in lowered:
            return candidate
    return None


def significant_words(name: str) -> List[str]:
    return [w for w in name.lower().split() if len(w) >= MIN_SIGNIFICANT_LENGTH]


def mentions_candidate(haystack: str, candidate: str) -> bool:
    """True when ``haystack`` names the candidate or any significant part of it.

    ``haystack`` is expected to be lowercase already.
    """
    if candidate.lower() in haystack:
        return True
    return any(word in haystack for word in significant_words(candidate))


def match_in_text(haystack: str, candidates: Sequence[str]) -> Optional[str]:
    for candidate in candidates:
        if mentions_candidate(haystack, candidate):
            return candidate
    return None


def extract_transition_target(title: Optional[str]) -> Optional[str]:
    """Return the place after the transition arrow in a day title."""
    if not title:
        return None
    found = _TRANSITION.search(title)
    if not found:
        return None
    target = found.group(1).strip()
    return target or None


def proportional_candidate(day_number: int, total_days: int,
                           candidates: Sequence[str]) -> Optional[str]:
    """Spread days evenly over the candidates, in list order.

    Each candidate owns ``ceil(total_days / len(candidates))`` consecutive
    days; overshoot is clamped to the last candidate.
    """
    if not candidates:
        return None
    per_candidate = max(1, math.ceil(total_days / len(candidates)))
    index = (day_number - 1) // per_candidate
    return candidates[min(max(index, 0), len(candidates) - 1)]
