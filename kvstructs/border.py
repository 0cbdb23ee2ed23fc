"""Score borders: the ``min``/``max`` arguments of score range queries.

Accepted forms are plain numbers (``2``, ``-2.718``), exclusive numbers
(``(2``, ``(-2.718``) and infinities (``+inf``, ``inf``, ``-inf``).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

NEGATIVE_INF = -1
POSITIVE_INF = 1

_ERROR_MESSAGE = "ERR min or max is not a float"


@dataclass(frozen=True)
class ScoreBorder:
    """One end of a score range; ``inf`` is -1, 0 or 1."""

    value: float = 0.0
    exclude: bool = False
    inf: int = 0

    def greater(self, value: float) -> bool:
        """Whether ``value`` lies below this border, i.e. within it as an upper bound."""
        if self.inf == NEGATIVE_INF:
            return False
        if self.inf == POSITIVE_INF:
            return True
        if self.exclude:
            return self.value > value
        return self.value >= value

    def less(self, value: float) -> bool:
        """Whether ``value`` lies above this border, i.e. within it as a lower bound."""
        if self.inf == NEGATIVE_INF:
            return True
        if self.inf == POSITIVE_INF:
            return False
        if self.exclude:
            return self.value < value
        return self.value <= value


POSITIVE_INF_BORDER = ScoreBorder(value=math.inf, inf=POSITIVE_INF)
NEGATIVE_INF_BORDER = ScoreBorder(value=-math.inf, inf=NEGATIVE_INF)


def _parse_float(text: str) -> float:
    if not text or text != text.strip() or "_" in text:
        raise ValueError(_ERROR_MESSAGE)
    try:
        value = float(text)
    except ValueError:
        raise ValueError(_ERROR_MESSAGE) from None
    if math.isinf(value) and "inf" not in text.lower():
        # out of the range of a double
        raise ValueError(_ERROR_MESSAGE)
    return value


def parse_score_border(s: str) -> ScoreBorder:
    """Parse a border argument; raise ``ValueError`` if it is not a float."""
    if s in ("inf", "+inf"):
        return POSITIVE_INF_BORDER
    if s == "-inf":
        return NEGATIVE_INF_BORDER
    if s.startswith("("):
        return ScoreBorder(value=_parse_float(s[1:]), exclude=True)
    return ScoreBorder(value=_parse_float(s), exclude=False)