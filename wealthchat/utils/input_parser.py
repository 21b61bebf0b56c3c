"""
Natural-language number extraction for slot-filling answers.

Examples:
- "I almost save $20 per month" -> 20.0
- "around 50,000"               -> 50000.0
- "150K"                        -> 150000.0
- "thirty five"                 -> 35.0
- "-$200"                       -> -200.0  (kept negative so range checks reject it)
- "I'm 35 and earn 50k"         -> 35.0    (the first number in the answer)
"""

from __future__ import annotations
import re
from typing import Optional

_FILLER = re.compile(
    r"\b(?:almost|around|about|maybe|probably|approximately|roughly|close\s+to|near)\b", re.IGNORECASE
)
_LEAD_IN = re.compile(r"\bi\s+(?:think|believe|guess|estimate|save|invest|have)\b", re.IGNORECASE)
_PER_PERIOD = re.compile(r"\bper\s+(?:month|year|annum)\b", re.IGNORECASE)
_CURRENCY_WORD = re.compile(r"\b(?:dollars?|usd)\b", re.IGNORECASE)
_CURRENCY_SIGN = re.compile(r"\$")

_DIGITS = r"((?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d+)?)"
_SUFFIXED = re.compile(
    r"(?<![\w.,])(-?)" + _DIGITS + r"\s*(k|m|b|thousand|million|billion)\b", re.IGNORECASE
)
_NUMBER = re.compile(r"(?<![\w.,])(-?)" + _DIGITS)

_MULTIPLIERS = {
    "k": 1_000, "thousand": 1_000,
    "m": 1_000_000, "million": 1_000_000,
    "b": 1_000_000_000, "billion": 1_000_000_000,
}

_UNITS = {
    "zero": 0, "one": 1, "two": 2, "three": 3, "four": 4, "five": 5, "six": 6, "seven": 7,
    "eight": 8, "nine": 9, "ten": 10, "eleven": 11, "twelve": 12, "thirteen": 13,
    "fourteen": 14, "fifteen": 15, "sixteen": 16, "seventeen": 17, "eighteen": 18, "nineteen": 19,
}
_TENS = {
    "twenty": 20, "thirty": 30, "forty": 40, "fifty": 50,
    "sixty": 60, "seventy": 70, "eighty": 80, "ninety": 90,
}
_SCALES = {"thousand": 1_000, "million": 1_000_000}


def _clean(text: str) -> str:
    cleaned = _FILLER.sub(" ", text)
    cleaned = _LEAD_IN.sub(" ", cleaned)
    cleaned = _PER_PERIOD.sub(" ", cleaned)
    cleaned = _CURRENCY_WORD.sub(" ", cleaned)
    # "-$200" must stay "-200".
    cleaned = _CURRENCY_SIGN.sub("", cleaned)
    return cleaned.strip()


def _words_to_number(text: str) -> Optional[float]:
    """Parse the first run of written number words ("two hundred and fifty")."""
    total = 0
    current = 0
    seen = False
    for word in re.findall(r"[a-z]+", text.lower()):
        if word in _UNITS:
            current += _UNITS[word]
        elif word in _TENS:
            current += _TENS[word]
        elif word == "hundred":
            current = (current or 1) * 100
        elif word in _SCALES:
            total += (current or 1) * _SCALES[word]
            current = 0
        elif seen and word == "and":
            continue
        elif seen:
            break
        else:
            continue
        seen = True
    return float(total + current) if seen else None


def parse_amount(text: str) -> Optional[float]:
    """
    Extract a numeric value from a free-text answer.

    parameters:
    - text: str – the user's turn.

    returns:
    - float or None – the first number found, or None when nothing numeric is present.
    """
    if not isinstance(text, str) or not text.strip():
        return None

    cleaned = _clean(text)

    # The earliest number wins; at the same position the suffixed reading
    # ("150K") beats the bare digits ("150").
    suffixed = _SUFFIXED.search(cleaned)
    plain = _NUMBER.search(cleaned)
    if suffixed and (plain is None or suffixed.start() <= plain.start()):
        value = float(suffixed.group(2).replace(",", "")) * _MULTIPLIERS[suffixed.group(3).lower()]
        return -value if suffixed.group(1) else value

    if plain:
        value = float(plain.group(2).replace(",", ""))
        return -value if plain.group(1) else value

    return _words_to_number(cleaned)
