import math
import random
import re

_NON_DIGIT_RE = re.compile(r"[^0-9]")
_LEADING_INT_RE = re.compile(r"^\s*[+-]?\d+")
_LEADING_FLOAT_RE = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


def digits_to_int(text: str | None, default: int = 0) -> int:
    """Strip every non-digit and parse what is left: "₹4,599" -> 4599."""
    digits = _NON_DIGIT_RE.sub("", text or "")
    return int(digits) if digits else default


def leading_int(text: str | None, default: int = 0) -> int:
    """Parse the integer at the start of the text: "12 Seats left" -> 12."""
    m = _LEADING_INT_RE.match(text or "")
    if not m:
        return default
    value = int(m.group(0))
    return value if value else default


def leading_float(text: str | None, default: float = 0.0) -> float:
    """Parse the number at the start of the text: "8.6/10" -> 8.6."""
    m = _LEADING_FLOAT_RE.match(text or "")
    if not m:
        return default
    value = float(m.group(0))
    return value if value else default


def compress_rating(raw: float) -> int:
    """Map a 10-point rating onto 1..5 stars (0 stays 0)."""
    return min(5, math.ceil(raw / 2))


def infer_stops(text: str | None) -> int:
    """Coarse stop count from free text like "Nonstop" or "1 stop"."""
    text = text or ""
    if "Nonstop" in text:
        return 0
    if "1 stop" in text:
        return 1
    return 2


def synthesize_flight_number(airline: str, rng: random.Random) -> str:
    return f"{airline[:2].upper()}{rng.randint(1000, 9999)}"


def synthesize_train_number(rng: random.Random) -> str:
    return str(rng.randint(10000, 99999))


def random_train_seats(rng: random.Random) -> int:
    return rng.randint(10, 59)
