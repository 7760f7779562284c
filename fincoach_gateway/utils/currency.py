"""Currency rounding, formatting and parsing utilities (INR-first)"""

import math
import re

MAX_AMOUNT = 999_999_999  # 99.99 crore

CRORE = 10_000_000
LAKH = 100_000
THOUSAND = 1_000

_STRIP_PATTERN = re.compile(r"[₹$€£¥,\s]")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity (2.5 -> 3, -2.5 -> -2)"""
    return math.floor(value + 0.5)


def _group_indian(digits: str) -> str:
    """Group integer digits as 12,34,567 (last three, then pairs)"""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs) + "," + tail


def format_inr(amount: float) -> str:
    """Format as rupees with Indian digit grouping and no decimals"""
    rounded = round_half_up(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}₹{_group_indian(str(abs(rounded)))}"


def format_indian_number(amount: float) -> str:
    """Abbreviate large amounts in crore / lakh / thousand"""
    if amount >= CRORE:
        return f"₹{amount / CRORE:.1f} Cr"
    elif amount >= LAKH:
        return f"₹{amount / LAKH:.1f} L"
    elif amount >= THOUSAND:
        return f"₹{amount / THOUSAND:.1f} K"
    return format_inr(amount)


def _parse_float(text: str) -> float:
    match = re.match(r"[+-]?(\d+(\.\d*)?|\.\d+)", text)
    return float(match.group(0)) if match else 0.0


def parse_indian_amount(text: str) -> float:
    """
    Parse user input such as "₹1,20,000", "2.5L", "1cr" or "15k".

    Unparsable input yields 0.
    """
    cleaned = _STRIP_PATTERN.sub("", text).lower()

    if "cr" in cleaned:
        return _parse_float(cleaned.replace("cr", "", 1)) * CRORE
    if "l" in cleaned:
        return _parse_float(cleaned.replace("l", "", 1)) * LAKH
    if "k" in cleaned:
        return _parse_float(cleaned.replace("k", "", 1)) * THOUSAND

    return _parse_float(cleaned)


def is_valid_amount(value) -> bool:
    """Finite, non-negative and at most 99.99 crore"""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(number) and 0 <= number <= MAX_AMOUNT
