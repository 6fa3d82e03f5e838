"""
Conversions between digit sequences in an arbitrary base and Python integers.

Python's int is the arbitrary-precision representation. Digit sequences are
always most significant digit first.
"""

import numpy as np

DECIMAL_CHARACTERS = "0123456789"


def parseDecimalString(text):
    """
    Parse a non-negative decimal integer.

    Surrounding whitespace is ignored. Leading zeros are allowed.

    Args:
        text (str): The decimal text.

    Returns:
        int: The parsed value, or None if text is None, blank, negative, or
             contains anything other than the characters 0-9.
    """
    if text is None:
        return None
    text = text.strip()
    if len(text) == 0 or text.startswith("-"):
        return None
    for ch in text:
        if ch not in DECIMAL_CHARACTERS:
            return None

    text = text.lstrip("0")
    if len(text) == 0:
        return 0
    return int(text, 10)


def integerToDigits(value: int, base: int) -> list:
    """
    Split a non-negative integer into its digits in the given base.

    Args:
        value (int): The value to convert.
        base (int): The target base (>= 2).

    Returns:
        list: The digits, most significant first. [0] for zero and [] for
              negative values.
    """
    if value < 0:
        return []
    if value == 0:
        return [0]

    digits = []
    while value > 0:
        value, rem = divmod(value, base)
        digits.append(rem)
    digits.reverse()
    return digits


def digitsToInteger(digits, base: int) -> int:
    """
    Evaluate a digit sequence with Horner's method.

    The digits are assumed to be valid for the base. An empty sequence is 0.
    """
    value = 0
    for d in digits:
        value = value * base + int(d)
    return value


def tryDigitsToInteger(digits, base: int):
    """
    Evaluate a digit sequence that has not been validated.

    Args:
        digits (iterable): Candidate digits, most significant first.
        base (int): The base to interpret them in.

    Returns:
        int: The value, 0 for None or an empty sequence, or None if digits is
             not iterable or any digit is None, not an integer, or outside [0, base).
    """
    if digits is None:
        return 0
    if not hasattr(digits, "__iter__"):
        return None
    value = 0
    for d in digits:
        if d is None or isinstance(d, bool) or not isinstance(d, (int, np.integer)):
            return None
        if d < 0 or d >= base:
            return None
        value = value * base + int(d)
    return value


def digitToChar(digit: int) -> str:
    """Map 0-9 to '0'-'9' and 10 onward to 'A' onward."""
    if digit < 10:
        return chr(ord("0") + digit)
    return chr(ord("A") + digit - 10)


def formatDigits(digits) -> str:
    return "".join(digitToChar(d) for d in digits)
