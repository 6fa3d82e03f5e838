import RadixCodec

import numpy as np


def test_ParseDecimalString():
    assert RadixCodec.parseDecimalString("0") == 0
    assert RadixCodec.parseDecimalString("000") == 0
    assert RadixCodec.parseDecimalString("00120") == 120
    assert RadixCodec.parseDecimalString("  42\n") == 42

    big = "123456789012345678901234567890123456789"
    assert RadixCodec.parseDecimalString(big) == int(big)


def test_ParseDecimalStringRejects():
    for text in (None, "", "   ", "-5", "-0", "+5", "12a", "1.5", "1 2", "0x10", "٣"):
        assert RadixCodec.parseDecimalString(text) is None, text


def test_IntegerToDigits():
    assert RadixCodec.integerToDigits(0, 3) == [0]
    assert RadixCodec.integerToDigits(255, 16) == [15, 15]
    assert RadixCodec.integerToDigits(6, 2) == [1, 1, 0]
    assert RadixCodec.integerToDigits(100, 3) == [1, 0, 2, 0, 1]
    assert RadixCodec.integerToDigits(-1, 10) == []


def test_DigitsToInteger():
    assert RadixCodec.digitsToInteger([], 8) == 0
    assert RadixCodec.digitsToInteger([1, 0, 2, 0, 1], 3) == 100
    assert RadixCodec.digitsToInteger(np.array([15, 15]), 16) == 255


def test_RoundTrip():
    for base in (2, 3, 8, 10, 16, 36):
        for value in (0, 1, base - 1, base, 12345, 2 ** 100 + 7):
            digits = RadixCodec.integerToDigits(value, base)
            assert all(0 <= d < base for d in digits)
            assert RadixCodec.digitsToInteger(digits, base) == value


def test_TryDigitsToInteger():
    assert RadixCodec.tryDigitsToInteger([1, 2], 8) == 10
    assert RadixCodec.tryDigitsToInteger([], 8) == 0
    assert RadixCodec.tryDigitsToInteger(None, 8) == 0
    assert RadixCodec.tryDigitsToInteger([1, 8], 8) is None
    assert RadixCodec.tryDigitsToInteger([1, None], 8) is None
    assert RadixCodec.tryDigitsToInteger([1, "2"], 8) is None
    assert RadixCodec.tryDigitsToInteger([-1], 8) is None


def test_Formatting():
    assert RadixCodec.digitToChar(0) == "0"
    assert RadixCodec.digitToChar(9) == "9"
    assert RadixCodec.digitToChar(10) == "A"
    assert RadixCodec.digitToChar(35) == "Z"
    assert RadixCodec.formatDigits([1, 10, 15]) == "1AF"
    assert RadixCodec.formatDigits([]) == ""


def test_TryDigitsToIntegerNonIterable():
    assert RadixCodec.tryDigitsToInteger(5, 8) is None
    assert RadixCodec.tryDigitsToInteger(2.5, 8) is None
