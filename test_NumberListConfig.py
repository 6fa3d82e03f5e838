from NumberListConfig import NumberListConfig, DEFAULT_RECORD_BOOK_NUMBER
from Operation import Operation

import pytest


def test_DefaultConfig():
    config = NumberListConfig()
    assert config.recordBookNumber == DEFAULT_RECORD_BOOK_NUMBER
    assert config.base == 3
    assert config.targetBase == 8
    assert config.operation == Operation.DIVIDE


def test_BaseMapping():
    expected = {0: (2, 3), 1: (3, 8), 2: (8, 10), 3: (10, 16), 4: (16, 2)}
    for n in range(4100, 4110):
        config = NumberListConfig(n)
        assert (config.base, config.targetBase) == expected[n % 5]


def test_OperationMapping():
    assert NumberListConfig(4123).operation == Operation.ADD
    assert NumberListConfig(4124).operation == Operation.SUBTRACT
    assert NumberListConfig(4125).operation == Operation.MULTIPLY
    assert NumberListConfig(4127).operation == Operation.MODULO
    assert NumberListConfig(4128).operation == Operation.AND
    assert NumberListConfig(4122).operation == Operation.OR


def test_InvalidRecordBookNumber():
    with pytest.raises(AssertionError):
        NumberListConfig(-1)
    with pytest.raises(AssertionError):
        NumberListConfig("4126")


def test_Operations():
    assert Operation.ADD.Apply(6, 3) == 9
    assert Operation.SUBTRACT.Apply(6, 3) == 3
    assert Operation.SUBTRACT.Apply(3, 6) == 0
    assert Operation.MULTIPLY.Apply(6, 3) == 18
    assert Operation.DIVIDE.Apply(7, 3) == 2
    assert Operation.DIVIDE.Apply(7, 0) is None
    assert Operation.MODULO.Apply(7, 3) == 1
    assert Operation.MODULO.Apply(7, 0) is None
    assert Operation.AND.Apply(6, 3) == 2
    assert Operation.OR.Apply(6, 3) == 7


def test_Repr():
    assert repr(NumberListConfig(4122)) == "NumberListConfig(recordBookNumber=4122, base=8, targetBase=10, operation=OR)"
