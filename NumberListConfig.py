from Operation import Operation

DEFAULT_RECORD_BOOK_NUMBER = 4126

# Indexed by recordBookNumber % 5.
BASES = (2, 3, 8, 10, 16)
TARGET_BASES = (3, 8, 10, 16, 2)


class NumberListConfig:
    """
    The fixed configuration of a NumberList, derived from a record-book number.

    Attributes:
        recordBookNumber (int): The identifier everything else is derived from.
        base (int): The numeral base of new lists.
        targetBase (int): The base ChangeScale converts to.
        operation (Operation): The operation AdditionalOperation performs.
    """

    def __init__(self, recordBookNumber: int = DEFAULT_RECORD_BOOK_NUMBER):
        """
        Derive a configuration from a record-book number.

        Args:
            recordBookNumber (int, optional): A non-negative identifier. Defaults to DEFAULT_RECORD_BOOK_NUMBER.

        Raises:
            AssertionError: If recordBookNumber is not a non-negative integer.
        """
        assert isinstance(recordBookNumber, int) and not isinstance(recordBookNumber, bool), "The record-book number must be an integer"
        assert recordBookNumber >= 0, "The record-book number must be non-negative"

        self.recordBookNumber = recordBookNumber
        self.base = BASES[recordBookNumber % 5]
        self.targetBase = TARGET_BASES[recordBookNumber % 5]
        self.operation = Operation.FromIdentifier(recordBookNumber)

    def __repr__(self):
        op = str(self.operation).replace("Operation.", "")
        return f"NumberListConfig(recordBookNumber={self.recordBookNumber}, base={self.base}, targetBase={self.targetBase}, operation={op})"
