from enum import Enum


class Operation(Enum):
    """
    Enumeration of the binary operations a NumberList can be configured to perform.

    The value of each member is the remainder of the record-book number modulo 7
    that selects it.

    Values:
        ADD: a + b
        SUBTRACT: a - b, floored at zero.
        MULTIPLY: a * b
        DIVIDE: Integer division a // b. Degenerate when b is zero.
        MODULO: a % b. Degenerate when b is zero.
        AND: Bitwise a & b
        OR: Bitwise a | b
    """
    ADD = 0
    SUBTRACT = 1
    MULTIPLY = 2
    DIVIDE = 3
    MODULO = 4
    AND = 5
    OR = 6

    @staticmethod
    def FromIdentifier(identifier: int):
        """
        Select the operation for a configuration identifier.

        Args:
            identifier (int): A non-negative configuration identifier.

        Returns:
            Operation: The member whose value is identifier % 7.
        """
        return Operation(identifier % 7)

    def Apply(self, a: int, b: int):
        """
        Apply this operation to two non-negative integers.

        Args:
            a (int): Left operand.
            b (int): Right operand.

        Returns:
            int: The result, or None if the operation is undefined (division or
                 modulo by zero).
        """
        if self is Operation.ADD:
            return a + b
        elif self is Operation.SUBTRACT:
            return max(a - b, 0)
        elif self is Operation.MULTIPLY:
            return a * b
        elif self is Operation.DIVIDE:
            if b == 0:
                return None
            return a // b
        elif self is Operation.MODULO:
            if b == 0:
                return None
            return a % b
        elif self is Operation.AND:
            return a & b
        else:
            return a | b
