class ConcurrentModificationError(RuntimeError):
    """Exception raised when a cursor is used after its list was changed through another path."""

    pass


class IllegalCursorStateError(RuntimeError):
    """Exception raised when remove or set is called without a most recently returned digit."""

    pass


class NoSuchElementError(LookupError):
    """Exception raised when a cursor is moved past either end of its list."""

    pass


class DigitListCursor:
    """
    A bidirectional cursor over a DigitList that supports in-place mutation.

    The cursor sits between two digits. next() and previous() move it across a
    digit and return that digit. remove() and set() act on the digit most
    recently moved across, and add() inserts in front of the cursor.

    The cursor records the list's modCount when it is created and after every
    mutation it performs itself. Any other structural change to the list makes
    the cursor stale, and every subsequent move or mutation raises
    ConcurrentModificationError.

    Attributes:
        digitList (DigitList): The list this cursor is bound to.
        nextNode (DigitListNode): The node next() would return, or None at the end.
        lastReturned (DigitListNode): The node most recently moved across, or None.
        position (int): Index of the node next() would return.
        expectedModCount (int): The list's modCount when the cursor last synchronized.
    """

    def __init__(self, digitList, index=0):
        """
        Initialize a cursor positioned before the digit at index.

        Args:
            digitList (DigitList): The list to traverse.
            index (int, optional): Starting position in [0, size]. Defaults to 0.
        """
        self.digitList = digitList
        self.expectedModCount = digitList.modCount
        self.position = index
        self.nextNode = None if index == digitList.size else digitList.nodeAt(index)
        self.lastReturned = None

    def checkForComodification(self):
        if self.digitList.modCount != self.expectedModCount:
            raise ConcurrentModificationError("The list was modified outside of this cursor")

    def hasNext(self):
        return self.position < self.digitList.size

    def hasPrevious(self):
        return self.position > 0

    def nextIndex(self):
        return self.position

    def previousIndex(self):
        return self.position - 1

    def next(self):
        """
        Move forward across one digit.

        Returns:
            int: The digit moved across.

        Raises:
            ConcurrentModificationError: If the cursor is stale.
            NoSuchElementError: If the cursor is already at the end.
        """
        self.checkForComodification()
        if not self.hasNext():
            raise NoSuchElementError("No digit after the cursor")

        self.lastReturned = self.nextNode
        self.nextNode = self.nextNode.nextNode
        self.position += 1
        return self.lastReturned.value

    def previous(self):
        """
        Move backward across one digit.

        Returns:
            int: The digit moved across.

        Raises:
            ConcurrentModificationError: If the cursor is stale.
            NoSuchElementError: If the cursor is already at the start.
        """
        self.checkForComodification()
        if not self.hasPrevious():
            raise NoSuchElementError("No digit before the cursor")

        if self.nextNode is None:
            self.nextNode = self.digitList.tailNode
        else:
            self.nextNode = self.nextNode.prevNode
        self.lastReturned = self.nextNode
        self.position -= 1
        return self.lastReturned.value

    def remove(self):
        """
        Remove the digit most recently returned by next() or previous().

        Raises:
            ConcurrentModificationError: If the cursor is stale.
            IllegalCursorStateError: If there is no most recently returned digit.
        """
        self.checkForComodification()
        if self.lastReturned is None:
            raise IllegalCursorStateError("remove() requires a preceding next() or previous()")

        lastNext = self.lastReturned.nextNode
        self.digitList.unlink(self.lastReturned)

        if self.nextNode is self.lastReturned:
            # Moving backward left the cursor in front of the removed node.
            self.nextNode = lastNext
        else:
            self.position -= 1

        self.lastReturned = None
        self.expectedModCount = self.digitList.modCount

    def set(self, digit):
        """
        Overwrite the digit most recently returned by next() or previous().

        Raises:
            ConcurrentModificationError: If the cursor is stale.
            NullDigitError, InvalidDigitError: If digit is not a legal digit.
            IllegalCursorStateError: If there is no most recently returned digit.
        """
        self.checkForComodification()
        value = self.digitList.validateDigit(digit)
        if self.lastReturned is None:
            raise IllegalCursorStateError("set() requires a preceding next() or previous()")
        self.lastReturned.value = value

    def add(self, digit):
        """
        Insert a digit in front of the cursor and move the cursor past it.

        Raises:
            ConcurrentModificationError: If the cursor is stale.
            NullDigitError, InvalidDigitError: If digit is not a legal digit.
        """
        self.checkForComodification()
        value = self.digitList.validateDigit(digit)

        if self.nextNode is None:
            self.digitList.linkLast(value)
        else:
            self.digitList.linkBefore(value, self.nextNode)

        self.position += 1
        self.lastReturned = None
        self.expectedModCount = self.digitList.modCount

    def __iter__(self):
        return self

    def __next__(self):
        self.checkForComodification()
        if not self.hasNext():
            raise StopIteration
        return self.next()
