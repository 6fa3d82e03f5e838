from DigitListCursor import DigitListCursor
import RadixCodec

import numpy as np


class NullDigitError(TypeError):
    """Exception raised when None is supplied where a digit is required."""

    pass


class InvalidDigitError(ValueError):
    """Exception raised when a digit is not an integer in [0, base)."""

    pass


class DigitListNode:
    """
    A node in a doubly-linked digit chain.

    Each node holds one digit and references to its neighbours. The nextNode
    link owns the following node; prevNode is a back-reference only.

    Attributes:
        value (int): The digit stored in this node.
        nextNode (DigitListNode): Reference to the next node in the list.
        prevNode (DigitListNode): Reference to the previous node in the list.
    """

    def __init__(self, value, prevNode=None, nextNode=None):
        """
        Initialize a new digit node.

        Args:
            value (int): The digit to store in this node.
            prevNode (DigitListNode, optional): The previous node in the list. Defaults to None.
            nextNode (DigitListNode, optional): The next node in the list. Defaults to None.
        """
        self.value = value

        self.nextNode = nextNode
        self.prevNode = prevNode

    def __repr__(self):
        return f"DigitListNode({self.value})"


class DigitList:
    """
    A doubly-linked list of digits in a fixed numeral base.

    The digits are stored most-significant first (index 0 is the head). Every
    stored digit is validated to lie in [0, base). Positional access walks from
    whichever end of the list is closer to the requested index.

    Structural mutations (insertion, removal, clearing, sorting, shifting and
    swapping) increment modCount. Cursors compare this counter with their own
    snapshot to detect that the list was changed behind their back.

    Attributes:
        base (int): The numeral base of the digits. Fixed for the lifetime of the list.
        size (int): Number of digits in the list.
        headNode (DigitListNode): First (most significant) node in the list.
        tailNode (DigitListNode): Last (least significant) node in the list.
        modCount (int): Structural change counter.
    """

    def __init__(self, base: int, arr=None):
        """
        Initialize a new digit list.

        Args:
            base (int): The numeral base. Must be an integer >= 2.
            arr (iterable, optional): Initial digits to append, most significant first. Defaults to None.

        Raises:
            AssertionError: If base is not an integer >= 2.
            InvalidDigitError: If any initial digit is outside [0, base).
        """
        assert isinstance(base, (int, np.integer)) and not isinstance(base, bool), f"Error! The base must be an integer, not \"{type(base)}\""
        assert base >= 2, f"Error! The base must be at least 2, not {base}"

        self.base = int(base)
        self.size = 0
        self.headNode = None
        self.tailNode = None
        self.modCount = 0

        if arr is not None:
            self.addAll(arr)

    def emptyLike(self):
        """
        Create a new empty list of the same kind and base as this one.

        Returns:
            DigitList: A new, empty list.
        """
        return DigitList(self.base)

    def validateDigit(self, digit):
        """
        Check that a value is a legal digit for this list.

        Args:
            digit: The candidate digit.

        Returns:
            int: The digit as a plain int.

        Raises:
            NullDigitError: If digit is None.
            InvalidDigitError: If digit is not an integer or is outside [0, base).
        """
        if digit is None:
            raise NullDigitError("Null digits are not allowed")
        if isinstance(digit, bool) or not isinstance(digit, (int, np.integer)):
            raise InvalidDigitError(f"Digit {digit!r} is not an integer")
        if digit < 0 or digit >= self.base:
            raise InvalidDigitError(f"Digit {digit} is out of range for base {self.base}")
        return int(digit)

    def checkElementIndex(self, index):
        if not (0 <= index < self.size):
            raise IndexError(f"Index: {index}, Size: {self.size}")

    def checkPositionIndex(self, index):
        if not (0 <= index <= self.size):
            raise IndexError(f"Index: {index}, Size: {self.size}")

    def nodeAt(self, index):
        """
        Locate the node at a given index.

        Walks from the head if the index lies in the first half of the list and
        from the tail otherwise. The index is assumed to be valid.

        Args:
            index (int): Index of the node, in [0, size).

        Returns:
            DigitListNode: The node at that index.
        """
        if index < (self.size >> 1):
            nodei = self.headNode
            for _ in range(index):
                nodei = nodei.nextNode
        else:
            nodei = self.tailNode
            for _ in range(self.size - 1 - index):
                nodei = nodei.prevNode
        return nodei

    def linkLast(self, value):
        """
        Link a new node holding an already validated digit at the end of the list.

        Args:
            value (int): The digit to link.

        Returns:
            DigitListNode: The new node.
        """
        newNode = DigitListNode(value, self.tailNode)

        if self.headNode is None:
            self.headNode = newNode
        else:
            self.tailNode.nextNode = newNode
        self.tailNode = newNode

        self.size += 1
        self.modCount += 1
        return newNode

    def linkBefore(self, value, succ: DigitListNode):
        """
        Link a new node holding an already validated digit in front of succ.

        Args:
            value (int): The digit to link.
            succ (DigitListNode): The node that will follow the new node.

        Returns:
            DigitListNode: The new node.
        """
        pred = succ.prevNode
        newNode = DigitListNode(value, pred, succ)
        succ.prevNode = newNode

        if pred is None:
            self.headNode = newNode
        else:
            pred.nextNode = newNode

        self.size += 1
        self.modCount += 1
        return newNode

    def unlink(self, node: DigitListNode):
        """
        Remove a specific node from the list.

        Both links of the detached node are cleared.

        Args:
            node (DigitListNode): The node to remove from the list.

        Returns:
            int: The digit the node held.
        """
        nextNode = node.nextNode
        prevNode = node.prevNode

        if prevNode is None:
            self.headNode = nextNode
        else:
            prevNode.nextNode = nextNode
            node.prevNode = None

        if nextNode is None:
            self.tailNode = prevNode
        else:
            nextNode.prevNode = prevNode
            node.nextNode = None

        self.size -= 1
        self.modCount += 1
        return node.value

    def isEmpty(self):
        return self.size == 0

    def get(self, index):
        """
        Return the digit at a given index.

        Raises:
            IndexError: If index is outside [0, size).
        """
        self.checkElementIndex(index)
        return self.nodeAt(index).value

    def set(self, index, digit):
        """
        Replace the digit at a given index.

        Args:
            index (int): Index to overwrite, in [0, size).
            digit (int): The new digit.

        Returns:
            int: The digit previously stored at index.

        Raises:
            NullDigitError, InvalidDigitError: If digit is not a legal digit.
            IndexError: If index is outside [0, size).
        """
        value = self.validateDigit(digit)
        self.checkElementIndex(index)

        node = self.nodeAt(index)
        old = node.value
        node.value = value
        return old

    def append(self, digit):
        """
        Add a new digit to the end (least significant side) of the list.

        Args:
            digit (int): The digit to append.

        Returns:
            bool: Always True.
        """
        self.linkLast(self.validateDigit(digit))
        return True

    def prepend(self, digit):
        """
        Add a new digit to the beginning (most significant side) of the list.

        Args:
            digit (int): The digit to prepend.
        """
        self.insert(0, digit)

    def insert(self, index, digit):
        """
        Insert a digit so that it ends up at the given index.

        Args:
            index (int): Position in [0, size]. size appends to the end.
            digit (int): The digit to insert.

        Raises:
            NullDigitError, InvalidDigitError: If digit is not a legal digit.
            IndexError: If index is outside [0, size].
        """
        value = self.validateDigit(digit)
        self.checkPositionIndex(index)

        if index == self.size:
            self.linkLast(value)
        else:
            self.linkBefore(value, self.nodeAt(index))

    def removeAt(self, index):
        """
        Remove the digit at a given index.

        Returns:
            int: The removed digit.

        Raises:
            IndexError: If index is outside [0, size).
        """
        self.checkElementIndex(index)
        return self.unlink(self.nodeAt(index))

    def remove(self, digit):
        """
        Remove the first occurrence of a digit.

        Args:
            digit: The digit to remove.

        Returns:
            bool: True if a digit was removed.
        """
        nodei = self.headNode
        while nodei is not None:
            if nodei.value == digit:
                self.unlink(nodei)
                return True
            nodei = nodei.nextNode
        return False

    def indexOf(self, digit):
        """
        Return the index of the first occurrence of digit, or -1.
        """
        idx = 0
        nodei = self.headNode
        while nodei is not None:
            if nodei.value == digit:
                return idx
            nodei = nodei.nextNode
            idx += 1
        return -1

    def lastIndexOf(self, digit):
        """
        Return the index of the last occurrence of digit, or -1.
        """
        idx = self.size - 1
        nodei = self.tailNode
        while nodei is not None:
            if nodei.value == digit:
                return idx
            nodei = nodei.prevNode
            idx -= 1
        return -1

    def contains(self, digit):
        return self.indexOf(digit) != -1

    def containsAll(self, items):
        if items is None:
            raise TypeError("Error! \"containsAll\" requires a collection, not None")
        for e in items:
            if not self.contains(e):
                return False
        return True

    def addAll(self, items):
        """
        Append every digit of items, in order.

        All digits are validated before any of them is linked, so a bad digit
        leaves the list unchanged.

        Args:
            items (iterable): The digits to append.

        Returns:
            bool: True if the list changed.
        """
        return self.insertAll(self.size, items)

    def insertAll(self, index, items):
        """
        Insert every digit of items so that the first one ends up at index.

        Args:
            index (int): Position in [0, size].
            items (iterable): The digits to insert.

        Returns:
            bool: True if the list changed.

        Raises:
            TypeError: If items is None.
            IndexError: If index is outside [0, size].
            NullDigitError, InvalidDigitError: If any digit is not a legal digit.
        """
        if items is None:
            raise TypeError("Error! \"insertAll\" requires a collection, not None")
        self.checkPositionIndex(index)
        values = [self.validateDigit(e) for e in items]
        if len(values) == 0:
            return False

        if index == self.size:
            for v in values:
                self.linkLast(v)
        else:
            succ = self.nodeAt(index)
            for v in values:
                self.linkBefore(v, succ)
        return True

    def removeAll(self, items):
        """
        Remove every digit that is contained in items.

        Returns:
            bool: True if the list changed.
        """
        if items is None:
            raise TypeError("Error! \"removeAll\" requires a collection, not None")
        items = list(items)
        changed = False
        cursor = self.cursor()
        while cursor.hasNext():
            if cursor.next() in items:
                cursor.remove()
                changed = True
        return changed

    def retainAll(self, items):
        """
        Remove every digit that is not contained in items.

        Returns:
            bool: True if the list changed.
        """
        if items is None:
            raise TypeError("Error! \"retainAll\" requires a collection, not None")
        items = list(items)
        changed = False
        cursor = self.cursor()
        while cursor.hasNext():
            if cursor.next() not in items:
                cursor.remove()
                changed = True
        return changed

    def clear(self):
        """
        Remove every digit, breaking both links of each detached node.
        """
        nodei = self.headNode
        while nodei is not None:
            nextNode = nodei.nextNode
            nodei.prevNode = None
            nodei.nextNode = None
            nodei = nextNode

        self.headNode = None
        self.tailNode = None
        self.size = 0
        self.modCount += 1

    def subList(self, fromIndex, toIndex):
        """
        Copy the digits in [fromIndex, toIndex) into a new, independent list.

        Args:
            fromIndex (int): First index to copy, in [0, size].
            toIndex (int): One past the last index to copy, in [0, size].

        Returns:
            DigitList: A new list of the same kind and base.

        Raises:
            IndexError: If either index is outside [0, size].
            ValueError: If fromIndex > toIndex.
        """
        self.checkPositionIndex(fromIndex)
        self.checkPositionIndex(toIndex)
        if fromIndex > toIndex:
            raise ValueError(f"fromIndex ({fromIndex}) > toIndex ({toIndex})")

        result = self.emptyLike()
        if fromIndex == toIndex:
            return result

        nodei = self.nodeAt(fromIndex)
        for _ in range(toIndex - fromIndex):
            result.linkLast(nodei.value)
            nodei = nodei.nextNode
        return result

    def cursor(self, index=0):
        """
        Create a cursor positioned before the digit at index.

        Args:
            index (int, optional): Starting position in [0, size]. Defaults to 0.

        Returns:
            DigitListCursor: A new cursor bound to this list.

        Raises:
            IndexError: If index is outside [0, size].
        """
        self.checkPositionIndex(index)
        return DigitListCursor(self, index)

    def toArray(self):
        """
        Return the digits, most significant first, as a numpy array.

        Returns:
            np.ndarray: A one-dimensional int64 array of length size.
        """
        arr = np.zeros(self.size, dtype=np.int64)
        nodei = self.headNode
        i = 0
        while nodei is not None:
            arr[i] = nodei.value
            nodei = nodei.nextNode
            i += 1
        return arr

    def swap(self, index1, index2):
        """
        Exchange the digits stored at two indices.

        Only the values move; the nodes stay where they are.

        Returns:
            bool: False if either index is out of range, True otherwise.
        """
        if index1 < 0 or index2 < 0 or index1 >= self.size or index2 >= self.size:
            return False
        if index1 == index2:
            return True

        a = self.nodeAt(index1)
        b = self.nodeAt(index2)
        a.value, b.value = b.value, a.value
        self.modCount += 1
        return True

    def countDigits(self):
        """
        Count how many times each digit in [0, base) occurs.

        Returns:
            np.ndarray: Array of length base where entry d is the count of digit d.
        """
        counts = np.zeros(self.base, dtype=np.int64)
        nodei = self.headNode
        while nodei is not None:
            counts[nodei.value] += 1
            nodei = nodei.nextNode
        return counts

    def rewriteFromCounts(self, counts, digitOrder):
        """
        Overwrite the digits along the existing chain from a histogram.

        Args:
            counts (np.ndarray): Digit histogram as returned by countDigits.
            digitOrder (iterable): The order in which digit values are written.
        """
        nodei = self.headNode
        for d in digitOrder:
            for _ in range(int(counts[d])):
                nodei.value = d
                nodei = nodei.nextNode
        self.modCount += 1

    def sortAscending(self):
        """
        Sort the digits from lowest to highest with a counting sort over [0, base).
        """
        if self.size <= 1:
            return
        self.rewriteFromCounts(self.countDigits(), range(self.base))

    def sortDescending(self):
        """
        Sort the digits from highest to lowest with a counting sort over [0, base).
        """
        if self.size <= 1:
            return
        self.rewriteFromCounts(self.countDigits(), range(self.base - 1, -1, -1))

    def shiftLeft(self):
        """
        Rotate the list one position to the left: the head node becomes the tail.
        """
        if self.size <= 1:
            return

        first = self.headNode
        self.headNode = first.nextNode
        self.headNode.prevNode = None

        first.nextNode = None
        first.prevNode = self.tailNode
        self.tailNode.nextNode = first
        self.tailNode = first

        self.modCount += 1

    def shiftRight(self):
        """
        Rotate the list one position to the right: the tail node becomes the head.
        """
        if self.size <= 1:
            return

        last = self.tailNode
        self.tailNode = last.prevNode
        self.tailNode.nextNode = None

        last.prevNode = None
        last.nextNode = self.headNode
        self.headNode.prevNode = last
        self.headNode = last

        self.modCount += 1

    def values(self):
        """
        Yield the digits from head to tail without comodification checks.
        """
        nodei = self.headNode
        while nodei is not None:
            yield nodei.value
            nodei = nodei.nextNode

    def __iter__(self):
        """
        Make the DigitList iterable.

        Returns:
            DigitListCursor: A cursor over the digits, most significant first.
        """
        return DigitListCursor(self, 0)

    def __len__(self):
        """
        Return the number of digits in the list.

        Returns:
            int: The size of the list.
        """
        return self.size

    def __contains__(self, digit):
        return self.contains(digit)

    def __eq__(self, other):
        if other is self:
            return True
        if isinstance(other, DigitList):
            if self.base != other.base or self.size != other.size:
                return False
            return all(a == b for a, b in zip(self.values(), other.values()))
        if isinstance(other, (list, tuple, np.ndarray)):
            if len(other) != self.size:
                return False
            for a, b in zip(self.values(), other):
                if isinstance(b, bool) or not isinstance(b, (int, np.integer)) or a != b:
                    return False
            return True
        return NotImplemented

    __hash__ = None

    def __str__(self):
        return RadixCodec.formatDigits(self.values())

    def __repr__(self):
        return f"{type(self).__name__}(base={self.base}, digits=\"{self}\")"
