from DigitList import DigitList
from NumberListConfig import NumberListConfig
import RadixCodec

import logging
import os


def hasFileHandler(logger: logging.Logger, logFile):
    """
    Determine whether a logger already writes to a given file.

    Args:
        logger (logging.Logger): The logger to inspect.
        logFile (str): Path to the log file.

    Returns:
        bool: True if one of the logger's handlers is a FileHandler for logFile.
    """
    path = os.path.abspath(os.fspath(logFile))
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == path:
            return True
    return False


class NumberList(DigitList):
    """
    A non-negative integer stored as a DigitList in a configured base.

    The configuration (a NumberListConfig) fixes the base of new lists, the base
    ChangeScale converts to, and the binary operation AdditionalOperation
    performs. Magnitude arithmetic is done on Python ints; the list is only ever
    the positional representation of the value.

    Malformed input never raises: an invalid decimal string or unreadable file
    leaves the list empty, and a division or modulo by zero produces an empty
    result.

    Attributes:
        config (NumberListConfig): The configuration this list was built with.
        logger (logging.Logger): Logger for parse, I/O and arithmetic diagnostics.
        (Also inherits all attributes from DigitList)
    """

    def __init__(
        self,
        value: str = None,
        base: int = None,
        config: NumberListConfig = None,
        logFile=None,
        logLevel=None,
        logger: logging.Logger = None,
    ):
        """
        Initialize a number list.

        Args:
            value (str, optional): A decimal number to load. If it is not a valid
                non-negative decimal the list stays empty. Defaults to None (empty list).
            base (int, optional): The numeral base. Defaults to config.base.
            config (NumberListConfig, optional): The configuration. Defaults to NumberListConfig().
            logFile (str, optional): Path to log file. Defaults to None.
            logLevel (int, optional): Logging level. If None, the shared logger keeps its current level. Defaults to None.
            logger (logging.Logger, optional): Custom logger. If None, creates new one. Defaults to None.
        """
        if config is None:
            config = NumberListConfig()
        self.config = config

        super().__init__(config.base if base is None else base)

        if logger is None:
            self.logger = logging.getLogger("NUMBER_LIST")
            if logLevel is not None:
                self.logger.setLevel(logLevel)

            if logFile is not None and not hasFileHandler(self.logger, logFile):
                file_handler = logging.FileHandler(logFile)
                if logLevel is not None:
                    file_handler.setLevel(logLevel)

                formatter = logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
                )
                file_handler.setFormatter(formatter)

                self.logger.addHandler(file_handler)
        else:
            self.logger = logger

        if value is not None:
            self.setDecimalString(value)

    def emptyLike(self):
        return NumberList(base=self.base, config=self.config, logger=self.logger)

    def setValue(self, value: int):
        """
        Replace the contents of the list with the digits of value in this list's base.

        Args:
            value (int): The new value. A negative value leaves the list empty.
        """
        self.clear()
        for d in RadixCodec.integerToDigits(value, self.base):
            self.linkLast(d)

    def setDecimalString(self, text: str):
        """
        Replace the contents of the list with a number given in decimal notation.

        Args:
            text (str): The decimal text. Surrounding whitespace is ignored.

        Returns:
            bool: True if text was a valid non-negative decimal. If it was not,
                  the list is left untouched.
        """
        value = RadixCodec.parseDecimalString(text)
        if value is None:
            self.logger.debug("Rejected decimal string %r", text)
            return False
        self.setValue(value)
        return True

    def toInteger(self):
        """
        Return the value of the list. An empty list is 0.
        """
        return RadixCodec.digitsToInteger(self.values(), self.base)

    def ToDecimalString(self):
        """
        Return the value of the list in decimal notation.

        Returns:
            str: The decimal representation. An empty list gives "0".
        """
        return str(self.toInteger())

    def ChangeScale(self):
        """
        Convert this number to the configured target base.

        Returns:
            NumberList: A new list in config.targetBase holding the same value.
                This list is not modified.
        """
        result = NumberList(base=self.config.targetBase, config=self.config, logger=self.logger)
        result.setValue(self.toInteger())
        self.logger.debug("Changed scale of %s from base %d to base %d: %s", self, self.base, result.base, result)
        return result

    def AdditionalOperation(self, arg):
        """
        Apply the configured binary operation to this number and arg.

        If arg is a DigitList it contributes its own value in its own base. Any
        other iterable is read as digits in this list's base; if one of those
        digits is invalid the operand is taken to be 0.

        Args:
            arg (DigitList or iterable): The right-hand operand.

        Returns:
            NumberList: A new list in this list's base holding the result. The
                list is empty if arg is None or the operation is undefined
                (division or modulo by zero). Neither operand is modified.
        """
        result = self.emptyLike()
        if arg is None:
            return result

        a = self.toInteger()
        if isinstance(arg, DigitList):
            b = RadixCodec.digitsToInteger(arg.values(), arg.base)
        else:
            b = RadixCodec.tryDigitsToInteger(arg, self.base)
            if b is None:
                self.logger.warning("Operand %r is not a valid digit sequence in base %d. Using 0 instead.", arg, self.base)
                b = 0

        r = self.config.operation.Apply(a, b)
        if r is None:
            self.logger.info("%s of %d by zero is undefined. Returning an empty list.", self.config.operation, a)
            return result

        self.logger.debug("%s(%d, %d) = %d", self.config.operation, a, b, r)
        result.setValue(r)
        return result

    def Save(self, fileName: str):
        """
        Write the value of the list in decimal as the sole content of a file.

        Any previous content is overwritten. A None fileName is ignored, and
        I/O failures are logged rather than raised.

        Args:
            fileName (str): The file to write.
        """
        if fileName is None:
            return
        try:
            with open(fileName, "w") as f:
                f.write(self.ToDecimalString())
        except OSError as e:
            self.logger.warning("Could not save number list to \"%s\": %s", fileName, e)

    @staticmethod
    def Load(
        fileName: str,
        config: NumberListConfig = None,
        logFile=None,
        logLevel=None,
        logger: logging.Logger = None,
    ):
        """
        Load a number list from the first line of a text file.

        The first line is stripped and parsed as a decimal number. Further lines
        are ignored. A missing, unreadable, empty or malformed file produces an
        empty list.

        Args:
            fileName (str): The file to read.
            config (NumberListConfig, optional): The configuration. Defaults to NumberListConfig().
            logFile (str, optional): Path to log file. Defaults to None.
            logLevel (int, optional): Logging level. If None, the shared logger keeps its current level. Defaults to None.
            logger (logging.Logger, optional): Custom logger. Defaults to None.

        Returns:
            NumberList: The loaded list.
        """
        result = NumberList(config=config, logFile=logFile, logLevel=logLevel, logger=logger)
        if fileName is None:
            return result

        try:
            with open(fileName, "r") as f:
                line = f.readline()
        except (OSError, UnicodeDecodeError) as e:
            result.logger.debug("Could not read number list from \"%s\": %s", fileName, e)
            return result

        result.setDecimalString(line.strip())
        return result
