from __future__ import annotations

from typing import Optional


class PiError(Exception):
    """ Base class for all pilang errors"""

    def __init__(self, message: str, line: Optional[int] = None):
        self.message = message
        self.line = line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message}, line: {self.line}"


class PiLexError(PiError):
    """ Raised when no token pattern matches the remaining source text"""

    def __init__(self, remaining: str):
        self.remaining = remaining
        super().__init__(f"unexpected character: {remaining}")


class PiParseError(PiError):
    """ Raised for unbalanced brackets or tokens outside a list"""


class PiUndefinedIdentifier(PiError):
    """ Raised when a name is looked up before it is bound"""

    def __init__(self, name: str, line: Optional[int] = None):
        self.name = name
        super().__init__(f"undefined identifier: {name}", line)


class PiNotAFunction(PiError):
    """ Raised when `call` is applied to something that is not a function"""


class PiUnknownCommand(PiError):
    """ Raised when a list's operator is not one of the special forms"""

    def __init__(self, command: str, line: Optional[int] = None):
        self.command = command
        super().__init__(f"unknown command: {command}", line)


class PiArithmeticError(PiError):
    """ Raised on division or modulo by zero"""


class PiIndexError(PiError):
    """ Raised on out-of-range list access or slicing"""


class PiFileError(PiError):
    """ Raised when a program or imported module cannot be read"""


class PiTypeMismatch(PiError):
    """ Raised when an operand has the wrong kind of value (or no value at all)"""


class PiFormError(PiError):
    """ Raised when a special form has the wrong shape or number of arguments"""
