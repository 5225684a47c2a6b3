"""Runtime errors raised by the Bella interpreter.

Every error is fatal: Bella has no construct for catching them, so they
propagate unchanged up to whoever called `Interpreter.run`.
"""


class BellaError(Exception):
    """Base class for Bella runtime errors."""
    kind = 'BellaError'

    def __init__(self, message: str):
        super().__init__(f"{self.kind}: {message}")
        self.message = message


class RedeclarationError(BellaError):
    kind = 'RedeclarationError'


class UnboundVariableError(BellaError):
    kind = 'UnboundVariableError'


class BellaTypeError(BellaError):
    """A value of the wrong variant reached an operator or construct."""
    kind = 'TypeError'


class UnknownOperatorError(BellaError):
    kind = 'UnknownOperatorError'


class NotCallableError(BellaError):
    kind = 'NotCallableError'


class ArityMismatchError(BellaError):
    kind = 'ArityMismatchError'


class IndexOutOfRangeError(BellaError):
    kind = 'IndexOutOfRangeError'
