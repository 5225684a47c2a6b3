"""Runtime values for Bella.

This module defines the value model used by the Bella interpreter. A Bella
value is one of:

* Number   -- a Python ``float``
* Boolean  -- a Python ``bool``
* Array    -- an `ArrayVal` holding a list of values
* Function -- a `NativeFunction` or a user-defined `Closure`

It also provides the type predicates used by the interpreter and the
canonical textual rendering written by ``print``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Tuple
import math

from .ast import Node
from .builtin_function import NativeFunction
from .environment import Environment


@dataclass(eq=False)
class ArrayVal:
    """Represents a Bella array value.

    Arrays are reference values: binding one to a second name or passing it
    to a function shares the same `items` list rather than copying it.
    """
    items: List[Any]

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return f"Array({self.items!r})"


@dataclass(eq=False)
class Closure:
    """A user-defined function together with the frame it was declared in."""
    name: str
    params: Tuple[str, ...]
    body: Node
    env: Environment

    @property
    def arity(self) -> int:
        return len(self.params)

    def __repr__(self) -> str:
        return f"<function {self.name}>"


def is_number(value: Any) -> bool:
    # bool is a subclass of int; booleans are never numbers in Bella
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float))


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_function(value: Any) -> bool:
    return isinstance(value, (NativeFunction, Closure))


def type_name(value: Any) -> str:
    """Return the Bella type name of a runtime value."""
    if isinstance(value, bool):
        return 'Boolean'
    if is_number(value):
        return 'Number'
    if isinstance(value, ArrayVal):
        return 'Array'
    if is_function(value):
        return 'Function'
    return type(value).__name__


def format_number(x: float) -> str:
    """Render a Number the way JavaScript's Number.prototype.toString does.

    The significant digits are the shortest round-trip digits from `repr`;
    positional notation is used for decimal exponents in (-7, 21) and
    exponential notation (`1e-7`, `1.5e+21`) outside it.
    """
    if math.isnan(x):
        return 'NaN'
    if math.isinf(x):
        return 'Infinity' if x > 0 else '-Infinity'
    if x == 0:
        return '0'
    sign = '-' if x < 0 else ''
    mantissa, _, exponent = repr(abs(float(x))).partition('e')
    whole, _, fraction = mantissa.partition('.')
    raw = whole + fraction
    digits = raw.lstrip('0')
    # value == 0.<digits> * 10 ** point
    point = len(whole) + int(exponent or 0) - (len(raw) - len(digits))
    digits = digits.rstrip('0')
    k = len(digits)
    if k <= point <= 21:
        return sign + digits + '0' * (point - k)
    if 0 < point <= 21:
        return sign + digits[:point] + '.' + digits[point:]
    if -6 < point <= 0:
        return sign + '0.' + '0' * -point + digits
    e = point - 1
    exp_text = ('e+' if e >= 0 else 'e-') + str(abs(e))
    if k == 1:
        return sign + digits + exp_text
    return sign + digits[0] + '.' + digits[1:] + exp_text


def to_string(value: Any) -> str:
    """Convert a Bella value to the text written by a print statement."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if is_number(value):
        return format_number(value)
    if isinstance(value, ArrayVal):
        return '[' + ', '.join(to_string(item) for item in value.items) + ']'
    if isinstance(value, NativeFunction):
        return f"<function {value.name}>"
    if isinstance(value, Closure):
        return repr(value)
    return str(value)
