import math


class IEEEMath:
    """Numeric routines that answer with IEEE-754 specials instead of raising.

    Python's `math` module raises ValueError or OverflowError where
    floating point hardware would produce NaN or Infinity; Bella programs
    always get the IEEE result.
    """

    def sin(self, x: float) -> float:
        if math.isinf(x):
            return math.nan
        return math.sin(x)

    def cos(self, x: float) -> float:
        if math.isinf(x):
            return math.nan
        return math.cos(x)

    def sqrt(self, x: float) -> float:
        if x < 0:
            return math.nan
        return math.sqrt(x)

    def exp(self, x: float) -> float:
        try:
            return math.exp(x)
        except OverflowError:
            return math.inf

    def ln(self, x: float) -> float:
        if x == 0:
            return -math.inf
        if x < 0:
            return math.nan
        return math.log(x)

    def hypot(self, x: float, y: float) -> float:
        return math.hypot(x, y)

    def power(self, base: float, exponent: float) -> float:
        try:
            return math.pow(base, exponent)
        except OverflowError:
            if base < 0 and float(exponent).is_integer() and exponent % 2 == 1:
                return -math.inf
            return math.inf
        except ValueError:
            # 0 to a negative power, or a negative base to a fractional power
            if base == 0:
                if float(exponent).is_integer() and exponent % 2 == 1:
                    return math.copysign(math.inf, base)
                return math.inf
            return math.nan

    def divide(self, a: float, b: float) -> float:
        if b == 0:
            if a == 0 or math.isnan(a):
                return math.nan
            return math.copysign(math.inf, a) * math.copysign(1.0, b)
        return a / b

    def remainder(self, a: float, b: float) -> float:
        if b == 0 or math.isinf(a):
            return math.nan
        return math.fmod(a, b)
