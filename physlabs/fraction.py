"""Integer fractions reduced by their greatest common divisor."""

from __future__ import annotations

import math


class Fraction:
    """A fraction n/d, kept divided by gcd(n, d) after arithmetic.

    The sign of the denominator is left as given: 2/-3 stays 2/-3.
    """

    __hash__ = None  # mutable through the in-place operators

    def __init__(self, n, d):
        self.n = int(n)
        self.d = int(d)
        self._normalize()

    def gcd(self):
        """Greatest common divisor of numerator and denominator."""
        return math.gcd(self.n, self.d)

    def _normalize(self):
        factor = self.gcd()
        if factor == 0:
            raise ZeroDivisionError("fraction 0/0 is undefined")
        self.n //= factor
        self.d //= factor

    def __iadd__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        self.n = self.n * other.d + other.n * self.d
        self.d = self.d * other.d
        self._normalize()
        return self

    def __imul__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        self.n *= other.n
        self.d *= other.d
        self._normalize()
        return self

    def __itruediv__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        self.n *= other.d
        self.d *= other.n
        self._normalize()
        return self

    def _copy(self):
        clone = Fraction.__new__(Fraction)
        clone.n = self.n
        clone.d = self.d
        return clone

    def __add__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        result = self._copy()
        result += other
        return result

    def __mul__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        result = self._copy()
        result *= other
        return result

    def __eq__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.n * other.d == other.n * self.d

    def decimal(self):
        """The fraction as a float; a zero denominator gives an infinity."""
        if self.d == 0:
            return math.copysign(math.inf, self.n)
        return self.n / self.d

    def invert(self):
        """Swap numerator and denominator in place."""
        self.n, self.d = self.d, self.n

    def __str__(self):
        return f"{self.n}/{self.d}"

    def __repr__(self):
        return f"Fraction({self.n}, {self.d})"


def main(argv=None):
    """Print a short demonstration of fraction arithmetic."""
    f = Fraction(2, 3)
    print("This should be 2/3:")
    print(f)

    f2 = Fraction(2, -3)
    print("This should be -2/3:")
    print(f2)

    f.invert()
    print("This should be 3/2:")
    print(f)

    print("In decimal 3/2 is :")
    print(f"{f.decimal():g}")
    print("------------")

    b = Fraction(12, 4)
    print("This should be 3/1:")
    print(b)

    b2 = Fraction(-4, 12)
    print("This should be -1/3:")
    print(b2)

    b2 /= b
    print("This should be -1/9:")
    print(b2)
    print("------------")

    a = Fraction(1, 2)
    c = Fraction(1, 4)
    res = a * c
    print("This should be 1/8:")
    print(res)

    res = a + c
    print("This should be 3/4:")
    print(res)

    print("------------")
    print(f"This is a test of the ostream << operator: {res}")
    return 0