from __future__ import annotations

from functools import cached_property

from .exceptions import DivisionByZero, OutOfRange, PrimeMismatch


class FieldElement:
  """An element of the prime field of integers modulo prime"""

  def __init__(self, num, prime):
    if not 0 <= num < prime:
      raise OutOfRange(f"Num {num} not in field range 0 to {prime - 1}")
    self.num = num
    self.prime = prime

  def __hash__(self): return hash((self.num, self.prime))
  def __repr__(self): return f"FieldElement({self.num}, {self.prime})"
  def __str__(self): return f"FieldElement_{self.prime}({self.num})"

  def __eq__(self, other):
    # Note: if we return NotImplemented, Python does object comparison and returns False
    if not isinstance(other, FieldElement): raise TypeError(f"Cannot compare FieldElement with {other!r}")
    return self.num == other.num and self.prime == other.prime

  def _check(self, o: FieldElement, action: str):
    if self.prime != o.prime:
      raise PrimeMismatch(f"Cannot {action} two numbers in different Fields ({self} and {o})")

  def __add__(self, o: FieldElement) -> FieldElement:
    if not isinstance(o, FieldElement): return NotImplemented
    self._check(o, "add")
    # Both operands are below prime so the sum exceeds it by less than prime
    num = self.num + o.num
    return FieldElement(num - self.prime if num >= self.prime else num, self.prime)

  def __sub__(self, o: FieldElement) -> FieldElement:
    if not isinstance(o, FieldElement): return NotImplemented
    self._check(o, "subtract")
    if self.num < o.num:
      return FieldElement(self.prime + self.num - o.num, self.prime)
    return FieldElement(self.num - o.num, self.prime)

  def __neg__(self) -> FieldElement:
    return FieldElement(-self.num % self.prime, self.prime)

  def __mul__(self, o: FieldElement) -> FieldElement:
    if not isinstance(o, FieldElement): return NotImplemented
    self._check(o, "multiply")
    return FieldElement(self.num * o.num % self.prime, self.prime)

  def __truediv__(self, o: FieldElement) -> FieldElement:
    """Division mod prime, multiplying by the inverse a^(p-2) (Fermat's little theorem)"""
    if not isinstance(o, FieldElement): return NotImplemented
    self._check(o, "divide")
    if o.num == 0: raise DivisionByZero(f"Cannot divide {self} by zero")
    return self * o.pow(self.prime - 2)

  def __pow__(self, exponent) -> FieldElement:
    return self.pow(exponent)

  def pow(self, exponent) -> FieldElement:
    """
    Raise to an integer power.

    The exponent is first reduced modulo prime - 1 because a^(p-1) = 1, so a
    reduced exponent of zero gives one, even for a zero base. Negative exponents
    reduce the same way, which makes a**-1 the inverse.

    :raises DivisionByZero: on negative powers of zero
    """
    if exponent < 0 and self.num == 0:
      raise DivisionByZero(f"Cannot raise zero to negative power {exponent}")
    e = exponent % (self.prime - 1)
    return FieldElement(pow(self.num, e, self.prime), self.prime)

  @cached_property
  def inv(self) -> FieldElement:
    """Multiplicative inverse. Raises DivisionByZero on zero."""
    return FieldElement(1, self.prime) / self
