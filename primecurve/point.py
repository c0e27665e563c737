from __future__ import annotations

from numbers import Integral

from .exceptions import CurveMismatch, DivisionByZero, NotOnCurve
from .field import FieldElement

# Short Weierstrass curve: y2 = x3 + a x + b
#
# Points are kept in affine coordinates of any type that supports + - * / and ==,
# FieldElement for cryptographic curves and plain int for toy curves over the
# integers. Every point carries its own curve constants a and b, and points are
# on the same curve when those compare equal.


def _div(n, d):
  """Coordinate division: field division, or floor division for plain integers"""
  if isinstance(n, Integral) and isinstance(d, Integral):
    if d == 0: raise DivisionByZero(f"Cannot divide {n} by zero")
    return n // d
  return n / d


class Point:
  def __init__(self, x, y, a, b):
    if y * y != x * x * x + a * x + b:
      raise NotOnCurve(f"Point ({x}, {y}) is not on the curve y^2 = x^3 + {a}x + {b}")
    self.x = x
    self.y = y
    self.a = a
    self.b = b

  @staticmethod
  def _unchecked(x, y, a, b) -> Point:
    """Results of the group law skip the curve equation check."""
    P = Point.__new__(Point)
    P.x, P.y, P.a, P.b = x, y, a, b
    return P

  @property
  def is_infinity(self) -> bool: return False

  def __repr__(self): return f"Point({self.x}, {self.y})_{self.a}_{self.b}"
  def __hash__(self): return hash((self.x, self.y, self.a, self.b))

  def __eq__(self, othr):
    if not isinstance(othr, Point): raise TypeError(f"Points cannot be compared with {type(othr)}")
    if othr.is_infinity: return False
    return self.x == othr.x and self.y == othr.y and self.a == othr.a and self.b == othr.b

  def __add__(self, othr: Point) -> Point:
    if not isinstance(othr, Point): return NotImplemented
    if othr.is_infinity: return self
    if type(self.a) is not type(othr.a) or self.a != othr.a or self.b != othr.b:
      raise CurveMismatch(f"Points {self} and {othr} are not on the same curve")
    x0, y0, x1, y1, a = self.x, self.y, othr.x, othr.y, self.a
    if x0 == x1:
      # P + (-P), including the vertical tangent where y = 0
      if y0 == -y1: return INFINITY
      if y0 == y1:
        # Tangent slope (3 x^2 + a) / 2y, constants by addition to stay within the coordinate type
        xx = x0 * x0
        s = _div(xx + xx + xx + a, y0 + y0)
        x2 = s * s - x0 - x0
        return Point._unchecked(x2, s * (x0 - x2) - y0, a, self.b)
    s = _div(y1 - y0, x1 - x0)
    x2 = s * s - x1 - x0
    return Point._unchecked(x2, s * (x0 - x2) - y0, a, self.b)

  def __sub__(self, othr: Point) -> Point:
    return self + -othr

  def __neg__(self) -> Point:
    return Point._unchecked(self.x, -self.y, self.a, self.b)

  def __mul__(self, s) -> Point:
    """Multiply the point by scalar, an integer or the num of a FieldElement."""
    if isinstance(s, FieldElement): s = s.num
    if not isinstance(s, Integral): return NotImplemented
    Q = INFINITY  # Neutral element
    if not self.is_infinity and isinstance(self.x, Integral):
      # Integer coordinates round the slopes, so only adding self s times in order gives the defined result
      for _ in range(s):
        Q = Q + self
      return Q
    P = self
    # Double-and-add, same result as adding self s times (nothing for s <= 0)
    while s > 0:
      if s & 1: Q += P
      s >>= 1
      if s: P += P
    return Q

  def __rmul__(self, s) -> Point:
    return self * s


def _no_coordinates(self):
  raise ValueError("Point at infinity does not have coordinates")


class Infinity(Point):
  """The point at infinity, neutral element of the group"""
  x = y = a = b = property(_no_coordinates)

  def __init__(self):
    pass

  @property
  def is_infinity(self) -> bool: return True

  def __repr__(self): return "Point(infinity)"
  def __hash__(self): return hash(Infinity)

  def __eq__(self, othr):
    if not isinstance(othr, Point): raise TypeError(f"Points cannot be compared with {type(othr)}")
    return othr.is_infinity

  def __add__(self, othr: Point) -> Point:
    if not isinstance(othr, Point): return NotImplemented
    return othr

  def __neg__(self) -> Point:
    return self


INFINITY = Infinity()
