from __future__ import annotations

from typing import Optional

from .exceptions import PrimeMismatch
from .field import FieldElement
from .point import INFINITY, Point


class Curve:
  """
  Domain parameters of a short Weierstrass curve y2 = x3 + a x + b over the
  prime field p, with base point G generating a subgroup of order n.

  Integer parameters are reduced mod p, so that e.g. a = -3 is accepted.

  :raises NotOnCurve: if the base point is not on the curve
  """

  infinity = INFINITY

  def __init__(self, p: int, a: int, b: int, gx: int, gy: int, n: int, name: Optional[str] = None):
    self.p = p
    self.n = n
    self.name = name
    self.a = self.fe(a)
    self.b = self.fe(b)
    self.G = self.point(gx, gy)

  def __repr__(self):
    return self.name or f"Curve(p={self.p}, a={self.a.num}, b={self.b.num}, n={self.n})"

  def fe(self, x) -> FieldElement:
    """Coordinate field element mod p"""
    if isinstance(x, FieldElement):
      if x.prime != self.p: raise PrimeMismatch(f"Coordinate {x} is not mod {self.p}")
      return x
    return FieldElement(x % self.p, self.p)

  def scalar(self, k) -> FieldElement:
    """Scalar field element mod n"""
    if isinstance(k, FieldElement):
      if k.prime != self.n: raise PrimeMismatch(f"Scalar {k} is not mod {self.n}")
      return k
    return FieldElement(k % self.n, self.n)

  def point(self, x, y) -> Point:
    """A validated point on this curve"""
    return Point(self.fe(x), self.fe(y), self.a, self.b)

  def contains(self, x, y) -> bool:
    """
    Test whether (x, y) satisfies the curve equation.

    :raises PrimeMismatch: for FieldElement coordinates of another field
    """
    x, y = self.fe(x), self.fe(y)
    return y * y == x * x * x + self.a * x + self.b


# Bitcoin curve (SEC 2)
secp256k1 = Curve(
  p=2**256 - 2**32 - 977,
  a=0,
  b=7,
  gx=0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
  gy=0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
  n=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
  name="secp256k1",
)
