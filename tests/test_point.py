import pytest

from primecurve import INFINITY, CurveMismatch, DivisionByZero, FieldElement, Infinity, NotOnCurve, Point

# Curve y2 = x3 + 7 over F223
prime = 223
a, b = FieldElement(0, prime), FieldElement(7, prime)


def fpoint(x, y):
  return Point(FieldElement(x, prime), FieldElement(y % prime, prime), a, b)


def naive_mul(P, k):
  Q = INFINITY
  for _ in range(k):
    Q = Q + P
  return Q


def test_new():
  Point(18, 77, 5, 7)
  Point(2, 5, 5, 7)
  Point(2, -5, 5, 7)
  fpoint(192, 105)
  fpoint(17, 56)

  with pytest.raises(NotOnCurve) as exc:
    Point(-1, -2, 5, 7)
  assert "not on the curve" in str(exc.value)

  with pytest.raises(NotOnCurve):
    fpoint(200, 119)


def test_eq():
  P = Point(18, 77, 5, 7)
  assert P == Point(18, 77, 5, 7)
  assert P != Point(2, 5, 5, 7)
  assert P != INFINITY
  assert INFINITY != P
  assert INFINITY == Infinity()
  assert len({P, Point(18, 77, 5, 7), INFINITY, Infinity()}) == 2

  with pytest.raises(TypeError):
    P == (18, 77)


def test_format():
  assert repr(Point(18, 77, 5, 7)) == "Point(18, 77)_5_7"
  assert repr(INFINITY) == "Point(infinity)"
  assert "FieldElement_223(192)" in repr(fpoint(192, 105))


def test_infinity():
  P = fpoint(192, 105)
  assert INFINITY.is_infinity
  assert not P.is_infinity
  assert P + INFINITY == P
  assert INFINITY + P == P
  assert INFINITY + INFINITY == INFINITY
  assert -INFINITY == INFINITY
  assert INFINITY * 5 == INFINITY

  with pytest.raises(ValueError) as exc:
    INFINITY.x
  assert "does not have coordinates" in str(exc.value)


def test_add_field():
  P0 = fpoint(192, 105)
  P1 = fpoint(17, 56)
  P2 = fpoint(170, 142)
  assert P0 != P1
  assert P0 + P1 == P2
  assert P1 + P0 == P2
  assert P2 - P1 == P0


def test_double_field():
  G = fpoint(47, 71)
  assert G + G == fpoint(36, 111)
  assert 2 * G == fpoint(36, 111)


def test_inverse():
  for x, y in [(192, 105), (17, 56), (47, 71)]:
    P = fpoint(x, y)
    assert P + fpoint(x, -y) == INFINITY
    assert P + -P == INFINITY
    assert P - P == INFINITY
  assert Point(2, 5, 5, 7) + Point(2, -5, 5, 7) == INFINITY


def test_vertical_tangent():
  # y = 0 so the tangent is vertical and the point is its own inverse
  P = Point(-1, 0, 0, 1)
  assert P + P == INFINITY
  assert P * 2 == INFINITY
  assert P * 3 == P


def test_associativity():
  P, Q, R = fpoint(192, 105), fpoint(17, 56), fpoint(47, 71)
  assert (P + Q) + R == P + (Q + R)
  assert (P + P) + Q == P + (P + Q)
  assert (P + Q) + (P + R) == (P + P) + (Q + R)


def test_curve_mismatch():
  with pytest.raises(CurveMismatch) as exc:
    Point(18, 77, 5, 7) + Point(-1, 0, 0, 1)
  assert "not on the same curve" in str(exc.value)

  # Same equation over a different field is a different curve
  p2 = 227
  Q = Point(FieldElement(0, p2), FieldElement(0, p2), FieldElement(1, p2), FieldElement(0, p2))
  with pytest.raises(CurveMismatch):
    fpoint(192, 105) + Q

  # Infinity belongs to every curve
  assert Q + INFINITY == Q


def test_mul_integers():
  P = Point(2, 5, 5, 7)
  assert P != Point(2, -5, 5, 7)
  assert P * 3 == Point(2, -5, 5, 7)
  assert 3 * P == Point(2, -5, 5, 7)
  assert P * 3 == naive_mul(P, 3)
  assert P * 1 == P
  assert P * 0 == INFINITY
  assert P * -4 == INFINITY


def test_mul_same_as_repeated_addition():
  for P in [fpoint(47, 71), fpoint(192, 105), fpoint(170, 142)]:
    Q = INFINITY
    for k in range(50):
      assert P * k == Q
      assert k * P == Q
      Q += P


def test_mul_order():
  G = fpoint(47, 71)
  # G generates a subgroup of order 21
  assert G * 21 == INFINITY
  assert G * 20 == -G
  assert G * 22 == G
  assert all(G * k != INFINITY for k in range(1, 21))


def test_mul_scalar_types():
  G = fpoint(47, 71)
  k = FieldElement(5, 21)
  assert G * k == G * 5
  assert k * G == G * 5

  with pytest.raises(TypeError):
    G * 2.0
  with pytest.raises(TypeError):
    G * G


def outcome(f):
  """Result repr, or the error name when the rounded slopes hit a zero denominator"""
  try:
    return repr(f())
  except DivisionByZero:
    return "DivisionByZero"


def test_mul_integers_same_as_repeated_addition():
  for x, y in [(18, 77), (-1, 1), (3, 7), (2, 5)]:
    P = Point(x, y, 5, 7)
    for k in range(1, 17):
      expected = outcome(lambda: naive_mul(P, k))
      assert outcome(lambda: P * k) == expected
      assert outcome(lambda: k * P) == expected


def test_slope_division_by_zero():
  # Rounded slopes over the integers leave the curve: (3, 7) + (-1, 1) = (-1, -3)
  P = Point(-1, 1, 5, 7)
  Q = Point(3, 7, 5, 7) + P
  assert (Q.x, Q.y) == (-1, -3)
  # Same x but neither the same nor the opposite y, so the chord is vertical
  with pytest.raises(DivisionByZero) as exc:
    Q + P
  assert "by zero" in str(exc.value)
  with pytest.raises(ZeroDivisionError):
    P + Q


def test_mixed_coordinate_types():
  p2 = 227
  Q = Point(FieldElement(0, p2), FieldElement(0, p2), FieldElement(1, p2), FieldElement(0, p2))
  with pytest.raises(CurveMismatch):
    Point(18, 77, 5, 7) + Q
  with pytest.raises(CurveMismatch):
    Q + Point(18, 77, 5, 7)
