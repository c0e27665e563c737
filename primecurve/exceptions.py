class ArithmeticDomainError(ValueError):
  """Operands or results outside of the field or curve they belong to"""

class OutOfRange(ArithmeticDomainError):
  """Field element value is not in range 0 to prime - 1"""

class PrimeMismatch(ArithmeticDomainError):
  """Field elements of different primes cannot be combined"""

class CurveMismatch(ArithmeticDomainError):
  """Points on different curves cannot be combined"""

class NotOnCurve(ArithmeticDomainError):
  """Coordinates do not satisfy the curve equation"""

class DivisionByZero(ArithmeticDomainError, ZeroDivisionError):
  """Zero has no multiplicative inverse"""

class SignatureError(ArithmeticDomainError):
  """Signature could not be created or did not verify"""
