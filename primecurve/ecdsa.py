from typing import Callable, NamedTuple, Optional

from . import util
from .curves import Curve
from .exceptions import SignatureError
from .point import Point

# ECDSA-style signatures in the subgroup of prime order n generated by G:
#   r = (k * G).x mod n
#   s = (z + r * e) / k mod n
# with message hash z, secret scalar e and ephemeral nonce k. The inverse of k
# is k^(n-2) by Fermat's little theorem, so n must be prime.

# Hashing and nonce generation are done by the caller supplied functions, with
# util.hash_to_scalar and util.random_scalar used by default. Nonces are never
# derived deterministically here.


class Signature(NamedTuple):
  r: int
  s: int


def secret_scalar(curve: Curve, secret: bytes) -> int:
  """Hash secret bytes into a non-zero secret scalar."""
  e = util.hash_to_scalar(secret, curve.n)
  if e == 0: raise SignatureError("Secret hashes to zero, choose another")
  return e

def public_key(curve: Curve, e) -> Point:
  """Public point e * G of a secret scalar"""
  e = curve.scalar(e)
  if e.num == 0: raise SignatureError("Secret scalar must be non-zero")
  return curve.G * e

def sign(curve: Curve, z, e, k) -> Signature:
  """
  Sign the hash z with secret scalar e and nonce k, all scalars mod n.

  :raises SignatureError: if k is zero or the signature degenerates (sign again with another k)
  """
  z, e, k = curve.scalar(z), curve.scalar(e), curve.scalar(k)
  if k.num == 0: raise SignatureError("Nonce must be non-zero")
  r = curve.scalar((curve.G * k).x.num)
  s = (z + r * e) * k.pow(curve.n - 2)
  if r.num == 0 or s.num == 0:
    raise SignatureError("Degenerate signature, sign again with another nonce")
  return Signature(r.num, s.num)

def sign_message(
  curve: Curve,
  message: bytes,
  e,
  hasher: Optional[Callable[[bytes, int], int]] = None,
  nonce: Optional[Callable[[int], int]] = None,
) -> Signature:
  """Hash the message and draw a random nonce, then sign."""
  z = (hasher or util.hash_to_scalar)(message, curve.n)
  k = (nonce or util.random_scalar)(curve.n)
  return sign(curve, z, e, k)

def verify(curve: Curve, Q: Point, z, signature) -> None:
  """
  Verify a signature of hash z by public point Q.

  :raises SignatureError: if the signature is invalid
  """
  r, s = signature
  if not 0 < r < curve.n:
    raise SignatureError("Invalid r value on signature")
  if not 0 < s < curve.n:
    raise SignatureError("Invalid s value on signature")
  if Q.is_infinity:
    raise SignatureError("Invalid public key provided")
  w = curve.scalar(s).inv
  # Finally we confirm that ((z + r * e) / s) * G == k * G
  X = curve.G * (curve.scalar(z) * w) + Q * (curve.scalar(r) * w)
  if X.is_infinity or X.x.num % curve.n != r:
    raise SignatureError("Signature mismatch")

def verify_message(
  curve: Curve,
  Q: Point,
  message: bytes,
  signature,
  hasher: Optional[Callable[[bytes, int], int]] = None,
) -> None:
  """Hash the message and verify its signature."""
  verify(curve, Q, (hasher or util.hash_to_scalar)(message, curve.n), signature)
