# Prime field and elliptic curve arithmetic in plain Python
#
# Generic over the numeric type: field elements hold int (or any integer-like
# type with the same operators) and points hold FieldElement coordinates for
# cryptographic curves or plain int for toy curves.
#
# Not constant time and not hardened against side channels. Use a proper
# library such as OpenSSL (via cryptography) for keys that matter.

# Public symbols are imported here. Lower case constants are curves, upper case are points.

__version__ = "0.1.0"

from .curves import Curve, secp256k1
from .ecdsa import Signature, public_key, secret_scalar, sign, sign_message, verify, verify_message
from .exceptions import (
  ArithmeticDomainError, CurveMismatch, DivisionByZero, NotOnCurve, OutOfRange, PrimeMismatch, SignatureError
)
from .field import FieldElement
from .point import INFINITY, Infinity, Point
from .util import hash_to_scalar, random_scalar, sha, toint
