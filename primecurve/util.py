import hashlib
import secrets


def toint(b: bytes) -> int:
  return int.from_bytes(b, "big")

def sha(s: bytes) -> int:
  """Return SHA-256 as 256 bit integer"""
  return toint(hashlib.sha256(s).digest())

def hash_to_scalar(data: bytes, n: int) -> int:
  """Hash bytes into a scalar mod n (message digest z, or a secret from a passphrase)"""
  return sha(data) % n

def random_scalar(n: int) -> int:
  """Uniformly random scalar in range 1 to n - 1, suitable as an ephemeral nonce."""
  return 1 + secrets.randbelow(n - 1)
