"""
Password hashing helpers.

Registration only stores hashes; `verify_password` is the check side of the
same CryptContext, kept next to `hash_password` so a stored hash can be
confirmed (the test suite does this after POST /api/users).
"""

from passlib.context import CryptContext

# pbkdf2_sha256 has no native backend requirement
PWD_CTX = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return PWD_CTX.hash(password)


def verify_password(password: str, digest: str) -> bool:
    return PWD_CTX.verify(password, digest)
