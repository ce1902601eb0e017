"""
Salted password hashing (PBKDF2-SHA256)
"""
import hashlib
import hmac
import secrets

from doordont.core.constants import (
    PASSWORD_HASH_ALGORITHM,
    PASSWORD_HASH_ITERATIONS,
    PASSWORD_SALT_BYTES
)


def generate_salt() -> str:
    return secrets.token_hex(PASSWORD_SALT_BYTES)


def hash_password(password: str, salt: str) -> str:
    digest = hashlib.pbkdf2_hmac(
        PASSWORD_HASH_ALGORITHM,
        password.encode("utf-8"),
        salt.encode("utf-8"),
        PASSWORD_HASH_ITERATIONS
    )
    return digest.hex()


def verify_password(password: str, salt: str, password_hash: str) -> bool:
    return hmac.compare_digest(hash_password(password, salt), password_hash)
