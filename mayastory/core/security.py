"""Password hashing and credential validation limits."""

import bcrypt

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
DEFAULT_BCRYPT_ROUNDS = 12

# Inclusive length limits for registration.
USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 13
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 50

# bcrypt only reads the first 72 bytes of input.
BCRYPT_MAX_BYTES = 72


def hash_password(plain_password: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password for storage with a fresh salt. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash (constant-time compare inside bcrypt)."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False
