"""Password hashing with bcrypt."""

from passlib.context import CryptContext

# bcrypt only reads this many bytes of the password
MAX_PASSWORD_BYTES = 72


def password_too_long(plain: str) -> bool:
    return len(plain.encode("utf-8")) > MAX_PASSWORD_BYTES


class PasswordHasher:
    """Salted one-way hashing of plaintext passwords."""

    def __init__(self, rounds: int = 10):
        self._ctx = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, plain: str) -> str:
        if password_too_long(plain):
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return self._ctx.hash(plain)

    def verify(self, plain: str, hashed: str) -> bool:
        # Anything bcrypt would truncate can never match a stored hash
        if password_too_long(plain):
            return False
        # Unrecognised or corrupted hashes count as a mismatch
        try:
            return self._ctx.verify(plain, hashed)
        except ValueError:
            return False
