"""Password hashing with bcrypt."""

import bcrypt

MIN_COST = 4
MAX_COST = 31
DEFAULT_COST = 10
MAX_PASSWORD_BYTES = 72


def _to_bytes(value):
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


class BcryptUtil:
    """Generates and checks bcrypt password hashes."""

    def generate_from_password(self, password, cost):
        """Return the bcrypt hash of ``password`` at the given cost.

        A cost below the minimum falls back to the default cost.
        """
        secret_bytes = _to_bytes(password)
        if len(secret_bytes) > MAX_PASSWORD_BYTES:
            raise ValueError("bcrypt: password length exceeds 72 bytes")
        if cost < MIN_COST:
            cost = DEFAULT_COST
        if cost > MAX_COST:
            raise ValueError(
                f"crypto/bcrypt: cost {cost} is outside allowed range "
                f"({MIN_COST},{MAX_COST})"
            )
        salt = bcrypt.gensalt(rounds=cost, prefix=b"2a")
        return bcrypt.hashpw(secret_bytes, salt)

    def compare_hash_and_password(self, hashed_password, password):
        """Raise ``ValueError`` unless ``hashed_password`` is the hash of ``password``."""
        if not bcrypt.checkpw(_to_bytes(password), _to_bytes(hashed_password)):
            raise ValueError(
                "crypto/bcrypt: hashedPassword is not the hash of the given password"
            )