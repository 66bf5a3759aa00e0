import bcrypt

from survey_backend.core import config

BCRYPT_MAX_PASSWORD_BYTES = 72


def _encode(plaintext: str) -> bytes:
    # bcrypt only reads the first 72 bytes; newer releases raise instead of ignoring the rest.
    return plaintext.encode('utf-8')[:BCRYPT_MAX_PASSWORD_BYTES]


class PasswordHasher:
    """bcrypt hashing with a fresh salt per call."""

    def __init__(self, rounds: int | None = None) -> None:
        self.rounds = rounds or config.PASSWORD_HASH_ROUNDS

    def hash(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_encode(plaintext), salt).decode('utf-8')

    def verify(self, plaintext: str, hashed: str | None) -> bool:
        if not plaintext or not hashed:
            return False

        try:
            return bcrypt.checkpw(_encode(plaintext), hashed.encode('utf-8'))
        except ValueError:
            # Malformed hash.
            return False


def get_password_hasher() -> PasswordHasher:
    return PasswordHasher()
