"""Password hashing with argon2 and an application-wide pepper."""

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError

from mediashelf.config import get_settings


class PepperedPasswordHasher:
    """
    Hashes ``password + pepper`` with pwdlib's recommended argon2 settings.

    ``get_dummy_hash`` returns a real hash so that login against an unknown
    user costs the same as a wrong password.
    """

    def __init__(self, pepper: str = "") -> None:
        self._pepper = pepper
        self._hasher = PasswordHash.recommended()
        self._dummy_hash = self._hasher.hash("no-such-user" + pepper)

    @classmethod
    def from_settings(cls) -> "PepperedPasswordHasher":
        return cls(pepper=get_settings().PASSWORD_PEPPER)

    def hash_password(self, plain_password: str) -> str:
        return self._hasher.hash(plain_password + self._pepper)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return self._hasher.verify(plain_password + self._pepper, hashed_password)
        except UnknownHashError:
            return False

    def get_dummy_hash(self) -> str:
        return self._dummy_hash
