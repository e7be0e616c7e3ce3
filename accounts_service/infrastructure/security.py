import hashlib
from base64 import b64encode

from passlib.context import CryptContext
from passlib.exc import PasswordSizeError
from passlib.registry import register_crypt_handler
from passlib.utils.binary import PADDED_BASE64_CHARS
from passlib.utils.handlers import StaticHandler

from ..domain.errors import ValidationError


class sha256_b64(StaticHandler):
    """Unsalted base64(SHA-256) digest, the format of existing stored hashes.

    Deterministic: the same password always yields the same hash. List a salted
    scheme (e.g. ``bcrypt_sha256``) ahead of it in ``PASSWORD_SCHEMES`` to
    hash new passwords with that scheme while old hashes keep verifying.
    """

    name = "sha256_b64"
    checksum_chars = PADDED_BASE64_CHARS
    checksum_size = 44

    def _calc_checksum(self, secret):
        if isinstance(secret, str):
            secret = secret.encode("utf-8")
        return b64encode(hashlib.sha256(secret).digest()).decode("ascii")


register_crypt_handler(sha256_b64, force=True)


def build_context(schemes: list[str]) -> CryptContext:
    return CryptContext(schemes=schemes, deprecated="auto")


class PasswordHasher:
    def __init__(self, schemes: list[str] | None = None):
        self.context = build_context(schemes or ["sha256_b64"])

    def hash(self, plain: str) -> str:
        try:
            return self.context.hash(plain)
        except PasswordSizeError as e:
            # passlib refuses secrets over MAX_PASSWORD_SIZE (4096 bytes)
            raise ValidationError("password too long", fields=["password"]) from e

    def verify(self, plain: str, hashed: str) -> bool:
        try:
            return self.context.verify(plain, hashed)
        except ValueError:
            # stored value is not a hash any configured scheme recognizes
            return False
