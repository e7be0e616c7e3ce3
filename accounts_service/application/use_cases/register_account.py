import structlog

from ...domain.entities import Account, ALLOWED_ROLES, DEFAULT_ROLE
from ...domain.errors import AccountError, ConflictError, InternalError, ValidationError
from ..dto import AccountSummary, RegisterAccountInput

logger = structlog.get_logger(__name__)


class IAccountRepository:
    def find_by_email(self, email: str) -> Account | None: ...
    def insert(self, first_name: str | None, last_name: str | None, email: str | None,
               role: str | None = None, password_hash: str | None = None) -> int: ...
    def list_all(self) -> list[Account]: ...


class IPasswordHasher:
    def hash(self, plain: str) -> str: ...
    def verify(self, plain: str, hashed: str) -> bool: ...


def normalize_role(role: str | None) -> str:
    if not role:
        return DEFAULT_ROLE
    role = role.lower()
    if role not in ALLOWED_ROLES:
        raise ValidationError("invalid role", allowed_values=list(ALLOWED_ROLES))
    return role


class RegisterAccount:
    def __init__(self, repo: IAccountRepository, hasher: IPasswordHasher):
        self.repo = repo
        self.hasher = hasher

    def execute(self, candidate: RegisterAccountInput) -> AccountSummary:
        required = {
            "firstName": candidate.first_name,
            "lastName": candidate.last_name,
            "email": candidate.email,
            "password": candidate.password,
        }
        missing = [name for name, value in required.items() if not (value or "").strip()]
        if missing:
            raise ValidationError("missing required field", fields=missing)

        role = normalize_role(candidate.role)
        first_name = candidate.first_name
        last_name = candidate.last_name
        email = candidate.email

        try:
            # fast path only, the unique index on email is authoritative
            if self.repo.find_by_email(email) is not None:
                logger.info("registration_rejected", email=email, reason="email_taken")
                raise ConflictError("email already taken")

            pwd_hash = self.hasher.hash(candidate.password)
            account_id = self.repo.insert(first_name, last_name, email, role, pwd_hash)
        except AccountError:
            raise
        except Exception as e:
            logger.error("registration_failed", email=email, error=str(e))
            raise InternalError(str(e)) from e

        logger.info("account_registered", account_id=account_id, email=email, role=role)
        return AccountSummary(
            id=account_id,
            first_name=first_name,
            last_name=last_name,
            email=email,
            role=role,
        )
