import structlog

from ...domain.errors import AccountError, AuthError, InternalError, ValidationError
from ..dto import AccountSummary, LoginInput
from .register_account import IAccountRepository, IPasswordHasher

logger = structlog.get_logger(__name__)


class LoginAccount:
    """Resolve an account by email and return its public profile.

    Unless ``verify_password`` is set, the supplied secret is NOT checked
    against the stored hash: any password logs into a known email. This keeps
    existing clients working and is a known authentication bypass; enable
    verification (``VERIFY_PASSWORD_ON_LOGIN``) to close it.
    """

    def __init__(self, repo: IAccountRepository, hasher: IPasswordHasher,
                 verify_password: bool = False):
        self.repo = repo
        self.hasher = hasher
        self.verify_password = verify_password

    def execute(self, credentials: LoginInput) -> AccountSummary:
        if not credentials.identifier or not credentials.secret:
            raise ValidationError("missing credentials")

        try:
            account = self.repo.find_by_email(credentials.identifier)
            if account is None:
                logger.info("login_rejected", email=credentials.identifier, reason="unknown_email")
                raise AuthError("invalid credentials")

            if self.verify_password and not (
                account.password_hash
                and self.hasher.verify(credentials.secret, account.password_hash)
            ):
                logger.info("login_rejected", email=credentials.identifier, reason="bad_password")
                raise AuthError("invalid credentials")
        except AccountError:
            raise
        except Exception as e:
            logger.error("login_failed", email=credentials.identifier, error=str(e))
            raise InternalError(str(e)) from e

        logger.info("login_succeeded", account_id=account.id, verified=self.verify_password)
        return AccountSummary.from_account(account)
