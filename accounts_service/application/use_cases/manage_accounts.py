"""Administrative reads and writes outside the registration workflow."""
import structlog

from ...domain.errors import AccountError, InternalError, ValidationError
from ..dto import AccountSummary
from .register_account import IAccountRepository

logger = structlog.get_logger(__name__)


class ListAccounts:
    def __init__(self, repo: IAccountRepository):
        self.repo = repo

    def execute(self) -> list[AccountSummary]:
        try:
            accounts = self.repo.list_all()
        except AccountError:
            raise
        except Exception as e:
            raise InternalError(str(e)) from e
        return [AccountSummary.from_account(a) for a in accounts]


class AddAccount:
    """Insert an account row as given: no validation, no password."""

    def __init__(self, repo: IAccountRepository):
        self.repo = repo

    def execute(self, data: dict | None) -> int:
        if data is None:
            raise ValidationError("invalid account data")
        try:
            account_id = self.repo.insert(
                data.get("first_name"),
                data.get("last_name"),
                data.get("email"),
                data.get("role"),
            )
        except AccountError:
            raise
        except Exception as e:
            raise InternalError(str(e)) from e
        logger.info("account_added", account_id=account_id, email=data.get("email"))
        return account_id
