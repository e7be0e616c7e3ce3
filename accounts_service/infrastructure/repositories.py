import structlog
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from .metrics import db_queries_total
from .models import AccountORM
from ..domain.entities import Account
from ..domain.errors import ConflictError, DatastoreError
from ..application.use_cases.register_account import IAccountRepository

logger = structlog.get_logger(__name__)

def to_domain(a: AccountORM) -> Account:
    return Account(
        id=a.id,
        first_name=a.first_name,
        last_name=a.last_name,
        email=a.email,
        role=a.role,
        password_hash=a.password_hash,
    )

class AccountRepository(IAccountRepository):
    def __init__(self, db: Session): self.db = db

    def find_by_email(self, email: str) -> Account | None:
        db_queries_total.inc()
        try:
            row = self.db.query(AccountORM).filter(AccountORM.email == email).first()
        except SQLAlchemyError as e:
            raise self._datastore_error("find_by_email", e) from e
        return to_domain(row) if row else None

    def insert(self, first_name, last_name, email, role=None, password_hash=None) -> int:
        fields = {
            "first_name": first_name,
            "last_name": last_name,
            "email": email,
            "role": role,
            "password_hash": password_hash,
        }
        # unset columns fall back to their defaults
        row = AccountORM(**{k: v for k, v in fields.items() if v is not None})
        db_queries_total.inc()
        try:
            self.db.add(row); self.db.commit(); self.db.refresh(row)
        except IntegrityError as e:
            self.db.rollback()
            if email is not None and self.find_by_email(email) is not None:
                logger.info("insert_conflict", email=email)
                raise ConflictError("email already taken") from e
            raise self._datastore_error("insert", e) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise self._datastore_error("insert", e) from e
        return row.id

    def list_all(self) -> list[Account]:
        db_queries_total.inc()
        try:
            rows = self.db.query(AccountORM).order_by(AccountORM.id).all()
        except SQLAlchemyError as e:
            raise self._datastore_error("list_all", e) from e
        return [to_domain(r) for r in rows]

    @staticmethod
    def _datastore_error(operation: str, exc: SQLAlchemyError) -> DatastoreError:
        # driver message only, no SQL text or bound parameters
        details = str(getattr(exc, "orig", None) or exc.__class__.__name__)
        logger.error("datastore_error", operation=operation, details=details)
        return DatastoreError(details)
