from dataclasses import dataclass

from ..domain.entities import Account


@dataclass
class RegisterAccountInput:
    first_name: str | None
    last_name: str | None
    email: str | None
    password: str | None
    role: str | None = None


@dataclass
class LoginInput:
    identifier: str | None
    secret: str | None


@dataclass
class AccountSummary:
    id: int | None
    first_name: str
    last_name: str
    email: str
    role: str

    @classmethod
    def from_account(cls, account: Account) -> "AccountSummary":
        return cls(
            id=account.id,
            first_name=account.first_name,
            last_name=account.last_name,
            email=account.email,
            role=account.role,
        )
