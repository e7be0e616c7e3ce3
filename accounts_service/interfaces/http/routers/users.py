from fastapi import APIRouter, Body, Depends

from ....application.dto import AccountSummary, LoginInput
from ....application.use_cases.login_account import LoginAccount
from ....application.use_cases.manage_accounts import AddAccount, ListAccounts
from ....config import Settings
from ....domain.errors import AccountError
from ....infrastructure.metrics import logins_total
from ....infrastructure.repositories import AccountRepository
from ....infrastructure.security import PasswordHasher
from ..deps import get_hasher, get_repository, get_settings
from ..schemas import AccountResp, AddAccountReq, LoginReq, MessageResp

router = APIRouter(prefix="/api/users", tags=["users"])

def _to_resp(summary: AccountSummary) -> AccountResp:
    return AccountResp(
        id=summary.id,
        first_name=summary.first_name,
        last_name=summary.last_name,
        email=summary.email,
        role=summary.role,
    )

@router.post("/login", response_model=AccountResp)
def login(
    payload: LoginReq | None = Body(default=None),
    repo: AccountRepository = Depends(get_repository),
    hasher: PasswordHasher = Depends(get_hasher),
    settings: Settings = Depends(get_settings),
):
    uc = LoginAccount(repo=repo, hasher=hasher, verify_password=settings.VERIFY_PASSWORD_ON_LOGIN)
    credentials = LoginInput(
        identifier=payload.user_name if payload else None,
        secret=payload.password if payload else None,
    )
    try:
        summary = uc.execute(credentials)
    except AccountError as e:
        logins_total.labels(outcome=type(e).__name__).inc()
        raise
    logins_total.labels(outcome="success").inc()
    return _to_resp(summary)

@router.get("", response_model=list[AccountResp])
def list_accounts(repo: AccountRepository = Depends(get_repository)):
    return [_to_resp(s) for s in ListAccounts(repo).execute()]

@router.post("", response_model=MessageResp)
def add_account(
    payload: AddAccountReq | None = Body(default=None),
    repo: AccountRepository = Depends(get_repository),
):
    AddAccount(repo).execute(payload.model_dump() if payload else None)
    return MessageResp(message="User added successfully.")
