from fastapi import APIRouter, Depends

from ....application.dto import RegisterAccountInput
from ....application.use_cases.register_account import RegisterAccount
from ....domain.errors import AccountError
from ....infrastructure.metrics import registrations_total
from ....infrastructure.repositories import AccountRepository
from ....infrastructure.security import PasswordHasher
from ..deps import get_hasher, get_repository
from ..schemas import RegisterReq, RegisterResp, RegisteredUser

router = APIRouter(prefix="/api/auth", tags=["auth"])

@router.post("/register", response_model=RegisterResp)
def register(
    payload: RegisterReq,
    repo: AccountRepository = Depends(get_repository),
    hasher: PasswordHasher = Depends(get_hasher),
):
    uc = RegisterAccount(repo=repo, hasher=hasher)
    try:
        summary = uc.execute(RegisterAccountInput(
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=payload.email,
            password=payload.password,
            role=payload.role,
        ))
    except AccountError as e:
        registrations_total.labels(outcome=type(e).__name__).inc()
        raise
    registrations_total.labels(outcome="success").inc()
    return RegisterResp(
        message="User registered successfully",
        user=RegisteredUser(
            first_name=summary.first_name,
            last_name=summary.last_name,
            email=summary.email,
            role=summary.role,
        ),
    )
